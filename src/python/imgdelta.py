#!/usr/bin/env python3
"""
ntfsclone Image Deltas

Create and apply compact deltas between two special image files written
by ``ntfsclone --save-image``.  Both images describe the same device at
different times; the delta keeps only the clusters that changed, so the
newer image can be rebuilt from the older one.

An image is a fixed header followed by one command per cluster:
  SKIP  cluster unused (run-length compressed)
  DATA  cluster in use, cluster_size payload bytes follow

A delta has the same shape under its own magic, plus one more command:
  DROP  cluster in use in the old image, unused in the new one
        (run-length compressed)

Images of format 10.1 append the backup boot sector as one extra DATA
element after the last regular cluster; 10.0 images do not.  Inputs of
either format may be mixed.

Everything is done in a single sequential pass holding at most one
cluster per stream, so images of any size can be piped through.

Usage:
  python imgdelta.py delta  OLD [NEW [DELTA]]
  python imgdelta.py patch  OLD [DELTA [NEW]]
  python imgdelta.py info   FILE
"""

import argparse
import io
import os
import stat
import struct
import sys
import time
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import BinaryIO, Iterator, List, Optional, Tuple, Union


# ============================================================================
# Errors
# ============================================================================

class ImageDeltaError(Exception):
    """Base class for all image and delta stream errors."""


class FormatError(ImageDeltaError):
    """Stream lacks the expected magic, or its header is malformed."""


class VersionError(ImageDeltaError):
    """Image format version is not supported."""


class MismatchError(ImageDeltaError):
    """The two inputs do not describe the same device geometry."""


class FramingError(ImageDeltaError):
    """Invalid command element in the cluster stream."""


class ResidualDataError(ImageDeltaError):
    """An input still holds clusters after the last one was processed."""


class TruncatedStreamError(ImageDeltaError, OSError):
    """Stream ended inside a header or command element."""


# ============================================================================
# Cluster Commands
# ============================================================================

CMD_SKIP = 0
CMD_DATA = 1
CMD_DROP = 2


@dataclass(frozen=True)
class SkipCmd:
    """Run of `count` unused clusters."""
    count: int = 1

    def __repr__(self):
        return f"SKIP({self.count})"


@dataclass(frozen=True)
class DataCmd:
    """One in-use cluster with its payload."""
    data: bytes

    def __repr__(self):
        if len(self.data) <= 20:
            return f"DATA({self.data!r})"
        return f"DATA(len={len(self.data)})"


@dataclass(frozen=True)
class DropCmd:
    """Run of `count` clusters that are in use in the old image only."""
    count: int = 1

    def __repr__(self):
        return f"DROP({self.count})"


Command = Union[SkipCmd, DataCmd, DropCmd]

# Single-cluster decisions handed out by ClusterReader.read_cluster()
SKIP = SkipCmd()
DROP = DropCmd()

_CMD_CODES = {SkipCmd: CMD_SKIP, DataCmd: CMD_DATA, DropCmd: CMD_DROP}
_CMD_NAMES = {SkipCmd: 'skip', DataCmd: 'data', DropCmd: 'drop'}


# ============================================================================
# Stream Header
#
#   Magic:        16 bytes  b'\0ntfsclone-image' or b'\0ntfsclone-delta'
#   Major:         1 byte   must be 10
#   Minor:         1 byte   0 = old format, 1 = backup boot sector appended
#   Cluster size:  4 bytes  uint32 LE, <= 65536
#   Device size:   8 bytes  int64 LE
#   Clusters:      8 bytes  int64 LE
#   In use:        8 bytes  int64 LE
#   Data offset:   4 bytes  uint32 LE, from byte 0 to the first command
#   Extra:         Data offset - 50 opaque bytes, copied verbatim
#
# Commands:
#   SKIP: code=0, repeat:s64 LE                      (9 bytes)
#   DATA: code=1, payload                            (1 + cluster_size bytes)
#   DROP: code=2, repeat:s64 LE                      (9 bytes, deltas only)
# ============================================================================

IMAGE_MAGIC = b'\0ntfsclone-image'
DELTA_MAGIC = b'\0ntfsclone-delta'
MAGIC_SIZE = 16

IMG_VER_MAJOR = 10
IMG_VER_MINOR_OLD = 0
IMG_VER_MINOR_NEW = 1
MAX_CLUSTER_SIZE = 65536

HEADER_FIXED = struct.Struct('<16sBBIqqq')  # everything before the data offset
HEADER_OFFSET = struct.Struct('<I')
HEADER_SIZE = HEADER_FIXED.size + HEADER_OFFSET.size  # 50
REPEAT = struct.Struct('<q')

_MAGIC_NAMES = {IMAGE_MAGIC: 'image', DELTA_MAGIC: 'delta'}


@dataclass(frozen=True)
class ImageHeader:
    """Decoded stream header; `extra` holds the opaque bytes up to the data."""
    magic: bytes
    major_ver: int
    minor_ver: int
    cluster_size: int
    device_size: int
    nr_clusters: int
    inuse: int
    extra: bytes = b''

    @property
    def offset_to_image_data(self) -> int:
        return HEADER_SIZE + len(self.extra)

    @property
    def has_backup_boot_sector(self) -> bool:
        """True if one extra DATA element follows the last regular cluster."""
        return self.minor_ver == IMG_VER_MINOR_NEW

    @property
    def kind(self) -> str:
        return _MAGIC_NAMES.get(self.magic, 'unknown')

    def pack(self) -> bytes:
        return (HEADER_FIXED.pack(self.magic, self.major_ver, self.minor_ver,
                                  self.cluster_size, self.device_size,
                                  self.nr_clusters, self.inuse)
                + HEADER_OFFSET.pack(self.offset_to_image_data)
                + self.extra)


def read_header(f: BinaryIO, magic: Optional[bytes] = IMAGE_MAGIC) -> ImageHeader:
    """Read and validate a stream header, leaving `f` at the first command.

    With magic=None either an image or a delta header is accepted.
    """
    (got_magic, major, minor, cluster_size, device_size,
     nr_clusters, inuse) = HEADER_FIXED.unpack(_read_exact(f, HEADER_FIXED.size))

    if magic is None:
        if got_magic not in _MAGIC_NAMES:
            raise FormatError("input is neither an ntfsclone image nor a delta")
    elif got_magic != magic:
        raise FormatError(f"input doesn't have the expected magic header field "
                          f"(not an ntfsclone {_MAGIC_NAMES.get(magic, 'stream')})")
    if major != IMG_VER_MAJOR or minor not in (IMG_VER_MINOR_OLD, IMG_VER_MINOR_NEW):
        raise VersionError(f"image version {major}.{minor} not supported")

    offset, = HEADER_OFFSET.unpack(_read_exact(f, HEADER_OFFSET.size))
    if offset < HEADER_SIZE:
        raise FormatError(f"image data offset {offset} lies inside the "
                          f"{HEADER_SIZE}-byte header")
    if not 0 < cluster_size <= MAX_CLUSTER_SIZE:
        raise FormatError(f"cluster size {cluster_size} out of range "
                          f"(1..{MAX_CLUSTER_SIZE})")
    if nr_clusters < 0:
        raise FormatError(f"negative cluster count {nr_clusters}")

    extra = _read_exact(f, offset - HEADER_SIZE)
    return ImageHeader(magic=got_magic, major_ver=major, minor_ver=minor,
                       cluster_size=cluster_size, device_size=device_size,
                       nr_clusters=nr_clusters, inuse=inuse, extra=extra)


def write_header(f: BinaryIO, magic: bytes, ref: ImageHeader) -> ImageHeader:
    """Write `ref` under a new magic; all other fields are copied unchanged."""
    header = replace(ref, magic=magic)
    _write_all(f, header.pack())
    return header


def reconcile_headers(a: ImageHeader, b: ImageHeader) -> None:
    """Raise MismatchError unless both headers describe the same device.

    Version fields and the in-use count may differ between snapshots; `inuse`
    is deliberately exempt since it changes whenever the device is written.
    Extra header bytes are compared only when the first header has any.
    """
    for field in ('cluster_size', 'device_size', 'nr_clusters'):
        va, vb = getattr(a, field), getattr(b, field)
        if va != vb:
            raise MismatchError(f"input images do not have identical headers "
                                f"({field} {va} != {vb})")
    if a.extra and a.extra != b.extra:
        raise MismatchError("input images do not have identical headers "
                            "(extra header data differs)")


# ============================================================================
# Byte I/O
# ============================================================================

def _read_exact(f: BinaryIO, n: int, eof_ok: bool = False) -> bytes:
    """Read exactly n bytes, retrying short and would-block reads.

    With eof_ok, a stream that ends before the first byte returns b''.
    """
    parts = []
    remaining = n
    while remaining > 0:
        chunk = f.read(remaining)
        # Non-blocking source with nothing ready: retry at once, busy-waiting
        # until data arrives.
        if chunk is None:
            continue
        if not chunk:
            if eof_ok and remaining == n:
                return b''
            raise TruncatedStreamError(
                f"read: unexpected end of file ({n - remaining} of {n} bytes)")
        parts.append(chunk)
        remaining -= len(chunk)
    if len(parts) == 1:
        return bytes(parts[0])
    return b''.join(parts)


def _write_all(f: BinaryIO, data: bytes) -> None:
    """Write all of data, retrying partial and would-block writes."""
    view = memoryview(data)
    while view:
        try:
            n = f.write(view)
        except BlockingIOError as e:
            n = e.characters_written
        # A sink that takes nothing is retried at once (busy-wait).
        view = view[n or 0:]


# ============================================================================
# Cluster Stream Codec
# ============================================================================

class ClusterReader:
    """Sequential decoder for the commands following a stream header.

    Owns the read cursor: the run being expanded and how many of its
    clusters are still to come.  The byte source is only ever read forward.
    """

    def __init__(self, f: BinaryIO, header: ImageHeader):
        self.f = f
        self.header = header
        self.cluster_size = header.cluster_size
        self.remaining = 0
        self._run: Command = SKIP

    def read_command(self, allow_drop: bool = False,
                     eof_ok: bool = False) -> Optional[Command]:
        """Read one framed element.

        Returns None at a clean end of stream when eof_ok is set.
        """
        byte = _read_exact(self.f, 1, eof_ok=eof_ok)
        if not byte:
            return None
        code = byte[0]
        if code == CMD_DATA:
            return DataCmd(_read_exact(self.f, self.cluster_size))
        if code == CMD_SKIP or (code == CMD_DROP and allow_drop):
            count, = REPEAT.unpack(_read_exact(self.f, REPEAT.size))
            if count == 0:
                raise FramingError("zero repeat length after command code in image")
            if count < 0:
                raise FramingError(f"negative repeat length {count} after command code")
            return SkipCmd(count) if code == CMD_SKIP else DropCmd(count)
        if code == CMD_DROP:
            raise FramingError("DROP command code in an image stream")
        raise FramingError(f"invalid command code {code:#04x} in image")

    def read_cluster(self, allow_drop: bool = False) -> Command:
        """Decode the next cluster: SKIP, DROP, or a DataCmd with its payload."""
        if self.remaining > 0:
            self.remaining -= 1
            return self._run
        cmd = self.read_command(allow_drop)
        if isinstance(cmd, DataCmd):
            return cmd
        self._run = SKIP if isinstance(cmd, SkipCmd) else DROP
        self.remaining = cmd.count - 1
        return self._run

    def commands(self, allow_drop: bool = True) -> Iterator[Command]:
        """Yield the remaining framed elements until the stream ends."""
        while True:
            cmd = self.read_command(allow_drop, eof_ok=True)
            if cmd is None:
                return
            yield cmd


class ClusterWriter:
    """Sequential encoder for the commands following a stream header.

    SKIP and DROP clusters accumulate into a pending run that is written
    when a different command arrives or on flush().  DATA is written
    immediately, one element per cluster.
    """

    def __init__(self, f: BinaryIO, cluster_size: int):
        self.f = f
        self.cluster_size = cluster_size
        self.commands_written = 0
        self.bytes_written = 0
        self.clusters = {'skip': 0, 'data': 0, 'drop': 0}
        self._run = None
        self._count = 0

    def write(self, cmd: Command) -> None:
        if isinstance(cmd, DataCmd):
            if len(cmd.data) != self.cluster_size:
                raise ValueError(f"cluster payload is {len(cmd.data)} bytes, "
                                 f"expected {self.cluster_size}")
            self.flush()
            self._emit(bytes((CMD_DATA,)))
            self._emit(cmd.data)
            self.commands_written += 1
            self.clusters['data'] += 1
            return

        if cmd.count < 1:
            raise ValueError(f"repeat count must be positive, got {cmd.count}")
        kind = type(cmd)
        if self._run is not kind:
            self.flush()
            self._run = kind
        self._count += cmd.count
        self.clusters[_CMD_NAMES[kind]] += cmd.count

    def flush(self) -> None:
        """Write out the pending SKIP/DROP run, if any."""
        if self._run is None:
            return
        self._emit(bytes((_CMD_CODES[self._run],)) + REPEAT.pack(self._count))
        self.commands_written += 1
        self._run = None
        self._count = 0

    def _emit(self, data: bytes) -> None:
        _write_all(self.f, data)
        self.bytes_written += len(data)

    def summary(self) -> dict:
        return {
            'clusters': sum(self.clusters.values()),
            'skip_clusters': self.clusters['skip'],
            'drop_clusters': self.clusters['drop'],
            'data_clusters': self.clusters['data'],
            'num_commands': self.commands_written,
            'command_bytes': self.bytes_written,
        }


# ── whole-stream helpers ─────────────────────────────────────────────────

def encode_stream(header: ImageHeader, commands: List[Command]) -> bytes:
    """Encode a header and commands to bytes.

    Adjacent SKIP (or DROP) commands are merged into a single run.
    """
    out = io.BytesIO()
    write_header(out, header.magic, header)
    writer = ClusterWriter(out, header.cluster_size)
    for cmd in commands:
        writer.write(cmd)
    writer.flush()
    return out.getvalue()


def decode_stream(data: bytes) -> Tuple[ImageHeader, List[Command]]:
    """Decode an image or delta held in memory into (header, framed commands)."""
    f = io.BytesIO(data)
    header = read_header(f, magic=None)
    reader = ClusterReader(f, header)
    return header, list(reader.commands(allow_drop=header.magic == DELTA_MAGIC))


def stream_summary(f: BinaryIO) -> dict:
    """Scan an image or delta once and count its commands and clusters."""
    header = read_header(f, magic=None)
    reader = ClusterReader(f, header)
    stats = {'header': header, 'num_commands': 0,
             'skip_commands': 0, 'skip_clusters': 0,
             'drop_commands': 0, 'drop_clusters': 0,
             'data_clusters': 0}
    for cmd in reader.commands(allow_drop=header.magic == DELTA_MAGIC):
        stats['num_commands'] += 1
        if isinstance(cmd, DataCmd):
            stats['data_clusters'] += 1
        else:
            name = _CMD_NAMES[type(cmd)]
            stats[f'{name}_commands'] += 1
            stats[f'{name}_clusters'] += cmd.count
    stats['clusters'] = (stats['skip_clusters'] + stats['drop_clusters']
                         + stats['data_clusters'])
    return stats


# ============================================================================
# Delta Creation and Patch Application
#
# Both walk two inputs in lockstep, one cluster at a time, and write one
# output cluster per step:
#
#   delta(old, new)                      patch(old, delta)
#   old   new   -> delta                 old   delta -> new
#   SKIP  SKIP     SKIP                  any   DROP     SKIP
#   DATA  DATA=    SKIP                  SKIP  SKIP     SKIP
#   DATA  SKIP     DROP                  DATA  SKIP     DATA (old)
#   any   DATA     DATA (new)            any   DATA     DATA (delta)
#
# The backup boot sector of 10.1 images is compared like any other cluster
# when both inputs carry it.  Otherwise it is dropped when only the old
# side has it, and passed through as DATA when only the second input does.
# ============================================================================

def _open_streams(first: BinaryIO, first_magic: bytes,
                  second: BinaryIO, second_magic: bytes,
                  out: BinaryIO, out_magic: bytes):
    """Validate both input headers and write the output header.

    The output header is the second input's, under `out_magic`.
    """
    h1 = read_header(first, first_magic)
    h2 = read_header(second, second_magic)
    reconcile_headers(h1, h2)
    write_header(out, out_magic, h2)
    return (ClusterReader(first, h1), ClusterReader(second, h2),
            ClusterWriter(out, h2.cluster_size))


def _loop_count(base: ClusterReader, target: ClusterReader) -> int:
    count = base.header.nr_clusters
    if base.header.has_backup_boot_sector and target.header.has_backup_boot_sector:
        count += 1
    return count


def _resolve_trailing(base: ClusterReader, target: ClusterReader,
                      out: ClusterWriter) -> None:
    """Handle a backup boot sector present in only one of the inputs."""
    base_bbs = base.header.has_backup_boot_sector
    target_bbs = target.header.has_backup_boot_sector
    if base_bbs and not target_bbs:
        base.read_cluster()
    elif target_bbs and not base_bbs:
        cmd = target.read_cluster()
        if not isinstance(cmd, DataCmd):
            raise FramingError("backup boot sector is not stored as a DATA element")
        out.write(cmd)


def _finish(first: ClusterReader, second: ClusterReader, out: ClusterWriter,
            names: Tuple[str, str]) -> None:
    for reader, name in zip((first, second), names):
        if reader.remaining > 0:
            raise ResidualDataError(f"{name} has {reader.remaining} remaining "
                                    f"unused clusters at the end")
    out.flush()


def create_delta(old: BinaryIO, new: BinaryIO, out: BinaryIO) -> dict:
    """Write to `out` a delta that turns image `old` into image `new`.

    Returns summary statistics for the written delta.
    """
    old_r, new_r, delta_w = _open_streams(old, IMAGE_MAGIC, new, IMAGE_MAGIC,
                                          out, DELTA_MAGIC)

    for _ in range(_loop_count(old_r, new_r)):
        o = old_r.read_cluster()
        n = new_r.read_cluster()
        if isinstance(n, SkipCmd):
            delta_w.write(SKIP if isinstance(o, SkipCmd) else DROP)
        elif isinstance(o, DataCmd) and o.data == n.data:
            delta_w.write(SKIP)
        else:
            delta_w.write(n)

    _resolve_trailing(old_r, new_r, delta_w)
    _finish(old_r, new_r, delta_w, ('old image', 'new image'))
    return delta_w.summary()


def apply_patch(old: BinaryIO, delta: BinaryIO, out: BinaryIO) -> dict:
    """Rebuild the new image from image `old` and `delta`, writing it to `out`.

    Returns summary statistics for the written image.
    """
    old_r, delta_r, new_w = _open_streams(old, IMAGE_MAGIC, delta, DELTA_MAGIC,
                                          out, IMAGE_MAGIC)

    for _ in range(_loop_count(old_r, delta_r)):
        o = old_r.read_cluster()
        d = delta_r.read_cluster(allow_drop=True)
        if isinstance(d, DropCmd):
            new_w.write(SKIP)
        elif isinstance(d, SkipCmd):
            new_w.write(o)
        else:
            new_w.write(d)

    _resolve_trailing(old_r, delta_r, new_w)
    _finish(old_r, delta_r, new_w, ('old image', 'delta'))
    return new_w.summary()


# ── in-memory wrappers ───────────────────────────────────────────────────

def create_delta_bytes(old: bytes, new: bytes) -> bytes:
    """Delta between two images held in memory."""
    out = io.BytesIO()
    create_delta(io.BytesIO(old), io.BytesIO(new), out)
    return out.getvalue()


def apply_patch_bytes(old: bytes, delta: bytes) -> bytes:
    """Rebuild the new image from an old image and a delta held in memory."""
    out = io.BytesIO()
    apply_patch(io.BytesIO(old), io.BytesIO(delta), out)
    return out.getvalue()


# ============================================================================
# File I/O helpers
# ============================================================================

@contextmanager
def open_input(path):
    """Open `path` for reading; '-' yields stdin, which is left open."""
    if path == '-':
        yield sys.stdin.buffer
    else:
        with open(path, 'rb') as f:
            yield f


@contextmanager
def open_output(path):
    """Open `path` for writing; '-' yields stdout, which is left open.

    The stream is flushed on success, and fsync'ed if it is a regular file.
    """
    if path == '-':
        f = sys.stdout.buffer
        yield f
        _sync(f)
    else:
        with open(path, 'wb') as f:
            yield f
            _sync(f)


def _sync(f) -> None:
    f.flush()
    fd = f.fileno()
    if stat.S_ISREG(os.fstat(fd).st_mode):
        os.fsync(fd)


# ============================================================================
# CLI
# ============================================================================

def _check_inputs(first: str, second: str) -> None:
    if first == '-' and second == '-':
        raise SystemExit("error: you cannot select stdin for both input files")


def _print_run_stats(label: str, path: str, stats: dict, elapsed: float) -> None:
    """Summary of a delta/patch run; stderr, as stdout may carry the stream."""
    err = sys.stderr
    print(f"{label + ':':<14}{path} ({stats['command_bytes']:,} bytes after header)",
          file=err)
    print(f"Clusters:     {stats['clusters']:,} "
          f"({stats['skip_clusters']:,} skip, {stats['drop_clusters']:,} drop, "
          f"{stats['data_clusters']:,} data)", file=err)
    print(f"Commands:     {stats['num_commands']:,}", file=err)
    print(f"Time:         {elapsed:.3f}s", file=err)


def cmd_delta(args):
    _check_inputs(args.old, args.new)
    t0 = time.time()
    with open_input(args.old) as old, open_input(args.new) as new, \
            open_output(args.delta) as out:
        stats = create_delta(old, new, out)
    if args.verbose:
        _print_run_stats('Delta', args.delta, stats, time.time() - t0)


def cmd_patch(args):
    _check_inputs(args.old, args.delta)
    t0 = time.time()
    with open_input(args.old) as old, open_input(args.delta) as delta, \
            open_output(args.new) as out:
        stats = apply_patch(old, delta, out)
    if args.verbose:
        _print_run_stats('New image', args.new, stats, time.time() - t0)


def cmd_info(args):
    with open_input(args.file) as f:
        stats = stream_summary(f)

    hdr = stats['header']
    expected = hdr.nr_clusters + (1 if hdr.has_backup_boot_sector else 0)
    bbs = "yes" if hdr.has_backup_boot_sector else "no"
    print(f"File:         {args.file}")
    print(f"Type:         ntfsclone {hdr.kind}")
    print(f"Version:      {hdr.major_ver}.{hdr.minor_ver} (backup boot sector: {bbs})")
    print(f"Cluster size: {hdr.cluster_size:,} bytes")
    print(f"Device size:  {hdr.device_size:,} bytes")
    print(f"Clusters:     {hdr.nr_clusters:,} ({hdr.inuse:,} in use)")
    print(f"Data offset:  {hdr.offset_to_image_data} "
          f"({len(hdr.extra)} extra header bytes)")
    print(f"Commands:     {stats['num_commands']:,}")
    print(f"  Skip:       {stats['skip_commands']:,} "
          f"({stats['skip_clusters']:,} clusters)")
    if hdr.magic == DELTA_MAGIC:
        print(f"  Drop:       {stats['drop_commands']:,} "
              f"({stats['drop_clusters']:,} clusters)")
    print(f"  Data:       {stats['data_clusters']:,}")
    print(f"Stream:       {stats['clusters']:,} of {expected:,} clusters")


def main(argv=None):
    ap = argparse.ArgumentParser(
        prog='imgdelta',
        description='Create and apply deltas between ntfsclone image files')
    sub = ap.add_subparsers(dest='command')

    # delta
    dlt = sub.add_parser('delta', help='Compute delta between two images')
    dlt.add_argument('old', help="Old image file ('-' for stdin)")
    dlt.add_argument('new', nargs='?', default='-',
                     help="New image file (default: stdin)")
    dlt.add_argument('delta', nargs='?', default='-',
                     help="Output delta file (default: stdout)")
    dlt.add_argument('-v', '--verbose', action='store_true',
                     help='Print a summary to stderr')
    dlt.set_defaults(func=cmd_delta)

    # patch
    pat = sub.add_parser('patch', help='Rebuild new image from old image and delta')
    pat.add_argument('old', help="Old image file ('-' for stdin)")
    pat.add_argument('delta', nargs='?', default='-',
                     help="Delta file (default: stdin)")
    pat.add_argument('new', nargs='?', default='-',
                     help="Output image file (default: stdout)")
    pat.add_argument('-v', '--verbose', action='store_true',
                     help='Print a summary to stderr')
    pat.set_defaults(func=cmd_patch)

    # info
    inf = sub.add_parser('info', help='Show image or delta statistics')
    inf.add_argument('file', help="Image or delta file ('-' for stdin)")
    inf.set_defaults(func=cmd_info)

    args = ap.parse_args(argv)
    if args.command is None:
        ap.print_help()
        sys.exit(1)
    try:
        args.func(args)
    except ImageDeltaError as e:
        raise SystemExit(f"error: {e}")
    except OSError as e:
        raise SystemExit(f"error: {e}")


# ============================================================================

if __name__ == '__main__':
    main()
