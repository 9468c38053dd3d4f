#!/usr/bin/env python3
"""
Generate an old/new pair of ntfsclone images with a controlled share of
changed clusters.

Arguments:
  num_clusters     Number of clusters on the synthetic device
  cluster_size     Cluster size in bytes (<= 65536)
  change_pct       Percent of clusters that differ between the images, 0–100
  [old_path]       Old image output file  (default: old.img)
  [new_path]       New image output file  (default: new.img)

Options:
  --used PCT       Percent of clusters in use in the old image (default: 60)
  --old-minor N    Format minor version of the old image, 0 or 1 (default: 1)
  --new-minor N    Format minor version of the new image, 0 or 1 (default: 1)
  --seed N         Random seed (default: 42)

Both images are written one cluster at a time, so the device may be far
larger than memory.

Requires the imgdelta module: install the package (pip install -e .) or
put src/python on PYTHONPATH.

Usage:
  PYTHONPATH=src/python python tests/gen_images.py 100000 4096 5
  python gen_images.py 100000 4096 5
  python gen_images.py 2000 512 30 a.img b.img --old-minor 0
"""

import argparse
import random
import sys

from imgdelta import (
    IMAGE_MAGIC, IMG_VER_MAJOR, MAX_CLUSTER_SIZE,
    SKIP, DataCmd, ImageHeader, ClusterWriter, write_header,
)

# ntfsclone 10.1 images pad the header to 56 bytes.
_EXTRA = b'\0' * 6


def _cluster(rng, size):
    return rng.randbytes(size)


def _gen_states(rng, n, used, change):
    """Yield (old, new) in-use flags plus whether the payload changes."""
    for _ in range(n):
        old_used = rng.random() < used
        if rng.random() < change:
            # Freed, newly allocated, or rewritten in place.
            if old_used and rng.random() < 0.3:
                yield True, False, False
            else:
                yield old_used, True, True
        else:
            yield old_used, old_used, False


def _header(args, minor, inuse):
    return ImageHeader(magic=IMAGE_MAGIC, major_ver=IMG_VER_MAJOR,
                       minor_ver=minor, cluster_size=args.cluster_size,
                       device_size=args.num_clusters * args.cluster_size,
                       nr_clusters=args.num_clusters, inuse=inuse,
                       extra=_EXTRA)


def generate(args):
    used = args.used / 100
    change = args.change_pct / 100
    size = args.cluster_size

    # The in-use counts are only known after a first pass over the states,
    # so the states are replayed from a second generator with the same seed.
    old_inuse = new_inuse = 0
    for o, n, _ in _gen_states(random.Random(args.seed), args.num_clusters,
                               used, change):
        old_inuse += o
        new_inuse += n

    states = _gen_states(random.Random(args.seed), args.num_clusters, used, change)
    payload_rng = random.Random(args.seed + 1)

    with open(args.old_path, 'wb') as fo, open(args.new_path, 'wb') as fn:
        write_header(fo, IMAGE_MAGIC, _header(args, args.old_minor, old_inuse))
        write_header(fn, IMAGE_MAGIC, _header(args, args.new_minor, new_inuse))
        old_w = ClusterWriter(fo, size)
        new_w = ClusterWriter(fn, size)

        for old_used, new_used, rewritten in states:
            data = DataCmd(_cluster(payload_rng, size)) if old_used else None
            old_w.write(data if old_used else SKIP)
            if not new_used:
                new_w.write(SKIP)
            elif rewritten:
                new_w.write(DataCmd(_cluster(payload_rng, size)))
            else:
                new_w.write(data)

        if args.old_minor == 1:
            old_w.write(DataCmd(_cluster(payload_rng, size)))
        if args.new_minor == 1:
            new_w.write(DataCmd(_cluster(payload_rng, size)))
        old_w.flush()
        new_w.flush()

    return old_w.summary(), new_w.summary()


def main():
    ap = argparse.ArgumentParser(description=__doc__.split('\n\n')[1])
    ap.add_argument('num_clusters', type=int)
    ap.add_argument('cluster_size', type=int)
    ap.add_argument('change_pct', type=float)
    ap.add_argument('old_path', nargs='?', default='old.img')
    ap.add_argument('new_path', nargs='?', default='new.img')
    ap.add_argument('--used', type=float, default=60.0)
    ap.add_argument('--old-minor', type=int, choices=[0, 1], default=1)
    ap.add_argument('--new-minor', type=int, choices=[0, 1], default=1)
    ap.add_argument('--seed', type=int, default=42)
    args = ap.parse_args()

    if not 0 < args.cluster_size <= MAX_CLUSTER_SIZE:
        sys.exit(f"error: cluster_size must be in 1..{MAX_CLUSTER_SIZE}")
    if not 0 <= args.change_pct <= 100 or not 0 <= args.used <= 100:
        sys.exit("error: percentages must be in 0..100")

    old_stats, new_stats = generate(args)
    for path, stats in ((args.old_path, old_stats), (args.new_path, new_stats)):
        print(f"{path}: {stats['clusters']:,} clusters, "
              f"{stats['data_clusters']:,} data elements, "
              f"{stats['command_bytes']:,} bytes after header")


if __name__ == '__main__':
    main()
