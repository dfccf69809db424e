"""Approximate a normal distribution from sums of coin flips and draw it as text."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Optional, Sequence

FLIPS = 12
BUCKETS = 2 * FLIPS + 1


def sample(rng: Optional[random.Random] = None) -> int:
    """Sum of 12 steps of -1 (draw 0..49) or +1 (draw 50..99)."""
    rng = rng if rng is not None else random.Random()
    return sum(-1 if rng.randrange(100) <= 49 else 1 for _ in range(FLIPS))


def collect(n: int, rng: Optional[random.Random] = None) -> list[int]:
    """Draw ``n`` samples and count them in 25 buckets for values -12..12."""
    rng = rng if rng is not None else random.Random()
    counts = [0] * BUCKETS
    for _ in range(n):
        counts[sample(rng) + FLIPS] += 1
    return counts


def format_histogram(counts: Sequence[int]) -> str:
    """Render one line per bucket as ``value: ***``."""
    if len(counts) != BUCKETS:
        raise ValueError(f"expected {BUCKETS} buckets, got {len(counts)}")
    return "".join(f"{i - FLIPS}: {'*' * count}\n" for i, count in enumerate(counts))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Draw a histogram of summed coin flips.")
    parser.add_argument("n", type=int, nargs="?", help="number of samples (read from stdin if absent)")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    n = args.n
    if n is None:
        tokens = sys.stdin.read().split()
        if not tokens:
            parser.error("no sample count given")
        n = int(tokens[0])

    print(format_histogram(collect(n, random.Random(args.seed))), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())