"""Replace each element of an array by its rank among the distinct values."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator


def array_rank_transform(arr: Iterable[int]) -> list[int]:
    """Return the rank of each element; equal values share a rank starting at 1."""
    values = list(arr)
    ranks = {value: rank for rank, value in enumerate(sorted(set(values)), start=1)}
    return [ranks[value] for value in values]


def _leading_ints(tokens: Iterable[str]) -> list[int]:
    numbers = []
    for token in tokens:
        try:
            numbers.append(int(token))
        except ValueError:
            break
    return numbers


def _first_line_numbers(lines: Iterator[str]) -> list[int]:
    for line in lines:
        tokens = line.split()
        if tokens:
            return _leading_ints(tokens)
    return []


def main(argv: list[str] | None = None) -> int:
    """Read integers from the first line of stdin and print their ranks."""
    parser = argparse.ArgumentParser(
        prog="rank-transform",
        description="Print the rank of each integer read from the first input line.",
    )
    parser.parse_args(argv)
    ranks = array_rank_transform(_first_line_numbers(iter(sys.stdin)))
    print("".join(f"{rank} " for rank in ranks))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())