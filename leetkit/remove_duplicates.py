"""Compact a sorted list so its distinct values come first."""

from __future__ import annotations

import argparse
import sys
from itertools import groupby


def remove_duplicates(nums: list[int]) -> int:
    """Move the distinct values of sorted nums to its front and return their count.

    Elements past the returned count are left as they were.
    """
    unique = [value for value, _ in groupby(nums)]
    nums[: len(unique)] = unique
    return len(unique)


def _leading_ints(tokens: list[str]) -> list[int]:
    numbers = []
    for token in tokens:
        try:
            numbers.append(int(token))
        except ValueError:
            break
    return numbers


def main(argv: list[str] | None = None) -> int:
    """For each stdin line of sorted integers, print its distinct values."""
    parser = argparse.ArgumentParser(
        prog="remove-duplicates",
        description="Print the distinct values of each line of sorted integers.",
    )
    parser.parse_args(argv)
    for line in sys.stdin:
        nums = _leading_ints(line.split())
        length = remove_duplicates(nums)
        print("".join(f"{value} " for value in nums[:length]))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())