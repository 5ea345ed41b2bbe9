"""Find where a target sits, or would be inserted, in a sorted list."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return an index of target in sorted nums, or the index where it would go."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return left


def _leading_ints(tokens: list[str]) -> list[int]:
    numbers = []
    for token in tokens:
        try:
            numbers.append(int(token))
        except ValueError:
            break
    return numbers


def main(argv: list[str] | None = None) -> int:
    """For each stdin line, treat the last integer as the target and print its position."""
    parser = argparse.ArgumentParser(
        prog="search-insert",
        description="Print the insert position of the last integer of each line among the others.",
    )
    parser.parse_args(argv)
    for line in sys.stdin:
        numbers = _leading_ints(line.split())
        if not numbers:
            continue
        *nums, target = numbers
        print(search_insert(nums, target))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())