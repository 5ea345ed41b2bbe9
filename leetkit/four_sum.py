"""Unique quadruplets of numbers that add up to a target."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator


def four_sum(nums: Iterable[int], target: int) -> list[list[int]]:
    """Return the distinct sorted quadruplets summing to target, in ascending order."""
    ordered = sorted(nums)
    n = len(ordered)
    result: list[list[int]] = []
    if n < 4:
        return result

    for i in range(n - 3):
        if i > 0 and ordered[i] == ordered[i - 1]:
            continue
        for j in range(i + 1, n - 2):
            if j > i + 1 and ordered[j] == ordered[j - 1]:
                continue
            left, right = j + 1, n - 1
            while left < right:
                total = ordered[i] + ordered[j] + ordered[left] + ordered[right]
                if total == target:
                    result.append([ordered[i], ordered[j], ordered[left], ordered[right]])
                    while left < right and ordered[left] == ordered[left + 1]:
                        left += 1
                    while left < right and ordered[right] == ordered[right - 1]:
                        right -= 1
                    left += 1
                    right -= 1
                elif total < target:
                    left += 1
                else:
                    right -= 1
    return result


def _leading_ints(tokens: Iterable[str]) -> list[int]:
    numbers = []
    for token in tokens:
        try:
            numbers.append(int(token))
        except ValueError:
            break
    return numbers


def _read_problem(lines: Iterator[str]) -> tuple[int, list[int]] | None:
    """Target is the first token; the numbers are the rest of the line holding the first number."""
    token_lines = (tokens for tokens in (line.split() for line in lines) if tokens)
    first = next(token_lines, None)
    if first is None:
        return None
    try:
        target = int(first[0])
    except ValueError:
        return None
    rest = first[1:]
    if not rest:
        rest = next(token_lines, [])
    return target, _leading_ints(rest)


def main(argv: list[str] | None = None) -> int:
    """Read a target and numbers from stdin and print each quadruplet on a line."""
    parser = argparse.ArgumentParser(
        prog="four-sum",
        description="Print the unique quadruplets that sum to the target.",
    )
    parser.parse_args(argv)
    problem = _read_problem(iter(sys.stdin))
    if problem is None:
        return 0
    target, nums = problem
    for quad in four_sum(nums, target):
        print("".join(f"{num} " for num in quad))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())