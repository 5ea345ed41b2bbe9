"""All letter strings a phone keypad digit sequence could spell."""

from __future__ import annotations

import argparse
import sys
from itertools import product

_KEYPAD = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}


def letter_combinations(digits: str) -> list[str]:
    """Return every combination in keypad order; a key without letters yields none."""
    if not digits:
        return []
    groups = [_KEYPAD.get(digit, "") for digit in digits]
    return ["".join(combo) for combo in product(*groups)]


def main(argv: list[str] | None = None) -> int:
    """Read a digit string from stdin and print its combinations as a list."""
    parser = argparse.ArgumentParser(
        prog="letter-combinations",
        description="Print the letter combinations of a phone number.",
    )
    parser.parse_args(argv)
    tokens = sys.stdin.read().split()
    digits = tokens[0] if tokens else ""
    combos = letter_combinations(digits)
    sys.stdout.write("[" + ",".join(f'"{combo}"' for combo in combos) + "]")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())