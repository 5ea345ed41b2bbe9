"""Locate the first occurrence of one string in another."""

from __future__ import annotations

import argparse
import sys


def str_str(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of needle, 0 if it is empty, else -1."""
    if not needle:
        return 0
    return haystack.find(needle)


def main(argv: list[str] | None = None) -> int:
    """Read haystack and needle pairs from stdin and print each index."""
    parser = argparse.ArgumentParser(
        prog="str-str",
        description="Print where each needle first occurs in its haystack.",
    )
    parser.parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    for haystack, needle in zip(tokens, tokens):
        print(str_str(haystack, needle))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())