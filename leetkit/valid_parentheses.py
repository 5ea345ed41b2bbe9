"""Check that brackets in a string are balanced and properly nested."""

from __future__ import annotations

import argparse
import sys

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())


def is_valid(s: str) -> bool:
    """Return True when every bracket is closed by its match in the right order.

    Any character that is not an opening bracket closes the innermost one.
    """
    stack: list[str] = []
    for char in s:
        if char in _OPENERS:
            stack.append(char)
            continue
        if not stack:
            return False
        top = stack.pop()
        if char in _PAIRS and _PAIRS[char] != top:
            return False
    return not stack


def main(argv: list[str] | None = None) -> int:
    """Read a bracket string from stdin and print true or false."""
    parser = argparse.ArgumentParser(
        prog="valid-parentheses",
        description="Print whether the brackets in the input are balanced.",
    )
    parser.parse_args(argv)
    tokens = sys.stdin.read().split()
    text = tokens[0] if tokens else ""
    print("true" if is_valid(text) else "false")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())