"""Merge two singly linked lists into one sorted list."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import pairwise


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None


def build_list(values: Iterable[int]) -> ListNode | None:
    """Link the values into a list and return its head, or None when empty."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def list_values(head: ListNode | None) -> list[int]:
    """Return the values of a list from head to tail."""
    return [node.val for node in _nodes(head)]


def merge_two_lists(list1: ListNode | None, list2: ListNode | None) -> ListNode | None:
    """Relink the nodes of both lists, sorted or not, into one ascending list."""
    nodes = sorted([*_nodes(list1), *_nodes(list2)], key=lambda node: node.val)
    if not nodes:
        return None
    for current, following in pairwise(nodes):
        current.next = following
    nodes[-1].next = None
    return nodes[0]


def _leading_ints(tokens: Iterable[str]) -> list[int]:
    numbers = []
    for token in tokens:
        try:
            numbers.append(int(token))
        except ValueError:
            break
    return numbers


def main(argv: list[str] | None = None) -> int:
    """Read two lines of integers from stdin and print the merged list."""
    parser = argparse.ArgumentParser(
        prog="merge-lists",
        description="Merge the integers on the first two input lines into one sorted list.",
    )
    parser.parse_args(argv)
    first = build_list(_leading_ints(sys.stdin.readline().split()))
    second = build_list(_leading_ints(sys.stdin.readline().split()))
    merged = merge_two_lists(first, second)
    sys.stdout.write("[" + ", ".join(str(value) for value in list_values(merged)) + "]")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())