"""Build a binary tree from level-order tokens and walk it in order."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass

_NULL = "null"


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def build_tree(data: Iterable[str]) -> TreeNode | None:
    """Build a tree from level-order tokens where "null" marks a missing child."""
    tokens = list(data)
    if not tokens or tokens[0] == _NULL:
        return None

    root = TreeNode(int(tokens[0]))
    pending = deque([root])
    rest = iter(tokens[1:])
    for left_token in rest:
        if not pending:
            raise ValueError("more values than open child positions in the tree")
        current = pending.popleft()
        if left_token != _NULL:
            current.left = TreeNode(int(left_token))
            pending.append(current.left)
        right_token = next(rest, _NULL)
        if right_token != _NULL:
            current.right = TreeNode(int(right_token))
            pending.append(current.right)
    return root


def inorder_traversal(root: TreeNode | None) -> list[int]:
    """Return the node values in left, node, right order."""
    result: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.val)
        node = node.right
    return result


def main(argv: list[str] | None = None) -> int:
    """Read level-order tokens from the first stdin line and print the inorder walk."""
    parser = argparse.ArgumentParser(
        prog="inorder-traversal",
        description="Print the inorder traversal of a tree given in level order.",
    )
    parser.parse_args(argv)
    root = build_tree(sys.stdin.readline().split())
    sys.stdout.write("[" + ",".join(str(value) for value in inorder_traversal(root)) + "]")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())