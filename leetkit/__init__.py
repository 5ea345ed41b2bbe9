"""Classic algorithm exercises as functions and command-line tools."""

__version__ = "0.1.0"

__all__ = [
    "rank_transform",
    "letter_combinations",
    "four_sum",
    "valid_parentheses",
    "merge_lists",
    "remove_duplicates",
    "str_str",
    "search_insert",
    "inorder_traversal",
]