# leetkit

A small collection of classic algorithm exercises. Each one is a plain Python
function and also a command-line tool that reads its input from standard input.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

```python
from leetkit.rank_transform import array_rank_transform
from leetkit.letter_combinations import letter_combinations
from leetkit.four_sum import four_sum
from leetkit.valid_parentheses import is_valid
from leetkit.merge_lists import ListNode, build_list, list_values, merge_two_lists
from leetkit.remove_duplicates import remove_duplicates
from leetkit.str_str import str_str
from leetkit.search_insert import search_insert
from leetkit.inorder_traversal import TreeNode, build_tree, inorder_traversal

array_rank_transform([40, 10, 20, 30])      # [4, 1, 2, 3]
letter_combinations("23")                   # ["ad", "ae", "af", "bd", ...]
four_sum([1, 0, -1, 0, -2, 2], 0)           # [[-2, -1, 1, 2], [-2, 0, 0, 2], [-1, 0, 0, 1]]
is_valid("()[]{}")                          # True
str_str("sadbutsad", "sad")                 # 0
search_insert([1, 3, 5, 6], 5)              # 2

nums = [1, 1, 2]
remove_duplicates(nums)                     # 2; nums now starts with [1, 2]

merged = merge_two_lists(build_list([1, 2, 4]), build_list([1, 3, 4]))
list_values(merged)                         # [1, 1, 2, 3, 4, 4]

root = build_tree(["1", "null", "2", "3"])  # level-order description
inorder_traversal(root)                     # [1, 3, 2]
```

Notes on behaviour:

- `array_rank_transform` gives equal values the same rank; ranks start at 1.
- `letter_combinations` uses the phone keypad for digits 2–9. An empty string,
  or any digit without letters (such as `0` or `1`), yields an empty list.
- `four_sum` returns each distinct quadruplet once, in ascending order.
- `is_valid` treats any character that is not an opening bracket as closing the
  innermost open bracket.
- `remove_duplicates` works in place on a sorted list: it moves the distinct
  values to the front and returns how many there are. Elements past that count
  are left as they were.
- `str_str` returns 0 for an empty needle and -1 when the needle is absent.
- `search_insert` works on a sorted sequence and returns the index of the target
  or the index where it would be inserted.
- `merge_two_lists` relinks the nodes of both lists into one ascending list,
  whether or not the inputs were sorted.
- `build_tree` takes level-order tokens with `null` for a missing child and
  raises `ValueError` when there are more values than open child positions.

Linked lists are made of `ListNode` objects (`val`, `next`) and trees of
`TreeNode` objects (`val`, `left`, `right`); `build_list` / `list_values` and
`build_tree` convert between them and plain Python values.

## Command-line tools

Each tool reads from standard input and writes its answer to standard output.
None of them takes options beyond `--help`.

| Command | Input | Output |
| --- | --- | --- |
| `leetkit-rank-transform` | a line of integers | the ranks, space separated |
| `leetkit-letter-combinations` | a string of digits | a quoted, comma-separated list |
| `leetkit-four-sum` | the target, then the integers (on the same line, or the next line) | one quadruplet per line |
| `leetkit-valid-parentheses` | a string of brackets | `true` or `false` |
| `leetkit-merge-lists` | two lines of integers, one per list | the merged list |
| `leetkit-remove-duplicates` | lines of sorted integers, one array per line | the distinct values of each line |
| `leetkit-str-str` | pairs of words: haystack then needle | one index per pair |
| `leetkit-search-insert` | lines of sorted integers, the last one being the target | one position per line |
| `leetkit-inorder-traversal` | one line: a tree in level order, `null` for gaps | the inorder values |

Examples:

```
$ echo "40 10 20 30" | leetkit-rank-transform
4 1 2 3

$ echo "23" | leetkit-letter-combinations
["ad","ae","af","bd","be","bf","cd","ce","cf"]

$ echo "()[]{}" | leetkit-valid-parentheses
true

$ printf "1 2 4\n1 3 4\n" | leetkit-merge-lists
[1, 1, 2, 3, 4, 4]

$ echo "1 null 2 3" | leetkit-inorder-traversal
[1,3,2]
```

## What it does not do

The tools read standard input only; they take no file arguments and have no
interactive mode. Input is not validated beyond reading integers until the
first token that is not one.