import io

import pytest

from leetkit.search_insert import main, search_insert


def test_found_target():
    assert search_insert([1, 3, 5, 6], 5) == 2


def test_empty_list():
    assert search_insert([], 42) == 0


@pytest.mark.parametrize("target", [-10, 0, 1, 2, 3, 4, 5, 6, 7, 100])
def test_position_keeps_list_sorted(target):
    nums = [1, 3, 5, 6]
    index = search_insert(nums, target)
    assert 0 <= index <= len(nums)
    if target in nums:
        assert nums[index] == target
    else:
        assert all(value < target for value in nums[:index])
        assert all(value > target for value in nums[index:])


def test_below_and_above_range():
    nums = [10, 20, 30]
    assert search_insert(nums, 5) == 0
    assert search_insert(nums, 35) == len(nums)


def test_main_processes_lines(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 3 5 6 5\n\n1 3 5 6 7\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "2\n4\n"