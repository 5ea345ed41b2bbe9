import io

import pytest

from leetkit.letter_combinations import letter_combinations, main


def test_single_digit_gives_its_letters():
    assert letter_combinations("2") == ["a", "b", "c"]
    assert letter_combinations("9") == ["w", "x", "y", "z"]


def test_worked_example():
    assert letter_combinations("23") == ["ad", "ae", "af", "bd", "be", "bf", "cd", "ce", "cf"]


def test_empty_digits():
    assert letter_combinations("") == []


@pytest.mark.parametrize("digits", ["1", "0", "21", "2#3"])
def test_keys_without_letters_yield_nothing(digits):
    assert letter_combinations(digits) == []


def test_order_and_shape_for_four_letter_keys():
    combos = letter_combinations("79")
    assert len(combos) == len("pqrs") * len("wxyz")
    assert combos == sorted(combos)
    assert len(set(combos)) == len(combos)
    assert all(c[0] in "pqrs" and c[1] in "wxyz" for c in combos)


def test_main_prints_list(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == '["a","b","c"]'


def test_main_without_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 0
    assert capsys.readouterr().out == "[]"