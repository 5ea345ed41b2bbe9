import io

import pytest

from leetkit.valid_parentheses import is_valid, main


@pytest.mark.parametrize("text", ["()", "()[]{}", "{[]}", "", "([{}])[]"])
def test_balanced_strings(text):
    assert is_valid(text) is True


@pytest.mark.parametrize("text", ["(]", "([)]", "(", "]", "(((", "){"])
def test_unbalanced_strings(text):
    assert is_valid(text) is False


@pytest.mark.parametrize("unit", ["()", "[]", "{}", "([])", "{()}"])
def test_nesting_and_concatenation_stay_valid(unit):
    assert is_valid("(" + unit + ")" + unit) is True
    assert is_valid(unit * 5) is True


@pytest.mark.parametrize("text", ["(()", "[[]", "{}{"])
def test_odd_length_is_invalid(text):
    assert is_valid(text) is False


def test_other_character_closes_innermost_bracket():
    assert is_valid("(a") is True
    assert is_valid("a") is False


def test_main_prints_true(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("{[]}\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "true\n"


def test_main_prints_false(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("([)]\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "false\n"