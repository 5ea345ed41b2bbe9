import io

import pytest

from leetkit.rank_transform import array_rank_transform, main


def test_worked_example():
    assert array_rank_transform([40, 10, 20, 30]) == [4, 1, 2, 3]


@pytest.mark.parametrize(
    "values",
    [
        [100, 100, 100],
        [37, 12, 28, 9, 100, 56, 80, 5, 12],
        [-5, 0, 5, -5, 0],
        [7],
    ],
)
def test_ranks_preserve_order_and_equality(values):
    ranks = array_rank_transform(values)
    assert len(ranks) == len(values)
    for a, ra in zip(values, ranks):
        for b, rb in zip(values, ranks):
            assert (a < b) == (ra < rb)
            assert (a == b) == (ra == rb)
    assert sorted(set(ranks)) == list(range(1, len(set(values)) + 1))


def test_empty_input_gives_empty_output():
    assert array_rank_transform([]) == []


def test_input_is_not_modified():
    values = [3, 1, 2]
    array_rank_transform(values)
    assert values == [3, 1, 2]


def test_main_reads_first_line_only(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("40 10 20 30\n5 6\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "4 1 2 3 \n"


def test_main_with_no_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 0
    assert capsys.readouterr().out == "\n"