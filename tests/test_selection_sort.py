from collections import Counter

import pytest

from algolab.selection_sort import main, selection_sort


@pytest.mark.parametrize(
    "values",
    [[], [1], [3, 1, 2], [5, -2, 5, 0, -7, 3], [9, 8, 7, 6, 5, 4, 3, 2, 1]],
)
def test_matches_sorted(values):
    assert selection_sort(values) == sorted(values)


def test_preserves_elements():
    values = [4, 4, 1, 3, 1, 2]
    result = selection_sort(values)
    assert Counter(result) == Counter(values)
    assert all(a <= b for a, b in zip(result, result[1:]))


def test_input_not_modified():
    values = [3, 2, 1]
    selection_sort(values)
    assert values == [3, 2, 1]


def test_accepts_any_iterable():
    assert selection_sort(iter((2.5, -1.0, 0.0))) == [-1.0, 0.0, 2.5]


def test_main_sorts_input(monkeypatch, capsys):
    lines = iter(["4", "3 1", "4 2"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[-1] == "Sorted array: 1 2 3 4 "


def test_main_rejects_bad_count(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "many")
    assert main([]) == 1
    assert "Invalid input." in capsys.readouterr().out