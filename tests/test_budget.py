import io
from math import comb

import pytest

from contestkit.budget import MAX_VALUE, count_budget_pairs, main


def test_empty_has_no_pairs():
    assert count_budget_pairs([]) == 0


def test_strictly_increasing_has_no_pairs():
    assert count_budget_pairs([1, 2, 3, 10, 500]) == 0


def test_single_inversion():
    assert count_budget_pairs([1, 3, 2]) == 1


@pytest.mark.parametrize("length", [2, 5, 9])
def test_equal_values_pair_every_way(length):
    assert count_budget_pairs([7] * length) == comb(length, 2)


def test_strictly_decreasing_pairs_every_way():
    values = [50, 40, 30, 20, 10, 0]
    assert count_budget_pairs(values) == comb(len(values), 2)


def test_boundaries_behave_like_any_order():
    assert count_budget_pairs([MAX_VALUE, 0]) == count_budget_pairs([5, 0])
    assert count_budget_pairs([0, MAX_VALUE]) == count_budget_pairs([0, 5])


@pytest.mark.parametrize("bad", [-1, MAX_VALUE + 1])
def test_out_of_range_value(bad):
    with pytest.raises(ValueError):
        count_budget_pairs([3, bad])


def test_main_prints_count(monkeypatch, capsys):
    values = [4, 2, 4, 1, 3]
    monkeypatch.setattr("sys.stdin", io.StringIO(f"{len(values)}\n{' '.join(map(str, values))}\n"))
    assert main() == 0
    assert capsys.readouterr().out.strip() == str(count_budget_pairs(values))