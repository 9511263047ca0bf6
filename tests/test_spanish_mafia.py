import io

import pytest

from contestkit.spanish_mafia import main, min_mix_cost


def test_single_value_costs_nothing():
    assert min_mix_cost([42]) == 0


def test_two_values_cost_their_product():
    assert min_mix_cost([18, 19]) == 18 * 19


def test_three_values_pinned():
    assert min_mix_cost([40, 60, 20]) == 2400


@pytest.mark.parametrize("values", [[40, 60, 20], [3, 97, 50, 12, 8], [1, 2, 3, 4, 5, 6]])
def test_reversal_invariance(values):
    assert min_mix_cost(values) == min_mix_cost(list(reversed(values)))


def test_zero_values_make_no_smoke():
    assert min_mix_cost([0, 0, 0, 0]) == 0


def test_cost_not_above_left_to_right_mixing():
    values = [3, 97, 50, 12, 8]
    colour, smoke = values[0], 0
    for value in values[1:]:
        smoke += colour * value
        colour = (colour + value) % 100
    assert 0 <= min_mix_cost(values) <= smoke


def test_empty_rejected():
    with pytest.raises(ValueError):
        min_mix_cost([])


def test_main_sums_cases(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n2\n18 19\n3\n40 60 20\n"))
    main()
    assert capsys.readouterr().out.strip() == "2742"