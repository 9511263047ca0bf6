import io

import pytest

VALUES = [3, 5, 7, 11]

from contestkit.investor import Investor, main


def test_fresh_holdings_stand_alone():
    investor = Investor(VALUES)
    for node, value in enumerate(VALUES, start=1):
        assert investor.span(node) == 1
        assert investor.value(node) == value


def test_merge_pair():
    investor = Investor(VALUES)
    investor.merge(2, 1)
    assert investor.span(1) == 2
    assert investor.span(2) == investor.span(1)
    assert investor.value(2) == VALUES[0] + VALUES[1]


def test_merge_all_covers_everything():
    investor = Investor(VALUES)
    investor.merge(1, 2)
    investor.merge(3, 4)
    investor.merge(2, 3)
    for node in range(1, len(VALUES) + 1):
        assert investor.span(node) == len(VALUES)
        assert investor.value(node) == sum(VALUES)


def test_repeated_merge_adds_initial_values_again():
    investor = Investor(VALUES)
    investor.merge(1, 2)
    investor.merge(1, 2)
    assert investor.value(1) == 2 * (VALUES[0] + VALUES[1])


def test_untouched_holding_unchanged_by_merges():
    investor = Investor(VALUES)
    investor.merge(1, 2)
    assert investor.value(4) == VALUES[3]
    assert investor.span(4) == 1


@pytest.mark.parametrize("node", [0, len(VALUES) + 1])
def test_unknown_holding(node):
    investor = Investor(VALUES)
    with pytest.raises(IndexError):
        investor.value(node)


def test_main_runs_commands(monkeypatch, capsys):
    script = "4 4\n3 5 7 11\nA 1 2\nB 1\nC 2\nD 4\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    assert main() == 0
    investor = Investor(VALUES)
    investor.merge(1, 2)
    expected = [str(investor.span(1)), str(investor.value(2)), f"{investor.span(4)} {investor.value(4)}"]
    assert capsys.readouterr().out.splitlines() == expected


def test_main_rejects_unknown_command(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 1\n5\nZ 1\n"))
    with pytest.raises(ValueError):
        main()