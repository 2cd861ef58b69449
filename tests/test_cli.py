import sys

import pytest

import main


def run_cli(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], *argv: str) -> str:
    monkeypatch.setattr(sys, "argv", ["main.py", *argv])
    main.run()
    return capsys.readouterr().out


def test_best_move(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    out = run_cli(monkeypatch, capsys, "best", "--stones", "7", "--algorithm", "minimax", "--seed", "1")
    assert out.startswith("bestmove 3 depth 7 nodes 96")


def test_search_with_tree(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    out = run_cli(monkeypatch, capsys, "search", "--stones", "2", "--algorithm", "minimax", "--tree")
    lines = out.splitlines()
    assert lines[0] == "algorithm minimax depth 2 score -1 nodes 4"
    assert lines[1] == "MIN 2 s:-1"


def test_compare_table(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    out = run_cli(monkeypatch, capsys, "compare", "--stones", "3", "--quiet")
    lines = out.splitlines()
    assert len(lines) == 4
    assert lines[3].split() == ["3", "8", "8", "0.00", "0.00"]


def test_play_against_engine(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    answers = iter(["3", "3"])
    monkeypatch.setattr("builtins.input", lambda _prompt: next(answers))
    out = run_cli(monkeypatch, capsys, "play", "--delay-ms", "0")
    assert "engine takes 1" in out
    assert out.strip().endswith("you win")


def test_finished_pile_is_a_usage_error(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(sys, "argv", ["main.py", "best", "--stones", "0"])
    with pytest.raises(SystemExit) as excinfo:
        main.run()

    assert excinfo.value.code == 2
    assert "at least one stone" in capsys.readouterr().err


def test_negative_depth_is_a_usage_error(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(sys, "argv", ["main.py", "search", "--stones", "3", "--depth", "-1"])
    with pytest.raises(SystemExit) as excinfo:
        main.run()

    assert excinfo.value.code == 2
    assert "target_depth must be >= 0" in capsys.readouterr().err
