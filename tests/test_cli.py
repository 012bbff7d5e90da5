"""Tests for the pd_match command-line script."""

from pathlib import Path
import runpy
import sys

import pytest

SCRIPT = str(Path(__file__).resolve().parents[1] / 'bin' / 'pd_match.py')


def _run(monkeypatch, *args):
    monkeypatch.setattr(sys, 'argv', ['pd_match.py', *args])
    runpy.run_path(SCRIPT, run_name = '__main__')


class TestCommandLine:
    def test_single_match(self, monkeypatch, capsys):
        _run(monkeypatch, 'cooperate', 'compete', '-n', '5')
        out = capsys.readouterr().out
        assert 'Scores:' in out
        assert 'AlwaysCompete: 25' in out

    def test_tournament(self, monkeypatch, capsys):
        _run(monkeypatch, 'cooperate', 'compete', 'grudger', '-n', '10', '--tournament')
        assert 'Ranking:' in capsys.readouterr().out

    def test_invalid_payoffs_exit_cleanly(self, monkeypatch, caplog):
        with pytest.raises(SystemExit) as exc_info:
            _run(monkeypatch, 'tft', 'compete', '--payoffs', 'nan', '0', '5', '1')
        assert exc_info.value.code == 1
        assert any(record.levelname == 'ERROR' for record in caplog.records)

    def test_unknown_strategy_exits_cleanly(self, monkeypatch):
        with pytest.raises(SystemExit) as exc_info:
            _run(monkeypatch, 'tft', 'bogus')
        assert exc_info.value.code == 1
