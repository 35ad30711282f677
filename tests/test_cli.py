import io

import pytest

from fooddispatch.cli import main


def test_main_runs_until_exit(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\nAlice\n6\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Enter name for driver 1: " in out
    assert out.endswith("Exiting system. Goodbye!\n")


def test_main_places_order(monkeypatch, capsys):
    script = "1\nAlice\n1\nCarol\n1 Main St\npizza\n4\n6\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Generated Order ID = 1" in out
    assert "Order ID: 1 | Customer: Carol | Status: Pending" in out


def test_main_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "fooddispatch" in capsys.readouterr().out