import json

import pytest

from src.utils.cli import EXIT_CRITICAL, EXIT_INVALID, EXIT_STABLE, main


def _run(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    return exc.value.code


def test_cli_critical_table(capsys):
    rc = _run(["project", "--initial_stock", "1000", "--growth_rate", "12", "--catch_plan", "189", "--min_stock", "250"])
    out = capsys.readouterr().out
    assert rc == EXIT_CRITICAL
    assert "Кол-во с отловом (т)" in out
    assert "На 8-й год" in out


def test_cli_stable_json(capsys):
    rc = _run(["project", "--catch_plan", "0", "--json"])
    data = json.loads(capsys.readouterr().out)
    assert rc == EXIT_STABLE
    assert data["criticalYear"] == 0
    assert data["safeYears"] == 20
    assert data["report"]["stable"] is True


def test_cli_invalid_input(capsys):
    rc = _run(["project", "--growth_rate", "abc"])
    assert rc == EXIT_INVALID
    assert "ERROR" in capsys.readouterr().out
