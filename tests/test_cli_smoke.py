import json

import pandas as pd

from app.cli import main
from core.config import DEFAULT_CONFIG
from core.schema import YEARLY_COLUMNS
from data_prep.loader import save_config_json
from store.json_file import JsonFileScenarioStore


def _plan(tmp_path, **overrides):
    data = {
        "initialPrincipal": 100000,
        "monthlyContribution": 10000,
        "annualRate": 6,
        "yearsToGrow": 10,
        "startAge": 25,
        "retirementYear": 6,
        "monthlyWithdrawal": 20000,
        "oneTimeEvents": [],
    }
    data.update(overrides)
    path = tmp_path / "plan.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_cli_default_plan_prints_age_table(tmp_path, capsys):
    rc = main(["--store", str(tmp_path / "s.json")])

    out = capsys.readouterr().out
    assert rc == 0
    assert "total_assets" in out
    assert "Accumulation" in out


def test_cli_validate_only(tmp_path, capsys):
    rc = main([str(_plan(tmp_path)), "--validate", "--store", str(tmp_path / "s.json")])

    assert rc == 0
    assert "Config is valid." in capsys.readouterr().out


def test_cli_invalid_config_returns_1(tmp_path, capsys):
    rc = main([str(_plan(tmp_path, retirementYear=50)), "--store", str(tmp_path / "s.json")])

    assert rc == 1
    assert "retirement_year" in capsys.readouterr().err


def test_cli_missing_file_returns_2(tmp_path, capsys):
    rc = main([str(tmp_path / "missing.json"), "--store", str(tmp_path / "s.json")])

    assert rc == 2
    assert "Failed to load config" in capsys.readouterr().err


def test_cli_month_detail(tmp_path, capsys):
    rc = main([str(_plan(tmp_path)), "--year", "7", "--store", str(tmp_path / "s.json")])

    out = capsys.readouterr().out
    assert rc == 0
    assert "Year 7 (age 32)" in out
    assert "-20000" in out


def test_cli_month_detail_out_of_range(tmp_path, capsys):
    rc = main([str(_plan(tmp_path)), "--year", "11", "--store", str(tmp_path / "s.json")])

    assert rc == 2
    assert "target_year" in capsys.readouterr().err


def test_cli_summary_and_csv_export(tmp_path, capsys):
    out_csv = tmp_path / "projection.csv"

    rc = main([str(_plan(tmp_path)), "--summary", "-o", str(out_csv), "--store", str(tmp_path / "s.json")])

    assert rc == 0
    assert "Final Assets" in capsys.readouterr().out
    df = pd.read_csv(out_csv)
    assert list(df["year"]) == list(range(11))


def test_cli_xlsx_export_and_chart(tmp_path, capsys):
    out_xlsx = tmp_path / "projection.xlsx"
    chart = tmp_path / "trajectory.png"

    rc = main([
        str(_plan(tmp_path)), "-o", str(out_xlsx), "--chart", str(chart),
        "--store", str(tmp_path / "s.json"),
    ])

    assert rc == 0
    out = capsys.readouterr().out
    assert "Wrote yearly table" in out
    assert "Wrote chart" in out
    df = pd.read_excel(out_xlsx, sheet_name="Projection")
    assert list(df.columns) == list(YEARLY_COLUMNS)
    assert list(df["year"]) == list(range(11))
    assert chart.stat().st_size > 0


def test_cli_rejects_unknown_export_format(tmp_path, capsys):
    rc = main([str(_plan(tmp_path)), "-o", str(tmp_path / "out.txt"), "--store", str(tmp_path / "s.json")])

    assert rc == 2
    assert "Unsupported export format" in capsys.readouterr().err


def test_cli_scenario_lifecycle(tmp_path, capsys):
    store_file = tmp_path / "s.json"
    plan = save_config_json(DEFAULT_CONFIG, tmp_path / "default.json")

    assert main([str(plan), "--save", "Baseline", "--store", str(store_file)]) == 0
    record = JsonFileScenarioStore(store_file).list()[0]
    assert record.name == "Baseline"

    capsys.readouterr()
    assert main(["--list-scenarios", "--store", str(store_file)]) == 0
    assert "Baseline" in capsys.readouterr().out

    assert main(["--load", record.id, "--store", str(store_file)]) == 0
    assert "Loaded scenario 'Baseline'" in capsys.readouterr().out

    assert main(["--delete", record.id, "--store", str(store_file)]) == 0
    assert main(["--delete", record.id, "--store", str(store_file)]) == 1
    assert main(["--load", record.id, "--store", str(store_file)]) == 2
