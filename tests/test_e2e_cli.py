from __future__ import annotations

import json
from pathlib import Path

from forsee.cli import main as cli_main
from forsee.tools.generate_readings import generate_csv
from forsee.tools.validate_json import validate_json


def test_cli_end_to_end_generates_pdf_and_json(tmp_path: Path) -> None:
    # --- Arrange: generate a small deterministic readings file ---
    data_dir = tmp_path / "data"
    out_dir = tmp_path / "outputs"

    readings = data_dir / "check.csv"
    pdf_out = out_dir / "check.pdf"
    json_out = out_dir / "check.json"

    generate_csv(
        out_path=readings,
        asset="industrial-motors",
        seed=1,
        stress=0.0,
        noise=0.02,
        print_summary=False,
    )

    assert readings.exists()
    assert readings.stat().st_size > 0

    # --- Act: run CLI in-process ---
    rc = cli_main(
        [
            "--asset",
            "industrial-motors",
            "--readings",
            str(readings),
            "--reading",
            "vibration=12",
            "--out",
            str(pdf_out),
            "--json",
            str(json_out),
            "--seed",
            "4",
        ]
    )

    # --- Assert: artifacts exist ---
    assert rc == 0
    assert pdf_out.exists() and pdf_out.stat().st_size > 0
    assert json_out.exists() and json_out.stat().st_size > 0

    # --- Assert: strict JSON + schema + prediction contract ---
    result = validate_json(json_out)
    assert result.asset_id == "industrial-motors"

    obj = json.loads(Path(json_out).read_text(encoding="utf-8"))
    assert obj["inputs"]["vibration"] == "12"
    assert obj["prediction"]["health_index"] == 84
    assert len(obj["prediction"]["top_sensors"]) == 4


def test_cli_unknown_asset_falls_back_with_note(tmp_path: Path) -> None:
    json_out = tmp_path / "r.json"
    rc = cli_main(["--asset", "submarines", "--out", str(tmp_path / "r.pdf"), "--json", str(json_out)])
    assert rc == 0

    obj = json.loads(json_out.read_text(encoding="utf-8"))
    assert obj["asset"]["id"] == "wind-turbines"
    assert any("submarines" in n for n in obj["notes"])


def test_cli_laptop_override(tmp_path: Path) -> None:
    json_out = tmp_path / "r.json"
    rc = cli_main(
        ["--asset", "laptops", "--reading", "cpu_temperature=30", "--out", str(tmp_path / "r.pdf"), "--json", str(json_out)]
    )
    assert rc == 0

    pred = json.loads(json_out.read_text(encoding="utf-8"))["prediction"]
    assert pred["rul"] == 270
    assert pred["failure_mode"] == "Thermal Degradation"
    assert [s["name"] for s in pred["top_sensors"]] == ["CPU Temp", "Battery Cycles", "Fan Speed"]
    validate_json(json_out)


def test_cli_missing_readings_file(tmp_path: Path, capsys) -> None:
    rc = cli_main(["--readings", str(tmp_path / "absent.csv"), "--out", str(tmp_path / "r.pdf")])
    assert rc == 2
    assert "Readings CSV not found" in capsys.readouterr().out


def test_cli_config_file_supplies_defaults(tmp_path: Path) -> None:
    json_out = tmp_path / "cfg.json"
    cfg = tmp_path / "config.toml"
    cfg.write_text(
        f'[forsee]\nasset = "pipelines"\nout = "{(tmp_path / "cfg.pdf").as_posix()}"\n'
        f'json_out = "{json_out.as_posix()}"\nseed = 2\n',
        encoding="utf-8",
    )

    rc = cli_main(["--config", str(cfg)])
    assert rc == 0

    obj = json.loads(json_out.read_text(encoding="utf-8"))
    assert obj["asset"]["id"] == "pipelines"
    assert obj["prediction"]["risk_level"] == "CRITICAL"
