import argparse
from pathlib import Path

from forsee.core.config import ForseeConfig, load_config, merge_config


def test_missing_config_gives_defaults(tmp_path: Path):
    assert load_config(None) == ForseeConfig()
    assert load_config(tmp_path / "absent.toml") == ForseeConfig()


def test_flat_forsee_table(tmp_path: Path):
    p = tmp_path / "config.toml"
    p.write_text(
        '[forsee]\nasset = "servers"\nuser = "ada"\nseed = 11\nlog_level = "debug"\njson_out = "out/r.json"\n',
        encoding="utf-8",
    )
    cfg = load_config(p)
    assert cfg.asset == "servers"
    assert cfg.user == "ada"
    assert cfg.seed == 11
    assert cfg.log_level == "DEBUG"
    assert cfg.json_out == "out/r.json"
    assert cfg.out == "outputs/forsee_report.pdf"


def test_structured_tables(tmp_path: Path):
    p = tmp_path / "config.toml"
    p.write_text(
        '[meta]\nschema_version = "1.1"\n'
        "[inference]\nseed = 5\n"
        '[report]\npdf = "r/a.pdf"\njson = "r/a.json"\n'
        '[logging]\nlevel = "info"\n',
        encoding="utf-8",
    )
    cfg = load_config(p)
    assert cfg.schema_version == "1.1"
    assert cfg.seed == 5
    assert cfg.out == "r/a.pdf"
    assert cfg.json_out == "r/a.json"
    assert cfg.log_level == "INFO"


def test_invalid_values_fall_back(tmp_path: Path):
    p = tmp_path / "config.toml"
    p.write_text('[forsee]\nseed = "many"\nlog_level = "loud"\nasset = "  "\n', encoding="utf-8")
    cfg = load_config(p)
    assert cfg.seed is None
    assert cfg.log_level == "WARNING"
    assert cfg.asset == "wind-turbines"


def test_cli_values_override_file_values():
    base = ForseeConfig(asset="servers", seed=3, user="ada")
    merged = merge_config(base, {"asset": "bridges", "seed": 9})
    assert merged.asset == "bridges"
    assert merged.seed == 9
    assert merged.user == "ada"


def test_merge_accepts_namespace_and_ignores_blanks():
    base = ForseeConfig(json_out="a.json")
    ns = argparse.Namespace(asset="", json_out=None, log_level="error", readings=None)
    merged = merge_config(base, ns)
    assert merged.asset == "wind-turbines"
    assert merged.json_out == "a.json"
    assert merged.log_level == "ERROR"
