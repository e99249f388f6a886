from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

try:
    import tomllib  # py3.11+
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore

from forsee.core.contract import DEFAULT_PROFILE_ID


# ----------------------------
# Primary config object
# ----------------------------

@dataclass(frozen=True)
class ForseeConfig:
    """
    Single, flattened config object used by the CLI/runtime.

    Supports config.sample.toml style:
      [forsee]
      asset, readings, out, json_out, user, seed, log_level

    Also supports structured style:
      [meta], [inference], [report], [logging]
    """
    schema_version: str = "1.0"

    # IO
    asset: str = DEFAULT_PROFILE_ID
    readings: str | None = None
    out: str = "outputs/forsee_report.pdf"
    json_out: str | None = None

    # session
    user: str = "operator"

    # inference knobs
    seed: int | None = None

    # logging
    log_level: str = "WARNING"


# ----------------------------
# Helpers
# ----------------------------

def _as_dict(x: Any) -> dict[str, Any]:
    return x if isinstance(x, dict) else {}


def _get(d: dict[str, Any], key: str, default: Any) -> Any:
    return d.get(key, default) if isinstance(d, dict) else default


def _coerce_opt_int(x: Any) -> int | None:
    if x is None or isinstance(x, bool):
        return None
    try:
        return int(x)
    except (TypeError, ValueError):
        return None


def _coerce_str(x: Any, default: str) -> str:
    if x is None:
        return default
    s = str(x)
    return s if s.strip() else default


def _coerce_opt_str(x: Any) -> str | None:
    if x is None:
        return None
    s = str(x).strip()
    return s or None


def _coerce_level(x: Any, default: str) -> str:
    s = _coerce_str(x, default).strip().upper()
    return s if s in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL") else default


# ----------------------------
# Load + merge
# ----------------------------

def load_config(path: str | Path | None) -> ForseeConfig:
    """
    Load TOML config. If missing/None, returns safe defaults.
    Never raises for missing file (config is optional).
    """
    if not path:
        return ForseeConfig()

    p = Path(path)
    if not p.exists():
        return ForseeConfig()

    data = tomllib.loads(p.read_text(encoding="utf-8"))

    # Preferred simple table
    fs = _as_dict(data.get("forsee", {}))

    # Optional structured tables
    meta = _as_dict(data.get("meta", {}))
    inference = _as_dict(data.get("inference", {}))
    report = _as_dict(data.get("report", {}))
    logging_tbl = _as_dict(data.get("logging", {}))

    defaults = ForseeConfig()

    return ForseeConfig(
        schema_version=_coerce_str(_get(meta, "schema_version", "1.0"), "1.0"),
        asset=_coerce_str(_get(fs, "asset", defaults.asset), defaults.asset),
        readings=_coerce_opt_str(_get(fs, "readings", None)),
        out=_coerce_str(_get(fs, "out", _get(report, "pdf", defaults.out)), defaults.out),
        json_out=_coerce_opt_str(_get(fs, "json_out", _get(report, "json", None))),
        user=_coerce_str(_get(fs, "user", defaults.user), defaults.user),
        seed=_coerce_opt_int(_get(fs, "seed", _get(inference, "seed", None))),
        log_level=_coerce_level(_get(fs, "log_level", _get(logging_tbl, "level", defaults.log_level)), defaults.log_level),
    )


def merge_config(cfg: ForseeConfig, args: Any) -> ForseeConfig:
    """
    Merge CLI args over file config.
    `args` may be an argparse.Namespace or a plain dict of explicit values.
    Only applies fields if the arg exists AND is not None/empty.
    """
    def lookup(name: str) -> Any:
        if isinstance(args, dict):
            return args.get(name)
        return getattr(args, name, None)

    def pick_str(name: str, cur: str) -> str:
        v = lookup(name)
        if v is not None and str(v).strip():
            return str(v).strip()
        return cur

    def pick_opt_str(name: str, cur: str | None) -> str | None:
        v = lookup(name)
        if v is None:
            return cur
        return str(v).strip() or cur

    def pick_opt_int(name: str, cur: int | None) -> int | None:
        v = _coerce_opt_int(lookup(name))
        return cur if v is None else v

    return ForseeConfig(
        schema_version=cfg.schema_version,
        asset=pick_str("asset", cfg.asset),
        readings=pick_opt_str("readings", cfg.readings),
        out=pick_str("out", cfg.out),
        json_out=pick_opt_str("json_out", cfg.json_out),
        user=pick_str("user", cfg.user),
        seed=pick_opt_int("seed", cfg.seed),
        log_level=_coerce_level(pick_str("log_level", cfg.log_level), cfg.log_level),
    )
