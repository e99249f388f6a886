from __future__ import annotations

import argparse
import logging
from datetime import datetime
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Any

from forsee.core.access import AccessControlGate, Role
from forsee.core.config import ForseeConfig, load_config, merge_config
from forsee.core.contract import FORSEE_DECISION_VERSION
from forsee.core.inference import RiskInferenceEngine
from forsee.core.ingest import load_readings_csv
from forsee.core.registry import REGISTRY
from forsee.core.session import AccessDenied, SessionOrchestrator
from forsee.report.json_report import write_json_report
from forsee.report.pdf_report import write_pdf_report
from forsee.schema_constants import SCHEMA_VERSION

try:
    FORSEE_PACKAGE_VERSION = version("forsee")
except PackageNotFoundError:
    FORSEE_PACKAGE_VERSION = "dev"

logger = logging.getLogger("forsee.cli")


def _console_safe(s: str) -> str:
    """
    Windows PowerShell can choke on certain Unicode chars (e.g., arrows).
    Keep console output ASCII-safe while leaving PDF output untouched.
    """
    return (
        str(s)
        .replace("→", "->")
        .replace("°", "deg")
        .replace("µ", "u")
        .replace("•", "-")
    )


def _require_existing_file(path: Path, label: str) -> None:
    if not path.exists():
        raise FileNotFoundError(f"{label} not found: {path}")
    if path.is_dir():
        raise IsADirectoryError(f"{label} is a directory, expected a file: {path}")


def _parse_reading_args(items: list[str] | None) -> tuple[dict[str, str], list[str]]:
    """`--reading id=value` pairs -> raw readings, plus notes for malformed pairs."""
    readings: dict[str, str] = {}
    issues: list[str] = []
    for item in items or []:
        key, sep, value = str(item).partition("=")
        if not sep or not key.strip():
            issues.append(f"Ignored malformed --reading '{item}' (expected id=value)")
            continue
        readings[key.strip()] = value.strip()
    return readings, issues


def _print_catalog() -> None:
    for p in REGISTRY.list():
        sensors = ", ".join(f"{s.id} ({s.unit})" for s in p.sensors)
        print(_console_safe(f"{p.id:<22} {p.title:<30} sensors: {sensors}"))


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="forsee", description="Forsee — predictive maintenance health prediction")

    p.add_argument("--asset", default=None, help=f"Asset profile id (default: {REGISTRY.default.id})")
    p.add_argument("--readings", default=None, help="Readings CSV with sensor_id,value columns (optional)")
    p.add_argument(
        "--reading",
        action="append",
        default=None,
        metavar="ID=VALUE",
        help="Single sensor reading; repeatable, overrides --readings",
    )
    p.add_argument("--out", default=None, help="Output PDF path (defaults from config or built-in)")
    p.add_argument(
        "--json-out",
        "--json",
        dest="json_out",
        default=None,
        help="Optional JSON report output path",
    )

    p.add_argument("--config", default=None, help="Path to config TOML (optional)")
    p.add_argument("--user", default=None, help="Session user name (default: operator)")
    p.add_argument("--seed", type=int, default=None, help="Seed for the top-sensor weighting jitter")
    p.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING (default), ERROR")
    p.add_argument("--list", action="store_true", help="List available asset profiles and exit")

    return p


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)

    if args.list:
        _print_catalog()
        return 0

    file_cfg = load_config(args.config)

    cli_explicit: dict[str, Any] = {
        k: getattr(args, k)
        for k in ("asset", "readings", "out", "json_out", "user", "seed", "log_level")
        if getattr(args, k) is not None
    }
    cfg: ForseeConfig = merge_config(file_cfg, cli_explicit)

    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    out_pdf = Path(cfg.out)
    json_out_path = Path(cfg.json_out) if cfg.json_out else None

    out_pdf.parent.mkdir(parents=True, exist_ok=True)
    if json_out_path is not None:
        json_out_path.parent.mkdir(parents=True, exist_ok=True)

    # ---- Readings: CSV first, then explicit --reading pairs ----
    notes: list[str] = []
    raw_readings: dict[str, str] = {}

    if cfg.readings:
        readings_path = Path(cfg.readings)
        try:
            _require_existing_file(readings_path, "Readings CSV")
        except (FileNotFoundError, IsADirectoryError) as e:
            print(f"ERROR: {e}")
            return 2

        ingest = load_readings_csv(readings_path)
        if not ingest.readings and ingest.issues:
            print(f"ERROR: readings CSV parsed to 0 rows: {readings_path}")
            print("Ingest issues:")
            for msg in ingest.issues:
                print(f" - {_console_safe(msg)}")
            return 1
        raw_readings.update(ingest.readings)
        notes.extend(ingest.issues)

    pairs, pair_issues = _parse_reading_args(args.reading)
    raw_readings.update(pairs)
    notes.extend(pair_issues)

    if cfg.asset not in REGISTRY:
        notes.append(f"Unknown asset '{cfg.asset}'; using default profile '{REGISTRY.default.id}'")

    # ---- Session: local operator signs in as viewer ----
    gate = AccessControlGate()
    gate.authenticate(cfg.user)
    gate.select_role(Role.VIEWER)

    session = SessionOrchestrator(gate=gate, provider=RiskInferenceEngine(seed=cfg.seed))

    try:
        profile = session.open_asset(cfg.asset)
        outcome = session.run_prediction(profile.id, raw_readings)
    except AccessDenied as e:
        print(f"ERROR: {e}")
        return 1

    generated_at = datetime.now().strftime("%Y-%m-%d %H:%M")

    run_config = {
        "asset": profile.id,
        "user": cfg.user,
        "seed": "" if cfg.seed is None else str(cfg.seed),
        "config": str(args.config or ""),
        "schema": SCHEMA_VERSION,
        "decision": FORSEE_DECISION_VERSION,
        "version": FORSEE_PACKAGE_VERSION,
    }
    logger.info("Run config: %s", run_config)

    write_pdf_report(
        out_path=out_pdf,
        profile=profile,
        outcome=outcome,
        generated_at=generated_at,
        notes=notes,
        run_config=run_config,
    )

    if json_out_path:
        write_json_report(
            out_path=json_out_path,
            profile=profile,
            outcome=outcome,
            generated_at=generated_at,
            run_config=run_config,
            notes=notes,
        )

    result = outcome.result
    print(f"Report generated: {out_pdf.resolve()}")
    print(f"Asset:            {profile.id} ({_console_safe(profile.title)})")
    print(f"Health Index:     {result.health_index} | Risk: {result.risk_level} | RUL: {result.rul} days")
    print(f"Failure Mode:     {result.failure_mode}")
    print(f"Action:           {_console_safe(result.recommended_action)}")

    all_notes = list(outcome.notes) + notes
    if all_notes:
        print("Notes:")
        for n in all_notes:
            print(f" - {_console_safe(n)}")

    if json_out_path:
        print(f"JSON saved:       {json_out_path.resolve()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
