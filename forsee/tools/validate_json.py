from __future__ import annotations

import argparse
import importlib.resources as resources
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError, best_match

from forsee.core.inference import risk_level
from forsee.schema_constants import SCHEMA_RESOURCE_NAME, SCHEMA_RESOURCE_PACKAGE, SCHEMA_VERSION

EXPECTED_SCHEMA_VERSION = SCHEMA_VERSION


class StrictJsonError(ValueError):
    """Report is not strict JSON (syntax error, NaN/Infinity, non-object root)."""


class SchemaVersionMismatch(ValueError):
    """meta.schema_version is missing or differs from the version this build writes."""


class InconsistentPrediction(ValueError):
    """Prediction fields contradict the decision contract."""


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    schema_version: str
    asset_id: str | None = None
    risk_level: str | None = None


def _no_constants(token: str) -> Any:
    raise StrictJsonError(f"Forbidden JSON constant encountered: {token}")


def _load_schema_text() -> str:
    # Package resource, so editable installs and wheels behave the same.
    res = resources.files(SCHEMA_RESOURCE_PACKAGE) / SCHEMA_RESOURCE_NAME
    return res.read_text(encoding="utf-8")


def _parse_strict_json(text: str) -> dict[str, Any]:
    try:
        obj = json.loads(text, parse_constant=_no_constants)
    except json.JSONDecodeError as e:
        raise StrictJsonError(f"Invalid JSON at line {e.lineno}, col {e.colno}: {e.msg}") from e
    if not isinstance(obj, dict):
        raise StrictJsonError(f"Report root must be a JSON object, got {type(obj).__name__}.")
    return obj


def _extract_schema_version(report: dict[str, Any]) -> str:
    meta = report.get("meta")
    version = meta.get("schema_version") if isinstance(meta, dict) else None
    if not isinstance(version, str) or not version.strip():
        raise SchemaVersionMismatch("Report has no usable meta.schema_version.")
    return version.strip()


def _check_schema(report: dict[str, Any]) -> None:
    validator = Draft202012Validator(_parse_strict_json(_load_schema_text()))
    error = best_match(validator.iter_errors(report))
    if error is not None:
        raise error


def _check_prediction(report: dict[str, Any]) -> None:
    """
    Cross-field rules the schema cannot express:
      - risk_level is the tier of health_index
      - decision.applied is true exactly when the default action was recommended
    """
    pred = report.get("prediction")
    if not isinstance(pred, dict):
        return

    health = pred.get("health_index")
    level = pred.get("risk_level")
    if isinstance(health, int) and isinstance(level, str) and risk_level(health) != level:
        raise InconsistentPrediction(
            f"risk_level {level!r} does not match health_index {health} (expected {risk_level(health)!r})."
        )

    decision = report.get("decision")
    if isinstance(decision, dict) and "applied" in decision:
        applied = pred.get("recommended_action") == decision.get("default_action")
        if bool(decision["applied"]) != applied:
            raise InconsistentPrediction("decision.applied disagrees with prediction.recommended_action.")


def validate_json(path: str | Path, *, expected_schema_version: str = EXPECTED_SCHEMA_VERSION) -> ValidationResult:
    """
    Check a Forsee report file in order: strict parse, schema version lock,
    bundled JSON Schema, then prediction consistency. Raises on the first
    failure; returns a short summary otherwise.
    """
    report_path = Path(path)
    if not report_path.is_file():
        raise FileNotFoundError(str(report_path))

    report = _parse_strict_json(report_path.read_text(encoding="utf-8"))

    found = _extract_schema_version(report)
    if found != expected_schema_version:
        raise SchemaVersionMismatch(f"Report schema {found!r} is not the expected {expected_schema_version!r}.")

    _check_schema(report)
    _check_prediction(report)

    asset = report.get("asset")
    pred = report.get("prediction")
    return ValidationResult(
        ok=True,
        schema_version=found,
        asset_id=asset.get("id") if isinstance(asset, dict) else None,
        risk_level=pred.get("risk_level") if isinstance(pred, dict) else None,
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="forsee-validate-json",
        description="Validate a Forsee JSON report (strict JSON, schema, prediction contract).",
    )
    parser.add_argument("path", help="Report JSON written by `forsee --json-out`")
    args = parser.parse_args(argv)

    try:
        result = validate_json(args.path)
    except (OSError, ValueError, ValidationError) as e:
        print(f"ERROR: {e}")
        raise SystemExit(1) from e

    print(f"OK: {args.path} | schema {result.schema_version} | asset {result.asset_id} | risk {result.risk_level}")
    raise SystemExit(0)


if __name__ == "__main__":
    main()
