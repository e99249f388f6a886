from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import pandas as pd

from forsee.core.profiles import AssetProfile

logger = logging.getLogger(__name__)


REQUIRED_COLUMNS = ["sensor_id", "value"]


@dataclass(frozen=True)
class IngestResult:
    readings: dict[str, str]
    issues: list[str]


# Longest leading decimal literal, as a browser's parseFloat reads form input
_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def leading_number(text: str) -> float | None:
    """
    Numeric prefix of `text` ("300abc" -> 300.0, " 1.5e2 rpm" -> 150.0).
    None when the text does not start with a finite number.
    """
    m = _LEADING_NUMBER.match(text.lstrip())
    if m is None:
        return None
    value = float(m.group(0))
    return value if math.isfinite(value) else None


def parse_reading(raw: Any, default: float = 0.0) -> float:
    """
    Parse one user-entered value. Never raises.

    Leading numeric text is kept ("12abc" reads as 12). Missing, blank,
    non-numeric or non-finite input returns `default`.
    """
    if raw is None or isinstance(raw, bool):
        return default
    value = leading_number(str(raw))
    if value is None:
        logger.debug("Unparseable reading %r; using %s", raw, default)
        return default
    return value


def parse_readings(profile: AssetProfile, raw: Mapping[str, Any] | None) -> dict[str, float]:
    """
    Raw text per sensor id -> numeric readings for the profile's sensors.

    Ids the profile does not declare are dropped; declared sensors that are
    missing or malformed read as 0.
    """
    raw = raw or {}
    unknown = [k for k in raw if profile.sensor(str(k)) is None]
    if unknown:
        logger.debug("Ignoring readings for undeclared sensors on %s: %s", profile.id, unknown)

    return {s.id: parse_reading(raw.get(s.id)) for s in profile.sensors}


def load_readings_csv(path: str | Path) -> IngestResult:
    """
    Load a readings CSV and validate basic schema.

    Expected columns:
    sensor_id, value

    Values are kept as raw text; numeric parsing happens at the inference
    boundary so malformed entries still reach it (and read as 0).
    """
    path = Path(path)
    issues: list[str] = []

    if not path.exists():
        return IngestResult(readings={}, issues=[f"File not found: {path}"])

    df = pd.read_csv(path, dtype=str, keep_default_na=False)

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        issues.append(f"Missing required columns: {missing}")
        return IngestResult(readings={}, issues=issues)

    df["sensor_id"] = df["sensor_id"].astype(str).str.strip()
    df["value"] = df["value"].astype(str).str.strip()
    df = df[df["sensor_id"] != ""]

    parsed = df["value"].map(leading_number)
    bad = int(parsed.isna().sum())
    if bad:
        issues.append(f"{bad} rows have invalid numeric values (read as 0)")
    partial = int((parsed.notna() & pd.to_numeric(df["value"], errors="coerce").isna()).sum())
    if partial:
        issues.append(f"{partial} rows have trailing text after the number (number kept)")

    dupes = df["sensor_id"][df["sensor_id"].duplicated()].unique().tolist()
    if dupes:
        issues.append(f"Duplicate sensor rows, last value kept: {dupes}")

    readings = dict(zip(df["sensor_id"].tolist(), df["value"].tolist()))
    return IngestResult(readings=readings, issues=issues)


def check_readings(profile: AssetProfile, raw: Mapping[str, Any]) -> list[str]:
    """
    Human-readable notes about readings outside the declared input hints.
    Advisory only; inference runs regardless.
    """
    notes: list[str] = []
    for s in profile.sensors:
        if s.id not in raw:
            notes.append(f"{s.label}: no value supplied")
            continue
        text = str(raw[s.id]).strip()
        value = leading_number(text)
        if value is None:
            notes.append(f"{s.label}: '{text}' is not numeric (read as 0)")
            continue
        if pd.isna(pd.to_numeric(text, errors="coerce")):
            notes.append(f"{s.label}: '{text}' read as {value:g}")
        lo, hi = s.input_range
        if value < lo or value > hi:
            notes.append(f"{s.label}: {value:g} {s.unit} outside expected range {s.placeholder}")
    return notes
