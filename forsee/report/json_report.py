from __future__ import annotations

import json
import math
from enum import Enum
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd

from forsee.core.profiles import AssetProfile
from forsee.core.session import PredictionOutcome


def _json_safe(x: Any) -> Any:
    """
    Coerce a report value into something `json.dumps(allow_nan=False)` accepts.

    Non-finite floats and pandas NA become null; numpy scalars, enums and
    timestamps collapse to plain values; containers are walked recursively.
    """
    if isinstance(x, dict):
        return {str(k): _json_safe(v) for k, v in x.items()}
    if isinstance(x, (list, tuple)):
        return [_json_safe(v) for v in x]

    if x is None or isinstance(x, (bool, str)):
        return x
    if isinstance(x, pd.Timestamp):
        return None if pd.isna(x) else x.isoformat()
    if isinstance(x, Enum):
        return _json_safe(x.value)
    if isinstance(x, np.generic):
        return _json_safe(x.item())
    if isinstance(x, int):
        return x
    if isinstance(x, float):
        return x if math.isfinite(x) else None
    if x is pd.NA or x is pd.NaT:
        return None
    return str(x)


def _top_sensor_records(outcome: PredictionOutcome) -> list[dict[str, Any]]:
    df = pd.DataFrame(
        [{"name": s.name, "weight": s.weight} for s in outcome.result.top_sensors],
        columns=["name", "weight"],
    )
    if df.empty:
        return []
    df["weight"] = df["weight"].astype(float).round(2)
    df["rank"] = range(1, len(df) + 1)
    return df.to_dict(orient="records")


def build_report_payload(
    *,
    profile: AssetProfile,
    outcome: PredictionOutcome,
    generated_at: str | None,
    run_config: dict[str, str] | None,
    notes: list[str] | None = None,
) -> dict[str, Any]:
    rc = run_config or {}

    prediction = outcome.result.to_dict()
    prediction["top_sensors"] = _top_sensor_records(outcome)

    decision = profile.default_decision
    payload: dict[str, Any] = {
        # meta keys are fixed by the schema (additionalProperties: false)
        "meta": {
            "generated_at": generated_at,
            "decision_version": rc.get("decision"),
            "schema_version": rc.get("schema"),
        },
        "asset": profile.metadata(),
        "inputs": dict(outcome.inputs),
        "prediction": prediction,
        "decision": {
            "default_action": decision.action,
            "applied": outcome.result.recommended_action == decision.action,
            "why": list(decision.why),
            "consequences": [{"text": c.text, "impact": c.impact} for c in decision.consequences],
        },
        "notes": list(outcome.notes) + list(notes or []),
    }

    return _json_safe(payload)


def write_json_report(
    out_path: str | Path,
    *,
    profile: AssetProfile,
    outcome: PredictionOutcome,
    generated_at: str | None,
    run_config: dict[str, str] | None,
    notes: list[str] | None = None,
) -> Path:
    """Write the prediction report as strict JSON (no NaN/Infinity) and return its path."""
    target = Path(out_path)
    target.parent.mkdir(parents=True, exist_ok=True)

    payload = build_report_payload(
        profile=profile,
        outcome=outcome,
        generated_at=generated_at,
        run_config=run_config,
        notes=notes,
    )

    text = json.dumps(payload, indent=2, allow_nan=False, ensure_ascii=False)
    target.write_text(text + "\n", encoding="utf-8")
    return target
