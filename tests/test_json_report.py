from __future__ import annotations

import json
import math
import random
from pathlib import Path

import numpy as np
import pandas as pd

from forsee.core.access import AccessControlGate, Role
from forsee.core.session import SessionOrchestrator
from forsee.report.json_report import _json_safe, build_report_payload, write_json_report


def _outcome(asset_id: str, readings: dict[str, str]):
    gate = AccessControlGate()
    gate.authenticate("ada")
    gate.select_role(Role.VIEWER)
    session = SessionOrchestrator(gate=gate)
    return session.open_asset(asset_id), session.run_prediction(asset_id, readings, rng=random.Random(0))


def test_json_safe_strips_non_finite_and_numpy_types() -> None:
    got = _json_safe(
        {
            "a": math.nan,
            "b": math.inf,
            "c": np.int64(3),
            "d": np.float64(1.5),
            "e": (Role.ENGINEER, None),
            "f": pd.Timestamp("2026-01-01 08:00"),
            "g": pd.NA,
        }
    )
    assert got == {
        "a": None,
        "b": None,
        "c": 3,
        "d": 1.5,
        "e": ["engineer", None],
        "f": "2026-01-01T08:00:00",
        "g": None,
    }


def test_payload_marks_default_decision_as_applied() -> None:
    profile, outcome = _outcome("cnc-machines", {"spindleVib": "800"})
    payload = build_report_payload(
        profile=profile,
        outcome=outcome,
        generated_at="2026-01-01 00:00",
        run_config={"schema": "v1", "decision": "0.1.0"},
        notes=["extra"],
    )

    assert payload["decision"]["applied"] is True
    assert payload["prediction"]["recommended_action"] == profile.default_decision.action
    assert [r["rank"] for r in payload["prediction"]["top_sensors"]] == [1, 2]
    assert payload["notes"][-1] == "extra"
    assert any("outside expected range" in n for n in payload["notes"])


def _reject_constant(token: str):
    raise ValueError(f"Non-JSON constant encountered: {token}")


def test_written_report_is_strict_json(tmp_path: Path) -> None:
    profile, outcome = _outcome("icu-monitoring", {})
    out = write_json_report(
        tmp_path / "nested" / "r.json",
        profile=profile,
        outcome=outcome,
        generated_at=None,
        run_config=None,
    )

    obj = json.loads(out.read_text(encoding="utf-8"), parse_constant=_reject_constant)
    assert obj["meta"] == {"generated_at": None, "decision_version": None, "schema_version": None}
    assert obj["asset"]["id"] == "icu-monitoring"
