from __future__ import annotations

import logging
from typing import Any, Iterable

from forsee.core.catalog import PROFILE_RECORDS
from forsee.core.contract import DEFAULT_PROFILE_ID
from forsee.core.profiles import (
    DIRECTIONS,
    EVENT_TYPES,
    IMPACTS,
    AssetProfile,
    CognitiveEvent,
    Consequence,
    DataDrift,
    DecisionPolicy,
    DegradationDriver,
    DigitalIdentity,
    Economics,
    FailureCluster,
    Precursor,
    SensorSpec,
)

logger = logging.getLogger(__name__)


# ----------------------------
# Record -> profile
# ----------------------------

def _sensor(rec: Any) -> SensorSpec:
    if isinstance(rec, dict):
        lo, hi = rec.get("input_range", (0, 0))
        return SensorSpec(
            id=str(rec["id"]),
            label=str(rec["label"]),
            unit=str(rec.get("unit", "")),
            input_range=(float(lo), float(hi)),
            default_value=str(rec.get("default_value", "")),
        )
    sid, label, unit, lo, hi, default = rec
    return SensorSpec(sid, label, unit, (float(lo), float(hi)), str(default))


def _driver(rec: Any) -> DegradationDriver:
    factor, direction, impact = (
        (rec["factor"], rec["direction"], rec["impact"]) if isinstance(rec, dict) else rec
    )
    if direction not in DIRECTIONS:
        raise ValueError(f"Invalid driver direction for {factor!r}: {direction!r}")
    if impact not in IMPACTS:
        raise ValueError(f"Invalid driver impact for {factor!r}: {impact!r}")
    return DegradationDriver(factor=factor, direction=direction, impact=impact)


def _event(rec: Any) -> CognitiveEvent:
    if isinstance(rec, dict):
        rec = (rec["time"], rec["description"], rec["type"], rec.get("details"))
    time, description, etype, details = rec
    if etype not in EVENT_TYPES:
        raise ValueError(f"Invalid timeline event type: {etype!r}")
    return CognitiveEvent(time=time, description=description, type=etype, details=details)


def _consequence(rec: Any) -> Consequence:
    if isinstance(rec, dict):
        return Consequence(text=str(rec["text"]), impact=str(rec["impact"]))
    text, impact = rec
    return Consequence(text=str(text), impact=str(impact))


def profile_from_record(rec: dict[str, Any]) -> AssetProfile:
    """
    Build an AssetProfile from a catalog record.

    Raises ValueError when the record breaks a profile invariant
    (duplicate sensor ids, unknown driver/event enums).
    """
    sensors = tuple(_sensor(s) for s in rec.get("sensors", []))

    seen: set[str] = set()
    for s in sensors:
        if s.id in seen:
            raise ValueError(f"Duplicate sensor id {s.id!r} in profile {rec.get('id')!r}")
        seen.add(s.id)

    ident = rec.get("digital_identity", {})
    decision = rec.get("default_decision", {})

    return AssetProfile(
        id=str(rec["id"]),
        title=str(rec.get("title", rec["id"])),
        description=str(rec.get("description", "")),
        location=str(rec.get("location", "")),
        digital_identity=DigitalIdentity(
            age=str(ident.get("age", "N/A")),
            regime=str(ident.get("regime", "N/A")),
            model=str(ident.get("model", "N/A")),
            last_maintenance=str(ident.get("last_maintenance", "N/A")),
        ),
        sensors=sensors,
        degradation_drivers=tuple(_driver(d) for d in rec.get("degradation_drivers", [])),
        cognitive_timeline=tuple(_event(e) for e in rec.get("cognitive_timeline", [])),
        precursor=Precursor(**rec["precursor"]),
        data_drift=DataDrift(**rec["data_drift"]),
        failure_cluster=FailureCluster(**rec["failure_cluster"]),
        economics=Economics(**rec["economics"]),
        default_decision=DecisionPolicy(
            action=str(decision["action"]),
            why=tuple(str(w).strip() for w in decision.get("why", [])),
            consequences=tuple(_consequence(c) for c in decision.get("consequences", [])),
        ),
    )


# ----------------------------
# Registry
# ----------------------------

class AssetProfileRegistry:
    """
    Read-only catalog: asset-type id -> AssetProfile.

    Lookups never fail; unknown or empty ids resolve to the default profile.
    Populated once, then shared by all readers without locking.
    """

    def __init__(self, profiles: Iterable[AssetProfile], default_id: str = DEFAULT_PROFILE_ID) -> None:
        table: dict[str, AssetProfile] = {}
        for p in profiles:
            if p.id in table:
                raise ValueError(f"Duplicate asset profile id: {p.id!r}")
            table[p.id] = p

        if default_id not in table:
            raise ValueError(f"Default profile {default_id!r} is not registered")

        self._profiles = table
        self._default_id = default_id

    @classmethod
    def from_records(
        cls,
        records: Iterable[dict[str, Any]],
        default_id: str = DEFAULT_PROFILE_ID,
    ) -> "AssetProfileRegistry":
        return cls((profile_from_record(r) for r in records), default_id=default_id)

    @property
    def default(self) -> AssetProfile:
        return self._profiles[self._default_id]

    def get(self, asset_id: str | None) -> AssetProfile:
        key = (asset_id or "").strip()
        profile = self._profiles.get(key)
        if profile is None:
            logger.info("Unknown asset id %r; using default profile %r", asset_id, self._default_id)
            return self.default
        return profile

    def list(self) -> list[AssetProfile]:
        return list(self._profiles.values())

    def ids(self) -> list[str]:
        return list(self._profiles.keys())

    def __contains__(self, asset_id: object) -> bool:
        return asset_id in self._profiles

    def __len__(self) -> int:
        return len(self._profiles)


def default_readings(profile: AssetProfile) -> dict[str, str]:
    """Raw-text sensor defaults, in declared order (pre-filled form values)."""
    return {s.id: s.default_value for s in profile.sensors}


REGISTRY = AssetProfileRegistry.from_records(PROFILE_RECORDS)


def get_profile(asset_id: str | None) -> AssetProfile:
    return REGISTRY.get(asset_id)


def list_profiles() -> list[AssetProfile]:
    return REGISTRY.list()
