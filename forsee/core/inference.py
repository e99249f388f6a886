from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Protocol

import numpy as np

from forsee.core.contract import (
    ACTION_TEXT_NORMAL,
    DEGRADED_BELOW,
    DRIFT_BELOW,
    FAILURE_MODE_DEGRADED,
    FAILURE_MODE_NORMAL,
    GENERIC_CONFIDENCE,
    HEALTH_BASE,
    HEALTH_MAX,
    HEALTH_MIN,
    HEALTH_SLOPE,
    RISK_HIGH_AT,
    RISK_LOW_AT,
    RISK_MEDIUM_AT,
    RUL_FACTOR,
    TOP_SENSOR_COUNT,
    TOP_SENSOR_JITTER_SPAN,
    TOP_SENSOR_WEIGHT_BASE,
    TOP_SENSOR_WEIGHT_FLOOR,
    TOP_SENSOR_WEIGHT_STEP,
)
from forsee.core.ingest import parse_reading
from forsee.core.profiles import AssetProfile

logger = logging.getLogger(__name__)

RISK_LEVELS = ("LOW", "MEDIUM", "HIGH", "CRITICAL")


@dataclass(frozen=True)
class SensorWeight:
    name: str
    weight: float


@dataclass(frozen=True)
class PredictionResult:
    rul: int
    health_index: int
    risk_level: str
    precursor_probability: float
    confidence: float
    failure_mode: str
    top_sensors: tuple[SensorWeight, ...]
    recommended_action: str
    drift_detected: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "rul": self.rul,
            "health_index": self.health_index,
            "risk_level": self.risk_level,
            "precursor_probability": self.precursor_probability,
            "confidence": self.confidence,
            "failure_mode": self.failure_mode,
            "top_sensors": [{"name": s.name, "weight": s.weight} for s in self.top_sensors],
            "recommended_action": self.recommended_action,
            "drift_detected": self.drift_detected,
        }


class PredictionProvider(Protocol):
    def infer(self, profile: AssetProfile, readings: Mapping[str, Any]) -> PredictionResult:
        ...


OverrideFactory = Callable[[], PredictionResult]


# ----------------------------
# Policy helpers
# ----------------------------

def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def health_index(first_value: float) -> int:
    raw = HEALTH_BASE - HEALTH_SLOPE * first_value
    return round_half_up(float(np.clip(raw, HEALTH_MIN, HEALTH_MAX)))


def risk_level(health: float) -> str:
    if health >= RISK_LOW_AT:
        return "LOW"
    if health >= RISK_MEDIUM_AT:
        return "MEDIUM"
    if health >= RISK_HIGH_AT:
        return "HIGH"
    return "CRITICAL"


def risk_rank(level: str) -> int:
    """0 = least severe. Unknown levels sort as most severe."""
    try:
        return RISK_LEVELS.index(str(level).upper())
    except ValueError:
        return len(RISK_LEVELS)


def recommended_action(profile: AssetProfile, health: int) -> str:
    if health < DEGRADED_BELOW:
        return profile.default_decision.action
    return ACTION_TEXT_NORMAL.format(days=round_half_up(health / 2))


def top_sensor_weights(profile: AssetProfile, rng: random.Random) -> tuple[SensorWeight, ...]:
    """Display-only ranking of the first declared sensors; weights lie in [10, 50)."""
    out = []
    for i, s in enumerate(profile.sensors[:TOP_SENSOR_COUNT]):
        jitter = rng.random() * TOP_SENSOR_JITTER_SPAN
        w = max(TOP_SENSOR_WEIGHT_FLOOR, TOP_SENSOR_WEIGHT_BASE - TOP_SENSOR_WEIGHT_STEP * i + jitter)
        out.append(SensorWeight(name=s.label, weight=w))
    return tuple(out)


# ----------------------------
# Overrides
# ----------------------------

def laptop_result() -> PredictionResult:
    return PredictionResult(
        rul=270,  # ~9 months in days
        health_index=62,
        risk_level="MEDIUM",
        precursor_probability=0.71,
        confidence=0.89,
        failure_mode="Thermal Degradation",
        top_sensors=(
            SensorWeight("CPU Temp", 45),
            SensorWeight("Battery Cycles", 30),
            SensorWeight("Fan Speed", 25),
        ),
        recommended_action="Reduce sustained high-load usage and inspect cooling system within 2 weeks",
        drift_detected=True,
    )


DEFAULT_OVERRIDES: dict[str, OverrideFactory] = {
    "laptops": laptop_result,
}


# ----------------------------
# Engine
# ----------------------------

class RiskInferenceEngine:
    """
    Mocked risk model: (profile, readings) -> PredictionResult.

    Pure apart from the jitter on top-sensor weights. Each call draws from
    its own random.Random(seed) unless a generator is passed explicitly,
    so concurrent calls share no state.
    """

    def __init__(
        self,
        overrides: Mapping[str, OverrideFactory] | None = None,
        seed: int | None = None,
    ) -> None:
        self._overrides: dict[str, OverrideFactory] = dict(
            DEFAULT_OVERRIDES if overrides is None else overrides
        )
        self.seed = seed

    def register_override(self, asset_id: str, factory: OverrideFactory) -> None:
        self._overrides[asset_id] = factory

    def has_override(self, asset_id: str) -> bool:
        return asset_id in self._overrides

    def infer(
        self,
        profile: AssetProfile,
        readings: Mapping[str, Any],
        rng: random.Random | None = None,
    ) -> PredictionResult:
        factory = self._overrides.get(profile.id)
        if factory is not None:
            logger.debug("Using fixed prediction override for %s", profile.id)
            return factory()

        rng = rng if rng is not None else random.Random(self.seed)

        first = profile.first_sensor
        v = parse_reading(readings.get(first.id)) if first is not None else 0.0

        health = health_index(v)
        level = risk_level(health)

        result = PredictionResult(
            rul=round_half_up(health * RUL_FACTOR),
            health_index=health,
            risk_level=level,
            precursor_probability=round((100 - health) / 100, 2),
            confidence=GENERIC_CONFIDENCE,
            failure_mode=FAILURE_MODE_DEGRADED if health < DEGRADED_BELOW else FAILURE_MODE_NORMAL,
            top_sensors=top_sensor_weights(profile, rng),
            recommended_action=recommended_action(profile, health),
            drift_detected=health < DRIFT_BELOW,
        )

        logger.info(
            "Inference %s: first=%s value=%g health=%d risk=%s",
            profile.id,
            first.id if first is not None else "-",
            v,
            health,
            level,
        )
        return result
