from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

Direction = Literal["up", "down", "stable"]
Impact = Literal["strong", "moderate", "neutral"]
EventType = Literal["normal", "warning", "critical", "inference"]

DIRECTIONS = ("up", "down", "stable")
IMPACTS = ("strong", "moderate", "neutral")
EVENT_TYPES = ("normal", "warning", "critical", "inference")


@dataclass(frozen=True)
class SensorSpec:
    id: str
    label: str
    unit: str
    input_range: tuple[float, float]
    default_value: str = ""

    @property
    def placeholder(self) -> str:
        lo, hi = self.input_range
        return f"{lo:g}-{hi:g}"


@dataclass(frozen=True)
class DegradationDriver:
    factor: str
    direction: Direction
    impact: Impact


@dataclass(frozen=True)
class CognitiveEvent:
    time: str
    description: str
    type: EventType
    details: str | None = None


@dataclass(frozen=True)
class DigitalIdentity:
    age: str
    regime: str
    model: str
    last_maintenance: str


@dataclass(frozen=True)
class Precursor:
    probability: float
    status: str
    explanation: str


@dataclass(frozen=True)
class DataDrift:
    detected: bool
    severity: str
    explanation: str


@dataclass(frozen=True)
class FailureCluster:
    id: str
    label: str
    description: str


@dataclass(frozen=True)
class Economics:
    potential_cost: str
    downtime_cost: str


@dataclass(frozen=True)
class Consequence:
    text: str
    impact: str


@dataclass(frozen=True)
class DecisionPolicy:
    """Fallback remediation used when inference reports degraded health."""
    action: str
    why: tuple[str, ...] = ()
    consequences: tuple[Consequence, ...] = ()


@dataclass(frozen=True)
class AssetProfile:
    """
    Static descriptor of one monitored asset type.

    Only `sensors` and `default_decision` feed the inference policy; the
    remaining fields are profile metadata passed through to reports as-is.
    """
    id: str
    title: str
    description: str
    location: str
    digital_identity: DigitalIdentity
    sensors: tuple[SensorSpec, ...]
    degradation_drivers: tuple[DegradationDriver, ...]
    cognitive_timeline: tuple[CognitiveEvent, ...]
    precursor: Precursor
    data_drift: DataDrift
    failure_cluster: FailureCluster
    economics: Economics
    default_decision: DecisionPolicy

    @property
    def sensor_ids(self) -> list[str]:
        return [s.id for s in self.sensors]

    @property
    def first_sensor(self) -> SensorSpec | None:
        return self.sensors[0] if self.sensors else None

    def sensor(self, sensor_id: str) -> SensorSpec | None:
        for s in self.sensors:
            if s.id == sensor_id:
                return s
        return None

    def metadata(self) -> dict[str, Any]:
        """Descriptive profile fields in report-ready form."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "location": self.location,
            "digital_identity": {
                "age": self.digital_identity.age,
                "regime": self.digital_identity.regime,
                "model": self.digital_identity.model,
                "last_maintenance": self.digital_identity.last_maintenance,
            },
            "precursor": {
                "probability": self.precursor.probability,
                "status": self.precursor.status,
                "explanation": self.precursor.explanation,
            },
            "data_drift": {
                "detected": self.data_drift.detected,
                "severity": self.data_drift.severity,
                "explanation": self.data_drift.explanation,
            },
            "failure_cluster": {
                "id": self.failure_cluster.id,
                "label": self.failure_cluster.label,
                "description": self.failure_cluster.description,
            },
            "economics": {
                "potential_cost": self.economics.potential_cost,
                "downtime_cost": self.economics.downtime_cost,
            },
        }
