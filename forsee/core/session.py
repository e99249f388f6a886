from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Mapping

from forsee.core.access import AccessControlGate, GateState
from forsee.core.inference import PredictionProvider, PredictionResult, RiskInferenceEngine
from forsee.core.ingest import check_readings
from forsee.core.profiles import AssetProfile
from forsee.core.registry import REGISTRY, AssetProfileRegistry, default_readings

logger = logging.getLogger(__name__)


class AccessDenied(PermissionError):
    """Raised when the session role does not allow the requested operation."""


class Surface(str, Enum):
    SIGN_IN = "sign_in"
    ROLE_SELECTION = "role_selection"
    AWAITING_APPROVAL = "awaiting_approval"
    DASHBOARD = "dashboard"


@dataclass(frozen=True)
class PredictionOutcome:
    asset_id: str
    asset_title: str
    inputs: dict[str, str]
    result: PredictionResult
    notes: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class FeedbackRecord:
    user_name: str
    asset_id: str
    accepted: bool
    note: str
    recommended_action: str
    submitted_at: str


FeedbackSink = Callable[[FeedbackRecord], None]


class SessionOrchestrator:
    """
    One user's session: gate decides what is reachable, registry supplies
    the schema, provider computes the prediction.
    """

    def __init__(
        self,
        gate: AccessControlGate | None = None,
        registry: AssetProfileRegistry | None = None,
        provider: PredictionProvider | None = None,
        feedback_sink: FeedbackSink | None = None,
    ) -> None:
        self.gate = gate or AccessControlGate()
        self.registry = registry or REGISTRY
        self.provider = provider or RiskInferenceEngine()
        self._feedback_sink = feedback_sink

    def surface(self) -> Surface:
        state = self.gate.state
        if state is GateState.UNAUTHENTICATED:
            return Surface.SIGN_IN
        if state is GateState.NEEDS_ROLE:
            return Surface.ROLE_SELECTION
        if state is GateState.PENDING_APPROVAL:
            return Surface.AWAITING_APPROVAL
        return Surface.DASHBOARD

    def _require_view(self, what: str) -> None:
        if not self.gate.can_view():
            logger.warning("%s blocked in state %s", what, self.gate.state.value)
            raise AccessDenied(f"{what} requires viewer or engineer access (state: {self.gate.state.value})")

    def open_asset(self, asset_id: str | None) -> AssetProfile:
        self._require_view("Opening an asset")
        return self.registry.get(asset_id)

    def run_prediction(
        self,
        asset_id: str | None,
        raw_readings: Mapping[str, Any] | None = None,
        rng: random.Random | None = None,
    ) -> PredictionOutcome:
        profile = self.open_asset(asset_id)

        inputs = default_readings(profile)
        for k, v in (raw_readings or {}).items():
            if k in inputs:
                inputs[k] = "" if v is None else str(v)

        if rng is not None and isinstance(self.provider, RiskInferenceEngine):
            result = self.provider.infer(profile, inputs, rng=rng)
        else:
            result = self.provider.infer(profile, inputs)

        return PredictionOutcome(
            asset_id=profile.id,
            asset_title=profile.title,
            inputs=inputs,
            result=result,
            notes=check_readings(profile, inputs),
        )

    def submit_feedback(self, outcome: PredictionOutcome, accepted: bool, note: str = "") -> FeedbackRecord:
        if not self.gate.can_act():
            logger.warning("Feedback blocked in state %s", self.gate.state.value)
            raise AccessDenied(f"Feedback requires engineer access (state: {self.gate.state.value})")

        record = FeedbackRecord(
            user_name=self.gate.user_name or "",
            asset_id=outcome.asset_id,
            accepted=bool(accepted),
            note=str(note),
            recommended_action=outcome.result.recommended_action,
            submitted_at=datetime.now(timezone.utc).isoformat(),
        )
        if self._feedback_sink is not None:
            self._feedback_sink(record)
        logger.info("Feedback from %s on %s (accepted=%s)", record.user_name, record.asset_id, record.accepted)
        return record
