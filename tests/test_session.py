import random

import pytest

from forsee.core.access import AccessControlGate, Role
from forsee.core.inference import PredictionResult, SensorWeight
from forsee.core.session import AccessDenied, SessionOrchestrator, Surface


def _session(gate=None, **kw):
    return SessionOrchestrator(gate=gate or AccessControlGate(), **kw)


def test_surface_follows_gate_state():
    s = _session()
    assert s.surface() is Surface.SIGN_IN
    s.gate.authenticate("ada")
    assert s.surface() is Surface.ROLE_SELECTION
    s.gate.select_role(Role.ENGINEER)
    assert s.surface() is Surface.AWAITING_APPROVAL
    s.gate.continue_as_viewer()
    assert s.surface() is Surface.DASHBOARD
    s.gate.grant(Role.ENGINEER)
    assert s.surface() is Surface.DASHBOARD
    s.gate.sign_out()
    assert s.surface() is Surface.SIGN_IN


@pytest.mark.parametrize("role_step", [None, "pending"])
def test_dashboard_blocked_without_role(role_step):
    s = _session()
    s.gate.authenticate("ada")
    if role_step == "pending":
        s.gate.select_role(Role.ENGINEER)
    with pytest.raises(AccessDenied):
        s.open_asset("wind-turbines")
    with pytest.raises(AccessDenied):
        s.run_prediction("wind-turbines", {})


def test_access_denied_is_permission_error():
    with pytest.raises(PermissionError):
        _session().open_asset(None)


@pytest.fixture
def viewer_session():
    s = _session()
    s.gate.authenticate("ada")
    s.gate.select_role(Role.VIEWER)
    return s


def test_open_asset_falls_back_to_default(viewer_session):
    assert viewer_session.open_asset("nope").id == "wind-turbines"
    assert viewer_session.open_asset("servers").id == "servers"


def test_prediction_prefills_profile_defaults(viewer_session):
    out = viewer_session.run_prediction("wind-turbines", {"genTemp": "101"}, rng=random.Random(0))
    assert out.asset_id == "wind-turbines"
    assert out.asset_title == "Wind Turbine"
    assert out.inputs == {"gearboxVib": "28", "rotorSpeed": "14", "genTemp": "101", "acoustic": "72"}
    assert out.result.health_index == 82
    assert out.notes == []


def test_prediction_drops_undeclared_ids_and_notes_bad_values(viewer_session):
    out = viewer_session.run_prediction("wind-turbines", {"gearboxVib": "abc", "bogus": "1"})
    assert "bogus" not in out.inputs
    assert out.inputs["gearboxVib"] == "abc"
    assert out.result.health_index == 85
    assert any("not numeric" in n for n in out.notes)


def test_viewer_cannot_submit_feedback(viewer_session):
    out = viewer_session.run_prediction("wind-turbines")
    with pytest.raises(AccessDenied):
        viewer_session.submit_feedback(out, accepted=True)


def test_engineer_feedback_reaches_sink():
    received = []
    s = _session(feedback_sink=received.append)
    s.gate.authenticate("ada")
    s.gate.select_role(Role.ENGINEER)
    s.gate.grant(Role.ENGINEER)

    out = s.run_prediction("wind-turbines", {"gearboxVib": "900"})
    record = s.submit_feedback(out, accepted=False, note="bearing replaced last week")

    assert received == [record]
    assert record.user_name == "ada"
    assert record.asset_id == "wind-turbines"
    assert record.accepted is False
    assert record.recommended_action == "Schedule Bearing Replacement Window"


class _FixedProvider:
    def __init__(self):
        self.calls = []

    def infer(self, profile, readings):
        self.calls.append((profile.id, dict(readings)))
        return PredictionResult(
            rul=10,
            health_index=40,
            risk_level="HIGH",
            precursor_probability=0.6,
            confidence=0.9,
            failure_mode="Custom",
            top_sensors=(SensorWeight("x", 20),),
            recommended_action="Custom action",
            drift_detected=False,
        )


def test_alternative_provider_is_used(viewer_session):
    provider = _FixedProvider()
    s = SessionOrchestrator(gate=viewer_session.gate, provider=provider)
    out = s.run_prediction("servers", rng=random.Random(1))
    assert out.result.failure_mode == "Custom"
    assert provider.calls[0][0] == "servers"
