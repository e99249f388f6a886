import pytest

from forsee.core.access import AccessControlGate
from forsee.core.inference import RiskInferenceEngine
from forsee.core.registry import REGISTRY


@pytest.fixture
def wind_profile():
    """Default profile; first sensor is gearboxVib (0-50 Hz)."""
    return REGISTRY.get("wind-turbines")


@pytest.fixture
def engine() -> RiskInferenceEngine:
    return RiskInferenceEngine(seed=7)


@pytest.fixture
def role_requests() -> list:
    return []


@pytest.fixture
def gate(role_requests) -> AccessControlGate:
    """Gate whose engineer requests land in `role_requests` (admin review queue)."""
    return AccessControlGate(request_sink=role_requests.append)
