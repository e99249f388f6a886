import random

import pytest

from forsee.core.contract import ACTION_TEXT_NORMAL
from forsee.core.inference import (
    PredictionResult,
    RiskInferenceEngine,
    SensorWeight,
    health_index,
    recommended_action,
    risk_level,
    risk_rank,
    round_half_up,
)
from forsee.core.registry import AssetProfileRegistry, REGISTRY


def _infer(engine, profile, first_value):
    return engine.infer(profile, {profile.first_sensor.id: first_value})


@pytest.mark.parametrize(
    "value, health, level",
    [
        (0, 85, "LOW"),
        (150, 70, "LOW"),
        (151, 70, "LOW"),
        (160, 69, "MEDIUM"),
        (350, 50, "MEDIUM"),
        (360, 49, "HIGH"),
        (550, 30, "HIGH"),
        (560, 29, "CRITICAL"),
        (1000, 0, "CRITICAL"),
        (-500, 100, "LOW"),
    ],
)
def test_health_and_risk_boundaries(engine, wind_profile, value, health, level):
    r = _infer(engine, wind_profile, str(value))
    assert r.health_index == health
    assert r.risk_level == level


def test_critical_reading_drives_everything_to_floor(engine, wind_profile):
    r = _infer(engine, wind_profile, "1000")
    assert r.health_index == 0
    assert r.rul == 0
    assert r.precursor_probability == 1.0
    assert r.drift_detected is True
    assert r.failure_mode == "Degradation Detected"
    assert r.recommended_action == wind_profile.default_decision.action


def test_default_wind_reading(engine, wind_profile):
    r = _infer(engine, wind_profile, "28")
    assert r.health_index == 82
    assert r.risk_level == "LOW"
    assert r.rul == 98
    assert r.precursor_probability == 0.18
    assert r.confidence == 0.87
    assert r.failure_mode == "Normal Operation"
    assert r.recommended_action == "Continue normal operation. Next scheduled maintenance in 41 days."
    assert r.drift_detected is False


@pytest.mark.parametrize("bad", ["", "abc", None, "abc300", "nan"])
def test_malformed_first_reading_reads_as_zero(engine, wind_profile, bad):
    r = engine.infer(wind_profile, {"gearboxVib": bad})
    assert r.health_index == 85
    assert r.risk_level == "LOW"


@pytest.mark.parametrize(
    "text, health",
    [("300abc", 55), ("150 Hz", 70), ("  550.0e0x", 30)],
)
def test_leading_numeric_text_keeps_its_number(engine, wind_profile, text, health):
    assert engine.infer(wind_profile, {"gearboxVib": text}).health_index == health


def test_missing_first_reading_reads_as_zero(engine, wind_profile):
    assert engine.infer(wind_profile, {}).health_index == 85


def test_only_first_sensor_feeds_health(engine, wind_profile):
    a = engine.infer(wind_profile, {"gearboxVib": "28", "genTemp": "0"})
    b = engine.infer(wind_profile, {"gearboxVib": "28", "genTemp": "999"})
    assert a.health_index == b.health_index


def test_health_is_non_increasing_in_first_reading():
    values = [v / 2 for v in range(-400, 2400)]
    healths = [health_index(v) for v in values]
    assert all(h2 <= h1 for h1, h2 in zip(healths, healths[1:]))
    assert all(0 <= h <= 100 for h in healths)


def test_risk_severity_never_drops_as_first_reading_rises(engine, wind_profile):
    ranks = [
        risk_rank(_infer(engine, wind_profile, str(v / 4)).risk_level) for v in range(-400, 4400)
    ]
    assert all(r2 >= r1 for r1, r2 in zip(ranks, ranks[1:]))
    assert ranks[0] == 0 and ranks[-1] == 3


def test_health_strictly_decreases_over_ten_unit_steps():
    for v in range(0, 850, 10):
        assert health_index(v + 10) < health_index(v)


def test_outputs_consistent_with_health(engine):
    for profile in REGISTRY.list():
        if engine.has_override(profile.id):
            continue
        for v in ("0", "100", "300", "480", "700", "900"):
            r = _infer(engine, profile, v)
            h = r.health_index
            assert r.risk_level == risk_level(h)
            assert r.rul == round_half_up(h * 1.2)
            assert r.drift_detected == (h < 40)
            if h < 50:
                assert r.recommended_action == profile.default_decision.action
                assert r.failure_mode == "Degradation Detected"
            else:
                assert r.recommended_action == ACTION_TEXT_NORMAL.format(days=round_half_up(h / 2))
                assert r.failure_mode == "Normal Operation"


def test_risk_rank_orders_levels():
    assert [risk_rank(x) for x in ("LOW", "MEDIUM", "HIGH", "CRITICAL")] == [0, 1, 2, 3]
    assert risk_rank("low") == 0
    assert risk_rank("unknown") == 4


def test_recommended_action_rounds_half_up(wind_profile):
    assert recommended_action(wind_profile, 51) == ACTION_TEXT_NORMAL.format(days=26)
    assert recommended_action(wind_profile, 50) == ACTION_TEXT_NORMAL.format(days=25)
    assert recommended_action(wind_profile, 49) == wind_profile.default_decision.action


def test_top_sensors_use_first_four_labels(engine, wind_profile):
    r = _infer(engine, wind_profile, "28")
    assert [s.name for s in r.top_sensors] == [
        "Gearbox Vibration",
        "Rotor Speed",
        "Generator Temperature",
        "Acoustic Emission",
    ]


def test_top_sensor_weights_bounded_and_ordered_by_base(wind_profile):
    engine = RiskInferenceEngine()
    for seed in range(50):
        r = engine.infer(wind_profile, {}, rng=random.Random(seed))
        weights = [s.weight for s in r.top_sensors]
        assert all(10 <= w < 50 for w in weights)
        assert 40 <= weights[0] < 50
        assert 16 <= weights[3] < 26


def test_same_seed_same_result(wind_profile):
    a = RiskInferenceEngine(seed=3).infer(wind_profile, {"gearboxVib": "28"})
    b = RiskInferenceEngine(seed=3).infer(wind_profile, {"gearboxVib": "28"})
    assert a == b


def test_jitter_does_not_touch_decision_fields(wind_profile):
    a = RiskInferenceEngine(seed=1).infer(wind_profile, {"gearboxVib": "420"})
    b = RiskInferenceEngine(seed=2).infer(wind_profile, {"gearboxVib": "420"})

    def decision_fields(r):
        return {k: v for k, v in r.to_dict().items() if k != "top_sensors"}

    assert decision_fields(a) == decision_fields(b)
    assert [s.name for s in a.top_sensors] == [s.name for s in b.top_sensors]


def test_laptop_override_ignores_readings(engine):
    laptops = REGISTRY.get("laptops")
    for v in ("0", "50", "100", "garbage"):
        r = _infer(engine, laptops, v)
        assert r.rul == 270
        assert r.health_index == 62
        assert r.risk_level == "MEDIUM"
        assert r.precursor_probability == 0.71
        assert r.confidence == 0.89
        assert r.failure_mode == "Thermal Degradation"
        assert [(s.name, s.weight) for s in r.top_sensors] == [
            ("CPU Temp", 45),
            ("Battery Cycles", 30),
            ("Fan Speed", 25),
        ]
        assert r.recommended_action == (
            "Reduce sustained high-load usage and inspect cooling system within 2 weeks"
        )
        assert r.drift_detected is True


def test_registered_override_replaces_generic_policy(wind_profile):
    fixed = PredictionResult(
        rul=1,
        health_index=5,
        risk_level="CRITICAL",
        precursor_probability=0.95,
        confidence=0.5,
        failure_mode="Blade Crack",
        top_sensors=(SensorWeight("Acoustic Emission", 50),),
        recommended_action="Stop turbine",
        drift_detected=False,
    )
    engine = RiskInferenceEngine(overrides={})
    assert not engine.has_override("laptops")
    engine.register_override("wind-turbines", lambda: fixed)
    assert engine.infer(wind_profile, {"gearboxVib": "0"}) is fixed


def test_profile_with_fewer_than_four_sensors(engine):
    rec = {
        "id": "pumps",
        "title": "Pump",
        "sensors": [("flow", "Flow", "l/s", 0, 10, "5"), ("head", "Head", "m", 0, 80, "40")],
        "precursor": {"probability": 0.1, "status": "Not Detected", "explanation": ""},
        "data_drift": {"detected": False, "severity": "Low", "explanation": ""},
        "failure_cluster": {"id": "CL-P", "label": "Cavitation", "description": ""},
        "economics": {"potential_cost": "$1", "downtime_cost": "$1 / hr"},
        "default_decision": {"action": "Inspect impeller"},
    }
    pump = AssetProfileRegistry.from_records([rec], default_id="pumps").default
    r = engine.infer(pump, {"flow": "900"})
    assert [s.name for s in r.top_sensors] == ["Flow", "Head"]
    assert r.recommended_action == "Inspect impeller"
