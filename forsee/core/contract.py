# forsee/core/contract.py
"""
Forsee Decision Contract

This module defines the locked thresholds and versioning for how Forsee
maps sensor readings → health, risk tier and recommended action.

If you change any constants in here, bump FORSEE_DECISION_VERSION.
"""

FORSEE_DECISION_VERSION = "0.1.0"

# Registry fallback for unknown / empty asset ids
DEFAULT_PROFILE_ID = "wind-turbines"

# Health index: clamp(BASE - SLOPE * first_sensor_value, 0, 100)
HEALTH_BASE = 85.0
HEALTH_SLOPE = 0.1
HEALTH_MIN = 0
HEALTH_MAX = 100

# Risk tiers (lower bound inclusive)
RISK_LOW_AT = 70
RISK_MEDIUM_AT = 50
RISK_HIGH_AT = 30

# Remaining useful life = health * factor
RUL_FACTOR = 1.2

# Generic path confidence (mocked model)
GENERIC_CONFIDENCE = 0.87

# Below this the profile's default decision applies
DEGRADED_BELOW = 50

# Below this the inputs are flagged as drifting from the reference baseline
DRIFT_BELOW = 40

# Top sensor weighting: max(FLOOR, BASE - STEP * index + jitter), jitter in [0, SPAN)
TOP_SENSOR_COUNT = 4
TOP_SENSOR_WEIGHT_BASE = 40.0
TOP_SENSOR_WEIGHT_STEP = 8.0
TOP_SENSOR_WEIGHT_FLOOR = 10.0
TOP_SENSOR_JITTER_SPAN = 10.0

FAILURE_MODE_DEGRADED = "Degradation Detected"
FAILURE_MODE_NORMAL = "Normal Operation"

ACTION_TEXT_NORMAL = "Continue normal operation. Next scheduled maintenance in {days} days."
