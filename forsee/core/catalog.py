"""
Built-in asset profile table.

One record per asset-type id, in catalog display order. Records are plain
dicts so the same shape can be fed to AssetProfileRegistry.from_records()
from any other source. Sensor tuples are (id, label, unit, min, max, default).
"""
from __future__ import annotations

from typing import Any

PROFILE_RECORDS: list[dict[str, Any]] = [
    {
        "id": "power-transformers",
        "title": "Power Transformer",
        "description": "Critical Grid Infrastructure",
        "location": "Substation Alpha-7, Detroit",
        "digital_identity": {
            "age": "14.2 Years",
            "regime": "Base Load (Continuous)",
            "model": "Tx-Net-v4.2 (DGA)",
            "last_maintenance": "3 Months Ago",
        },
        "sensors": [
            ("oilTemp", "Oil Temperature", "°C", 20, 100, "85"),
            ("windingTemp", "Winding Temperature", "°C", 40, 130, "92"),
            ("loadCurrent", "Load Current", "A", 0, 2000, "1450"),
            ("hydrogen", "Hydrogen Gas", "ppm", 0, 1000, "120"),
            ("partialDischarge", "Partial Discharge", "pC", 0, 500, "45"),
        ],
        "cognitive_timeline": [
            ("-2h 15m", "Gas generation slope increased", "warning", "Rate: +18%"),
            ("-45m", "Thermal margin reduced below safe envelope", "inference", "Margin: < 5°C"),
            ("-12m", "Failure cluster shift", "critical", "Normal → Insulation Degradation"),
            ("Now", "RUL revised due to accelerated gas evolution", "inference", "-420 Cycles"),
        ],
        "degradation_drivers": [
            ("Hydrogen Gas", "up", "strong"),
            ("Winding Temp", "up", "moderate"),
            ("Partial Discharge", "up", "strong"),
            ("Load Current", "stable", "neutral"),
        ],
        "precursor": {
            "probability": 0.82,
            "status": "Detected",
            "explanation": "High-frequency gas evolution pattern matches early-stage insulation failure.",
        },
        "data_drift": {
            "detected": True,
            "severity": "Medium",
            "explanation": "Input load distributions have shifted 15% from training baseline.",
        },
        "failure_cluster": {
            "id": "CL-992",
            "label": "Dielectric Breakdown",
            "description": "Similar to 2022 failure in Ohio unit.",
        },
        "economics": {"potential_cost": "$450,000", "downtime_cost": "$42,000 / hr"},
        "default_decision": {
            "action": "Schedule Oil Analysis & Load Reduction",
            "why": [
                "Hydrogen gas generation > 100ppm/day",
                "Insulation life impact: -14%",
                "Confirmed thermal stress pattern",
            ],
            "consequences": [
                ("Catastrophic Dielectric Failure Probability", "42%"),
                ("Est. Replacement Cost", "$2.4M"),
            ],
        },
    },
    {
        "id": "wind-turbines",
        "title": "Wind Turbine",
        "description": "Renewable Energy Unit",
        "location": "Offshore Block B, North Sea",
        "digital_identity": {
            "age": "6.5 Years",
            "regime": "Variable (High Wind)",
            "model": "Aero-Dyn-v9 (Vib)",
            "last_maintenance": "6 Months Ago",
        },
        "sensors": [
            ("gearboxVib", "Gearbox Vibration", "Hz", 0, 50, "28"),
            ("rotorSpeed", "Rotor Speed", "RPM", 0, 20, "14"),
            ("genTemp", "Generator Temperature", "°C", 20, 120, "98"),
            ("acoustic", "Acoustic Emission", "dB", 0, 100, "72"),
        ],
        "cognitive_timeline": [
            ("-4h 30m", "Vibration spectral shift detected", "inference", "Harmonic: 3x"),
            ("-1h 20m", "Acoustic Forsee Probability crossed 0.7", "warning", "Threshold: 0.65"),
            ("-10m", "Failure cluster: Healthy → Gearbox Bearing Wear", "critical", "Confidence: 92%"),
        ],
        "degradation_drivers": [
            ("Gearbox Vibration", "up", "strong"),
            ("Acoustic Emission", "up", "strong"),
            ("Generator Temp", "up", "moderate"),
        ],
        "precursor": {
            "probability": 0.74,
            "status": "Detected",
            "explanation": "Harmonic vibration levels are tracking gearbox fatigue signatures.",
        },
        "data_drift": {
            "detected": False,
            "severity": "Low",
            "explanation": "Model inputs remain within training bounds.",
        },
        "failure_cluster": {
            "id": "CL-441",
            "label": "Gearbox Bearing Wear",
            "description": "Signature matches G-Series fatigue patterns.",
        },
        "economics": {"potential_cost": "$120,000", "downtime_cost": "$1,500 / hr"},
        "default_decision": {
            "action": "Schedule Bearing Replacement Window",
            "why": [
                "Vibration RMS > ISO limit",
                "Acoustic signature matches 'Inner Race Defect'",
                "RUL < 30 days",
            ],
            "consequences": [
                ("Gearbox Seizure Risk", "High"),
                ("Crane Deployment Cost", "+$45k"),
            ],
        },
    },
    {
        "id": "industrial-motors",
        "title": "Industrial Motor",
        "description": "HVAC & Manufacturing Driver",
        "location": "Assembly Line 4, Factory 12",
        "digital_identity": {
            "age": "3.1 Years",
            "regime": "Cyclic Start/Stop",
            "model": "Induct-X-v2",
            "last_maintenance": "1 Month Ago",
        },
        "sensors": [
            ("vibration", "Vibration", "mm/s", 0, 25, "8"),
            ("statorCurrent", "Stator Current", "A", 0, 500, "320"),
            ("temperature", "Motor Temperature", "°C", 20, 100, "78"),
            ("rpm", "RPM", "rpm", 0, 3600, "1750"),
        ],
        "cognitive_timeline": [
            ("-5h", "Power factor drift detected", "inference", "Delta: 0.05"),
            ("-2h", "Vibration RMS slope increased", "warning", "Slope: +5%/hr"),
            ("Now", "Failure cluster: Normal → Bearing Inner Race Wear", "critical", "Simulated"),
        ],
        "degradation_drivers": [
            ("Vibration", "up", "strong"),
            ("Motor Temp", "up", "moderate"),
            ("Stator Current", "up", "moderate"),
        ],
        "precursor": {
            "probability": 0.65,
            "status": "Detected",
            "explanation": "Vibration envelope acceleration suggests bearing inner race wear.",
        },
        "data_drift": {
            "detected": True,
            "severity": "Low",
            "explanation": "Slight drift in power factor correlations.",
        },
        "failure_cluster": {
            "id": "CL-102",
            "label": "Inner Race Wear",
            "description": "Consistent with high-duty cycle motors.",
        },
        "economics": {"potential_cost": "$15,000", "downtime_cost": "$5,000 / hr (Line Stop)"},
        "default_decision": {
            "action": "Inspect Bearings & Lubrication",
            "why": [
                "Vibration envelope high in 2kHz band",
                "Motor temperature rise correlates with load",
                "Forsee Probability > 60%",
            ],
            "consequences": [
                ("Catastrophic Seizure Probability", "35%"),
                ("Production Halt Risk", "Critical"),
            ],
        },
    },
    {
        "id": "icu-monitoring",
        "title": "ICU Patient Monitor",
        "description": "Critical Care Telemetry",
        "location": "Unit 4, Mercy Hospital",
        "digital_identity": {
            "age": "N/A",
            "regime": "Triage: Critical",
            "model": "Bio-Sense-AI-v1",
            "last_maintenance": "Daily Calib",
        },
        "sensors": [
            ("ecg", "ECG Variability", "ms", 0, 100, "45"),
            ("spo2", "SpO2", "%", 70, 100, "94"),
            ("hr", "Heart Rate", "bpm", 40, 200, "112"),
            ("resp", "Respiration Rate", "bpm", 10, 40, "28"),
        ],
        "cognitive_timeline": [
            ("-15m", "Heart rate variability decreased", "warning", "Signs of stress"),
            ("-8m", "Oxygen saturation trend worsening", "critical", "Slope -2%"),
            ("-2m", "Failure cluster: Stable → Respiratory Risk", "critical", "Code Blue Risk"),
        ],
        "degradation_drivers": [
            ("SpO2", "down", "strong"),
            ("Respiration Rate", "up", "moderate"),
            ("ECG Variability", "down", "strong"),
        ],
        "precursor": {
            "probability": 0.88,
            "status": "Detected",
            "explanation": "Sepsis onset pattern identified via cardiac-respiratory decoupling.",
        },
        "data_drift": {
            "detected": False,
            "severity": "Low",
            "explanation": "Clinical baseline stable.",
        },
        "failure_cluster": {
            "id": "CL-BIO",
            "label": "Respiratory Failure",
            "description": "Matches acute decompensation cluster.",
        },
        "economics": {"potential_cost": "Patient Safety Incident", "downtime_cost": "Critical Life Risk"},
        "default_decision": {
            "action": "Escalate Monitoring / Clinical Intervention",
            "why": [
                "Respiratory decompensation pattern detected",
                "SpO2/HR decoupling",
                "Sepsis Forsee Probability > 0.8",
            ],
            "consequences": [
                ("Acute Event Probability", "High"),
                ("Response Window", "< 10 min"),
            ],
        },
    },
    {
        "id": "servers",
        "title": "Data Center Server",
        "description": "High-Performance Compute Node",
        "location": "Rack 42, Data Center East",
        "digital_identity": {
            "age": "1.5 Years",
            "regime": "Peak Load",
            "model": "Blade-X9",
            "last_maintenance": "2 Weeks Ago",
        },
        "sensors": [
            ("cpuTemp", "CPU Temperature", "°C", 20, 100, "88"),
            ("gpuTemp", "GPU Temperature", "°C", 20, 100, "92"),
            ("fanSpeed", "Fan Speed", "RPM", 0, 10000, "8500"),
            ("power", "Power Draw", "W", 0, 2000, "1200"),
        ],
        "cognitive_timeline": [
            ("-1h", "Cooling efficiency dropped", "warning", "Delta T decreased"),
            ("-30m", "Thermal headroom reduced", "inference", "< 5% margin"),
            ("Now", "Failure probability increased under peak load", "critical", "Throttling imminent"),
        ],
        "degradation_drivers": [
            ("CPU Temp", "up", "strong"),
            ("Fan Speed", "up", "moderate"),
            ("Power Draw", "up", "moderate"),
        ],
        "precursor": {
            "probability": 0.68,
            "status": "Detected",
            "explanation": "Cooling saturation curve approaching critical thermal limit.",
        },
        "data_drift": {
            "detected": True,
            "severity": "High",
            "explanation": "Workload distribution has shifted significantly from model training.",
        },
        "failure_cluster": {
            "id": "CL-SRV",
            "label": "Thermal Shutdown",
            "description": "Matches peak-load overheating events.",
        },
        "economics": {"potential_cost": "$12,000 (Hardware)", "downtime_cost": "$80,000 / hr (SLA Breach)"},
        "default_decision": {
            "action": "Redistribute Load & Schedule Cooling Maintenance",
            "why": [
                "Junction temp nearing T-max",
                "Fan duty cycle at 100%",
                "Efficiency curve degrading",
            ],
            "consequences": [
                ("Thermal Shutdown Probability", "65%"),
                ("Service Degradation", "Likely"),
            ],
        },
    },
    {
        "id": "laptops",
        "title": "Laptop Health & Intelligence",
        "description": "Enterprise Computing Device",
        "location": "Mobile / Remote Unit",
        "digital_identity": {
            "age": "1.2 Years",
            "regime": "Developer Workload",
            "model": "ThinkPad-X1-Carbon-G10",
            "last_maintenance": "3 Months Ago",
        },
        "sensors": [
            ("cpu_temperature", "CPU Temperature", "°C", 30, 100, "78"),
            ("battery_health", "Battery Health", "%", 0, 100, "86"),
            ("fan_speed", "Fan Speed", "RPM", 0, 6000, "5200"),
            ("cpu_usage", "CPU Usage", "%", 0, 100, "82"),
            ("ram_usage", "RAM Usage", "%", 0, 100, "68"),
        ],
        "cognitive_timeline": [
            ("-45m", "Thermal throttling detected", "warning", "CPU > 95°C"),
            ("-20m", "Battery discharge rate abnormal", "inference", "-15% in 15m"),
            ("Now", "Sustained high load risk", "critical", "Projected shutdown in 20m"),
        ],
        "degradation_drivers": [
            ("CPU Temperature", "up", "strong"),
            ("Battery Cycles", "up", "moderate"),
            ("Fan Efficiency", "down", "strong"),
        ],
        "precursor": {
            "probability": 0.72,
            "status": "Detected",
            "explanation": "Thermal throttling duration exceeding safety envelope.",
        },
        "data_drift": {
            "detected": False,
            "severity": "Low",
            "explanation": "Baseline usage within normal bounds.",
        },
        "failure_cluster": {
            "id": "CL-LT-1",
            "label": "Thermal Throttling",
            "description": "Matches dust-accumulation profiles.",
        },
        "economics": {"potential_cost": "$2,500 (Replacement)", "downtime_cost": "$150 / hr (Productivity)"},
        "default_decision": {
            "action": "Cooling System Maintenance",
            "why": [
                "Dust accumulation likely",
                "Thermal paste degradation suspect",
                "Airflow obstruction detected",
            ],
            "consequences": [
                ("Hardware Failure Risk", "High"),
                ("Performance Throttling", "Severe"),
            ],
        },
    },
    {
        "id": "bridges",
        "title": "Suspension Bridge",
        "description": "Strategic Transport Link",
        "location": "Golden Gate Bridge, SF",
        "digital_identity": {
            "age": "42 Years",
            "regime": "Heavy Traffic",
            "model": "Civil-Struct-v1",
            "last_maintenance": "1 Year Ago",
        },
        "sensors": [
            ("strain", "Strain", "µE", 0, 1000, "450"),
            ("crack", "Crack Width", "mm", 0, 5, "1.2"),
        ],
        "cognitive_timeline": [
            ("Now", "Crack growth acceleration", "warning", None),
        ],
        "degradation_drivers": [("Strain", "up", "strong")],
        "precursor": {
            "probability": 0.45,
            "status": "Not Detected",
            "explanation": "No immediate fatigue precursors detected.",
        },
        "data_drift": {"detected": False, "severity": "Low", "explanation": "Environmental baseline stable."},
        "failure_cluster": {"id": "CL-CIV", "label": "Fatigue Crack", "description": "Matches 2018 structural drift."},
        "economics": {"potential_cost": "Structural Integrity", "downtime_cost": "Strategic Blockage"},
        "default_decision": {
            "action": "Structural Inspection & Load Restriction",
            "why": ["Fatigue capability check failed"],
            "consequences": [("Safety Factor", "Reduced")],
        },
    },
    {
        "id": "cnc-machines",
        "title": "CNC Machining Center",
        "description": "Precision Manufacturing",
        "location": "Factory Floor 2, Ohio",
        "digital_identity": {
            "age": "4 Years",
            "regime": "24/7 Ops",
            "model": "Precision-X",
            "last_maintenance": "2 Weeks Ago",
        },
        "sensors": [
            ("spindleVib", "Spindle Vib", "mm/s", 0, 10, "4.5"),
            ("toolWear", "Tool Wear", "%", 0, 100, "85"),
        ],
        "cognitive_timeline": [
            ("Now", "Tool wear acceleration", "warning", None),
        ],
        "degradation_drivers": [("Tool Wear", "up", "strong")],
        "precursor": {
            "probability": 0.89,
            "status": "Detected",
            "explanation": "Acoustic emission spikes match tool breakage precursors.",
        },
        "data_drift": {"detected": True, "severity": "Medium", "explanation": "Material hardness variance detected."},
        "failure_cluster": {"id": "CL-CNC", "label": "Tool Breakage", "description": "Matches high-feed rate failures."},
        "economics": {"potential_cost": "$2,000 (Tool)", "downtime_cost": "Scrap Batch Risk"},
        "default_decision": {
            "action": "Schedule Tool Change",
            "why": ["Surface finish risk"],
            "consequences": [("Quality Rejection", "High")],
        },
    },
    {
        "id": "hvac-systems",
        "title": "HVAC System",
        "description": "Building Climate Control",
        "location": "Tower HQ, New York",
        "digital_identity": {
            "age": "8 Years",
            "regime": "Cyclic",
            "model": "Cool-Master",
            "last_maintenance": "4 Months Ago",
        },
        "sensors": [
            ("pressure", "Compressor Pressure", "PSI", 0, 500, "420"),
        ],
        "cognitive_timeline": [
            ("Now", "Efficiency drop detected", "warning", None),
        ],
        "degradation_drivers": [("Pressure", "up", "moderate")],
        "precursor": {
            "probability": 0.55,
            "status": "Detected",
            "explanation": "Pressure oscillations suggest refrigerant leak onset.",
        },
        "data_drift": {"detected": False, "severity": "Low", "explanation": "Weather patterns within expected regime."},
        "failure_cluster": {"id": "CL-HVAC", "label": "Compressor Stall", "description": "Matches low-refrigerant profiles."},
        "economics": {"potential_cost": "$8,000", "downtime_cost": "Comfort / Compliance"},
        "default_decision": {
            "action": "Filter & Coil Cleaning",
            "why": ["Delta-T reduced"],
            "consequences": [("Energy Cost", "+15%")],
        },
    },
    {
        "id": "pipelines",
        "title": "Oil & Gas Pipeline",
        "description": "Critical Transport Infrastructure",
        "location": "Kirkuk-Ceyhan Sector 4",
        "digital_identity": {
            "age": "22 Years",
            "regime": "Continuous Flow",
            "model": "Pipe-Net-v3",
            "last_maintenance": "6 Months Ago",
        },
        "sensors": [
            ("pressure", "Pressure", "PSI", 0, 1000, "850"),
            ("acoustic", "Acoustic Leak", "dB", 0, 100, "20"),
        ],
        "cognitive_timeline": [
            ("Now", "Acoustic anomaly detected", "critical", None),
        ],
        "degradation_drivers": [("Pressure Drop", "down", "strong")],
        "precursor": {
            "probability": 0.94,
            "status": "Detected",
            "explanation": "Transient pressure waves match pinhole leak acoustic profile.",
        },
        "data_drift": {"detected": False, "severity": "Low", "explanation": "Crude viscosity stable."},
        "failure_cluster": {"id": "CL-PIPE", "label": "Micro-Leak", "description": "Matches corrosion-pitting patterns."},
        "economics": {"potential_cost": "Environmental Spill", "downtime_cost": "$150,000 / hr"},
        "default_decision": {
            "action": "Emergency Valve Shutoff & Inspection",
            "why": ["Leak probability > 99%"],
            "consequences": [("Spill Volume", "Escalating")],
        },
    },
    {
        "id": "semiconductor-tools",
        "title": "Lithography Scanner",
        "description": "Nanofabrication Tool",
        "location": "Cleanroom 1, Hsinchu",
        "digital_identity": {
            "age": "2 Years",
            "regime": "High Precision",
            "model": "Nano-Lith-X",
            "last_maintenance": "1 Week Ago",
        },
        "sensors": [
            ("alignment", "Alignment Error", "nm", 0, 20, "8"),
            ("stageVib", "Stage Vib", "nm", 0, 10, "3"),
        ],
        "cognitive_timeline": [
            ("Now", "Alignment drift detect", "warning", None),
        ],
        "degradation_drivers": [("Alignment Error", "up", "strong")],
        "precursor": {
            "probability": 0.42,
            "status": "Not Detected",
            "explanation": "Optical alignment drift within control limits.",
        },
        "data_drift": {"detected": True, "severity": "Low", "explanation": "Slight photoresist chemical variance."},
        "failure_cluster": {"id": "CL-SEMI", "label": "Optics Drift", "description": "Matches normal wear trajectory."},
        "economics": {"potential_cost": "$500,000 (Yield)", "downtime_cost": "$20,000 / hr"},
        "default_decision": {
            "action": "Recalibration & Optics Cleaning",
            "why": ["Yield impact risk"],
            "consequences": [("Wafer Scrap", "High")],
        },
    },
]
