from __future__ import annotations

import argparse
import csv
import random
from pathlib import Path

from forsee.core.profiles import AssetProfile, SensorSpec
from forsee.core.registry import REGISTRY, AssetProfileRegistry

# ----------------------------
# Helpers
# ----------------------------

def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def sample_value(sensor: SensorSpec, rng: random.Random, stress: float, noise: float) -> float:
    """
    Draw a reading around the sensor default.

    stress in 0..1 pulls the value toward the top of the input range;
    noise is a gaussian sigma expressed as a fraction of the range span.
    """
    lo, hi = sensor.input_range
    span = hi - lo
    try:
        nominal = float(sensor.default_value)
    except ValueError:
        nominal = lo + span / 2.0

    value = nominal + (hi - nominal) * stress
    if span > 0 and noise > 0:
        value += rng.gauss(0.0, noise * span)
    return clamp(value, lo, hi)


def generate_readings(
    profile: AssetProfile,
    seed: int | None,
    stress: float = 0.0,
    noise: float = 0.02,
) -> dict[str, str]:
    rng = random.Random(seed)
    stress = clamp(float(stress), 0.0, 1.0)
    return {s.id: f"{sample_value(s, rng, stress, noise):.2f}" for s in profile.sensors}


# ----------------------------
# Core generation
# ----------------------------

def generate_csv(
    out_path: Path,
    asset: str,
    seed: int | None,
    stress: float,
    noise: float,
    print_summary: bool,
    registry: AssetProfileRegistry | None = None,
) -> Path:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    profile = (registry or REGISTRY).get(asset)
    readings = generate_readings(profile, seed=seed, stress=stress, noise=noise)

    with out_path.open("w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(["sensor_id", "value", "unit"])
        for s in profile.sensors:
            w.writerow([s.id, readings[s.id], s.unit])

    if print_summary:
        print(f"Generated {out_path} with {len(readings)} readings")
        print(f"Asset: {profile.id} | Stress: {stress} | Noise: {noise} | Seed: {seed}")

    return out_path


# ----------------------------
# CLI
# ----------------------------

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="forsee-generate-readings",
        description="Generate a sample readings.csv for one Forsee asset profile.",
    )

    p.add_argument("--out", default="data/readings.csv",
                   help="Output CSV path (default: data/readings.csv)")
    p.add_argument("--asset", default=REGISTRY.default.id,
                   help=f"Asset profile id (default: {REGISTRY.default.id})")
    p.add_argument("--seed", type=int, default=None,
                   help="Random seed for reproducible output")
    p.add_argument("--stress", type=float, default=0.0,
                   help="0..1, pushes readings toward the top of each input range")
    p.add_argument("--noise", type=float, default=0.02,
                   help="Gaussian noise sigma as a fraction of each input range")
    p.add_argument("--print-summary", action="store_true",
                   help="Print generation summary to console")

    return p


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    if args.asset not in REGISTRY:
        raise SystemExit(f"--asset must be one of: {', '.join(REGISTRY.ids())}")
    if not 0.0 <= args.stress <= 1.0:
        raise SystemExit("--stress must be within 0..1")
    if args.noise < 0:
        raise SystemExit("--noise must be >= 0")

    generate_csv(
        out_path=Path(args.out),
        asset=args.asset,
        seed=args.seed,
        stress=args.stress,
        noise=args.noise,
        print_summary=args.print_summary,
    )


if __name__ == "__main__":
    main()
