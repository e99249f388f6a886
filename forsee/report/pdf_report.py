from __future__ import annotations

from pathlib import Path

from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from forsee.core.profiles import AssetProfile
from forsee.core.session import PredictionOutcome

DIRECTION_GLYPH = {"up": "up", "down": "down", "stable": "stable"}


def _wrap_lines(c: canvas.Canvas, text: str, max_width: float, font_name: str, font_size: int) -> list[str]:
    c.setFont(font_name, font_size)
    words = (text or "").split()
    if not words:
        return [""]

    lines: list[str] = []
    current = words[0]
    for w in words[1:]:
        test = f"{current} {w}"
        if c.stringWidth(test, font_name, font_size) <= max_width:
            current = test
        else:
            lines.append(current)
            current = w
    lines.append(current)
    return lines


def _draw_wrapped(
    c: canvas.Canvas,
    x: float,
    y: float,
    text: str,
    max_width: float,
    line_height: int = 13,
    font_name: str = "Helvetica",
    font_size: int = 10,
) -> float:
    lines = _wrap_lines(c, text, max_width, font_name, font_size)
    c.setFont(font_name, font_size)
    for line in lines:
        c.drawString(x, y, line)
        y -= line_height
    return y


def _draw_weight_bar(
    c: canvas.Canvas,
    x: float,
    y: float,
    w: float,
    h: float,
    weight: float,
    scale: float = 50.0,
) -> None:
    """Horizontal bar for a 0..scale weight; outline plus filled share."""
    frac = max(0.0, min(1.0, float(weight) / scale)) if scale > 0 else 0.0
    c.setLineWidth(0.5)
    c.rect(x, y - 1, w, h, stroke=1, fill=0)
    if frac > 0:
        c.rect(x, y - 1, w * frac, h, stroke=0, fill=1)


def _draw_footer(
    c: canvas.Canvas,
    page_w: float,
    y: float,
    text: str,
    left: float,
    right: float,
) -> None:
    c.setFont("Helvetica", 8)
    c.drawRightString(page_w - right, y, text)
    c.drawString(left, y, "Forsee · Predictive Maintenance")


def _section(c: canvas.Canvas, left: float, y: float, title: str, size: int = 12) -> float:
    c.setFont("Helvetica-Bold", size)
    c.drawString(left, y, title)
    return y - (size + 4)


def write_pdf_report(
    out_path: str | Path,
    profile: AssetProfile,
    outcome: PredictionOutcome,
    generated_at: str | None,
    notes: list[str] | None = None,
    run_config: dict[str, str] | None = None,
) -> Path:

    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    c = canvas.Canvas(str(out_path), pagesize=letter)
    page_w, page_h = letter

    left = 40
    right = 44
    max_width = page_w - left - right

    result = outcome.result

    # ======================
    # PAGE 1 — PREDICTION
    # ======================
    y = page_h - 60
    c.setFont("Helvetica-Bold", 18)
    c.drawString(left, y, f"Forsee — {profile.title} Health Prediction")
    y -= 24

    c.setFont("Helvetica", 10)
    if generated_at:
        c.drawString(left, y, f"Generated: {generated_at}")
        y -= 14
    y = _draw_wrapped(c, left, y, f"{profile.description} | {profile.location}", max_width)

    ident = profile.digital_identity
    y = _draw_wrapped(
        c, left, y,
        f"Age: {ident.age} | Regime: {ident.regime} | Model: {ident.model} | Last maintenance: {ident.last_maintenance}",
        max_width, line_height=12, font_size=9,
    )
    y -= 12

    # Inputs
    y = _section(c, left, y, "Sensor Inputs")
    c.setFont("Helvetica", 10)
    for s in profile.sensors:
        raw = outcome.inputs.get(s.id, "")
        c.drawString(left, y, s.label)
        c.drawString(left + 180, y, f"{raw or '-'} {s.unit}")
        c.drawString(left + 300, y, f"expected {s.placeholder}")
        y -= 13
    y -= 10

    # Summary block
    y = _section(c, left, y, "Assessment")
    summary = [
        ("Health index", f"{result.health_index} / 100"),
        ("Risk level", result.risk_level),
        ("Remaining useful life", f"{result.rul} days"),
        ("Failure mode", result.failure_mode),
        ("Precursor probability", f"{result.precursor_probability:.2f}"),
        ("Model confidence", f"{result.confidence:.2f}"),
        ("Input drift", "Detected" if result.drift_detected else "Not detected"),
    ]
    for label, value in summary:
        c.setFont("Helvetica", 10)
        c.drawString(left, y, label)
        c.setFont("Helvetica-Bold", 10)
        c.drawString(left + 180, y, value)
        y -= 14
    y -= 8

    # Top sensors
    y = _section(c, left, y, "Contributing Sensors")
    if not result.top_sensors:
        c.setFont("Helvetica", 10)
        c.drawString(left, y, "No sensor contributions reported.")
        y -= 14
    for sw in result.top_sensors:
        c.setFont("Helvetica", 10)
        c.drawString(left, y, sw.name)
        _draw_weight_bar(c, left + 180, y, 180, 8, sw.weight)
        c.drawString(left + 370, y, f"{float(sw.weight):.1f}")
        y -= 15
    y -= 8

    # Recommendation
    y = _section(c, left, y, "Recommended Action")
    y = _draw_wrapped(c, left, y, result.recommended_action, max_width, line_height=14, font_name="Helvetica-Bold", font_size=11)
    y -= 6

    decision = profile.default_decision
    if result.recommended_action == decision.action:
        c.setFont("Helvetica-Bold", 10)
        c.drawString(left, y, "Why")
        y -= 13
        for reason in decision.why:
            y = _draw_wrapped(c, left + 12, y, f"• {reason}", max_width - 12)
        y -= 4
        c.setFont("Helvetica-Bold", 10)
        c.drawString(left, y, "If deferred")
        y -= 13
        for cons in decision.consequences:
            y = _draw_wrapped(c, left + 12, y, f"• {cons.text}: {cons.impact}", max_width - 12)

    _draw_footer(
        c,
        page_w,
        24,
        f"{profile.id} | Health {result.health_index} | {result.risk_level}",
        left,
        right,
    )

    # ==========================
    # PAGE 2 — ASSET INTELLIGENCE
    # ==========================
    c.showPage()
    y = page_h - 60

    c.setFont("Helvetica-Bold", 16)
    c.drawString(left, y, f"{profile.title} — Asset Intelligence")
    y -= 30

    y = _section(c, left, y, "Degradation Drivers")
    c.setFont("Helvetica", 10)
    for d in profile.degradation_drivers:
        c.drawString(left, y, d.factor)
        c.drawString(left + 180, y, DIRECTION_GLYPH.get(d.direction, d.direction))
        c.drawString(left + 260, y, d.impact)
        y -= 13
    y -= 10

    y = _section(c, left, y, "Event Timeline")
    for ev in profile.cognitive_timeline:
        if y < 120:
            c.showPage()
            y = page_h - 60
        line = f"[{ev.time}] {ev.description} ({ev.type})"
        if ev.details:
            line += f" — {ev.details}"
        y = _draw_wrapped(c, left, y, line, max_width)
    y -= 10

    y = _section(c, left, y, "Failure Precursor")
    y = _draw_wrapped(
        c, left, y,
        f"{profile.precursor.status} (p={profile.precursor.probability:.2f}). {profile.precursor.explanation}",
        max_width,
    )
    y -= 6

    y = _section(c, left, y, "Data Drift")
    drift = profile.data_drift
    y = _draw_wrapped(
        c, left, y,
        f"{'Detected' if drift.detected else 'Not detected'} ({drift.severity}). {drift.explanation}",
        max_width,
    )
    y -= 6

    y = _section(c, left, y, "Failure Cluster")
    fc = profile.failure_cluster
    y = _draw_wrapped(c, left, y, f"{fc.id} {fc.label}: {fc.description}", max_width)
    y -= 6

    y = _section(c, left, y, "Economics")
    y = _draw_wrapped(
        c, left, y,
        f"Potential cost: {profile.economics.potential_cost} | Downtime: {profile.economics.downtime_cost}",
        max_width,
    )

    all_notes = list(outcome.notes) + list(notes or [])
    if all_notes:
        y -= 14
        y = _section(c, left, y, "Data Notes")
        for n in all_notes:
            if y < 60:
                c.showPage()
                y = page_h - 60
            y = _draw_wrapped(c, left, y, f"- {n}", max_width)

    _draw_footer(
        c,
        page_w,
        24,
        f"Version {run_config.get('version', '')}" if run_config else "",
        left,
        right,
    )

    c.save()
    return out_path
