"""Circular progress gauge rasterised into a QImage.

The ring is drawn in three passes:
- a full-circle background track in the period colour at 25% opacity,
- the progress arc from 12 o'clock, clockwise, in the full colour,
- the floored percentage in bold white text at the centre.

The arc is a 120-segment polyline rather than a native arc primitive; the
stroke width hides the facets at the sizes the layouts use.
"""

from __future__ import annotations

import math

from PyQt6.QtCore import Qt, QPointF, QRectF
from PyQt6.QtGui import QColor, QFont, QImage, QPainter, QPainterPath, QPen

from ..periods.progress import percent_label
from .styles import PALETTE, TRACK_OPACITY, make_font


# ── geometry constants ───────────────────────────────────────────────────

ARC_STEPS = 120
START_ANGLE = -math.pi / 2      # 12 o'clock; y grows downwards so +angle is clockwise
MIN_STROKE = 8
STROKE_RATIO = 0.12
FONT_RATIO = 0.22
TEXT_BAND_RATIO = 0.3


# ── pure geometry ─────────────────────────────────────────────────────────


def stroke_width(diameter: float) -> float:
    return max(MIN_STROKE, diameter * STROKE_RATIO)


def arc_angles(fraction: float, steps: int = ARC_STEPS) -> list[float]:
    """``steps + 1`` evenly spaced angles from 12 o'clock through *fraction* of a turn."""
    end = START_ANGLE + 2 * math.pi * fraction
    return [START_ANGLE + (end - START_ANGLE) * (i / steps) for i in range(steps + 1)]


def arc_points(
    fraction: float, diameter: float, steps: int = ARC_STEPS,
) -> list[tuple[float, float]]:
    """Polyline vertices of the progress arc inside a *diameter* square."""
    radius = (diameter - stroke_width(diameter)) / 2
    cx = cy = diameter / 2
    return [
        (cx + radius * math.cos(a), cy + radius * math.sin(a))
        for a in arc_angles(fraction, steps)
    ]


def _arc_path(fraction: float, diameter: float) -> QPainterPath:
    points = arc_points(fraction, diameter)
    path = QPainterPath(QPointF(*points[0]))
    for x, y in points[1:]:
        path.lineTo(x, y)
    return path


# ── renderer ──────────────────────────────────────────────────────────────


def render_ring(fraction: float, color: QColor | str, diameter: int) -> QImage:
    """Return a transparent ``diameter × diameter`` image of a ring gauge."""
    color = QColor(color)
    stroke = stroke_width(diameter)
    cy = diameter / 2

    image = QImage(diameter, diameter, QImage.Format.Format_ARGB32_Premultiplied)
    image.fill(Qt.GlobalColor.transparent)

    painter = QPainter(image)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    painter.setBrush(Qt.BrushStyle.NoBrush)

    # ── background track ─────────────────────────────────────────────
    track_color = QColor(color)
    track_color.setAlphaF(TRACK_OPACITY)
    painter.setPen(QPen(track_color, stroke))
    painter.drawEllipse(
        QRectF(stroke / 2, stroke / 2, diameter - stroke, diameter - stroke)
    )

    # ── progress arc ─────────────────────────────────────────────────
    arc_pen = QPen(color, stroke)
    arc_pen.setCapStyle(Qt.PenCapStyle.FlatCap)
    arc_pen.setJoinStyle(Qt.PenJoinStyle.RoundJoin)
    painter.strokePath(_arc_path(fraction, diameter), arc_pen)

    # ── centre text ──────────────────────────────────────────────────
    painter.setFont(make_font(diameter * FONT_RATIO, QFont.Weight.Bold))
    painter.setPen(QColor(PALETTE["text"]))
    band = diameter * TEXT_BAND_RATIO
    painter.drawText(
        QRectF(0, cy - band / 2, diameter, band),
        Qt.AlignmentFlag.AlignCenter,
        percent_label(fraction),
    )

    painter.end()
    return image
