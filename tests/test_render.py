"""Tests for the ring and bar gauge renderers.

Covers:
- Ring geometry helpers (stroke width, arc angles, arc points)
- Ring rasterising: image size, track opacity, arc coverage at 0 / ¼ / 1
- Bar rasterising: image size, fill split, degenerate widths
"""

from __future__ import annotations

import math

import pytest
from PyQt6.QtGui import QImage

from timeprogress.ui.bar import BAR_HEIGHT, render_bar
from timeprogress.ui.ring import (
    ARC_STEPS,
    START_ANGLE,
    arc_angles,
    arc_points,
    render_ring,
    stroke_width,
)
from timeprogress.ui.styles import PALETTE

from helpers import close_rgb, hex_rgb, rgba


RED = "#FF3B30"
BLUE = "#5AC8FA"


def _white_pixels(image: QImage, top: int, bottom: int) -> int:
    """Count near-white opaque pixels in rows [top, bottom)."""
    count = 0
    for y in range(top, bottom):
        for x in range(image.width()):
            r, g, b, a = rgba(image, x, y)
            if a > 200 and min(r, g, b) > 200:
                count += 1
    return count


# ═══════════════════════════════════════════════════════════════════════
#  RING GEOMETRY
# ═══════════════════════════════════════════════════════════════════════


class TestStrokeWidth:
    def test_minimum_for_small_rings(self):
        assert stroke_width(40) == 8

    def test_proportional_for_large_rings(self):
        assert stroke_width(100) == pytest.approx(12)
        assert stroke_width(120) == pytest.approx(14.4)


class TestArcAngles:
    def test_point_count(self):
        assert len(arc_angles(0.5)) == ARC_STEPS + 1 == 121

    def test_starts_at_twelve_oclock(self):
        assert arc_angles(0.3)[0] == START_ANGLE == -math.pi / 2

    def test_zero_fraction_degenerates(self):
        angles = arc_angles(0.0)
        assert all(a == START_ANGLE for a in angles)

    def test_full_fraction_spans_full_turn(self):
        angles = arc_angles(1.0)
        assert angles[-1] - angles[0] == pytest.approx(2 * math.pi, abs=1e-12)

    def test_uniform_steps(self):
        angles = arc_angles(0.75)
        step = angles[1] - angles[0]
        for a, b in zip(angles, angles[1:]):
            assert b - a == pytest.approx(step)

    def test_clockwise(self):
        angles = arc_angles(0.25)
        assert angles[-1] == pytest.approx(0.0)   # 3 o'clock


class TestArcPoints:
    def test_inscribed_radius(self):
        d = 100
        r = (d - stroke_width(d)) / 2
        for x, y in arc_points(0.6, d):
            assert math.hypot(x - 50, y - 50) == pytest.approx(r)

    def test_first_point_top_centre(self):
        x, y = arc_points(0.4, 100)[0]
        assert x == pytest.approx(50)
        assert y == pytest.approx(6)

    def test_full_circle_closes(self):
        points = arc_points(1.0, 100)
        assert points[0] == pytest.approx(points[-1], abs=1e-9)

    def test_quarter_ends_at_three_oclock(self):
        x, y = arc_points(0.25, 100)[-1]
        assert x == pytest.approx(94)
        assert y == pytest.approx(50)


# ═══════════════════════════════════════════════════════════════════════
#  RING RASTER
# ═══════════════════════════════════════════════════════════════════════


@pytest.mark.usefixtures("qapp")
class TestRenderRing:
    def test_size(self):
        img = render_ring(0.5, RED, 120)
        assert isinstance(img, QImage)
        assert (img.width(), img.height()) == (120, 120)
        assert img.hasAlphaChannel()

    def test_corners_transparent(self):
        img = render_ring(1.0, RED, 100)
        assert rgba(img, 0, 0)[3] == 0
        assert rgba(img, 99, 99)[3] == 0

    def test_zero_fraction_shows_track_only(self):
        img = render_ring(0.0, RED, 100)
        r, g, b, a = rgba(img, 50, 6)
        assert 50 <= a <= 80
        assert close_rgb((r, g, b), hex_rgb(RED), tol=12)

    def test_quarter_arc_coverage(self):
        img = render_ring(0.25, RED, 100)
        # 1:30 position is inside the arc
        r, g, b, a = rgba(img, 81, 18)
        assert a >= 250
        assert close_rgb((r, g, b), hex_rgb(RED))
        # 6 o'clock is only track
        assert 50 <= rgba(img, 50, 94)[3] <= 80

    def test_full_ring_no_gap(self):
        img = render_ring(1.0, BLUE, 100)
        for x, y in [(50, 6), (94, 50), (50, 94), (6, 50), (49, 6)]:
            r, g, b, a = rgba(img, x, y)
            assert a >= 250, (x, y)
            assert close_rgb((r, g, b), hex_rgb(BLUE)), (x, y)

    def test_accepts_qcolor(self):
        from PyQt6.QtGui import QColor
        img = render_ring(1.0, QColor(RED), 100)
        assert close_rgb(rgba(img, 94, 50)[:3], hex_rgb(RED))

    def test_percentage_text_in_centre_band(self):
        d = 120
        img = render_ring(0.5, RED, d)
        band_top = int(d / 2 - d * 0.15)
        band_bottom = int(d / 2 + d * 0.15)
        assert _white_pixels(img, band_top, band_bottom) > 50

    def test_no_text_outside_band(self):
        d = 120
        img = render_ring(0.5, RED, d)
        above = int(d / 2 - d * 0.3)
        below = int(d / 2 + d * 0.3)
        assert _white_pixels(img, above, above + 1) == 0
        assert _white_pixels(img, below, below + 1) == 0

    def test_text_uses_resolved_family(self):
        from timeprogress.ui.styles import make_font, resolve_font_family
        assert make_font(20).family() == resolve_font_family()

    def test_independent_calls(self):
        a = render_ring(0.3, RED, 100)
        b = render_ring(0.3, RED, 100)
        assert a == b


# ═══════════════════════════════════════════════════════════════════════
#  BAR RASTER
# ═══════════════════════════════════════════════════════════════════════


@pytest.mark.usefixtures("qapp")
class TestRenderBar:
    def test_size(self):
        img = render_bar(0.5, RED, 160)
        assert (img.width(), img.height()) == (160, BAR_HEIGHT) == (160, 10)

    def test_half_fill(self):
        img = render_bar(0.5, RED, 160)
        assert rgba(img, 10, 5) == (*hex_rgb(RED), 255)
        assert rgba(img, 79, 0) == (*hex_rgb(RED), 255)
        assert rgba(img, 80, 9) == (*hex_rgb(PALETTE["bar_track"]), 255)
        assert rgba(img, 150, 5) == (*hex_rgb(PALETTE["bar_track"]), 255)

    def test_zero_fill_is_all_track(self):
        img = render_bar(0.0, RED, 160)
        for x in (0, 80, 159):
            assert rgba(img, x, 5) == (*hex_rgb(PALETTE["bar_track"]), 255)

    def test_full_fill(self):
        img = render_bar(1.0, BLUE, 160)
        for x in (0, 80, 159):
            assert rgba(img, x, 5) == (*hex_rgb(BLUE), 255)

    def test_full_height(self):
        img = render_bar(1.0, BLUE, 40)
        for y in range(BAR_HEIGHT):
            assert rgba(img, 20, y)[3] == 255
