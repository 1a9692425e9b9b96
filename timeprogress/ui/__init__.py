"""UI package."""

from .ring import render_ring, arc_angles, arc_points, stroke_width, ARC_STEPS
from .bar import render_bar, BAR_HEIGHT
from .layouts import LayoutFamily, FAMILY_SIZES, resolve_family, compose
from .styles import PALETTE, build_stylesheet

__all__ = [
    "render_ring",
    "arc_angles",
    "arc_points",
    "stroke_width",
    "ARC_STEPS",
    "render_bar",
    "BAR_HEIGHT",
    "LayoutFamily",
    "FAMILY_SIZES",
    "resolve_family",
    "compose",
    "PALETTE",
    "build_stylesheet",
]
