"""Colours, fonts and the QSS stylesheet for the TimeProgress widget."""

from __future__ import annotations

from PyQt6.QtGui import QFont


# ── neutral palette ──────────────────────────────────────────────────────
#    Period colours live in ``periods.progress.PERIOD_COLORS``; everything
#    that is not tied to a period is here.

PALETTE: dict[str, str] = {
    "bg":         "#1C1C1E",
    "bar_track":  "#2C2C2E",
    "text":       "#FFFFFF",
    "text_muted": "#AAAAAA",   # light gray captions
}

TRACK_OPACITY = 0.25  # ring background track alpha

__all__ = [
    "PALETTE",
    "TRACK_OPACITY",
    "make_font",
    "resolve_font_family",
    "build_stylesheet",
]


# ── fonts ─────────────────────────────────────────────────────────────────


def make_font(pixel_size: float, weight: QFont.Weight = QFont.Weight.Normal) -> QFont:
    """The resolved UI font at *pixel_size* (rounded, at least 1 px) and *weight*."""
    font = QFont(resolve_font_family())
    font.setPixelSize(max(1, round(pixel_size)))
    font.setWeight(weight)
    return font


_resolved_font: str | None = None


def resolve_font_family() -> str:
    """Detect the best available system font.  Must be called after
    QApplication is created (font database needs the app context)."""
    global _resolved_font
    if _resolved_font is None:
        from PyQt6.QtGui import QFontDatabase
        families = set(QFontDatabase.families())
        for candidate in ("SF Pro", ".AppleSystemUIFont", "Helvetica Neue"):
            if candidate in families:
                _resolved_font = candidate
                break
        else:
            _resolved_font = QFont().defaultFamily()
    return _resolved_font


# ── QSS builder ───────────────────────────────────────────────────────


def build_stylesheet(palette: dict[str, str] | None = None) -> str:
    p = palette or PALETTE
    font = resolve_font_family()
    return f"""
    /* ── root ───────────────────────────────────── */
    QWidget#timeProgressRoot {{
        background-color: {p['bg']};
        font-family: "{font}", "Helvetica Neue", Arial;
    }}

    QLabel {{
        background-color: transparent;
        font-family: "{font}", "Helvetica Neue", Arial;
    }}

    /* ── titles ─────────────────────────────────── */
    QLabel#mediumTitle {{
        color: {p['text']};
        font-size: 16px;
        font-weight: 700;
    }}

    QLabel#largeTitle {{
        color: {p['text']};
        font-size: 20px;
        font-weight: 700;
    }}

    /* ── captions and rows ──────────────────────── */
    QLabel#caption {{
        color: {p['text_muted']};
        font-size: 14px;
        font-weight: 500;
    }}

    QLabel#rowLabel {{
        color: {p['text_muted']};
        font-size: 13px;
        font-weight: 500;
    }}

    QLabel#rowPercent {{
        color: {p['text']};
        font-size: 12px;
        font-weight: 500;
    }}
    """
