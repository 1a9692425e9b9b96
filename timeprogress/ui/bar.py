"""Horizontal progress gauge rasterised into a QImage."""

from __future__ import annotations

from PyQt6.QtCore import Qt, QRectF
from PyQt6.QtGui import QColor, QImage, QPainter

from .styles import PALETTE


BAR_HEIGHT = 10


def render_bar(fraction: float, color: QColor | str, width: int) -> QImage:
    """Return a ``width × 10`` bar filled left-to-right to *fraction*.

    *fraction* is expected to be clamped already; it is not re-clamped here.
    """
    image = QImage(width, BAR_HEIGHT, QImage.Format.Format_ARGB32_Premultiplied)
    image.fill(Qt.GlobalColor.transparent)

    painter = QPainter(image)
    painter.fillRect(QRectF(0, 0, width, BAR_HEIGHT), QColor(PALETTE["bar_track"]))
    painter.fillRect(QRectF(0, 0, width * fraction, BAR_HEIGHT), QColor(color))
    painter.end()
    return image
