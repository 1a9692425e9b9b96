"""Shared test helpers for TimeProgress."""

from datetime import datetime

from PyQt6.QtGui import QColor, QImage
from PyQt6.QtWidgets import QLabel, QWidget


# Friday, leap year, day 75 of 366
FRIDAY_NOON = datetime(2024, 3, 15, 12, 0, 0)


def rgba(image: QImage, x: float, y: float) -> tuple[int, int, int, int]:
    """Un-premultiplied (r, g, b, a) of the pixel containing (x, y)."""
    c = image.pixelColor(int(x), int(y))
    return c.red(), c.green(), c.blue(), c.alpha()


def hex_rgb(hex_color: str) -> tuple[int, int, int]:
    c = QColor(hex_color)
    return c.red(), c.green(), c.blue()


def close_rgb(actual: tuple, expected: tuple, tol: int = 8) -> bool:
    return all(abs(a - e) <= tol for a, e in zip(actual, expected))


def image_labels(widget: QWidget) -> list[QLabel]:
    """All QLabels under *widget* that carry a pixmap."""
    return [
        lbl for lbl in widget.findChildren(QLabel)
        if lbl.pixmap() is not None and not lbl.pixmap().isNull()
    ]


def text_labels(widget: QWidget) -> list[str]:
    return [lbl.text() for lbl in widget.findChildren(QLabel) if lbl.text()]
