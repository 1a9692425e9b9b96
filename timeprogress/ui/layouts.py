"""Assemble progress records into one of three fixed widget layouts.

Families
--------
small    Day ring (120 px) centred with a caption beneath.
medium   Title, then one row per period: label | bar (160×10) | percentage.
large    Title, then Day+Week and Month+Year rings (100 px) with captions.

The family comes from the host's "display size" signal.  Anything that is
not a recognised family name falls back to the large layout.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Sequence

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QImage, QPixmap
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QVBoxLayout, QWidget

from ..periods.progress import ProgressRecord
from .bar import render_bar
from .ring import render_ring
from .styles import build_stylesheet


logger = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class LayoutFamily(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


# ── constants ─────────────────────────────────────────────────────────────

TITLE = "Time Progress"

SMALL_RING = 120
LARGE_RING = 100
BAR_WIDTH = 160
ROW_LABEL_WIDTH = 50

# Nominal host widget sizes (width, height) per family.
FAMILY_SIZES: dict[LayoutFamily, tuple[int, int]] = {
    LayoutFamily.SMALL:  (158, 158),
    LayoutFamily.MEDIUM: (338, 158),
    LayoutFamily.LARGE:  (338, 354),
}


_FAMILIES_BY_NAME: dict[str, LayoutFamily] = {f.value: f for f in LayoutFamily}


def resolve_family(value: object) -> LayoutFamily:
    """Map a selector to a LayoutFamily, defaulting to LARGE."""
    if isinstance(value, LayoutFamily):
        return value
    if isinstance(value, str):
        family = _FAMILIES_BY_NAME.get(value.strip().lower())
        if family is not None:
            return family
    logger.warning("Unrecognised layout family %r, using large", value)
    return LayoutFamily.LARGE


# ── widget helpers ────────────────────────────────────────────────────────


def _image_label(image: QImage) -> QLabel:
    """Wrap a rendered gauge in a fixed-size QLabel."""
    label = QLabel()
    label.setPixmap(QPixmap.fromImage(image))
    label.setFixedSize(image.width(), image.height())
    return label


def _text_label(text: str, object_name: str) -> QLabel:
    label = QLabel(text)
    label.setObjectName(object_name)
    return label


def _ring_item(record: ProgressRecord, diameter: int) -> QWidget:
    """Ring with its caption centred underneath."""
    item = QWidget()
    col = QVBoxLayout(item)
    col.setContentsMargins(0, 0, 0, 0)
    col.setSpacing(0)

    col.addWidget(
        _image_label(render_ring(record.fraction, record.color, diameter)),
        alignment=Qt.AlignmentFlag.AlignHCenter,
    )
    col.addSpacing(6)

    caption = _text_label(record.label, "caption")
    caption.setAlignment(Qt.AlignmentFlag.AlignCenter)
    col.addWidget(caption, alignment=Qt.AlignmentFlag.AlignHCenter)
    return item


# ── builders ──────────────────────────────────────────────────────────────


def _build_small(
    root: QVBoxLayout, records: Sequence[ProgressRecord], title: str,
) -> None:
    day = records[0]
    root.addStretch()
    root.addWidget(
        _image_label(render_ring(day.fraction, day.color, SMALL_RING)),
        alignment=Qt.AlignmentFlag.AlignHCenter,
    )
    root.addSpacing(6)

    caption = _text_label(day.label, "caption")
    caption.setAlignment(Qt.AlignmentFlag.AlignCenter)
    root.addWidget(caption, alignment=Qt.AlignmentFlag.AlignHCenter)
    root.addStretch()


def _build_medium(
    root: QVBoxLayout, records: Sequence[ProgressRecord], title: str,
) -> None:
    root.addWidget(_text_label(title, "mediumTitle"))
    root.addSpacing(10)

    for record in records:
        row = QHBoxLayout()
        row.setSpacing(0)

        label = _text_label(record.label, "rowLabel")
        label.setFixedWidth(ROW_LABEL_WIDTH)
        row.addWidget(label, alignment=Qt.AlignmentFlag.AlignVCenter)
        row.addSpacing(6)

        row.addWidget(
            _image_label(render_bar(record.fraction, record.color, BAR_WIDTH)),
            alignment=Qt.AlignmentFlag.AlignVCenter,
        )
        row.addSpacing(6)

        row.addWidget(
            _text_label(record.percent_text, "rowPercent"),
            alignment=Qt.AlignmentFlag.AlignVCenter,
        )
        row.addStretch()

        root.addLayout(row)
        root.addSpacing(8)


def _build_large(
    root: QVBoxLayout, records: Sequence[ProgressRecord], title: str,
) -> None:
    header = _text_label(title, "largeTitle")
    header.setAlignment(Qt.AlignmentFlag.AlignCenter)
    root.addWidget(header)
    root.addSpacing(12)

    def add_row(a: ProgressRecord, b: ProgressRecord) -> None:
        row = QHBoxLayout()
        row.setSpacing(0)
        row.addStretch()
        row.addWidget(_ring_item(a, LARGE_RING))
        row.addStretch()
        row.addWidget(_ring_item(b, LARGE_RING))
        row.addStretch()
        root.addLayout(row)

    add_row(records[0], records[1])
    root.addSpacing(14)
    add_row(records[2], records[3])


_BUILDERS = {
    LayoutFamily.SMALL: _build_small,
    LayoutFamily.MEDIUM: _build_medium,
    LayoutFamily.LARGE: _build_large,
}


def compose(
    records: Sequence[ProgressRecord],
    family: object,
    *,
    title: str = TITLE,
) -> QWidget:
    """Build the widget tree for *family* from Day/Week/Month/Year *records*.

    *family* may be a LayoutFamily or any raw selector value; unknown
    values produce the large layout.  The small layout has no title.
    The panel carries its own stylesheet, so it renders the same with or
    without a host.
    """
    family = resolve_family(family)
    logger.debug("Composing %s layout from %d records", family.value, len(records))

    panel = QWidget()
    panel.setObjectName("timeProgressPanel")
    panel.setProperty("family", family.value)
    panel.setStyleSheet(build_stylesheet())
    root = QVBoxLayout(panel)
    root.setContentsMargins(0, 0, 0, 0)
    root.setSpacing(0)

    _BUILDERS[family](root, records, title)
    return panel
