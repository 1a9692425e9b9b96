"""Host window for the TimeProgress widget.

This is the one impure boundary: it reads the wall clock, builds the
records, composes the layout and installs it as the window content.
Everything it calls is a pure function of ``(now, family)``.
"""

from __future__ import annotations

import logging
from datetime import datetime

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QVBoxLayout, QWidget

from .periods.progress import ProgressRecord, build_records
from .settings import Settings
from .ui.layouts import FAMILY_SIZES, LayoutFamily, compose, resolve_family
from .ui.styles import build_stylesheet


logger = logging.getLogger(__name__)


class TimeProgressApp(QWidget):
    """Fixed-size window showing day / week / month / year progress."""

    def __init__(
        self,
        settings: Settings | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings or Settings()
        self._family: LayoutFamily = resolve_family(self._settings.family)
        self._records: list[ProgressRecord] = []
        self._panel: QWidget | None = None

        self.setObjectName("timeProgressRoot")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setWindowTitle(self._settings.title)
        self.setStyleSheet(build_stylesheet())
        self.setFixedSize(*FAMILY_SIZES[self._family])

        pad = self._settings.padding
        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(pad, pad, pad, pad)
        self._layout.setSpacing(0)

        self._setup_shortcuts()

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC API
    # ══════════════════════════════════════════════════════════════════

    @property
    def family(self) -> LayoutFamily:
        return self._family

    @property
    def records(self) -> list[ProgressRecord]:
        """Records of the last render pass (empty before the first)."""
        return list(self._records)

    @property
    def panel(self) -> QWidget | None:
        return self._panel

    def render_at(self, now: datetime | None = None) -> QWidget:
        """Run one render pass for *now* (the wall clock when omitted)."""
        now = now or datetime.now()
        self._records = build_records(now)
        panel = compose(self._records, self._family, title=self._settings.title)

        if self._panel is not None:
            self._layout.removeWidget(self._panel)
            self._panel.deleteLater()
        self._layout.addWidget(panel)
        self._panel = panel

        logger.info(
            "Rendered %s layout at %s", self._family.value, now.isoformat(timespec="seconds"),
        )
        return panel

    # ══════════════════════════════════════════════════════════════════
    #  SHORTCUTS
    # ══════════════════════════════════════════════════════════════════

    def _setup_shortcuts(self) -> None:
        """Register Esc and Cmd+W to close the window."""
        close = QAction("Close", self)
        close.setShortcuts([QKeySequence("Escape"), QKeySequence(QKeySequence.StandardKey.Close)])
        close.triggered.connect(self.close)
        self.addAction(close)
