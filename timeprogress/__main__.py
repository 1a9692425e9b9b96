"""Allow running TimeProgress as a module: python -m timeprogress."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from .app import TimeProgressApp
from .settings import load_settings


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = load_settings()

    app = QApplication(sys.argv)
    app.setApplicationName("TimeProgress")
    app.setOrganizationName("TimeProgress")

    window = TimeProgressApp(settings)
    window.render_at()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
