"""Allow running FocusPad as a module: python -m focuspad."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from .app import FocusPadApp


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv)
    app.setApplicationName("FocusPad")
    app.setOrganizationName("FocusPad")

    window = FocusPadApp()
    window.show()
    logging.getLogger(__name__).info("FocusPad ready")

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
