from __future__ import annotations

import argparse
import sys
from typing import Optional

from PySide6.QtWidgets import QApplication

from taminal.config.logging_config import configure_logging

from .main_window import MainWindow
from .theme import apply_theme, available_themes


def main(argv: Optional[list[str]] = None) -> int:
    argv = argv if argv is not None else sys.argv

    parser = argparse.ArgumentParser(
        prog="taminal-gui",
        description="Minimal shell in a window.",
    )
    parser.add_argument(
        "--theme",
        choices=available_themes(),
        default=None,
        help="Color theme (default: TAMINAL_UI_THEME or dark)",
    )
    parser.add_argument("--log-level", default=None, help="Diagnostics level")
    # Qt consumes its own options (e.g. -platform); keep them for QApplication
    args, qt_args = parser.parse_known_args(argv[1:])

    configure_logging(args.log_level)

    app = QApplication([argv[0], *qt_args] if argv else qt_args)
    apply_theme(app, args.theme)

    win = MainWindow()
    win.show()
    return app.exec()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
