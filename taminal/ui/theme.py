from __future__ import annotations

from typing import Literal

from PySide6.QtGui import QColor, QFont, QFontDatabase, QPalette
from PySide6.QtWidgets import QApplication

ThemeName = Literal["dark", "light"]


def available_themes() -> list[ThemeName]:
    return ["dark", "light"]


def _apply_palette(app: QApplication, theme: ThemeName) -> None:
    # Start from Fusion for consistent cross‑platform rendering
    app.setStyle("Fusion")
    pal = QPalette()

    if theme == "dark":
        bg = QColor(17, 18, 23)  # #111217
        base = QColor(22, 24, 31)  # output pane and input
        alt = QColor(27, 30, 39)
        text = QColor(235, 238, 246)
        sub = QColor(170, 178, 207)
        btn = QColor(39, 43, 56)
        hi = QColor(108, 156, 255)
        bright = QColor(255, 107, 107)
        highlighted_text = QColor(0, 0, 0)
    else:
        bg = QColor(248, 249, 251)
        base = QColor(255, 255, 255)
        alt = QColor(244, 246, 250)
        text = QColor(24, 28, 37)
        sub = QColor(102, 112, 133)
        btn = QColor(255, 255, 255)
        hi = QColor(62, 121, 247)
        bright = QColor(216, 68, 68)
        highlighted_text = QColor(255, 255, 255)

    cr = QPalette.ColorRole
    cg = QPalette.ColorGroup
    pal.setColor(cr.Window, bg)
    pal.setColor(cr.WindowText, text)
    pal.setColor(cr.Base, base)
    pal.setColor(cr.AlternateBase, alt)
    pal.setColor(cr.ToolTipBase, alt)
    pal.setColor(cr.ToolTipText, text)
    pal.setColor(cr.Text, text)
    pal.setColor(cr.Button, btn)
    pal.setColor(cr.ButtonText, text)
    pal.setColor(cr.BrightText, bright)
    pal.setColor(cr.Highlight, hi)
    pal.setColor(cr.HighlightedText, highlighted_text)
    pal.setColor(cg.Disabled, cr.Text, sub)
    pal.setColor(cg.Disabled, cr.ButtonText, sub)

    app.setPalette(pal)


def apply_theme(app: QApplication, theme: str | None = None) -> ThemeName:
    """Apply light/dark theme and return the active theme."""
    from taminal.config.settings import settings

    name = (theme or settings.ui_theme).lower()
    if name not in available_themes():
        name = "dark"

    _apply_palette(app, name)  # type: ignore[arg-type]
    app.setProperty("activeTheme", name)
    return name  # type: ignore[return-value]


def error_color(app: QApplication) -> QColor:
    return app.palette().color(QPalette.ColorRole.BrightText)


def monospace_font() -> QFont:
    return QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont)
