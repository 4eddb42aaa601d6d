# -*- coding: utf-8 -*-
"""
Font Utilities

Centralized font configuration. Widgets get their fonts from here instead
of setting font properties in QSS.

Usage:
    from ui.font_utils import create_font, FontManager

    title_font = create_font(size=FontManager.SIZE_HEADING, bold=True)
    label.setFont(title_font)
"""

from typing import List, Optional

from PyQt5.QtGui import QFont
from PyQt5.QtWidgets import QApplication


class FontManager:
    """Font configuration constants and factory."""

    PRIMARY_FONT_FAMILY = "Roboto"
    FALLBACK_FONT_FAMILY = "Calibri"

    # Default sizes (in points)
    SIZE_SMALL = 9
    SIZE_BODY = 10
    SIZE_SUBHEADING = 11
    SIZE_HEADING = 14
    SIZE_TITLE = 18

    @staticmethod
    def create_font(
        size: int = SIZE_BODY,
        bold: bool = False,
        italic: bool = False,
        families: Optional[List[str]] = None
    ) -> QFont:
        """
        Create a QFont with the application font families.

        Args:
            size: Font size in points (default: 10pt)
            bold: Use bold weight
            italic: Use italic style
            families: Custom font family list

        Returns:
            Configured QFont instance
        """
        if families is None:
            families = [
                FontManager.PRIMARY_FONT_FAMILY,
                FontManager.FALLBACK_FONT_FAMILY
            ]

        font = QFont()
        font.setFamilies(families)
        font.setPointSize(size)
        font.setWeight(QFont.Bold if bold else QFont.Normal)
        font.setItalic(italic)
        return font

    @staticmethod
    def set_application_default():
        """Set the default font for the running QApplication."""
        app = QApplication.instance()
        if app is not None:
            app.setFont(FontManager.create_font())


def create_font(
    size: int = FontManager.SIZE_BODY,
    bold: bool = False,
    italic: bool = False,
    families: Optional[List[str]] = None
) -> QFont:
    """Convenience wrapper for FontManager.create_font()."""
    return FontManager.create_font(size, bold, italic, families)


def set_application_default_font():
    """
    Set default font for entire application.

    Should be called once at application startup.
    """
    FontManager.set_application_default()
