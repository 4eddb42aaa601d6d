# -*- coding: utf-8 -*-
"""
Original Text Display - read-only card showing the text a flow started from.
"""

from typing import Optional

from PyQt5.QtWidgets import QFrame, QHBoxLayout, QLabel, QVBoxLayout, QWidget
from PyQt5.QtCore import Qt

from app.config import Config
from services.translation_manager import tr
from ..design_system import Spacing
from ..font_utils import create_font, FontManager
from ..style_manager import StyleManager

LOCK_GLYPH = "\U0001F512"


class OriginalTextDisplay(QFrame):
    """
    Bordered card displaying text in a locked, non-editable state.

    The text is shown verbatim as plain text: no trimming, no truncation,
    no rich-text interpretation.

    Usage:
        card = OriginalTextDisplay(text=service.get_step_input(0) or "")
        card = OriginalTextDisplay(text, title="Your prompt", theme_color="#4CAF50")
    """

    def __init__(self, text: str, title: Optional[str] = None,
                 theme_color: Optional[str] = None, parent: Optional[QWidget] = None):
        """
        Initialize the display.

        Args:
            text: Text to display
            title: Header label (defaults to "Original Input Text")
            theme_color: Accent color (defaults to the neutral gray)
            parent: Parent widget
        """
        super().__init__(parent)
        self._text = text
        self._title = title if title is not None else tr("original_text.title")
        self._theme_color = theme_color or Config.NEUTRAL_COLOR
        self._setup_ui()

    def _setup_ui(self):
        self.setObjectName("OriginalTextDisplay")
        self.setStyleSheet(StyleManager.locked_card(self._theme_color))

        layout = QVBoxLayout(self)
        layout.setContentsMargins(
            Spacing.CARD_PADDING, Spacing.CARD_PADDING,
            Spacing.CARD_PADDING, Spacing.CARD_PADDING
        )
        layout.setSpacing(Spacing.SM)

        # Header: title on the left, lock on the right
        header = QHBoxLayout()
        header.setSpacing(Spacing.SM)

        self.title_label = QLabel(self._title)
        self.title_label.setObjectName("OriginalTextTitle")
        self.title_label.setFont(create_font(size=FontManager.SIZE_SUBHEADING, bold=True))
        self.title_label.setStyleSheet(StyleManager.label_title(self._theme_color))
        header.addWidget(self.title_label)
        header.addStretch()

        self.lock_label = QLabel(LOCK_GLYPH)
        self.lock_label.setObjectName("OriginalTextLock")
        self.lock_label.setToolTip(tr("step.locked"))
        self.lock_label.setStyleSheet(StyleManager.label_title(self._theme_color))
        header.addWidget(self.lock_label)
        layout.addLayout(header)

        self.body_label = QLabel()
        self.body_label.setObjectName("OriginalTextBody")
        self.body_label.setTextFormat(Qt.PlainText)
        self.body_label.setWordWrap(True)
        self.body_label.setTextInteractionFlags(Qt.NoTextInteraction)
        self.body_label.setFont(create_font(size=FontManager.SIZE_BODY, italic=True))
        self.body_label.setStyleSheet(StyleManager.locked_text_box(self._theme_color))
        self.body_label.setText(self._text)
        layout.addWidget(self.body_label)

    def text(self) -> str:
        return self.body_label.text()

    def title(self) -> str:
        return self._title

    def theme_color(self) -> str:
        return self._theme_color
