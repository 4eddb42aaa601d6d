# -*- coding: utf-8 -*-
"""
Input Field Component
Reusable single-line input with default/error/success styling.
"""

from PyQt5.QtWidgets import QLineEdit

from ..style_manager import StyleManager, InputVariant
from ..font_utils import create_font, FontManager


class InputField(QLineEdit):
    """
    Input field component.

    Features:
    - Configurable placeholder
    - Error/success states
    - Locked state (disabled and read-only together)

    Usage:
        field = InputField(placeholder="Enter your training text")
        field.set_locked(True)
    """

    def __init__(self, placeholder: str = "", variant: str = "default", parent=None):
        """
        Initialize input field.

        Args:
            placeholder: Placeholder text
            variant: Input variant ("default", "error", "success")
            parent: Parent widget
        """
        super().__init__(parent)
        self.variant = variant
        self._setup_ui(placeholder)

    def _setup_ui(self, placeholder: str):
        if placeholder:
            self.setPlaceholderText(placeholder)
            self.setAccessibleName(placeholder)

        self.setFont(create_font(size=FontManager.SIZE_BODY))
        self._apply_variant()

    def _apply_variant(self):
        """Apply variant-specific styling."""
        self.setStyleSheet(StyleManager.input_field(InputVariant(self.variant)))

    def set_variant(self, variant: str):
        """
        Change input variant dynamically.

        Args:
            variant: New variant ("default", "error", "success")
        """
        self.variant = variant
        self._apply_variant()

    def set_error(self):
        self.set_variant("error")

    def set_success(self):
        self.set_variant("success")

    def set_default(self):
        self.set_variant("default")

    def set_locked(self, locked: bool):
        """Lock or unlock the field against user edits."""
        self.setEnabled(not locked)
        self.setReadOnly(locked)

    def is_locked(self) -> bool:
        return not self.isEnabled()
