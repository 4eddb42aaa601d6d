# -*- coding: utf-8 -*-
"""
Centralized Style Manager
Single source of truth for the training flow stylesheets.

Usage:
    from ui.style_manager import StyleManager

    field.setStyleSheet(StyleManager.input_field())
    card.setStyleSheet(StyleManager.locked_card("#9E9E9E"))
"""

from enum import Enum

from .design_system import Colors, BorderRadius, Spacing


class InputVariant(Enum):
    """Input field style variants"""
    DEFAULT = "default"
    ERROR = "error"
    SUCCESS = "success"


class StyleManager:
    """
    Centralized stylesheet generator.

    Components take their QSS from here rather than defining it inline.
    """

    # ==================== INPUTS ====================

    @staticmethod
    def input_field(variant: InputVariant = InputVariant.DEFAULT) -> str:
        """
        Get input field stylesheet.

        Args:
            variant: Input variant (DEFAULT, ERROR, SUCCESS)

        Returns:
            Complete QSS stylesheet string
        """
        border_color = Colors.INPUT_BORDER
        focus_color = Colors.INPUT_BORDER_FOCUS

        if variant == InputVariant.ERROR:
            border_color = Colors.INPUT_BORDER_ERROR
            focus_color = Colors.INPUT_BORDER_ERROR
        elif variant == InputVariant.SUCCESS:
            border_color = Colors.SUCCESS
            focus_color = Colors.SUCCESS

        return f"""
            QLineEdit {{
                background-color: {Colors.INPUT_BG};
                border: 1px solid {border_color};
                border-radius: 6px;
                padding: 10px 14px;
                min-height: 22px;
                color: {Colors.TEXT_PRIMARY};
            }}
            QLineEdit:focus {{
                border: 2px solid {focus_color};
                padding: 9px 13px;
            }}
            QLineEdit:disabled {{
                background-color: {Colors.INPUT_DISABLED_BG};
                color: {Colors.INPUT_DISABLED_TEXT};
                border-color: {Colors.INPUT_DISABLED_BORDER};
            }}
        """

    # ==================== CARDS ====================

    @staticmethod
    def locked_card(theme_color: str) -> str:
        """
        Get read-only text card stylesheet.

        Tinted background and border derived from the theme color.
        """
        return f"""
            QFrame#OriginalTextDisplay {{
                background-color: {Colors.with_alpha(theme_color, 0.05)};
                border: 1px solid {Colors.with_alpha(theme_color, 0.3)};
                border-radius: {BorderRadius.MD}px;
            }}
        """

    @staticmethod
    def locked_text_box(theme_color: str) -> str:
        """Get the inner text box stylesheet of the read-only card."""
        return f"""
            QLabel#OriginalTextBody {{
                background-color: {Colors.with_alpha(theme_color, 0.1)};
                border: 1px solid {Colors.with_alpha(theme_color, 0.2)};
                border-radius: {BorderRadius.SM}px;
                padding: {Spacing.TEXT_BOX_PADDING}px;
                color: {Colors.TEXT_MUTED};
            }}
        """

    @staticmethod
    def step_card(accent_color: str, is_current: bool) -> str:
        """Get the stylesheet of a step card in the training flow page."""
        border = f"2px solid {accent_color}" if is_current else f"1px solid {Colors.BORDER_DEFAULT}"
        return f"""
            QFrame#StepCard {{
                background-color: {Colors.SURFACE};
                border: {border};
                border-radius: {BorderRadius.MD}px;
            }}
        """

    # ==================== LABELS ====================

    @staticmethod
    def label_title(color: str = Colors.TEXT_PRIMARY) -> str:
        """Title label stylesheet."""
        return f"color: {color}; border: none; background: transparent;"

    @staticmethod
    def label_subtitle() -> str:
        """Secondary text, descriptions."""
        return f"color: {Colors.TEXT_SECONDARY}; border: none; background: transparent;"

    @staticmethod
    def label_success() -> str:
        """Success messages, confirmations."""
        return f"color: {Colors.SUCCESS}; border: none;"

