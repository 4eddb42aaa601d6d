"""
Training Flow Design System

Design tokens shared by the training flow widgets: colors, spacing and
corner radii.
"""

from PyQt5.QtGui import QColor


class Colors:
    """
    Color palette for the training flow
    """
    PRIMARY_BLUE = "#2196F3"
    SURFACE = "#FFFFFF"

    # Text Colors
    TEXT_PRIMARY = "#2C3E50"  # Dark gray for main text
    TEXT_SECONDARY = "#7F8C9B"  # Medium gray for secondary text
    TEXT_MUTED = "#595959"  # Locked text body
    TEXT_DISABLED = "#BDC3C7"

    # Border & Divider Colors
    BORDER_DEFAULT = "#E1E8ED"
    DIVIDER = "#ECF0F1"

    # Status Colors
    SUCCESS = "#27AE60"
    WARNING = "#F39C12"
    ERROR = "#E74C3C"

    # Input Field States
    INPUT_BG = "#FFFFFF"
    INPUT_BORDER = "#E1E8ED"
    INPUT_BORDER_FOCUS = "#2196F3"
    INPUT_BORDER_ERROR = "#E74C3C"
    INPUT_PLACEHOLDER = "#95A5A6"

    # Locked / disabled inputs
    INPUT_DISABLED_BG = "#F1F5F9"
    INPUT_DISABLED_TEXT = "#94A3B8"
    INPUT_DISABLED_BORDER = "#E2E8F0"

    @staticmethod
    def with_alpha(color: str, alpha: float) -> str:
        """Return an rgba() QSS value for a hex color at the given opacity."""
        qcolor = QColor(color)
        if not qcolor.isValid():
            qcolor = QColor("#9E9E9E")
        return f"rgba({qcolor.red()}, {qcolor.green()}, {qcolor.blue()}, {alpha:.2f})"


class Spacing:
    """
    Spacing system for consistent layout
    Based on 8px grid system
    """
    XS = 4
    SM = 8
    MD = 16
    LG = 24

    CARD_PADDING = 12
    TEXT_BOX_PADDING = SM
    SECTION_SPACING = MD


class BorderRadius:
    """Border radius values for components"""
    NONE = 0
    SM = 4   # Small radius (inputs, text boxes)
    MD = 8   # Medium radius (cards)
