# -*- coding: utf-8 -*-
"""
Training Flow UI Components
"""

from .input_field import InputField
from .original_text_display import OriginalTextDisplay

__all__ = [
    "InputField",
    "OriginalTextDisplay",
]
