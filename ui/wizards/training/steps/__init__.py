# -*- coding: utf-8 -*-
"""Training flow steps."""

from .enter_text_step import (
    EnterTextStepSection,
    EnterTextStepSectionImpl,
    StatefulEnterTextStepSection,
)
from .text_preview_step import TextPreviewStep

__all__ = [
    "EnterTextStepSection",
    "EnterTextStepSectionImpl",
    "StatefulEnterTextStepSection",
    "TextPreviewStep",
]
