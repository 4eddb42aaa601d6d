# -*- coding: utf-8 -*-
"""
Training Flow Wizard - steps and persistence strategies.
"""

from .persistence import TextPersistence, CallbackPersistence, StorePersistence

__all__ = [
    "TextPersistence",
    "CallbackPersistence",
    "StorePersistence",
]
