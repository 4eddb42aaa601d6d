# -*- coding: utf-8 -*-
"""
Training Flow Application Core Module
"""

from .config import Config

__all__ = ["Config"]
