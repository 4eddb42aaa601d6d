# -*- coding: utf-8 -*-
"""
Training Flow Pages
"""

from .training_flow_page import TrainingFlowPage

__all__ = ["TrainingFlowPage"]
