# -*- coding: utf-8 -*-
"""
Wizard Framework - base step types and navigation for the training flow.
"""

from .base_step import BaseStep, StepDescriptor, StepState, StepValidationResult
from .step_navigator import StepNavigator

__all__ = [
    'BaseStep',
    'StepDescriptor',
    'StepState',
    'StepValidationResult',
    'StepNavigator'
]
