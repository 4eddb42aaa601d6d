# -*- coding: utf-8 -*-
"""
Training Flow Service Layer
"""

# Lazy imports to avoid pulling Qt in for plain exception imports
__all__ = [
    "TrainingStepService",
    "TrainingStepInfo",
    "InvalidStepError",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "TrainingStepService":
        from .training_step_service import TrainingStepService
        return TrainingStepService
    elif name == "TrainingStepInfo":
        from .training_step_service import TrainingStepInfo
        return TrainingStepInfo
    elif name == "InvalidStepError":
        from .exceptions import InvalidStepError
        return InvalidStepError
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
