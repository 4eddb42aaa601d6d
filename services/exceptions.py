# -*- coding: utf-8 -*-
"""Custom exceptions for the application."""


class InvalidStepError(ValueError):
    """Exception raised when a step id is not usable by the step store."""

    def __init__(self, message: str, step_id=None, context: str = None):
        super().__init__(message)
        self.message = message
        self.step_id = step_id
        self.context = context

    def __str__(self):
        if self.step_id is not None:
            return f"[step {self.step_id}] {self.message}"
        return self.message
