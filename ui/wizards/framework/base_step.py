# -*- coding: utf-8 -*-
"""
Base Step - Abstract base class for training flow steps.

All steps should inherit from this class and implement:
- setup_ui(): Create the step's UI
- validate(): Validate step data
- collect_data(): Collect data from UI
- get_value() / set_value(): Read and write the step's current value
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Dict, Any, Optional
from abc import ABCMeta, abstractmethod

from PyQt5.QtWidgets import QWidget, QVBoxLayout
from PyQt5.QtCore import pyqtSignal


@dataclass
class StepValidationResult:
    """Result of step validation."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)

    def add_error(self, message: str):
        """Add an error message."""
        self.errors.append(message)
        self.is_valid = False

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def __bool__(self) -> bool:
        return self.is_valid


@dataclass(frozen=True)
class StepDescriptor:
    """Host-supplied attributes of a step, rebuilt on every host refresh."""
    title: str
    description: str
    is_editable: bool
    is_completed: bool
    initial_value: str = ""

    def with_changes(self, **changes) -> 'StepDescriptor':
        return replace(self, **changes)


class StepState(Enum):
    """Observable state of a text step."""
    EDITABLE_EMPTY = "editable_empty"
    EDITABLE_NON_EMPTY = "editable_non_empty"
    LOCKED_INCOMPLETE = "locked_incomplete"
    LOCKED_COMPLETE = "locked_complete"


def has_text(value: Optional[str]) -> bool:
    """True if value holds anything besides surrounding whitespace. None counts as empty."""
    return bool(value and value.strip())


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class BaseStep(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for training flow steps.

    Provides common functionality for:
    - UI setup and lifecycle
    - Data validation
    - Value access
    - Teardown
    """

    # Signals
    value_changed = pyqtSignal(str)

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._is_initialized = False
        self._is_disposed = False

        # Main layout
        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(0, 0, 0, 0)
        self.main_layout.setSpacing(8)

    def initialize(self):
        """
        Initialize the step (called once).
        """
        if not self._is_initialized:
            self.setup_ui()
            self._is_initialized = True

    def on_show(self):
        """
        Called when the step becomes the active step.

        Override this method to refresh the UI from host data.
        """
        if not self._is_initialized:
            self.initialize()

    def on_hide(self):
        """
        Called when the host moves away from the step.
        """
        pass

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def setup_ui(self):
        """
        Setup the step's UI.

        This method is called once during initialization.
        """
        pass

    @abstractmethod
    def validate(self) -> StepValidationResult:
        """
        Validate the step's data.

        Returns:
            StepValidationResult with validation status and messages
        """
        pass

    @abstractmethod
    def collect_data(self) -> Dict[str, Any]:
        """
        Collect data from the step's UI.

        Returns:
            Dictionary containing step data
        """
        pass

    @abstractmethod
    def get_value(self) -> str:
        pass

    @abstractmethod
    def set_value(self, value: str):
        pass

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def get_step_title(self) -> str:
        """
        Get the step's title.

        Default implementation returns the class name.
        """
        return self.__class__.__name__

    def get_step_description(self) -> str:
        return ""

    def is_valid(self) -> bool:
        """Shortcut for validate().is_valid."""
        return self.validate().is_valid

    def dispose(self):
        """
        Release resources held by the step.

        Safe to call more than once. Subclasses override _release().
        """
        if self._is_disposed:
            return
        self._is_disposed = True
        self._release()

    def is_disposed(self) -> bool:
        return self._is_disposed

    def _release(self):
        pass

    def closeEvent(self, event):
        self.dispose()
        super().closeEvent(event)

    # =========================================================================
    # Helper Methods
    # =========================================================================

    def create_validation_result(self) -> StepValidationResult:
        """Create a new validation result object."""
        return StepValidationResult(is_valid=True)
