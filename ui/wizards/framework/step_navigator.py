# -*- coding: utf-8 -*-
"""
Step Navigator - Manages navigation between training flow steps.

Handles:
- Step completion (validate, then record in the step service)
- Step progression (next/previous), gated by the unlock rule
- Resetting a step and everything after it
"""

from typing import List, Optional
from PyQt5.QtCore import QObject, pyqtSignal

from services.training_step_service import TrainingStepService
from .base_step import BaseStep, StepValidationResult
from utils.logger import get_logger

logger = get_logger(__name__)


class StepNavigator(QObject):
    """
    Manages navigation between steps.

    Responsibilities:
    - Track current step
    - Validate before completing a step
    - Emit signals for UI updates
    - Manage step lifecycle (show/hide)
    """

    # Signals
    step_changed = pyqtSignal(int, int)  # old_index, new_index
    step_completed = pyqtSignal(int)
    validation_failed = pyqtSignal(StepValidationResult)

    def __init__(self, service: TrainingStepService, steps: List[BaseStep]):
        """
        Initialize the navigator.

        Args:
            service: Step service holding completion state
            steps: Steps in flow order; index i is step id i
        """
        super().__init__()
        self.service = service
        self.steps = steps
        self.current_index = 0

    def get_current_step(self) -> Optional[BaseStep]:
        """Get the current step."""
        if 0 <= self.current_index < len(self.steps):
            return self.steps[self.current_index]
        return None

    def get_step_count(self) -> int:
        return len(self.steps)

    def is_last_step(self) -> bool:
        return self.current_index == len(self.steps) - 1

    def can_go_next(self) -> bool:
        """Next is allowed once the current step is completed."""
        return (not self.is_last_step()
                and self.service.is_step_unlocked(self.current_index + 1))

    def can_go_previous(self) -> bool:
        return self.current_index > 0

    def replace_step(self, index: int, step: BaseStep) -> BaseStep:
        """
        Swap in a rebuilt step, disposing the one it replaces.

        Returns:
            The previous step (already disposed)
        """
        old = self.steps[index]
        try:
            self.steps[index] = step
            if index == self.current_index:
                step.on_show()
        finally:
            old.dispose()
        return old

    def complete_current_step(self) -> bool:
        """
        Validate the current step and record it as completed.

        Moves on to the next step when there is one.

        Returns:
            True if the step validated
        """
        current_step = self.get_current_step()
        if current_step is None:
            return False

        logger.debug(f"Validating step {self.current_index}...")
        validation_result = current_step.validate()
        if not validation_result.is_valid:
            logger.warning(
                f"Step {self.current_index} validation failed: {validation_result.errors}"
            )
            self.validation_failed.emit(validation_result)
            return False

        self.service.complete_step(self.current_index)
        self.step_completed.emit(self.current_index)

        if not self.is_last_step():
            self._navigate_to(self.current_index + 1)
        return True

    def next_step(self) -> bool:
        """Navigate to the next step if it is unlocked."""
        if not self.can_go_next():
            logger.debug(f"Cannot go next from step {self.current_index}")
            return False

        logger.info(f"Navigating: Step {self.current_index} → {self.current_index + 1}")
        return self._navigate_to(self.current_index + 1)

    def previous_step(self) -> bool:
        """Navigate to the previous step."""
        if not self.can_go_previous():
            logger.debug(f"Cannot go previous: already at first step ({self.current_index})")
            return False

        logger.info(f"Navigating back: Step {self.current_index} → {self.current_index - 1}")
        return self._navigate_to(self.current_index - 1)

    def goto_step(self, index: int, skip_validation: bool = False) -> bool:
        """
        Navigate to a specific step.

        Args:
            index: Target step index
            skip_validation: If True, ignore the unlock rule

        Returns:
            True if navigation was successful
        """
        if index < 0 or index >= len(self.steps):
            return False

        if index == self.current_index:
            return True

        if not skip_validation and not self.service.is_step_unlocked(index):
            logger.debug(f"Step {index} is locked")
            return False

        return self._navigate_to(index)

    def reset_from(self, index: int):
        """
        Reset a step and all later steps.

        The current step moves back to index if it was at or after it.
        """
        logger.info(f"Resetting progress from step {index}")
        self.service.reset_progress_from_step(index)
        if index <= self.current_index:
            self._navigate_to(index, force_show=True)

    def _navigate_to(self, new_index: int, force_show: bool = False) -> bool:
        if new_index < 0 or new_index >= len(self.steps):
            logger.error(f"Invalid step index: {new_index} (valid range: 0-{len(self.steps)-1})")
            return False

        old_index = self.current_index
        if new_index == old_index and not force_show:
            return True

        current_step = self.get_current_step()
        if current_step and new_index != old_index:
            current_step.on_hide()

        self.current_index = new_index

        new_step = self.get_current_step()
        if new_step:
            logger.debug(f"Showing step {new_index}: {new_step.get_step_title()}")
            new_step.on_show()

        self.step_changed.emit(old_index, new_index)
        logger.info(f"Navigation complete: Step {new_index} is now active")
        return True

    def get_progress_percentage(self) -> float:
        """
        Get completed steps as a percentage.

        Returns:
            Progress percentage (0.0 to 100.0)
        """
        if len(self.steps) == 0:
            return 0.0
        return len(self.service.completed_steps) / len(self.steps) * 100.0
