# -*- coding: utf-8 -*-
"""
Persistence strategies for text steps.

A strategy decides where a text step's value goes and how the step is
validated:

- CallbackPersistence hands committed text to the step's owner and
  validates from the host-supplied descriptor alone.
- StorePersistence mirrors every edit into a TrainingStepService slot and
  validates by reading that slot back.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional, TYPE_CHECKING

from services.training_step_service import TrainingStepService, check_step_id
from services.translation_manager import tr
from ui.wizards.framework.base_step import StepValidationResult, has_text
from utils.logger import get_logger

if TYPE_CHECKING:
    from ui.wizards.training.steps.enter_text_step import EnterTextStepSection

logger = get_logger(__name__)


class TextPersistence(ABC):
    """Where a text step's value lives."""

    def __init__(self):
        self._step: Optional['EnterTextStepSection'] = None

    def initial_text(self, initial_value: str) -> str:
        """Text the step's buffer starts with."""
        return initial_value

    def attach(self, step: 'EnterTextStepSection'):
        """Start listening to a step."""
        if self._step is not None:
            raise RuntimeError("Persistence is already attached to a step")
        self._step = step
        self._connect(step)

    def detach(self):
        """Stop listening. Does nothing when not attached."""
        if self._step is None:
            return
        step, self._step = self._step, None
        self._disconnect(step)

    @property
    def is_attached(self) -> bool:
        return self._step is not None

    @abstractmethod
    def _connect(self, step: 'EnterTextStepSection'):
        pass

    @abstractmethod
    def _disconnect(self, step: 'EnterTextStepSection'):
        pass

    @abstractmethod
    def validate(self, step: 'EnterTextStepSection') -> StepValidationResult:
        pass

    @abstractmethod
    def is_synchronized(self, step: 'EnterTextStepSection') -> bool:
        """Check whether the persisted value matches what the step shows."""
        pass


class CallbackPersistence(TextPersistence):
    """
    Delegate persistence to the step's owner.

    Args:
        on_text_submitted: Called with the text on explicit commit
        submit_on_change: Also call it on every edit
    """

    def __init__(self, on_text_submitted: Callable[[str], None], submit_on_change: bool = False):
        super().__init__()
        self.on_text_submitted = on_text_submitted
        self.submit_on_change = submit_on_change

    def _connect(self, step):
        step.text_submitted.connect(self._forward)
        if self.submit_on_change:
            step.value_changed.connect(self._forward_edit)

    def _disconnect(self, step):
        step.text_submitted.disconnect(self._forward)
        if self.submit_on_change:
            step.value_changed.disconnect(self._forward_edit)

    def _forward(self, text: str):
        self.on_text_submitted(text)

    def _forward_edit(self, text: str):
        # Host writes are not submissions, whether or not the field is editable
        step = self._step
        if step is not None and step.descriptor.is_editable and not step.is_host_write:
            self.on_text_submitted(text)

    def validate(self, step) -> StepValidationResult:
        descriptor = step.descriptor
        result = StepValidationResult(is_valid=True)
        if not has_text(descriptor.initial_value):
            result.add_error(tr("validation.enter_text"))
        if not descriptor.is_completed:
            result.add_error(tr("validation.step_incomplete"))
        return result

    def is_synchronized(self, step) -> bool:
        return step.get_value() == step.descriptor.initial_value


class StorePersistence(TextPersistence):
    """
    Mirror every edit into a TrainingStepService slot.

    Args:
        service: The step input store
        step_id: Slot the step reads and writes
    """

    def __init__(self, service: TrainingStepService, step_id: int):
        super().__init__()
        if service is None:
            raise ValueError("StorePersistence needs a TrainingStepService")
        check_step_id(step_id)
        self.service = service
        self.step_id = step_id

    def stored_text(self) -> str:
        return self.service.get_step_input(self.step_id) or ""

    def initial_text(self, initial_value: str) -> str:
        # Restore the slot when the host has nothing newer to show
        if not initial_value:
            stored = self.stored_text()
            if stored:
                logger.debug(f"Restoring step {self.step_id} text from store")
                return stored
        return initial_value

    def _connect(self, step):
        step.value_changed.connect(self._write)

    def _disconnect(self, step):
        step.value_changed.disconnect(self._write)

    def _write(self, text: str):
        self.service.set_step_input(self.step_id, text)

    def validate(self, step) -> StepValidationResult:
        result = StepValidationResult(is_valid=True)
        if not has_text(self.service.get_step_input(self.step_id)):
            result.add_error(tr("validation.enter_text"))
        return result

    def is_synchronized(self, step) -> bool:
        return step.get_value() == self.stored_text()
