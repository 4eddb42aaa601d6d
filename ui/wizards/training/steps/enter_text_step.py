# -*- coding: utf-8 -*-
"""
Enter Text Step - the first step of the training flow.

One widget, two ways of keeping its value:

- EnterTextStepSectionImpl hands committed text to an owner callback and
  validates purely from what the host passed in.
- StatefulEnterTextStepSection writes every keystroke to a
  TrainingStepService slot and validates by reading the slot back.

Both are EnterTextStepSection configured with a different TextPersistence.
"""

from typing import Any, Callable, Dict, Optional

from PyQt5.QtWidgets import QLabel, QWidget
from PyQt5.QtCore import pyqtSignal

from services.training_step_service import TrainingStepService
from services.translation_manager import tr
from ui.components.input_field import InputField
from ui.font_utils import create_font, FontManager
from ui.style_manager import StyleManager
from ui.wizards.framework.base_step import (
    BaseStep, StepDescriptor, StepState, StepValidationResult, has_text
)
from ui.wizards.training.persistence import (
    CallbackPersistence, StorePersistence, TextPersistence
)
from utils.logger import get_logger

logger = get_logger(__name__)


class EnterTextStepSection(BaseStep):
    """
    Text entry step with an injected persistence strategy.

    Signals:
        value_changed(str): the field text changed (user edit or host write)
        text_submitted(str): the user committed the text while editable
    """

    text_submitted = pyqtSignal(str)

    def __init__(self, descriptor: StepDescriptor, persistence: TextPersistence,
                 parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._descriptor = descriptor
        self._persistence = persistence
        self._last_text = persistence.initial_text(descriptor.initial_value)
        self._host_write = False

        self.initialize()
        self._persistence.attach(self)

    # =========================================================================
    # UI
    # =========================================================================

    def setup_ui(self):
        self.title_label = QLabel(self._descriptor.title)
        self.title_label.setFont(create_font(size=FontManager.SIZE_HEADING, bold=True))
        self.title_label.setStyleSheet(StyleManager.label_title())
        self.main_layout.addWidget(self.title_label)

        self.description_label = QLabel(self._descriptor.description)
        self.description_label.setWordWrap(True)
        self.description_label.setStyleSheet(StyleManager.label_subtitle())
        self.main_layout.addWidget(self.description_label)
        self.main_layout.addSpacing(8)

        self.text_field = InputField(placeholder=tr("step.enter_text.label"))
        self.text_field.setText(self._last_text)
        self.text_field.textChanged.connect(self._on_text_changed)
        self.text_field.returnPressed.connect(self.commit)
        self.main_layout.addWidget(self.text_field)

        self.completed_label = QLabel(tr("step.completed"))
        self.completed_label.setStyleSheet(StyleManager.label_success())
        self.main_layout.addWidget(self.completed_label)

        self._apply_flags()

    def _apply_flags(self):
        self.text_field.set_locked(not self._descriptor.is_editable)
        self.completed_label.setVisible(self.shows_completed())
        if self._descriptor.is_completed:
            self.text_field.set_success()
        elif self.text_field.variant == "success":
            self.text_field.set_default()

    def shows_completed(self) -> bool:
        """The completed note is shown only on a locked, completed step."""
        return not self._descriptor.is_editable and self._descriptor.is_completed

    def show_validation_errors(self, result: StepValidationResult):
        """Flag the field until the next edit."""
        if not self._is_disposed and not result.is_valid:
            self.text_field.set_error()

    def _on_text_changed(self, text: str):
        self._last_text = text
        if self.text_field.variant == "error":
            self.text_field.set_default()
        self.value_changed.emit(text)

    def _write_from_host(self, text: str):
        self._host_write = True
        try:
            self.text_field.setText(text)
        finally:
            self._host_write = False

    @property
    def is_host_write(self) -> bool:
        """True while the field text is being replaced by the host."""
        return self._host_write

    # =========================================================================
    # Value access
    # =========================================================================

    @property
    def descriptor(self) -> StepDescriptor:
        return self._descriptor

    @property
    def persistence(self) -> TextPersistence:
        return self._persistence

    def get_value(self) -> str:
        if self._is_disposed:
            return self._last_text
        return self.text_field.text()

    def set_value(self, value: str):
        """Host write; allowed even while the field is locked."""
        if self._is_disposed:
            logger.warning(f"set_value on disposed step '{self._descriptor.title}' ignored")
            return
        self._write_from_host(value or "")

    def commit(self) -> bool:
        """
        Submit the current text.

        Returns:
            False when the step is not editable (nothing is submitted)
        """
        if self._is_disposed or not self._descriptor.is_editable:
            return False
        self.text_submitted.emit(self.get_value())
        return True

    def update_descriptor(self, descriptor: StepDescriptor):
        """
        Take a fresh descriptor from the host.

        The field is resynced to the new initial value only when that value
        differs from the previous initial value and from the live text, so
        in-progress edits survive a rebuild that repeats the old value.
        """
        previous = self._descriptor
        self._descriptor = descriptor

        if self._is_disposed:
            return

        if (descriptor.initial_value != previous.initial_value
                and descriptor.initial_value != self.get_value()):
            logger.debug(f"Resyncing '{descriptor.title}' to new initial value")
            self._write_from_host(descriptor.initial_value)

        self.title_label.setText(descriptor.title)
        self.description_label.setText(descriptor.description)
        self._apply_flags()

    def set_initial_value(self, value: str):
        self.update_descriptor(self._descriptor.with_changes(initial_value=value))

    # =========================================================================
    # Validation
    # =========================================================================

    def validate(self) -> StepValidationResult:
        return self._persistence.validate(self)

    def is_synchronized(self) -> bool:
        return self._persistence.is_synchronized(self)

    def state(self) -> StepState:
        if self._descriptor.is_editable:
            if has_text(self.get_value()):
                return StepState.EDITABLE_NON_EMPTY
            return StepState.EDITABLE_EMPTY
        if self._descriptor.is_completed:
            return StepState.LOCKED_COMPLETE
        return StepState.LOCKED_INCOMPLETE

    def collect_data(self) -> Dict[str, Any]:
        return {
            "title": self._descriptor.title,
            "text": self.get_value(),
            "is_completed": self._descriptor.is_completed,
        }

    def get_step_title(self) -> str:
        return self._descriptor.title

    def get_step_description(self) -> str:
        return self._descriptor.description

    # =========================================================================
    # Teardown
    # =========================================================================

    def _release(self):
        self._last_text = self.text_field.text()
        try:
            self._persistence.detach()
        finally:
            self.text_field.textChanged.disconnect(self._on_text_changed)
            self.text_field.returnPressed.disconnect(self.commit)
            self.main_layout.removeWidget(self.text_field)
            self.text_field.deleteLater()
            logger.debug(f"Step '{self._descriptor.title}' disposed")


class EnterTextStepSectionImpl(EnterTextStepSection):
    """
    Enter-text step that reports committed text to its owner.

    Validation is a pure function of is_completed and initial_value.
    """

    def __init__(self, title: str, description: str, is_editable: bool,
                 is_completed: bool, initial_value: str,
                 on_text_submitted: Callable[[str], None],
                 submit_on_change: bool = False,
                 parent: Optional[QWidget] = None):
        descriptor = StepDescriptor(
            title=title,
            description=description,
            is_editable=is_editable,
            is_completed=is_completed,
            initial_value=initial_value,
        )
        super().__init__(
            descriptor,
            CallbackPersistence(on_text_submitted, submit_on_change=submit_on_change),
            parent,
        )


class StatefulEnterTextStepSection(EnterTextStepSection):
    """
    Enter-text step that writes every keystroke to a step input store.

    Validation reads the stored value for step_id back from the service.
    """

    def __init__(self, service: TrainingStepService, step_id: int, title: str,
                 description: str, is_editable: bool, is_completed: bool,
                 initial_value: str, parent: Optional[QWidget] = None):
        descriptor = StepDescriptor(
            title=title,
            description=description,
            is_editable=is_editable,
            is_completed=is_completed,
            initial_value=initial_value,
        )
        super().__init__(descriptor, StorePersistence(service, step_id), parent)

    @property
    def step_id(self) -> int:
        return self._persistence.step_id

    def collect_data(self) -> Dict[str, Any]:
        data = super().collect_data()
        data["step_id"] = self.step_id
        return data
