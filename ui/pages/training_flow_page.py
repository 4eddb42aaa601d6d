# -*- coding: utf-8 -*-
"""
Training Flow Page - hosts the training steps and their navigation.

Step 0 is the service-backed enter-text step; every later step previews
the entered text. The footer completes, advances and resets steps.
"""

from typing import Optional

from PyQt5.QtWidgets import (
    QFrame, QHBoxLayout, QLabel, QPushButton, QStackedWidget, QVBoxLayout, QWidget
)

from services.training_step_service import TrainingStepService
from services.translation_manager import tr
from ui.error_handler import ErrorHandler
from ui.font_utils import create_font, FontManager
from ui.style_manager import StyleManager
from ui.wizards.framework import StepDescriptor, StepNavigator, StepValidationResult
from ui.wizards.training.steps import StatefulEnterTextStepSection, TextPreviewStep
from utils.logger import get_logger

logger = get_logger(__name__)

ENTER_TEXT_STEP_ID = 0


class TrainingFlowPage(QWidget):
    """Page that walks the user through the training flow steps."""

    def __init__(self, service: TrainingStepService, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.service = service
        self.steps = self._create_steps()
        self.navigator = StepNavigator(self.service, self.steps)

        self.navigator.step_changed.connect(self._on_step_changed)
        self.navigator.validation_failed.connect(self._on_validation_failed)
        self.service.progress_changed.connect(self._refresh)

        self._setup_ui()
        self._refresh()

    def _create_steps(self):
        infos = self.service.steps
        first = infos[ENTER_TEXT_STEP_ID]
        steps = [
            StatefulEnterTextStepSection(
                service=self.service,
                step_id=first.step_id,
                title=first.title,
                description=first.description,
                is_editable=not self.service.is_step_completed(first.step_id),
                is_completed=self.service.is_step_completed(first.step_id),
                initial_value=self.service.get_step_input(first.step_id) or "",
            )
        ]
        steps.extend(
            TextPreviewStep(self.service, info, source_step_id=ENTER_TEXT_STEP_ID)
            for info in infos[1:]
        )
        return steps

    # =========================================================================
    # UI Setup
    # =========================================================================

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        self.progress_label = QLabel()
        self.progress_label.setFont(create_font(size=FontManager.SIZE_SUBHEADING, bold=True))
        layout.addWidget(self.progress_label)

        self.step_card = QFrame()
        self.step_card.setObjectName("StepCard")
        card_layout = QVBoxLayout(self.step_card)
        card_layout.setContentsMargins(16, 16, 16, 16)

        self.step_container = QStackedWidget()
        for step in self.steps:
            self.step_container.addWidget(step)
        card_layout.addWidget(self.step_container)
        layout.addWidget(self.step_card, 1)

        footer = QHBoxLayout()
        footer.setSpacing(12)

        self.btn_reset = QPushButton(tr("button.reset_step"))
        self.btn_reset.clicked.connect(self._handle_reset)
        footer.addWidget(self.btn_reset)
        footer.addStretch()

        self.btn_previous = QPushButton(tr("button.previous"))
        self.btn_previous.clicked.connect(self.navigator.previous_step)
        footer.addWidget(self.btn_previous)

        self.btn_primary = QPushButton(tr("button.complete_step"))
        self.btn_primary.clicked.connect(self._handle_primary)
        footer.addWidget(self.btn_primary)

        layout.addLayout(footer)

    # =========================================================================
    # Handlers
    # =========================================================================

    def _handle_primary(self):
        if self.service.is_step_completed(self.navigator.current_index):
            self.navigator.next_step()
        else:
            self.navigator.complete_current_step()

    def _handle_reset(self):
        index = self.navigator.current_index
        if not ErrorHandler.confirm(self, tr("reset.confirm", step=index + 1)):
            return
        self.navigator.reset_from(index)
        if index <= ENTER_TEXT_STEP_ID:
            # The refreshed descriptor repeats an empty initial value, so the
            # field is not resynced by it
            self.steps[ENTER_TEXT_STEP_ID].set_value("")

    def _on_step_changed(self, old_index: int, new_index: int):
        self.step_container.setCurrentIndex(new_index)
        self._refresh()

    def _on_validation_failed(self, result: StepValidationResult):
        if self.navigator.current_index == ENTER_TEXT_STEP_ID:
            self.steps[ENTER_TEXT_STEP_ID].show_validation_errors(result)
        message = "\n".join(f"• {error}" for error in result.errors)
        ErrorHandler.show_warning(self, message or tr("validation.check_data"))

    def _refresh(self):
        """Push current service state into the enter-text step and footer."""
        current = self.navigator.current_index
        completed = self.service.is_step_completed(ENTER_TEXT_STEP_ID)

        enter_step = self.steps[ENTER_TEXT_STEP_ID]
        info = self.service.get_step(ENTER_TEXT_STEP_ID)
        enter_step.update_descriptor(StepDescriptor(
            title=info.title,
            description=info.description,
            is_editable=not completed and current == ENTER_TEXT_STEP_ID,
            is_completed=completed,
            initial_value=self.service.get_step_input(ENTER_TEXT_STEP_ID) or "",
        ))

        self.progress_label.setText(
            tr("step.progress", current=current + 1, total=len(self.steps))
        )
        accent = self.service.get_step(current).color
        self.step_card.setStyleSheet(StyleManager.step_card(accent, is_current=True))

        current_done = self.service.is_step_completed(current)
        if current_done:
            self.btn_primary.setText(tr("button.next_step"))
            self.btn_primary.setEnabled(self.navigator.can_go_next())
        else:
            self.btn_primary.setText(tr("button.complete_step"))
            self.btn_primary.setEnabled(True)
        self.btn_previous.setEnabled(self.navigator.can_go_previous())

    def closeEvent(self, event):
        for step in self.steps:
            step.dispose()
        super().closeEvent(event)
