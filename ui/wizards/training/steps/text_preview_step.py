# -*- coding: utf-8 -*-
"""
Text Preview Step - a later training step that shows the entered text locked.
"""

from typing import Any, Dict, Optional

from PyQt5.QtWidgets import QLabel, QWidget

from services.training_step_service import TrainingStepInfo, TrainingStepService
from services.translation_manager import tr
from ui.components.original_text_display import OriginalTextDisplay
from ui.font_utils import create_font, FontManager
from ui.style_manager import StyleManager
from ui.wizards.framework.base_step import BaseStep, StepValidationResult, has_text


class TextPreviewStep(BaseStep):
    """
    Shows the text stored for source_step_id in an OriginalTextDisplay.

    The display is rebuilt every time the step is shown so it always
    reflects the current store content.
    """

    def __init__(self, service: TrainingStepService, info: TrainingStepInfo,
                 source_step_id: int = 0, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.service = service
        self.info = info
        self.source_step_id = source_step_id
        self.display: Optional[OriginalTextDisplay] = None
        self.initialize()

    def setup_ui(self):
        title = QLabel(self.info.title)
        title.setFont(create_font(size=FontManager.SIZE_HEADING, bold=True))
        title.setStyleSheet(StyleManager.label_title())
        self.main_layout.addWidget(title)

        description = QLabel(self.info.description)
        description.setWordWrap(True)
        description.setStyleSheet(StyleManager.label_subtitle())
        self.main_layout.addWidget(description)

        self._rebuild_display()

    def on_show(self):
        super().on_show()
        self._rebuild_display()

    def _rebuild_display(self):
        if self.display is not None:
            self.main_layout.removeWidget(self.display)
            self.display.deleteLater()
        self.display = OriginalTextDisplay(
            text=self.get_value(),
            theme_color=self.info.color,
        )
        self.main_layout.addWidget(self.display)

    def get_value(self) -> str:
        return self.service.get_step_input(self.source_step_id) or ""

    def set_value(self, value: str):
        self.service.set_step_input(self.source_step_id, value)
        self._rebuild_display()

    def validate(self) -> StepValidationResult:
        result = self.create_validation_result()
        if not has_text(self.get_value()):
            result.add_error(tr("validation.enter_text"))
        return result

    def collect_data(self) -> Dict[str, Any]:
        return {"step_id": self.info.step_id, "text": self.get_value()}

    def get_step_title(self) -> str:
        return self.info.title

    def get_step_description(self) -> str:
        return self.info.description
