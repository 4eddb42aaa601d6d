# -*- coding: utf-8 -*-
"""
Training Step Service - step catalog, completion tracking and step input store.

Holds:
- The catalog of training flow steps
- Which steps are completed (and therefore which are unlocked)
- The text entered for each step, keyed by step id

The service is an explicitly constructed object. Each host creates its own
instance and hands it to the step components that need it.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, FrozenSet, Iterable, List, Optional

from PyQt5.QtCore import QObject, pyqtSignal

from services.exceptions import InvalidStepError
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class TrainingStepInfo:
    """Catalog entry for one step of the training flow."""
    step_id: int
    title: str
    description: str
    icon: str
    color: str


def check_step_id(step_id: int):
    """Raise InvalidStepError unless step_id is a non-negative int."""
    if isinstance(step_id, bool) or not isinstance(step_id, int) or step_id < 0:
        raise InvalidStepError("Step id must be a non-negative integer", step_id=step_id)


def default_steps() -> List[TrainingStepInfo]:
    """Build the default eight-step catalog."""
    catalog = [
        ("enter_text", "text_fields", "#2196F3"),
        ("tokenization", "splitscreen", "#4CAF50"),
        ("token_to_id", "numbers", "#FF9800"),
        ("embedding_lookup", "view_module", "#9C27B0"),
        ("positional_encoding", "location_on", "#009688"),
        ("attention", "visibility", "#3F51B5"),
        ("feedforward", "layers", "#FF5722"),
        ("output", "auto_awesome", "#E91E63"),
    ]
    return [
        TrainingStepInfo(
            step_id=index,
            title=tr(f"step.{key}.title"),
            description=tr(f"step.{key}.description"),
            icon=icon,
            color=color,
        )
        for index, (key, icon, color) in enumerate(catalog)
    ]


class TrainingStepService(QObject):
    """
    Store for training flow progress and per-step text input.

    Signals:
        step_input_changed(int, str): emitted after a step's text is written
        progress_changed(): emitted after completion state changes
    """

    step_input_changed = pyqtSignal(int, str)
    progress_changed = pyqtSignal()

    def __init__(self, steps: Optional[Iterable[TrainingStepInfo]] = None, parent: Optional[QObject] = None):
        """
        Initialize the service.

        Args:
            steps: Step catalog (defaults to the eight-step training flow)
            parent: Parent QObject
        """
        super().__init__(parent)
        self._steps: List[TrainingStepInfo] = list(steps) if steps is not None else default_steps()
        self._completed_steps = set()
        self._step_inputs: Dict[int, str] = {}
        self.updated_at: datetime = datetime.now()

    # =========================================================================
    # Step catalog
    # =========================================================================

    @property
    def steps(self) -> List[TrainingStepInfo]:
        """Get a copy of the step catalog."""
        return list(self._steps)

    @property
    def step_count(self) -> int:
        return len(self._steps)

    def get_step(self, step_id: int) -> TrainingStepInfo:
        """Get the catalog entry for a step."""
        self._check_catalog_id(step_id)
        return self._steps[step_id]

    # =========================================================================
    # Step input store
    # =========================================================================

    def set_step_input(self, step_id: int, value: Optional[str]):
        """Store the text for a step. None is stored as an empty string."""
        self._check_step_id(step_id)
        text = value if value is not None else ""
        self._step_inputs[step_id] = text
        self._touch()
        logger.debug(f"Step {step_id} input set ({len(text)} chars)")
        self.step_input_changed.emit(step_id, text)

    def get_step_input(self, step_id: int) -> Optional[str]:
        """Get the text stored for a step, or None if nothing was stored."""
        self._check_step_id(step_id)
        return self._step_inputs.get(step_id)

    def clear_step_input(self, step_id: int):
        """Remove the stored text for a step."""
        self._check_step_id(step_id)
        if self._step_inputs.pop(step_id, None) is not None:
            self._touch()
            logger.debug(f"Step {step_id} input cleared")

    # =========================================================================
    # Completion tracking
    # =========================================================================

    @property
    def completed_steps(self) -> FrozenSet[int]:
        return frozenset(self._completed_steps)

    def is_step_completed(self, step_id: int) -> bool:
        """Check if a step is completed."""
        return step_id in self._completed_steps

    def is_step_valid(self, step_id: int) -> bool:
        """Check if a step can be considered complete."""
        return self.is_step_completed(step_id)

    def is_step_unlocked(self, step_id: int) -> bool:
        """
        Check if a step is available.

        The first step is always unlocked; any other step is unlocked once
        the step before it is completed.
        """
        if step_id == 0:
            return True
        return self.is_step_completed(step_id - 1)

    def complete_step(self, step_id: int):
        """Mark a step as completed."""
        self._check_catalog_id(step_id)
        self._completed_steps.add(step_id)
        self._touch()
        logger.info(f"Step {step_id} completed")
        self.progress_changed.emit()

    def reset_progress(self):
        """Reset all completion state and stored input."""
        self._completed_steps.clear()
        self._step_inputs.clear()
        self._touch()
        logger.info("Training progress reset")
        self.progress_changed.emit()

    def reset_progress_from_step(self, step_id: int):
        """
        Reset a step and every step after it.

        Completion state and stored input of earlier steps are preserved.
        """
        self._check_step_id(step_id)
        self._completed_steps = {s for s in self._completed_steps if s < step_id}
        self._step_inputs = {s: v for s, v in self._step_inputs.items() if s < step_id}
        self._touch()
        logger.info(f"Training progress reset from step {step_id}")
        self.progress_changed.emit()

    # =========================================================================
    # Serialization
    # =========================================================================

    def to_dict(self) -> Dict[str, Any]:
        """Serialize progress and step input to a dictionary."""
        return {
            "completed_steps": sorted(self._completed_steps),
            "step_inputs": {str(step_id): text for step_id, text in self._step_inputs.items()},
            "updated_at": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any],
                  steps: Optional[Iterable[TrainingStepInfo]] = None) -> 'TrainingStepService':
        """Restore a service from a dictionary produced by to_dict()."""
        service = cls(steps=steps)
        service._completed_steps = {int(s) for s in data.get("completed_steps", [])}
        service._step_inputs = {
            int(step_id): text for step_id, text in data.get("step_inputs", {}).items()
        }
        if "updated_at" in data:
            service.updated_at = datetime.fromisoformat(data["updated_at"])
        return service

    # =========================================================================
    # Helpers
    # =========================================================================

    def _touch(self):
        self.updated_at = datetime.now()

    @staticmethod
    def _check_step_id(step_id: int):
        check_step_id(step_id)

    def _check_catalog_id(self, step_id: int):
        self._check_step_id(step_id)
        if step_id >= len(self._steps):
            raise InvalidStepError(
                f"Unknown step (catalog has {len(self._steps)} steps)", step_id=step_id
            )
