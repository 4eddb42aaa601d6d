# -*- coding: utf-8 -*-
"""
Tests for TrainingStepService.

Tests cover:
- Step input store
- Completion and unlock rules
- Progress reset
- Serialization
"""

import pytest

from services.exceptions import InvalidStepError
from services.training_step_service import TrainingStepInfo, TrainingStepService


class TestStepInputStore:
    """Test the per-step text store."""

    def test_unset_step_input_is_none(self, service):
        assert service.get_step_input(0) is None

    def test_set_and_get_step_input(self, service):
        service.set_step_input(0, "Test input for step 0")
        assert service.get_step_input(0) == "Test input for step 0"

    def test_none_is_stored_as_empty_text(self, service):
        service.set_step_input(0, None)
        assert service.get_step_input(0) == ""

    def test_text_is_stored_verbatim(self, service):
        service.set_step_input(0, "  padded  ")
        assert service.get_step_input(0) == "  padded  "

    def test_ids_outside_catalog_are_accepted(self, service):
        service.set_step_input(42, "extra")
        assert service.get_step_input(42) == "extra"

    def test_clear_step_input(self, service):
        service.set_step_input(1, "text")
        service.clear_step_input(1)
        assert service.get_step_input(1) is None

    def test_set_step_input_emits_signal(self, service, qtbot):
        with qtbot.waitSignal(service.step_input_changed, timeout=1000) as blocker:
            service.set_step_input(3, "abc")
        assert blocker.args == [3, "abc"]

    @pytest.mark.parametrize("bad_id", [-1, "0", 1.5, None, True])
    def test_invalid_step_ids_raise(self, service, bad_id):
        with pytest.raises(InvalidStepError):
            service.set_step_input(bad_id, "x")
        with pytest.raises(InvalidStepError):
            service.get_step_input(bad_id)

    def test_invalid_step_error_is_a_value_error(self, service):
        with pytest.raises(ValueError) as exc_info:
            service.get_step_input(-3)
        assert exc_info.value.step_id == -3
        assert "[step -3]" in str(exc_info.value)

    def test_instances_are_isolated(self, qapp):
        first = TrainingStepService()
        second = TrainingStepService()
        first.set_step_input(0, "only in first")
        assert second.get_step_input(0) is None


class TestCatalog:
    """Test the step catalog."""

    def test_default_catalog_has_eight_steps(self, service):
        assert service.step_count == 8
        assert [s.step_id for s in service.steps] == list(range(8))

    def test_first_step_is_enter_text(self, service):
        assert service.get_step(0).title == "Enter Text"
        assert service.get_step(7).title == "Output Prediction"

    def test_custom_catalog(self, qapp):
        steps = [TrainingStepInfo(0, "Only", "One step", "icon", "#000000")]
        service = TrainingStepService(steps=steps)
        assert service.step_count == 1
        with pytest.raises(InvalidStepError):
            service.get_step(1)

    def test_steps_returns_copy(self, service):
        service.steps.clear()
        assert service.step_count == 8


class TestCompletion:
    """Test completion tracking and unlock rule."""

    def test_no_steps_completed_initially(self, service):
        assert service.completed_steps == frozenset()

    def test_complete_step(self, service):
        service.complete_step(0)
        assert service.is_step_completed(0)
        assert service.is_step_valid(0)
        assert not service.is_step_completed(1)

    def test_completed_steps_is_read_only_snapshot(self, service):
        service.complete_step(0)
        snapshot = service.completed_steps
        service.complete_step(1)
        assert snapshot == frozenset({0})

    def test_first_step_always_unlocked(self, service):
        assert service.is_step_unlocked(0)
        assert not service.is_step_unlocked(1)

    def test_step_unlocked_after_previous_completed(self, service):
        service.complete_step(0)
        assert service.is_step_unlocked(1)
        assert not service.is_step_unlocked(2)

    def test_complete_unknown_step_raises(self, service):
        with pytest.raises(InvalidStepError):
            service.complete_step(8)

    def test_complete_step_emits_progress_changed(self, service, qtbot):
        with qtbot.waitSignal(service.progress_changed, timeout=1000):
            service.complete_step(0)


class TestReset:
    """Test progress reset."""

    def test_reset_progress_from_step(self, service):
        for step_id in range(3):
            service.set_step_input(step_id, f"Test input for step {step_id}")
            service.complete_step(step_id)

        service.reset_progress_from_step(1)

        assert 0 in service.completed_steps
        assert 1 not in service.completed_steps
        assert 2 not in service.completed_steps
        assert service.get_step_input(0) == "Test input for step 0"
        assert service.get_step_input(1) is None
        assert service.get_step_input(2) is None

    def test_reset_progress(self, service):
        service.set_step_input(0, "Test input")
        service.complete_step(0)
        service.complete_step(1)

        service.reset_progress()

        assert service.completed_steps == frozenset()
        assert service.get_step_input(0) is None


class TestSerialization:
    """Test to_dict/from_dict."""

    def test_to_dict(self, service):
        service.set_step_input(0, "hello")
        service.complete_step(0)
        data = service.to_dict()
        assert data["completed_steps"] == [0]
        assert data["step_inputs"] == {"0": "hello"}
        assert "updated_at" in data

    def test_from_dict_restores_state(self, service):
        service.set_step_input(0, "hello")
        service.set_step_input(2, "later")
        service.complete_step(0)

        restored = TrainingStepService.from_dict(service.to_dict())

        assert restored.completed_steps == frozenset({0})
        assert restored.get_step_input(0) == "hello"
        assert restored.get_step_input(2) == "later"
        assert restored.updated_at == service.updated_at
