# -*- coding: utf-8 -*-
"""
Tests for StepNavigator.

Tests cover:
- Completing steps through validation
- Unlock-gated navigation
- Reset from a step
- Replacing a rebuilt step
"""

import pytest

from ui.wizards.framework import StepNavigator
from ui.wizards.training.steps import StatefulEnterTextStepSection, TextPreviewStep


@pytest.fixture
def steps(qtbot, service):
    infos = service.steps
    built = [
        StatefulEnterTextStepSection(
            service=service, step_id=0, title=infos[0].title,
            description=infos[0].description, is_editable=True,
            is_completed=False, initial_value="",
        )
    ]
    built.extend(TextPreviewStep(service, info) for info in infos[1:3])
    for step in built:
        qtbot.addWidget(step)
    return built


@pytest.fixture
def navigator(service, steps):
    return StepNavigator(service, steps)


class TestCompletion:

    def test_starts_at_first_step(self, navigator):
        assert navigator.current_index == 0
        assert not navigator.can_go_previous()
        assert not navigator.can_go_next()

    def test_cannot_complete_without_text(self, navigator, service, qtbot):
        with qtbot.waitSignal(navigator.validation_failed, timeout=1000) as blocker:
            assert navigator.complete_current_step() is False

        assert blocker.args[0].errors == ["Please enter some text to continue."]
        assert not service.is_step_completed(0)
        assert navigator.current_index == 0

    def test_complete_records_and_advances(self, navigator, service, steps, qtbot):
        qtbot.keyClicks(steps[0].text_field, "hello")

        assert navigator.complete_current_step() is True

        assert service.is_step_completed(0)
        assert navigator.current_index == 1
        assert steps[1].display.text() == "hello"

    def test_complete_last_step_stays(self, navigator, service):
        service.set_step_input(0, "hello")
        service.complete_step(0)
        service.complete_step(1)
        navigator.goto_step(2)

        assert navigator.complete_current_step() is True

        assert navigator.current_index == 2
        assert service.is_step_completed(2)
        assert navigator.get_progress_percentage() == 100.0


class TestNavigation:

    def test_locked_step_cannot_be_reached(self, navigator):
        assert navigator.goto_step(2) is False
        assert navigator.current_index == 0

    def test_skip_validation_ignores_lock(self, navigator):
        assert navigator.goto_step(2, skip_validation=True) is True
        assert navigator.current_index == 2

    def test_next_and_previous(self, navigator, service):
        service.set_step_input(0, "hello")
        service.complete_step(0)

        assert navigator.next_step() is True
        assert navigator.current_index == 1
        assert navigator.next_step() is False
        assert navigator.previous_step() is True
        assert navigator.current_index == 0
        assert navigator.previous_step() is False

    def test_step_changed_signal(self, navigator, service, qtbot):
        service.complete_step(0)
        with qtbot.waitSignal(navigator.step_changed, timeout=1000) as blocker:
            navigator.next_step()
        assert blocker.args == [0, 1]


class TestReset:

    def test_reset_from_current_step(self, navigator, service):
        service.set_step_input(0, "hello")
        service.complete_step(0)
        service.complete_step(1)
        navigator.goto_step(2)

        navigator.reset_from(1)

        assert navigator.current_index == 1
        assert service.completed_steps == frozenset({0})
        assert service.get_step_input(0) == "hello"

    def test_reset_after_current_step_keeps_position(self, navigator, service):
        service.complete_step(0)
        service.complete_step(1)

        navigator.reset_from(1)

        assert navigator.current_index == 0
        assert service.completed_steps == frozenset({0})


class TestReplaceStep:

    def test_replaced_step_is_disposed(self, navigator, service, steps, qtbot):
        rebuilt = StatefulEnterTextStepSection(
            service=service, step_id=0, title="Enter Text", description="again",
            is_editable=True, is_completed=False, initial_value="",
        )
        qtbot.addWidget(rebuilt)

        old = navigator.replace_step(0, rebuilt)

        assert old is steps[0]
        assert old.is_disposed()
        assert navigator.get_current_step() is rebuilt
