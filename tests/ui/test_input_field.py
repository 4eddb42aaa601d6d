# -*- coding: utf-8 -*-
"""
Tests for InputField UI component.
"""
import pytest

from ui.components.input_field import InputField


@pytest.fixture
def input_field(qtbot):
    """Create an InputField instance."""
    field = InputField(placeholder="Enter text")
    qtbot.addWidget(field)
    return field


def test_input_field_placeholder(input_field):
    assert input_field.placeholderText() == "Enter text"


def test_input_field_value(input_field):
    input_field.setText("test value")
    assert input_field.text() == "test value"


def test_input_field_variants(input_field):
    input_field.set_error()
    assert input_field.variant == "error"
    input_field.set_success()
    assert input_field.variant == "success"
    input_field.set_default()
    assert input_field.variant == "default"


def test_locked_field_ignores_keystrokes(input_field, qtbot):
    input_field.setText("fixed")
    input_field.set_locked(True)

    qtbot.keyClicks(input_field, "typed")

    assert input_field.is_locked()
    assert input_field.isReadOnly()
    assert input_field.text() == "fixed"


def test_unlocking_restores_editing(input_field, qtbot):
    input_field.set_locked(True)
    input_field.set_locked(False)

    qtbot.keyClicks(input_field, "ok")

    assert not input_field.is_locked()
    assert input_field.text() == "ok"
