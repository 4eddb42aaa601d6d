# -*- coding: utf-8 -*-
"""
Tests for the translation lookup.
"""
from services.translation_manager import set_language, tr


def test_known_key_translates():
    assert tr("step.completed") == "Step completed"


def test_missing_key_returns_key():
    assert tr("no.such.key") == "no.such.key"


def test_format_arguments():
    assert tr("step.progress", current=2, total=8) == "Step 2 of 8"


def test_bad_format_arguments_keep_template():
    assert tr("step.progress", current=2) == "Step {current} of {total}"


def test_unknown_language_falls_back_to_english():
    set_language("xx")
    assert tr("button.previous") == "Previous"
