# -*- coding: utf-8 -*-
"""
Tests for the OriginalTextDisplay read-only card.
"""
import pytest
from PyQt5.QtCore import Qt

from app.config import Config
from ui.components.original_text_display import OriginalTextDisplay


@pytest.mark.parametrize("text", [
    "Hello world",
    "   leading and trailing   ",
    "",
    "line one\nline two",
    "<b>not bold</b>",
    "x" * 5000,
])
def test_text_rendered_verbatim(qtbot, text):
    display = OriginalTextDisplay(text=text)
    qtbot.addWidget(display)

    assert display.text() == text
    assert display.body_label.text() == text


def test_body_is_plain_text_and_not_interactive(qtbot):
    display = OriginalTextDisplay(text="<i>markup</i>")
    qtbot.addWidget(display)

    assert display.body_label.textFormat() == Qt.PlainText
    assert display.body_label.textInteractionFlags() == Qt.NoTextInteraction


def test_defaults(qtbot):
    display = OriginalTextDisplay(text="abc")
    qtbot.addWidget(display)

    assert display.title() == "Original Input Text"
    assert display.title_label.text() == "Original Input Text"
    assert display.theme_color() == Config.NEUTRAL_COLOR


def test_custom_title_and_color(qtbot):
    display = OriginalTextDisplay(text="abc", title="Your prompt", theme_color="#4CAF50")
    qtbot.addWidget(display)

    assert display.title_label.text() == "Your prompt"
    assert display.theme_color() == "#4CAF50"
    assert "76, 175, 80" in display.styleSheet()


def test_shows_lock_marker(qtbot):
    display = OriginalTextDisplay(text="abc")
    qtbot.addWidget(display)

    assert display.lock_label.text() != ""
