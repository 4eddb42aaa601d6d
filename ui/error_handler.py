# -*- coding: utf-8 -*-
"""Centralized error handler for UI layer."""

from PyQt5.QtWidgets import QMessageBox, QWidget

from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)


class ErrorHandler:
    """Centralized error handler that turns messages into dialogs."""

    @staticmethod
    def show_error(parent: QWidget, message: str, title: str = None):
        """Show error dialog with translated title."""
        logger.error(message)
        QMessageBox.critical(parent, title or tr("dialog.error"), message)

    @staticmethod
    def show_warning(parent: QWidget, message: str, title: str = None):
        """Show warning dialog with translated title."""
        QMessageBox.warning(parent, title or tr("dialog.warning"), message)

    @staticmethod
    def confirm(parent: QWidget, message: str, title: str = None) -> bool:
        """Show confirmation dialog, return True if confirmed."""
        reply = QMessageBox.question(parent, title or tr("dialog.confirm"), message)
        return reply == QMessageBox.Yes
