#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
LLM Training Flow - main entry point for the application.
"""

import sys

from PyQt5.QtWidgets import QApplication, QMainWindow
from PyQt5.QtCore import Qt

from app.config import Config
from services.training_step_service import TrainingStepService
from services.translation_manager import set_language, tr
from ui.error_handler import ErrorHandler
from ui.font_utils import set_application_default_font
from ui.pages.training_flow_page import TrainingFlowPage
from utils.logger import setup_logger


def main():
    """Main application entry point."""

    # Set Qt attributes BEFORE creating QApplication
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    # Initialize logging
    logger = setup_logger()

    try:
        app = QApplication(sys.argv)
        app.setApplicationName(Config.APP_NAME)
        set_application_default_font()

        logger.info("=" * 80)
        logger.info(f"Starting {Config.APP_NAME} {Config.VERSION}")
        logger.info("=" * 80)

        set_language(Config.LANGUAGE)

        service = TrainingStepService()

        window = QMainWindow()
        window.setWindowTitle(Config.APP_TITLE)
        window.setMinimumSize(Config.WINDOW_MIN_WIDTH, Config.WINDOW_MIN_HEIGHT)
        window.setCentralWidget(TrainingFlowPage(service))
        window.show()
        logger.info(">> Main window created and displayed")

        exit_code = app.exec_()
        logger.info(f"Application closed with exit code: {exit_code}")
        sys.exit(exit_code)

    except Exception as e:
        logger.exception(f"Fatal error during application startup: {e}")
        print(f"\n[ERROR] Fatal error during application startup: {e}")
        print(f"\nPlease check {Config.LOG_PATH} for details")
        if QApplication.instance() is not None:
            ErrorHandler.show_error(None, tr("dialog.startup_failed", path=Config.LOG_PATH))
        sys.exit(1)


if __name__ == "__main__":
    main()
