# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()  # Load from .env file in project root

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
_LANGUAGE = os.getenv("TRAINING_LANGUAGE", "en")
_LOG_LEVEL = os.getenv("TRAINING_LOG_LEVEL", "INFO").upper()
_LOGS_DIR = os.getenv("TRAINING_LOGS_DIR", None)


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "LLM Training Flow"
    APP_TITLE: str = "How a Language Model Reads Your Text"
    VERSION: str = "1.0.0"

    # Interface language (translation table key)
    LANGUAGE: str = _LANGUAGE

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    LOGS_DIR: Path = Path(_LOGS_DIR) if _LOGS_DIR else PROJECT_ROOT / "logs"

    # Logging
    LOG_LEVEL: str = _LOG_LEVEL
    LOG_FILE: str = "training.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3
    LOGGER_NAME: str = "training"
    LOG_FILE_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    LOG_CONSOLE_FORMAT: str = "%(levelname)-8s | %(message)s"
    LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"

    # UI Settings
    WINDOW_MIN_WIDTH: int = 720
    WINDOW_MIN_HEIGHT: int = 560

    # Colour tokens
    NEUTRAL_COLOR: str = "#9E9E9E"  # default theme for locked cards
