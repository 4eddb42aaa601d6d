# -*- coding: utf-8 -*-
"""
Shared pytest configuration.

Qt runs offscreen and logs go to a temporary directory; both must be set
before any project module is imported.
"""
import os
import sys
import tempfile
from pathlib import Path

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("TRAINING_LOGS_DIR", tempfile.mkdtemp(prefix="training-logs-"))

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest


@pytest.fixture
def service(qapp):
    """A fresh, isolated step service."""
    from services.training_step_service import TrainingStepService
    return TrainingStepService()
