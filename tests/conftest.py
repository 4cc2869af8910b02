"""Shared fixtures for dice roller tests."""
import os
import random

import pytest

# Keep structured log output quiet unless a test asks for it
os.environ.setdefault("POWERTOOLS_LOG_LEVEL", "WARNING")

from shared.config import reset_config  # noqa: E402

DICE_ENV_VARS = [
    "DICE_QUIET",
    "DICE_SEED",
    "DICE_PROMPT",
    "DICE_HISTORY_FILE",
    "DICE_MAX_DICE",
]


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Clear dice environment variables and the cached config."""
    for key in DICE_ENV_VARS:
        monkeypatch.delenv(key, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(42)
