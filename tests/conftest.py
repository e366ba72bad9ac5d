import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from irregular_dungeon.config import ENV_MAP  # noqa: E402
from irregular_dungeon.logging_utils import reconfigure  # noqa: E402

LOG_ENV = ("DUNGEON_LOG_LEVEL", "DUNGEON_LOG_JSON")


@pytest.fixture(autouse=True)
def _clean_dungeon_env(monkeypatch):
    """Keep developer DUNGEON_* settings from leaking into generation tests."""
    for key in list(ENV_MAP) + list(LOG_ENV):
        monkeypatch.delenv(key, raising=False)
    reconfigure()
    yield
    monkeypatch.undo()
    reconfigure()


def pytest_configure(config):  # register custom markers when run without pyproject
    config.addinivalue_line("markers", "structure: structural invariant checks over generated maps")
    config.addinivalue_line("markers", "performance: coarse generation time guardrails")
