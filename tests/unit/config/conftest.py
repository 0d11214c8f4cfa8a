"""Shared fixtures for configuration tests."""
from __future__ import annotations

import pytest

SETTING_VARS = (
    "LOG_VIEWER_ELASTIC_URL",
    "LOG_VIEWER_INDEX_PATTERN",
    "LOG_VIEWER_LOG_LEVEL",
    "LOG_VIEWER_HOST",
    "LOG_VIEWER_PORT",
    "LOG_VIEWER_JSON_LOGS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unset every LOG_VIEWER_* variable and restore the environment afterwards.

    Setting before deleting makes monkeypatch remove values that a dotenv
    file writes into ``os.environ`` during the test.
    """
    for name in SETTING_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
