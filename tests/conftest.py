"""Root test configuration: isolate each test from user config and environment"""

import pytest

from sesdiff.config import Settings


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run each test from an empty tmp directory with no SESDIFF_* env vars set."""
    monkeypatch.chdir(tmp_path)
    for name in Settings.model_fields:
        monkeypatch.delenv(f"SESDIFF_{name.upper()}", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
