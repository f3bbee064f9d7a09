from __future__ import annotations

import pytest

import uncased_env
from uncased_env.config import ENV_VAR


@pytest.fixture(autouse=True)
def _fresh_default(monkeypatch, tmp_path):
    # Keep the project's own pyproject.toml and the caller's shell out of
    # capability resolution.
    monkeypatch.delenv(ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)
    uncased_env.reset_default()
    yield
    uncased_env.reset_default()
