from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

# uv/pytest may run without installing the project; ensure repo root is importable.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from api.main import create_app  # noqa: E402
from tally.core.config import Config  # noqa: E402
from tally.core.store import CounterStore  # noqa: E402


@pytest.fixture()
def test_config(monkeypatch: pytest.MonkeyPatch) -> Config:
    """Config built from defaults only; stray TALLY_* variables are cleared."""

    for key in list(os.environ):
        if key.startswith("TALLY_"):
            monkeypatch.delenv(key)
    return Config()


@pytest.fixture()
def store() -> CounterStore:
    return CounterStore()


@pytest.fixture()
def app(test_config: Config, store: CounterStore):
    return create_app(test_config, store=store)
