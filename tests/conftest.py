# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Pytest entry point that wires shared fixtures and markers."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Iterator

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

_ENV_VARS = ("FLUENTSEQ_COPY_INPUT", "FLUENTSEQ_LOG_FORMAT", "FLUENTSEQ_LOG_LEVEL")


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with the custom markers used by the test suite."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "property: Property-based tests")


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear fluentseq environment overrides and cached state around each test."""
    from fluentseq.config import reset_default_config

    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_default_config()
    yield
    reset_default_config()
    root_logger = logging.getLogger("fluentseq")
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
    root_logger.propagate = True
    for child in ("fluentseq.sequence", "fluentseq.config"):
        logging.getLogger(child).setLevel(logging.NOTSET)
