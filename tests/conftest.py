"""Shared fixtures for dim tests."""

from __future__ import annotations

import pytest
import structlog

from dim.types import ModelParameters


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo configure_logging() so each test sees default, uncached loggers."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def model_parameters() -> ModelParameters:
    return ModelParameters(model="fake-model", temperature=0.0)
