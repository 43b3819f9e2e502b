"""Test configuration and shared fixtures."""

from __future__ import annotations

import logging
import sys

import pytest
import structlog

from servicelog.infrastructure.sinks import MemorySink


@pytest.fixture(autouse=True)
def _quiet_structlog():
    """Keep servicelog's own debug diagnostics out of captured stdout."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )
    yield
    structlog.reset_defaults()
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
    )


@pytest.fixture
def memory_sink() -> MemorySink:
    return MemorySink()
