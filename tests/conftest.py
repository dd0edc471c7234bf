"""Pytest configuration and shared fixtures for the orgexport test suite.

This module provides shared fixtures and test configuration
that are used across the entire test suite.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from orgexport.ast import Header, Timestamp, TitleLine

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def make_header():
    """Provide a factory for headings with sensible defaults.

    Returns
    -------
    callable
        ``make_header(title="Title", level=1, **fields)``

    """

    def _make_header(title: str = "Title", level: int = 1, todo_keyword=None, tags=None, **fields) -> Header:
        return Header(
            nesting_level=level,
            title_line=TitleLine(raw_title=title, todo_keyword=todo_keyword, tags=list(tags or [])),
            **fields,
        )

    return _make_header


@pytest.fixture
def deadline() -> Timestamp:
    """Provide an active date timestamp, ``<2019-08-02 Fri>``."""
    return Timestamp(year="2019", month="08", day="02", day_name="Fri")


@pytest.fixture
def clock_start() -> Timestamp:
    """Provide an inactive timestamp with a time, ``[2019-08-02 Fri 10:00]``."""
    return Timestamp(year="2019", month="08", day="02", day_name="Fri", is_active=False, start_hour="10", start_minute="00")


@pytest.fixture
def clock_end() -> Timestamp:
    """Provide an inactive timestamp with a time, ``[2019-08-02 Fri 11:05]``."""
    return Timestamp(year="2019", month="08", day="02", day_name="Fri", is_active=False, start_hour="11", start_minute="05")
