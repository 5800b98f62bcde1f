from __future__ import annotations

import logging

import pytest


@pytest.fixture
def debug_log(caplog):
    """Capture debug messages of the adjacent_pair_iterator loggers."""
    with caplog.at_level(logging.DEBUG, logger='adjacent_pair_iterator'):
        yield caplog
