"""Shared test fixtures."""

import pytest

from tomatoclock import Precision

ALL_PRECISIONS = [Precision.SEC, Precision.MIN, Precision.HOUR]

VALID_RANGES = [
    (upper, lower)
    for upper in ALL_PRECISIONS
    for lower in ALL_PRECISIONS
    if upper.rank >= lower.rank
]

INVALID_RANGES = [
    (upper, lower)
    for upper in ALL_PRECISIONS
    for lower in ALL_PRECISIONS
    if upper.rank < lower.rank
]


@pytest.fixture
def formatter_logs(caplog):
    caplog.set_level("DEBUG", logger="tomatoclock")
    return caplog
