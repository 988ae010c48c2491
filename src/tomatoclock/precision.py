"""Precision model shared by the formatter and the parser."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from typing import NamedTuple

from tomatoclock._constants import MAX_PRECISION_SPAN
from tomatoclock._errors import (
    ERR_MSG_INVALID_PRECISION_RANGE,
    ERR_MSG_UNKNOWN_PRECISION,
    ERR_MSG_UNKNOWN_UNIT,
    InvalidPrecisionRangeError,
    MalformedDurationLiteralError,
)


class Precision(enum.StrEnum):
    """A unit of time, ordered from least to most significant."""

    SEC = "sec"
    MIN = "min"
    HOUR = "hour"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def seconds(self) -> int:
        return _MULTIPLIERS[self]

    @property
    def unit(self) -> str:
        return _UNITS[self]

    @classmethod
    def from_rank(cls, rank: int) -> Precision:
        for precision, r in _RANKS.items():
            if r == rank:
                return precision
        raise InvalidPrecisionRangeError(
            ERR_MSG_UNKNOWN_PRECISION,
            f"no precision has rank {rank!r}",
        )

    @classmethod
    def from_unit(cls, unit: str) -> Precision:
        precision = _BY_UNIT.get(unit)
        if precision is None:
            raise MalformedDurationLiteralError(
                ERR_MSG_UNKNOWN_UNIT,
                f"unit {unit!r} is not one of {', '.join(_BY_UNIT)}",
            )
        return precision


_RANKS: dict[Precision, int] = {
    Precision.SEC: 0,
    Precision.MIN: 1,
    Precision.HOUR: 2,
}

_MULTIPLIERS: dict[Precision, int] = {
    Precision.SEC: 1,
    Precision.MIN: 60,
    Precision.HOUR: 60 * 60,
}

_UNITS: dict[Precision, str] = {
    Precision.SEC: "s",
    Precision.MIN: "m",
    Precision.HOUR: "h",
}

_BY_UNIT: dict[str, Precision] = {u: p for p, u in _UNITS.items()}


def label(precision: Precision) -> str:
    """Return the display label of a precision: ``sec``, ``min`` or ``hour``."""
    return precision.value


def multiplier(precision: Precision) -> int:
    """Return how many seconds one unit of ``precision`` holds."""
    return precision.seconds


def range_span(upper: Precision, lower: Precision) -> int:
    """Count the contiguous precision levels from ``upper`` down to ``lower``.

    Raises:
        InvalidPrecisionRangeError: If ``upper`` ranks below ``lower`` or the
            range covers more than three levels.
    """
    span = upper.rank - lower.rank + 1
    if span < 1 or span > MAX_PRECISION_SPAN:
        raise InvalidPrecisionRangeError(
            ERR_MSG_INVALID_PRECISION_RANGE,
            f"unsupported time format {label(upper)}, {label(lower)}",
        )
    return span


class PrecisionRange(NamedTuple):
    """Most and least significant units present in a duration string.

    Compares equal to, and unpacks like, a plain ``(upper, lower)`` tuple.
    """

    upper: Precision
    lower: Precision

    @property
    def span(self) -> int:
        return range_span(self.upper, self.lower)

    def levels(self) -> Iterator[Precision]:
        """Yield each precision from ``upper`` down to ``lower``."""
        top = self.upper.rank
        for i in range(self.span):
            yield Precision.from_rank(top - i)
