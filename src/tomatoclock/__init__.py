"""tomatoclock - Format and parse durations for an interval timer."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("tomatoclock")
except PackageNotFoundError:  # running from a source tree without install
    __version__ = "0.0.0.dev0"

from tomatoclock._errors import (
    DurationError,
    InvalidDurationError,
    InvalidPrecisionRangeError,
    MalformedDurationLiteralError,
)
from tomatoclock._formatter import format_duration, format_time
from tomatoclock._parser import parse_duration, parse_time_str
from tomatoclock.precision import (
    Precision,
    PrecisionRange,
    label,
    multiplier,
    range_span,
)

__all__ = [
    "format_duration",
    "format_time",
    "parse_duration",
    "parse_time_str",
    "label",
    "multiplier",
    "range_span",
    "Precision",
    "PrecisionRange",
    "DurationError",
    "InvalidDurationError",
    "InvalidPrecisionRangeError",
    "MalformedDurationLiteralError",
]
