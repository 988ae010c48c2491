"""Render a number of seconds as colon-delimited fields, e.g. ``2:13:20``."""

from __future__ import annotations

import logging
from io import StringIO

from tomatoclock._constants import DEFAULT_SEPARATOR
from tomatoclock._errors import (
    ERR_MSG_INVALID_DURATION,
    InvalidDurationError,
    InvalidPrecisionRangeError,
)
from tomatoclock.precision import Precision, range_span

logger = logging.getLogger(__name__)


def _validate_seconds(seconds: int) -> None:
    # bool is an int subclass but never a meaningful duration
    if isinstance(seconds, bool) or not isinstance(seconds, int):
        raise InvalidDurationError(
            ERR_MSG_INVALID_DURATION,
            f"seconds must be an int, got {type(seconds).__name__}",
        )
    if seconds < 0:
        raise InvalidDurationError(
            ERR_MSG_INVALID_DURATION,
            f"seconds cannot be negative: {seconds}",
        )


def format_duration(
    seconds: int,
    upper: Precision,
    lower: Precision,
    *,
    separator: str | None = None,
) -> str:
    """Format ``seconds`` as one field per precision from ``upper`` to ``lower``.

    Fields are truncated, not rounded, and are not zero-padded. The most
    significant field absorbs everything above it, so ``7200`` seconds at
    ``(MIN, SEC)`` reads ``120:0``. Seconds below ``lower`` are dropped.

    Args:
        seconds: Non-negative number of seconds.
        upper: Most significant unit to render.
        lower: Least significant unit to render.
        separator: Text written between fields. Defaults to ``":"``.

    Returns:
        The formatted string.

    Raises:
        InvalidPrecisionRangeError: If ``upper`` ranks below ``lower``.
        InvalidDurationError: If ``seconds`` is negative or not an int.
    """
    _validate_seconds(seconds)
    span = range_span(upper, lower)
    if separator is None:
        separator = DEFAULT_SEPARATOR

    w = StringIO()
    remaining = seconds
    top = upper.rank
    for i in range(span):
        d = Precision.from_rank(top - i).seconds
        value = remaining // d
        remaining -= value * d
        w.write(str(value))
        if i != span - 1:
            w.write(separator)
    return w.getvalue()


def format_time(seconds: int, upper: Precision, lower: Precision) -> str | None:
    """Format ``seconds`` like :func:`format_duration`, or return None.

    An invalid precision range is reported on the module logger and yields
    None so the caller can show a usage error and carry on.
    """
    try:
        return format_duration(seconds, upper, lower)
    except InvalidPrecisionRangeError as e:
        logger.error(e.internal())
        return None
