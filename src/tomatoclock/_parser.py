"""Parse compact duration literals such as ``1h30m20s``."""

from __future__ import annotations

import logging

from tomatoclock._constants import (
    DEFAULT_MAX_LITERAL_LENGTH,
    MAX_FIELD_DIGITS,
    MAX_LEADING_DIGIT,
)
from tomatoclock._errors import (
    ERR_MSG_EMPTY_LITERAL,
    ERR_MSG_FIELD_TOO_LONG,
    ERR_MSG_LEADING_DIGIT,
    ERR_MSG_LITERAL_TOO_LONG,
    ERR_MSG_MALFORMED_LITERAL,
    ERR_MSG_MISSING_UNIT,
    MalformedDurationLiteralError,
)
from tomatoclock.precision import Precision, PrecisionRange

logger = logging.getLogger(__name__)

_DIGITS = "0123456789"


def parse_duration(
    text: str,
    *,
    max_field_digits: int | None = None,
    max_leading_digit: int | None = None,
    max_literal_length: int | None = None,
) -> tuple[int, PrecisionRange]:
    """Parse a ``<digits><unit>[<digits><unit>...]`` literal.

    Units are ``s``, ``m`` and ``h``. Each field holds at most two digits and
    its first digit may not exceed 5, so ``59m`` parses and ``99h`` does not.
    A unit with no digits counts as zero. Fields may repeat and appear in any
    order; their values are summed.

    The returned range spans the highest and lowest units present, so a
    single field gives ``upper == lower``.

    Args:
        text: The duration literal.
        max_field_digits: Digits allowed per field. Defaults to 2.
        max_leading_digit: Largest first digit of a field. Defaults to 5.
        max_literal_length: Longest accepted literal. Defaults to 64.

    Returns:
        ``(seconds, PrecisionRange(upper, lower))``.

    Raises:
        MalformedDurationLiteralError: If the literal cannot be parsed.
    """
    if max_field_digits is None:
        max_field_digits = MAX_FIELD_DIGITS
    if max_leading_digit is None:
        max_leading_digit = MAX_LEADING_DIGIT
    if max_literal_length is None:
        max_literal_length = DEFAULT_MAX_LITERAL_LENGTH

    if not isinstance(text, str):
        raise MalformedDurationLiteralError(
            ERR_MSG_MALFORMED_LITERAL,
            f"duration literal must be a str, got {type(text).__name__}",
        )
    if not text:
        raise MalformedDurationLiteralError(ERR_MSG_EMPTY_LITERAL)
    if len(text) > max_literal_length:
        raise MalformedDurationLiteralError(
            ERR_MSG_LITERAL_TOO_LONG,
            f"literal length {len(text)} exceeds limit {max_literal_length}",
        )

    sec = 0
    acc = 0
    ndigits = 0
    upper_rank: int | None = None
    lower_rank: int | None = None

    for pos, c in enumerate(text):
        if c in _DIGITS:
            digit = ord(c) - ord("0")
            if ndigits >= max_field_digits:
                raise MalformedDurationLiteralError(
                    ERR_MSG_FIELD_TOO_LONG,
                    f"field at position {pos} in {text!r} exceeds {max_field_digits} digits",
                )
            if ndigits == 0 and digit > max_leading_digit:
                raise MalformedDurationLiteralError(
                    ERR_MSG_LEADING_DIGIT,
                    f"leading digit {c!r} at position {pos} in {text!r} exceeds {max_leading_digit}",
                )
            acc = acc * 10 + digit
            ndigits += 1
            continue

        precision = Precision.from_unit(c)
        sec += acc * precision.seconds
        acc = 0
        ndigits = 0

        rank = precision.rank
        if upper_rank is None or rank > upper_rank:
            upper_rank = rank
        if lower_rank is None or rank < lower_rank:
            lower_rank = rank

    if ndigits:
        raise MalformedDurationLiteralError(
            ERR_MSG_MISSING_UNIT,
            f"trailing digits in {text!r} have no unit",
        )

    # A non-empty literal without trailing digits committed at least one field.
    assert upper_rank is not None and lower_rank is not None
    return sec, PrecisionRange(
        Precision.from_rank(upper_rank),
        Precision.from_rank(lower_rank),
    )


def parse_time_str(text: str) -> tuple[int, PrecisionRange] | None:
    """Parse a duration literal like :func:`parse_duration`, or return None."""
    try:
        return parse_duration(text)
    except MalformedDurationLiteralError as e:
        logger.debug(f"rejected duration literal: {e.internal()}")
        return None
