"""Limits and defaults for duration formatting and parsing."""

MAX_FIELD_DIGITS = 2
"""Maximum number of digits in one ``<digits><unit>`` field of a literal."""

MAX_LEADING_DIGIT = 5
"""Largest allowed first digit of a field, keeping two-digit fields below 60."""

MAX_PRECISION_SPAN = 3
"""Maximum number of contiguous precision levels in a range."""

DEFAULT_MAX_LITERAL_LENGTH = 64
"""Maximum accepted duration literal length."""

DEFAULT_SEPARATOR = ":"
"""Separator written between formatted fields."""
