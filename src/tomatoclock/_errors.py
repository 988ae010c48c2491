"""Exception hierarchy for duration formatting and parsing."""


class DurationError(Exception):
    """Base exception for duration formatting and parsing errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class InvalidPrecisionRangeError(DurationError):
    """Raised when a precision range is reversed or spans too many levels."""


class MalformedDurationLiteralError(DurationError):
    """Raised when a duration literal such as ``1h30m`` cannot be parsed."""


class InvalidDurationError(DurationError):
    """Raised when a seconds value is negative or not an integer."""


# Sanitized user-facing error message constants
ERR_MSG_INVALID_PRECISION_RANGE = "unsupported time format"
ERR_MSG_UNKNOWN_PRECISION = "unknown precision"
ERR_MSG_MALFORMED_LITERAL = "malformed duration literal"
ERR_MSG_EMPTY_LITERAL = "duration literal cannot be empty"
ERR_MSG_LITERAL_TOO_LONG = "duration literal too long"
ERR_MSG_FIELD_TOO_LONG = "too many digits in duration field"
ERR_MSG_LEADING_DIGIT = "duration field out of range"
ERR_MSG_UNKNOWN_UNIT = "unknown duration unit"
ERR_MSG_MISSING_UNIT = "duration field is missing its unit"
ERR_MSG_INVALID_DURATION = "invalid duration value"
