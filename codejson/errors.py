class CodeJsonError(Exception):
    """
    Base exception for all catalog normalization failures.
    """

    pass


class InvalidDateError(CodeJsonError, ValueError):
    """
    Raised when a date field is absent or cannot be parsed.
    """

    pass


class CanonicalShapeError(CodeJsonError, ValueError):
    """
    Raised when a formatted record does not match the canonical key set.
    """

    pass


class ConfigurationError(CodeJsonError):
    """
    Raised when injected configuration (weights, usage codes) is invalid.
    """

    pass
