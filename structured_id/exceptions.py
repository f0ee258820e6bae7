"""Custom exceptions for structured-id."""


class StructuredIdError(Exception):
    """Base exception for structured-id errors."""

    pass


class ConfigurationError(StructuredIdError):
    """Base class for configuration errors.

    These are programmer errors and are raised before any randomness is
    consumed. They intentionally do not subclass ValueError so that pydantic
    propagates them unchanged from model validators.
    """

    pass


class InvalidShapeError(ConfigurationError):
    """Raised when groups or group size is less than 1."""

    def __init__(self, groups: int, group_size: int) -> None:
        self.groups = groups
        self.group_size = group_size
        super().__init__(
            f"Invalid shape: groups={groups}, group_size={group_size} (both must be >= 1)"
        )


class IncompatibleAlgorithmError(ConfigurationError):
    """Raised when a checksum algorithm is used with the wrong charset."""

    def __init__(self, algorithm: str, charset: str, allowed: list[str]) -> None:
        self.algorithm = algorithm
        self.charset = charset
        self.allowed = allowed
        super().__init__(
            f"Algorithm '{algorithm}' is not valid for charset '{charset}' "
            f"(allowed: {', '.join(allowed)})"
        )


class BodyTooShortError(ConfigurationError):
    """Raised when a checksum is requested over an empty body."""

    pass


class ShapeMismatchError(StructuredIdError):
    """Raised when an identifier does not have the configured length."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} characters, got {actual}")


class EntropySourceUnavailableError(StructuredIdError):
    """Raised when an entropy source cannot produce a value."""

    pass


class InvalidIdError(StructuredIdError):
    """Raised when an identifier fails validation where a valid one is required."""

    pass


class SettingsError(StructuredIdError):
    """Raised when a defaults file cannot be read or is malformed."""

    pass
