"""Domain exceptions: all public errors of filterops.

All exceptions visible to users are defined here.
User-supplied failure values travel inside Err, never as these exceptions.
"""


class FilterOpsError(Exception):
    """Base for all filterops error exceptions.

    Allows: except FilterOpsError to catch all library errors.
    """


class InvalidFilterError(FilterOpsError, TypeError):
    """Object cannot be used as a filter of the requested kind.

    Raised when a combinator receives something that is neither a filter
    nor a plain callable, or a pure Filter where a FailableFilter is
    expected (conversion must be explicit via into_failable()).
    Inherits TypeError for semantic correctness.

    Attributes:
        expected: Description of the expected filter kind.
        got: Actual type received.
    """

    def __init__(self, *, expected: str, got: type, hint: str | None = None) -> None:
        """Initialize with expected kind, actual type and optional hint."""
        self.expected = expected
        self.got = got
        self.hint = hint
        message = f"expected {expected}, got {got.__name__}"
        if hint:
            message = f"{message} ({hint})"
        super().__init__(message)


class ConversionError(FilterOpsError, TypeError):
    """Wrapped callable returned a value of the wrong protocol.

    A failable callable must return Ok or Err; a pure callable must not.

    Attributes:
        expected: Description of expected return type(s).
        got: Actual type received.
    """

    def __init__(self, *, expected: str, got: type) -> None:
        """Initialize with expected type description and actual type."""
        self.expected = expected
        self.got = got
        super().__init__(f"{expected}, got {got.__name__}")


class UnwrapError(FilterOpsError, ValueError):
    """Unwrapped the wrong variant of a Result.

    Attributes:
        payload: The value held by the variant that was actually present.
    """

    def __init__(self, message: str, payload: object) -> None:
        """Initialize with message and the present variant's payload."""
        self.payload = payload
        super().__init__(f"{message}: {payload!r}")
