"""Exception hierarchy for the passport scope core.

Incomplete user data is never an exception: it is reported as an empty
ready summary. Everything raised here signals a mismatch between code,
configuration and the form data handed in, and aborts the computation.
"""


class PassportError(Exception):
    """Base exception for all passport errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvariantViolationError(PassportError):
    """Raised when form data or configuration breaks a structural invariant."""


class UnknownTypeError(InvariantViolationError):
    """Raised when a type is absent from a closed resolution table."""

    def __init__(self, message: str, type_name: str | None = None) -> None:
        super().__init__(message)
        self.type_name = type_name


class MissingValueError(InvariantViolationError):
    """Raised when a requested value type has no value in the store."""

    def __init__(self, message: str, value_type: str | None = None) -> None:
        super().__init__(message)
        self.value_type = value_type


class UnexpectedStateError(InvariantViolationError):
    """Raised when a closed case analysis meets an unhandled combination."""
