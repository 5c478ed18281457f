"""Exception taxonomy raised by the throwing checks.

Absence, argument violations and state violations are separate categories so
callers can tell "missing" apart from "invalid", and precondition failures
apart from invariant failures.
"""


class RequisiteError(Exception):
    """Base class for every failure raised by requisite."""

    def __init__(self, message: str, label: str | None = None):
        self.message = message
        self.label = label
        super().__init__(message)


class AbsentValueError(RequisiteError, ValueError):
    """Raised when a value that must be present is None."""


class ArgumentViolationError(RequisiteError, ValueError):
    """Raised when a present argument fails its condition."""


class StateViolationError(RequisiteError, RuntimeError):
    """Raised when an invariant on already-accepted state does not hold."""
