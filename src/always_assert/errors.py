"""Invariant violation types: dual struct+exception for reporting and raising."""

from __future__ import annotations

from typing import Literal

import msgspec

__all__ = [
    'InvariantViolation',
    'Polarity',
    'Violation',
]

Polarity = Literal['always', 'never']


class Violation(msgspec.Struct, frozen=True, gc=False):
    """A failed invariant - struct variant handed to failure reporters.

    Attributes:
        message: The fully formatted diagnostic message.
        polarity: Which primitive detected the violation.
        file: Source file of the call site, if known.
        line: Line number of the call site, if known.
    """

    message: str
    polarity: Polarity = 'always'
    file: str | None = None
    line: int | None = None

    def to_exception(self) -> InvariantViolation:
        """Convert to exception for the strict (raising) path."""
        return InvariantViolation(self.message, violation=self)


class InvariantViolation(AssertionError):
    """A failed invariant in a strict build - exception variant.

    Subclasses ``AssertionError`` so an unhandled violation ends the
    interpreter the same way a failed ``assert`` statement does.
    """

    def __init__(self, message: str, *, violation: Violation | None = None) -> None:
        self.message = message
        self.violation = violation if violation is not None else Violation(message)
        super().__init__(message)

    def to_struct(self) -> Violation:
        """Convert to struct for reporter-based code."""
        return self.violation
