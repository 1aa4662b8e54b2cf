"""Failure reporters: where lenient-mode violations go."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from always_assert._logging import VIOLATION_LOGGER, get_logger
from always_assert.errors import Violation

__all__ = [
    'FailureReporter',
    'LogReporter',
    'NullReporter',
]


@runtime_checkable
class FailureReporter(Protocol):
    """Receives invariant violations that did not escalate."""

    def report(self, violation: Violation) -> None: ...


class NullReporter:
    """Reporter used when the logging collaborator is disabled."""

    __slots__ = ()

    def report(self, violation: Violation) -> None:
        pass

    def __repr__(self) -> str:
        return 'NullReporter()'


class LogReporter:
    """Emit one error-level structlog record per violation.

    The record's event text is the formatted message. Call-site location and
    polarity ride along as structured fields. Delivery is best effort: the
    reporter neither retries nor buffers.

    Args:
        name: Logger name the records are emitted under.
    """

    __slots__ = ('name',)

    def __init__(self, name: str = VIOLATION_LOGGER) -> None:
        self.name = name

    def report(self, violation: Violation) -> None:
        get_logger(self.name).error(
            violation.message,
            polarity=violation.polarity,
            file=violation.file,
            line=violation.line,
        )

    def __repr__(self) -> str:
        return f'LogReporter(name={self.name!r})'
