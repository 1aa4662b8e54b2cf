"""The assertion evaluator behind ``always`` and ``never``.

An ``Evaluator`` binds a configuration and a failure reporter once. Each call
is then a stateless, one-shot decision:

| strict | log | condition holds | condition fails             |
|--------|-----|-----------------|-----------------------------|
| yes    | any | return True     | raise InvariantViolation    |
| no     | yes | return True     | report, return False        |
| no     | no  | return True     | return False                |

``never`` is the polarity dual: it escalates when its condition is true and
returns the condition's actual value.
"""

from __future__ import annotations

import sys
import threading
from typing import TYPE_CHECKING, Any

from always_assert._config import AssertConfig, get_config
from always_assert._source import call_site, describe_condition
from always_assert.errors import Polarity, Violation
from always_assert.reporting import FailureReporter, LogReporter, NullReporter

if TYPE_CHECKING:
    from types import FrameType

__all__ = [
    'Evaluator',
    'always',
    'default_evaluator',
    'never',
]


class Evaluator:
    """Evaluate recoverable assertions under a fixed configuration.

    Args:
        config: Strictness and logging switches, read once here.
        reporter: Where lenient-mode failures go. Derived from ``config.log``
            when omitted.

    Example:
        ```python
        from always_assert import AssertConfig, Evaluator

        lenient = Evaluator(AssertConfig(strict=False, log=False))
        lenient.always(2 + 2 == 5)
        # False
        lenient.never(2 + 2 == 4)
        # True
        ```
    """

    __slots__ = ('config', 'reporter')

    def __init__(self, config: AssertConfig, reporter: FailureReporter | None = None) -> None:
        self.config = config
        if reporter is None:
            reporter = LogReporter() if config.log else NullReporter()
        self.reporter = reporter

    def always(self, condition: object, message: str | None = None, /, *args: Any, **kwargs: Any) -> bool:
        """Assert ``condition`` always holds and return its actual value.

        See ``always_assert.always``.
        """
        return self._evaluate(condition, 'always', message, args, kwargs, stacklevel=2)

    def never(self, condition: object, message: str | None = None, /, *args: Any, **kwargs: Any) -> bool:
        """Assert ``condition`` never holds and return its actual value.

        See ``always_assert.never``.
        """
        return self._evaluate(condition, 'never', message, args, kwargs, stacklevel=2)

    def _evaluate(
        self,
        condition: object,
        polarity: Polarity,
        message: str | None,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
        *,
        stacklevel: int,
    ) -> bool:
        value = bool(condition)
        expected = polarity == 'always'
        if value is expected:
            return value

        strict = self.config.strict
        if not strict and isinstance(self.reporter, NullReporter):
            return value

        # Failure path only from here on; stacklevel counts from this frame.
        frame = sys._getframe(stacklevel)
        violation = _build_violation(frame, polarity, message, args, kwargs)
        if strict:
            raise violation.to_exception()
        self.reporter.report(violation)
        return value

    def __repr__(self) -> str:
        return f'Evaluator(strict={self.config.strict!r}, reporter={self.reporter!r})'


def _build_violation(
    frame: FrameType,
    polarity: Polarity,
    message: str | None,
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> Violation:
    file, line = call_site(frame)
    if message is None:
        text = _default_message(frame, polarity, file, line)
    elif args or kwargs:
        text = _render(message, args, kwargs)
    else:
        text = message
    return Violation(text, polarity=polarity, file=file, line=line)


def _render(message: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    # A broken template must not turn a recoverable violation into a crash.
    try:
        return message.format(*args, **kwargs)
    except (IndexError, KeyError, ValueError, AttributeError):
        return f'{message} (unformatted: args={args!r}, kwargs={kwargs!r})'


def _default_message(frame: FrameType, polarity: Polarity, file: str, line: int) -> str:
    source = describe_condition(frame, polarity)
    if source is None:
        source = f'condition at {file}:{line}'
    if polarity == 'never':
        source = f'!({source})'
    return f'assertion failed: {source}'


_default: Evaluator | None = None
_default_lock = threading.Lock()


def default_evaluator() -> Evaluator:
    """Return the process-wide evaluator, building it from ``get_config()`` on first use."""
    global _default  # noqa: PLW0603

    if _default is None:
        with _default_lock:
            if _default is None:
                _default = Evaluator(get_config())
    return _default


def always(condition: object, message: str | None = None, /, *args: Any, **kwargs: Any) -> bool:
    """Assert that the condition always holds and return its actual value.

    If the condition is true, does nothing and returns True.

    If the condition is false:
    * raises ``InvariantViolation`` if the interpreter runs without ``-O``
      or ``ALWAYS_ASSERT_FORCE`` is set,
    * otherwise logs an error if logging is enabled,
    * returns False.

    Args:
        condition: The value to check. Evaluated once, normalised with ``bool()``.
        message: Optional ``str.format`` template. Defaults to
            ``"assertion failed: <source of condition>"``.
        *args: Positional template arguments.
        **kwargs: Named template arguments.

    Returns:
        The truth value of ``condition``.

    Example:
        ```python
        if not always(len(batch) <= limit, 'batch of {} over limit {}', len(batch), limit):
            batch = batch[:limit]
        ```
    """
    return default_evaluator()._evaluate(condition, 'always', message, args, kwargs, stacklevel=2)


def never(condition: object, message: str | None = None, /, *args: Any, **kwargs: Any) -> bool:
    """Assert that the condition never holds and return its actual value.

    If the condition is false, does nothing and returns False.

    If the condition is true:
    * raises ``InvariantViolation`` if the interpreter runs without ``-O``
      or ``ALWAYS_ASSERT_FORCE`` is set,
    * otherwise logs an error if logging is enabled,
    * returns True.

    The default message is ``"assertion failed: !(<source of condition>)"``.

    Example:
        ```python
        if never(local_message == '', 'missing localization for {}', english_message):
            local_message = english_message
        ```
    """
    return default_evaluator()._evaluate(condition, 'never', message, args, kwargs, stacklevel=2)
