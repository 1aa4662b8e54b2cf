"""Build configuration: strictness, logging, and one-time initialization."""

from __future__ import annotations

import os
import threading
from dataclasses import dataclass

import structlog

from always_assert._logging import configure_logging

__all__ = [
    'FORCE',
    'AssertConfig',
    'get_config',
    'init',
]

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'0', 'false', 'no', 'off', ''})

logger = structlog.get_logger(__name__)


def _env_flag(name: str, *, default: bool) -> bool:
    """Read a boolean environment flag, keeping ``default`` for unknown values."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    logger.warning('unknown flag value, using default', variable=name, value=raw, default=default)
    return default


# Escalate failures even under ``python -O``. Read once, like a build feature.
FORCE: bool = _env_flag('ALWAYS_ASSERT_FORCE', default=False)


@dataclass(frozen=True)
class AssertConfig:
    """Process-wide configuration for recoverable assertions.

    Attributes:
        strict: Escalate failures to ``InvariantViolation``.
        log: Forward lenient-mode failures to the logging collaborator.
        log_level: Level passed to ``configure_logging`` by ``init``. None = leave logging alone.
    """

    strict: bool = __debug__ or FORCE
    log: bool = True
    log_level: str | None = None


_config: AssertConfig | None = None
_lock = threading.Lock()


def _detect_config() -> AssertConfig:
    """Resolve configuration from the interpreter and environment.

    Priority for strictness:
    1. ``__debug__`` (False under ``python -O``)
    2. ``ALWAYS_ASSERT_FORCE`` environment variable
    """
    return AssertConfig(
        strict=__debug__ or FORCE,
        log=_env_flag('ALWAYS_ASSERT_LOG', default=True),
    )


def init(
    *,
    force: bool | None = None,
    log: bool | None = None,
    log_level: str | None = None,
) -> AssertConfig:
    """Fix the process-wide configuration before the first assertion runs.

    Args:
        force: Escalate failures even when ``__debug__`` is False. False or
            None cannot relax a debug interpreter, only leave it as is.
        log: Enable the logging collaborator. None = ``ALWAYS_ASSERT_LOG``.
        log_level: If given, also call ``configure_logging(log_level)``.

    Returns:
        The AssertConfig that was set.

    Raises:
        RuntimeError: If the configuration was already fixed, either by an
            earlier ``init()`` or by the first ``always``/``never`` call.

    Example:
        ```python
        import always_assert

        always_assert.init(force=True, log_level='INFO')
        ```
    """
    global _config  # noqa: PLW0603

    with _lock:
        if _config is not None:
            msg = 'always_assert is already configured; call init() once, before the first assertion.'
            raise RuntimeError(msg)

        detected = _detect_config()
        _config = AssertConfig(
            strict=detected.strict or bool(force),
            log=detected.log if log is None else log,
            log_level=log_level,
        )

    if log_level is not None:
        configure_logging(log_level)

    return _config


def get_config() -> AssertConfig:
    """Get the process-wide configuration, resolving it on first call.

    Example:
        ```python
        from always_assert import get_config

        get_config().strict  # False under python -O
        ```
    """
    global _config  # noqa: PLW0603

    if _config is None:
        with _lock:
            if _config is None:
                _config = _detect_config()
    return _config
