"""Pytest configuration and shared fixtures for always-assert tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import structlog

import always_assert._config as config_module
import always_assert.evaluator as evaluator_module
from always_assert import AssertConfig, Evaluator

if TYPE_CHECKING:
    from collections.abc import Generator

    from always_assert import Violation


class RecordingReporter:
    """Failure reporter that keeps every violation it is handed."""

    def __init__(self) -> None:
        self.violations: list[Violation] = []

    def report(self, violation: Violation) -> None:
        self.violations.append(violation)

    @property
    def messages(self) -> list[str]:
        return [v.message for v in self.violations]


def _reset() -> None:
    config_module._config = None
    evaluator_module._default = None
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def reset_process_state() -> Generator[None]:
    """Forget the process-wide configuration, default evaluator and logging setup."""
    _reset()
    yield
    _reset()


@pytest.fixture
def recorder() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def lenient(recorder: RecordingReporter) -> Evaluator:
    """Lenient evaluator whose failures land in ``recorder``."""
    return Evaluator(AssertConfig(strict=False, log=True), reporter=recorder)


@pytest.fixture
def strict(recorder: RecordingReporter) -> Evaluator:
    """Strict evaluator; ``recorder`` must stay empty."""
    return Evaluator(AssertConfig(strict=True, log=True), reporter=recorder)


@pytest.fixture
def lenient_default() -> Evaluator:
    """Install a silent lenient evaluator behind module-level always/never."""
    evaluator = Evaluator(AssertConfig(strict=False, log=False))
    evaluator_module._default = evaluator
    return evaluator
