"""always-assert: recoverable assertions, in the spirit of SQLite's ``assert()``.

``always`` and ``never`` return the actual value of the condition. Under a
plain interpreter a failure raises ``InvariantViolation``; under ``python -O``
(unless ``ALWAYS_ASSERT_FORCE`` is set) the failure is logged and the caller
gets the value back to take a safe path.

Use them when terminating on assertion failure is worse than continuing.
A critical application such as a database can reject the offending work:

    ```python
    from always_assert import never

    def apply_transaction(self, tx):
        delta = self.compute_delta(tx)
        if never(not self.check_internal_invariant(delta)):
            # Something in this transaction broke our internal state. That is
            # a bug, but rejecting the transaction keeps the store consistent.
            return self.abort_transaction(tx)
        self.commit(delta)
    ```

Non-critical functionality in ordinary apps can fall back instead of failing:

    ```python
    from always_assert import never

    english_message = 'super app installed!'
    local_message = localize(english_message)
    if never(not local_message, 'missing localization for {}', english_message):
        local_message = english_message
    print(local_message)
    ```

Flat imports (preferred):
    from always_assert import always, never
    from always_assert import Evaluator, AssertConfig, init, get_config
"""

from always_assert._config import FORCE, AssertConfig, get_config, init
from always_assert._logging import VIOLATION_LOGGER, configure_logging, get_logger
from always_assert.errors import InvariantViolation, Violation
from always_assert.evaluator import Evaluator, always, default_evaluator, never
from always_assert.reporting import FailureReporter, LogReporter, NullReporter

__all__ = [
    'FORCE',
    # Config
    'AssertConfig',
    # Evaluator
    'Evaluator',
    # Reporting
    'FailureReporter',
    # Errors
    'InvariantViolation',
    'LogReporter',
    'NullReporter',
    # Logging
    'VIOLATION_LOGGER',
    'Violation',
    # Assertions
    'always',
    'configure_logging',
    'default_evaluator',
    'get_config',
    'get_logger',
    'init',
    'never',
]
