"""Tests for the Violation struct and InvariantViolation exception."""

from __future__ import annotations

import msgspec
import pytest

from always_assert import InvariantViolation, Violation


class TestViolation:
    """Tests for the Violation struct."""

    def test_defaults(self) -> None:
        violation = Violation('broken')
        assert violation.message == 'broken'
        assert violation.polarity == 'always'
        assert violation.file is None
        assert violation.line is None

    def test_is_frozen(self) -> None:
        violation = Violation('broken')
        with pytest.raises(AttributeError):
            violation.message = 'fixed'  # type: ignore[misc]

    def test_to_exception(self) -> None:
        violation = Violation('broken', polarity='never', file='db.py', line=3)
        error = violation.to_exception()
        assert isinstance(error, InvariantViolation)
        assert str(error) == 'broken'
        assert error.violation is violation

    def test_json_round_trip(self) -> None:
        violation = Violation('broken', polarity='never', file='db.py', line=3)
        encoded = msgspec.json.encode(violation)
        assert msgspec.json.decode(encoded, type=Violation) == violation

    def test_rejects_unknown_polarity(self) -> None:
        with pytest.raises(msgspec.ValidationError):
            msgspec.json.decode(b'{"message": "x", "polarity": "sometimes"}', type=Violation)


class TestInvariantViolation:
    """Tests for the InvariantViolation exception."""

    def test_is_assertion_error(self) -> None:
        assert issubclass(InvariantViolation, AssertionError)

    def test_message(self) -> None:
        error = InvariantViolation('assertion failed: x')
        assert error.message == 'assertion failed: x'
        assert str(error) == 'assertion failed: x'

    def test_to_struct_without_violation(self) -> None:
        assert InvariantViolation('x').to_struct() == Violation('x')

    def test_strict_evaluator_attaches_call_site(self, strict) -> None:
        with pytest.raises(InvariantViolation) as excinfo:
            strict.never(True, 'custom')
        violation = excinfo.value.to_struct()
        assert violation.message == 'custom'
        assert violation.polarity == 'never'
        assert violation.file is not None
        assert violation.file.endswith('test_errors.py')
