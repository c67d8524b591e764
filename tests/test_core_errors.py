"""Tests for core error types.

Tests the error hierarchy and rich context functionality.
"""

from __future__ import annotations

from stepseries.core.errors import (
    ERROR_REGISTRY,
    EContractViolation,
    EUnsupportedOperands,
    StepSeriesError,
    get_error_class,
)


class TestStepSeriesError:
    """Test base error class."""

    def test_basic_error(self):
        """Basic error creation."""
        err = StepSeriesError("Something went wrong")
        assert err.message == "Something went wrong"
        assert err.error_code == "E_UNKNOWN"
        assert err.context == {}

    def test_error_with_context(self):
        """Error with context."""
        err = StepSeriesError("Test error", context={"position": 3})
        assert err.context == {"position": 3}
        assert "position" in str(err)

    def test_error_str_format(self):
        """Error string formatting."""
        err = StepSeriesError("Test message", context={"key": "value"}, fix_hint="Do this")
        err_str = str(err)
        assert "[E_UNKNOWN]" in err_str
        assert "Test message" in err_str
        assert "key" in err_str
        assert "[hint: Do this]" in err_str


class TestSubclasses:
    """Test specific error classes."""

    def test_contract_violation(self):
        """Contract violations carry a default hint."""
        err = EContractViolation("Breakpoints must be strictly increasing")
        assert err.error_code == "E_CONTRACT_VIOLATION"
        assert "strictly increasing" in err.fix_hint
        assert isinstance(err, StepSeriesError)

    def test_custom_fix_hint(self):
        """Can override fix hint."""
        err = EContractViolation("bad", fix_hint="Sort first")
        assert err.fix_hint == "Sort first"
        assert EContractViolation.fix_hint != "Sort first"

    def test_unsupported_operands(self):
        """Unsupported operand errors have their own code."""
        err = EUnsupportedOperands("no multiplication")
        assert err.error_code == "E_UNSUPPORTED_OPERANDS"
        assert "multiplication" in err.fix_hint


class TestRegistry:
    """Test error registry lookup."""

    def test_registry_codes(self):
        """Every registered class reports its own code."""
        for code, cls in ERROR_REGISTRY.items():
            assert cls.error_code == code

    def test_get_error_class(self):
        """Lookup by code, falling back to the base class."""
        assert get_error_class("E_CONTRACT_VIOLATION") is EContractViolation
        assert get_error_class("E_NOPE") is StepSeriesError
