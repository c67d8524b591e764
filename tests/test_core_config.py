"""Tests for ProjectionConfig and the policy enums."""

from __future__ import annotations

import dataclasses

import pytest

from stepseries import AccessPolicy, EContractViolation, ProjectionConfig, ValueKind
from stepseries.core.policy import coerce_kind, coerce_policy


class TestProjectionConfig:
    """Test config defaults, validation and presets."""

    def test_defaults(self):
        """Reference strategy with checks and trailing interval."""
        config = ProjectionConfig()
        assert config.method == "overlap"
        assert config.check_breakpoints is True
        assert config.drop_trailing is False

    def test_invalid_method(self):
        """Unknown methods are rejected."""
        with pytest.raises(ValueError, match="method must be"):
            ProjectionConfig(method="tree")  # type: ignore[arg-type]

    def test_frozen(self):
        """Config is immutable."""
        config = ProjectionConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.method = "sweep"  # type: ignore[misc]

    def test_presets(self):
        """Presets set the expected fields."""
        assert ProjectionConfig.reference().method == "overlap"
        assert ProjectionConfig.fast().method == "sweep"
        closed = ProjectionConfig.closed(method="sweep")
        assert closed.drop_trailing is True
        assert closed.method == "sweep"


class TestPolicies:
    """Test enum coercion."""

    def test_string_values(self):
        """Enums compare equal to their string values."""
        assert AccessPolicy.RETURN_CLOSEST == "return_closest"
        assert ValueKind.NON_COUNTABLE == "non_countable"

    def test_coerce(self):
        """Strings and members both coerce."""
        assert coerce_policy("return_none") is AccessPolicy.RETURN_NONE
        assert coerce_policy(AccessPolicy.RETURN_CLOSEST) is AccessPolicy.RETURN_CLOSEST
        assert coerce_kind("countable") is ValueKind.COUNTABLE

    def test_coerce_unknown(self):
        """Unknown strings raise with the allowed values in context."""
        with pytest.raises(EContractViolation) as exc_info:
            coerce_kind("intensive")
        assert exc_info.value.context["allowed"] == ["countable", "non_countable"]
