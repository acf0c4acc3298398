"""Tests for LimitConfig."""

import pytest

from limitkit.finite.limit_config import SCALAR_CONFIG, VECTOR_CONFIG, LimitConfig


def test_defaults():
    """Tests the default loop settings."""
    cfg = LimitConfig()
    assert cfg.initial_step == 0.1
    assert cfg.min_step == 1e-11
    assert cfg.shrink_factor == 2.0
    assert cfg.tolerance == 1e-6


def test_module_defaults_differ_only_in_tolerance():
    """Tests that the scalar and vector defaults only differ in their tolerance."""
    assert SCALAR_CONFIG.tolerance == 1e-6
    assert VECTOR_CONFIG.tolerance == 1e-7
    assert SCALAR_CONFIG.initial_step == VECTOR_CONFIG.initial_step
    assert SCALAR_CONFIG.min_step == VECTOR_CONFIG.min_step
    assert SCALAR_CONFIG.shrink_factor == VECTOR_CONFIG.shrink_factor


def test_shrink_divides_by_factor():
    """Tests that shrink divides by the shrink factor."""
    assert LimitConfig().shrink(0.1) == 0.05
    assert LimitConfig(shrink_factor=10.0).shrink(1.0) == 0.1


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"initial_step": 0.0}, "initial_step"),
        ({"initial_step": -1.0}, "initial_step"),
        ({"min_step": -1e-3}, "min_step"),
        ({"shrink_factor": 1.0}, "shrink_factor"),
        ({"shrink_factor": 0.5}, "shrink_factor"),
        ({"tolerance": 0.0}, "tolerance"),
        ({"tolerance": float("nan")}, "tolerance"),
        ({"initial_step": float("inf")}, "initial_step"),
        ({"initial_step": float("nan")}, "initial_step"),
        ({"shrink_factor": float("inf")}, "shrink_factor"),
        ({"tolerance": float("inf")}, "tolerance"),
    ],
)
def test_invalid_settings_raise(kwargs, message):
    """Tests that settings which break termination or convergence are rejected."""
    with pytest.raises(ValueError, match=message):
        LimitConfig(**kwargs)


def test_repr_lists_settings():
    """Tests that repr shows every setting."""
    text = repr(LimitConfig(tolerance=1e-3))
    assert text.startswith("LimitConfig(")
    assert "tolerance=0.001" in text
    assert "shrink_factor=2.0" in text


def test_settings_are_read_only():
    """Tests that the shared defaults cannot be changed in place."""
    with pytest.raises(AttributeError):
        SCALAR_CONFIG.tolerance = 1.0
    with pytest.raises(AttributeError):
        VECTOR_CONFIG.initial_step = 1.0
    assert SCALAR_CONFIG.tolerance == 1e-6
    assert VECTOR_CONFIG.initial_step == 0.1


def test_configs_compare_by_value():
    """Tests that configs with the same settings are equal and hash alike."""
    assert LimitConfig(tolerance=1e-7) == VECTOR_CONFIG
    assert hash(LimitConfig(tolerance=1e-7)) == hash(VECTOR_CONFIG)
    assert LimitConfig() == SCALAR_CONFIG
    assert SCALAR_CONFIG != VECTOR_CONFIG
    assert LimitConfig() != "LimitConfig()"
