"""Tests for grid interval selection."""

import math

import pytest

from domain.exceptions import InvalidResolutionError, UnsupportedIntervalError
from grid.intervals import (
    ZONE_ONLY,
    build_interval_fn,
    default_interval_fn,
    select_interval,
)


class TestDefaultLadder:
    """Tests for the default resolution -> interval ladder."""

    @pytest.mark.parametrize(
        ('resolution', 'interval'),
        [
            (0.01, 1),
            (0.02, 10),
            (0.2, 10),
            (1.0, 100),
            (20.0, 1_000),
            (24.99, 1_000),
            (25.0, 10_000),
            (50.0, 10_000),
            (160.0, 100_000),
            (2499.0, 100_000),
        ],
    )
    def test_ladder_steps(self, resolution, interval):
        """Each resolution band maps to its ladder step."""
        assert select_interval(resolution) == interval

    def test_zone_only_at_coarse_resolution(self):
        """Past the last threshold only zone boundaries remain."""
        assert select_interval(2500.0) is ZONE_ONLY
        assert select_interval(1e6) is ZONE_ONLY

    def test_default_fn_matches_select(self):
        """The default function agrees with select_interval."""
        assert default_interval_fn(20.0) == select_interval(20.0)


class TestCustomIntervalFn:
    """Tests for host-supplied interval functions."""

    def test_custom_fn_used(self):
        """A supplied function overrides the ladder."""
        assert select_interval(1.0, lambda r: 100_000) == 100_000

    def test_custom_fn_zone_only(self):
        """None from the function means zone boundaries only."""
        assert select_interval(1.0, lambda r: None) is ZONE_ONLY

    def test_unsupported_interval(self):
        """5 km is not on the ladder."""
        with pytest.raises(UnsupportedIntervalError):
            select_interval(1.0, lambda r: 5_000)

    def test_unsupported_interval_is_value_error(self):
        """Unsupported interval is catchable as ValueError."""
        with pytest.raises(ValueError):
            select_interval(1.0, lambda r: 0)

    def test_build_interval_fn_custom_ladder(self):
        """A custom ladder uses its own thresholds."""
        fn = build_interval_fn([(10.0, 100), (100.0, 10_000)])
        assert fn(5.0) == 100
        assert fn(50.0) == 10_000
        assert fn(100.0) is ZONE_ONLY


class TestResolutionValidation:
    """Invalid resolutions are rejected before the interval is looked up."""

    @pytest.mark.parametrize('resolution', [0.0, -1.0, math.inf, math.nan])
    def test_invalid(self, resolution):
        """Zero, negative and non-finite resolutions raise."""
        with pytest.raises(InvalidResolutionError):
            select_interval(resolution)
