"""
Tests for the tolerance-based assertion helper
"""

import pytest

from point_geometry.points import Point2, Point3, StereoPoint2
from point_geometry.utils.config_manager import ConfigManager
from point_geometry.utils.testing import assert_equal


class TestAssertEqual:
    """Test suite for assert_equal."""

    def test_equal_within_default_tolerance(self):
        assert_equal(Point2(1, 1), Point2(1 + 5e-10, 1))

    def test_failure_renders_both_values(self):
        with pytest.raises(AssertionError) as excinfo:
            assert_equal(Point3(1, 2, 3), Point3(1, 2, 4))

        message = str(excinfo.value)
        assert "expected: (1, 2, 3)" in message
        assert "actual:   (1, 2, 4)" in message

    def test_explicit_tolerance(self):
        assert_equal(StereoPoint2(10, 8, 5), StereoPoint2(10, 8, 5.01), tol=0.1)
        with pytest.raises(AssertionError):
            assert_equal(StereoPoint2(10, 8, 5), StereoPoint2(10, 8, 5.01), tol=1e-3)

    def test_configured_tolerance(self, custom_config_path):
        config = ConfigManager(custom_config_path)
        assert_equal(Point2(1, 1), Point2(1.0005, 1), config_manager=config)

    def test_type_mismatch(self):
        with pytest.raises(AssertionError):
            assert_equal(Point3(1, 2, 3), StereoPoint2(1, 2, 3))
