"""
Pytest configuration and fixtures for point geometry tests.
"""

import pytest
import yaml

from point_geometry.points import Point2, Point3, StereoPoint2
from point_geometry.utils.config_manager import ConfigManager


def pytest_configure(config):
    config.addinivalue_line("markers", "property: hypothesis property-based test")


@pytest.fixture
def config_manager():
    """Fixture providing a configuration manager instance."""
    return ConfigManager()


@pytest.fixture
def custom_config_path(tmp_path):
    """Fixture writing a non-default configuration file and returning its path."""
    config = {
        'equality': {'tolerance': 1e-3},
        'printing': {'precision': 3},
        'serialization': {'format_version': 1},
        'logging': {'level': 'DEBUG'},
    }
    path = tmp_path / "custom_config.yaml"
    with open(path, 'w') as file:
        yaml.safe_dump(config, file)
    return str(path)


@pytest.fixture
def sample_points():
    """Fixture providing one point of each type."""
    return {
        'pixel': Point2(320.5, 240.25),
        'landmark': Point3(1.5, -2.0, 10.0),
        'observation': StereoPoint2(330.0, 310.0, 240.0),
    }
