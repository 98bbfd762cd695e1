"""
Utility Functions and Helpers

Common utilities for the point geometry package.
"""

from .config_manager import ConfigManager
from .testing import assert_equal
from .vectors import to_flat_vector, format_fields

__all__ = ['ConfigManager', 'assert_equal', 'to_flat_vector', 'format_fields']
