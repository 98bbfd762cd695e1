"""
Testing Helpers

Tolerance-based assertions for any type with equals() and print().
"""

import io
import logging
from typing import Any, Optional

from .config_manager import ConfigManager

logger = logging.getLogger(__name__)


def _render(value: Any, label: str) -> str:
    stream = io.StringIO()
    value.print(label, stream)
    return stream.getvalue().rstrip("\n")


def assert_equal(expected: Any, actual: Any, tol: Optional[float] = None,
                 config_manager: Optional[ConfigManager] = None) -> None:
    """
    Assert that two points are equal within a tolerance.

    Both values are rendered in the failure message.

    Args:
        expected: Expected value
        actual: Actual value
        tol: Tolerance. If None, uses equality.tolerance from configuration.
        config_manager: Configuration manager instance
    """
    if tol is None:
        tol = (config_manager or ConfigManager()).get_tolerance()

    if type(expected) is not type(actual) or not expected.equals(actual, tol):
        message = (
            f"Not equal (tol={tol}):\n"
            f"{_render(expected, 'expected: ')}\n"
            f"{_render(actual, 'actual:   ')}"
        )
        logger.debug(message)
        raise AssertionError(message)
