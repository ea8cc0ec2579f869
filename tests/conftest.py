"""
Pytest configuration and shared fixtures for Pixel Pad tests.

This module provides shared test fixtures and configuration
used across multiple test modules.
"""

import pytest

from PX_Libs.GridLib.color_model import Color
from PX_Libs.GridLib.pixel_grid import PixelGrid


@pytest.fixture
def grid():
    """
    Provide an empty 8x8 grid.

    Returns:
        PixelGrid with every cell EMPTY
    """
    return PixelGrid(8)


@pytest.fixture
def red():
    return Color.opaque(255, 0, 0)


@pytest.fixture
def green():
    return Color.opaque(0, 255, 0)


@pytest.fixture
def blue():
    return Color.opaque(0, 0, 255)


@pytest.fixture
def sample_colors():
    """
    Provide a list of sample opaque colors for testing.

    Returns:
        List of Color values with common test colors
    """
    return [
        Color.opaque(255, 0, 0),      # Red
        Color.opaque(0, 255, 0),      # Green
        Color.opaque(0, 0, 255),      # Blue
        Color.opaque(255, 255, 255),  # White
        Color.opaque(0, 0, 0),        # Black
        Color.opaque(128, 128, 128),  # Gray
    ]
