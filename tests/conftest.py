"""Fixtures shared by the service tests."""

import numpy as np
import pytest
from PIL import Image

from gradient_generator.services.color_service import ColorService
from gradient_generator.services.gradient_service import GradientService
from gradient_generator.services.palette_service import PaletteService


@pytest.fixture
def color_service():
    return ColorService()


@pytest.fixture
def palette_service():
    return PaletteService()


@pytest.fixture
def gradient_service():
    return GradientService()


@pytest.fixture
def white_black_image():
    """2x1 image: white then black (lightness 1.0 and 0.0)."""
    arr = np.array([[[255, 255, 255], [0, 0, 0]]], dtype=np.uint8)
    return Image.fromarray(arr)


@pytest.fixture
def random_grid():
    """Random 5x7 RGB grid with a fixed seed."""
    rng = np.random.default_rng(1234)
    return rng.integers(0, 256, size=(5, 7, 3), dtype=np.uint8)
