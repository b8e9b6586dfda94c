"""Shared fixtures for cipher wheel tests."""
from pathlib import Path

import pytest

from cipher_core.alphabet import LETTER_COUNT, Mode
from cipher_core.settings import DEFAULT_DIMENSIONS, WheelDimensions

ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def repo_root():
    """Return the real repo root path."""
    return ROOT


@pytest.fixture
def dims():
    """Default rendering dimensions (500x500 view, center 250/250)."""
    return DEFAULT_DIMENSIONS


@pytest.fixture
def small_dims():
    """A non-default wheel to catch hard-coded constants."""
    return WheelDimensions(view_size=100.0, center_x=40.0, center_y=60.0, outer_radius=30.0, inner_radius=10.0)


@pytest.fixture(params=list(range(LETTER_COUNT)))
def every_shift(request):
    return request.param


@pytest.fixture(params=[Mode.ENCRYPT, Mode.DECRYPT])
def every_mode(request):
    return request.param
