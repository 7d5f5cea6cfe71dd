"""Shared synthetic projections."""
import math

import pytest


def linear(lon, lat):
    """Plate carree in degree units, y down."""
    return (lon, -lat)


def mercator_degrees(lon, lat):
    """Spherical Mercator in degree units; conformal everywhere it is defined."""
    return (lon, -math.degrees(math.log(math.tan(math.pi / 4 + math.radians(lat) / 2))))


def wrapped(lon, lat):
    """Plate carree at 20 units/degree that wraps at the antimeridian."""
    return ((((lon + 180) % 360) - 180) * 20, -lat * 20)


@pytest.fixture
def linear_projection():
    return linear


@pytest.fixture
def mercator_projection():
    return mercator_degrees


@pytest.fixture
def wrapped_projection():
    return wrapped
