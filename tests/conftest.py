"""
Pytest fixtures shared by the overlay tests.
"""

import numpy as np
import pytest

from scan_overlay.detections import Barcode
from scan_overlay.geometry import Point, PointF, Viewfinder
from scan_overlay.graphic_overlay import GraphicOverlay


def make_barcode(value, left, top, size=50, symbology="EAN13"):
    """Square barcode with its corners listed clockwise from the top left"""
    return Barcode(
        value=value,
        symbology=symbology,
        corner_points=(
            Point(left, top),
            Point(left + size, top),
            Point(left + size, top + size),
            Point(left, top + size),
        ),
    )


@pytest.fixture
def rectangle():
    """Axis-aligned rectangle: top left, top right, bottom right, bottom left."""
    return [
        PointF(100.0, 100.0),
        PointF(500.0, 100.0),
        PointF(500.0, 500.0),
        PointF(100.0, 500.0),
    ]


@pytest.fixture
def viewfinder():
    return Viewfinder(
        top_left=PointF(100.0, 100.0),
        top_right=PointF(500.0, 100.0),
        bottom_right=PointF(500.0, 500.0),
        bottom_left=PointF(100.0, 500.0),
    )


@pytest.fixture
def overlay(viewfinder):
    return GraphicOverlay(viewfinder=viewfinder)


@pytest.fixture
def canvas():
    """Blank 600x600 BGR canvas."""
    return np.zeros((600, 600, 3), dtype=np.uint8)


@pytest.fixture
def barcode_factory():
    return make_barcode
