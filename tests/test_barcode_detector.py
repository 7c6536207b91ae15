"""
Tests for the pyzbar-backed barcode detector.
"""

import logging
from collections import namedtuple

import numpy as np
import pytest

from scan_overlay.barcode_detector import BarcodeDetector, corner_points
from scan_overlay.geometry import Point

Rect = namedtuple("Rect", "left top width height")
PolygonPoint = namedtuple("PolygonPoint", "x y")
Decoded = namedtuple("Decoded", "data type rect polygon")


def decoded(value, polygon, rect=Rect(10, 20, 30, 40)):
    return Decoded(value.encode("utf-8"), "QRCODE", rect,
                   [PolygonPoint(x, y) for x, y in polygon])


class StubDecoder:
    def __init__(self, results=(), error=None):
        self.results = list(results)
        self.error = error
        self.calls = []

    def __call__(self, image, symbols=None):
        self.calls.append((image, symbols))
        if self.error is not None:
            raise self.error
        return self.results


@pytest.fixture
def frame():
    return np.zeros((480, 640, 3), dtype=np.uint8)


class TestBarcodeDetector:
    """Tests for BarcodeDetector.detect."""

    def test_converts_results(self, frame):
        decoder = StubDecoder([decoded("hello", [(1, 2), (11, 2), (11, 12), (1, 12)])])

        detections = BarcodeDetector(decoder=decoder).detect(frame)

        assert detections.frame_width == 640
        assert detections.frame_height == 480
        assert len(detections.barcodes) == 1
        barcode = detections.barcodes[0]
        assert barcode.value == "hello"
        assert barcode.symbology == "QRCODE"
        assert barcode.corner_points == (Point(1, 2), Point(11, 2), Point(11, 12), Point(1, 12))

    def test_decodes_grayscale(self, frame):
        decoder = StubDecoder()
        BarcodeDetector(decoder=decoder).detect(frame)

        image, _ = decoder.calls[0]
        assert image.ndim == 2
        assert image.shape == (480, 640)

    def test_forwards_symbols(self, frame):
        decoder = StubDecoder()
        BarcodeDetector(symbols=["EAN13"], decoder=decoder).detect(frame)

        assert decoder.calls[0][1] == ["EAN13"]

    def test_decoder_error_is_logged(self, frame, caplog):
        decoder = StubDecoder(error=RuntimeError("zbar failed"))

        with caplog.at_level(logging.ERROR):
            detections = BarcodeDetector(decoder=decoder).detect(frame)

        assert detections.barcodes == []
        assert detections.frame_width == 640
        assert "zbar failed" in caplog.text

    def test_empty_frame(self):
        decoder = StubDecoder()
        detections = BarcodeDetector(decoder=decoder).detect(np.zeros((0, 0, 3), dtype=np.uint8))

        assert detections == ([], 0, 0)
        assert decoder.calls == []

    def test_blank_frame_with_pyzbar(self, frame):
        assert BarcodeDetector().detect(frame).barcodes == []


class TestCornerPoints:
    """Tests for corner_points."""

    def test_non_quadrilateral_uses_rect(self):
        result = decoded("x", [(0, 0), (5, 5), (0, 9)])

        assert corner_points(result) == (
            Point(10, 20), Point(40, 20), Point(40, 60), Point(10, 60),
        )

    def test_missing_polygon_uses_rect(self):
        result = Decoded(b"x", "CODE128", Rect(0, 0, 8, 4), [])

        assert corner_points(result)[2] == Point(8, 4)
