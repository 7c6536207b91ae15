# File: scan_overlay/barcode_detector.py

"""Barcode detection on camera frames using pyzbar."""

import logging

import cv2
import numpy as np
from pyzbar.pyzbar import decode

from .detections import Barcode, Detections
from .geometry import Point

logger = logging.getLogger(__name__)


class BarcodeDetector:
    def __init__(self, symbols=None, decoder=decode):
        """
        Args:
            symbols: pyzbar ZBarSymbol types to look for (None = all)
            decoder: callable with pyzbar's ``decode(image, symbols)`` signature
        """
        self.symbols = symbols
        self._decoder = decoder

    def detect(self, frame: np.ndarray) -> Detections:
        """Decode every barcode in a BGR or grayscale frame"""
        if frame is None or frame.size == 0:
            return Detections([], 0, 0)

        frame_height, frame_width = frame.shape[:2]
        gray = cv2.cvtColor(frame, cv2.COLOR_BGR2GRAY) if frame.ndim == 3 else frame

        try:
            decoded = self._decoder(gray, symbols=self.symbols)
        except Exception as e:
            logger.error(f"Decode error: {e}")
            return Detections([], frame_width, frame_height)

        barcodes = []
        for result in decoded:
            barcodes.append(Barcode(
                value=result.data.decode("utf-8", errors="replace"),
                symbology=result.type,
                corner_points=corner_points(result),
            ))

        if barcodes:
            logger.debug(f"Detected {len(barcodes)} barcode(s)")
        return Detections(barcodes, frame_width, frame_height)


def corner_points(result):
    """Four corner points of a pyzbar result.

    Falls back to the bounding rectangle when the polygon is not a quadrilateral.
    """
    polygon = getattr(result, "polygon", None) or []
    if len(polygon) == 4:
        return tuple(Point(int(p.x), int(p.y)) for p in polygon)

    left, top, width, height = result.rect
    return (
        Point(left, top),
        Point(left + width, top),
        Point(left + width, top + height),
        Point(left, top + height),
    )
