# File: scan_overlay/detections.py

from typing import List, NamedTuple, Tuple

from .geometry import Point


class Barcode(NamedTuple):
    """A decoded barcode with its corner points in preview coordinates"""
    value: str
    symbology: str
    corner_points: Tuple[Point, ...]


class Detections(NamedTuple):
    """All barcodes found in one frame, with the frame (preview) size"""
    barcodes: List[Barcode]
    frame_width: int
    frame_height: int
