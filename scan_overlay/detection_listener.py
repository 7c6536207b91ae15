# File: scan_overlay/detection_listener.py

import logging
from abc import ABC, abstractmethod

from .barcode_graphic import BarcodeGraphic

logger = logging.getLogger(__name__)


class BarcodeDetectionListener(ABC):
    @abstractmethod
    def on_barcode_detected(self, detections, item):
        """Called for every barcode that lies inside the viewfinder"""


class LoggingDetectionListener(BarcodeDetectionListener):
    def __init__(self):
        self.last_value = None
        self.detected_count = 0

    def on_barcode_detected(self, detections, item):
        if item.value != self.last_value:
            logger.info(f"Barcode in viewfinder: {item.value} ({item.symbology})")
        self.last_value = item.value
        self.detected_count += 1


class BarcodeTracker:
    """Keeps the overlay graphics in sync with the latest detections"""

    def __init__(self, overlay, listener=None):
        self.overlay = overlay
        self.listener = listener

    def process(self, detections):
        """Replace the overlay graphics and report barcodes inside the viewfinder.

        Containment uses the scale factors of the previous draw pass, so the
        first frame after a size change may be judged against stale factors.
        """
        self.overlay.clear()

        accepted = []
        for barcode in detections.barcodes:
            graphic = BarcodeGraphic(self.overlay, barcode)
            self.overlay.add(graphic)

            if graphic.is_inside_viewfinder():
                accepted.append(barcode)
                if self.listener is not None:
                    self.listener.on_barcode_detected(detections, barcode)

        return accepted
