# File: scan_overlay/barcode_graphic.py

import cv2
import numpy as np

from .graphic_overlay import Graphic


class BarcodeColors:
    """BGR colors for barcode outlines"""

    # Barcode lies inside the viewfinder
    INSIDE = (0, 255, 0)

    # Barcode is (partly) outside the viewfinder
    OUTSIDE = (0, 0, 255)

    TEXT = (255, 255, 255)


class BarcodeGraphic(Graphic):
    """Draws the outline and value of a detected barcode"""

    def __init__(self, overlay, barcode, thickness=3):
        super().__init__(overlay)
        self.barcode = barcode
        self.thickness = thickness

    def outline(self):
        """Barcode corners translated to canvas coordinates"""
        return np.array(
            [list(self.map_point(p)) for p in self.barcode.corner_points],
            dtype=np.int32,
        )

    def is_inside_viewfinder(self):
        return self.overlay.is_inside_viewfinder(self.barcode.corner_points, self)

    def draw(self, canvas):
        outline = self.outline()
        if len(outline) == 0:
            return

        color = BarcodeColors.INSIDE if self.is_inside_viewfinder() else BarcodeColors.OUTSIDE
        cv2.polylines(canvas, [outline.reshape((-1, 1, 2))], True, color, self.thickness)

        x = int(outline[:, 0].min())
        y = int(outline[:, 1].min())
        label_y = y - 10 if y > 20 else int(outline[:, 1].max()) + 20
        cv2.putText(canvas, self.barcode.value, (x, label_y),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.6, BarcodeColors.TEXT, 2)
