# File: scan_overlay/graphic_overlay.py

"""Overlay that renders graphics on top of a camera preview.

Detection items are expressed in preview coordinates and need to be scaled
up to the canvas size, and mirrored for the front-facing camera. Graphics
added to the overlay use ``scale_x``/``scale_y`` to convert sizes and
``translate_x``/``translate_y`` to convert coordinates before drawing.
"""

import logging
import threading
from abc import ABC, abstractmethod

import cv2

from .coordinate_mapper import CameraFacing, CoordinateMapper
from .geometry import VIEWFINDER_MARGIN, derive_viewfinder, is_within_rectangle

logger = logging.getLogger(__name__)

VIEWFINDER_COLOR = (255, 0, 0)  # Blue (BGR)
VIEWFINDER_THICKNESS = 4


class Graphic(ABC):
    """Base class for an item drawn by a GraphicOverlay.

    Subclasses implement ``draw`` and use the scale/translate helpers to
    convert preview coordinates into canvas coordinates.
    """

    def __init__(self, overlay):
        self._overlay = overlay

    @property
    def overlay(self):
        return self._overlay

    @abstractmethod
    def draw(self, canvas):
        """Draw the graphic on the supplied canvas"""

    def scale_x(self, horizontal):
        return self._overlay.mapper.scale_x(horizontal)

    def scale_y(self, vertical):
        return self._overlay.mapper.scale_y(vertical)

    def translate_x(self, x):
        return self._overlay.mapper.translate_x(x)

    def translate_y(self, y):
        return self._overlay.mapper.translate_y(y)

    def map_point(self, point):
        """Preview point to whole-pixel canvas Point"""
        return self._overlay.mapper.map_point(point)

    def post_invalidate(self):
        self._overlay.post_invalidate()


class GraphicOverlay:
    def __init__(self, display_size=None, viewfinder=None, margin=VIEWFINDER_MARGIN,
                 on_invalidate=None):
        # Guards preview size, mapper state, viewfinder and graphics.
        # Re-entrant because graphics query the viewfinder while being drawn.
        self._lock = threading.RLock()

        self.mapper = CoordinateMapper()
        self._preview_width = 0
        self._preview_height = 0
        self._graphics = []
        self._first_graphic = None

        self.display_size = display_size
        self.margin = margin
        self._viewfinder = viewfinder
        self._on_invalidate = on_invalidate

    def post_invalidate(self):
        """Signal the host that the overlay needs to be redrawn"""
        if self._on_invalidate is not None:
            self._on_invalidate()

    def clear(self):
        """Remove all graphics from the overlay"""
        with self._lock:
            self._graphics.clear()
            self._first_graphic = None
        self.post_invalidate()

    def add(self, graphic):
        with self._lock:
            if graphic not in self._graphics:
                self._graphics.append(graphic)
            if self._first_graphic is None:
                self._first_graphic = graphic
        self.post_invalidate()

    def remove(self, graphic):
        with self._lock:
            if graphic in self._graphics:
                self._graphics.remove(graphic)
            if self._first_graphic is not None and self._first_graphic == graphic:
                self._first_graphic = None
        self.post_invalidate()

    def first_graphic(self):
        """Return the first graphic added, i.e. the barcode detected first, or None"""
        with self._lock:
            return self._first_graphic

    def graphics(self):
        with self._lock:
            return list(self._graphics)

    def set_camera_info(self, preview_width, preview_height, facing=CameraFacing.BACK):
        """Set the preview size and camera facing used to transform detection coordinates"""
        with self._lock:
            self._preview_width = preview_width
            self._preview_height = preview_height
            self.mapper.facing = CameraFacing(facing)
        logger.debug(f"Camera info: {preview_width} x {preview_height}, facing {CameraFacing(facing).name}")
        self.post_invalidate()

    @property
    def facing(self):
        with self._lock:
            return self.mapper.facing

    def set_viewfinder(self, viewfinder):
        with self._lock:
            self._viewfinder = viewfinder
        self.post_invalidate()

    def active_area(self):
        """Viewfinder corners as [top left, top right, bottom left, bottom right], or None"""
        with self._lock:
            if self._viewfinder is None:
                return None
            vf = self._viewfinder
            return [vf.top_left, vf.top_right, vf.bottom_left, vf.bottom_right]

    def draw(self, canvas):
        """Draw the overlay with its graphics onto a BGR image"""
        canvas_height, canvas_width = canvas.shape[:2]

        with self._lock:
            self.mapper.update_scale_factors(canvas_width, canvas_height,
                                             self._preview_width, self._preview_height)

            if self._viewfinder is None:
                self._viewfinder = self._derive_viewfinder(canvas_width, canvas_height)

            for graphic in self._graphics:
                graphic.draw(canvas)

            viewfinder = self._viewfinder

        self._draw_viewfinder(canvas, viewfinder)
        return canvas

    def is_inside_viewfinder(self, corner_points, graphic):
        """Check whether all corner points, mapped to canvas space, lie in the viewfinder"""
        with self._lock:
            if self._viewfinder is None:
                return False
            rectangle = self._viewfinder.as_rectangle()

            for point in corner_points:
                if not is_within_rectangle(rectangle, graphic.map_point(point)):
                    return False
            return True

    def _derive_viewfinder(self, canvas_width, canvas_height):
        if self.display_size is None:
            display_width, display_height = canvas_width, canvas_height
        else:
            display_width, display_height = self.display_size

        viewfinder = derive_viewfinder(canvas_width, display_width, display_height, self.margin)
        logger.info(f"Viewfinder derived: {viewfinder.top_left} -> {viewfinder.bottom_right}")
        return viewfinder

    def _draw_viewfinder(self, canvas, viewfinder):
        top_left = _pixel(viewfinder.top_left)
        top_right = _pixel(viewfinder.top_right)
        bottom_left = _pixel(viewfinder.bottom_left)
        bottom_right = _pixel(viewfinder.bottom_right)

        cv2.line(canvas, top_left, top_right, VIEWFINDER_COLOR, VIEWFINDER_THICKNESS, cv2.LINE_AA)
        cv2.line(canvas, top_left, bottom_left, VIEWFINDER_COLOR, VIEWFINDER_THICKNESS, cv2.LINE_AA)
        cv2.line(canvas, bottom_left, bottom_right, VIEWFINDER_COLOR, VIEWFINDER_THICKNESS, cv2.LINE_AA)
        cv2.line(canvas, bottom_right, top_right, VIEWFINDER_COLOR, VIEWFINDER_THICKNESS, cv2.LINE_AA)


def _pixel(point):
    return int(round(point.x)), int(round(point.y))
