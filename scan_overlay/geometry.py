# File: scan_overlay/geometry.py

from typing import NamedTuple

VIEWFINDER_MARGIN = 100


class Point(NamedTuple):
    x: int
    y: int


class PointF(NamedTuple):
    x: float
    y: float


class Viewfinder(NamedTuple):
    top_left: PointF
    top_right: PointF
    bottom_right: PointF
    bottom_left: PointF

    def as_rectangle(self):
        """Corners in containment-check order: top left, top right, bottom right, bottom left"""
        return [self.top_left, self.top_right, self.bottom_right, self.bottom_left]


def is_within_rectangle(rectangle, *shape):
    """Return True if every point of ``shape`` lies within ``rectangle``.

    ``rectangle`` holds the corner points top left, top right, bottom right
    (and optionally bottom left). Only the top left x/y, top right x and
    bottom right y are read, so the rectangle must be axis aligned. Bounds
    are inclusive and corner coordinates are truncated to whole pixels.
    """
    top_left_x = int(rectangle[0].x)
    top_left_y = int(rectangle[0].y)
    top_right_x = int(rectangle[1].x)
    bottom_right_y = int(rectangle[2].y)

    for p in shape:
        if (p.x < top_left_x
                or p.x > top_right_x
                or p.y < top_left_y
                or p.y > bottom_right_y):
            return False
    return True


def derive_viewfinder(canvas_width, display_width, display_height, margin=VIEWFINDER_MARGIN):
    """Build the default viewfinder from the canvas width and the display aspect ratio"""
    aspect_ratio = float(display_width) / float(display_height)
    viewfinder_height = (canvas_width - (2 * margin)) * aspect_ratio

    return Viewfinder(
        top_left=PointF(margin, margin),
        top_right=PointF(canvas_width - margin, margin),
        bottom_right=PointF(canvas_width - margin, margin + viewfinder_height),
        bottom_left=PointF(margin, margin + viewfinder_height),
    )
