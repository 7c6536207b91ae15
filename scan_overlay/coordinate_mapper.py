# File: scan_overlay/coordinate_mapper.py

from enum import IntEnum

from .geometry import Point


class CameraFacing(IntEnum):
    BACK = 0
    FRONT = 1


class CoordinateMapper:
    def __init__(self, facing=CameraFacing.BACK, view_width=0):
        self.width_scale_factor = 1.0
        self.height_scale_factor = 1.0
        self.facing = facing
        self.view_width = view_width

    def update_scale_factors(self, canvas_width, canvas_height, preview_width, preview_height):
        """Recompute scale factors from canvas and preview sizes.

        The previous factors are kept when either preview dimension is zero.
        """
        self.view_width = canvas_width
        if preview_width == 0 or preview_height == 0:
            return False

        self.width_scale_factor = float(canvas_width) / float(preview_width)
        self.height_scale_factor = float(canvas_height) / float(preview_height)
        return True

    def scale_x(self, horizontal):
        """Scale a horizontal preview value to view scale"""
        return horizontal * self.width_scale_factor

    def scale_y(self, vertical):
        """Scale a vertical preview value to view scale"""
        return vertical * self.height_scale_factor

    def translate_x(self, x):
        """Map an x coordinate from preview to view space, mirrored for the front camera"""
        if self.facing == CameraFacing.FRONT:
            return self.view_width - self.scale_x(x)
        return self.scale_x(x)

    def translate_y(self, y):
        """Map a y coordinate from preview to view space"""
        return self.scale_y(y)

    def map_point(self, point):
        """Map a preview point to whole-pixel view coordinates"""
        return Point(int(self.translate_x(point[0])), int(self.translate_y(point[1])))
