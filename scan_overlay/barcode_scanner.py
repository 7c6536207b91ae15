# File: scan_overlay/barcode_scanner.py

import logging
import time
import tkinter as tk

import cv2

from .barcode_detector import BarcodeDetector
from .coordinate_mapper import CameraFacing
from .detection_listener import BarcodeTracker, LoggingDetectionListener
from .graphic_overlay import GraphicOverlay

logger = logging.getLogger(__name__)

WINDOW_NAME = "Barcode Scanner"


def display_metrics():
    """Screen size as (width, height) in the display's natural portrait orientation"""
    try:
        root = tk.Tk()
        screen_width = root.winfo_screenwidth()
        screen_height = root.winfo_screenheight()
        root.destroy()
    except tk.TclError as e:
        logger.warning(f"Could not read screen resolution: {e}")
        return None

    logger.info(f"Screen resolution: {screen_width} x {screen_height}")
    return min(screen_width, screen_height), max(screen_width, screen_height)


class BarcodeScanner:
    def __init__(self, camera_index=0, facing=CameraFacing.BACK, canvas_size=(960, 720),
                 cam_width=1280, cam_height=720, display_size=None, viewfinder=None,
                 detector=None, listener=None):
        self.camera_index = camera_index
        self.facing = CameraFacing(facing)
        self.canvas_size = canvas_size

        self.cap = None
        self.cam_width = cam_width
        self.cam_height = cam_height
        self._preview_size = None

        if display_size is None:
            display_size = display_metrics()

        self.overlay = GraphicOverlay(display_size=display_size, viewfinder=viewfinder)
        self.detector = detector or BarcodeDetector()
        self.listener = listener or LoggingDetectionListener()
        self.tracker = BarcodeTracker(self.overlay, self.listener)

        self.running = False
        self.last_value = None
        self.fps = 0.0
        self.frame_count = 0
        self.fps_start_time = time.time()

    def _init_camera(self):
        """Initialize camera"""
        if self.cap is not None:
            return True

        self.cap = cv2.VideoCapture(self.camera_index)
        if not self.cap.isOpened():
            logger.error(f"Could not open camera {self.camera_index}")
            self.cap = None
            return False

        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, self.cam_width)
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self.cam_height)

        self.cam_width = int(self.cap.get(cv2.CAP_PROP_FRAME_WIDTH))
        self.cam_height = int(self.cap.get(cv2.CAP_PROP_FRAME_HEIGHT))

        if self.cam_width == 0 or self.cam_height == 0:
            logger.error("Could not get camera resolution")
            self._release_camera()
            return False

        logger.info(f"Camera resolution: {self.cam_width} x {self.cam_height}")
        self._set_preview_size(self.cam_width, self.cam_height)
        return True

    def _release_camera(self):
        """Release camera resources"""
        if self.cap:
            self.cap.release()
            self.cap = None
            cv2.destroyAllWindows()

    def _set_preview_size(self, width, height):
        self._preview_size = (width, height)
        self.overlay.set_camera_info(width, height, self.facing)

    def process_frame(self, frame):
        """Detect barcodes in a camera frame and return the annotated canvas and accepted barcodes"""
        if frame is None or frame.size == 0:
            return frame, []

        detections = self.detector.detect(frame)

        if (detections.frame_width, detections.frame_height) != self._preview_size:
            self._set_preview_size(detections.frame_width, detections.frame_height)

        accepted = self.tracker.process(detections)
        if accepted:
            self.last_value = accepted[0].value

        canvas = cv2.resize(frame, self.canvas_size)
        if self.facing == CameraFacing.FRONT:
            canvas = cv2.flip(canvas, 1)

        self.overlay.draw(canvas)
        self._draw_status(canvas, len(detections.barcodes), len(accepted))

        return canvas, accepted

    def _draw_status(self, canvas, detected, accepted):
        """Draw detection counters and the last accepted value"""
        cv2.putText(canvas, f"Detected: {detected} | In viewfinder: {accepted}",
                    (10, 30), cv2.FONT_HERSHEY_SIMPLEX, 0.6, (255, 255, 255), 2)
        if self.last_value is not None:
            cv2.putText(canvas, f"Last: {self.last_value}",
                        (10, 60), cv2.FONT_HERSHEY_SIMPLEX, 0.6, (0, 255, 0), 2)
        cv2.putText(canvas, f"FPS: {self.fps:.1f} | Press 'q' to quit",
                    (10, canvas.shape[0] - 20), cv2.FONT_HERSHEY_SIMPLEX, 0.5, (255, 255, 255), 1)

    def _update_fps(self):
        """Update FPS calculation"""
        self.frame_count += 1
        current_time = time.time()

        if current_time - self.fps_start_time >= 1.0:  # Update every second
            self.fps = self.frame_count / (current_time - self.fps_start_time)
            self.frame_count = 0
            self.fps_start_time = current_time

    def stop(self):
        """Stop the scanner"""
        self.running = False
        self._release_camera()

    def run(self):
        """Main scanning loop"""
        if not self._init_camera():
            logger.error("Failed to initialize camera")
            return

        logger.info("Barcode scanner started, hold a barcode inside the blue viewfinder")
        self.running = True

        try:
            while self.running:
                ret, frame = self.cap.read()
                if not ret:
                    logger.error("Could not read frame")
                    break

                canvas, _ = self.process_frame(frame)
                cv2.imshow(WINDOW_NAME, canvas)

                self._update_fps()

                key = cv2.waitKey(1) & 0xFF
                if key == ord('q'):
                    break

        except KeyboardInterrupt:
            logger.info("Shutting down...")
        finally:
            self.stop()
