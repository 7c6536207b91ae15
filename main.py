import logging

from scan_overlay.barcode_scanner import BarcodeScanner

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )

    try:
        scanner = BarcodeScanner()
        scanner.run()
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        logger.error("Make sure your camera is connected and not being used by another application")
    finally:
        logger.info("Application terminated")
