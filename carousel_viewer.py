"""Gradient Carousel - infinite image carousel with a color-following backdrop.

Usage:
    python carousel_viewer.py [DIRECTORY] [--instant]

Shows every supported image in DIRECTORY (default: current directory).
``--instant`` switches backdrop colors without easing.
"""

from __future__ import annotations
import atexit
import os
import sys

from gradient_carousel.app import create_app
from gradient_carousel.image_utils import list_images
from gradient_carousel.logging import log, get_frame


def main() -> int:
    log("[MAIN] Starting application")

    args = sys.argv[1:]
    smooth = "--instant" not in args
    start_path = None
    for a in args:
        if a.startswith("--"):
            continue
        p = os.path.abspath(a)
        log(f"[ARGS] Checking argument: {a} -> {p}")
        if os.path.exists(p):
            start_path = p
            break

    if start_path and os.path.isfile(start_path):
        dirpath = os.path.dirname(start_path)
    else:
        dirpath = start_path or os.getcwd()

    images = list_images(dirpath)
    log(f"[DIR] Found {len(images)} images in {dirpath}")
    if not images:
        log("[DIR] No images found, nothing to show")
        return 1

    app = create_app(images)
    if not app.initialize(smooth=smooth):
        return 1
    atexit.register(lambda: log(f"[EXIT] frames={get_frame()}"))
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
