"""Image utilities - listing and loading helpers."""

from __future__ import annotations
import os
from typing import List, Optional, Sequence

from PIL import Image

from .config import IMG_EXTS, MAX_FILE_SIZE_MB
from .logging import log


def get_file_size_mb(filepath: str) -> float:
    """Get file size in megabytes."""
    try:
        return os.path.getsize(filepath) / (1024 * 1024)
    except OSError:
        return 0.0


def is_file_too_large(filepath: str) -> bool:
    """Check if file exceeds maximum allowed size."""
    return get_file_size_mb(filepath) > MAX_FILE_SIZE_MB


def is_supported_image(filepath: str) -> bool:
    """Check if file has a supported image extension."""
    ext = os.path.splitext(filepath)[1].lower()
    return ext in IMG_EXTS


def list_images(dirpath: str) -> List[str]:
    """List all supported image files in directory, sorted by name.

    Args:
        dirpath: Directory path to scan.

    Returns:
        List of full paths to image files.
    """
    try:
        names = sorted(os.listdir(dirpath))
    except OSError as e:
        log(f"[DIR][ERR] Cannot list {dirpath}: {e!r}")
        return []

    result = []
    for name in names:
        path = os.path.join(dirpath, name)
        if os.path.isfile(path) and is_supported_image(path):
            result.append(path)
    return result


def load_rgba(filepath: str) -> Optional[Image.Image]:
    """Decode an image file into an RGBA Pillow image.

    Returns None (and logs) if the file is too large or cannot be decoded;
    palette extraction then falls back for that item.
    """
    if is_file_too_large(filepath):
        log(f"[LOAD][ERR] Too large: {os.path.basename(filepath)}")
        return None
    try:
        with Image.open(filepath) as img:
            img.load()
            return img.convert("RGBA")
    except (OSError, ValueError) as e:
        log(f"[LOAD][ERR] {os.path.basename(filepath)}: {e!r}")
        return None


def load_all(paths: Sequence[str]) -> List[Optional[Image.Image]]:
    """Decode every path in order; unreadable entries become None."""
    images = [load_rgba(p) for p in paths]
    ok = sum(1 for img in images if img is not None)
    log(f"[LOAD] Decoded {ok}/{len(paths)} images")
    return images
