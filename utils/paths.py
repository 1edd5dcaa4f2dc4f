# utils/paths.py
from pathlib import Path
from typing import List, Union

import cv2

IMAGE_EXTS = {".png", ".jpg", ".jpeg", ".bmp"}


def list_images(root: Union[str, Path]) -> List[Path]:
    """Image files directly under `root`, sorted by name."""
    root = Path(root)
    if not root.is_dir():
        raise FileNotFoundError(f"Not a directory: {root}")
    return sorted(p for p in root.iterdir() if p.suffix.lower() in IMAGE_EXTS)


def read_color(path):
    img = cv2.imread(str(path), cv2.IMREAD_COLOR)
    if img is None:
        raise FileNotFoundError(f"Could not read image: {path}")
    return img
