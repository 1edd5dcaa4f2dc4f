# tests/conftest.py
# Ensure project root is importable as a module during pytest runs
import pathlib
import sys

import cv2
import numpy as np
import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def white_canvas(h, w):
    return np.full((h, w, 3), 255, np.uint8)


@pytest.fixture
def black_square_img():
    # 30x30 = 900 px, axis aligned, centered on a 120x120 white page
    img = white_canvas(120, 120)
    cv2.rectangle(img, (45, 45), (74, 74), (0, 0, 0), -1)
    return img


@pytest.fixture
def rotated_rect_img():
    img = white_canvas(200, 200)
    box = cv2.boxPoints(((100, 100), (120, 40), 30)).astype(np.int32)
    cv2.fillPoly(img, [box], (0, 0, 0))
    return img
