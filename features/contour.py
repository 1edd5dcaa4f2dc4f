# features/contour.py
import cv2
import numpy as np


def contour_of_interest(mask) -> np.ndarray:
    """
    Outer boundary of the foreground in a single-region mask.

    Returns an (N, 2) int32 array of (x, y) points in tracing order. If the
    mask holds several outer contours the one enclosing the largest area is
    returned; an all-zero mask gives an empty (0, 2) array.
    """
    if mask.ndim != 2:
        raise ValueError(f"Expected a 2-D mask, got shape {mask.shape}")
    cnts, _ = cv2.findContours((mask > 0).astype(np.uint8), cv2.RETR_EXTERNAL, cv2.CHAIN_APPROX_NONE)
    if not cnts:
        return np.zeros((0, 2), np.int32)
    areas = [cv2.contourArea(c) for c in cnts]
    best = int(np.argmax(areas))
    return cnts[best].reshape(-1, 2).astype(np.int32)
