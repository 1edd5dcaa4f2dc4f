# features/shape_features.py
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import cv2
import numpy as np

"""
Rotation/scale-invariant shape descriptor for a single region.

Feature vector (9 floats, fixed order):
    hu_0 .. hu_6 : Hu invariant moments of the contour, log scaled as
                   sign(h) * log10(|h|)  (a moment of exactly 0 -> 0.0)
    perc_fill    : 100 * region area / area of the minimum-area rotated
                   rectangle around the contour, in (0, 100]
    wh_ratio     : rect width / rect height as returned by cv2.minAreaRect

Notes:
    - wh_ratio is NOT folded to >= 1. minAreaRect's width/height ordering
      follows the rectangle angle, so an object and its 90 degree rotation
      can give reciprocal ratios. Stored feature tables depend on this.
    - minAreaRect fits through boundary pixel centers, so it is about one
      pixel smaller per side than the pixel area it encloses; perc_fill is
      clamped to 100 for compact shapes.
"""

logger = logging.getLogger(__name__)

FEATURE_NAMES = [f"hu_{i}" for i in range(7)] + ["perc_fill", "wh_ratio"]

ZERO_SENTINEL = 0.0
DEGENERATE_FILL = 100.0
DEGENERATE_RATIO = 0.0


@dataclass(frozen=True)
class ShapeFeatures:
    hu: Tuple[float, ...]
    perc_fill: float
    wh_ratio: float
    rect: Tuple[Tuple[float, float], Tuple[float, float], float]

    def as_vector(self) -> Tuple[float, ...]:
        return tuple(self.hu) + (self.perc_fill, self.wh_ratio)

    def as_dict(self) -> dict:
        return dict(zip(FEATURE_NAMES, self.as_vector()))


def log_scale(values, zero_sentinel: float = ZERO_SENTINEL) -> np.ndarray:
    v = np.asarray(values, dtype=np.float64).ravel()
    out = np.full(v.shape, zero_sentinel, dtype=np.float64)
    nz = v != 0
    out[nz] = np.sign(v[nz]) * np.log10(np.abs(v[nz]))
    return out


def log_scale_hu(contour) -> Tuple[float, ...]:
    m = cv2.moments(np.asarray(contour, np.int32).reshape(-1, 1, 2))
    hu = cv2.HuMoments(m).ravel()
    return tuple(float(h) for h in log_scale(hu))


def fill_and_aspect(contour, area):
    rect = cv2.minAreaRect(np.asarray(contour, np.int32).reshape(-1, 1, 2))
    (_, _), (w, h), _ = rect
    if w <= 0 or h <= 0:
        logger.debug("Degenerate rotated rect %s", rect)
        return DEGENERATE_FILL, DEGENERATE_RATIO, rect
    perc_fill = min(100.0, 100.0 * float(area) / (w * h))
    return perc_fill, float(w) / float(h), rect


def compute_shape_features(contour, area) -> Optional[ShapeFeatures]:
    """
    Build the 9-element descriptor for one region.

    Args:
        contour: (N, 2) boundary points of the region.
        area   : pixel count of the region (connected-component area).

    Returns:
        ShapeFeatures, or None when there is nothing to describe (empty
        contour or non-positive area).
    """
    contour = np.asarray(contour)
    if contour.size == 0 or area <= 0:
        logger.info("No object: contour points=%d area=%s", len(contour), area)
        return None
    hu = log_scale_hu(contour)
    perc_fill, wh_ratio, rect = fill_and_aspect(contour, area)
    return ShapeFeatures(hu=hu, perc_fill=perc_fill, wh_ratio=wh_ratio,
                         rect=(tuple(rect[0]), tuple(rect[1]), float(rect[2])))
