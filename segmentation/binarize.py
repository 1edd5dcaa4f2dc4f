# segmentation/binarize.py
import cv2
import numpy as np

"""
Color image -> foreground/background mask.

Two interchangeable policies:
    saturation : low-saturation pixels (white/gray paper) are background.
    intensity  : dark pixels (mean of the three channels) are foreground.

Both smooth with a small box blur first and return a fresh HxW uint8 mask
holding only FOREGROUND (255) and BACKGROUND (0).
"""

FOREGROUND = 255
BACKGROUND = 0

SAT_THRESH = 35
INTENSITY_THRESH = 110
BLUR_KSIZE = 3


def _check_color(img):
    if img is None or img.ndim != 3 or img.shape[2] != 3:
        shape = None if img is None else img.shape
        raise ValueError(f"Expected an HxWx3 color image, got shape {shape}")
    if img.dtype != np.uint8:
        raise ValueError(f"Expected uint8 image, got {img.dtype}")


def blur3x3(img, ksize: int = BLUR_KSIZE):
    return cv2.blur(img, (ksize, ksize))


def saturation_channel(img):
    """
    HSV saturation only, scaled to 0..255:  255 * (max - min) // max.
    Pixels whose max channel is 0 get saturation 0.
    """
    px = img.astype(np.int32)
    c_max = px.max(axis=2)
    c_min = px.min(axis=2)
    sat = np.zeros(c_max.shape, np.int32)
    nz = c_max > 0
    sat[nz] = 255 * (c_max[nz] - c_min[nz]) // c_max[nz]
    return sat.astype(np.uint8)


def threshold_saturation(img, sat_thresh: int = SAT_THRESH, ksize: int = BLUR_KSIZE):
    _check_color(img)
    sat = saturation_channel(blur3x3(img, ksize))
    return np.where(sat < sat_thresh, BACKGROUND, FOREGROUND).astype(np.uint8)


def threshold_intensity(img, intensity_thresh: int = INTENSITY_THRESH, ksize: int = BLUR_KSIZE):
    _check_color(img)
    avg = blur3x3(img, ksize).astype(np.int32).sum(axis=2) // 3
    return np.where(avg < intensity_thresh, FOREGROUND, BACKGROUND).astype(np.uint8)


def binarize(img, method: str = "intensity", **params):
    if method == "saturation":
        return threshold_saturation(img, **params)
    if method == "intensity":
        return threshold_intensity(img, **params)
    raise ValueError(f"Unknown threshold method: {method!r}")


def binarize_from_cfg(img, cfg, method=None):
    t = cfg["threshold"]
    method = method or t.get("method", "intensity")
    ksize = int(t.get("ksize", BLUR_KSIZE))
    if method == "saturation":
        return threshold_saturation(img, sat_thresh=int(t.get("saturation", SAT_THRESH)), ksize=ksize)
    if method == "intensity":
        return threshold_intensity(img, intensity_thresh=int(t.get("intensity", INTENSITY_THRESH)), ksize=ksize)
    raise ValueError(f"Unknown threshold method: {method!r}")
