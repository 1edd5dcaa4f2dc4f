# tests/test_binarize.py
import numpy as np
import pytest

from segmentation.binarize import (BACKGROUND, FOREGROUND, binarize, saturation_channel,
                                   threshold_intensity, threshold_saturation)


def test_saturation_formula():
    px = np.array([[[0, 0, 0], [200, 50, 100], [200, 200, 200], [0, 0, 255]]], np.uint8)
    sat = saturation_channel(px)
    assert sat.dtype == np.uint8
    # max==0 must not divide by zero; 255*150/200 = 191.25 -> 191
    assert sat.tolist() == [[0, 191, 0, 255]]


def test_saturation_policy_white_vs_colored():
    img = np.full((40, 40, 3), 255, np.uint8)
    img[10:30, 10:30] = (0, 0, 200)  # red patch (BGR)
    m = threshold_saturation(img)
    assert m.shape == (40, 40) and m.dtype == np.uint8
    assert set(np.unique(m).tolist()) <= {BACKGROUND, FOREGROUND}
    assert m[20, 20] == FOREGROUND
    assert m[2, 2] == BACKGROUND


def test_intensity_threshold_boundary():
    dark = np.full((9, 9, 3), 109, np.uint8)
    at = np.full((9, 9, 3), 110, np.uint8)
    assert (threshold_intensity(dark) == FOREGROUND).all()
    assert (threshold_intensity(at) == BACKGROUND).all()


def test_custom_threshold_is_used():
    img = np.full((9, 9, 3), 150, np.uint8)
    assert (threshold_intensity(img) == BACKGROUND).all()
    assert (threshold_intensity(img, intensity_thresh=200) == FOREGROUND).all()


def test_output_is_fresh_and_same_size():
    img = np.zeros((17, 23, 3), np.uint8)
    for method in ("saturation", "intensity"):
        m = binarize(img, method)
        assert m.shape == img.shape[:2]
        assert m is not img


def test_bad_inputs():
    with pytest.raises(ValueError):
        binarize(np.zeros((10, 10), np.uint8), "intensity")
    with pytest.raises(ValueError):
        binarize(np.zeros((10, 10, 3), np.float32), "saturation")
    with pytest.raises(ValueError):
        binarize(np.zeros((10, 10, 3), np.uint8), "otsu")
