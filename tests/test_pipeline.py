# tests/test_pipeline.py
import numpy as np
import pytest

from features.pipeline import NO_FOREGROUND, run_pipeline
from utils.config import load_config


def test_black_square_scenario(black_square_img):
    cfg = load_config()
    cfg['regions']['max_regions'] = 6
    res = run_pipeline(black_square_img, cfg, method='intensity')

    sel = res.selection
    assert res.detected
    assert sel.foreground_ids == (1,)
    assert sel.kept_ids == (0, 1)
    assert sel.roi_id == 1
    assert 700 < sel.roi_area <= 900
    assert sel.roi_centroid == pytest.approx((59.5, 59.5), abs=0.5)

    f = res.features
    assert len(res.vector) == 9
    assert 90.0 < f.perc_fill <= 100.0
    assert f.wh_ratio == pytest.approx(1.0, abs=0.05)


def test_rotated_rectangle_ratio(rotated_rect_img):
    res = run_pipeline(rotated_rect_img, method='intensity')
    assert res.detected
    r = res.features.wh_ratio
    # width/height ordering follows the fitted rect angle; the object ratio is 3
    assert max(r, 1.0 / r) == pytest.approx(3.0, rel=0.1)
    assert 0.0 < res.features.perc_fill <= 100.0


@pytest.mark.parametrize('method', ['saturation', 'intensity'])
def test_blank_page_is_no_detection(method):
    img = np.full((80, 80, 3), 255, np.uint8)
    res = run_pipeline(img, method=method)
    assert not res.detected
    assert res.reason == NO_FOREGROUND
    assert res.vector is None
    assert res.selection.kept_ids == (0,)
    assert res.contour.shape == (0, 2)


def test_saturation_policy_colored_object():
    img = np.full((120, 120, 3), 250, np.uint8)
    img[40:80, 30:90] = (30, 140, 40)   # green card on near-white paper
    res = run_pipeline(img, method='saturation')
    assert res.detected
    assert res.selection.roi_id in res.selection.kept_ids
    r = res.features.wh_ratio
    assert max(r, 1.0 / r) == pytest.approx(1.5, rel=0.1)


def test_picks_center_object_over_bigger_corner_object():
    img = np.full((300, 300, 3), 255, np.uint8)
    img[0:80, 0:80] = 0          # large blob in the corner
    img[135:165, 135:165] = 0    # smaller blob in the middle
    res = run_pipeline(img, method='intensity')
    assert res.detected
    assert len(res.selection.foreground_ids) == 2
    cx, cy = res.selection.roi_centroid
    assert abs(cx - 150) < 3 and abs(cy - 150) < 3
    assert res.selection.roi_area < 900


def test_config_threshold_reaches_stage(black_square_img):
    cfg = load_config()
    cfg['threshold']['intensity'] = 0   # nothing is darker than 0
    res = run_pipeline(black_square_img, cfg, method='intensity')
    assert not res.detected
    assert not res.binary.any()


def test_deterministic(rotated_rect_img):
    a = run_pipeline(rotated_rect_img)
    b = run_pipeline(rotated_rect_img)
    assert np.array_equal(a.binary, b.binary)
    assert np.array_equal(a.cleaned, b.cleaned)
    assert np.array_equal(a.roi, b.roi)
    assert a.selection.kept_ids == b.selection.kept_ids
    assert a.selection.roi_id == b.selection.roi_id
    assert a.vector == b.vector


def test_rejects_grayscale():
    with pytest.raises(ValueError):
        run_pipeline(np.zeros((50, 50), np.uint8))
