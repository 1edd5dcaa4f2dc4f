# utils/vis.py
from pathlib import Path

import cv2
import numpy as np

from segmentation.regions import colorize_regions, random_palette

"""
Display helpers for pipeline results. Nothing here feeds back into the
features; these only draw on copies of the input.
"""


def _check_same_size(a, b, what):
    if a.shape[:2] != b.shape[:2]:
        raise ValueError(f"{what}: size mismatch {a.shape[:2]} vs {b.shape[:2]}")


def draw_feature_overlay(img, result, color=(0, 255, 0)):
    """
    Copy of `img` with the ROI's rotated bounding box and its fill / ratio
    values written below the centroid.
    """
    _check_same_size(img, result.roi, "overlay")
    out = img.copy()
    if not result.detected:
        cv2.putText(out, "no object detected", (20, 40),
                    cv2.FONT_HERSHEY_DUPLEX, 0.8, color, 1, cv2.LINE_4)
        return out

    feats = result.features
    box = cv2.boxPoints(feats.rect).astype(np.int32)
    cv2.polylines(out, [box], True, color, 2)

    cx, cy = (int(v) for v in result.selection.roi_centroid)
    infos = [f"perc_fill: {feats.perc_fill:.2f} %", f"w/h_ratio: {feats.wh_ratio:.3f}"]
    for i, info in enumerate(infos):
        cv2.putText(out, info, (cx, cy + 100 + 30 * i),
                    cv2.FONT_HERSHEY_DUPLEX, 0.8, color, 1, cv2.LINE_4)
    return out


def _as_bgr(m):
    return cv2.cvtColor(m, cv2.COLOR_GRAY2BGR) if m.ndim == 2 else m


def build_stage_panel(result, palette=None, color=(0, 255, 0)):
    """[ input | binary | cleaned | kept regions | overlay ] in one BGR image."""
    if palette is None:
        palette = random_palette(len(result.selection.kept_ids))
    cols = [
        result.image,
        _as_bgr(result.binary),
        _as_bgr(result.cleaned),
        colorize_regions(result.selection, palette),
        draw_feature_overlay(result.image, result, color=color),
    ]
    return np.concatenate(cols, axis=1)


def save_stage_panel(out_path, result, palette=None, color=(0, 255, 0)):
    out_path = Path(out_path)
    panel = build_stage_panel(result, palette=palette, color=color)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    cv2.imwrite(str(out_path), panel)
    return out_path
