# segmentation/regions.py
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

import cv2
import numpy as np

"""
Connected-component analysis and the region-selection policy.

Given a cleaned binary mask this module:
    1) labels connected components (cv2.connectedComponentsWithStats),
    2) keeps the K labels with the largest pixel area (background label 0
       takes part in the ranking, so it usually occupies one of the K slots),
    3) among the kept labels picks the one whose centroid is nearest to the
       image center: the region of interest (ROI).

Both rankings break ties on the lower label id, so identical inputs always
give identical selections. Label 0 is never a candidate for the ROI; when no
foreground label survives the ranking the selection reports detected=False.

Coloring helpers at the bottom reuse a RegionSelection for display; they do
not influence which region is selected.
"""

logger = logging.getLogger(__name__)

BACKGROUND_ID = 0
BLACK = (0, 0, 0)
WHITE = 255


@dataclass(frozen=True, eq=False)
class LabeledRegions:
    labels: np.ndarray      # HxW int32, 0 = background
    stats: np.ndarray       # N x 5 (x, y, w, h, area), row = label id
    centroids: np.ndarray   # N x 2 float64 (x, y)

    @property
    def count(self) -> int:
        return int(self.stats.shape[0])

    @property
    def areas(self) -> np.ndarray:
        return self.stats[:, cv2.CC_STAT_AREA]

    def bbox(self, label: int) -> Tuple[int, int, int, int]:
        s = self.stats[label]
        return (int(s[cv2.CC_STAT_LEFT]), int(s[cv2.CC_STAT_TOP]),
                int(s[cv2.CC_STAT_WIDTH]), int(s[cv2.CC_STAT_HEIGHT]))

    def centroid(self, label: int) -> Tuple[float, float]:
        return float(self.centroids[label, 0]), float(self.centroids[label, 1])


@dataclass(frozen=True, eq=False)
class RegionSelection:
    labels: np.ndarray
    kept_ids: Tuple[int, ...]
    roi_id: Optional[int] = None
    roi_area: int = 0
    roi_centroid: Optional[Tuple[float, float]] = None
    roi_bbox: Optional[Tuple[int, int, int, int]] = None
    regions: Optional[LabeledRegions] = field(default=None, repr=False)

    @property
    def detected(self) -> bool:
        return self.roi_id is not None

    @property
    def foreground_ids(self) -> Tuple[int, ...]:
        return tuple(i for i in self.kept_ids if i != BACKGROUND_ID)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.labels.shape[:2]


def label_regions(mask, connectivity: int = 8) -> LabeledRegions:
    if mask.ndim != 2:
        raise ValueError(f"Expected a 2-D mask, got shape {mask.shape}")
    _, labels, stats, centroids = cv2.connectedComponentsWithStats(
        mask.astype(np.uint8), connectivity=connectivity, ltype=cv2.CV_32S)
    return LabeledRegions(labels=labels, stats=stats, centroids=centroids)


def top_k_by_area(areas: Sequence[int], k: int) -> Tuple[int, ...]:
    """Indices of the k largest areas, largest first; equal areas keep index order."""
    if k <= 0:
        raise ValueError(f"max_regions must be > 0, got {k}")
    order = np.argsort(-np.asarray(areas, dtype=np.int64), kind="stable")
    return tuple(int(i) for i in order[:k])


def image_center(shape) -> Tuple[float, float]:
    h, w = shape[:2]
    return w / 2.0, h / 2.0


def closest_to_center(centroids: np.ndarray, candidates: Sequence[int],
                      center: Tuple[float, float]) -> Optional[int]:
    cx, cy = center
    best_id, best_d = None, None
    for rid in sorted(candidates):
        if rid == BACKGROUND_ID:
            continue
        d = float(np.hypot(centroids[rid, 0] - cx, centroids[rid, 1] - cy))
        if best_d is None or d < best_d:
            best_id, best_d = rid, d
    return best_id


def select_regions(mask, max_regions: int = 6, connectivity: int = 8) -> RegionSelection:
    """
    Label `mask` and pick the kept regions plus the region of interest.

    Returns:
        RegionSelection with kept_ids of length min(max_regions, #labels).
        If every kept label is background, roi_id is None (no detection).
    """
    if max_regions <= 0:
        raise ValueError(f"max_regions must be > 0, got {max_regions}")

    regions = label_regions(mask, connectivity=connectivity)
    kept = top_k_by_area(regions.areas, max_regions)
    roi = closest_to_center(regions.centroids, kept, image_center(mask.shape))

    if roi is None:
        logger.info("No foreground region among %d labels", regions.count)
        return RegionSelection(labels=regions.labels, kept_ids=kept, regions=regions)

    return RegionSelection(
        labels=regions.labels,
        kept_ids=kept,
        roi_id=roi,
        roi_area=int(regions.areas[roi]),
        roi_centroid=regions.centroid(roi),
        roi_bbox=regions.bbox(roi),
        regions=regions,
    )


def select_regions_from_cfg(mask, cfg) -> RegionSelection:
    r = cfg["regions"]
    return select_regions(mask,
                          max_regions=int(r.get("max_regions", 6)),
                          connectivity=int(r.get("connectivity", 8)))


# ---------------------- coloring ----------------------

def random_palette(n: int, seed: int = 0) -> List[Tuple[int, int, int]]:
    rng = np.random.default_rng(seed)
    return [tuple(int(c) for c in row) for row in rng.integers(0, 256, size=(n, 3))]


def build_region_colors(selection: RegionSelection, palette) -> Dict[int, Tuple[int, int, int]]:
    """
    Map each kept id to a BGR color: background -> black, kept_ids[i] -> palette[i].
    """
    if len(palette) < len(selection.kept_ids):
        raise ValueError(
            f"Palette has {len(palette)} colors but {len(selection.kept_ids)} regions are kept")
    id2color = {}
    for i, rid in enumerate(selection.kept_ids):
        if rid == BACKGROUND_ID:
            id2color[rid] = BLACK
        else:
            col = palette[i]
            id2color[rid] = (int(col[0]), int(col[1]), int(col[2]))
    return id2color


def colorize_regions(selection: RegionSelection, palette) -> np.ndarray:
    """Paint kept regions with their colors; everything not kept stays black."""
    id2color = build_region_colors(selection, palette)
    h, w = selection.shape
    out = np.zeros((h, w, 3), np.uint8)
    for rid, col in id2color.items():
        if rid == BACKGROUND_ID:
            continue
        out[selection.labels == rid] = col
    return out


def roi_mask(selection: RegionSelection) -> np.ndarray:
    """Single-channel mask: ROI pixels 255, everything else 0."""
    h, w = selection.shape
    out = np.zeros((h, w), np.uint8)
    if selection.detected:
        out[selection.labels == selection.roi_id] = WHITE
    return out
