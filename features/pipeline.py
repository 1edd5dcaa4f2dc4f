# features/pipeline.py
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from features.contour import contour_of_interest
from features.shape_features import ShapeFeatures, compute_shape_features
from segmentation.binarize import binarize_from_cfg
from segmentation.morphology import clean_mask_from_cfg
from segmentation.regions import RegionSelection, roi_mask, select_regions_from_cfg
from utils.config import load_config

"""
End-to-end object -> shape descriptor for one image.

    img (HxWx3 uint8)
      -> binarize            (saturation or intensity threshold)
      -> clean_mask          (close x20, open x6)
      -> select_regions      (top-K by area, nearest-to-center ROI)
      -> roi_mask            (ROI white, rest black)
      -> contour_of_interest
      -> compute_shape_features

Every call allocates its own intermediates; nothing is cached between calls.
No-detection is reported on the result (detected=False, reason=...), not raised.
"""

logger = logging.getLogger(__name__)

NO_FOREGROUND = "no_foreground_region"
EMPTY_CONTOUR = "empty_contour"


@dataclass(frozen=True, eq=False)
class PipelineResult:
    image: np.ndarray
    binary: np.ndarray
    cleaned: np.ndarray
    selection: RegionSelection
    roi: np.ndarray
    contour: np.ndarray
    features: Optional[ShapeFeatures] = None
    reason: Optional[str] = None

    @property
    def detected(self) -> bool:
        return self.features is not None

    @property
    def vector(self) -> Optional[Tuple[float, ...]]:
        return self.features.as_vector() if self.features is not None else None


def run_pipeline(img, cfg=None, method=None) -> PipelineResult:
    cfg = cfg or load_config()

    binary = binarize_from_cfg(img, cfg, method=method)
    cleaned = clean_mask_from_cfg(binary, cfg)
    selection = select_regions_from_cfg(cleaned, cfg)
    roi = roi_mask(selection)

    if not selection.detected:
        return PipelineResult(image=img, binary=binary, cleaned=cleaned, selection=selection,
                              roi=roi, contour=np.zeros((0, 2), np.int32), reason=NO_FOREGROUND)

    contour = contour_of_interest(roi)
    feats = compute_shape_features(contour, selection.roi_area)
    if feats is None:
        return PipelineResult(image=img, binary=binary, cleaned=cleaned, selection=selection,
                              roi=roi, contour=contour, reason=EMPTY_CONTOUR)

    logger.debug("ROI id=%d area=%d centroid=%s features=%s",
                 selection.roi_id, selection.roi_area, selection.roi_centroid, feats.as_vector())
    return PipelineResult(image=img, binary=binary, cleaned=cleaned, selection=selection,
                          roi=roi, contour=contour, features=feats)
