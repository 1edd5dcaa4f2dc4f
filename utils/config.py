# utils/config.py
import copy
from pathlib import Path
from typing import Union

import yaml

"""
Config loading for the object pipeline.

Every tunable constant used by the stages lives here as a named value so a
YAML file under configs/ can override any subset of them:

    threshold.method       saturation | intensity
    threshold.saturation   background if saturation < value
    threshold.intensity    foreground if channel mean < value
    threshold.ksize        box blur size applied before thresholding
    morphology.*           structuring element size, close/open iterations
    regions.max_regions    number of largest regions kept (background counts)
"""

DEFAULT_CFG = {
    "threshold": {
        "method": "intensity",
        "ksize": 3,
        "saturation": 35,
        "intensity": 110,
    },
    "morphology": {
        "kernel_size": 3,
        "close_iters": 20,
        "open_iters": 6,
    },
    "regions": {
        "max_regions": 6,
        "connectivity": 8,
    },
    "vis": {
        "palette_seed": 0,
        "text_color": [0, 255, 0],
    },
}

THRESHOLD_METHODS = ("saturation", "intensity")

CFG_PATH = Path(__file__).resolve().parents[1] / "configs" / "config_objrec.yaml"


def _merge(base: dict, override: dict) -> dict:
    out = copy.deepcopy(base)
    for k, v in (override or {}).items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _merge(out[k], v)
        else:
            out[k] = v
    return out


def load_config(path: Union[str, Path, None] = None) -> dict:
    """
    Load a YAML config and fill anything missing from DEFAULT_CFG.
    With path=None the defaults are returned untouched.
    """
    if path is None:
        cfg = copy.deepcopy(DEFAULT_CFG)
    else:
        with open(path, "r") as f:
            cfg = _merge(DEFAULT_CFG, yaml.safe_load(f) or {})

    method = cfg["threshold"]["method"]
    if method not in THRESHOLD_METHODS:
        raise ValueError(f"Unknown threshold method {method!r}; expected one of {THRESHOLD_METHODS}")
    return cfg
