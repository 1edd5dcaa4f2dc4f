# features/extract_features.py
import argparse
import logging
import os

import numpy as np
import pandas as pd
from tqdm import tqdm

from features.pipeline import run_pipeline
from features.shape_features import FEATURE_NAMES
from segmentation.regions import random_palette
from utils.config import load_config
from utils.paths import list_images, read_color
from utils.vis import save_stage_panel

"""
Batch shape-descriptor extraction over a folder of object photos.

For every image in --images the full pipeline runs once and one row is
written to --out (CSV):

    image_path, detected, hu_0 .. hu_6, perc_fill, wh_ratio

Rows for images with no detectable object keep detected=False and NaN
feature columns so the table always has one row per input file.

Usage:
    python -m features.extract_features \
        --config configs/config_objrec.yaml \
        --images work_dir/objects \
        --out    work_dir/features/objects.csv \
        [--method saturation|intensity] [--preview_dir work_dir/preview]
"""

logger = logging.getLogger(__name__)


def features_row(image_path, result) -> dict:
    row = {"image_path": str(image_path), "detected": bool(result.detected)}
    if result.detected:
        row.update(result.features.as_dict())
    else:
        row.update({k: np.nan for k in FEATURE_NAMES})
    return row


def extract_folder(images_dir, cfg, method=None, preview_dir=None) -> pd.DataFrame:
    paths = list_images(images_dir)
    palette = random_palette(int(cfg["regions"]["max_regions"]), seed=int(cfg["vis"].get("palette_seed", 0)))
    color = tuple(int(c) for c in cfg["vis"].get("text_color", (0, 255, 0)))

    rows = []
    for p in tqdm(paths, desc="extract"):
        result = run_pipeline(read_color(p), cfg, method=method)
        if not result.detected:
            logger.warning("%s: %s", p.name, result.reason)
        rows.append(features_row(p, result))
        if preview_dir:
            save_stage_panel(os.path.join(preview_dir, f"{p.stem}_panel.png"), result, palette=palette, color=color)

    return pd.DataFrame(rows, columns=["image_path", "detected"] + FEATURE_NAMES)


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument('--config', default=None)
    ap.add_argument('--images', required=True)
    ap.add_argument('--out', required=True)
    ap.add_argument('--method', default=None, choices=['saturation', 'intensity'])
    ap.add_argument('--preview_dir', default=None)
    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    cfg = load_config(args.config)

    df = extract_folder(args.images, cfg, method=args.method, preview_dir=args.preview_dir)
    out_dir = os.path.dirname(args.out)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    df.to_csv(args.out, index=False)
    print(f"Saved: {args.out} ({len(df)} rows, {int(df['detected'].sum())} detected)")


if __name__ == '__main__':
    main()
