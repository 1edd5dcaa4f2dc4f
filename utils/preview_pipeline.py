# utils/preview_pipeline.py
import argparse
import logging

from features.pipeline import run_pipeline
from segmentation.regions import random_palette
from utils.config import load_config
from utils.paths import read_color
from utils.vis import save_stage_panel

"""
Stage-by-stage preview for a single photo.

Panel layout:
[ INPUT | BINARY | CLEANED | KEPT REGIONS (colored) | OVERLAY (rotated box + fill/ratio) ]

Usage:
  python -m utils.preview_pipeline \
      --config configs/config_objrec.yaml \
      --image  work_dir/objects/mug.jpg \
      --out    work_dir/preview/mug_panel.png \
      [--method saturation|intensity]
"""


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument('--config', default=None)
    ap.add_argument('--image', required=True)
    ap.add_argument('--out', required=True)
    ap.add_argument('--method', default=None, choices=['saturation', 'intensity'])
    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO)
    cfg = load_config(args.config)

    result = run_pipeline(read_color(args.image), cfg, method=args.method)
    sel = result.selection
    palette = random_palette(len(sel.kept_ids), seed=int(cfg["vis"].get("palette_seed", 0)))
    color = tuple(int(c) for c in cfg["vis"].get("text_color", (0, 255, 0)))
    out = save_stage_panel(args.out, result, palette=palette, color=color)

    print(f"kept_ids={list(sel.kept_ids)} roi_id={sel.roi_id} roi_area={sel.roi_area}")
    if result.detected:
        print(", ".join(f"{i}: {v:.4f}" for i, v in enumerate(result.vector)))
    else:
        print(f"No object detected ({result.reason})")
    print("Saved:", out)


if __name__ == '__main__':
    main()
