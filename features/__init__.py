"""
features: Shape Descriptors for the Selected Region
===================================================

Turns the region of interest picked by `segmentation.regions` into a
9-element, translation/scale/rotation-tolerant descriptor.

Modules:
---------
- contour.py          : Outer contour of a single-region mask.
- shape_features.py   : Log-scaled Hu moments, percent fill, w/h ratio.
- pipeline.py         : run_pipeline(img, cfg) chaining every stage.
- extract_features.py : CLI writing a features CSV for a folder of images.

Extracted Features:
-------------------
- hu_0 .. hu_6 : sign(h) * log10(|h|), 0 when h == 0
- perc_fill    : 100 * area / (rect.w * rect.h), in (0, 100]
- wh_ratio     : rect.w / rect.h (orientation dependent, not folded to >= 1)
"""
