"""
objrec_shape: Object Extraction and Invariant Shape Descriptors
===============================================================

Extracts the single object of interest from a photo of an object on a
contrasting background and describes its shape with a small, fixed-length
feature vector suitable for a downstream classifier.

Main Modules:
--------------
• segmentation  – Thresholding, morphological cleanup, region selection
• features      – Contour extraction, Hu moments, rotated-rect fill/ratio
• utils         – Config loading, image I/O, preview panels
• tests         – Unit and scenario tests on synthetic images

Feature vector (9 floats):
--------------------------
- hu_0 .. hu_6 : sign(h) * log10(|h|) of the seven Hu invariant moments
- perc_fill    : region area as % of its minimum-area rotated rectangle
- wh_ratio     : width / height of that rectangle

References:
-----------
1. M.-K. Hu, *Visual Pattern Recognition by Moment Invariants*, IRE Trans. Information Theory, 1962
2. H. Freeman, R. Shapira, *Determining the Minimum-Area Encasing Rectangle for an Arbitrary Closed Curve*, CACM 1975

Usage:
------
Preview every stage for one photo:
    $ python -m utils.preview_pipeline --config configs/config_objrec.yaml --image IMG --out panel.png

Extract a feature table for a folder:
    $ python -m features.extract_features --config configs/config_objrec.yaml --images DIR --out feats.csv
"""
