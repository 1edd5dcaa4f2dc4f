"""
segmentation: Foreground Extraction and Region Selection
========================================================

Turns a color photo of an object on a contrasting background into a binary
mask, cleans it, and picks the single connected region that is most likely
the object.

Modules:
---------
- binarize.py   : Saturation and intensity-average thresholding.
- morphology.py : Closing-then-opening cleanup with an elliptical element.
- regions.py    : Connected components, top-K area ranking, center pick,
                  and region coloring for display.

Pipeline:
----------
image (HxWx3) -> mask (HxW, 0/255) -> cleaned mask -> RegionSelection
"""
