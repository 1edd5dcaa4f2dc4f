"""
utils: Config, I/O and Visualization Utilities
==============================================

Modules:
---------
- config.py           : YAML config with named defaults for every stage.
- paths.py            : Image listing and reading.
- vis.py              : Feature overlay and stage-panel rendering.
- preview_pipeline.py : CLI writing a stage panel for one image.
"""
