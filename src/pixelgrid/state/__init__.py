"""State/store layer.

This package holds the only mutable state in pixelgrid: the in-memory
store of local cell edits that the grid aggregator overlays in
``locally`` mode.
"""
