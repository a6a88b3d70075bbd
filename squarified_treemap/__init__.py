"""
Squarified Treemap — Lay out weighted items as near-square rectangles.
"""

__version__ = "0.1.0"

from squarified_treemap.core.mappable import ListMapModel, MapItem, Mappable, MapModel
from squarified_treemap.core.rect import Rect
from squarified_treemap.layouts.treemap import (
    Layout,
    TreemapLayout,
    TreemapRect,
    compute_treemap_layout,
    sort_descending,
)

__all__ = [
    "Rect",
    "Mappable",
    "MapItem",
    "MapModel",
    "ListMapModel",
    "Layout",
    "TreemapLayout",
    "TreemapRect",
    "compute_treemap_layout",
    "sort_descending",
    "__version__",
]
