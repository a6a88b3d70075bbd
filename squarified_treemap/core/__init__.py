"""Core data model for treemap layout."""

from squarified_treemap.core.mappable import ListMapModel, MapItem, Mappable, MapModel
from squarified_treemap.core.rect import Rect

__all__ = [
    "Rect",
    "Mappable",
    "MapItem",
    "MapModel",
    "ListMapModel",
]
