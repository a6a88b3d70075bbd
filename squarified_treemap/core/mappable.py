"""
Item and model abstractions for treemap layout.

A layout only needs two things from an item: its size (weight) and a
place to write its bounds. ``Mappable`` captures that contract so any
application object can be laid out; ``MapItem`` is the stock
implementation. ``MapModel`` is the source the items come from.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional

from squarified_treemap.core.rect import Rect


class Mappable(ABC):
    """An object that can be placed in a treemap layout.

    Subclasses expose a non-negative ``size`` (the area weight) and
    accept new bounds through ``set_bounds``.
    """

    @property
    @abstractmethod
    def size(self) -> float: ...

    @property
    @abstractmethod
    def bounds(self) -> Rect: ...

    @abstractmethod
    def set_bounds(self, bounds: Rect) -> None: ...

    def set_bounds_from_points(self, x: float, y: float, w: float, h: float) -> None:
        self.set_bounds(Rect(x, y, w, h))


class MapItem(Mappable):
    """A plain sized item.

    Parameters
    ----------
    size : float
        Weight of the item. Defaults to 1.0.
    bounds : Rect, optional
        Initial bounds. Defaults to the unit square.
    """

    def __init__(self, size: float = 1.0, bounds: Optional[Rect] = None) -> None:
        self._size = size
        self._bounds = bounds if bounds is not None else Rect()

    @property
    def size(self) -> float:
        return self._size

    @size.setter
    def size(self, value: float) -> None:
        self._size = value

    @property
    def bounds(self) -> Rect:
        return self._bounds

    def set_bounds(self, bounds: Rect) -> None:
        self._bounds = bounds

    def __repr__(self) -> str:
        return f"MapItem(size={self._size!r}, bounds={self._bounds!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MapItem):
            return NotImplemented
        return self._size == other._size and self._bounds == other._bounds

    def to_dict(self) -> Dict[str, Any]:
        return {"size": self._size, "bounds": self._bounds.to_dict()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MapItem":
        bounds = data.get("bounds")
        return cls(
            size=data.get("size", 1.0),
            bounds=Rect.from_dict(bounds) if bounds else None,
        )


class MapModel(ABC):
    """Source of the items a layout arranges."""

    @abstractmethod
    def get_items(self) -> List[Mappable]:
        """Return the items to lay out.

        Layouts sort the returned list in place, so implementations that
        hand out their own list will see it reordered.
        """


class ListMapModel(MapModel):
    """A model backed by a caller-owned list of items.

    Examples
    --------
    >>> model = ListMapModel.from_sizes([6, 6, 4, 3])
    >>> TreemapLayout().layout(model, Rect(0, 0, 6, 4))
    >>> model.items[0].bounds
    """

    def __init__(self, items: Optional[List[Mappable]] = None) -> None:
        self.items: List[Mappable] = items if items is not None else []

    def get_items(self) -> List[Mappable]:
        return self.items

    @classmethod
    def from_sizes(cls, sizes: Iterable[float]) -> "ListMapModel":
        """Create a model with one ``MapItem`` per size."""
        return cls([MapItem(size) for size in sizes])
