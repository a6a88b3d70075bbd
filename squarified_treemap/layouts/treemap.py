"""Squarified treemap layout algorithm (Bruls-Huizing-van Wijk)."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Sequence

from squarified_treemap.core.mappable import MapItem, Mappable, MapModel
from squarified_treemap.core.rect import Rect

logger = logging.getLogger(__name__)


class Layout(ABC):
    """Interface for treemap layout algorithms."""

    @abstractmethod
    def layout(self, model: MapModel, bounds: Rect) -> None:
        """Arrange the items of ``model`` to fill ``bounds``."""


class TreemapLayout(Layout):
    """Squarified treemap layout.

    Items are sorted by descending size, then the bounds are cut into
    rows along the longer side. Each row greedily takes items while the
    normalized aspect ratio keeps improving, and the remainder of the
    rectangle is laid out recursively.

    Parameters
    ----------
    proportional : bool
        When False (the default) row shares are computed the classic way:
        the total for a range leaves out its last item and the first
        item's share seeds the running row fraction, which matches
        previously published layouts bit for bit. When True, totals cover
        the whole range and every item area is exactly proportional to
        its size.
    """

    def __init__(self, proportional: bool = False) -> None:
        self.proportional = proportional

    def layout(self, model: MapModel, bounds: Rect) -> None:
        self.layout_items(model.get_items(), bounds)

    def layout_items(self, items: List[Mappable], bounds: Rect) -> None:
        """Sort ``items`` in place and assign each one its bounds.

        Raises
        ------
        ValueError
            If an item has a negative (or NaN) size, or ``bounds`` has a
            negative (or NaN) width or height.
        """
        _check_bounds(bounds)
        for i, item in enumerate(items):
            if not item.size >= 0:
                raise ValueError(f"Item {i} has invalid size {item.size!r}; sizes must be >= 0")

        if not items:
            return

        sort_descending(items)
        logger.debug("Laying out %d items into %r", len(items), bounds)
        self.layout_items_at(items, 0, len(items), bounds)

    def layout_items_at(
        self,
        items: List[Mappable],
        start: int,
        stop: int,
        bounds: Rect,
    ) -> None:
        """Lay out the sorted range ``items[start:stop]`` inside ``bounds``."""
        if stop <= start:
            return

        if stop - start <= 2:
            self.layout_row(items, start, stop, bounds)
            return

        if bounds.is_degenerate:
            logger.debug("Degenerate bounds %r for items [%d, %d)", bounds, start, stop)
            self.layout_row(items, start, stop, bounds)
            return

        if self.proportional:
            total = self.total_item_size(items, start, stop)
        else:
            total = self.total_item_size(items, start, stop - 1)

        if total <= 0:
            # Sorted descending, so everything left has size zero.
            self.layout_row(items, start, stop, bounds)
            return

        x, y, w, h = bounds.x, bounds.y, bounds.w, bounds.h
        split_height = w < h
        if split_height:
            big, small = h, w
        else:
            big, small = w, h

        a = items[start].size / total
        b = a
        last = start
        while last < stop - 1:
            if self.proportional:
                q = items[last + 1].size / total
            else:
                q = items[last].size / total
            if norm_aspect(big, small, a, b + q) > norm_aspect(big, small, a, b):
                break
            last += 1
            b += q

        if last == stop - 1:
            row_bounds = bounds
            rest_bounds = bounds
        elif split_height:
            row_bounds = Rect(x, y, w, h * b)
            rest_bounds = Rect(x, y + h * b, w, h * (1.0 - b))
        else:
            row_bounds = Rect(x, y, w * b, h)
            rest_bounds = Rect(x + w * b, y, w * (1.0 - b), h)

        logger.debug("Row [%d, %d] takes fraction %.6g of %r", start, last, b, bounds)
        self.layout_row(items, start, last + 1, row_bounds)
        self.layout_items_at(items, last + 1, stop, rest_bounds)

    def layout_row(
        self,
        items: List[Mappable],
        start: int,
        stop: int,
        bounds: Rect,
    ) -> None:
        """Slice ``bounds`` among ``items[start:stop]`` in proportion to size.

        Slices run along the longer side of ``bounds``. A row whose sizes
        are all zero gets zero-area rectangles at the row origin.
        """
        total = self.total_item_size(items, start, stop)
        if total <= 0:
            logger.debug("Zero total size for items [%d, %d)", start, stop)
            for i in range(start, stop):
                items[i].set_bounds(Rect(bounds.x, bounds.y, 0.0, 0.0))
            return

        is_horizontal = bounds.w > bounds.h
        offset = 0.0
        for i in range(start, stop):
            ratio = items[i].size / total
            if is_horizontal:
                r = Rect(bounds.x + bounds.w * offset, bounds.y, bounds.w * ratio, bounds.h)
            else:
                r = Rect(bounds.x, bounds.y + bounds.h * offset, bounds.w, bounds.h * ratio)
            items[i].set_bounds(r)
            offset += ratio

    def total_item_size(
        self,
        items: Sequence[Mappable],
        start: int = 0,
        stop: Optional[int] = None,
    ) -> float:
        """Sum of sizes over ``items[start:stop]``."""
        if stop is None:
            stop = len(items)
        total = 0.0
        for i in range(start, stop):
            total += items[i].size
        return total


def sort_descending(items: List[Mappable]) -> None:
    """Sort items in place by descending size; ties keep their input order."""
    items.sort(key=lambda item: item.size, reverse=True)


def aspect(big: float, small: float, a: float, b: float) -> float:
    return (big * b) / (small * a / b)


def norm_aspect(big: float, small: float, a: float, b: float) -> float:
    """Aspect estimate for a row, folded so that 1.0 is square and larger is worse."""
    x = aspect(big, small, a, b)
    if x < 1.0:
        return 1.0 / x
    return x


def _check_bounds(bounds: Rect) -> None:
    if not (bounds.w >= 0 and bounds.h >= 0):
        raise ValueError(f"Bounds must have non-negative width and height, got {bounds!r}")


@dataclass
class TreemapRect:
    """A rectangle in the treemap layout."""

    x: float
    y: float
    width: float
    height: float
    index: int
    size: float


class _IndexedItem(MapItem):
    def __init__(self, size: float, index: int) -> None:
        super().__init__(size)
        self.index = index


def compute_treemap_layout(
    sizes: Sequence[float],
    container_width: float = 100.0,
    container_height: float = 100.0,
    proportional: bool = False,
) -> List[TreemapRect]:
    """Compute a squarified treemap layout for plain numbers.

    Parameters
    ----------
    sizes : Sequence[float]
        Item weights, in any order.
    container_width : float
        Width of the container.
    container_height : float
        Height of the container.
    proportional : bool
        Passed through to ``TreemapLayout``.

    Returns
    -------
    List[TreemapRect]
        Rectangles in layout order (descending size). ``index`` points
        back into ``sizes``.
    """
    if not (container_width > 0 and container_height > 0):
        raise ValueError(
            f"Container must have positive dimensions, "
            f"got {container_width!r} x {container_height!r}"
        )

    items: List[Mappable] = [_IndexedItem(size, i) for i, size in enumerate(sizes)]
    if not items:
        return []

    TreemapLayout(proportional=proportional).layout_items(
        items, Rect(0.0, 0.0, container_width, container_height)
    )

    result = []
    for item in items:
        r = item.bounds
        result.append(
            TreemapRect(
                x=r.x,
                y=r.y,
                width=r.w,
                height=r.h,
                index=item.index,  # type: ignore[attr-defined]
                size=item.size,
            )
        )
    return result
