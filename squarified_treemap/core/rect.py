"""Rectangle value type used for treemap bounds."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle.

    Attributes
    ----------
    x : float
        Left edge.
    y : float
        Top edge.
    w : float
        Width.
    h : float
        Height.

    ``Rect()`` is the unit square at the origin.
    """

    x: float = 0.0
    y: float = 0.0
    w: float = 1.0
    h: float = 1.0

    @classmethod
    def from_rect(cls, rect: "Rect") -> "Rect":
        return cls(rect.x, rect.y, rect.w, rect.h)

    @property
    def area(self) -> float:
        return self.w * self.h

    @property
    def is_degenerate(self) -> bool:
        """True when the rectangle has no interior (zero width or height)."""
        return self.w <= 0 or self.h <= 0

    def aspect_ratio(self) -> float:
        """Return ``max(w/h, h/w)``, or 0.0 for a degenerate rectangle."""
        if self.w == 0 or self.h == 0:
            return 0.0
        return max(self.w / self.h, self.h / self.w)

    def to_dict(self) -> Dict[str, Any]:
        return {"x": self.x, "y": self.y, "w": self.w, "h": self.h}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Rect":
        return cls(
            x=data.get("x", 0.0),
            y=data.get("y", 0.0),
            w=data.get("w", 1.0),
            h=data.get("h", 1.0),
        )
