from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Dimensions:
    width: float
    height: float


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle, origin top-left, y grows downward.

    Width and height may come out negative from layout arithmetic; such
    rectangles are degenerate and must be discarded before use.
    """
    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_edges(cls, x1: float, y1: float, x2: float, y2: float) -> 'Rectangle':
        return cls(x1, y1, x2 - x1, y2 - y1)

    @property
    def x2(self) -> float:
        return self.x + self.width

    @property
    def y2(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    @property
    def area(self) -> float:
        if self.is_degenerate:
            return 0.0
        return self.width * self.height

    @property
    def is_degenerate(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def intersects(self, other: 'Rectangle') -> bool:
        """Open-interval overlap: rectangles that only touch do not intersect."""
        return not (self.x >= other.x2 or self.x2 <= other.x or
                    self.y >= other.y2 or self.y2 <= other.y)

    def contains(self, other: 'Rectangle') -> bool:
        return (self.x <= other.x and self.y <= other.y and
                self.x2 >= other.x2 and self.y2 >= other.y2)

    def intersection(self, other: 'Rectangle') -> Optional['Rectangle']:
        ix1 = max(self.x, other.x)
        iy1 = max(self.y, other.y)
        ix2 = min(self.x2, other.x2)
        iy2 = min(self.y2, other.y2)
        if ix2 <= ix1 or iy2 <= iy1:
            return None
        return Rectangle.from_edges(ix1, iy1, ix2, iy2)

    def clip(self, width: float, height: float) -> 'Rectangle':
        """Clamp to the canvas [0, width] x [0, height]. May return a degenerate rectangle."""
        x_min = min(max(self.x, 0), width)
        y_min = min(max(self.y, 0), height)
        x_max = max(min(width, self.x2), 0)
        y_max = max(min(height, self.y2), 0)
        return Rectangle.from_edges(x_min, y_min, x_max, y_max)

    def translate(self, dx: float = 0, dy: float = 0) -> 'Rectangle':
        return Rectangle(self.x + dx, self.y + dy, self.width, self.height)

    def inset(self, amount: float) -> 'Rectangle':
        return Rectangle(self.x + amount, self.y + amount,
                         self.width - 2 * amount, self.height - 2 * amount)

    def as_box(self) -> Tuple[float, float, float, float]:
        """(x1, y1, x2, y2) as expected by PIL drawing calls."""
        return (self.x, self.y, self.x2, self.y2)
