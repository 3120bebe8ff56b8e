"""
Randomized placement policies shared by the skins.

These are pure functions of an injected ``random.Random`` and the geometry
they are given, so a fixed seed always yields the same layout.
"""
import random
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from ..errors import ConfigurationError
from ..models.enums import Orientation
from ..models.geometry import Dimensions, Rectangle
from ..utils.random_utils import random_between, true_with_probability

MAX_OFFSCREEN_FRACTION = 0.25
MIN_WINDOW_SIZE = 100


@dataclass(frozen=True)
class DockedBar:
    """A bar glued to one screen edge that reserves space for maximized windows."""
    orientation: Orientation
    bounding_box: Rectangle


@dataclass(frozen=True)
class WorkArea:
    """Screen area left over after every docked bar took its share."""
    x: float
    y: float
    width: float
    height: float

    def as_rectangle(self) -> Rectangle:
        return Rectangle(self.x, self.y, self.width, self.height)


def reserve_docked_space(screen: Dimensions, bars: Iterable[DockedBar]) -> WorkArea:
    """Left/right bars reserve width, top/bottom bars reserve height."""
    left = top = 0.0
    right = float(screen.width)
    bottom = float(screen.height)
    for bar in bars:
        box = bar.bounding_box
        if bar.orientation == Orientation.LEFT:
            left = max(left, box.width)
        elif bar.orientation == Orientation.RIGHT:
            right = min(right, screen.width - box.width)
        elif bar.orientation == Orientation.TOP:
            top = max(top, box.height)
        elif bar.orientation == Orientation.BOTTOM:
            bottom = min(bottom, screen.height - box.height)
        else:
            raise ConfigurationError(f"Unknown docking orientation: {bar.orientation}")
    return WorkArea(left, top, right - left, bottom - top)


def choose_window_rect(rng: random.Random,
                       screen: Dimensions,
                       bars: Iterable[DockedBar] = (),
                       fullscreen_probability: float = 0.5,
                       min_size: Tuple[float, float] = (MIN_WINDOW_SIZE, MIN_WINDOW_SIZE),
                       max_size: Optional[Tuple[float, float]] = None,
                       min_y: Optional[float] = None,
                       offscreen_fraction: float = MAX_OFFSCREEN_FRACTION) -> Tuple[Rectangle, bool]:
    """
    Pick an application window rectangle.

    Full-screen windows fill the work area. Floating windows get a uniform
    size in [min_size, max_size] and a uniform position that lets up to
    ``offscreen_fraction`` of the window hang off every canvas edge. ``min_y``
    pins the top edge below a menu bar instead.

    Returns (rectangle, is_fullscreen).
    """
    bars = list(bars)
    if true_with_probability(rng, fullscreen_probability):
        return reserve_docked_space(screen, bars).as_rectangle(), True

    max_w, max_h = max_size if max_size else (screen.width, screen.height)
    width = random_between(rng, min_size[0], max_w)
    height = random_between(rng, min_size[1], max_h)

    low_x = -offscreen_fraction * width
    low_y = -offscreen_fraction * height if min_y is None else min_y
    high_x = screen.width - offscreen_fraction * width
    high_y = screen.height - offscreen_fraction * height
    x = random_between(rng, low_x, high_x)
    y = random_between(rng, low_y, max(low_y, high_y))
    return Rectangle(x, y, width, height), False


def fit_linear_items(item_count: int, item_size: float, available: float) -> float:
    """Shrink ``item_size`` so ``item_count`` items fit into ``available`` (single pass)."""
    if item_count <= 0:
        return item_size
    if item_count * item_size > available:
        return max(0.0, available / item_count)
    return item_size


def size_linear_bar(orientation: Orientation, item_count: int, item_size: float,
                    screen: Dimensions, margin: float) -> Tuple[Rectangle, float]:
    """
    Size a dock-like bar whose long axis grows with its item count.

    The long axis is ``item_count * item_size`` capped at the screen extent on
    that axis minus ``margin``; when capped the item size shrinks so the items
    fill the cap exactly. The bar is centered on its edge.

    Returns (bounding box, final item size). The short side equals the item size.
    """
    if orientation.is_vertical:
        available = screen.height - margin
    elif orientation in (Orientation.TOP, Orientation.BOTTOM):
        available = screen.width - margin
    else:
        raise ConfigurationError(f"Unknown docking orientation: {orientation}")

    size = fit_linear_items(item_count, item_size, available)
    long_side = size * item_count
    short_side = size

    if orientation == Orientation.LEFT:
        box = Rectangle(0, screen.height / 2 - long_side / 2, short_side, long_side)
    elif orientation == Orientation.RIGHT:
        box = Rectangle(screen.width - short_side, screen.height / 2 - long_side / 2,
                        short_side, long_side)
    elif orientation == Orientation.BOTTOM:
        box = Rectangle(screen.width / 2 - long_side / 2, screen.height - short_side,
                        long_side, short_side)
    else:
        box = Rectangle(screen.width / 2 - long_side / 2, 0, long_side, short_side)
    return box, size


def full_length_bar(orientation: Orientation, thickness: float, screen: Dimensions) -> Rectangle:
    """Bar spanning the whole edge it is docked to (taskbar style)."""
    if orientation == Orientation.LEFT:
        return Rectangle(0, 0, thickness, screen.height)
    if orientation == Orientation.RIGHT:
        return Rectangle(screen.width - thickness, 0, thickness, screen.height)
    if orientation == Orientation.TOP:
        return Rectangle(0, 0, screen.width, thickness)
    if orientation == Orientation.BOTTOM:
        return Rectangle(0, screen.height - thickness, screen.width, thickness)
    raise ConfigurationError(f"Unknown docking orientation: {orientation}")
