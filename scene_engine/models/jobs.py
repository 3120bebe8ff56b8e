from __future__ import annotations
from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from ..components.component import Component
    from ..context import LayoutContext
    from ..render.surface import RasterSurface


@dataclass(frozen=True)
class DrawOperation:
    """Deferred paint call: which component draws which laid-out region, on which layer."""
    layer: int
    component: Component
    region: Any = None

    def paint(self, surface: RasterSurface, context: LayoutContext) -> None:
        self.component.draw(surface, self.region, context)
