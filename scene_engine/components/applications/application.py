from __future__ import annotations
from dataclasses import dataclass
from typing import Any, List, Optional

from ...context import ApplicationSection, LayoutContext
from ...models import classes
from ...models.enums import Appearance, Orientation, UIFamily
from ...models.geometry import Dimensions, Point, Rectangle
from ...models.layers import LAYER_APP
from ...layout.placement import DockedBar, choose_window_rect
from ...render.surface import RasterSurface
from ...utils.random_utils import true_with_probability
from ..component import Component
from .chrome import CHROMES, WindowChrome

ACTIVE_PROBABILITY = 0.5
FULLSCREEN_PROBABILITY = 0.5
# one in HOVER_RANGE windows shows a hovered control per button
HOVER_RANGE = 10


@dataclass
class ApplicationRegion:
    section: ApplicationSection
    chrome: WindowChrome
    hovered: int = -1
    content: Any = None


class Application(Component):
    """
    A single application window.

    Lays the window out around the docked bars of its family, annotates it and
    hands the window rectangle to ``layout_content`` so subclasses can place
    their own sub-regions.
    """
    layer = LAYER_APP
    variant = 'generic'
    # extra class annotated on the full window box, e.g. file explorers
    label: Optional[str] = None

    def __init__(self, family: UIFamily, dimensions: Optional[Dimensions] = None,
                 position: Optional[Point] = None, appearance: Optional[Appearance] = None,
                 fullscreen_probability: float = FULLSCREEN_PROBABILITY):
        super().__init__()
        self.family = family
        self.dimensions = dimensions
        self.position = position
        self.appearance = appearance
        self.fullscreen_probability = fullscreen_probability

    @property
    def chrome(self) -> WindowChrome:
        return CHROMES[self.family]

    @property
    def is_available(self) -> bool:
        return True

    def _docked_bars(self, context: LayoutContext) -> List[DockedBar]:
        dock = context.require('dock', self.name)
        bars = [DockedBar(dock.orientation, dock.bounding_box)]
        if self.family == UIFamily.MAC:
            menu_bar = context.require('menu_bar', self.name)
            bars.append(DockedBar(Orientation.TOP, menu_bar.bounding_box))
        return bars

    def _window_rect(self, context: LayoutContext):
        screen = context.require('screen', self.name)
        bars = self._docked_bars(context)
        min_y = context.menu_bar.bounding_box.y2 if self.family == UIFamily.MAC else None
        max_size = None
        min_size = (100, 100)
        if self.dimensions is not None:
            min_size = max_size = (self.dimensions.width, self.dimensions.height)
        rect, is_fullscreen = choose_window_rect(context.rng, screen.dimensions, bars,
                                                 fullscreen_probability=self.fullscreen_probability,
                                                 min_size=min_size, max_size=max_size, min_y=min_y)
        if self.position is not None and not is_fullscreen:
            rect = Rectangle(self.position.x, self.position.y, rect.width, rect.height)
        return rect, is_fullscreen

    def layout(self, context: LayoutContext) -> ApplicationRegion:
        screen = context.require('screen', self.name)
        rng = context.rng

        rect, is_fullscreen = self._window_rect(context)
        section = ApplicationSection(rect, self.appearance or screen.appearance,
                                     true_with_probability(rng, ACTIVE_PROBABILITY),
                                     is_fullscreen, self.variant)
        context.application = section
        context.annotate(self.layer, classes.APPLICATION, rect)
        if self.label:
            context.annotate(self.layer, self.label, rect)

        hovered = rng.randrange(HOVER_RANGE)
        content = self.layout_content(context, section)
        return ApplicationRegion(section, self.chrome, hovered, content)

    def layout_content(self, context: LayoutContext, section: ApplicationSection) -> Any:
        """Place application specific sub-regions inside ``section.bounding_box``."""
        return None

    def draw(self, surface: RasterSurface, region: ApplicationRegion, context: LayoutContext) -> None:
        section = region.section
        region.chrome.draw_frame(surface, section.bounding_box, section.appearance,
                                 section.is_active, hovered=region.hovered)
        self.draw_content(surface, region, context)

    def draw_content(self, surface: RasterSurface, region: ApplicationRegion, context: LayoutContext) -> None:
        pass
