from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

from PIL import Image

from .. import theme
from ..config import parse_enum
from ..context import BarSection, LayoutContext
from ..errors import ConfigurationError
from ..layout.placement import size_linear_bar
from ..models import classes
from ..models.enums import Appearance, Orientation
from ..models.geometry import Point, Rectangle
from ..models.layers import LAYER_DOCK
from ..render.procedural import flat_icon
from ..render.resources import ResourceProvider
from ..render.surface import RasterSurface
from ..utils.random_utils import (
    get_random_element, get_random_elements, random_between,
    random_int_between, true_with_probability,
)
from .component import Component

MIN_MARGIN_X = 150
MIN_MARGIN_Y = 60
MIN_APP_COUNT = 5
MAX_APP_COUNT = 20
MIN_SIZE = 0.25
MAX_SIZE = 1.0
MAX_ICON_SIZE = 128 + 5 + 10
ICON_MARGIN = 10
BORDER_RADIUS = 6
ACTIVITY_PROBABILITY = 0.1

DOCK_ORIENTATIONS = [Orientation.LEFT, Orientation.RIGHT, Orientation.BOTTOM]


@dataclass
class DockIcon:
    image: Image.Image
    bounding_box: Rectangle
    activity_location: Point
    is_active: bool


@dataclass
class DockRegion:
    section: BarSection
    icons: List[DockIcon]


class Dock(Component):
    """Mac style dock: a centered bar whose length grows with its app count."""
    layer = LAYER_DOCK

    def __init__(self, orientation=None, appearance: Optional[Appearance] = None,
                 size: Optional[float] = None, app_count: Optional[int] = None):
        super().__init__()
        self.orientation = None
        if orientation is not None:
            self.orientation = parse_enum(Orientation, orientation, 'dock orientation')
            if self.orientation not in DOCK_ORIENTATIONS:
                raise ConfigurationError(f"Invalid orientation for dock: {self.orientation.value}")
        self.appearance = appearance
        self.size = size if size is None or MIN_SIZE <= size <= MAX_SIZE else None
        self.app_count = app_count if app_count is None or MIN_APP_COUNT <= app_count <= MAX_APP_COUNT else None
        self.app_icons: List[Image.Image] = []

    async def load_own_resources(self, resources: ResourceProvider) -> None:
        self.app_icons = await resources.load_category('mac/appicons')

    def _icon_cells(self, orientation: Orientation, app_count: int, box: Rectangle):
        long_side = box.height if orientation.is_vertical else box.width
        short_side = box.width if orientation.is_vertical else box.height
        full_size = long_side / app_count
        icon_size = full_size - 2 * ICON_MARGIN
        if icon_size <= 0:
            return []

        cells = []
        for i in range(app_count):
            along = i * full_size + ICON_MARGIN
            if orientation == Orientation.LEFT:
                icon = Point(box.x + short_side - icon_size - ICON_MARGIN / 2, box.y + along)
                activity = Point(box.x + ICON_MARGIN / 2 + 2, icon.y + icon_size / 2)
            elif orientation == Orientation.RIGHT:
                icon = Point(box.x + ICON_MARGIN / 2, box.y + along)
                activity = Point(box.x + short_side - ICON_MARGIN / 2 - 2, icon.y + icon_size / 2)
            else:
                icon = Point(box.x + along, box.y + ICON_MARGIN / 2)
                activity = Point(icon.x + icon_size / 2, box.y + short_side - ICON_MARGIN / 2 - 2)
            cells.append((icon, icon_size, activity))
        return cells

    def layout(self, context: LayoutContext) -> DockRegion:
        screen = context.require('screen', self.name)
        rng = context.rng

        orientation = self.orientation or get_random_element(rng, DOCK_ORIENTATIONS)
        size = self.size if self.size is not None else random_between(rng, MIN_SIZE, MAX_SIZE)
        app_count = self.app_count or random_int_between(rng, MIN_APP_COUNT, MAX_APP_COUNT)
        margin = MIN_MARGIN_Y if orientation.is_vertical else MIN_MARGIN_X
        box, _ = size_linear_bar(orientation, app_count, MAX_ICON_SIZE * size, screen.dimensions, margin)

        cells = self._icon_cells(orientation, app_count, box)
        if self.app_icons:
            images = get_random_elements(rng, self.app_icons, len(cells))
        else:
            images = [flat_icon(rng) for _ in cells]

        icons = []
        for (location, target, activity), image in zip(cells, images):
            # fit inside the square cell, keep aspect ratio
            scale = max(image.width / target, image.height / target)
            width, height = image.width / scale, image.height / scale
            icon_box = Rectangle(location.x + (target - width) / 2,
                                 location.y + (target - height) / 2, width, height)
            icons.append(DockIcon(image, icon_box, activity,
                                  true_with_probability(rng, ACTIVITY_PROBABILITY)))

        section = BarSection(orientation, box, self.appearance or screen.appearance, icons)
        context.dock = section
        context.annotate(self.layer, classes.DOCK, box)
        return DockRegion(section, icons)

    def draw(self, surface: RasterSurface, region: DockRegion, context: LayoutContext) -> None:
        section = region.section
        box = section.bounding_box
        appearance = section.appearance
        # flat side against the screen edge
        corners = {
            Orientation.LEFT: (False, True, True, False),
            Orientation.RIGHT: (True, False, False, True),
            Orientation.BOTTOM: (True, True, False, False),
        }[section.orientation]

        surface.blur_region(box, theme.BLUR_SIZE)
        surface.fill_rect(box, theme.MAC_DOCK[appearance], radius=BORDER_RADIUS, corners=corners)
        surface.stroke_rect(box, theme.MAC_DOCK_BORDER[appearance], radius=BORDER_RADIUS)

        for icon in region.icons:
            surface.blit(icon.image, icon.bounding_box)
            if icon.is_active:
                surface.fill_ellipse(icon.activity_location.x, icon.activity_location.y, 3,
                                     theme.MAC_ACTIVITY[appearance])
