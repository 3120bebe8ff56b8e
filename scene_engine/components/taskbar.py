from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

from PIL import Image

from .. import theme
from ..config import parse_enum
from ..context import BarSection, LayoutContext
from ..layout.placement import fit_linear_items, full_length_bar
from ..models import classes
from ..models.enums import Appearance, Orientation
from ..models.geometry import Rectangle
from ..models.layers import LAYER_TASKBAR
from ..render.fonts import get_font
from ..render.procedural import flat_icon
from ..render.resources import ResourceProvider
from ..render.surface import RasterSurface
from ..utils.random_utils import (
    get_random_element, get_random_elements, random_int_between, true_with_probability,
)
from .component import Component

TASKBAR_HEIGHT = 40
TASKBAR_WIDTH = 80
SEARCHBAR_WIDTH = 350
ICON_SIZE = 24
CELL_SIZE = 50
TRAY_RESERVE = 220
MIN_APP_COUNT = 5
MAX_APP_COUNT = 8
ACTIVITY_SIZE = 3

TASKBAR_ORIENTATIONS = [Orientation.BOTTOM, Orientation.TOP, Orientation.LEFT, Orientation.RIGHT]


@dataclass
class TaskbarIcon:
    image: Image.Image
    bounding_box: Rectangle
    activity_box: Rectangle
    is_active: bool


@dataclass
class TaskbarRegion:
    section: BarSection
    start_button: Rectangle
    icons: List[TaskbarIcon]
    searchbar: Optional[Rectangle]
    clock: str


class Taskbar(Component):
    """Windows style taskbar spanning a whole screen edge."""
    layer = LAYER_TASKBAR

    def __init__(self, orientation=None, appearance: Optional[Appearance] = None,
                 app_count: Optional[int] = None):
        super().__init__()
        self.orientation = None
        if orientation is not None:
            self.orientation = parse_enum(Orientation, orientation, 'taskbar orientation')
        self.appearance = appearance
        self.app_count = app_count
        self.app_icons: List[Image.Image] = []

    async def load_own_resources(self, resources: ResourceProvider) -> None:
        self.app_icons = await resources.load_category('windows/appicons')

    def layout(self, context: LayoutContext) -> TaskbarRegion:
        screen = context.require('screen', self.name)
        rng = context.rng

        orientation = self.orientation or get_random_element(rng, TASKBAR_ORIENTATIONS)
        app_count = self.app_count or random_int_between(rng, MIN_APP_COUNT, MAX_APP_COUNT)
        thickness = TASKBAR_WIDTH if orientation.is_vertical else TASKBAR_HEIGHT
        box = full_length_bar(orientation, thickness, screen.dimensions)

        # searchbar only fits on horizontal bars
        show_searchbar = not orientation.is_vertical and true_with_probability(rng, 0.5)
        long_side = box.height if orientation.is_vertical else box.width
        reserved = TRAY_RESERVE + (SEARCHBAR_WIDTH if show_searchbar else 0)
        cell = fit_linear_items(app_count + 1, CELL_SIZE, long_side - reserved)

        def cell_rect(index: int) -> Rectangle:
            if orientation.is_vertical:
                return Rectangle(box.x, box.y + index * cell, box.width, cell)
            return Rectangle(box.x + index * cell, box.y, cell, box.height)

        start_button = cell_rect(0)
        searchbar = None
        if show_searchbar:
            searchbar = Rectangle(box.x + cell, box.y + 4, SEARCHBAR_WIDTH, box.height - 8)
            offset_px = cell + SEARCHBAR_WIDTH
        else:
            offset_px = cell

        if self.app_icons:
            images = get_random_elements(rng, self.app_icons, app_count)
        else:
            images = [flat_icon(rng) for _ in range(app_count)]

        icons = []
        icon_size = min(ICON_SIZE, cell * 0.6)
        for i, image in enumerate(images):
            if orientation.is_vertical:
                slot = cell_rect(i + 1)
            else:
                slot = Rectangle(box.x + offset_px + i * cell, box.y, cell, box.height)
            icon_box = Rectangle(slot.x + (slot.width - icon_size) / 2,
                                 slot.y + (slot.height - icon_size) / 2, icon_size, icon_size)
            if orientation.is_vertical:
                activity = Rectangle(slot.x, slot.y + cell * 0.25, ACTIVITY_SIZE, cell * 0.5)
            else:
                activity = Rectangle(slot.x + cell * 0.25, slot.y2 - ACTIVITY_SIZE, cell * 0.5, ACTIVITY_SIZE)
            icons.append(TaskbarIcon(image, icon_box, activity, true_with_probability(rng, 0.3)))

        clock = f"{rng.randrange(24):02d}:{rng.randrange(60):02d}"
        section = BarSection(orientation, box, self.appearance or screen.appearance, icons)
        context.dock = section
        context.annotate(self.layer, classes.TASKBAR, box)
        return TaskbarRegion(section, start_button, icons, searchbar, clock)

    def draw(self, surface: RasterSurface, region: TaskbarRegion, context: LayoutContext) -> None:
        box = region.section.bounding_box
        surface.blur_region(box, theme.BLUR_SIZE)
        surface.fill_rect(box, theme.WIN_TASKBAR)

        # start button: four-pane logo
        start = region.start_button
        pane = min(start.width, start.height) / 5
        cx, cy = start.center
        for dx in (-pane - 1, 1):
            for dy in (-pane - 1, 1):
                surface.fill_rect(Rectangle(cx + dx, cy + dy, pane, pane), theme.WIN_ACTIVITY)

        if region.searchbar is not None:
            surface.fill_rect(region.searchbar, '#ffffff', radius=2)
            surface.text((region.searchbar.x + 12, region.searchbar.center[1]),
                         "Type here to search", get_font(13), '#606060', anchor='lm')

        for icon in region.icons:
            surface.blit(icon.image, icon.bounding_box)
            if icon.is_active:
                surface.fill_rect(icon.activity_box, theme.WIN_ACTIVITY)

        font = get_font(12)
        if region.section.orientation.is_vertical:
            surface.text((box.center[0], box.y2 - 20), region.clock, font, '#ffffff', anchor='mm')
        else:
            surface.text((box.x2 - 40, box.center[1]), region.clock, font, '#ffffff', anchor='mm')
