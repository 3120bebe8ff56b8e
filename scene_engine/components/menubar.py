from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

from .. import theme
from ..context import LayoutContext, MenuBarSection
from ..models import classes
from ..models.enums import Appearance
from ..models.geometry import Rectangle
from ..models.layers import LAYER_MENUBAR
from ..render.fonts import get_font
from ..render.surface import RasterSurface
from ..texts import APP_NAMES, MENU_NAMES
from ..utils.random_utils import get_random_element, random_int_between, true_with_probability
from .component import Component

MENU_PADDING = 20
STATUS_ITEMS = ['Wi-Fi', 'BT', 'Vol']


@dataclass
class MenuBarRegion:
    section: MenuBarSection
    app_name: str
    menus: List[str]
    status: List[str]
    clock: str


class MenuBar(Component):
    """Mac style menu bar across the top of the screen."""
    layer = LAYER_MENUBAR

    def __init__(self, appearance: Optional[Appearance] = None):
        super().__init__()
        self.appearance = appearance

    def layout(self, context: LayoutContext) -> MenuBarRegion:
        screen = context.require('screen', self.name)
        rng = context.rng

        box = Rectangle(0, 0, screen.dimensions.width, theme.MENUBAR_HEIGHT)
        section = MenuBarSection(box, self.appearance or screen.appearance)
        context.menu_bar = section
        context.annotate(self.layer, classes.MENUBAR, box)

        status = [item for item in STATUS_ITEMS if true_with_probability(rng, 0.75)]
        if true_with_probability(rng, 0.75):
            status.append(f"{random_int_between(rng, 0, 101)}%")
        clock = f"{rng.randrange(24):02d}:{rng.randrange(60):02d}"
        return MenuBarRegion(section, get_random_element(rng, APP_NAMES), list(MENU_NAMES), status, clock)

    def draw(self, surface: RasterSurface, region: MenuBarRegion, context: LayoutContext) -> None:
        box = region.section.bounding_box
        appearance = region.section.appearance
        surface.blur_region(box, theme.BLUR_SIZE)
        surface.fill_rect(box, theme.MAC_MENUBAR[appearance])
        surface.line([(box.x, box.y2), (box.x2, box.y2)], theme.MAC_MENUBAR_BORDER[appearance])

        color = theme.FONT_COLOR[appearance]
        middle = box.height / 2
        size = int(theme.MENUBAR_HEIGHT / 1.5)

        offset = MENU_PADDING
        surface.fill_ellipse(offset + 6, middle, 6, color)
        offset += 12 + MENU_PADDING

        bold = get_font(size, bold=True)
        surface.text((offset, middle), region.app_name, bold, color, anchor='lm')
        offset += surface.measure_text(region.app_name, bold)[0] + MENU_PADDING

        regular = get_font(size)
        for menu in region.menus:
            surface.text((offset, middle), menu, regular, color, anchor='lm')
            offset += surface.measure_text(menu, regular)[0] + MENU_PADDING

        right = box.x2 - MENU_PADDING
        for item in [region.clock] + region.status:
            surface.text((right, middle), item, regular, color, anchor='rm')
            right -= surface.measure_text(item, regular)[0] + MENU_PADDING
