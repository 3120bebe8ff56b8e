from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

from .. import theme
from ..context import LayoutContext
from ..models import classes
from ..models.enums import Appearance, Orientation, UIFamily
from ..models.geometry import Rectangle
from ..models.layers import LAYER_NOTIFICATION
from ..render.fonts import get_font
from ..render.procedural import flat_icon
from ..render.surface import RasterSurface
from ..texts import APP_NAMES, BUTTON_TEXTS, LOREM_IPSUM
from ..utils.random_utils import get_random_element, get_random_elements, true_with_probability
from .component import Component

SHOW_PROBABILITY = 0.15
WIDTH = 400
HEIGHT = 100
MARGIN = 20
BORDER_RADIUS = 12
ICON_SIZE = 40
BUTTON_WIDTH = 90


@dataclass
class NotificationSection:
    bounding_box: Rectangle
    appearance: Appearance
    family: UIFamily


@dataclass
class NotificationRegion:
    section: NotificationSection
    title: str
    body: str
    buttons: List[str]
    icon: object


class Notification(Component):
    """A toast in the corner of the screen, shown for a fraction of the scenes."""
    layer = LAYER_NOTIFICATION

    def __init__(self, probability: float = SHOW_PROBABILITY, appearance: Optional[Appearance] = None):
        super().__init__()
        self.probability = probability
        self.appearance = appearance

    def _mac_box(self, context: LayoutContext) -> Rectangle:
        screen = context.require('screen', self.name)
        # the menu bar is optional for a bare screen
        top = context.menu_bar.bounding_box.y2 if context.menu_bar is not None else 0
        x = screen.dimensions.width - context.rng.random() * (WIDTH + MARGIN)
        return Rectangle(x, top + MARGIN, WIDTH, HEIGHT)

    def _windows_box(self, context: LayoutContext) -> Rectangle:
        screen = context.require('screen', self.name)
        width, height = screen.dimensions.width, screen.dimensions.height
        bottom, right = height, width
        taskbar = context.dock
        if taskbar is not None:
            if taskbar.orientation == Orientation.BOTTOM:
                bottom = taskbar.bounding_box.y
            elif taskbar.orientation == Orientation.RIGHT:
                right = taskbar.bounding_box.x
        return Rectangle(right - WIDTH - MARGIN, bottom - HEIGHT - MARGIN, WIDTH, HEIGHT)

    def layout(self, context: LayoutContext) -> Optional[NotificationRegion]:
        screen = context.require('screen', self.name)
        rng = context.rng
        if not true_with_probability(rng, self.probability):
            return None

        if screen.family == UIFamily.MAC:
            box = self._mac_box(context)
        else:
            box = self._windows_box(context)
        section = NotificationSection(box, self.appearance or screen.appearance, screen.family)
        context.notification = section
        context.annotate(self.layer, classes.NOTIFICATION, box)

        buttons = get_random_elements(rng, BUTTON_TEXTS, rng.randrange(3))
        return NotificationRegion(section, get_random_element(rng, APP_NAMES),
                                  get_random_element(rng, LOREM_IPSUM), buttons, flat_icon(rng, ICON_SIZE))

    def draw(self, surface: RasterSurface, region: NotificationRegion, context: LayoutContext) -> None:
        section = region.section
        box = section.bounding_box
        appearance = section.appearance
        color = theme.FONT_COLOR[appearance]

        surface.shadow(box, width=12)
        surface.blur_region(box, theme.BLUR_SIZE)
        if section.family == UIFamily.MAC:
            surface.fill_rect(box, theme.MAC_DOCK[appearance], radius=BORDER_RADIUS)
            surface.stroke_rect(box, theme.MAC_DOCK_BORDER[appearance], radius=BORDER_RADIUS)
        else:
            surface.fill_rect(box, theme.WIN_NOTIFICATION)
            color = theme.FONT_COLOR[Appearance.DARK]

        icon_box = Rectangle(box.x + 12, box.y + 12, ICON_SIZE, ICON_SIZE)
        surface.blit(region.icon, icon_box)
        text_x = icon_box.x2 + 12
        surface.text((text_x, box.y + 14), region.title, get_font(14, bold=True), color)

        # crude wrap to the box width
        body_font = get_font(12)
        body = region.body
        while body and surface.measure_text(body, body_font)[0] > box.x2 - text_x - 12:
            body = body[:-4] + '...' if len(body) > 4 else ''
        surface.text((text_x, box.y + 36), body, body_font, color)

        right = box.x2 - 12
        for text in region.buttons:
            button = Rectangle(right - BUTTON_WIDTH, box.y2 - 30, BUTTON_WIDTH, 22)
            surface.fill_rect(button, theme.WIN_BUTTON_HOVER[appearance], radius=5)
            surface.text(button.center, text, body_font, color, anchor='mm')
            right = button.x - 8
