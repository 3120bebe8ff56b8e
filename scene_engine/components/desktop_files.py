from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

from PIL import Image

from .. import theme
from ..context import LayoutContext
from ..models import classes
from ..models.enums import UIFamily
from ..models.geometry import Rectangle
from ..models.layers import LAYER_FILE
from ..render.fonts import get_font
from ..render.procedural import flat_icon
from ..render.resources import ResourceProvider
from ..render.surface import RasterSurface, scaled_width, union
from ..texts import FILE_EXTENSIONS, FILE_NAMES
from ..utils.random_utils import (
    get_random_element, random_between, random_int_between, true_with_probability,
)
from .component import Component

MIN_FILE_COUNT = 5
MAX_FILE_COUNT = 30
FOLDER_PROBABILITY = 0.5
ICON_HEIGHT = 60
TEXT_SIZE = 12
TEXT_MARGIN = 4
HIGHLIGHT_PADDING = 2

# highlight states
NOT_HIGHLIGHTED = 0
NAME_HIGHLIGHTED = 1
FULLY_HIGHLIGHTED = 2


@dataclass
class DesktopFile:
    name: str
    image: Image.Image
    icon_box: Rectangle
    text_box: Rectangle
    highlight: int

    @property
    def bounding_box(self) -> Rectangle:
        return union([self.icon_box, self.text_box])


class DesktopFiles(Component):
    """Scattered file and folder icons on the wallpaper."""
    layer = LAYER_FILE

    def __init__(self, family: UIFamily, file_count: Optional[int] = None):
        super().__init__()
        self.family = family
        self.file_count = file_count
        self.file_icons: List[Image.Image] = []
        self.folder_icons: List[Image.Image] = []

    async def load_own_resources(self, resources: ResourceProvider) -> None:
        base = f"{self.family.value}/fileicons"
        self.file_icons = await resources.load_category(f"{base}/files")
        self.folder_icons = await resources.load_category(f"{base}/folders")

    def _pick_icon(self, rng, is_folder: bool) -> Image.Image:
        pool = self.folder_icons if is_folder else self.file_icons
        if pool:
            return get_random_element(rng, pool)
        return flat_icon(rng)

    def layout(self, context: LayoutContext) -> List[DesktopFile]:
        screen = context.require('screen', self.name)
        rng = context.rng
        width, height = screen.dimensions.width, screen.dimensions.height
        font = get_font(TEXT_SIZE)

        count = self.file_count or random_int_between(rng, MIN_FILE_COUNT, MAX_FILE_COUNT + 1)
        files = []
        for _ in range(count):
            is_folder = true_with_probability(rng, FOLDER_PROBABILITY)
            name = get_random_element(rng, FILE_NAMES)
            if not is_folder:
                name += get_random_element(rng, FILE_EXTENSIONS)
            image = self._pick_icon(rng, is_folder)

            icon_width = scaled_width(image, ICON_HEIGHT)
            text_width, text_height = font.getbbox(name)[2:]
            item_width = max(icon_width, text_width)
            x = random_between(rng, 0, max(0, width - item_width))
            y = random_between(rng, 0, max(0, height - ICON_HEIGHT - text_height - TEXT_MARGIN))

            icon_box = Rectangle(x + (item_width - icon_width) / 2, y, icon_width, ICON_HEIGHT)
            text_box = Rectangle(x + (item_width - text_width) / 2, icon_box.y2 + TEXT_MARGIN,
                                 text_width, text_height)
            highlight = get_random_element(rng, [NOT_HIGHLIGHTED, NAME_HIGHLIGHTED, FULLY_HIGHLIGHTED])
            item = DesktopFile(name, image, icon_box, text_box, highlight)
            context.annotate(self.layer, classes.FILE, item.bounding_box)
            files.append(item)

        context.desktop_files = files
        return files

    def draw(self, surface: RasterSurface, region: List[DesktopFile], context: LayoutContext) -> None:
        appearance = context.require('screen', self.name).appearance
        font = get_font(TEXT_SIZE)
        for item in region:
            if item.highlight == FULLY_HIGHLIGHTED:
                surface.fill_rect(item.icon_box.inset(-HIGHLIGHT_PADDING), '#ffffff40', radius=4)
            if item.highlight != NOT_HIGHLIGHTED:
                surface.fill_rect(item.text_box.inset(-HIGHLIGHT_PADDING), theme.HIGHLIGHT_COLOR[appearance], radius=3)
            surface.blit(item.image, item.icon_box)
            surface.text((item.text_box.x, item.text_box.y), item.name, font, '#ffffff', anchor='lt')
