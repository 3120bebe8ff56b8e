from __future__ import annotations
import logging
from typing import List, Optional

from PIL import Image

from ..context import LayoutContext, ScreenSection
from ..errors import ConfigurationError
from ..models.enums import Appearance, UIFamily
from ..models.geometry import Dimensions, Rectangle
from ..models.layers import LAYER_SCREEN
from ..render.procedural import gradient_wallpaper
from ..render.resources import ResourceProvider
from ..render.surface import RasterSurface, cover_crop
from ..utils.random_utils import get_random_element
from .component import Component

logger = logging.getLogger(__name__)

SCREEN_DIMENSIONS = [
    Dimensions(1366, 768),
    Dimensions(1920, 1080),
    Dimensions(2560, 1080),
    Dimensions(1680, 1050),
    Dimensions(1536, 864),
    Dimensions(1440, 900),
    Dimensions(1280, 720),
]


class Screen(Component):
    """
    Scene root: picks screen size, appearance and wallpaper, allocates the
    raster surface and owns the top-level skins.
    """
    layer = LAYER_SCREEN

    def __init__(self, family: UIFamily, dimensions: Optional[Dimensions] = None,
                 appearance: Optional[Appearance] = None,
                 background: Optional[Image.Image] = None):
        super().__init__()
        self.family = family
        self.dimensions = dimensions
        self.appearance = appearance
        self.background = background
        self.backgrounds: List[Image.Image] = []

    async def load_own_resources(self, resources: ResourceProvider) -> None:
        self.backgrounds = await resources.load_category(f"{self.family.value}/backgrounds")
        if not self.backgrounds:
            logger.info(f"No {self.family.value} wallpapers available, using generated gradients")

    def layout(self, context: LayoutContext) -> ScreenSection:
        rng = context.rng
        dimensions = self.dimensions or get_random_element(rng, SCREEN_DIMENSIONS)
        appearance = self.appearance or get_random_element(rng, list(Appearance))
        background = self.background
        if background is None:
            if self.backgrounds:
                background = get_random_element(rng, self.backgrounds)
            else:
                background = gradient_wallpaper(rng, (int(dimensions.width), int(dimensions.height)))

        section = ScreenSection(self.family, dimensions, appearance, background)
        context.screen = section
        context.surface = RasterSurface(dimensions.width, dimensions.height)
        return section

    def draw(self, surface: RasterSurface, region: ScreenSection, context: LayoutContext) -> None:
        target = (region.dimensions.width, region.dimensions.height)
        source = cover_crop(region.background.size, target)
        surface.blit(region.background, Rectangle(0, 0, *target), source=source)


def build_screen(family, background_only: bool = False, **kwargs) -> Screen:
    """Assemble the default scene tree of a UI family."""
    from ..config import parse_enum
    from .applications.registry import RandomApplication
    from .desktop_files import DesktopFiles
    from .dock import Dock
    from .menubar import MenuBar
    from .notification import Notification
    from .taskbar import Taskbar

    family = parse_enum(UIFamily, family, 'UI family')
    screen = Screen(family, **kwargs)
    if background_only:
        return screen

    screen.add_component(DesktopFiles(family))
    if family == UIFamily.MAC:
        screen.add_component(Dock())
        screen.add_component(MenuBar())
    elif family == UIFamily.WINDOWS:
        screen.add_component(Taskbar())
    else:
        raise ConfigurationError(f"Unknown UI family: {family}")
    screen.add_component(Notification())
    screen.add_component(RandomApplication(family))
    return screen
