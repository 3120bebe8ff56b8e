from __future__ import annotations
import logging
import random
from typing import List, Optional

from PIL import Image

from ...context import ApplicationSection, LayoutContext
from ...models.geometry import Rectangle
from ...render.resources import ResourceProvider
from ...render.surface import RasterSurface
from ...utils.random_utils import get_random_element
from .application import Application, ApplicationRegion

logger = logging.getLogger(__name__)

# screenshots within this aspect ratio distance of the window are all candidates
MAX_ASPECT_DELTA = 0.75


class ScreenshotContent:
    """Pool of application screenshots stretched into a window."""

    def __init__(self, folder: str):
        self.folder = folder
        self.screenshots: List[Image.Image] = []

    async def load(self, resources: ResourceProvider) -> None:
        self.screenshots = await resources.load_category(f"applications/{self.folder}")
        if not self.screenshots:
            logger.info(f"No screenshots for {self.folder}, application disabled")

    def pick(self, rng: random.Random, box: Rectangle) -> Optional[Image.Image]:
        """Random screenshot of similar aspect ratio, or the closest one when none is similar."""
        if not self.screenshots or box.height <= 0:
            return None
        target = box.width / box.height
        best, best_delta = None, float('inf')
        candidates = []
        for screenshot in self.screenshots:
            delta = abs(target - screenshot.width / screenshot.height)
            if delta < MAX_ASPECT_DELTA:
                candidates.append(screenshot)
            if delta < best_delta:
                best, best_delta = screenshot, delta
        return get_random_element(rng, candidates) if candidates else best


class ScreenshotApplication(Application):
    """Window whose whole area, handle bar included, is a real screenshot."""

    def __init__(self, family, folder: str, label: Optional[str] = None, variant: Optional[str] = None, **kwargs):
        super().__init__(family, **kwargs)
        self.content = ScreenshotContent(folder)
        self.label = label
        self.variant = variant or folder

    @property
    def is_available(self) -> bool:
        return bool(self.content.screenshots)

    async def load_own_resources(self, resources: ResourceProvider) -> None:
        await self.content.load(resources)

    def layout_content(self, context: LayoutContext, section: ApplicationSection) -> Optional[Image.Image]:
        return self.content.pick(context.rng, section.bounding_box)

    def draw(self, surface: RasterSurface, region: ApplicationRegion, context: LayoutContext) -> None:
        section = region.section
        region.chrome.draw_frame(surface, section.bounding_box, section.appearance,
                                 section.is_active, with_handle=False)
        if region.content is not None:
            surface.blit(region.content, section.bounding_box)
