"""Application variants and the random picker the scene root owns."""
from __future__ import annotations
import enum
import logging
from typing import Dict, List, Optional, Sequence

from ...context import LayoutContext
from ...errors import ConfigurationError, ResourceError
from ...models import classes
from ...models.enums import UIFamily
from ...models.jobs import DrawOperation
from ...render.resources import ResourceProvider
from ...utils.random_utils import get_random_element
from ..component import Component, settle
from .application import Application
from .browser import Browser
from .notes import Notes
from .screenshot import ScreenshotApplication

logger = logging.getLogger(__name__)


class ApplicationVariant(enum.Enum):
    BROWSER = 'browser'
    NOTES = 'notes'
    WORD = 'word'
    EXCEL = 'excel'
    POWERPOINT = 'powerpoint'
    FINDER = 'finder'
    EXPLORER = 'explorer'


FAMILY_VARIANTS: Dict[UIFamily, List[ApplicationVariant]] = {
    UIFamily.MAC: [
        ApplicationVariant.BROWSER, ApplicationVariant.NOTES, ApplicationVariant.WORD,
        ApplicationVariant.EXCEL, ApplicationVariant.POWERPOINT, ApplicationVariant.FINDER,
    ],
    UIFamily.WINDOWS: [
        ApplicationVariant.BROWSER, ApplicationVariant.WORD, ApplicationVariant.EXCEL,
        ApplicationVariant.POWERPOINT, ApplicationVariant.EXPLORER,
    ],
}


def create_application(variant: ApplicationVariant, family: UIFamily, **kwargs) -> Application:
    if variant == ApplicationVariant.BROWSER:
        return Browser(family, **kwargs)
    if variant == ApplicationVariant.NOTES:
        return Notes(family, **kwargs)
    if variant == ApplicationVariant.FINDER:
        return ScreenshotApplication(family, 'finder', label=classes.FILE_EXPLORER, **kwargs)
    if variant == ApplicationVariant.EXPLORER:
        return ScreenshotApplication(family, 'explorer', label=classes.FILE_EXPLORER, **kwargs)
    if variant in (ApplicationVariant.WORD, ApplicationVariant.EXCEL, ApplicationVariant.POWERPOINT):
        return ScreenshotApplication(family, variant.value, **kwargs)
    raise ConfigurationError(f"Unknown application variant: {variant}")


class RandomApplication(Component):
    """
    Picks one application per scene.

    The candidates are held privately, not as children, so only the picked
    one takes part in the layout pass. Variants whose assets did not load are
    left out of the pool.
    """

    def __init__(self, family: UIFamily, variants: Optional[Sequence[ApplicationVariant]] = None, **kwargs):
        super().__init__()
        self.family = family
        variants = FAMILY_VARIANTS[family] if variants is None else variants
        self.applications = [create_application(v, family, **kwargs) for v in variants]

    async def load_resources(self, resources: ResourceProvider) -> None:
        await settle([app.load_resources(resources) for app in self.applications], owner=self.name)
        await super().load_resources(resources)
        available = [app.variant for app in self.available]
        logger.info(f"{self.family.value} applications available: {', '.join(available) or 'none'}")

    @property
    def available(self) -> List[Application]:
        return [app for app in self.applications if app.is_available]

    def ensure_available(self) -> None:
        if not self.available:
            raise ResourceError(f"No {self.family.value} application variant has its resources")

    def collect(self, context: LayoutContext) -> List[DrawOperation]:
        app = get_random_element(context.rng, self.available)
        operations = app.collect(context)
        for child in self._children:
            operations.extend(child.collect(context))
        return operations
