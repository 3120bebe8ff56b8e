from __future__ import annotations
import random
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, TYPE_CHECKING

from .errors import ContextSectionMissing
from .models.annotation import Annotation
from .models.enums import Appearance, Orientation, UIFamily
from .models.geometry import Dimensions, Rectangle

if TYPE_CHECKING:
    from PIL import Image
    from .render.surface import RasterSurface

_SECTIONS = ('surface', 'screen', 'dock', 'menu_bar', 'desktop_files',
             'notification', 'application')


@dataclass
class ScreenSection:
    family: UIFamily
    dimensions: Dimensions
    appearance: Appearance
    background: Optional[Image.Image] = None


@dataclass
class BarSection:
    """Geometry of a dock or taskbar; the application reads it to avoid it."""
    orientation: Orientation
    bounding_box: Rectangle
    appearance: Appearance
    items: list = field(default_factory=list)


@dataclass
class MenuBarSection:
    bounding_box: Rectangle
    appearance: Appearance


@dataclass
class ApplicationSection:
    bounding_box: Rectangle
    appearance: Appearance
    is_active: bool
    is_fullscreen: bool
    variant: str = ""


@dataclass
class LayoutContext:
    """
    Per-image blackboard threaded top-down through the layout pass.

    Each component type owns one optional section. A node writes its section
    before recursing into children, and may only read sections written by
    itself or an ancestor; reading anything else raises ContextSectionMissing.
    """
    rng: random.Random
    annotations: List[Annotation] = field(default_factory=list)
    surface: Optional[RasterSurface] = None
    screen: Optional[ScreenSection] = None
    dock: Optional[BarSection] = None
    menu_bar: Optional[MenuBarSection] = None
    desktop_files: Optional[Any] = None
    notification: Optional[Any] = None
    application: Optional[ApplicationSection] = None
    extras: Dict[str, Any] = field(default_factory=dict)

    def require(self, section: str, requester: str = None) -> Any:
        """Return a written section or fail the image: missing ancestor state is a contract violation."""
        if section in _SECTIONS:
            value = getattr(self, section)
        else:
            value = self.extras.get(section)
        if value is None:
            raise ContextSectionMissing(section, requester)
        return value

    def require_surface(self, requester: str = None) -> RasterSurface:
        return self.require('surface', requester)

    def annotate(self, layer: int, class_name: str, rect: Rectangle) -> None:
        self.annotations.append(Annotation(layer, class_name, rect))

    @property
    def width(self) -> int:
        return int(self.require('screen').dimensions.width)

    @property
    def height(self) -> int:
        return int(self.require('screen').dimensions.height)
