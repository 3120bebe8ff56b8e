"""
Scene generation in two explicit passes.

The layout pass walks the component tree once, filling a fresh
``LayoutContext`` and returning a flat list of draw operations. The render
pass sorts those operations by layer (stable, so equal layers keep traversal
order) and paints them onto the surface the scene root allocated.
"""
from __future__ import annotations
import asyncio
import logging
import random
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from PIL import Image

from .annotation.occlusion import clean_annotations
from .components.component import Component
from .context import LayoutContext
from .models.annotation import Annotation
from .models.jobs import DrawOperation
from .render.resources import ResourceProvider
from .render.surface import RasterSurface

logger = logging.getLogger(__name__)


@dataclass
class GeneratedScene:
    """One rendered image with its candidate and resolved annotations."""
    image: Image.Image
    width: int
    height: int
    candidates: List[Annotation] = field(default_factory=list)
    annotations: List[Annotation] = field(default_factory=list)


class LayoutPass:
    def run(self, root: Component, context: LayoutContext) -> List[DrawOperation]:
        operations = root.collect(context)
        logger.debug(f"Layout produced {len(operations)} draw operations "
                     f"and {len(context.annotations)} annotations")
        return operations


class RenderPass:
    def run(self, operations: List[DrawOperation], context: LayoutContext) -> RasterSurface:
        surface = context.require_surface(type(self).__name__)
        for operation in sorted(operations, key=lambda op: op.layer):
            operation.paint(surface, context)
        return surface


def iter_components(root: Component) -> Iterator[Component]:
    yield root
    for child in root.children:
        yield from iter_components(child)


class SceneGenerator:
    """Loads a component tree's assets once, then renders any number of scenes from it."""

    def __init__(self, root: Component, resources: Optional[ResourceProvider] = None):
        self.root = root
        self.resources = resources or ResourceProvider()
        self.layout_pass = LayoutPass()
        self.render_pass = RenderPass()
        self._prepared = False

    async def load_resources(self) -> None:
        await self.root.load_resources(self.resources)

    def prepare(self) -> SceneGenerator:
        """Load every asset of the tree and check the tree can still produce scenes."""
        if not self._prepared:
            asyncio.run(self.load_resources())
            for component in iter_components(self.root):
                ensure_available = getattr(component, 'ensure_available', None)
                if ensure_available is not None:
                    ensure_available()
            self._prepared = True
        return self

    def generate(self, rng: random.Random) -> GeneratedScene:
        if not self._prepared:
            self.prepare()
        context = LayoutContext(rng=rng)
        operations = self.layout_pass.run(self.root, context)
        surface = self.render_pass.run(operations, context)
        width, height = surface.width, surface.height
        resolved = clean_annotations(context.annotations, width, height)
        return GeneratedScene(surface.to_image(), width, height, list(context.annotations), resolved)
