"""
Component tree node.

A scene is a tree of components walked twice:

* ``load_resources`` (async, before any traversal) fans out to the children
  and to the node's own assets concurrently and waits for all of them to
  settle; individual failures are logged, never propagated.
* ``collect`` (layout pass, synchronous, pre-order) writes the node's context
  section, appends its annotations, recurses into the children and returns a
  flat list of draw operations for the node and its descendants.

``draw`` is only ever called by the render pass, after the whole tree was
collected, with the region the node produced during ``collect``.
"""
from __future__ import annotations
import asyncio
import logging
from typing import Any, Awaitable, Iterable, List

from ..context import LayoutContext
from ..models.jobs import DrawOperation
from ..render.resources import ResourceProvider
from ..render.surface import RasterSurface

logger = logging.getLogger(__name__)


async def settle(awaitables: Iterable[Awaitable], owner: str = '') -> list:
    """Await everything, log failures, and return the results that succeeded."""
    results = await asyncio.gather(*awaitables, return_exceptions=True)
    settled = []
    for result in results:
        if isinstance(result, BaseException) and not isinstance(result, Exception):
            raise result
        if isinstance(result, Exception):
            logger.warning(f"Resource loading failed in {owner}: {result}")
            continue
        settled.append(result)
    return settled


class Component:
    layer: int = 0

    def __init__(self):
        self._children: List[Component] = []

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def children(self) -> List[Component]:
        return list(self._children)

    def add_component(self, component: Component) -> Component:
        if component not in self._children:
            self._children.append(component)
        return component

    def remove_component(self, component: Component) -> None:
        if component in self._children:
            self._children.remove(component)

    async def load_own_resources(self, resources: ResourceProvider) -> None:
        """Override to load this node's assets."""

    async def load_resources(self, resources: ResourceProvider) -> None:
        loads = [child.load_resources(resources) for child in self._children]
        loads.append(self.load_own_resources(resources))
        await settle(loads, owner=self.name)

    def layout(self, context: LayoutContext) -> Any:
        """
        Compute this node's region, write its context section and append its
        annotations. Return the region to draw, or None for no draw operation.
        """
        return None

    def collect(self, context: LayoutContext) -> List[DrawOperation]:
        region = self.layout(context)
        operations = []
        if region is not None:
            operations.append(DrawOperation(self.layer, self, region))
        for child in self._children:
            operations.extend(child.collect(context))
        return operations

    def draw(self, surface: RasterSurface, region: Any, context: LayoutContext) -> None:
        raise NotImplementedError(f"{self.name} produced a region but cannot draw it")
