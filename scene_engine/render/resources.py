"""
Asynchronous image resource provider.

Loading fans out concurrently and joins with an "all settled" policy: a
single unreadable file is logged and skipped, never fatal for its siblings.
Images of a category come back in sorted file-name order so a fixed seed
always picks the same assets.
"""
import asyncio
import logging
import os
from pathlib import Path
from typing import List, Optional

from PIL import Image, UnidentifiedImageError

from ..config import RESOURCE_PATH
from ..errors import ResourceLoadError

logger = logging.getLogger(__name__)

IMAGE_SUFFIXES = ('.png', '.jpg', '.jpeg', '.webp', '.bmp')


def _decode(path: Path) -> Image.Image:
    with Image.open(path) as img:
        img.load()
        return img.convert('RGBA')


class ResourceProvider:
    def __init__(self, root: Optional[str] = None):
        self.root = Path(root or RESOURCE_PATH)

    def resolve(self, resource_id: str) -> Path:
        return self.root / resource_id

    def list_category(self, category: str) -> List[str]:
        """Resource ids of every image file directly inside ``category``."""
        directory = self.resolve(category)
        if not directory.is_dir():
            logger.info(f"Resource category not found: {directory}")
            return []
        return [
            f"{category}/{name}" for name in sorted(os.listdir(directory))
            if name.lower().endswith(IMAGE_SUFFIXES)
        ]

    async def load(self, resource_id: str) -> Image.Image:
        path = self.resolve(resource_id)
        try:
            return await asyncio.to_thread(_decode, path)
        except (OSError, UnidentifiedImageError, ValueError) as e:
            raise ResourceLoadError(resource_id, str(e)) from e

    async def load_category(self, category: str) -> List[Image.Image]:
        ids = self.list_category(category)
        results = await asyncio.gather(*(self.load(i) for i in ids), return_exceptions=True)
        images = []
        for resource_id, result in zip(ids, results):
            if isinstance(result, BaseException):
                logger.warning(f"Skipping resource {resource_id}: {result}")
                continue
            images.append(result)
        logger.debug(f"Loaded {len(images)}/{len(ids)} images from {category}")
        return images
