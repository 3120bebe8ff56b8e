import random

import pytest
from PIL import Image

from scene_engine.render.resources import ResourceProvider


def _save(path, size, color, fmt='PNG'):
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new('RGB', size, color).save(path, format=fmt)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def asset_root(tmp_path):
    """Small asset tree with one file per category and one unreadable image."""
    root = tmp_path / 'resources'
    _save(root / 'mac' / 'backgrounds' / 'bg1.png', (320, 200), (30, 60, 120))
    _save(root / 'windows' / 'backgrounds' / 'bg1.png', (320, 200), (10, 90, 160))
    _save(root / 'mac' / 'appicons' / 'app1.png', (64, 64), (200, 50, 50))
    _save(root / 'mac' / 'appicons' / 'app2.png', (64, 48), (50, 200, 50))
    _save(root / 'windows' / 'appicons' / 'app1.png', (64, 64), (50, 50, 200))
    _save(root / 'mac' / 'fileicons' / 'files' / 'doc.png', (48, 60), (240, 240, 240))
    _save(root / 'mac' / 'fileicons' / 'folders' / 'folder.png', (60, 48), (80, 160, 240))
    _save(root / 'applications' / 'word' / 'word1.png', (400, 300), (255, 255, 255))
    _save(root / 'applications' / 'finder' / 'finder1.png', (300, 200), (230, 230, 230))
    _save(root / 'applications' / 'explorer' / 'explorer1.png', (300, 200), (220, 220, 220))
    _save(root / 'websites' / 'example_com.jpg', (400, 300), (120, 120, 120), fmt='JPEG')
    _save(root / 'favicons' / 'example_com.png', (32, 32), (255, 128, 0))
    (root / 'mac' / 'appicons' / 'broken.png').write_bytes(b'not an image')
    return root


@pytest.fixture
def resources(asset_root):
    return ResourceProvider(str(asset_root))


@pytest.fixture
def no_resources(tmp_path):
    """Provider pointing at an empty directory: every skin falls back to generated imagery."""
    return ResourceProvider(str(tmp_path / 'missing'))
