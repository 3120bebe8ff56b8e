"""Synthetic desktop scene generator producing labeled object-detection datasets."""
from .batch import BatchGenerator, BatchReport
from .components.screen import Screen, build_screen
from .config import RunConfig, get_run_config
from .pipeline import GeneratedScene, SceneGenerator

__version__ = '0.1.0'

__all__ = [
    'BatchGenerator', 'BatchReport', 'Screen', 'build_screen',
    'RunConfig', 'get_run_config', 'GeneratedScene', 'SceneGenerator',
]
