from .component import Component
from .screen import Screen, build_screen

__all__ = ['Component', 'Screen', 'build_screen']
