from .application import Application, ApplicationRegion
from .browser import Browser
from .notes import Notes
from .registry import ApplicationVariant, RandomApplication, create_application
from .screenshot import ScreenshotApplication, ScreenshotContent

__all__ = [
    'Application', 'ApplicationRegion', 'Browser', 'Notes',
    'ApplicationVariant', 'RandomApplication', 'create_application',
    'ScreenshotApplication', 'ScreenshotContent',
]
