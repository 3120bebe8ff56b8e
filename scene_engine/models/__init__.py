from .geometry import Point, Dimensions, Rectangle
from .enums import (
    Appearance, Orientation, UIFamily, OutputMode, ClassTablePolicy, RunMode,
)
from .annotation import Annotation
from .jobs import DrawOperation

__all__ = [
    'Point', 'Dimensions', 'Rectangle',
    'Appearance', 'Orientation', 'UIFamily', 'OutputMode',
    'ClassTablePolicy', 'RunMode',
    'Annotation', 'DrawOperation',
]
