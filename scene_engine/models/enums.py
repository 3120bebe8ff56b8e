from enum import Enum


class Appearance(Enum):
    DARK = "dark"
    LIGHT = "light"


class Orientation(Enum):
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"

    @property
    def is_vertical(self) -> bool:
        """Bars docked to the left/right edge run vertically."""
        return self in (Orientation.LEFT, Orientation.RIGHT)


class UIFamily(Enum):
    MAC = "mac"
    WINDOWS = "windows"


class OutputMode(Enum):
    RAW = "raw"
    NORMALIZED = "normalized"


class ClassTablePolicy(Enum):
    STATIC = "static"
    FIRST_SEEN = "first_seen"


class RunMode(Enum):
    TEST = "test"
    PROD = "prod"
