from functools import lru_cache

from PIL import ImageFont

_REGULAR = ("arial.ttf", "DejaVuSans.ttf")
_BOLD = ("arialbd.ttf", "DejaVuSans-Bold.ttf")


@lru_cache(maxsize=64)
def get_font(size: int = 14, bold: bool = False):
    """Get a font, falling back to the default one if no TrueType font is installed."""
    for name in (_BOLD if bold else _REGULAR):
        try:
            return ImageFont.truetype(name, size)
        except (IOError, OSError):
            continue
    return ImageFont.load_default(size=size)
