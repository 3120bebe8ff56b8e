"""
Raster surface: a thin immediate-mode drawing layer over a Pillow RGBA image.

Shapes are painted on a transparent overlay cropped to the shape's bounds and
alpha-composited, so translucent fills blend instead of overwriting alpha.
Coordinates are floats in canvas pixels and may fall partly off-canvas.
"""
import io
from typing import Iterable, Optional, Sequence, Tuple, Union

from PIL import Image, ImageColor, ImageDraw, ImageFilter

from ..models.geometry import Rectangle

Color = Union[str, Tuple[int, int, int], Tuple[int, int, int, int]]


def to_rgba(color: Color) -> Tuple[int, int, int, int]:
    if isinstance(color, str):
        return ImageColor.getcolor(color, 'RGBA')
    if len(color) == 3:
        return (color[0], color[1], color[2], 255)
    return tuple(color)


class RasterSurface:
    def __init__(self, width: float, height: float, background: Color = (0, 0, 0, 255)):
        self.width = int(round(width))
        self.height = int(round(height))
        self.image = Image.new('RGBA', (self.width, self.height), to_rgba(background))
        self._draw = ImageDraw.Draw(self.image)

    @property
    def bounds(self) -> Rectangle:
        return Rectangle(0, 0, self.width, self.height)

    def _pixel_box(self, rect: Rectangle, pad: float = 0) -> Optional[Tuple[int, int, int, int]]:
        x1 = max(0, int(rect.x - pad))
        y1 = max(0, int(rect.y - pad))
        x2 = min(self.width, int(rect.x2 + pad) + 1)
        y2 = min(self.height, int(rect.y2 + pad) + 1)
        if x2 <= x1 or y2 <= y1:
            return None
        return (x1, y1, x2, y2)

    def _composite(self, rect: Rectangle, paint, pad: float = 0) -> None:
        """Run ``paint(draw, dx, dy)`` on an overlay covering ``rect`` and blend it in."""
        if rect.is_degenerate:
            return
        box = self._pixel_box(rect, pad)
        if box is None:
            return
        x1, y1, x2, y2 = box
        overlay = Image.new('RGBA', (x2 - x1, y2 - y1), (0, 0, 0, 0))
        paint(ImageDraw.Draw(overlay), -x1, -y1)
        self.image.alpha_composite(overlay, dest=(x1, y1))

    def fill_rect(self, rect: Rectangle, color: Color, radius: float = 0,
                  corners: Optional[Tuple[bool, bool, bool, bool]] = None) -> None:
        fill = to_rgba(color)

        def paint(draw, dx, dy):
            box = rect.translate(dx, dy).as_box()
            if radius > 0:
                draw.rounded_rectangle(box, radius=radius, fill=fill, corners=corners)
            else:
                draw.rectangle(box, fill=fill)
        self._composite(rect, paint)

    def stroke_rect(self, rect: Rectangle, color: Color, width: int = 1, radius: float = 0) -> None:
        outline = to_rgba(color)

        def paint(draw, dx, dy):
            box = rect.translate(dx, dy).as_box()
            if radius > 0:
                draw.rounded_rectangle(box, radius=radius, outline=outline, width=width)
            else:
                draw.rectangle(box, outline=outline, width=width)
        self._composite(rect, paint, pad=width)

    def fill_ellipse(self, cx: float, cy: float, radius: float, color: Color) -> None:
        rect = Rectangle(cx - radius, cy - radius, 2 * radius, 2 * radius)
        fill = to_rgba(color)
        self._composite(rect, lambda draw, dx, dy: draw.ellipse(rect.translate(dx, dy).as_box(), fill=fill))

    def line(self, points: Sequence[Tuple[float, float]], color: Color, width: int = 1) -> None:
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        rect = Rectangle.from_edges(min(xs), min(ys), max(xs) + 1, max(ys) + 1)
        fill = to_rgba(color)

        def paint(draw, dx, dy):
            draw.line([(x + dx, y + dy) for x, y in points], fill=fill, width=width)
        self._composite(rect, paint, pad=width)

    def vertical_gradient(self, rect: Rectangle, start: Color, stop: Color) -> None:
        if rect.is_degenerate:
            return
        c1, c2 = to_rgba(start), to_rgba(stop)
        steps = max(1, int(rect.height))
        for i in range(steps):
            t = i / max(1, steps - 1)
            color = tuple(int(round(a + (b - a) * t)) for a, b in zip(c1, c2))
            self.fill_rect(Rectangle(rect.x, rect.y + i, rect.width, 1), color)

    def blit(self, image: Image.Image, rect: Rectangle,
             source: Optional[Tuple[float, float, float, float]] = None) -> None:
        """Draw ``image`` (optionally its ``source`` box) scaled into ``rect``."""
        if rect.is_degenerate:
            return
        if source is not None:
            image = image.crop(tuple(int(round(v)) for v in source))
        size = (max(1, int(round(rect.width))), max(1, int(round(rect.height))))
        scaled = image.convert('RGBA').resize(size, Image.BILINEAR)
        x, y = int(round(rect.x)), int(round(rect.y))
        # alpha_composite rejects negative offsets; crop the part hanging off the canvas
        crop_x, crop_y = max(0, -x), max(0, -y)
        if crop_x >= scaled.width or crop_y >= scaled.height:
            return
        if crop_x or crop_y:
            scaled = scaled.crop((crop_x, crop_y, scaled.width, scaled.height))
        x, y = x + crop_x, y + crop_y
        if x >= self.width or y >= self.height:
            return
        scaled = scaled.crop((0, 0, min(scaled.width, self.width - x), min(scaled.height, self.height - y)))
        self.image.alpha_composite(scaled, dest=(x, y))

    def blur_region(self, rect: Rectangle, radius: float) -> None:
        """Frosted-glass effect: blur what is already painted below ``rect``."""
        box = self._pixel_box(rect)
        if box is None:
            return
        region = self.image.crop(box).filter(ImageFilter.GaussianBlur(radius=radius))
        self.image.paste(region, box[:2])

    def text(self, xy: Tuple[float, float], text: str, font, color: Color, anchor: str = 'la') -> None:
        self._draw.text(xy, text, font=font, fill=to_rgba(color), anchor=anchor)

    def measure_text(self, text: str, font) -> Tuple[float, float]:
        left, top, right, bottom = font.getbbox(text)
        return (right - left, bottom - top)

    def shadow(self, rect: Rectangle, width: int = 20, color: Color = (0, 0, 0, 64)) -> None:
        """Soft drop shadow around ``rect``."""
        base = to_rgba(color)
        for i in range(width, 0, -4):
            alpha = int(base[3] * (1 - i / width) / 3)
            self.stroke_rect(rect.inset(-i), base[:3] + (alpha,), width=4)

    def to_image(self) -> Image.Image:
        return self.image.copy()

    def encode_png(self) -> bytes:
        buffer = io.BytesIO()
        self.image.convert('RGB').save(buffer, format='PNG')
        return buffer.getvalue()


def scaled_width(image: Image.Image, height: float) -> float:
    return height / image.height * image.width


def cover_crop(image_size: Tuple[int, int], target: Tuple[float, float]) -> Tuple[float, float, float, float]:
    """Source box of ``image_size`` that covers ``target`` while preserving its aspect ratio, centered."""
    img_w, img_h = image_size
    target_w, target_h = target
    scale = max(target_w / img_w, target_h / img_h)
    source_w = target_w / scale
    source_h = target_h / scale
    left = (img_w - source_w) / 2
    top = (img_h - source_h) / 2
    return (left, top, left + source_w, top + source_h)


def union(rects: Iterable[Rectangle]) -> Optional[Rectangle]:
    rects = list(rects)
    if not rects:
        return None
    return Rectangle.from_edges(min(r.x for r in rects), min(r.y for r in rects),
                                max(r.x2 for r in rects), max(r.y2 for r in rects))
