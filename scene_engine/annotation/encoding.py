"""Label encodings for the two output modes."""
from typing import Iterable, List, Tuple

from ..models.annotation import Annotation
from ..models.geometry import Rectangle
from .class_table import ClassTable


def to_raw_records(annotations: Iterable[Annotation]) -> List[dict]:
    return [annotation.to_record() for annotation in annotations]


def to_normalized_lines(annotations: Iterable[Annotation], width: float, height: float,
                        class_table: ClassTable) -> List[str]:
    """
    One ``"<class_id> <cx> <cy> <w> <h>"`` line per annotation.

    Coordinates are normalized by the canvas the rectangles were laid out on,
    not by the resized output image.
    """
    lines = []
    for annotation in annotations:
        rect = annotation.rect
        cx = (rect.x + rect.width / 2) / width
        cy = (rect.y + rect.height / 2) / height
        w = rect.width / width
        h = rect.height / height
        class_id = class_table.id_of(annotation.class_name)
        lines.append(f"{class_id} {cx:.6f} {cy:.6f} {w:.6f} {h:.6f}")
    return lines


def decode_normalized_line(line: str, width: float, height: float) -> Tuple[int, Rectangle]:
    class_id, cx, cy, w, h = line.split()
    cx, cy, w, h = float(cx) * width, float(cy) * height, float(w) * width, float(h) * height
    return int(class_id), Rectangle(cx - w / 2, cy - h / 2, w, h)
