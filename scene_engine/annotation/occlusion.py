"""
Occlusion-aware annotation filtering.

An annotation survives when some part of it, at least ``SLIVER_EPSILON``
pixels wide and high, is not covered by annotations on a higher layer.
Annotations never occlude others on the same layer. The surviving box is the
clipped rectangle itself, never the visible remainder.
"""
from typing import Iterable, List

from ..models.annotation import Annotation
from ..models.geometry import Rectangle

SLIVER_EPSILON = 2


def _slice_points(start: float, end: float, cut_start: float, cut_end: float) -> List[float]:
    points = [start]
    if start < cut_start < end:
        points.append(cut_start)
    if start < cut_end < end:
        points.append(cut_end)
    points.append(end)
    return points


def split_rectangle(a: Rectangle, b: Rectangle, epsilon: float = SLIVER_EPSILON) -> List[Rectangle]:
    """
    Parts of ``a`` left visible by ``b``, assuming the two overlap.

    ``a`` is cut along every edge of ``b`` lying strictly inside it. Grid cells
    overlapping ``b`` and cells thinner than ``epsilon`` are dropped.
    """
    xs = _slice_points(a.x, a.x2, b.x, b.x2)
    ys = _slice_points(a.y, a.y2, b.y, b.y2)
    if len(xs) == 2 and len(ys) == 2:
        # b covers a completely
        return []

    pieces = []
    for x1, x2 in zip(xs, xs[1:]):
        for y1, y2 in zip(ys, ys[1:]):
            if x2 - x1 < epsilon or y2 - y1 < epsilon:
                continue
            cell = Rectangle.from_edges(x1, y1, x2, y2)
            if cell.intersects(b):
                continue
            pieces.append(cell)
    return pieces


def occluder_order(annotation: Annotation):
    rect = annotation.rect
    return (annotation.layer, rect.x, rect.y, rect.width, rect.height, annotation.class_name)


def is_visible(annotation: Annotation, occluders: Iterable[Annotation],
               epsilon: float = SLIVER_EPSILON) -> bool:
    fragments = [annotation.rect]
    # a fixed order keeps the sliver pruning independent of input order
    for occluder in sorted(occluders, key=occluder_order):
        remaining = []
        for fragment in fragments:
            if fragment.intersects(occluder.rect):
                remaining.extend(split_rectangle(fragment, occluder.rect, epsilon))
            else:
                remaining.append(fragment)
        fragments = remaining
        if not fragments:
            return False
    return True


def remove_occluded(annotations: List[Annotation], epsilon: float = SLIVER_EPSILON) -> List[Annotation]:
    survivors = []
    for annotation in annotations:
        occluders = [other for other in annotations
                     if other.layer > annotation.layer and other.rect.intersects(annotation.rect)]
        if is_visible(annotation, occluders, epsilon):
            survivors.append(annotation)
    return survivors


def clip_annotations(annotations: Iterable[Annotation], width: float, height: float) -> List[Annotation]:
    """Clamp every box to the canvas and drop the ones left without area."""
    clipped = []
    for annotation in annotations:
        rect = annotation.rect.clip(width, height)
        if rect.is_degenerate:
            continue
        clipped.append(annotation.with_rect(rect))
    return clipped


def clean_annotations(annotations: Iterable[Annotation], width: float, height: float,
                      epsilon: float = SLIVER_EPSILON) -> List[Annotation]:
    return remove_occluded(clip_annotations(annotations, width, height), epsilon)
