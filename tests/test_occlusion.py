import random

from scene_engine.annotation.occlusion import (
    SLIVER_EPSILON, clean_annotations, clip_annotations, occluder_order, remove_occluded, split_rectangle,
)
from scene_engine.models.annotation import Annotation
from scene_engine.models.geometry import Rectangle

W, H = 1000, 800


def ann(layer, x, y, w, h, name='box'):
    return Annotation(layer, name, Rectangle(x, y, w, h))


def test_partially_covered_window_keeps_its_box():
    window = ann(1, 100, 100, 200, 200, 'window')
    button = ann(2, 150, 150, 50, 50, 'button')
    result = clean_annotations([window, button], W, H)
    assert result == [window, button]
    assert result[0].rect == Rectangle(100, 100, 200, 200)


def test_fully_covered_annotation_is_dropped():
    covered = ann(1, 100, 100, 200, 200, 'window')
    cover = ann(2, 90, 90, 220, 220, 'button')
    assert clean_annotations([covered, cover], W, H) == [cover]


def test_equal_layers_never_occlude():
    a = ann(1, 100, 100, 200, 200)
    b = ann(1, 90, 90, 220, 220)
    assert clean_annotations([a, b], W, H) == [a, b]


def test_lower_layers_never_occlude():
    top = ann(3, 100, 100, 50, 50)
    bottom = ann(1, 0, 0, 500, 500)
    assert clean_annotations([top, bottom], W, H) == [top, bottom]


def test_covered_by_union_of_occluders():
    a = ann(1, 0, 0, 100, 100)
    left = ann(2, 0, 0, 50, 100)
    right = ann(3, 50, 0, 50, 100)
    assert clean_annotations([a, left, right], W, H) == [left, right]


def test_remaining_sliver_does_not_keep_annotation():
    a = ann(1, 0, 0, 100, 100)
    almost = ann(2, 0, 0, 100 - SLIVER_EPSILON / 2, 100)
    assert a not in clean_annotations([a, almost], W, H)

    wide_enough = ann(2, 0, 0, 100 - SLIVER_EPSILON, 100)
    assert a in clean_annotations([a, wide_enough], W, H)


def test_touching_occluder_does_not_occlude():
    a = ann(1, 0, 0, 100, 100)
    neighbour = ann(2, 100, 0, 100, 100)
    assert clean_annotations([a, neighbour], W, H) == [a, neighbour]


def test_clipping_to_canvas():
    partly_off = ann(1, -50, -50, 100, 100)
    off_canvas = ann(1, 1200, 100, 50, 50)
    clipped = clip_annotations([partly_off, off_canvas], W, H)
    assert clipped == [partly_off.with_rect(Rectangle(0, 0, 50, 50))]


def test_split_rectangle_around_inner_occluder():
    pieces = split_rectangle(Rectangle(0, 0, 100, 100), Rectangle(40, 40, 20, 20))
    assert len(pieces) == 8
    assert sum(p.area for p in pieces) == 100 * 100 - 20 * 20
    assert all(not p.intersects(Rectangle(40, 40, 20, 20)) for p in pieces)


def test_split_rectangle_full_cover():
    assert split_rectangle(Rectangle(10, 10, 10, 10), Rectangle(0, 0, 50, 50)) == []


def _random_annotations(rng, count):
    annotations = []
    for _ in range(count):
        w, h = rng.uniform(1, 300), rng.uniform(1, 300)
        annotations.append(ann(rng.randrange(4), rng.uniform(-100, W), rng.uniform(-100, H), w, h))
    return annotations


def test_result_does_not_depend_on_input_order():
    rng = random.Random(99)
    for _ in range(50):
        annotations = _random_annotations(rng, 15)
        expected = sorted(clean_annotations(annotations, W, H), key=occluder_order)
        for _ in range(5):
            shuffled = list(annotations)
            rng.shuffle(shuffled)
            assert sorted(clean_annotations(shuffled, W, H), key=occluder_order) == expected


def test_sliver_pruning_does_not_depend_on_occluder_order():
    # the first occluder leaves a 3x3 corner which the second one cuts into two 1.5px slivers
    a = ann(1, 0, 0, 10, 10)
    first = ann(2, 3, 0, 7, 10)
    second = ann(2, 1.5, 0, 1, 3)
    third = ann(2, 0, 3, 3, 7)
    for occluders in ([first, second, third], [third, second, first], [second, first, third]):
        survivors = remove_occluded([a] + occluders)
        assert a not in survivors
        assert sorted(survivors, key=occluder_order) == sorted(occluders, key=occluder_order)


def test_survivors_stay_inside_canvas():
    rng = random.Random(5)
    for annotation in clean_annotations(_random_annotations(rng, 40), W, H):
        rect = annotation.rect
        assert 0 <= rect.x and 0 <= rect.y
        assert rect.x2 <= W and rect.y2 <= H
