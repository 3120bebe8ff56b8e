import json

import pytest

from scene_engine.annotation.class_table import ClassTable
from scene_engine.annotation.encoding import decode_normalized_line, to_normalized_lines, to_raw_records
from scene_engine.errors import ConfigurationError
from scene_engine.models import classes
from scene_engine.models.annotation import Annotation
from scene_engine.models.enums import ClassTablePolicy, UIFamily
from scene_engine.models.geometry import Rectangle


def test_first_seen_class_table_across_images():
    images = [
        [Annotation(1, 'app', Rectangle(0, 0, 10, 10))],
        [Annotation(1, 'dock', Rectangle(0, 0, 10, 10))],
        [Annotation(1, 'app', Rectangle(5, 5, 10, 10))],
    ]
    table = ClassTable.build(ClassTablePolicy.FIRST_SEEN, UIFamily.MAC, images)
    assert table.names == ['app', 'dock']
    assert table.id_of('app') == 0
    assert table.id_of('dock') == 1
    assert json.loads(table.to_json()) == ['app', 'dock']


def test_static_class_table_per_family():
    mac = ClassTable.build(ClassTablePolicy.STATIC, UIFamily.MAC)
    windows = ClassTable.build(ClassTablePolicy.STATIC, UIFamily.WINDOWS)
    assert mac.names == classes.MAC_CLASSES
    assert windows.names == classes.WIN_CLASSES
    assert classes.DOCK in mac and classes.DOCK not in windows
    assert windows.id_of(classes.TASKBAR) == 1


def test_unknown_class_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        ClassTable(['a']).id_of('b')


def test_normalized_line_format():
    table = ClassTable(['window'])
    lines = to_normalized_lines([Annotation(1, 'window', Rectangle(100, 100, 200, 200))], 1000, 800, table)
    assert lines == ['0 0.200000 0.250000 0.200000 0.250000']


def test_normalized_lines_decode_to_original_rectangles():
    table = ClassTable(['a', 'b'])
    width, height = 1366, 768
    annotations = [
        Annotation(1, 'a', Rectangle(0, 0, 1366, 768)),
        Annotation(2, 'b', Rectangle(13.25, 700.5, 101.75, 40)),
        Annotation(3, 'a', Rectangle(1000, 0.125, 366, 24)),
    ]
    for annotation, line in zip(annotations, to_normalized_lines(annotations, width, height, table)):
        class_id, rect = decode_normalized_line(line, width, height)
        assert table.names[class_id] == annotation.class_name
        for got, want in zip(rect.as_box(), annotation.rect.as_box()):
            assert got == pytest.approx(want, abs=1e-3)


def test_raw_records():
    records = to_raw_records([Annotation(20, 'application', Rectangle(1, 2, 3, 4))])
    assert records == [{'layer': 20, 'class': 'application', 'x': 1, 'y': 2, 'width': 3, 'height': 4}]
