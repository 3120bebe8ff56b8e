import json
import random
import zipfile

from PIL import Image

from scene_engine.annotation.class_table import ClassTable
from scene_engine.components.screen import build_screen
from scene_engine.export.writer import DatasetWriter
from scene_engine.models.enums import OutputMode, UIFamily
from scene_engine.pipeline import SceneGenerator


def make_scene(no_resources, seed=0):
    return SceneGenerator(build_screen('mac'), no_resources).prepare().generate(random.Random(seed))


def test_raw_mode_writes_image_records_and_overlay(tmp_path, no_resources):
    scene = make_scene(no_resources)
    writer = DatasetWriter(str(tmp_path / 'out'), OutputMode.RAW)
    writer.prepare()
    writer.write_image('training', '0', scene.image, scene.annotations)
    writer.write_labels('training', '0', scene.annotations, scene.width, scene.height,
                        ClassTable.static(UIFamily.MAC))

    split = tmp_path / 'out' / 'training'
    with Image.open(split / '0.png') as image:
        assert image.size == (scene.width, scene.height)
    assert (split / '0_annotated.png').exists()
    records = json.loads((split / '0.txt').read_text())
    assert [r['class'] for r in records] == [a.class_name for a in scene.annotations]
    assert set(records[0]) == {'layer', 'class', 'x', 'y', 'width', 'height'}


def test_normalized_mode_resizes_and_writes_lines(tmp_path, no_resources):
    scene = make_scene(no_resources, seed=1)
    table = ClassTable.static(UIFamily.MAC)
    writer = DatasetWriter(str(tmp_path / 'out'), OutputMode.NORMALIZED, out_size=320)
    writer.prepare()
    writer.write_image('validation', '7', scene.image, scene.annotations)
    writer.write_labels('validation', '7', scene.annotations, scene.width, scene.height, table)

    split = tmp_path / 'out' / 'validation'
    with Image.open(split / '7.png') as image:
        assert image.size == (320, 320)
    assert not (split / '7_annotated.png').exists()
    lines = (split / '7.txt').read_text().splitlines()
    assert len(lines) == len(scene.annotations)
    for line, annotation in zip(lines, scene.annotations):
        class_id, *values = line.split()
        assert table.names[int(class_id)] == annotation.class_name
        assert all(0 <= float(v) <= 1 for v in values)


def test_batch_files_and_archive(tmp_path):
    out = tmp_path / 'out'
    writer = DatasetWriter(str(out), OutputMode.RAW)
    writer.prepare()
    (out / 'training' / '0.png').write_bytes(b'png')
    table = ClassTable(['file', 'dock'])
    writer.write_class_table(table)
    writer.write_data_yaml(table)
    writer.write_archive()

    assert json.loads((out / 'classes.json').read_text()) == ['file', 'dock']
    data_yaml = (out / 'data.yaml').read_text()
    assert 'nc: 2' in data_yaml
    assert "names: ['file', 'dock']" in data_yaml
    with zipfile.ZipFile(out / 'data.zip') as archive:
        names = archive.namelist()
    assert 'training/0.png' in names
    assert 'classes.json' in names


def test_prepare_recreates_output_directory(tmp_path):
    out = tmp_path / 'out'
    (out / 'stale').mkdir(parents=True)
    DatasetWriter(str(out), OutputMode.RAW).prepare()
    assert sorted(p.name for p in out.iterdir()) == ['test', 'training', 'validation']
