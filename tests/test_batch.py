import json

import pytest

from scene_engine.batch import BatchGenerator, main, plan_jobs
from scene_engine.config import RunConfig
from scene_engine.errors import ResourceError
from scene_engine.models.enums import ClassTablePolicy, OutputMode


def test_plan_marks_background_share_and_unique_seeds():
    config = RunConfig(OutputMode.RAW, 20, 10, 3, background_ratio=0.1, seed=100)
    jobs = plan_jobs(config)
    assert len(jobs) == 33
    assert [j.background for j in jobs if j.split == 'training'].count(True) == 2
    assert [j.background for j in jobs if j.split == 'validation'].count(True) == 1
    assert not any(j.background for j in jobs if j.split == 'test')
    assert len({j.seed for j in jobs}) == 33
    assert jobs[0].seed == 100


def test_raw_batch(tmp_path, resources):
    config = RunConfig(OutputMode.RAW, 4, 2, 1, background_ratio=0.25, workers=2, seed=7)
    report = BatchGenerator('mac', config, str(tmp_path / 'out'), resources).run()

    out = tmp_path / 'out'
    assert report.generated == 7
    assert report.failed == []
    assert sorted(p.name for p in (out / 'training').glob('*.txt')) == ['0.txt', '1.txt', '2.txt', '3.txt']
    # the first training image is a background-only negative
    assert json.loads((out / 'training' / '0.txt').read_text()) == []
    assert (out / 'test' / '0_annotated.png').exists()
    assert (out / 'data.zip').exists()
    assert json.loads((out / 'classes.json').read_text()) == report.class_table.names


def test_batch_is_independent_of_worker_count(tmp_path, no_resources):
    outputs = []
    for workers in (1, 3):
        config = RunConfig(OutputMode.NORMALIZED, 3, 0, 0, background_ratio=0, workers=workers,
                           seed=11, archive=False, out_size=64)
        out = tmp_path / f"out{workers}"
        BatchGenerator('windows', config, str(out), no_resources).run()
        outputs.append([(out / 'training' / f"{i}.txt").read_text() for i in range(3)])
    assert outputs[0] == outputs[1]


def test_first_seen_class_table_follows_image_order(tmp_path, no_resources):
    config = RunConfig(OutputMode.NORMALIZED, 3, 0, 0, background_ratio=0, workers=3,
                       class_table_policy=ClassTablePolicy.FIRST_SEEN, archive=False, out_size=64)
    report = BatchGenerator('mac', config, str(tmp_path / 'out'), no_resources).run()
    expected = []
    for result in report.results:
        for annotation in result.scene.annotations:
            if annotation.class_name not in expected:
                expected.append(annotation.class_name)
    assert report.class_table.names == expected


class Exploding(Exception):
    pass


def test_failing_image_is_isolated(tmp_path, no_resources, monkeypatch):
    config = RunConfig(OutputMode.RAW, 3, 0, 0, background_ratio=0, archive=False)
    batch = BatchGenerator('mac', config, str(tmp_path / 'out'), no_resources)
    original = batch.scene_generator.generate
    calls = []

    def generate(rng):
        calls.append(rng)
        if len(calls) == 2:
            raise Exploding('boom')
        return original(rng)

    monkeypatch.setattr(batch.scene_generator, 'generate', generate)
    report = batch.run()
    assert report.generated == 2
    assert len(report.failed) == 1
    assert isinstance(report.failed[0].error, Exploding)
    assert not (tmp_path / 'out' / 'training' / f"{report.failed[0].job.name}.txt").exists()


def test_fail_fast_reraises(tmp_path, no_resources, monkeypatch):
    config = RunConfig(OutputMode.RAW, 2, 0, 0, background_ratio=0, fail_fast=True, archive=False)
    batch = BatchGenerator('mac', config, str(tmp_path / 'out'), no_resources)

    def generate(rng):
        raise Exploding('boom')

    monkeypatch.setattr(batch.scene_generator, 'generate', generate)
    with pytest.raises(Exploding):
        batch.run()


def test_no_application_variant_left_is_fatal(tmp_path, no_resources):
    from scene_engine.components.applications.registry import ApplicationVariant, RandomApplication
    from scene_engine.pipeline import iter_components

    config = RunConfig(OutputMode.RAW, 1, 0, 0, archive=False)
    batch = BatchGenerator('windows', config, str(tmp_path / 'out'), no_resources)
    for component in iter_components(batch.scene_generator.root):
        if isinstance(component, RandomApplication):
            component.applications = [a for a in component.applications if a.variant == ApplicationVariant.WORD.value]
    with pytest.raises(ResourceError):
        batch.run()


def test_cli_rejects_unknown_family(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(['test', 'beos', str(tmp_path / 'out')])
    assert excinfo.value.code == 2
    assert 'Unknown UI family' in capsys.readouterr().err


def test_cli_test_run(tmp_path, asset_root):
    code = main(['test', 'mac', str(tmp_path / 'out'), '--resources', str(asset_root),
                 '--seed', '3', '--workers', '2', '--no-archive'])
    assert code == 0
    assert len(list((tmp_path / 'out' / 'training').glob('*_annotated.png'))) == 10
    assert not (tmp_path / 'out' / 'data.zip').exists()


def test_failed_overlay_leaves_no_image_behind(tmp_path, no_resources, monkeypatch):
    def draw_overlay(image, annotations):
        raise OSError('disk full')

    monkeypatch.setattr('scene_engine.export.writer.draw_overlay', draw_overlay)
    config = RunConfig(OutputMode.RAW, 2, 0, 0, background_ratio=0, archive=False)
    report = BatchGenerator('mac', config, str(tmp_path / 'out'), no_resources).run()
    assert len(report.failed) == 2
    assert list((tmp_path / 'out' / 'training').iterdir()) == []


class UnsavableImage:
    def save(self, path):
        raise OSError('disk full')


def test_partially_written_image_is_removed(tmp_path, no_resources, monkeypatch):
    monkeypatch.setattr('scene_engine.export.writer.draw_overlay', lambda image, annotations: UnsavableImage())
    config = RunConfig(OutputMode.RAW, 1, 0, 0, background_ratio=0, archive=False)
    report = BatchGenerator('mac', config, str(tmp_path / 'out'), no_resources).run()
    assert report.generated == 0
    assert list((tmp_path / 'out' / 'training').iterdir()) == []
