import pytest

from scene_engine.components.screen import build_screen
from scene_engine.config import RunConfig, get_run_config, parse_enum
from scene_engine.errors import ConfigurationError
from scene_engine.export.writer import DatasetWriter
from scene_engine.models.enums import ClassTablePolicy, OutputMode, RunMode, UIFamily


def test_run_presets():
    test = get_run_config('test')
    assert test.output_mode == OutputMode.RAW
    assert (test.training_amount, test.validation_amount, test.test_amount) == (10, 0, 0)

    prod = get_run_config(RunMode.PROD)
    assert prod.output_mode == OutputMode.NORMALIZED
    assert (prod.training_amount, prod.validation_amount, prod.test_amount) == (4000, 500, 10)
    assert prod.background_ratio == pytest.approx(0.1)
    assert prod.class_table_policy == ClassTablePolicy.STATIC


def test_parse_enum():
    assert parse_enum(UIFamily, 'MAC') == UIFamily.MAC
    assert parse_enum(OutputMode, OutputMode.RAW) == OutputMode.RAW
    with pytest.raises(ConfigurationError):
        parse_enum(UIFamily, 'linux')


@pytest.mark.parametrize('factory', [
    lambda: get_run_config('staging'),
    lambda: build_screen('amiga'),
    lambda: DatasetWriter('out', 'yolo'),
    lambda: RunConfig(OutputMode.RAW, 1, 0, 0, background_ratio=2),
    lambda: RunConfig(OutputMode.RAW, 1, 0, 0, workers=0),
    lambda: RunConfig(OutputMode.RAW, -1, 0, 0),
])
def test_unknown_configuration_fails_at_startup(factory):
    with pytest.raises(ConfigurationError):
        factory()
