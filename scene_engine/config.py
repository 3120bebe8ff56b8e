"""
Runtime configuration.

Paths default to the environment (``SCENE_ENGINE_RESOURCES`` /
``SCENE_ENGINE_OUTPUT``); run presets mirror the two modes the generator is
used in: a tiny raw/debug run and the full normalized training export.
"""
import os
from dataclasses import dataclass
from enum import Enum
from typing import Type, TypeVar, Union

from .errors import ConfigurationError
from .models.enums import ClassTablePolicy, OutputMode, RunMode

RESOURCE_PATH = os.environ.get('SCENE_ENGINE_RESOURCES', os.path.join(os.getcwd(), 'resources'))
OUTPUT_PATH = os.environ.get('SCENE_ENGINE_OUTPUT', os.path.join(os.getcwd(), 'output'))

OUT_SIZE = 640
TRAIN_PATH = 'training'
VALIDATE_PATH = 'validation'
TEST_PATH = 'test'

E = TypeVar('E', bound=Enum)


def parse_enum(enum_cls: Type[E], value: Union[str, E], what: str = None) -> E:
    """Parse a configuration value; unknown values are a fatal configuration error."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).lower())
    except ValueError:
        choices = ', '.join(m.value for m in enum_cls)
        raise ConfigurationError(
            f"Unknown {what or enum_cls.__name__}: {value!r} (expected one of: {choices})"
        ) from None


@dataclass
class RunConfig:
    output_mode: OutputMode
    training_amount: int
    validation_amount: int
    test_amount: int
    background_ratio: float = 0.1
    class_table_policy: ClassTablePolicy = ClassTablePolicy.STATIC
    out_size: int = OUT_SIZE
    workers: int = 1
    seed: int = 0
    fail_fast: bool = False
    archive: bool = True

    def __post_init__(self):
        if min(self.training_amount, self.validation_amount, self.test_amount) < 0:
            raise ConfigurationError("image amounts must be >= 0")
        if not 0 <= self.background_ratio <= 1:
            raise ConfigurationError("background_ratio must be within [0, 1]")
        if self.workers < 1:
            raise ConfigurationError("workers must be >= 1")


def get_run_config(run_mode: Union[str, RunMode]) -> RunConfig:
    run_mode = parse_enum(RunMode, run_mode, 'run mode')
    if run_mode == RunMode.TEST:
        return RunConfig(
            output_mode=OutputMode.RAW,
            training_amount=10,
            validation_amount=0,
            test_amount=0,
        )
    return RunConfig(
        output_mode=OutputMode.NORMALIZED,
        training_amount=4000,
        validation_amount=500,
        test_amount=10,
    )
