"""
Batch driver: renders every image of a run and writes the dataset.

Usage:
    python -m scene_engine.batch test mac
    python -m scene_engine.batch prod windows /data/windows --workers 8 --seed 42
"""
import argparse
import logging
import random
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import List, Optional

from .annotation.class_table import ClassTable
from .components.screen import build_screen
from .config import (
    OUTPUT_PATH, TEST_PATH, TRAIN_PATH, VALIDATE_PATH, RunConfig, get_run_config, parse_enum,
)
from .errors import SceneEngineError
from .export.writer import DatasetWriter
from .models.enums import ClassTablePolicy, OutputMode, RunMode, UIFamily
from .pipeline import GeneratedScene, SceneGenerator
from .render.resources import ResourceProvider

logger = logging.getLogger(__name__)

PROGRESS_EVERY = 50


@dataclass(frozen=True)
class ImageJob:
    split: str
    name: str
    seed: int
    background: bool = False


@dataclass
class ImageResult:
    job: ImageJob
    scene: Optional[GeneratedScene] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.scene is not None


@dataclass
class BatchReport:
    class_table: ClassTable
    results: List[ImageResult] = field(default_factory=list)

    @property
    def generated(self) -> int:
        return sum(1 for r in self.results if r.ok)

    @property
    def failed(self) -> List[ImageResult]:
        return [r for r in self.results if not r.ok]


def plan_jobs(config: RunConfig) -> List[ImageJob]:
    """
    One job per image. The first ``background_ratio`` share of the training and
    validation images are background-only negatives; every image gets its own
    seed so results do not depend on scheduling.
    """
    jobs = []
    for split, amount, negatives in ((TRAIN_PATH, config.training_amount, True),
                                     (VALIDATE_PATH, config.validation_amount, True),
                                     (TEST_PATH, config.test_amount, False)):
        for i in range(amount):
            background = negatives and i < amount * config.background_ratio
            jobs.append(ImageJob(split, str(i), config.seed + len(jobs), background))
    return jobs


class BatchGenerator:
    def __init__(self, family, config: RunConfig, output_dir: str = OUTPUT_PATH,
                 resources: Optional[ResourceProvider] = None):
        self.family = parse_enum(UIFamily, family, 'UI family')
        self.config = config
        resources = resources or ResourceProvider()
        self.scene_generator = SceneGenerator(build_screen(self.family), resources)
        self.background_generator = SceneGenerator(build_screen(self.family, background_only=True), resources)
        self.writer = DatasetWriter(output_dir, config.output_mode, config.out_size)

    def _render(self, job: ImageJob) -> ImageResult:
        generator = self.background_generator if job.background else self.scene_generator
        try:
            scene = generator.generate(random.Random(job.seed))
            self.writer.write_image(job.split, job.name, scene.image, scene.annotations)
        except Exception as e:
            self.writer.discard(job.split, job.name)
            if self.config.fail_fast:
                raise
            logger.warning(f"Skipping image {job.split}/{job.name} (seed {job.seed}): {e}", exc_info=True)
            return ImageResult(job, error=e)
        logger.debug(f"Rendered {job.split}/{job.name} with {len(scene.annotations)} labels")
        return ImageResult(job, scene)

    def _render_all(self, jobs: List[ImageJob]) -> List[ImageResult]:
        results = {}
        with ThreadPoolExecutor(max_workers=self.config.workers) as pool:
            futures = {pool.submit(self._render, job): index for index, job in enumerate(jobs)}
            try:
                for done, future in enumerate(as_completed(futures), start=1):
                    results[futures[future]] = future.result()
                    if done % PROGRESS_EVERY == 0 or done == len(jobs):
                        print(f"  Generated {done}/{len(jobs)}")
            except BaseException:
                for future in futures:
                    future.cancel()
                raise
        return [results[i] for i in range(len(jobs))]

    def run(self) -> BatchReport:
        self.writer.prepare()
        self.scene_generator.prepare()
        self.background_generator.prepare()

        jobs = plan_jobs(self.config)
        results = self._render_all(jobs)

        # labels need the final class table, so they are written once every image is done
        scenes = [r.scene.annotations for r in results if r.ok]
        class_table = ClassTable.build(self.config.class_table_policy, self.family, scenes)
        for result in results:
            if result.ok:
                scene = result.scene
                self.writer.write_labels(result.job.split, result.job.name, scene.annotations,
                                         scene.width, scene.height, class_table)

        self.writer.write_class_table(class_table)
        self.writer.write_data_yaml(class_table)
        if self.config.archive:
            self.writer.write_archive()

        report = BatchReport(class_table, results)
        logger.info(f"Batch done: {report.generated} images, {len(report.failed)} failed")
        return report


def main(argv=None):
    parser = argparse.ArgumentParser(description='Generate labeled synthetic desktop screenshots')
    parser.add_argument('run_mode', help='test (raw, 10 images) or prod (normalized, full splits)')
    parser.add_argument('ui_family', help='mac or windows')
    parser.add_argument('output', nargs='?', default=OUTPUT_PATH, help='Output directory')
    parser.add_argument('--seed', type=int, default=None)
    parser.add_argument('--workers', type=int, default=None)
    parser.add_argument('--output-mode', default=None, help='raw or normalized')
    parser.add_argument('--class-policy', default=None, help='static or first_seen')
    parser.add_argument('--resources', default=None, help='Asset directory')
    parser.add_argument('--fail-fast', action='store_true',
                        help='Abort the batch on the first failing image')
    parser.add_argument('--no-archive', action='store_true')
    parser.add_argument('--verbose', '-v', action='store_true')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    try:
        config = get_run_config(parse_enum(RunMode, args.run_mode, 'run mode'))
        if args.seed is not None:
            config.seed = args.seed
        if args.workers is not None:
            config.workers = args.workers
        if args.output_mode is not None:
            config.output_mode = parse_enum(OutputMode, args.output_mode, 'output mode')
        if args.class_policy is not None:
            config.class_table_policy = parse_enum(ClassTablePolicy, args.class_policy, 'class table policy')
        config.fail_fast = args.fail_fast
        config.archive = not args.no_archive
        config.__post_init__()
        generator = BatchGenerator(args.ui_family, config, args.output, ResourceProvider(args.resources))
    except SceneEngineError as e:
        parser.error(str(e))

    total = config.training_amount + config.validation_amount + config.test_amount
    print(f"Generating {total} {generator.family.value} images into {args.output}...")
    report = generator.run()
    print(f"\nDataset written to {args.output}")
    print(f"  {report.generated} images, {len(report.failed)} failed, {len(report.class_table)} classes")
    return 1 if report.failed else 0


if __name__ == '__main__':
    raise SystemExit(main())
