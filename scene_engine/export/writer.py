"""
Dataset writer.

Lays out ``training``/``validation``/``test`` split directories, writes one
image plus label file per scene in the configured output mode, and finishes
the batch with ``classes.json``, a YOLO ``data.yaml`` and ``data.zip``.
"""
import json
import logging
import os
import shutil
import zipfile
from typing import List

import cv2
import numpy as np
from PIL import Image, ImageDraw

from ..annotation.class_table import ClassTable
from ..annotation.encoding import to_normalized_lines, to_raw_records
from ..config import OUT_SIZE, TEST_PATH, TRAIN_PATH, VALIDATE_PATH
from ..errors import ConfigurationError
from ..models.annotation import Annotation
from ..models.enums import OutputMode
from ..render.fonts import get_font

logger = logging.getLogger(__name__)

SPLITS = (TRAIN_PATH, VALIDATE_PATH, TEST_PATH)
OVERLAY_COLOR = (255, 0, 0)


def draw_overlay(image: Image.Image, annotations: List[Annotation]) -> Image.Image:
    """Copy of ``image`` with every box outlined and its class name at the top-left corner."""
    overlay = image.convert('RGB')
    draw = ImageDraw.Draw(overlay)
    font = get_font(14)
    for annotation in annotations:
        draw.rectangle(annotation.rect.as_box(), outline=OVERLAY_COLOR, width=2)
        draw.text((annotation.rect.x, annotation.rect.y), annotation.class_name, font=font, fill=OVERLAY_COLOR)
    return overlay


def resize_square(image: Image.Image, size: int) -> Image.Image:
    pixels = np.array(image.convert('RGB'))
    resized = cv2.resize(pixels, (size, size), interpolation=cv2.INTER_AREA)
    return Image.fromarray(resized)


class DatasetWriter:
    def __init__(self, output_dir: str, output_mode: OutputMode, out_size: int = OUT_SIZE):
        if not isinstance(output_mode, OutputMode):
            raise ConfigurationError(f"Unknown output mode: {output_mode}")
        self.output_dir = output_dir
        self.output_mode = output_mode
        self.out_size = out_size

    def prepare(self) -> None:
        """Recreate the output directory with empty split directories."""
        if os.path.exists(self.output_dir):
            shutil.rmtree(self.output_dir)
        for split in SPLITS:
            os.makedirs(self.split_dir(split), exist_ok=True)

    def split_dir(self, split: str) -> str:
        return os.path.join(self.output_dir, split)

    def base_path(self, split: str, name: str) -> str:
        return os.path.join(self.split_dir(split), name)

    def write_image(self, split: str, name: str, image: Image.Image,
                    annotations: List[Annotation]) -> str:
        path = self.base_path(split, name)
        if self.output_mode == OutputMode.RAW:
            overlay = draw_overlay(image, annotations)
            image.convert('RGB').save(f"{path}.png")
            overlay.save(f"{path}_annotated.png")
        else:
            resize_square(image, self.out_size).save(f"{path}.png")
        return f"{path}.png"

    def discard(self, split: str, name: str) -> None:
        """Remove whatever was already written for one image."""
        path = self.base_path(split, name)
        for suffix in ('.png', '_annotated.png', '.txt'):
            if os.path.exists(path + suffix):
                os.remove(path + suffix)

    def write_labels(self, split: str, name: str, annotations: List[Annotation],
                     width: float, height: float, class_table: ClassTable) -> str:
        path = f"{self.base_path(split, name)}.txt"
        with open(path, 'w') as f:
            if self.output_mode == OutputMode.RAW:
                json.dump(to_raw_records(annotations), f)
            else:
                for line in to_normalized_lines(annotations, width, height, class_table):
                    f.write(f"{line}\n")
        return path

    def write_class_table(self, class_table: ClassTable) -> str:
        path = os.path.join(self.output_dir, 'classes.json')
        with open(path, 'w') as f:
            f.write(class_table.to_json())
        return path

    def write_data_yaml(self, class_table: ClassTable) -> str:
        yaml_path = os.path.join(self.output_dir, 'data.yaml')
        with open(yaml_path, 'w') as f:
            f.write(f"path: {os.path.abspath(self.output_dir)}\n")
            f.write(f"train: {TRAIN_PATH}\n")
            f.write(f"val: {VALIDATE_PATH}\n")
            f.write(f"test: {TEST_PATH}\n")
            f.write(f"nc: {len(class_table)}\n")
            f.write(f"names: {class_table.names}\n")
        return yaml_path

    def write_archive(self) -> str:
        """Bundle the split directories and ``classes.json`` into ``data.zip``."""
        zip_path = os.path.join(self.output_dir, 'data.zip')
        with zipfile.ZipFile(zip_path, 'w', compression=zipfile.ZIP_DEFLATED, compresslevel=9) as archive:
            for split in SPLITS:
                split_dir = self.split_dir(split)
                archive.write(split_dir, split)
                for root, _, files in os.walk(split_dir):
                    for file_name in sorted(files):
                        full_path = os.path.join(root, file_name)
                        archive.write(full_path, os.path.join(split, os.path.relpath(full_path, split_dir)))
            archive.write(os.path.join(self.output_dir, 'classes.json'), 'classes.json')
        logger.info(f"Archive written to {zip_path}")
        return zip_path
