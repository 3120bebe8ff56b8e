from .class_table import ClassTable
from .encoding import decode_normalized_line, to_normalized_lines, to_raw_records
from .occlusion import clean_annotations, clip_annotations, remove_occluded, split_rectangle

__all__ = [
    'ClassTable',
    'decode_normalized_line', 'to_normalized_lines', 'to_raw_records',
    'clean_annotations', 'clip_annotations', 'remove_occluded', 'split_rectangle',
]
