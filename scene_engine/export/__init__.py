from .writer import DatasetWriter

__all__ = ['DatasetWriter']
