from .base import MetadataError, MetadataReader, MissingDependencyError, UnsupportedFormatError
from .exifread_reader import ExifReadReader
from .extract import extract_exposure
from .types import ExifTag, FieldType, MetadataEntry, RawExposure

__all__ = [
    "MetadataError",
    "MetadataReader",
    "MissingDependencyError",
    "UnsupportedFormatError",
    "ExifReadReader",
    "extract_exposure",
    "ExifTag",
    "FieldType",
    "MetadataEntry",
    "RawExposure",
]
