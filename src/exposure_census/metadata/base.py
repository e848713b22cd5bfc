from __future__ import annotations

from pathlib import Path
from typing import Protocol

from .types import MetadataEntry


class MetadataError(RuntimeError):
    pass


class UnsupportedFormatError(MetadataError):
    pass


class MissingDependencyError(MetadataError):
    pass


class MetadataReader(Protocol):
    def read(self, path: Path) -> list[MetadataEntry]:
        ...
