from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import Callable, Iterable

from .discovery import iter_pattern_paths
from .grouping import GroupCounts, GroupKey
from .metadata import ExifReadReader, MetadataError, MetadataReader, MissingDependencyError, RawExposure
from .metadata.extract import extract_exposure


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileExposure:
    path: Path
    exposure: RawExposure
    key: GroupKey


@dataclass(frozen=True)
class SkippedFile:
    path: Path
    reason: str


@dataclass
class ScanSummary:
    groups: GroupCounts = field(default_factory=GroupCounts)
    files_seen: int = 0
    skipped: list[SkippedFile] = field(default_factory=list)

    @property
    def files_grouped(self) -> int:
        return self.groups.total


class ExposureScanner:
    """Runs files one at a time through parse, extract, normalize and count."""

    def __init__(self, reader: MetadataReader | None = None) -> None:
        self.reader = reader if reader is not None else ExifReadReader()

    def read_exposure(self, path: Path) -> RawExposure | None:
        return extract_exposure(self.reader.read(path))

    def scan(
        self,
        paths: Iterable[Path],
        on_file: Callable[[FileExposure], None] | None = None,
    ) -> ScanSummary:
        summary = ScanSummary()

        for path in paths:
            summary.files_seen += 1
            try:
                exposure = self.read_exposure(path)
            except MissingDependencyError:
                raise
            except (MetadataError, OSError) as exc:
                logger.debug("skipping %s: %s", path, exc)
                summary.skipped.append(SkippedFile(path=path, reason=str(exc)))
                continue

            if exposure is None:
                logger.debug("skipping %s: missing aperture, exposure time or ISO", path)
                summary.skipped.append(SkippedFile(path=path, reason="missing aperture, exposure time or ISO"))
                continue

            key = GroupKey.from_exposure(exposure)
            summary.groups.record(key)
            if on_file is not None:
                on_file(FileExposure(path=path, exposure=exposure, key=key))

        logger.info(
            "scanned %s files: %s grouped into %s groups, %s skipped",
            summary.files_seen,
            summary.files_grouped,
            len(summary.groups),
            len(summary.skipped),
        )
        return summary


def scan_pattern(
    pattern: str,
    reader: MetadataReader | None = None,
    on_file: Callable[[FileExposure], None] | None = None,
) -> ScanSummary:
    paths = iter_pattern_paths(pattern)
    logger.info("scanning files matching %s", pattern)
    return ExposureScanner(reader).scan(paths, on_file=on_file)
