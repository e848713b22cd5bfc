from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from .base import MetadataError, MissingDependencyError, UnsupportedFormatError
from .types import FieldType, MetadataEntry


try:
    import exifread  # type: ignore
except Exception:  # pragma: no cover - surfaced as MissingDependencyError
    exifread = None


logger = logging.getLogger(__name__)

# exifread prefixes every key with the IFD it came from; maker notes are
# vendor specific and may reuse standard tag ids.
STANDARD_IFDS = ("Image", "EXIF", "Thumbnail", "GPS", "Interoperability")


def _as_values(raw: Any) -> tuple[Any, ...]:
    if isinstance(raw, (list, tuple)):
        return tuple(raw)
    return (raw,)


def entries_from_exifread(tags: Mapping[str, Any]) -> list[MetadataEntry]:
    """Convert an exifread tag dict into entries, keeping its order."""

    entries: list[MetadataEntry] = []
    for key, tag in tags.items():
        ifd, _, _name = key.partition(" ")
        if ifd not in STANDARD_IFDS:
            continue
        if not (hasattr(tag, "tag") and hasattr(tag, "field_type") and hasattr(tag, "values")):
            continue
        try:
            field_type = FieldType(int(tag.field_type))
        except ValueError:
            logger.debug("skipping %s with unknown field type %s", key, tag.field_type)
            continue
        entries.append(
            MetadataEntry(
                tag=int(tag.tag),
                field_type=field_type,
                values=_as_values(tag.values),
                ifd=ifd,
            )
        )
    return entries


class ExifReadReader:
    """Metadata reader backed by the ExifRead library."""

    def __init__(self) -> None:
        if exifread is None:
            raise MissingDependencyError("ExifRead is required for metadata parsing: pip install ExifRead")

    def read(self, path: Path) -> list[MetadataEntry]:
        with path.open("rb") as f:
            try:
                tags = exifread.process_file(f, details=False)
            except Exception as exc:
                raise MetadataError(f"failed to parse EXIF block in {path}: {exc}") from exc

        entries = entries_from_exifread(tags or {})
        if not entries:
            raise UnsupportedFormatError(f"no EXIF metadata found in {path}")
        return entries
