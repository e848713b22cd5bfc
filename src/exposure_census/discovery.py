from __future__ import annotations

import glob
from pathlib import Path
import re
from typing import Iterator


class PatternError(ValueError):
    pass


_SEPARATORS_RE = re.compile(r"[\\/]")


def _check_ranges(pattern: str) -> None:
    i = 0
    while i < len(pattern):
        if pattern[i] != "[":
            i += 1
            continue
        j = i + 1
        if j < len(pattern) and pattern[j] == "!":
            j += 1
        # A leading "]" is part of the set, not its end.
        if j < len(pattern) and pattern[j] == "]":
            j += 1
        end = pattern.find("]", j)
        if end == -1:
            raise PatternError(f"invalid range pattern at offset {i}: {pattern!r}")
        i = end + 1


def validate_pattern(pattern: str) -> None:
    if not pattern:
        raise PatternError("glob pattern is empty")

    for component in _SEPARATORS_RE.split(pattern):
        if "***" in component:
            raise PatternError(f"wildcards are either regular `*` or recursive `**`: {pattern!r}")
        if "**" in component and component != "**":
            raise PatternError(f"recursive wildcards must form a single path component: {pattern!r}")

    _check_ranges(pattern)


def iter_pattern_paths(pattern: str) -> Iterator[Path]:
    """Validate `pattern` up front, then lazily yield the paths it matches."""

    validate_pattern(pattern)
    return (Path(match) for match in glob.iglob(pattern, recursive=True, include_hidden=True))
