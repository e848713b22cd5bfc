from __future__ import annotations

import logging
from pathlib import Path


# ExifRead warns once per file it cannot recognize, which floods a scan of a
# mixed folder; those files are already reported as skipped.
_NOISY_LOGGERS = ("exifread",)


def configure_logging(level: str, log_file: Path | None = None, verbose: bool = False) -> None:
    resolved_level = logging.DEBUG if verbose else getattr(logging, level.upper(), logging.INFO)
    handlers: list[logging.Handler] = [logging.StreamHandler()]

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=resolved_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        handlers=handlers,
        force=True,
    )

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET if verbose else logging.ERROR)
