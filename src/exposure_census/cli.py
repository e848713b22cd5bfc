from __future__ import annotations

import argparse
from fractions import Fraction
import json
import logging
import math
from pathlib import Path
import sys
from typing import Any

from exposure_census.config import DEFAULT_CONFIG_PATH, load_config
from exposure_census.grouping import GroupKey
from exposure_census.metadata import ExifReadReader, MetadataReader
from exposure_census.scan import ExposureScanner, FileExposure, scan_pattern
from exposure_census.shutter import closest_shutter_speed
from exposure_census.utils.formatting import format_aperture, shutter_seconds_to_fraction
from exposure_census.utils.logging_utils import configure_logging


logger = logging.getLogger(__name__)


def _seconds_arg(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        pass
    try:
        return float(Fraction(text))
    except (ValueError, ZeroDivisionError) as exc:
        raise argparse.ArgumentTypeError(f"not a duration in seconds: {text!r}") from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="exposure-census")
    sub = parser.add_subparsers(dest="command", required=True)

    scan = sub.add_parser("scan", help="Count files per aperture / shutter speed / ISO combination")
    scan.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Path to YAML or JSON config")
    scan.add_argument("--per-file", action="store_true", help="Also list every grouped file")
    scan.add_argument("--json", action="store_true", help="Emit machine-readable JSON")
    scan.add_argument("-v", "--verbose", action="store_true", help="Log skipped files and other debug detail")

    inspect = sub.add_parser("inspect", help="Show the exposure values read from one file")
    inspect.add_argument("input", help="Image file path")
    inspect.add_argument("--json", action="store_true", help="Emit machine-readable JSON")
    inspect.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    normalize = sub.add_parser("normalize", help="Snap an exposure time to the nearest standard shutter speed")
    normalize.add_argument("seconds", type=_seconds_arg, help="Exposure time, e.g. 0.004 or 1/250")

    return parser


def _make_reader() -> MetadataReader:
    return ExifReadReader()


def _json_number(value: float) -> float | str:
    # NaN and infinities are not valid JSON numbers.
    if math.isfinite(value):
        return value
    return repr(value)


def _print_json(payload: dict[str, Any]) -> None:
    print(json.dumps(payload, indent=2, allow_nan=False))


def _group_row(key: GroupKey, count: int) -> dict[str, Any]:
    return {
        "aperture": _json_number(key.aperture),
        "shutter": key.shutter_label,
        "iso": key.iso,
        "count": count,
    }


def _file_line(item: FileExposure) -> str:
    return (
        f'File: "{item.path.name}", f/{format_aperture(item.key.aperture)}, '
        f"exposure:{item.key.shutter_label}, ISO:{item.key.iso}"
    )


def _cmd_scan(args: argparse.Namespace) -> int:
    config = load_config(args.config)
    configure_logging(config.log_level, config.log_file, verbose=args.verbose)

    files: list[dict[str, Any]] = []

    def on_file(item: FileExposure) -> None:
        if args.json:
            files.append(
                {
                    "path": str(item.path),
                    "aperture": _json_number(item.exposure.aperture),
                    "shutter_s": _json_number(item.exposure.shutter_s),
                    "shutter": item.key.shutter_label,
                    "iso": item.exposure.iso,
                }
            )
        else:
            print(_file_line(item))

    summary = scan_pattern(config.filepath, reader=_make_reader(), on_file=on_file if args.per_file else None)
    groups = summary.groups.sorted_items()

    if args.json:
        payload: dict[str, Any] = {
            "pattern": config.filepath,
            "files_seen": summary.files_seen,
            "files_grouped": summary.files_grouped,
            "skipped": [{"path": str(s.path), "reason": s.reason} for s in summary.skipped],
            "groups": [_group_row(key, count) for key, count in groups],
        }
        if args.per_file:
            payload["files"] = files
        _print_json(payload)
        return 0

    for key, count in groups:
        print(
            f"f/{format_aperture(key.aperture)}, exposure:{key.shutter_label}, "
            f"ISO:{key.iso}, count:{count}"
        )
    return 0


def _cmd_inspect(args: argparse.Namespace) -> int:
    configure_logging("INFO", verbose=args.verbose)

    input_path = Path(args.input).expanduser().resolve()
    exposure = ExposureScanner(_make_reader()).read_exposure(input_path)
    if exposure is None:
        print(f"no aperture/exposure time/ISO found in {input_path}", file=sys.stderr)
        return 1

    label = closest_shutter_speed(exposure.shutter_s)
    if args.json:
        payload = {
            "path": str(input_path),
            "aperture": _json_number(exposure.aperture),
            "shutter_s": _json_number(exposure.shutter_s),
            "shutter": label,
            "iso": exposure.iso,
        }
        _print_json(payload)
        return 0

    raw_shutter = shutter_seconds_to_fraction(exposure.shutter_s) or repr(exposure.shutter_s)
    print(f"File: {input_path}")
    print(f"Aperture: f/{format_aperture(exposure.aperture)}")
    print(f"Exposure: {raw_shutter} s -> {label}")
    print(f"ISO: {exposure.iso}")
    return 0


def _cmd_normalize(args: argparse.Namespace) -> int:
    print(closest_shutter_speed(args.seconds))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == "scan":
            return _cmd_scan(args)
        if args.command == "inspect":
            return _cmd_inspect(args)
        if args.command == "normalize":
            return _cmd_normalize(args)

        parser.error(f"unknown command: {args.command}")
        return 2
    except Exception as exc:
        logger.exception("fatal error")
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
