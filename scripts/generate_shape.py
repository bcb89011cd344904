#!/usr/bin/env python3
"""Headless entry point for the shape point generator."""

from __future__ import annotations

import logging
from pathlib import Path
import sys
from typing import List, Optional, Sequence

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from shape_generator import export, parameters, pipeline

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_CONFIG_ERROR = 2


def configure_logging() -> None:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")


def main(argv: Optional[Sequence[str]] = None) -> int:
    configure_logging()
    args = _sanitized_args(sys.argv[1:] if argv is None else argv)
    try:
        overrides, cli = parameters.parse_cli_overrides(args)
        config_path = cli.config if cli.config else _default_config_path()
        params = parameters.load_parameters(config_path, overrides)
    except (ValueError, KeyError, FileNotFoundError) as exc:
        logging.error("Invalid configuration: %s", exc)
        return EXIT_CONFIG_ERROR

    logging.info("Parameters: %s", params.to_dict())
    points = pipeline.generate(params)
    if points is None:
        logging.error("No points generated for shape '%s'", params.shape)
        return EXIT_REJECTED

    out_dir = Path(cli.out_dir)
    stem = cli.name or params.shape
    if cli.format in ("json", "both"):
        export.write_points_json(points, out_dir / f"{stem}.json", params)
    if cli.format in ("csv", "both"):
        export.write_points_csv(points, out_dir / f"{stem}.csv")
    return EXIT_OK


def _sanitized_args(raw: Sequence[str]) -> List[str]:
    return [arg for arg in raw if arg not in {"--", "-"}]


def _default_config_path() -> str | None:
    candidate = REPO_ROOT / "configs" / "base.json"
    if candidate.exists():
        return str(candidate)
    return None


if __name__ == "__main__":
    sys.exit(main())
