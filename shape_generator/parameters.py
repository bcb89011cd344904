"""Parameter management for headless shape generation.

A generation request is described by :class:`ShapeParameters`. The loader
operates in two layers ordered from lowest to highest precedence:

1. JSON file (primary) — persistent request description.
2. CLI overrides — runtime tweaks for automation.

Which fields matter depends on the shape; the others are carried along and
ignored by the generator.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple
import logging
import json
import math

__all__ = [
    "SHAPE_NAMES",
    "ShapeParameters",
    "load_json_config",
    "apply_overrides",
    "parse_cli_overrides",
    "load_parameters",
]

SHAPE_NAMES = (
    "circle",
    "ellipse",
    "polygon",
    "square",
    "pentagon",
    "hexagon",
    "octagon",
    "star",
    "ellipsoid",
    "sphere",
    "torus",
)


@dataclass(slots=True)
class ShapeParameters:
    """Canonical set of adjustable generation parameters."""

    shape: str = "circle"
    radius: float = 1.0  # circle/sphere radius, first semi-axis, star tip radius, torus tube
    radius_2: float = 1.0  # second semi-axis, torus hole
    radius_3: float = 1.0  # third ellipsoid semi-axis
    length: float = 1.0  # polygon side length
    sides: int = 6
    branches: int = 5
    points: int = 64  # point count or granularity, depending on the shape

    def validate(self) -> None:
        if self.shape not in SHAPE_NAMES:
            raise ValueError(f"Unknown shape '{self.shape}'")
        for name in ("radius", "radius_2", "radius_3", "length"):
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"{name} must be finite")
        if self.points < 0:
            raise ValueError("Point count cannot be negative")
        if self.sides < 0:
            raise ValueError("Side count cannot be negative")
        if self.branches < 0:
            raise ValueError("Branch count cannot be negative")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ShapeParameters":
        base = cls()
        merged = {**asdict(base), **data}
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(merged) - known)
        if unknown:
            raise KeyError(f"Unknown parameter '{unknown[0]}'")
        for f in fields(cls):
            if f.type in ("int", int):
                merged[f.name] = _as_count(f.name, merged[f.name])
            elif f.type in ("float", float):
                merged[f.name] = _as_number(f.name, merged[f.name])
        params = cls(**merged)
        params.validate()
        return params


def _as_number(name: str, value: Any) -> float:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be a number")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a number") from None


def _as_count(name: str, value: Any) -> int:
    number = _as_number(name, value)
    if not number.is_integer():
        raise ValueError(f"{name} must be a whole number")
    return int(number)


def load_json_config(path: Path | str | None) -> Dict[str, Any]:
    """Load the JSON config file or return an empty dict if no path is given."""

    if path is None:
        return {}
    json_path = Path(path)
    if not json_path.exists():
        raise FileNotFoundError(f"Config file not found: {json_path}")
    data = json.loads(json_path.read_text(encoding="utf-8"))
    if not isinstance(data, Mapping):
        raise ValueError("Top-level JSON config must be an object")
    return dict(data)


def apply_overrides(base: ShapeParameters, overrides: Mapping[str, Any]) -> ShapeParameters:
    """Return a copy of ``base`` with overrides applied."""

    merged = base.to_dict()
    for key, value in overrides.items():
        if key not in merged:
            raise KeyError(f"Unknown parameter '{key}'")
        merged[key] = value
    return ShapeParameters.from_dict(merged)


def parse_cli_overrides(
    args: Optional[Iterable[str]] = None,
) -> Tuple[Dict[str, Any], Any]:
    """Parse CLI-style overrides using argparse conventions."""

    import argparse

    parser = argparse.ArgumentParser(description="Parametric shape point generator")
    parser.add_argument("--config", type=str, help="Path to JSON config", default=None)
    parser.add_argument("--out-dir", type=str, default="exports", help="Export folder")
    parser.add_argument("--name", type=str, default=None, help="Output file stem (defaults to the shape name)")
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "csv", "both"],
        default="json",
        help="Point export format",
    )
    parser.add_argument("--shape", type=str, choices=list(SHAPE_NAMES), help="Shape to generate")
    parser.add_argument("--radius", type=float, help="Primary radius")
    parser.add_argument(
        "--radii",
        type=float,
        nargs=3,
        metavar=("R1", "R2", "R3"),
        help="All three radii (ellipse/ellipsoid semi-axes, torus tube and hole)",
    )
    parser.add_argument("--length", type=float, help="Polygon side length")
    parser.add_argument("--sides", type=int, help="Polygon side count")
    parser.add_argument("--branches", type=int, help="Star branch count")
    parser.add_argument("--points", type=int, help="Point count or granularity")

    parsed, unknown = parser.parse_known_args(args=list(args) if args is not None else None)
    if unknown:
        logging.info("Ignoring unknown CLI args: %s", " ".join(unknown))
    overrides: Dict[str, Any] = {}
    if parsed.shape is not None:
        overrides["shape"] = parsed.shape
    if parsed.radii is not None:
        overrides["radius"], overrides["radius_2"], overrides["radius_3"] = parsed.radii
    if parsed.radius is not None:
        overrides["radius"] = parsed.radius
    if parsed.length is not None:
        overrides["length"] = parsed.length
    if parsed.sides is not None:
        overrides["sides"] = parsed.sides
    if parsed.branches is not None:
        overrides["branches"] = parsed.branches
    if parsed.points is not None:
        overrides["points"] = parsed.points

    return overrides, parsed


def load_parameters(
    config_path: Path | str | None,
    cli_overrides: Mapping[str, Any] | None = None,
) -> ShapeParameters:
    """Load parameters using the JSON → CLI precedence chain."""

    data = load_json_config(config_path)
    params = ShapeParameters.from_dict(data)
    if cli_overrides:
        params = apply_overrides(params, cli_overrides)
    return params
