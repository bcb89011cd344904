"""Export utilities for generated point sets.

Handles the JSON point document (with the generating parameters) and a flat
CSV table. Neither format is read back by the generators; they are hand-off
files for downstream modeling tools.
"""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .parameters import ShapeParameters
from .vec3 import Vector3

__all__ = [
    "points_to_rows",
    "write_points_json",
    "write_points_csv",
    "read_points_json",
]


def points_to_rows(points: Sequence[Vector3]) -> List[Tuple[float, float, float]]:
    return [p.to_tuple() for p in points]


def write_points_json(
    points: Sequence[Vector3],
    destination: Path,
    params: Optional[ShapeParameters] = None,
) -> None:
    """Write the point list, its count and the generating parameters as JSON."""
    document: Dict[str, Any] = {
        "shape": params.shape if params is not None else None,
        "parameters": params.to_dict() if params is not None else {},
        "count": len(points),
        "points": [list(row) for row in points_to_rows(points)],
    }
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(json.dumps(document, indent=2), encoding="utf-8")
    logging.info("Wrote %d points to %s", len(points), destination)


def write_points_csv(points: Sequence[Vector3], destination: Path) -> None:
    """Write one ``x,y,z`` row per point."""
    destination.parent.mkdir(parents=True, exist_ok=True)
    with open(destination, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["x", "y", "z"])
        for x, y, z in points_to_rows(points):
            writer.writerow([repr(x), repr(y), repr(z)])
    logging.info("Points CSV written to %s", destination)


def read_points_json(source: Path) -> List[Vector3]:
    """Load the points of a document written by :func:`write_points_json`."""
    data = json.loads(Path(source).read_text(encoding="utf-8"))
    if not isinstance(data, dict) or not isinstance(data.get("points"), list):
        raise ValueError(f"{source} is not a point document")
    points: List[Vector3] = []
    for index, row in enumerate(data["points"]):
        if not isinstance(row, list) or len(row) != 3:
            raise ValueError(f"Malformed point #{index} in {source}: {row!r}")
        points.append(Vector3.from_iterable(row))
    return points
