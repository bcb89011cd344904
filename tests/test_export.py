import csv
import json

import pytest

from shape_generator import export, shapes
from shape_generator.parameters import ShapeParameters


def test_json_document_round_trips(tmp_path):
    params = ShapeParameters(shape="pentagon", length=2.0, points=15)
    points = shapes.pentagon(2.0, 15)
    destination = tmp_path / "out" / "pentagon.json"

    export.write_points_json(points, destination, params)

    document = json.loads(destination.read_text(encoding="utf-8"))
    assert document["shape"] == "pentagon"
    assert document["count"] == 15
    assert document["parameters"]["length"] == 2.0
    assert export.read_points_json(destination) == points


def test_csv_has_header_and_one_row_per_point(tmp_path):
    points = shapes.circle(1.0, 8)
    destination = tmp_path / "circle.csv"

    export.write_points_csv(points, destination)

    with open(destination, newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["x", "y", "z"]
    assert len(rows) == 9
    assert [float(v) for v in rows[1]] == [1.0, 0.0, 0.0]


def test_read_points_json_rejects_malformed_documents(tmp_path):
    source = tmp_path / "bad.json"
    source.write_text(json.dumps({"points": [[1.0, 2.0]]}), encoding="utf-8")
    with pytest.raises(ValueError):
        export.read_points_json(source)

    source.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
    with pytest.raises(ValueError):
        export.read_points_json(source)


def test_cli_writes_requested_formats(tmp_path, generate_shape_script):
    status = generate_shape_script.main(
        [
            "--shape",
            "sphere",
            "--radius",
            "2",
            "--points",
            "16",
            "--out-dir",
            str(tmp_path),
            "--format",
            "both",
        ]
    )
    assert status == generate_shape_script.EXIT_OK
    assert len(export.read_points_json(tmp_path / "sphere.json")) == 16
    assert (tmp_path / "sphere.csv").exists()


def test_cli_reports_rejected_parameters(tmp_path, generate_shape_script):
    status = generate_shape_script.main(
        ["--shape", "ellipse", "--points", "3", "--out-dir", str(tmp_path)]
    )
    assert status == generate_shape_script.EXIT_REJECTED
    assert not list(tmp_path.iterdir())


def test_cli_reports_configuration_errors(tmp_path, generate_shape_script):
    status = generate_shape_script.main(["--config", str(tmp_path / "missing.json")])
    assert status == generate_shape_script.EXIT_CONFIG_ERROR


def test_cli_reports_non_numeric_config_values(tmp_path, generate_shape_script):
    config = tmp_path / "shape.json"
    config.write_text(json.dumps({"shape": "circle", "points": None}), encoding="utf-8")
    status = generate_shape_script.main(["--config", str(config), "--out-dir", str(tmp_path / "out")])
    assert status == generate_shape_script.EXIT_CONFIG_ERROR
    assert not (tmp_path / "out").exists()
