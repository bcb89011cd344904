import logging
import math

import pytest

from shape_generator import pipeline, shapes
from shape_generator.parameters import SHAPE_NAMES, ShapeParameters


def test_every_shape_name_has_a_generator():
    assert pipeline.available_shapes() == sorted(SHAPE_NAMES)


@pytest.mark.parametrize("name", SHAPE_NAMES)
def test_default_parameters_generate_every_shape(name):
    points = pipeline.generate(ShapeParameters(shape=name))
    assert points
    assert all(math.isfinite(c) for p in points for c in p.to_tuple())


def test_generate_dispatches_with_matching_arguments():
    params = ShapeParameters(shape="torus", radius=5.0, radius_2=2.0, points=16)
    assert pipeline.generate(params) == shapes.circular_tore(5.0, 2.0, 16)

    params = ShapeParameters(shape="star", radius=3.0, branches=6, points=48)
    assert pipeline.generate(params) == shapes.polygonal_star(3.0, 6, 48)


def test_generate_logs_rejected_parameters(caplog):
    params = ShapeParameters(shape="ellipse", radius=10.0, radius_2=5.0, points=3)
    with caplog.at_level(logging.WARNING, logger="shape_generator.pipeline"):
        assert pipeline.generate(params) is None
    assert "rejected" in caplog.text


def test_generate_validates_parameters():
    with pytest.raises(ValueError):
        pipeline.generate(ShapeParameters(shape="cube"))
