import math

import numpy as np
import pytest

from hexmatch.transform import Transform, uniform_matrices

TOLERANCE = 1e-5


def test_default_constructor():
    transform = Transform()
    assert np.array_equal(transform.scale, [1, 1])
    assert transform.rotation == 0
    assert np.array_equal(transform.translation, [0, 0])


def test_translation():
    expected = np.array([6.0, 9.0])
    transform = Transform()
    transform.translation += expected
    assert np.array_equal(transform.translation, expected)


@pytest.mark.parametrize("degrees", [365.0, 360.0, 90.0])
def test_rotate(degrees):
    expected = math.radians(degrees)
    transform = Transform()
    transform.rotation += expected
    assert transform.rotation == pytest.approx(expected, abs=TOLERANCE)


def test_scaling():
    expected = np.array([4.0, 2.0])
    transform = Transform()
    transform.scale *= expected
    assert transform.scale[0] == pytest.approx(expected[0], abs=TOLERANCE)
    assert transform.scale[1] == pytest.approx(expected[1], abs=TOLERANCE)


def test_projection_maps_window_to_clip_space():
    width, height = 800.0, 600.0
    data = uniform_matrices(Transform(), (10, 10), 0, width, height)
    centre = data.projection @ np.array([0, 0, 0, 1.0])
    corner = data.projection @ np.array([width / 2, height / 2, 0, 1.0])
    opposite = data.projection @ np.array([-width / 2, -height / 2, 0, 1.0])
    assert centre[:2] == pytest.approx([0, 0])
    assert corner[:2] == pytest.approx([1, 1])
    assert opposite[:2] == pytest.approx([-1, -1])


def test_model_scales_unit_quad_to_size_and_translates():
    transform = Transform(translation=(3, 4))
    data = uniform_matrices(transform, (10, 20), 5, 800, 600)
    origin = data.model @ np.array([0, 0, 0, 1.0])
    half = data.model @ np.array([0.5, 0.5, 0, 1.0])
    assert origin == pytest.approx([3, 4, 5, 1])
    assert half == pytest.approx([3 + 5, 4 + 10, 5, 1])


def test_model_rotation_about_z():
    transform = Transform(rotation=math.pi / 2)
    data = uniform_matrices(transform, (2, 2), 0, 800, 600)
    point = data.model @ np.array([0.5, 0, 0, 1.0])
    assert point[:2] == pytest.approx([0, 1], abs=TOLERANCE)