import math

import pytest

from enginecore.matrix3x3 import Matrix3x3
from enginecore.vector2 import Vector2
from enginecore.transform2d import (
    Transform2D,
    homogeneous,
    homogeneous_vector,
    make_affine_matrix,
    make_rotate_matrix,
    make_rotate_matrix_sin_cos,
    make_scale_matrix,
    make_translate_matrix,
)


def assert_matrix_close(actual, expected):
    assert actual.shape == expected.shape
    for row_a, row_e in zip(actual, expected):
        assert list(row_a) == pytest.approx(list(row_e), abs=1e-9)


def test_default_transform_is_identity():
    assert Transform2D().matrix() == Matrix3x3.identity()


def test_affine_equals_scale_rotate_translate_product():
    scale = Vector2(2.0, 3.0)
    translate = Vector2(-4.0, 7.5)
    theta = 0.7
    expected = make_scale_matrix(scale) @ make_rotate_matrix(theta) @ make_translate_matrix(translate)
    assert_matrix_close(make_affine_matrix(scale, theta, translate), expected)


def test_rotate_matches_sin_cos_variant():
    theta = 1.2
    assert_matrix_close(
        make_rotate_matrix(theta),
        make_rotate_matrix_sin_cos(math.sin(theta), math.cos(theta)),
    )


def test_scale_matrix_accepts_vector_or_numbers():
    assert make_scale_matrix(Vector2(2.0, 5.0)) == make_scale_matrix(2.0, 5.0)


def test_scale_matrix_needs_both_numbers():
    with pytest.raises(TypeError):
        make_scale_matrix(2.0)


def test_quarter_turn_maps_x_to_y():
    result = homogeneous(Vector2(1.0, 0.0), make_rotate_matrix(math.pi / 2))
    assert tuple(result) == pytest.approx((0.0, 1.0), abs=1e-9)


def test_homogeneous_applies_translation():
    point = Vector2(1.5, -2.0)
    result = homogeneous(point, make_translate_matrix(3.0, 4.0))
    assert tuple(result) == pytest.approx((point.x + 3.0, point.y + 4.0))


def test_homogeneous_vector_ignores_translation():
    direction = Vector2(1.5, -2.0)
    assert homogeneous_vector(direction, make_translate_matrix(3.0, 4.0)) == direction


def test_homogeneous_zero_w_raises():
    with pytest.raises(ValueError):
        homogeneous(Vector2(1.0, 1.0), Matrix3x3())
    with pytest.raises(ValueError):
        homogeneous_vector(Vector2(1.0, 1.0), Matrix3x3())


def test_matrix4x4_agrees_with_matrix():
    transform = Transform2D(Vector2(2.0, 0.5), 0.9, Vector2(10.0, -3.0))
    small = transform.matrix()
    big = transform.matrix4x4()
    for r in range(2):
        assert list(big[r][:2]) == pytest.approx(list(small[r][:2]), abs=1e-6)
    assert list(big[3][:2]) == pytest.approx(list(small[2][:2]))
    assert big[2][2] == pytest.approx(1.0)
    assert big[3][3] == pytest.approx(1.0)


def test_matrix4x4_padding_embeds_3x3():
    transform = Transform2D(Vector2(2.0, 3.0), 0.4, Vector2(1.0, 2.0))
    padded = transform.matrix4x4_padding()
    small = transform.matrix()
    for r in range(3):
        assert padded[r][:3] == small[r]
        assert padded[r][3] == 0.0
    assert padded[3] == (0.0, 0.0, 0.0, 0.0)


def test_plus_translate_accumulates():
    transform = Transform2D()
    transform.plus_translate(Vector2(1.0, 2.0))
    transform.plus_translate(Vector2(3.0, -1.0))
    assert transform.translate == Vector2(1.0, 2.0) + Vector2(3.0, -1.0)


def test_copy_from_takes_values_and_stays_independent():
    source = Transform2D(Vector2(2.0, 2.0), 0.3, Vector2(5.0, 6.0))
    target = Transform2D()
    target.copy_from(source)
    assert target == source
    target.plus_translate(Vector2(1.0, 1.0))
    assert source.translate == Vector2(5.0, 6.0)