import math

import pytest

from enginecore.matrix4x4 import Matrix4x4
from enginecore.quaternion import Quaternion
from enginecore.transform3d import (
    Transform3D,
    extract_position,
    homogeneous,
    homogeneous_vector,
    make_affine_matrix,
    make_rotate_matrix,
    make_rotate_x_matrix,
    make_rotate_y_matrix,
    make_rotate_z_matrix,
    make_scale_matrix,
    make_translate_matrix,
)
from enginecore.vector3 import BASIS, BASIS_X, BASIS_Y, BASIS_Z, ZERO, Vector3


def assert_vec(actual, expected, tol=1e-6):
    assert actual.x == pytest.approx(expected.x, abs=tol)
    assert actual.y == pytest.approx(expected.y, abs=tol)
    assert actual.z == pytest.approx(expected.z, abs=tol)


def assert_matrix(actual, expected, tol=1e-6):
    for row_a, row_e in zip(actual, expected):
        assert list(row_a) == pytest.approx(list(row_e), abs=tol)


def test_default_transform_is_identity():
    t = Transform3D()
    assert t.scale == BASIS
    assert t.translate == ZERO
    assert t.create_matrix() == Matrix4x4.identity()


def test_rotation_setter_normalizes():
    t = Transform3D()
    t.rotation = Quaternion.from_components(0, 0, 3, 4)
    assert t.rotation.length() == pytest.approx(1.0)


def test_plus_translate():
    t = Transform3D(translate=Vector3(1, 2, 3))
    t.plus_translate(Vector3(1, 1, 1))
    assert t.translate == Vector3(2, 3, 4)


def test_copy_from():
    source = Transform3D(Vector3(2, 2, 2), Quaternion.angle_axis(BASIS_Y, 0.3), Vector3(1, 0, 0))
    target = Transform3D()
    target.copy_from(source)
    assert target.create_matrix() == source.create_matrix()


def test_extract_position_of_create_matrix():
    translate = Vector3(4, -5, 6)
    t = Transform3D(Vector3(2, 3, 4), Quaternion.euler_radian(0.3, 0.1, 0.2), translate)
    assert extract_position(t.create_matrix()) == translate


def test_translate_matrix_moves_point():
    m = make_translate_matrix(1, 2, 3)
    assert_vec(homogeneous(ZERO, m), Vector3(1, 2, 3))


def test_homogeneous_vector_ignores_translation():
    m = make_translate_matrix(Vector3(7, 8, 9))
    assert_vec(homogeneous_vector(BASIS_X, m), BASIS_X)


def test_homogeneous_zero_w_raises():
    m = Matrix4x4()
    with pytest.raises(ValueError):
        homogeneous(BASIS_X, m)


def test_scale_matrix_scales_point():
    m = make_scale_matrix(Vector3(2, 3, 4))
    assert_vec(homogeneous(BASIS, m), Vector3(2, 3, 4))


def test_rotate_x_maps_y_to_z():
    assert_vec(homogeneous(BASIS_Y, make_rotate_x_matrix(math.pi / 2)), BASIS_Z)


def test_rotate_y_maps_z_to_x():
    assert_vec(homogeneous(BASIS_Z, make_rotate_y_matrix(math.pi / 2)), BASIS_X)


def test_rotate_z_maps_x_to_y():
    assert_vec(homogeneous(BASIS_X, make_rotate_z_matrix(math.pi / 2)), BASIS_Y)


def test_rotate_matrix_composition_order():
    expected = make_rotate_x_matrix(0.2) @ make_rotate_y_matrix(0.4) @ make_rotate_z_matrix(0.6)
    assert make_rotate_matrix(0.2, 0.4, 0.6) == expected
    assert make_rotate_matrix(Vector3(0.2, 0.4, 0.6)) == expected


def test_rotate_matrix_missing_argument_raises():
    with pytest.raises(TypeError):
        make_rotate_matrix(0.2, 0.4)


def test_affine_quaternion_matches_scale_translate_without_rotation():
    scale = Vector3(2, 3, 4)
    translate = Vector3(5, 6, 7)
    expected = make_scale_matrix(scale) @ make_translate_matrix(translate)
    assert_matrix(make_affine_matrix(scale, Quaternion(), translate), expected)


def test_affine_euler_matches_quaternion_for_single_axis():
    scale = Vector3(1, 2, 3)
    translate = Vector3(-1, 0, 2)
    by_euler = make_affine_matrix(scale, Vector3(0.7, 0, 0), translate)
    by_quaternion = make_affine_matrix(scale, Quaternion.euler_radian(0.7, 0, 0), translate)
    assert_matrix(by_euler, by_quaternion)


def test_quaternion_matrix_agrees_with_rotate():
    q = Quaternion.euler_radian(0.3, -0.8, 1.1)
    v = Vector3(1, -2, 0.5)
    assert_vec(homogeneous(v, q.to_matrix()), q.rotate(v))


def test_inverse_of_affine_undoes_it():
    t = Transform3D(Vector3(2, 1, 3), Quaternion.euler_radian(0.4, 0.2, -0.5), Vector3(1, 2, 3))
    m = t.create_matrix()
    p = Vector3(0.5, -1, 2)
    assert_vec(homogeneous(homogeneous(p, m), m.inverse()), p, tol=1e-5)