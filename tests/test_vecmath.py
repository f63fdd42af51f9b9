import math

import pytest

from chiprunner.vecmath import (
    Matrix4x4,
    Vector2,
    Vector3,
    Vector4,
    degrees_to_radians,
    flatten,
    lerp,
    make_affine_matrix,
    make_rotate_x_matrix,
    make_rotate_y_matrix,
    make_rotate_z_matrix,
    matrix_multiply,
    transform,
)


def _assert_matrix_close(a, b):
    assert flatten(a) == pytest.approx(flatten(b), abs=1e-9)


def _assert_vec_close(a, b):
    assert tuple(a) == pytest.approx(tuple(b), abs=1e-9)


def test_vector_arithmetic_invariants():
    a = Vector3(1.5, -2.0, 3.25)
    b = Vector3(0.5, 4.0, -1.0)
    assert (a + b) - b == a
    assert a * 2 == a + a
    assert 2 * a == a * 2
    assert -a + a == Vector3()
    assert (a / 2) * 2 == a
    assert +a == a and +a is not a


def test_vector_rejects_non_numeric_scalar():
    with pytest.raises(TypeError):
        Vector3(1, 2, 3) * "x"


def test_vector_iteration():
    assert list(Vector2(1, 2)) == [1, 2]
    assert list(Vector4(1, 2, 3, 4)) == [1, 2, 3, 4]


def test_matrix_shape_validated():
    with pytest.raises(ValueError):
        Matrix4x4(((1.0, 2.0),))
    with pytest.raises(ValueError):
        Matrix4x4.from_values(1.0, 2.0)


def test_identity_is_neutral():
    m = make_affine_matrix(Vector3(2, 3, 4), Vector3(0.3, 0.2, 0.1), Vector3(5, 6, 7))
    _assert_matrix_close(matrix_multiply(m, Matrix4x4.identity()), m)
    _assert_matrix_close(Matrix4x4.identity() @ m, m)


@pytest.mark.parametrize("maker", [make_rotate_x_matrix, make_rotate_y_matrix, make_rotate_z_matrix])
def test_rotation_inverse(maker):
    angle = 0.7
    _assert_matrix_close(maker(angle) @ maker(-angle), Matrix4x4.identity())


@pytest.mark.parametrize("maker", [make_rotate_x_matrix, make_rotate_y_matrix, make_rotate_z_matrix])
def test_rotation_preserves_length(maker):
    v = Vector3(1.0, 2.0, -3.0)
    rotated = transform(v, maker(1.1))
    assert math.hypot(*rotated) == pytest.approx(math.hypot(*v))


def test_rotate_z_quarter_turn():
    rotated = transform(Vector3(1.0, 0.0, 0.0), make_rotate_z_matrix(math.pi / 2))
    _assert_vec_close(rotated, Vector3(0.0, 1.0, 0.0))


def test_affine_with_neutral_scale_and_rotation_translates():
    v = Vector3(1.0, -2.0, 3.0)
    t = Vector3(4.0, 5.0, -6.0)
    m = make_affine_matrix(Vector3(1, 1, 1), Vector3(), t)
    _assert_vec_close(transform(v, m), v + t)


def test_affine_scale_then_translate():
    v = Vector3(1.0, -2.0, 3.0)
    t = Vector3(0.5, 0.25, 1.0)
    m = make_affine_matrix(Vector3(3, 3, 3), Vector3(), t)
    _assert_vec_close(transform(v, m), v * 3 + t)


def test_affine_rotation_order_is_z_x_y():
    rot = Vector3(0.3, 0.5, 0.9)
    expected = make_rotate_z_matrix(rot.z) @ make_rotate_x_matrix(rot.x) @ make_rotate_y_matrix(rot.y)
    _assert_matrix_close(make_affine_matrix(Vector3(1, 1, 1), rot, Vector3()), expected)


def test_lerp_endpoints():
    a = Vector3(1, 2, 3)
    b = Vector3(-4, 8, 0)
    assert lerp(a, b, 0.0) == a
    assert lerp(a, b, 1.0) == b
    assert lerp(2.0, 4.0, 0.5) == pytest.approx(3.0)


def test_lerp_mixed_types_rejected():
    with pytest.raises(TypeError):
        lerp(Vector3(), 1.0, 0.5)


def test_degrees_to_radians():
    assert degrees_to_radians(180.0) == pytest.approx(math.pi)
    assert degrees_to_radians(90.0) * 2 == pytest.approx(degrees_to_radians(180.0))