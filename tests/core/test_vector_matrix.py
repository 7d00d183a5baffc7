from __future__ import annotations

import math

import numpy as np
import pytest

from engine.core.matrix import Matrix4
from engine.core.vector import Euler, Vector3


def _close(a: Vector3, b: Vector3, atol: float = 1e-9) -> None:
    np.testing.assert_allclose(a.as_array(), b.as_array(), atol=atol)


@pytest.mark.smoke
def test_vector_basic_ops_are_pure() -> None:
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-1.0, 0.5, 2.0)
    assert a + b == Vector3(0.0, 2.5, 5.0)
    assert a - b == Vector3(2.0, 1.5, 1.0)
    assert 2 * a == a * 2 == Vector3(2.0, 4.0, 6.0)
    assert -a == Vector3(-1.0, -2.0, -3.0)
    assert a == Vector3(1.0, 2.0, 3.0)  # 元は不変


def test_normalize_unit_and_zero() -> None:
    _close(Vector3(3.0, 4.0, 0.0).normalize(), Vector3(0.6, 0.8, 0.0))
    assert Vector3(0.0, 0.0, 0.0).normalize() == Vector3(0.0, 0.0, 0.0)
    assert math.isclose(Vector3(1.0, 1.0, 1.0).normalize().length(), 1.0)


def test_from_iterable_requires_three() -> None:
    assert Vector3.from_iterable([1, 2, 3]) == Vector3(1.0, 2.0, 3.0)
    with pytest.raises(ValueError):
        Vector3.from_iterable([1, 2])


def test_identity_leaves_points_unchanged() -> None:
    v = Vector3(0.3, -1.2, 4.0)
    assert v.apply_matrix4(Matrix4.identity()) == v
    assert Matrix4() == Matrix4.identity()


def test_matrix_requires_sixteen_and_is_read_only() -> None:
    with pytest.raises(ValueError):
        Matrix4([1.0, 2.0, 3.0])
    m = Matrix4.identity()
    with pytest.raises(ValueError):
        m.elements[0] = 2.0


def test_rotation_y_quarter_turn() -> None:
    m = Matrix4.rotation_y(math.pi / 2)
    _close(Vector3(1.0, 0.0, 0.0).apply_matrix4(m), Vector3(0.0, 0.0, 1.0))
    _close(Vector3(0.0, 1.0, 0.0).apply_matrix4(m), Vector3(0.0, 1.0, 0.0))


def test_rotation_axis_about_y_matches_rotation_y() -> None:
    theta = 0.7
    a = Matrix4.rotation_axis(Vector3(0.0, 1.0, 0.0), theta)
    b = Matrix4.rotation_y(theta)
    np.testing.assert_allclose(a.elements, b.elements, atol=1e-12)


def test_rotations_preserve_length_and_last_row() -> None:
    v = Vector3(0.3, -1.1, 2.0)
    axis = Vector3(1.0, 1.0, 1.0).normalize()
    for m in (
        Matrix4.rotation_y(1.3),
        Matrix4.rotation_axis(axis, -math.pi / 4),
        Matrix4.rotation_from_euler(0.3, 0.5, 0.2),
    ):
        assert math.isclose(v.apply_matrix4(m).length(), v.length(), rel_tol=1e-12)
        np.testing.assert_array_equal(m.elements[[3, 7, 11, 15]], [0.0, 0.0, 0.0, 1.0])


def test_rotation_from_euler_accepts_euler_instance() -> None:
    a = Matrix4.rotation_from_euler(Euler(0.3, 0.5, 0.2))
    b = Matrix4.rotation_from_euler(0.3, 0.5, 0.2)
    assert a == b
    assert Matrix4.rotation_from_euler(0.0, 0.0, 0.0) == Matrix4.identity()


def test_multiply_applies_left_operand_first() -> None:
    a = Matrix4.rotation_from_euler(0.4, 0.0, 0.0)
    b = Matrix4.rotation_y(1.1)
    v = Vector3(0.2, 0.7, -0.5)
    composed = v.apply_matrix4(a.multiply(b))
    sequential = v.apply_matrix4(a).apply_matrix4(b)
    _close(composed, sequential)


def test_multiply_is_associative_and_pure() -> None:
    a = Matrix4.rotation_y(0.3)
    b = Matrix4.rotation_axis(Vector3(1.0, 1.0, 1.0).normalize(), 0.9)
    c = Matrix4.rotation_from_euler(0.1, -0.4, 0.8)
    before = a.elements.copy()
    left = a.multiply(b).multiply(c)
    right = a.multiply(b.multiply(c))
    np.testing.assert_allclose(left.elements, right.elements, atol=1e-12)
    np.testing.assert_array_equal(a.elements, before)
    assert Matrix4.multiply_matrices(a, b) == a.multiply(b)


def test_from_matrix_copies_values() -> None:
    m = Matrix4.rotation_y(0.5)
    c = Matrix4.from_matrix(m)
    assert c == m and c is not m
    assert c.copy() == m


def test_apply_to_points_matches_apply_matrix4() -> None:
    m = Matrix4.rotation_from_euler(0.2, 0.4, 0.1).multiply(Matrix4.rotation_y(0.9))
    vs = [Vector3(1.0, -1.0, 1.0), Vector3(0.5, 0.5, -0.5), Vector3(0.0, 2.0, 0.0)]
    pts = np.array([v.as_tuple() for v in vs])
    got = m.apply_to_points(pts)
    want = np.array([v.apply_matrix4(m).as_tuple() for v in vs])
    np.testing.assert_allclose(got, want, atol=1e-12)


def test_nan_propagates_without_error() -> None:
    out = Vector3(math.nan, 0.0, 0.0).apply_matrix4(Matrix4.rotation_y(0.5))
    assert math.isnan(out.x) and math.isnan(out.z)


def test_rotation_from_euler_golden_elements() -> None:
    m = Matrix4.rotation_from_euler(0.3, 0.5, 0.2)
    # 列優先。列 0..2 が回転ブロック、平行移動なし
    expected = [
        0.86008934, 0.32865183, -0.390172149, 0.0,
        -0.174348741, 0.908145905, 0.380622557, 0.0,
        0.479425539, -0.259343382, 0.838386639, 0.0,
        0.0, 0.0, 0.0, 1.0,
    ]  # fmt: skip
    np.testing.assert_allclose(m.elements, expected, atol=1e-6)
