# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import math

import numpy as np
import pytest

from densemat.matrix import Matrix
from densemat.vector import Vector


def test_construction_and_access():
    v = Vector(1, 2, 3)
    assert len(v) == 3
    assert v.rows == 3 and v.columns == 1
    assert v.get(0) == 1.0 and v[2] == 3.0
    v.set(1, -5)
    v[0] = 9
    assert list(v) == [9.0, -5.0, 3.0]
    assert Vector.zeros(2).tolist() == [0.0, 0.0]
    assert Vector.filled(3, 1.5).tolist() == [1.5, 1.5, 1.5]
    np.testing.assert_array_equal(Vector.from_numpy(np.arange(4)).to_numpy(), np.arange(4))
    with pytest.raises(ValueError):
        Vector()


def test_index_bounds():
    v = Vector(1, 2, 3)
    for bad in (-1, 3, 10):
        with pytest.raises(ValueError):
            v.get(bad)
        with pytest.raises(ValueError):
            v.set(bad, 0.0)


def test_from_matrix_shares_storage():
    m = Matrix(3, 1, [1, 2, 3])
    v = Vector.from_matrix(m)
    v.set(0, 10)
    assert m.get(0, 0) == 10.0
    assert v.as_matrix() is m
    with pytest.raises(ValueError):
        Vector.from_matrix(Matrix(3, 2))


def test_basis():
    assert Vector.basis(3, 0).tolist() == [1.0, 0.0, 0.0]
    assert Vector.basis(4, 3).tolist() == [0.0, 0.0, 0.0, 1.0]
    for length, coordinate in [(3, 3), (3, -1), (0, 0)]:
        with pytest.raises(ValueError):
            Vector.basis(length, coordinate)


def test_vec_add_scale_subtract():
    assert Vector(5, 5, 5) == Vector(1, 1, 1).add(Vector(4, 4, 4))
    assert Vector(10, 10, 10) == Vector(2, 2, 2).scale(5)
    assert Vector(-3, 0, 3) == Vector(1, 2, 3).subtract(Vector(4, 2, 0))
    a, b = Vector(1, 2), Vector(3, 5)
    assert isinstance(a + b, Vector)
    assert a + b == Vector(4, 7)
    assert b - a == Vector(2, 3)
    assert 2 * a == a * 2 == Vector(2, 4)
    assert -a == Vector(-1, -2)
    with pytest.raises(ValueError):
        a.add(Vector(1, 2, 3))


def test_dot_product():
    assert 75 == Vector(5, 5, 5).dot_product(Vector(5, 5, 5))
    rng = np.random.default_rng(2)
    for _ in range(10):
        a = Vector.from_numpy(rng.standard_normal(6))
        b = Vector.from_numpy(rng.standard_normal(6))
        assert a.dot_product(b) == pytest.approx(b.dot_product(a), rel=1e-14)
        assert a.dot_product(b) == pytest.approx(float(a.to_numpy() @ b.to_numpy()))
    with pytest.raises(ValueError):
        Vector(1, 2).dot_product(Vector(1, 2, 3))


def test_length():
    # Test with perfect squares
    for i in range(3):
        assert Vector.basis(3, i).scale(4).length() == 4.0
    assert Vector(1, 1, 1).length() == pytest.approx(1.7320508076)
    assert Vector(3, 4).square_length() == 25.0
    assert Vector(0, 0).distance(Vector(3, 4)) == 5.0
    assert Vector(1, 1).distance(Vector(1, 1)) == 0.0


def test_cross_product():
    assert Vector(-10, 4, 8) == Vector(2, -1, 3).cross_product(Vector(0, 4, -2))
    # Canonical right-hand basis check, should result in vector along k hat
    assert Vector(0, 0, 1) == Vector(1, 0, 0).cross_product(Vector(0, 1, 0))
    assert Vector(-15, -2, 39) == Vector(3, -3, 1).cross_product(Vector(4, 9, 2))
    # Parallel vectors, result should be 0 vector
    assert Vector(0, 0, 0) == Vector(2, 4, 6).cross_product(Vector(1, 2, 3))
    assert Vector(0, 0, 0) == Vector(0, 0, 0).cross_product(Vector(5, -7, 1))


def test_cross_product_properties():
    rng = np.random.default_rng(3)
    for _ in range(10):
        a = Vector.from_numpy(rng.standard_normal(3))
        b = Vector.from_numpy(rng.standard_normal(3))
        axb = a.cross_product(b)
        np.testing.assert_allclose(axb.to_numpy(), np.cross(a.to_numpy(), b.to_numpy()))
        assert axb.allclose(b.cross_product(a).scale(-1), tol=1e-12)
        assert abs(a.dot_product(axb)) < 1e-12
        assert abs(b.dot_product(axb)) < 1e-12


def test_cross_product_requires_three_components():
    with pytest.raises(ValueError):
        Vector(1, 2).cross_product(Vector(3, 4))
    with pytest.raises(ValueError):
        Vector(1, 2, 3, 4).cross_product(Vector(1, 2, 3, 4))
    with pytest.raises(ValueError):
        Vector(1, 2, 3).cross_product(Vector(1, 2, 3, 4))


def test_normalize_and_direction():
    u = Vector(3, 4).normalize()
    assert u.allclose(Vector(0.6, 0.8), tol=1e-12)
    rng = np.random.default_rng(4)
    for _ in range(10):
        v = Vector.from_numpy(rng.uniform(-5, 5, size=5))
        assert v.normalize().length() == pytest.approx(1.0)
    d = Vector(1, 1, 1).direction(Vector(1, 1, 3))
    assert d.allclose(Vector(0, 0, 1), tol=1e-12)
    with pytest.raises(ValueError):
        Vector.zeros(3).normalize()
    with pytest.raises(ValueError):
        Vector(1e-5, 0).normalize()
    assert Vector(1e-5, 0).normalize(tol=1e-9).allclose(Vector(1, 0), tol=1e-12)
    with pytest.raises(ValueError):
        Vector(2, 2).direction(Vector(2, 2))


def test_project():
    assert Vector(3, 4).project(Vector(1, 0)) == Vector(3, 0)
    assert Vector(1, 2, 3).project(Vector(1, 1, 1)) == Vector(2, 2, 2)
    p = Vector(6, 0, 0).project(Vector(1, 1, 1))
    residual = Vector(6, 0, 0) - p
    assert abs(residual.dot_product(Vector(1, 1, 1))) < 1e-12
    with pytest.raises(ValueError):
        Vector(1, 2).project(Vector(0, 0))


@pytest.mark.parametrize(
    "u_vals, v_vals, expected",
    [
        ((1, 0, 0), (0, 1, 0), math.pi / 2),
        ((1, 2, 3), (1, 2, 3), 0.0),
        ((1, 0, 0), (-1, 0, 0), math.pi),
        ((1, 0, 0), (1, 1, 0), math.pi / 4),
        ((2, -1, 3), (0, 4, -2), 2.21131864),
        ((123456, -98765, 50), (-23456, 8765, 100), 2.824433709487314),
        ((3, -3, 1), (4, 9, 2), 1.8720947029995874),
    ],
)
def test_angle(u_vals, v_vals, expected):
    u, v = Vector(*u_vals), Vector(*v_vals)
    assert u.angle(v) == pytest.approx(expected, abs=1e-6)


def test_angle_small_vectors_and_zero_length():
    u, v = Vector(1e-8, 0, 0), Vector(0, 1e-8, 0)
    assert u.angle(v, tol=1e-12) == pytest.approx(math.pi / 2)
    with pytest.raises(ValueError):
        u.angle(v)
    assert Vector(1, 0).cosine_similarity(Vector(-2, 0)) == -1.0


def test_transpose_and_matrix_view():
    v = Vector(1, 2, 3)
    row = v.transpose()
    assert row.shape == (1, 3)
    assert (row @ v).tolist() == [14.0]
    assert str(v) == "[ 1.0000 ]\n[ 2.0000 ]\n[ 3.0000 ]"
    assert repr(v) == "Vector(1.0, 2.0, 3.0)"


def test_sequence_components_rejected():
    with pytest.raises(TypeError):
        Vector([1, 2, 3])
    with pytest.raises(TypeError):
        Vector(np.array([4.0, 5.0]))
    with pytest.raises(TypeError):
        Vector(1, "2", 3)
    assert Vector(np.float64(1.5), np.int64(2)).tolist() == [1.5, 2.0]
    assert Vector.from_numpy(np.array([4.0, 5.0])).tolist() == [4.0, 5.0]


def test_cross_product_rejects_non_vector():
    with pytest.raises(TypeError):
        Vector(1, 2, 3).cross_product([4, 5, 6])
    with pytest.raises(TypeError):
        Vector(1, 2, 3).cross_product(Matrix(3, 1, [4, 5, 6]))
