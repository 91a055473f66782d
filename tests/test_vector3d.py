import pytest

from prog3basics.vector3d import Vector3D, dot_product


def test_default_is_zero_vector():
    v = Vector3D()
    assert (v.x, v.y, v.z) == (0.0, 0.0, 0.0)


def test_add_then_subtract_round_trips():
    a = Vector3D(1.0, 2.0, 3.0)
    b = Vector3D(-4.0, 0.5, 6.0)
    assert (a + b) - b == a


def test_addition_is_commutative():
    a = Vector3D(1.0, 2.0, 3.0)
    b = Vector3D(4.0, 5.0, 6.0)
    assert a + b == b + a


def test_adding_zero_is_identity():
    a = Vector3D(7.0, -1.0, 2.5)
    assert a + Vector3D() == a


def test_dot_product_of_orthogonal_axes_is_zero():
    assert dot_product(Vector3D(1.0, 0.0, 0.0), Vector3D(0.0, 1.0, 0.0)) == 0.0


def test_dot_product_is_symmetric():
    a = Vector3D(1.0, -2.0, 3.0)
    b = Vector3D(4.0, 5.0, -6.0)
    assert dot_product(a, b) == dot_product(b, a)


def test_dot_product_with_self_is_squared_length():
    assert dot_product(Vector3D(3.0, 4.0, 0.0), Vector3D(3.0, 4.0, 0.0)) == 25.0


def test_dot_product_is_linear():
    a = Vector3D(1.0, 2.0, 3.0)
    b = Vector3D(-1.0, 0.5, 2.0)
    c = Vector3D(2.0, 2.0, -1.0)
    assert dot_product(a + b, c) == pytest.approx(dot_product(a, c) + dot_product(b, c))