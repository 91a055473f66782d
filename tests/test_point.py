from prog3basics.point import Point


def test_coordinates_are_stored():
    p = Point(2.5, -1.0)
    assert (p.x, p.y) == (2.5, -1.0)


def test_add_then_subtract_round_trips():
    p = Point(1.5, 2.0)
    q = Point(-3.0, 4.25)
    assert (p + q) - q == p


def test_addition_is_commutative():
    p = Point(1.0, 2.0)
    q = Point(3.0, 5.0)
    assert p + q == q + p


def test_subtracting_self_is_origin():
    p = Point(7.0, -2.0)
    assert p - p == Point(0.0, 0.0)


def test_equality_compares_both_coordinates():
    assert Point(1.0, 2.0) == Point(1.0, 2.0)
    assert not (Point(1.0, 2.0) == Point(1.0, 3.0))


def test_str_format():
    assert str(Point(1.5, -2)) == "[1.5, -2]"