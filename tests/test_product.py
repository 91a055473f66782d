import pytest

from prog3basics.product import Product, compare_by_value


def test_fields_are_stored():
    p = Product("item_a", 10.0, 2.0)
    assert (p.name, p.price, p.weight) == ("item_a", 10.0, 2.0)


def test_equality_ignores_name():
    assert Product("a", 5.0, 1.0) == Product("b", 5.0, 1.0)
    assert not (Product("a", 5.0, 1.0) == Product("a", 5.0, 2.0))


def test_equal_products_hash_alike():
    assert hash(Product("a", 5.0, 1.0)) == hash(Product("b", 5.0, 1.0))


def test_less_than_needs_both_smaller():
    small = Product("s", 1.0, 1.0)
    big = Product("b", 2.0, 2.0)
    mixed = Product("m", 0.5, 3.0)
    assert small < big
    assert not (big < small)
    assert not (mixed < big)
    assert not (small < small)


def test_compare_by_value_lower_ratio_first_is_false():
    item_b = Product("item_b", 15.0, 15.0)
    item_a = Product("item_a", 10.0, 2.0)
    assert compare_by_value(item_b, item_a) is False
    assert compare_by_value(item_a, item_b) is True


def test_compare_by_value_equal_ratio_is_true():
    p = Product("p", 4.0, 2.0)
    q = Product("q", 8.0, 4.0)
    assert compare_by_value(p, q) is True
    assert compare_by_value(q, p) is True


def test_compare_by_value_zero_weight_raises():
    with pytest.raises(ZeroDivisionError):
        compare_by_value(Product("z", 1.0, 0.0), Product("p", 1.0, 1.0))