# prog3basics

This package provides a few small building blocks. It has no dependencies.

- `prog3basics.bag.Bag` is a collection of integers. `add(elem)` puts an item at the front, so iteration runs from the newest item to the oldest. `len()` gives the number of items.
- `prog3basics.fraction.Fraction` and `simplify` handle integer fractions. `Fraction(numerator=1, denominator=1)` exposes `numerator` and `denominator`. `+`, `-`, `*` and `/` return results reduced by the greatest common divisor. Two fractions are equal when their cross products match. `simplify(0, 0)` raises `ZeroDivisionError`.
- `prog3basics.point.Point` is an immutable 2D point with `x` and `y`. It supports `+` and `-` and prints as `[x, y]`.
- `prog3basics.vector3d.Vector3D` and `dot_product` handle 3D vectors. `Vector3D` is immutable and its components `x`, `y` and `z` default to zero. It supports `+` and `-`.
- `prog3basics.polynomial.Polynomial` and `evaluate` handle polynomials.
  - A polynomial is built from its coefficients, lowest degree first: `Polynomial([a, b, c])` is `a + bx + cx^2`.
  - It has a `degree` property and a `coefficients` tuple.
  - Coefficients can be read and set by index.
  - It supports `+`, `-` and `*`.
  - An empty coefficient list raises `ValueError`.
  - `str()` gives each term followed by a space, for example `1 2x^1 `, then a newline.
- `prog3basics.product.Product` and `compare_by_value` handle products.
  - A product has a `name`, a `price` and a `weight`.
  - Two products are equal when their price and weight match. The name is ignored.
  - `a < b` holds only when both the price and the weight of `a` are smaller.
  - `compare_by_value(first, second)` is true when the first product's price per unit of weight is at least the second's.
- `prog3basics.logger.Logger` appends each message as its own line. You can use `write(message)` or chain `<<`. An `OSError` is raised if the file cannot be opened.
- `prog3basics.system_log.SystemLog` writes records of the form `start,stop`. `start(message)` begins a line and `stop(message)` finishes it.

Both loggers open their file in append mode and flush after every write. Both can be used as context managers or closed with `close()`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from prog3basics.fraction import Fraction
from prog3basics.polynomial import Polynomial, evaluate
from prog3basics.logger import Logger

half = Fraction(1, 2)
third = Fraction(1, 3)
print(half + third == Fraction(5, 6))   # True

p = Polynomial([1, 2])     # 1 + 2x
q = Polynomial([3, 4, 5])  # 3 + 4x + 5x^2
print(evaluate(p * q, 2.0))

with Logger("app.log") as log:
    log.write("started")
    log << "step one" << "step two"
```

## Limits

This is a library only. It has no command-line program.

The loggers only append lines. They add no timestamps, log levels or file rotation.