"""Small value types, a bag of integers and append-only file loggers."""

__version__ = "0.1.0"
__all__ = [
    "bag",
    "fraction",
    "logger",
    "point",
    "polynomial",
    "product",
    "system_log",
    "vector3d",
]