"""Classic data abstractions, small algorithms, editor buffers, k-d trees and 2D ICP."""

__version__ = "0.1.0"

__all__ = [
    "codes",
    "textcompare",
    "roman",
    "numerics",
    "intarray",
    "mystring",
    "charstack",
    "array_buffer",
    "stack_buffer",
    "pointfiles",
    "kdtree",
    "icp2d",
]