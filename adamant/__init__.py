"""Pure-Python n-dimensional tensors with row- and column-major layouts, views and slicing."""

__version__ = "0.1.0"
__all__ = ["errors", "shape", "storage", "view", "tensor", "demo"]