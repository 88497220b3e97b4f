"""Declarative transform descriptions → composed 4x4 matrices."""

__version__ = "0.1.0"
