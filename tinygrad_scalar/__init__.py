"""Scalar reverse-mode autograd engine and a minimal neural network library."""

__version__ = "0.1.0"
__all__ = ["engine", "nn"]