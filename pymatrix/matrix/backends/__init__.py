"""Compute backends for matrix arithmetic."""

from pymatrix.matrix.backends.cpu import CPUMatrixBackend

__all__ = ["CPUMatrixBackend"]
