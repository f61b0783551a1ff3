"""3D vectors, 4x4 matrices, collision shapes, value grids and host system information."""

__version__ = "1.0.1"
__all__ = ["vectors", "matrix", "shapes", "grids", "sysinfo"]