"""Escape-time Mandelbrot and Julia sets: computation, colouring and an interactive viewer."""

__version__ = "1.0.0"