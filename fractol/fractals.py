"""Escape-time computation and colouring of the Mandelbrot and Julia sets."""

from __future__ import annotations

from dataclasses import dataclass

WIDTH = 700
HEIGHT = 700
MAX_ITER = 50

MANDELBROT = "mandelbrot"
JULIA = "julia"


@dataclass
class Fractal:
    """The fractal being viewed and the current view onto the plane."""

    name: str
    shift_x: float = 0.0
    shift_y: float = 0.0
    zoom: float = 1.0
    julia_re: float = 0.0
    julia_im: float = 0.0
    max_iter: int = MAX_ITER


def _escape_count(zr: float, zi: float, cr: float, ci: float, limit: int) -> int:
    iteration = 0
    while zr * zr + zi * zi <= 4 and iteration < limit:
        zr, zi = zr * zr - zi * zi + cr, 2 * zr * zi + ci
        iteration += 1
    return iteration


def mandelbrot_iterations(c: complex, max_iterations: int) -> int:
    """Return how many iterations of z*z + c, from z = 0, stay within radius 2."""
    return _escape_count(0.0, 0.0, c.real, c.imag, max_iterations)


def julia_iterations(z: complex, fractal: Fractal) -> int:
    """Return how many iterations starting at ``z`` stay within radius 2."""
    return _escape_count(
        z.real, z.imag, fractal.julia_re, fractal.julia_im, fractal.max_iter
    )


def get_color(iterations: int, max_iter: int) -> int:
    """Map an iteration count to a 0xRRGGBB colour."""
    t = iterations / max_iter
    red = int(2 * (1 - t) * t * t * t * 255)
    green = int(15 * (1 - t) * (1 - t) * t * t * 255)
    blue = int(8.5 * (1 - t) * (1 - t) * (1 - t) * t * 255)
    return (red << 16) | (green << 8) | blue


def pixel_color(fractal: Fractal, c: complex) -> int:
    """Return the colour of the point ``c``; points in the set are black."""
    if fractal.name == MANDELBROT:
        iterations = mandelbrot_iterations(c, fractal.max_iter)
    elif fractal.name == JULIA:
        iterations = julia_iterations(c, fractal)
    else:
        iterations = 0
    if iterations == fractal.max_iter:
        return 0x000000
    return get_color(iterations, fractal.max_iter)


def pixel_to_complex(
    fractal: Fractal, x: float, y: float, width: int = WIDTH, height: int = HEIGHT
) -> complex:
    """Return the point of the plane shown at pixel (x, y).

    Both axes are scaled by the width so that pixels stay square.
    """
    scale = 4.0 / width / fractal.zoom
    real = (x - width / 2.0) * 4.0 / width / fractal.zoom + fractal.shift_x
    imag = (y - height / 2.0) * 4.0 / width / fractal.zoom + fractal.shift_y
    del scale
    return complex(real, imag)


def render(fractal: Fractal, width: int = WIDTH, height: int = HEIGHT) -> list[list[int]]:
    """Return the image as rows of 0xRRGGBB colours, top row first."""
    return [
        [
            pixel_color(fractal, pixel_to_complex(fractal, x, y, width, height))
            for x in range(width)
        ]
        for y in range(height)
    ]