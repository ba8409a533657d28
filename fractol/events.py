"""Keyboard and mouse actions that change the view of a fractal."""

from __future__ import annotations

from enum import IntEnum

from fractol.fractals import HEIGHT, WIDTH, Fractal

ZOOM_FACTOR = 1.1
ITERATION_STEP = 20


class Key(IntEnum):
    """X11 key symbols the viewer reacts to."""

    ESCAPE = 65307
    LEFT = 65361
    UP = 65362
    RIGHT = 65363
    DOWN = 65364
    PLUS = 65451
    MINUS = 65453


class MouseButton(IntEnum):
    """Mouse buttons the viewer reacts to."""

    LEFT_CLICK = 1
    SCROLL_UP = 4
    SCROLL_DOWN = 5


def handle_key(fractal: Fractal, keycode: int) -> bool:
    """Apply a key press to the view.

    Returns False when the key asks the viewer to quit, True otherwise.
    """
    if keycode == Key.ESCAPE:
        return False

    if keycode == Key.PLUS:
        fractal.max_iter += ITERATION_STEP
    elif keycode == Key.MINUS and fractal.max_iter > ITERATION_STEP:
        fractal.max_iter -= ITERATION_STEP

    step = 0.5 / fractal.zoom
    if keycode == Key.LEFT:
        fractal.shift_x -= step
    elif keycode == Key.RIGHT:
        fractal.shift_x += step
    elif keycode == Key.UP:
        fractal.shift_y -= step
    elif keycode == Key.DOWN:
        fractal.shift_y += step
    return True


def _zoom(fractal: Fractal, factor: float) -> None:
    width = WIDTH / fractal.zoom
    height = HEIGHT / fractal.zoom
    new_width = width / factor
    new_height = height / factor
    fractal.zoom *= factor
    fractal.shift_x += (width - new_width) / (2.0 * WIDTH)
    fractal.shift_y += (height - new_height) / (2.0 * HEIGHT)


def handle_mouse(fractal: Fractal, button: int) -> None:
    """Zoom in on scroll up and out on scroll down; other buttons do nothing."""
    if button == MouseButton.SCROLL_UP:
        _zoom(fractal, ZOOM_FACTOR)
    elif button == MouseButton.SCROLL_DOWN:
        _zoom(fractal, 1.0 / ZOOM_FACTOR)