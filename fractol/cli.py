"""Command line entry point: choose a fractal and show it in a window."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from fractol.events import MouseButton, handle_key, handle_mouse
from fractol.fractals import HEIGHT, JULIA, MANDELBROT, WIDTH, Fractal, render
from fractol.numparse import atod, is_double

AVAILABLE_MESSAGE = "Available fractals: mandelbrot, julia"
JULIA_USAGE = "Usage: fractol julia -0.8 0.156"
MANDELBROT_USAGE = "Usage: fractol mandelbrot"
WINDOW_TITLE = "Fract-ol"


class UsageError(Exception):
    """The command line does not describe a fractal that can be shown."""


def parse_args(argv: Sequence[str]) -> Fractal:
    """Build the initial view from the arguments that follow the program name."""
    args = list(argv)
    if len(args) not in (1, 3) or args[0] not in (MANDELBROT, JULIA):
        raise UsageError(AVAILABLE_MESSAGE)

    name = args[0]
    fractal = Fractal(name)
    if name == JULIA:
        if len(args) != 3 or not all(is_double(arg) for arg in args[1:]):
            raise UsageError(JULIA_USAGE)
        fractal.julia_re = atod(args[1])
        fractal.julia_im = atod(args[2])
    elif len(args) != 1:
        raise UsageError(MANDELBROT_USAGE)
    return fractal


def _photo_rows(image: list[list[int]]) -> str:
    return " ".join(
        "{" + " ".join(f"#{color:06x}" for color in row) + "}" for row in image
    )


def _run_window(fractal: Fractal) -> None:
    import tkinter

    root = tkinter.Tk()
    root.title(WINDOW_TITLE)
    root.resizable(False, False)
    photo = tkinter.PhotoImage(width=WIDTH, height=HEIGHT)
    label = tkinter.Label(root, image=photo, borderwidth=0)
    label.pack()

    def redraw() -> None:
        photo.put(_photo_rows(render(fractal, WIDTH, HEIGHT)), to=(0, 0))

    def on_key(event: tkinter.Event) -> None:
        if handle_key(fractal, event.keysym_num):
            redraw()
        else:
            root.destroy()

    def on_button(button: int) -> None:
        handle_mouse(fractal, button)
        redraw()

    def on_wheel(event: tkinter.Event) -> None:
        on_button(MouseButton.SCROLL_UP if event.delta > 0 else MouseButton.SCROLL_DOWN)

    root.bind("<KeyRelease>", on_key)
    label.bind("<Button-1>", lambda _event: on_button(MouseButton.LEFT_CLICK))
    label.bind("<Button-4>", lambda _event: on_button(MouseButton.SCROLL_UP))
    label.bind("<Button-5>", lambda _event: on_button(MouseButton.SCROLL_DOWN))
    label.bind("<MouseWheel>", on_wheel)
    root.protocol("WM_DELETE_WINDOW", root.destroy)

    redraw()
    root.mainloop()


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line, open the viewer and return an exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        fractal = parse_args(argv)
    except UsageError as error:
        print(error, file=sys.stderr)
        return 1

    try:
        _run_window(fractal)
    except (ImportError, RuntimeError) as error:
        print(f"Failed to initialize display: {error}", file=sys.stderr)
        return 1
    except Exception as error:  # tkinter.TclError when no display is available
        if type(error).__name__ != "TclError":
            raise
        print(f"Failed to initialize display: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())