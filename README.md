# fractol

An interactive viewer for the two classic escape-time fractals, the
Mandelbrot set and Julia sets. It opens a 700 × 700 window. You can pan,
zoom and change the iteration limit from the keyboard and mouse. The
computation is also usable from Python on its own.

## Installation

```
pip install .
```

The window is drawn with `tkinter` from the standard library, so the Python
you install into needs Tk support and a display.

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

```
fractol mandelbrot
fractol julia -0.8 0.156
```

The first argument names the fractal. A Julia set takes exactly two more
arguments, the real and imaginary parts of its constant. The Mandelbrot set
takes none. For any other command line one of these messages goes to
standard error and the command exits with status 1:

- `Available fractals: mandelbrot, julia`: the argument count is not 1 or 3,
  or the name is unknown.
- `Usage: fractol julia -0.8 0.156`: `julia` was given without two numbers.
- `Usage: fractol mandelbrot`: `mandelbrot` was given extra arguments.

The numbers are read leniently. Leading whitespace and one sign are skipped,
and then digits, an optional point and fractional digits are read. Anything
after that is ignored. A value with no digits reads as zero.

If Tk cannot be loaded or no display is available, the command prints
`Failed to initialize display: ...` to standard error and exits with
status 1. When the window is closed, the exit status is 0.

The view starts centred on the origin at zoom 1.0 with a limit of 50
iterations. It spans four units of the complex plane across its width, and
pixels are square.

## Controls

| Input        | Effect                                                          |
|--------------|-----------------------------------------------------------------|
| Arrow keys   | pan by `0.5 / zoom` units                                       |
| Keypad `+`   | raise the iteration limit by 20                                 |
| Keypad `-`   | lower the iteration limit by 20 if it is currently above 20     |
| Scroll up    | zoom in by a factor of 1.1                                      |
| Scroll down  | zoom out by a factor of 1.1                                     |
| Escape       | close the window                                                |

Keys act when they are released. Each change redraws the whole image.
Zooming does not depend on where the pointer is. Each zoom step changes
the zoom and moves the view by a fixed offset. A left click only redraws.

Points that never escape within the iteration limit are black. Every other
point gets a colour from a smooth polynomial in the fraction of the limit
it used.

## Library use

`fractol.fractals`:

- `Fractal`: a dataclass holding the view state (`name`, `shift_x`,
  `shift_y`, `zoom`, `julia_re`, `julia_im`, `max_iter`).
- `mandelbrot_iterations(c, max_iterations)` counts iterations of
  `z*z + c` from `z = 0` until `|z| > 2` or the limit is reached.
- `julia_iterations(z, fractal)` does the same from `z`, using the
  fractal's constant and limit.
- `get_color(iterations, max_iter)` returns a `0xRRGGBB` integer.
- `pixel_color(fractal, c)` returns the colour of one point. It is black for
  points in the set and for an unknown fractal name.
- `pixel_to_complex(fractal, x, y, width, height)` maps a pixel to the plane.
- `render(fractal, width, height)` returns the image as a list of rows of
  colours, top row first.

`fractol.events`:

- `handle_key(fractal, keycode)` applies a key press, given as an X11 keysym
  number (see the `Key` enum). It returns `False` for Escape and `True`
  otherwise.
- `handle_mouse(fractal, button)` applies scroll-up and scroll-down (see the
  `MouseButton` enum). Other buttons leave the view as it was.

`fractol.numparse`:

- `atod(text)` reads the leading number of a string, as described above.
- `is_double(text)` tells whether an argument is accepted as a number. Since
  every part of a number is optional, it accepts any string, and also `None`.

`fractol.cli`:

- `parse_args(argv)` builds a `Fractal` from the arguments after the program
  name. It raises `UsageError` with one of the messages above.
- `main(argv=None)` runs the command and returns its exit status.

## What it does not do

The package only displays images in a window. It does not save images to
files. The window size is fixed, and Mandelbrot and Julia are the only
fractals it offers.