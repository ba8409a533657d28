import pytest

from fractol.fractals import (
    HEIGHT,
    MAX_ITER,
    WIDTH,
    Fractal,
    get_color,
    julia_iterations,
    mandelbrot_iterations,
    pixel_color,
    pixel_to_complex,
    render,
)


def test_fractal_defaults():
    fractal = Fractal("mandelbrot")
    assert (fractal.shift_x, fractal.shift_y, fractal.zoom) == (0.0, 0.0, 1.0)
    assert fractal.max_iter == MAX_ITER == 50


def test_default_screen_is_700_square():
    assert (WIDTH, HEIGHT) == (700, 700)
    point = pixel_to_complex(Fractal("mandelbrot"), 700, 700)
    assert point.real == pytest.approx(2.0)
    assert point.imag == pytest.approx(2.0)


def test_origin_never_escapes_mandelbrot():
    assert mandelbrot_iterations(0j, 37) == 37


def test_far_point_escapes_after_one_step():
    assert mandelbrot_iterations(complex(3, 0), 50) == 1


def test_mandelbrot_count_bounded_by_limit():
    for c in (0.3 + 0.5j, -0.75 + 0.1j, -2 + 0j, 0.25 + 0j):
        assert 0 <= mandelbrot_iterations(c, 20) <= 20


def test_mandelbrot_count_grows_with_limit():
    c = -0.75 + 0.05j
    assert mandelbrot_iterations(c, 10) <= mandelbrot_iterations(c, 100)


def test_julia_with_zero_constant_matches_unit_disc():
    fractal = Fractal("julia", julia_re=0.0, julia_im=0.0, max_iter=30)
    assert julia_iterations(0.5 + 0.5j, fractal) == 30
    assert julia_iterations(complex(1.5, 0), fractal) < 30


def test_julia_from_zero_equals_mandelbrot_at_constant():
    fractal = Fractal("julia", julia_re=-0.8, julia_im=0.156, max_iter=50)
    # From z = 0 the first Julia step lands on c, one step behind Mandelbrot.
    mandel = mandelbrot_iterations(complex(-0.8, 0.156), 50)
    julia = julia_iterations(complex(-0.8, 0.156), fractal)
    assert julia == min(mandel - 1, 50) or julia == 50


def test_color_of_zero_iterations_is_black():
    assert get_color(0, MAX_ITER) == 0x000000


@pytest.mark.parametrize("iterations", range(0, 51))
def test_color_fits_in_rgb(iterations):
    color = get_color(iterations, 50)
    assert 0 <= color <= 0xFFFFFF
    for channel in ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF):
        assert 0 <= channel <= 255


def test_points_in_set_are_black():
    fractal = Fractal("mandelbrot")
    assert pixel_color(fractal, -0.1 + 0.1j) == 0x000000


def test_escaping_point_uses_palette():
    fractal = Fractal("mandelbrot", max_iter=50)
    c = complex(0.4, 0.3)
    iterations = mandelbrot_iterations(c, 50)
    assert iterations < 50
    assert pixel_color(fractal, c) == get_color(iterations, 50)


def test_julia_pixel_color_uses_julia_count():
    fractal = Fractal("julia", julia_re=-0.8, julia_im=0.156)
    z = complex(1.2, -0.4)
    iterations = julia_iterations(z, fractal)
    expected = 0 if iterations == fractal.max_iter else get_color(iterations, fractal.max_iter)
    assert pixel_color(fractal, z) == expected


def test_unknown_fractal_is_black():
    assert pixel_color(Fractal("other"), complex(3, 3)) == 0x000000


def test_center_pixel_maps_to_shift():
    fractal = Fractal("mandelbrot", shift_x=0.25, shift_y=-0.5, zoom=3.0)
    assert pixel_to_complex(fractal, WIDTH / 2, HEIGHT / 2) == complex(0.25, -0.5)


def test_left_edge_spans_two_units_at_unit_zoom():
    fractal = Fractal("mandelbrot")
    point = pixel_to_complex(fractal, 0, 0)
    assert point.real == pytest.approx(-2.0)
    assert point.imag == pytest.approx(-2.0)


def test_zoom_shrinks_visible_region():
    near = pixel_to_complex(Fractal("mandelbrot", zoom=4.0), 0, 0)
    far = pixel_to_complex(Fractal("mandelbrot", zoom=1.0), 0, 0)
    assert abs(near) == pytest.approx(abs(far) / 4.0)


def test_imaginary_axis_scaled_by_width():
    fractal = Fractal("mandelbrot")
    point = pixel_to_complex(fractal, 0, 0, width=8, height=4)
    assert point.imag == pytest.approx((0 - 2) * 4.0 / 8)


def test_render_shape_and_agreement_with_pixel_color():
    fractal = Fractal("mandelbrot")
    image = render(fractal, 6, 4)
    assert len(image) == 4
    assert all(len(row) == 6 for row in image)
    for y, row in enumerate(image):
        for x, color in enumerate(row):
            assert color == pixel_color(fractal, pixel_to_complex(fractal, x, y, 6, 4))


def test_render_center_pixel_is_in_mandelbrot_set():
    image = render(Fractal("mandelbrot"), 4, 4)
    assert image[2][2] == 0x000000