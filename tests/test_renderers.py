from __future__ import annotations

import unittest

from cryoplot import ComplexPlot
from cryoplot.colors import complex_to_color
from cryoplot.contour import grid_positions


MAGENTA = (255, 0, 255, 255)
RED = (200, 0, 0, 255)


def _graph_pixels(plot: ComplexPlot) -> list[tuple[int, int]]:
    return [(x, y) for y in plot.geometry.rows() for x in plot.geometry.columns()]


def _changed_pixels(plot: ComplexPlot) -> set[tuple[int, int]]:
    return {
        (x, y)
        for y in range(plot.image_height)
        for x in range(plot.image_width)
        if plot.canvas.get_pixel(x, y) != plot.background
    }


def _always_undefined(z: complex) -> complex:
    raise ValueError("undefined everywhere")


class DomainColoringTests(unittest.TestCase):
    def test_every_graph_pixel_is_visited_once(self) -> None:
        plot = ComplexPlot(16, 12, -4.0, 4.0, -3.0, 3.0, top_margin=2, left_margin=3)
        seen: list[complex] = []

        def recorder(z: complex) -> complex:
            seen.append(z)
            return z

        stats = plot.plot(recorder)
        self.assertEqual(len(seen), 16 * 12)
        self.assertEqual(len(set(seen)), 16 * 12)
        self.assertEqual(stats.samples, 16 * 12)
        self.assertEqual(stats.drawn, 16 * 12)

    def test_pixels_get_mapped_or_fallback_color(self) -> None:
        # step 1.0 on both axes, so pixel (4, 3) samples exactly 0
        plot = ComplexPlot(9, 7, -4.0, 4.0, -3.0, 3.0, bg_color=(1, 2, 3))
        stats = plot.plot(lambda z: 1 / z, color=MAGENTA)

        self.assertEqual(plot.canvas.get_pixel(4, 3), MAGENTA)
        self.assertEqual(stats.failures, 1)
        for x, y in _graph_pixels(plot):
            if (x, y) == (4, 3):
                continue
            z = plot.pixel_to_complex(x, y)
            self.assertEqual(plot.canvas.get_pixel(x, y), complex_to_color(1 / z))

    def test_margins_are_left_alone(self) -> None:
        plot = ComplexPlot(8, 6, -1.0, 1.0, -1.0, 1.0, 2, 3, 4, 5)
        plot.plot(lambda z: z)
        graph = set(_graph_pixels(plot))
        self.assertEqual(_changed_pixels(plot), graph)

    def test_undefined_function_fills_with_fallback(self) -> None:
        plot = ComplexPlot(10, 8, -2.0, 2.0, -2.0, 2.0, left_margin=1, top_margin=1)
        stats = plot.plot(_always_undefined, color=RED)
        self.assertEqual(stats.failures, stats.samples)
        for x, y in _graph_pixels(plot):
            self.assertEqual(plot.canvas.get_pixel(x, y), RED)


    def test_custom_exceptions_do_not_abort_the_pass(self) -> None:
        class Undefined(Exception):
            pass

        def func(z: complex) -> complex:
            if z.real > 0:
                raise Undefined("branch cut")
            return z

        plot = ComplexPlot(8, 6, -1.0, 1.0, -1.0, 1.0)
        stats = plot.plot(func, color=MAGENTA)
        self.assertEqual(plot.size, 1)
        self.assertEqual(stats.samples, 8 * 6)
        for x, y in _graph_pixels(plot):
            z = plot.pixel_to_complex(x, y)
            expected = MAGENTA if z.real > 0 else complex_to_color(z)
            self.assertEqual(plot.canvas.get_pixel(x, y), expected)

        contour = plot.plot(func, kind="contour", vert=2, horz=2)
        self.assertEqual(plot.size, 2)
        self.assertGreater(contour.failures, 0)


class GridPositionTests(unittest.TestCase):
    def test_positions_include_both_bounds(self) -> None:
        self.assertEqual(grid_positions(0, 15, 4), [0, 5, 10, 15])
        self.assertEqual(grid_positions(2, 17, 2), [2, 17])
        self.assertEqual(grid_positions(3, 14, 10)[0], 3)
        self.assertEqual(grid_positions(3, 14, 10)[-1], 14)

    def test_positions_need_two_lines(self) -> None:
        with self.assertRaises(ValueError):
            grid_positions(0, 10, 1)


class ContourTests(unittest.TestCase):
    def setUp(self) -> None:
        self.plot = ComplexPlot(16, 12, -4.0, 4.0, -3.0, 3.0, 2, 1, 3, 4)
        self.left, self.top = 3, 2
        self.right, self.bottom = 3 + 15, 2 + 11

    def _border(self) -> set[tuple[int, int]]:
        return {
            (x, y)
            for x, y in _graph_pixels(self.plot)
            if x in (self.left, self.right) or y in (self.top, self.bottom)
        }

    def test_two_by_two_grid_draws_only_boundary_lines(self) -> None:
        stats = self.plot.plot(lambda z: z, kind="contour", color=RED, vert=2, horz=2)
        self.assertEqual(_changed_pixels(self.plot), self._border())
        self.assertEqual(self.plot.canvas.get_pixel(self.left, self.top), RED)
        # two columns of 11 segments, two rows of 15 segments
        self.assertEqual(stats.drawn, 2 * 11 + 2 * 15)

    def test_interior_lines_follow_grid_positions(self) -> None:
        self.plot.plot(lambda z: z, kind="contour", vert=4, horz=2)
        changed = _changed_pixels(self.plot)
        for px in grid_positions(self.left, self.right, 4):
            for py in range(self.top, self.bottom + 1):
                self.assertIn((px, py), changed)
        self.assertNotIn((self.left + 1, self.top + 5), changed)

    def test_undefined_function_draws_nothing(self) -> None:
        stats = self.plot.plot(_always_undefined, kind="contour")
        self.assertEqual(stats.drawn, 0)
        self.assertEqual(stats.failures, stats.samples)
        self.assertEqual(_changed_pixels(self.plot), set())

    def test_out_of_range_images_are_never_endpoints(self) -> None:
        stats = self.plot.plot(lambda z: z * 1000, kind="contour", vert=2, horz=2)
        self.assertEqual(stats.drawn, 0)
        self.assertEqual(_changed_pixels(self.plot), set())

    def test_single_far_point_is_skipped(self) -> None:
        corner = complex(-4.0, 3.0)

        def func(z: complex) -> complex:
            return complex(1e6, -1e6) if z == corner else z

        self.plot.plot(func, kind="contour", vert=2, horz=2)
        changed = _changed_pixels(self.plot)
        self.assertNotIn((self.left, self.top), changed)
        self.assertIn((self.left + 1, self.top), changed)
        self.assertIn((self.left, self.top + 1), changed)
        self.assertEqual(changed, self._border() - {(self.left, self.top)})

    def test_failure_breaks_line_continuity(self) -> None:
        # height 13 over [-3, 3] puts row top+6 exactly on the real axis
        plot = ComplexPlot(16, 13, -4.0, 4.0, -3.0, 3.0)

        def func(z: complex) -> complex:
            if z.imag == 0.0:
                raise ZeroDivisionError("pole on the real axis")
            return z

        plot.plot(func, kind="contour", vert=2, horz=2)
        changed = _changed_pixels(plot)
        for x in (0, 15):
            self.assertNotIn((x, 6), changed)
            self.assertIn((x, 5), changed)
            self.assertIn((x, 7), changed)


if __name__ == "__main__":
    unittest.main()
