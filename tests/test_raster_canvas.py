from __future__ import annotations

import unittest

from cryoplot.raster import RasterCanvas


WHITE = (255, 255, 255, 255)
BG = (0, 0, 0, 255)


class RasterCanvasTests(unittest.TestCase):
    def test_set_pixel_ignores_out_of_bounds(self) -> None:
        canvas = RasterCanvas(4, 3, BG)
        canvas.set_pixel(1, 2, WHITE)
        canvas.set_pixel(-1, 0, WHITE)
        canvas.set_pixel(4, 0, WHITE)
        self.assertEqual(canvas.get_pixel(1, 2), WHITE)
        self.assertEqual(int((canvas.to_rgba()[:, :, 0] == 255).sum()), 1)

    def test_draw_line_includes_endpoints(self) -> None:
        canvas = RasterCanvas(10, 10, BG)
        canvas.draw_line(1, 1, 7, 4, WHITE)
        self.assertEqual(canvas.get_pixel(1, 1), WHITE)
        self.assertEqual(canvas.get_pixel(7, 4), WHITE)
        self.assertEqual(int((canvas.to_rgba()[:, :, 0] == 255).sum()), 7)

    def test_degenerate_line_is_one_pixel(self) -> None:
        canvas = RasterCanvas(5, 5, BG)
        canvas.draw_line(2, 2, 2, 2, WHITE)
        self.assertEqual(int((canvas.to_rgba()[:, :, 0] == 255).sum()), 1)

    def test_to_rgba_is_a_copy(self) -> None:
        canvas = RasterCanvas(2, 2, BG)
        rgba = canvas.to_rgba()
        rgba[0, 0] = WHITE
        self.assertEqual(canvas.get_pixel(0, 0), BG)


if __name__ == "__main__":
    unittest.main()
