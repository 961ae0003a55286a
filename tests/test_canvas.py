from __future__ import annotations

import unittest
from unittest import mock

import numpy as np

from rasterkit import BLACK, RED, RGB, RGBA, WHITE, Canvas, CanvasSettings


class CanvasTests(unittest.TestCase):
    def test_new_canvas_is_black(self) -> None:
        canvas = Canvas(7, 4)
        self.assertEqual((canvas.width, canvas.height), (7, 4))
        self.assertEqual(canvas.buffer.shape, (4, 7, 3))
        self.assertEqual(canvas.buffer.dtype, np.uint8)
        self.assertFalse(np.any(canvas.buffer))

    def test_rejects_invalid_sizes(self) -> None:
        for width, height in ((-1, 5), (5, -1), (2.5, 3), (True, 3)):
            with self.subTest(size=(width, height)):
                with self.assertRaises(ValueError):
                    Canvas(width, height)  # type: ignore[arg-type]

    def test_zero_sized_canvas_accepts_drawing(self) -> None:
        canvas = Canvas(0, 0)
        canvas.draw_line(0, 0, 5, 5, WHITE)
        canvas.draw_circle_solid(0, 0, 3, WHITE)
        self.assertEqual(canvas.buffer.size, 0)
        self.assertEqual(canvas.get(0, 0), BLACK)

    def test_set_then_get_round_trips(self) -> None:
        canvas = Canvas(10, 10)
        canvas.set(3, 4, RGB(10, 20, 30))
        self.assertEqual(canvas.get(3, 4), RGB(10, 20, 30))
        canvas.set(3, 4, (1, 2, 3))
        self.assertEqual(canvas.get(3, 4), RGB(1, 2, 3))

    def test_pixels_read_from_the_buffer_can_be_written_back(self) -> None:
        canvas = Canvas(4, 4)
        canvas.set(0, 0, RGB(12, 34, 56))
        canvas.set(1, 1, tuple(canvas.buffer[0, 0]))
        canvas.set(2, 2, canvas.buffer[0, 0])
        canvas.set(3, 3, canvas.pixels()[0])
        canvas.fill(canvas.buffer[1, 1])
        self.assertTrue(np.all(canvas.buffer == [12, 34, 56]))
        self.assertEqual(canvas.get(3, 3), RGB(12, 34, 56))

    def test_rgba_writes_overwrite_without_blending(self) -> None:
        canvas = Canvas(4, 4)
        canvas.set(1, 1, WHITE)
        canvas.set(1, 1, RGBA(100, 50, 25, 10))
        self.assertEqual(canvas.get(1, 1), RGB(100, 50, 25))

    def test_out_of_bounds_set_is_ignored(self) -> None:
        canvas = Canvas(10, 10)
        before = canvas.buffer.copy()
        for x, y in ((-1, 0), (0, -1), (10, 0), (0, 10), (-100, 500)):
            canvas.set(x, y, WHITE)
        np.testing.assert_array_equal(canvas.buffer, before)

    def test_out_of_bounds_get_returns_background(self) -> None:
        self.assertEqual(Canvas(5, 5).get(-1, 2), BLACK)
        self.assertEqual(Canvas(5, 5, background=RED).get(5, 0), RED)

    def test_draw_pixel_scenario(self) -> None:
        canvas = Canvas(10, 10)
        canvas.draw_pixel(5, 5, WHITE)
        self.assertEqual(canvas.get(5, 5), WHITE)
        self.assertEqual(int(np.count_nonzero(np.any(canvas.buffer, axis=2))), 1)

    def test_hline_is_inclusive_ordered_and_clipped(self) -> None:
        canvas = Canvas(8, 3)
        canvas.draw_hline(5, 2, 1, WHITE)
        row = np.any(canvas.buffer[1], axis=1)
        self.assertEqual(np.flatnonzero(row).tolist(), [2, 3, 4, 5])
        canvas.draw_hline(-10, 100, 0, RED)
        self.assertTrue(np.all(canvas.buffer[0] == [255, 0, 0]))
        canvas.draw_hline(0, 7, 3, WHITE)
        self.assertFalse(np.any(canvas.buffer[2]))

    def test_fill_and_clear(self) -> None:
        canvas = Canvas(3, 3, background=RGB(9, 9, 9))
        canvas.fill(RED)
        self.assertTrue(np.all(canvas.buffer == [255, 0, 0]))
        canvas.clear()
        self.assertTrue(np.all(canvas.buffer == 9))

    def test_flat_views_are_indexed_row_major(self) -> None:
        canvas = Canvas(4, 3)
        canvas.set(1, 0, RGB(1, 2, 3))
        canvas.set(0, 2, RGB(255, 0, 16))
        packed = canvas.buffer_u32()
        self.assertEqual(packed.shape, (12,))
        self.assertEqual(int(packed[1]), 0x010203)
        self.assertEqual(int(packed[2 * 4 + 0]), 0xFF0010)
        self.assertEqual(canvas.pixels()[2 * 4].tolist(), [255, 0, 16])

    def test_copy_is_independent(self) -> None:
        canvas = Canvas(4, 4)
        canvas.set(0, 0, WHITE)
        clone = canvas.copy()
        clone.set(1, 1, RED)
        self.assertEqual(clone.get(0, 0), WHITE)
        self.assertEqual(canvas.get(1, 1), BLACK)

    def test_draw_delegates_to_drawable(self) -> None:
        canvas = Canvas(4, 4)
        shape = mock.Mock()
        canvas.draw(shape)
        shape.draw.assert_called_once_with(canvas)

    def test_from_settings(self) -> None:
        canvas = Canvas.from_settings(CanvasSettings(width=6, height=2, background=RGB(1, 1, 1)))
        self.assertEqual((canvas.width, canvas.height), (6, 2))
        self.assertEqual(canvas.get(5, 1), RGB(1, 1, 1))


if __name__ == "__main__":
    unittest.main()
