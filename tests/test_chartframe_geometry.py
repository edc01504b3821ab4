from __future__ import annotations

import math
import unittest

from chartframe import AspectRatio, Edge, Rect, split_rect


BASE = Rect(x=0.0, y=0.0, width=1000.0, height=500.0)


class SplitRectTests(unittest.TestCase):
    def test_top_split(self) -> None:
        carved, rest = split_rect(BASE, Edge.TOP, 100.0)
        self.assertEqual(carved, Rect(0.0, 0.0, 1000.0, 100.0))
        self.assertEqual(rest, Rect(0.0, 100.0, 1000.0, 400.0))

    def test_bottom_split(self) -> None:
        carved, rest = split_rect(BASE, Edge.BOTTOM, 100.0)
        self.assertEqual(carved, Rect(0.0, 400.0, 1000.0, 100.0))
        self.assertEqual(rest, Rect(0.0, 0.0, 1000.0, 400.0))

    def test_left_split(self) -> None:
        carved, rest = split_rect(BASE, Edge.LEFT, 200.0)
        self.assertEqual(carved, Rect(0.0, 0.0, 200.0, 500.0))
        self.assertEqual(rest, Rect(200.0, 0.0, 800.0, 500.0))

    def test_right_split(self) -> None:
        carved, rest = split_rect(BASE, Edge.RIGHT, 200.0)
        self.assertEqual(carved, Rect(800.0, 0.0, 200.0, 500.0))
        self.assertEqual(rest, Rect(0.0, 0.0, 800.0, 500.0))

    def test_split_partitions_without_overlap(self) -> None:
        for edge in Edge:
            with self.subTest(edge=edge):
                carved, rest = split_rect(BASE, edge, 120.0)
                self.assertEqual(carved.area + rest.area, BASE.area)
                self.assertFalse(carved.overlaps(rest))
                self.assertTrue(BASE.contains_rect(carved))
                self.assertTrue(BASE.contains_rect(rest))

    def test_oversized_thickness_saturates(self) -> None:
        carved, rest = split_rect(BASE, Edge.TOP, 800.0)
        self.assertEqual(carved, BASE)
        self.assertEqual(rest, Rect(0.0, 500.0, 1000.0, 0.0))

        carved, rest = split_rect(BASE, Edge.LEFT, 5000.0)
        self.assertEqual(carved, BASE)
        self.assertEqual(rest.width, 0.0)
        self.assertEqual(rest.x, 1000.0)

    def test_oversized_thickness_never_goes_negative(self) -> None:
        for edge in Edge:
            for thickness in (1e9, math.inf):
                carved, rest = split_rect(BASE, edge, thickness)
                self.assertGreaterEqual(rest.width, 0.0)
                self.assertGreaterEqual(rest.height, 0.0)
                self.assertEqual(carved.area, BASE.area)

    def test_negative_and_nan_thickness_carve_nothing(self) -> None:
        for thickness in (-10.0, math.nan):
            carved, rest = split_rect(BASE, Edge.BOTTOM, thickness)
            self.assertEqual(carved.height, 0.0)
            self.assertEqual(rest, BASE)

    def test_sequential_allocation_threads_the_remainder(self) -> None:
        area = BASE
        title, area = split_rect(area, Edge.TOP, 50.0)
        x_axis, area = split_rect(area, Edge.BOTTOM, 80.0)
        y_axis, body = split_rect(area, Edge.LEFT, 80.0)
        self.assertEqual(title, Rect(0.0, 0.0, 1000.0, 50.0))
        self.assertEqual(x_axis, Rect(0.0, 420.0, 1000.0, 80.0))
        self.assertEqual(y_axis, Rect(0.0, 50.0, 80.0, 370.0))
        self.assertEqual(body, Rect(80.0, 50.0, 920.0, 370.0))
        self.assertEqual(title.area + x_axis.area + y_axis.area + body.area, BASE.area)

    def test_split_on_exhausted_rect_stays_zero(self) -> None:
        _, rest = split_rect(BASE, Edge.LEFT, 1000.0)
        carved, rest2 = split_rect(rest, Edge.LEFT, 50.0)
        self.assertEqual(carved.width, 0.0)
        self.assertEqual(rest2.width, 0.0)


class RectTests(unittest.TestCase):
    def test_negative_size_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            Rect(0.0, 0.0, -1.0, 10.0)

    def test_inset_clamps_to_zero_size(self) -> None:
        self.assertEqual(Rect(0.0, 0.0, 100.0, 60.0).inset(10.0), Rect(10.0, 10.0, 80.0, 40.0))
        tiny = Rect(0.0, 0.0, 50.0, 50.0).inset(40.0)
        self.assertEqual((tiny.width, tiny.height), (0.0, 0.0))

    def test_intersections_restrict_one_dimension(self) -> None:
        axis = Rect(0.0, 600.0, 1400.0, 160.0)
        body = Rect(200.0, 100.0, 1000.0, 500.0)
        self.assertEqual(axis.intersect_horizontal(body), Rect(200.0, 600.0, 1000.0, 160.0))
        side = Rect(120.0, 0.0, 80.0, 900.0)
        self.assertEqual(side.intersect_vertical(body), Rect(120.0, 100.0, 80.0, 500.0))

    def test_origin_and_span_by_dimension(self) -> None:
        rect = Rect(5.0, 7.0, 11.0, 13.0)
        self.assertEqual((rect.origin("x"), rect.span("x")), (5.0, 11.0))
        self.assertEqual((rect.origin("y"), rect.span("y")), (7.0, 13.0))

    def test_edges_consume_matching_dimension(self) -> None:
        self.assertEqual(Edge.TOP.dimension, "y")
        self.assertEqual(Edge.BOTTOM.dimension, "y")
        self.assertEqual(Edge.LEFT.dimension, "x")
        self.assertEqual(Edge.RIGHT.dimension, "x")

    def test_aspect_ratio_frames(self) -> None:
        self.assertEqual(AspectRatio.LANDSCAPE.rect(), Rect(0.0, 0.0, 2000.0, 1500.0))
        self.assertEqual(AspectRatio.SQUARE.rect(), Rect(0.0, 0.0, 2000.0, 2000.0))
        self.assertEqual(AspectRatio.PORTRAIT.rect(), Rect(0.0, 0.0, 1500.0, 2000.0))


if __name__ == "__main__":
    unittest.main()
