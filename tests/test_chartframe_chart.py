from __future__ import annotations

import unittest

from chartframe import (
    Anchor,
    AspectRatio,
    Axis,
    BoundingDomain,
    Chart,
    ChartSettings,
    Edge,
    Plot,
    Rect,
    Title,
    series_chart,
)


DATA_A = [(13.0, 74.0), (111.0, 37.0), (125.0, 52.0), (190.0, 66.0)]
DATA_B = [(22.0, 50.0), (105.0, 44.0), (120.0, 67.0), (180.0, 39.0), (210.0, 43.0)]


def _line_chart() -> Chart:
    domain = BoundingDomain.from_points(DATA_A).union(BoundingDomain.from_points(DATA_B))
    return (
        Chart()
        .with_title("Line Plot")
        .with_axis(Axis.horizontal(domain).with_name("X Axis Name"))
        .with_axis(Axis.vertical(domain).with_name("Y Axis Name"))
        .with_axis(Axis.vertical(domain).on_right())
        .with_plot(Plot.line("Series A", domain, DATA_A))
        .with_plot(Plot.line("Series B", domain, DATA_B))
    )


class ChartLayoutTests(unittest.TestCase):
    def test_frame_is_inset_by_margin(self) -> None:
        self.assertEqual(Chart().frame(), Rect(40.0, 40.0, 1920.0, 1420.0))
        self.assertEqual(Chart().with_aspect_ratio(AspectRatio.SQUARE).frame(), Rect(40.0, 40.0, 1920.0, 1920.0))

    def test_titles_then_axes_then_body(self) -> None:
        layout = _line_chart().layout()
        self.assertEqual(layout.frame, Rect(40.0, 40.0, 1920.0, 1420.0))
        self.assertEqual(layout.titles[0].rect, Rect(40.0, 40.0, 1920.0, 100.0))
        self.assertEqual([a.rect for a in layout.axes], [
            Rect(40.0, 1300.0, 1920.0, 160.0),
            Rect(40.0, 140.0, 160.0, 1160.0),
            Rect(1880.0, 140.0, 80.0, 1160.0),
        ])
        self.assertEqual(layout.body, Rect(200.0, 140.0, 1680.0, 1160.0))

    def test_axis_order_changes_axis_rects_not_body(self) -> None:
        domain = BoundingDomain.from_bounds(0.0, 10.0, 0.0, 10.0)
        bottom = Axis.horizontal(domain)
        left = Axis.vertical(domain)

        left_first = Chart().with_axis(left).with_axis(bottom).layout()
        self.assertEqual(left_first.axes[0].rect, Rect(40.0, 40.0, 80.0, 1420.0))
        self.assertEqual(left_first.axes[1].rect, Rect(120.0, 1380.0, 1840.0, 80.0))

        bottom_first = Chart().with_axis(bottom).with_axis(left).layout()
        self.assertEqual(bottom_first.axes[0].rect, Rect(40.0, 1380.0, 1920.0, 80.0))
        self.assertEqual(bottom_first.axes[1].rect, Rect(40.0, 40.0, 80.0, 1340.0))

        self.assertEqual(left_first.body, Rect(120.0, 40.0, 1840.0, 1340.0))
        self.assertEqual(bottom_first.body, left_first.body)

    def test_area_matches_layout_body(self) -> None:
        built = _line_chart()
        self.assertEqual(built.area(), built.layout().body)

    def test_empty_chart_body_is_frame(self) -> None:
        built = Chart()
        self.assertEqual(built.area(), built.frame())
        layout = built.layout()
        self.assertEqual((layout.titles, layout.axes, layout.plots), ((), (), ()))

    def test_exhausted_space_gives_zero_size_body(self) -> None:
        domain = BoundingDomain.from_bounds(0.0, 1.0, 0.0, 1.0)
        built = Chart()
        for _ in range(20):
            built = built.with_axis(Axis.horizontal(domain).with_name("x"))
        body = built.area()
        self.assertEqual(body.height, 0.0)
        self.assertGreaterEqual(body.width, 0.0)

        squeezed = Chart(settings=ChartSettings(margin=5000.0)).area()
        self.assertEqual((squeezed.width, squeezed.height), (0.0, 0.0))

    def test_titles_honor_edge_and_anchor(self) -> None:
        built = Chart().with_title(Title("Footer").on_bottom().at_end())
        layout = built.layout()
        self.assertEqual(layout.titles[0].rect, Rect(40.0, 1360.0, 1920.0, 100.0))
        self.assertEqual(layout.titles[0].title.anchor, Anchor.END)
        self.assertEqual(layout.titles[0].title.edge, Edge.BOTTOM)


class ChartBuilderTests(unittest.TestCase):
    def test_builders_do_not_mutate(self) -> None:
        base = Chart()
        titled = base.with_title("A")
        self.assertEqual(base.titles, ())
        self.assertEqual(len(titled.titles), 1)
        self.assertEqual(titled.titles[0], Title("A"))
        self.assertEqual(base.aspect_ratio, AspectRatio.LANDSCAPE)
        self.assertEqual(base.with_aspect_ratio(AspectRatio.PORTRAIT).aspect_ratio, AspectRatio.PORTRAIT)

    def test_series_chart_shares_one_domain(self) -> None:
        built = series_chart({"a": DATA_A, "b": DATA_B}, title="Two", x_name="X", y_name="Y")
        self.assertEqual(len(built.plots), 2)
        self.assertEqual([a.name for a in built.axes], ["X", "Y"])
        self.assertEqual(built.plots[0].domain, built.plots[1].domain)
        self.assertEqual(built.plots[0].domain, BoundingDomain.from_points(DATA_A + DATA_B))
        self.assertEqual([g.name for g in built.layout().plots], ["a", "b"])

    def test_series_chart_requires_series(self) -> None:
        with self.assertRaises(ValueError):
            series_chart({})


class PlotGeometryTests(unittest.TestCase):
    DOMAIN = BoundingDomain.from_bounds(0.0, 200.0, 0.0, 100.0)
    BODY = Rect(200.0, 140.0, 1680.0, 1160.0)

    def test_line_vertices_map_into_body(self) -> None:
        geom = Plot.line("s", self.DOMAIN, [(0.0, 0.0), (100.0, 50.0), (200.0, 100.0)]).geometry(self.BODY)
        self.assertEqual(geom.vertices, ((200, 1300), (1040, 720), (1880, 140)))
        self.assertEqual(geom.kind, "line")

    def test_area_closes_to_zero_baseline(self) -> None:
        geom = Plot.area("s", self.DOMAIN, [(0.0, 20.0), (200.0, 60.0)]).geometry(self.BODY)
        self.assertEqual(geom.vertices[0], (200, 1300))
        self.assertEqual(geom.vertices[-1], (1880, 1300))
        self.assertEqual(len(geom.vertices), 4)

    def test_non_finite_points_are_skipped(self) -> None:
        geom = Plot.scatter("s", self.DOMAIN, [(0.0, 0.0), (float("nan"), 5.0), (200.0, 100.0)]).geometry(self.BODY)
        self.assertEqual(geom.vertices, ((200, 1300), (1880, 140)))

    def test_style_index_cycles(self) -> None:
        geom = Plot.line("s", self.DOMAIN, [(1.0, 1.0)]).geometry(self.BODY, index=11)
        self.assertEqual(geom.index, 11)
        self.assertEqual(geom.style_index, 1)

    def test_plots_compare_by_value(self) -> None:
        points = [(0.0, 0.0), (float("nan"), 5.0), (200.0, 100.0)]
        self.assertEqual(Plot.line("s", self.DOMAIN, points), Plot.line("s", self.DOMAIN, points))
        self.assertNotEqual(Plot.line("s", self.DOMAIN, points), Plot.line("s", self.DOMAIN, points[:1]))
        self.assertNotEqual(Plot.line("s", self.DOMAIN, points), Plot.area("s", self.DOMAIN, points))
        built = Chart().with_plot(Plot.line("s", self.DOMAIN, points))
        self.assertEqual(built, Chart().with_plot(Plot.line("s", self.DOMAIN, points)))

    def test_unknown_kind_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            Plot.of("s", self.DOMAIN, [(1.0, 1.0)], kind="bar")  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
