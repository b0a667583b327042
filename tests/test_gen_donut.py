"""Tests for donut/gen_donut.py SVG generation."""
import xml.etree.ElementTree as ET
import pytest
from shared.geometry import GeometryError, describe_sector_path
from donut.gen_donut import render_donut_svg, render_slices, render_labels
from donut.layout import compute_layout

_NS = "{http://www.w3.org/2000/svg}"


@pytest.fixture(scope="module")
def svg_root(sample_data):
    return ET.fromstring(render_donut_svg(sample_data, "Total", width=200, height=200,
                                          outer_r=80, inner_r=40))


class TestRenderDonutSvg:
    def test_well_formed_svg(self, svg_root):
        assert svg_root.tag == f"{_NS}svg"
        assert svg_root.get("viewBox") == "0 0 200 200"

    def test_one_path_per_slice(self, svg_root, donut_layout):
        assert len(svg_root.findall(f"{_NS}path")) == len(donut_layout.slices)

    def test_paths_match_sector_geometry(self, svg_root, donut_layout):
        ds = [p.get("d") for p in svg_root.findall(f"{_NS}path")]
        expected = [describe_sector_path(100, 100, 80, s.start_angle, s.end_angle)
                    for s in donut_layout.slices]
        assert ds == expected

    def test_first_slice_path(self, svg_root):
        d = svg_root.findall(f"{_NS}path")[0].get("d")
        assert d == "M 100 180 A 80 80 0 0 0 100 20 L 100 100 Z"

    def test_hole_and_title(self, svg_root):
        circles = svg_root.findall(f"{_NS}circle")
        assert len(circles) == 1
        assert circles[0].get("r") == "40"
        texts = [t.text for t in svg_root.findall(f"{_NS}text")]
        assert "Total" in texts

    def test_percentage_labels(self, svg_root):
        texts = [t.text for t in svg_root.findall(f"{_NS}text")]
        assert {"50%", "25%", "15%", "10%"}.issubset(texts)

    def test_pie_has_no_hole(self, sample_data):
        root = ET.fromstring(render_donut_svg(sample_data, "Ignored", inner_r=0))
        assert root.findall(f"{_NS}circle") == []
        assert "Ignored" not in [t.text for t in root.findall(f"{_NS}text")]

    def test_single_value_draws_circle(self):
        root = ET.fromstring(render_donut_svg([("all", 1.0)], inner_r=0))
        assert root.findall(f"{_NS}path") == []
        assert len(root.findall(f"{_NS}circle")) == 1

    def test_title_escaped(self, sample_data):
        svg = render_donut_svg(sample_data, "R&D <2024>")
        assert "R&amp;D &lt;2024&gt;" in svg
        ET.fromstring(svg)

    def test_deterministic(self, sample_data):
        assert render_donut_svg(sample_data) == render_donut_svg(sample_data)

    def test_bad_data_raises(self):
        with pytest.raises(GeometryError):
            render_donut_svg([("x", -5)])


class TestRenderParts:
    def test_small_slices_unlabelled(self):
        layout = compute_layout([("big", 99), ("tiny", 1)], 50, 50, 40, 20)
        out = []
        render_labels(out, layout)
        assert len(out) == 1
        assert "99%" in out[0]

    def test_render_slices_appends(self, donut_layout):
        out = []
        render_slices(out, donut_layout)
        assert len(out) == 4
        assert all(line.startswith("<path ") for line in out)

    def test_collapsed_slices_not_drawn(self):
        layout = compute_layout([("a", 1), ("b", 1)], 50, 50, 40, 20, gap=200)
        assert all(s.sweep == 0 for s in layout.slices)
        out = []
        render_slices(out, layout)
        render_labels(out, layout)
        assert out == []
