"""
Tests for the SVG drawing surface and HTML page.
"""

import re

import pytest

from app.engine.heatmap import build_heatmap_chart
from app.engine.svg_renderer import render_page, render_svg
from app.models.dataset import Dataset

SAMPLE = Dataset.model_validate({
    "baseTemperature": 8.66,
    "monthlyVariance": [
        {"year": 1900, "month": 7, "variance": 0.57},
        {"year": 1910, "month": 1, "variance": -0.4},
        {"year": 1911, "month": 12, "variance": 1.1},
    ],
})


class TestRenderSvg:
    def setup_method(self):
        self.chart = build_heatmap_chart(SAMPLE)
        self.svg = render_svg(self.chart)

    def test_root_size(self):
        assert self.svg.startswith('<svg xmlns="http://www.w3.org/2000/svg" width="1200" height="600">')
        assert self.svg.endswith("</svg>")

    def test_plot_group_translated_by_margin(self):
        assert '<g transform="translate(100,50)">' in self.svg

    def test_element_ids(self):
        for element_id in ("x-axis", "y-axis", "legend", "title", "description"):
            assert f'id="{element_id}"' in self.svg

    def test_one_rect_per_cell(self):
        assert self.svg.count('class="cell"') == 3

    def test_cell_attributes(self):
        match = re.search(r'<rect class="cell"[^>]*data-year="1900"[^>]*/>', self.svg)
        assert match is not None
        rect = match.group(0)
        assert 'data-month="6"' in rect
        temp = float(re.search(r'data-temp="([^"]+)"', rect).group(1))
        assert temp == pytest.approx(9.23)
        assert f"fill: {self.chart.cells[0].fill};" in rect
        assert "July" in rect

    def test_cell_geometry_is_exact(self):
        ds = Dataset.model_validate({
            "baseTemperature": 8.66,
            "monthlyVariance": [
                {"year": y, "month": 1, "variance": 0.0} for y in range(1753, 2016)
            ],
        })
        chart = build_heatmap_chart(ds)
        rects = re.findall(r'<rect class="cell"[^>]*/>', render_svg(chart))
        assert len(rects) == len(chart.cells)
        for rect, cell in zip(rects, chart.cells):
            attrs = dict(re.findall(r'(x|y|width|height)="([^"]+)"', rect))
            assert float(attrs["x"]) == cell.x
            assert float(attrs["y"]) == cell.y
            assert float(attrs["width"]) == cell.width
            assert float(attrs["height"]) == cell.height

    def test_decade_ticks_only(self):
        x_axis = self.svg.split('id="x-axis"')[1].split('id="y-axis"')[0]
        assert ">1900</text>" in x_axis
        assert ">1910</text>" in x_axis
        assert ">1911</text>" not in x_axis

    def test_month_labels(self):
        assert ">January</text>" in self.svg
        assert ">December</text>" in self.svg

    def test_legend_swatches(self):
        legend = self.svg.split('id="legend"')[1]
        assert legend.count("<rect ") == 12
        assert ">12</text>" in legend

    def test_description_text(self):
        assert "1900 - 1911: base temperature 8.66℃" in self.svg


class TestRenderPage:
    def setup_method(self):
        self.page = render_page(build_heatmap_chart(SAMPLE))

    def test_single_tooltip_overlay(self):
        assert self.page.count('id="tooltip"') == 1
        assert "visibility: hidden" in self.page

    def test_embeds_svg(self):
        assert '<div id="chart"><svg' in self.page

    def test_script_uses_pointer_offsets(self):
        assert "event.pageX + 10" in self.page
        assert "event.pageY + -28" in self.page
        assert "mouseover" in self.page
        assert "mouseout" in self.page
