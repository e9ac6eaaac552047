"""
SVG / HTML serializer for the heatmap chart.

The markup keeps the ids, classes and data attributes that browser-side
tests query: #title, #description, #x-axis, #y-axis, #legend, .cell with
data-month (0-based), data-year and data-temp, and a single #tooltip overlay.
"""

from html import escape

from app.config import TOOLTIP_OFFSET_X, TOOLTIP_OFFSET_Y
from app.engine.tooltip import format_tooltip
from app.models.chart import Axis, HeatmapChart, Legend

_TICK_SIZE = 6
_TICK_PADDING = 3


def _num(value: float) -> str:
    """Full-precision number for attributes, without a trailing .0."""
    return repr(float(value)) if value != int(value) else str(int(value))


def _attr(value) -> str:
    return escape(str(value), quote=True)


def render_axis(axis: Axis) -> str:
    r0, r1 = axis.range
    parts = [
        f'<g id="{_attr(axis.id)}" class="axis" '
        f'transform="translate({_num(axis.translate_x)},{_num(axis.translate_y)})" '
        f'fill="none" font-size="10" font-family="sans-serif" '
        f'text-anchor="{"middle" if axis.orient == "bottom" else "end"}">'
    ]
    if axis.orient == "bottom":
        parts.append(
            f'<path class="domain" stroke="currentColor" '
            f'd="M{_num(r0)},{_TICK_SIZE}V0H{_num(r1)}V{_TICK_SIZE}"/>'
        )
        for tick in axis.ticks:
            parts.append(
                f'<g class="tick" opacity="1" transform="translate({_num(tick.position)},0)">'
                f'<line stroke="currentColor" y2="{_TICK_SIZE}"/>'
                f'<text fill="currentColor" y="{_TICK_SIZE + _TICK_PADDING}" dy="0.71em">'
                f'{escape(tick.label)}</text></g>'
            )
    else:
        parts.append(
            f'<path class="domain" stroke="currentColor" '
            f'd="M-{_TICK_SIZE},{_num(r0)}H0V{_num(r1)}H-{_TICK_SIZE}"/>'
        )
        for tick in axis.ticks:
            parts.append(
                f'<g class="tick" opacity="1" transform="translate(0,{_num(tick.position)})">'
                f'<line stroke="currentColor" x2="-{_TICK_SIZE}"/>'
                f'<text fill="currentColor" x="-{_TICK_SIZE + _TICK_PADDING}" dy="0.32em">'
                f'{escape(tick.label)}</text></g>'
            )
    parts.append("</g>")
    return "".join(parts)


def render_legend(legend: Legend) -> str:
    parts = [
        f'<g id="legend" transform="translate({_num(legend.translate_x)},{_num(legend.translate_y)})">'
    ]
    for swatch in legend.swatches:
        parts.append(
            f'<rect x="{_num(swatch.x)}" y="0" width="{_num(swatch.width)}" '
            f'height="{_num(swatch.height)}" style="fill: {swatch.fill};"/>'
        )
    parts.append(render_axis(legend.axis))
    parts.append("</g>")
    return "".join(parts)


def render_svg(chart: HeatmapChart) -> str:
    """Serialize the chart as a standalone SVG document fragment."""
    m = chart.margin
    parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{_num(chart.width)}" height="{_num(chart.height)}">',
        f'<g transform="translate({_num(m.left)},{_num(m.top)})">',
        render_axis(chart.x_axis),
        render_axis(chart.y_axis),
    ]
    for cell in chart.cells:
        parts.append(
            f'<rect class="cell" x="{_num(cell.x)}" y="{_num(cell.y)}" '
            f'width="{_num(cell.width)}" height="{_num(cell.height)}" '
            f'data-month="{cell.month}" data-year="{cell.year}" '
            f'data-temp="{cell.absolute_temp!r}" '
            f'data-tooltip="{_attr(format_tooltip(cell))}" '
            f'style="fill: {cell.fill};"/>'
        )
    for text in (chart.title, chart.description):
        parts.append(
            f'<text id="{text.id}" x="{_num(text.x)}" y="{_num(text.y)}" '
            f'text-anchor="middle">{escape(text.text)}</text>'
        )
    parts.append(render_legend(chart.legend))
    parts.append("</g></svg>")
    return "".join(parts)


# Mirrors TooltipController: enter sets text + position, move tracks the
# pointer, leave hides. One overlay element is shared by every cell.
_TOOLTIP_SCRIPT = """
(function () {
  var tooltip = document.getElementById('tooltip');
  document.querySelectorAll('#chart .cell').forEach(function (cell) {
    cell.addEventListener('mouseover', function (event) {
      tooltip.textContent = cell.getAttribute('data-tooltip');
      tooltip.setAttribute('data-year', cell.getAttribute('data-year'));
      tooltip.style.left = (event.pageX + %(dx)s) + 'px';
      tooltip.style.top = (event.pageY + %(dy)s) + 'px';
      tooltip.style.visibility = 'visible';
    });
    cell.addEventListener('mousemove', function (event) {
      tooltip.style.left = (event.pageX + %(dx)s) + 'px';
      tooltip.style.top = (event.pageY + %(dy)s) + 'px';
    });
    cell.addEventListener('mouseout', function () {
      tooltip.style.visibility = 'hidden';
    });
  });
})();
"""


def render_page(chart: HeatmapChart) -> str:
    """Full HTML page: chart surface, the shared tooltip overlay and its script."""
    script = _TOOLTIP_SCRIPT % {
        "dx": _num(TOOLTIP_OFFSET_X),
        "dy": _num(TOOLTIP_OFFSET_Y),
    }
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en"><head><meta charset="utf-8">'
        f"<title>{escape(chart.title.text)}</title></head><body>"
        f'<div id="chart">{render_svg(chart)}</div>'
        '<div id="tooltip" style="position: absolute; visibility: hidden; '
        "background: white; border: 1px solid black; padding: 5px; "
        'border-radius: 3px; white-space: pre-line;"></div>'
        f"<script>{script}</script>"
        "</body></html>"
    )
