"""
Heatmap chart builder.

Turns a fetched Dataset into the full chart geometry:
- Scales: year -> x band, month -> y band, temperature -> color, legend axis
- Year and month axes
- One cell per monthly record
- Legend swatches with their own linear axis
- Title and description

Every function here is pure: the same dataset always yields the same chart.
"""

import calendar
from dataclasses import dataclass

from app.config import (
    CHART_WIDTH, CHART_HEIGHT, CHART_MARGIN, Margin, COLORMAP_NAME,
    YEAR_TICK_INTERVAL, LEGEND_DOMAIN, LEGEND_WIDTH, LEGEND_HEIGHT,
    LEGEND_STEPS, LEGEND_TICKS, LEGEND_OFFSET_FROM_BOTTOM,
    TITLE_TEXT, TEMPERATURE_UNIT,
)
from app.engine.scales import (
    BandScale, LinearScale, SequentialScale,
    colormap_interpolator, extent, sample_range,
)
from app.models.dataset import Dataset
from app.models.chart import (
    Axis, AxisTick, CellShape, ChartText, HeatmapChart, Legend,
    LegendSwatch, MarginModel,
)

# Zero-based month index -> full month name
MONTH_NAMES: tuple[str, ...] = tuple(calendar.month_name[1:])


@dataclass(frozen=True)
class ChartScales:
    year: BandScale
    month: BandScale
    color: SequentialScale
    legend: LinearScale


def month_name(month_index: int) -> str:
    """Full month name for a zero-based month index."""
    return MONTH_NAMES[month_index]


def build_scales(
    dataset: Dataset,
    plot_width: float,
    plot_height: float,
    legend_width: float = LEGEND_WIDTH,
) -> ChartScales:
    """Derive the four chart scales from the dataset."""
    years = [r.year for r in dataset.monthly_variance]
    color_domain = extent(dataset.absolute_temps)

    return ChartScales(
        year=BandScale(years, (0.0, plot_width)),
        month=BandScale(range(12), (0.0, plot_height)),
        color=SequentialScale(colormap_interpolator(COLORMAP_NAME), color_domain),
        legend=LinearScale(LEGEND_DOMAIN, (0.0, legend_width)),
    )


def render_x_axis(year_scale: BandScale, plot_height: float) -> Axis:
    """Bottom axis labelled once per decade."""
    ticks = [
        AxisTick(value=year, label=str(year), position=year_scale.center(year))
        for year in year_scale.domain
        if year % YEAR_TICK_INTERVAL == 0
    ]
    return Axis(
        id="x-axis",
        orient="bottom",
        translate_y=plot_height,
        range=year_scale.range,
        ticks=ticks,
    )


def render_y_axis(month_scale: BandScale) -> Axis:
    """Left axis with every month by full name."""
    ticks = [
        AxisTick(value=m, label=month_name(m), position=month_scale.center(m))
        for m in month_scale.domain
    ]
    return Axis(id="y-axis", orient="left", range=month_scale.range, ticks=ticks)


def render_cells(dataset: Dataset, scales: ChartScales) -> list[CellShape]:
    """
    One rectangle per record, in input order.

    Duplicate (year, month) pairs produce overlapping cells; the later one is
    drawn on top.
    """
    base = dataset.base_temperature
    width = scales.year.bandwidth
    height = scales.month.bandwidth

    cells = []
    for record in dataset.monthly_variance:
        temp = record.absolute_temp(base)
        cells.append(CellShape(
            x=scales.year(record.year),
            y=scales.month(record.month - 1),
            width=width,
            height=height,
            fill=scales.color(temp),
            year=record.year,
            month=record.month - 1,
            absolute_temp=temp,
        ))
    return cells


def render_legend(
    scales: ChartScales,
    plot_height: float,
    margin: Margin = CHART_MARGIN,
    legend_width: float = LEGEND_WIDTH,
    legend_height: float = LEGEND_HEIGHT,
) -> Legend:
    """
    Color ramp legend.

    Swatches sample the legend domain but are colored with the main color
    scale; the legend's own linear scale only positions the axis ticks.
    """
    lo, hi = LEGEND_DOMAIN
    swatch_width = legend_width / LEGEND_STEPS
    swatches = [
        LegendSwatch(
            value=value,
            x=i * swatch_width,
            width=swatch_width,
            height=legend_height,
            fill=scales.color(value),
        )
        for i, value in enumerate(sample_range(lo, hi, LEGEND_STEPS))
    ]

    fmt = scales.legend.tick_format(LEGEND_TICKS)
    axis = Axis(
        id="legend-axis",
        orient="bottom",
        translate_y=legend_height,
        range=scales.legend.range,
        ticks=[
            AxisTick(value=v, label=fmt(v), position=scales.legend(v))
            for v in scales.legend.ticks(LEGEND_TICKS)
        ],
    )
    return Legend(
        translate_y=plot_height + margin.bottom - LEGEND_OFFSET_FROM_BOTTOM,
        width=legend_width,
        height=legend_height,
        domain=scales.legend.domain,
        swatches=swatches,
        axis=axis,
    )


def render_title(
    dataset: Dataset, plot_width: float, margin: Margin = CHART_MARGIN
) -> tuple[ChartText, ChartText]:
    first, last = dataset.year_span
    title = ChartText(
        id="title", x=plot_width / 2, y=-margin.top / 2, text=TITLE_TEXT,
    )
    description = ChartText(
        id="description",
        x=plot_width / 2,
        y=-margin.top / 2 + 20,
        text=(
            f"{first} - {last}: base temperature "
            f"{dataset.base_temperature:g}{TEMPERATURE_UNIT}"
        ),
    )
    return title, description


def build_heatmap_chart(
    dataset: Dataset,
    width: float = CHART_WIDTH,
    height: float = CHART_HEIGHT,
    margin: Margin = CHART_MARGIN,
) -> HeatmapChart:
    """Build the complete chart for a dataset."""
    plot_width = width - margin.left - margin.right
    plot_height = height - margin.top - margin.bottom

    scales = build_scales(dataset, plot_width, plot_height)
    title, description = render_title(dataset, plot_width, margin)

    return HeatmapChart(
        width=width,
        height=height,
        plot_width=plot_width,
        plot_height=plot_height,
        margin=MarginModel(**margin._asdict()),
        base_temperature=dataset.base_temperature,
        color_domain=scales.color.domain,
        title=title,
        description=description,
        x_axis=render_x_axis(scales.year, plot_height),
        y_axis=render_y_axis(scales.month),
        cells=render_cells(dataset, scales),
        legend=render_legend(scales, plot_height, margin),
    )
