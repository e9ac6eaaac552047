"""
Pydantic models for the rendered heatmap chart.

Everything the drawing surface needs is carried here as plain geometry, so the
same model backs the JSON endpoint and the SVG serializer.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict


class MarginModel(BaseModel):
    top: float
    right: float
    bottom: float
    left: float


class CellShape(BaseModel):
    """One grid rectangle with the source record's values attached."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    width: float
    height: float
    fill: str
    year: int
    month: int          # 0-11
    absolute_temp: float


class AxisTick(BaseModel):
    value: float
    label: str
    position: float     # px along the axis, band centre for band scales


class Axis(BaseModel):
    id: str
    orient: Literal["bottom", "left"]
    translate_x: float = 0.0
    translate_y: float = 0.0
    range: tuple[float, float]
    ticks: list[AxisTick]


class ChartText(BaseModel):
    id: str
    x: float
    y: float
    text: str


class LegendSwatch(BaseModel):
    value: float        # sampled temperature
    x: float
    width: float
    height: float
    fill: str


class Legend(BaseModel):
    translate_x: float = 0.0
    translate_y: float
    width: float
    height: float
    domain: tuple[float, float]
    swatches: list[LegendSwatch]
    axis: Axis


class HeatmapChart(BaseModel):
    """Complete chart geometry for one dataset."""
    width: float
    height: float
    plot_width: float
    plot_height: float
    margin: MarginModel
    base_temperature: float
    color_domain: tuple[float, float]
    title: ChartText
    description: ChartText
    x_axis: Axis
    y_axis: Axis
    cells: list[CellShape]
    legend: Legend


class TooltipState(BaseModel):
    """Current state of the shared tooltip overlay."""
    visible: bool = False
    text: str = ""
    left: float = 0.0
    top: float = 0.0
    year: Optional[int] = None


class TooltipEvent(BaseModel):
    """A pointer event applied to the tooltip controller."""
    type: Literal["enter", "move", "leave"]
    year: Optional[int] = None
    month: Optional[int] = None     # 0-11
    page_x: float = 0.0
    page_y: float = 0.0
