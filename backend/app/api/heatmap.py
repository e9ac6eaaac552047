"""
API routes for the temperature heatmap chart.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import Response

from app.engine.component import ComponentUnmountedError, HeatmapComponent
from app.engine.data_loader import DatasetLoadError
from app.engine.svg_renderer import render_svg
from app.models.chart import CellShape, HeatmapChart, TooltipEvent, TooltipState

router = APIRouter(prefix="/api/v1", tags=["heatmap"])


def get_component(request: Request) -> HeatmapComponent:
    return request.app.state.heatmap


async def mount_chart(component: HeatmapComponent) -> HeatmapChart:
    """Mount the component, translating load failures into HTTP errors."""
    try:
        return await component.mount()
    except DatasetLoadError as e:
        raise HTTPException(status_code=502, detail=str(e))
    except ComponentUnmountedError as e:
        raise HTTPException(status_code=503, detail=str(e))


@router.get("/heatmap", response_model=HeatmapChart)
async def get_heatmap(component: HeatmapComponent = Depends(get_component)):
    """
    Full chart geometry: scales applied to every record, axes, legend
    and title, ready to be drawn.
    """
    return await mount_chart(component)


@router.get("/heatmap/svg")
async def get_heatmap_svg(component: HeatmapComponent = Depends(get_component)):
    chart = await mount_chart(component)
    return Response(content=render_svg(chart), media_type="image/svg+xml")


@router.get("/heatmap/cells", response_model=list[CellShape])
async def get_cells(
    year: Optional[int] = None,
    month: Optional[int] = Query(None, ge=0, le=11),
    component: HeatmapComponent = Depends(get_component),
):
    """Cells filtered by year and/or zero-based month."""
    chart = await mount_chart(component)
    return [
        c for c in chart.cells
        if (year is None or c.year == year) and (month is None or c.month == month)
    ]


@router.post("/heatmap/tooltip", response_model=TooltipState)
async def apply_tooltip_event(
    event: TooltipEvent,
    component: HeatmapComponent = Depends(get_component),
):
    """
    Apply one pointer event to the shared tooltip and return its new state.

    `enter` needs the hovered cell's year and zero-based month.
    """
    await mount_chart(component)
    tooltip = component.tooltip

    if event.type == "enter":
        if event.year is None or event.month is None:
            raise HTTPException(status_code=422, detail="enter requires year and month")
        cell = component.find_cell(event.year, event.month)
        if cell is None:
            raise HTTPException(
                status_code=404,
                detail=f"No cell for year {event.year}, month {event.month}",
            )
        return tooltip.pointer_enter(cell, event.page_x, event.page_y)
    if event.type == "move":
        return tooltip.pointer_move(event.page_x, event.page_y)
    return tooltip.pointer_leave()
