"""
HTML page serving the interactive heatmap.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from app.api.heatmap import get_component, mount_chart
from app.engine.component import HeatmapComponent
from app.engine.svg_renderer import render_page

router = APIRouter(tags=["page"])


@router.get("/heatmap", response_class=HTMLResponse)
async def get_heatmap_page(component: HeatmapComponent = Depends(get_component)):
    chart = await mount_chart(component)
    return HTMLResponse(content=render_page(chart))
