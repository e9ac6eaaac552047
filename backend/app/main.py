"""
Temperature heatmap service: FastAPI application entry point.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.router import router
from app.engine.component import HeatmapComponent

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Mounted lazily on the first chart request, torn down at shutdown
    app.state.heatmap = HeatmapComponent()
    yield
    app.state.heatmap.unmount()


app = FastAPI(
    title="Temperature Heatmap API",
    description="Monthly global land-surface temperature heatmap",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(router)


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "temperature-heatmap"}
