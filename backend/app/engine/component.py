"""
Heatmap component lifecycle.

The component owns the fetched dataset, the chart built from it and the
tooltip controller. The dataset is fetched once per mount; a fetch that
resolves after unmount() is dropped instead of being rendered.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from app.engine.data_loader import fetch_dataset
from app.engine.heatmap import build_heatmap_chart
from app.engine.tooltip import TooltipController
from app.models.chart import CellShape, HeatmapChart
from app.models.dataset import Dataset

logger = logging.getLogger(__name__)

Loader = Callable[[], Awaitable[Dataset]]


class ComponentUnmountedError(RuntimeError):
    """The component was torn down before or while mounting."""


class HeatmapComponent:
    def __init__(self, loader: Optional[Loader] = None):
        self._loader = loader or fetch_dataset
        self._lock = asyncio.Lock()
        self._alive = True
        self._dataset: Optional[Dataset] = None
        self._chart: Optional[HeatmapChart] = None
        self._cells: dict[tuple[int, int], CellShape] = {}
        self.tooltip = TooltipController()

    @property
    def mounted(self) -> bool:
        return self._chart is not None

    @property
    def alive(self) -> bool:
        return self._alive

    @property
    def dataset(self) -> Optional[Dataset]:
        return self._dataset

    @property
    def chart(self) -> Optional[HeatmapChart]:
        return self._chart

    async def mount(self) -> HeatmapChart:
        """Fetch the dataset and build the chart; later calls reuse the result."""
        if not self._alive:
            raise ComponentUnmountedError("Heatmap component has been unmounted")

        async with self._lock:
            if self._chart is not None:
                return self._chart
            # Mounts queued behind an in-flight fetch may wake up after unmount()
            if not self._alive:
                raise ComponentUnmountedError("Heatmap component has been unmounted")

            dataset = await self._loader()
            if not self._alive:
                logger.debug("Dataset arrived after unmount, discarding")
                raise ComponentUnmountedError("Heatmap component was unmounted during fetch")

            chart = build_heatmap_chart(dataset)
            self._dataset = dataset
            self._chart = chart
            # Last cell wins for duplicate (year, month) pairs, same as drawing order
            self._cells = {(c.year, c.month): c for c in chart.cells}
            return chart

    def unmount(self) -> None:
        self._alive = False
        self._dataset = None
        self._chart = None
        self._cells = {}
        self.tooltip.reset()

    def find_cell(self, year: int, month: int) -> Optional[CellShape]:
        """Look up the cell drawn for (year, zero-based month)."""
        return self._cells.get((year, month))
