"""
Hover tooltip state machine.

One controller drives one shared overlay for all cells of a chart:

    HIDDEN --enter--> VISIBLE --move--> VISIBLE --leave--> HIDDEN

Entering sets the text and the initial position; moving only follows the
pointer; leaving hides the overlay but keeps the last text.
"""

from app.config import TOOLTIP_OFFSET_X, TOOLTIP_OFFSET_Y, TEMPERATURE_UNIT
from app.engine.heatmap import month_name
from app.models.chart import CellShape, TooltipState


def format_tooltip(cell: CellShape) -> str:
    return (
        f"Year: {cell.year}\n"
        f"Month: {month_name(cell.month)}\n"
        f"Temperature: {cell.absolute_temp:.2f}{TEMPERATURE_UNIT}"
    )


class TooltipController:
    def __init__(self):
        self._state = TooltipState()

    @property
    def state(self) -> TooltipState:
        return self._state

    @property
    def visible(self) -> bool:
        return self._state.visible

    def pointer_enter(self, cell: CellShape, page_x: float, page_y: float) -> TooltipState:
        self._state = TooltipState(
            visible=True,
            text=format_tooltip(cell),
            left=page_x + TOOLTIP_OFFSET_X,
            top=page_y + TOOLTIP_OFFSET_Y,
            year=cell.year,
        )
        return self._state

    def pointer_move(self, page_x: float, page_y: float) -> TooltipState:
        if self._state.visible:
            self._state = self._state.model_copy(update={
                "left": page_x + TOOLTIP_OFFSET_X,
                "top": page_y + TOOLTIP_OFFSET_Y,
            })
        return self._state

    def pointer_leave(self) -> TooltipState:
        self._state = self._state.model_copy(update={"visible": False})
        return self._state

    def reset(self) -> None:
        self._state = TooltipState()
