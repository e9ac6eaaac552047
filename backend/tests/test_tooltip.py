"""
Tests for the hover tooltip state machine.
"""

import pytest

from app.engine.tooltip import TooltipController, format_tooltip
from app.models.chart import CellShape


def _cell(year=1900, month=6, temp=9.23) -> CellShape:
    return CellShape(
        x=0.0, y=0.0, width=4.0, height=37.5, fill="#000004",
        year=year, month=month, absolute_temp=temp,
    )


class TestFormatTooltip:
    def test_contains_year_month_and_temperature(self):
        text = format_tooltip(_cell())
        assert "1900" in text
        assert "July" in text
        assert "9.23" in text

    def test_rounds_to_two_decimals(self):
        text = format_tooltip(_cell(temp=8.66 + 0.57))
        assert "Temperature: 9.23℃" in text

    def test_negative_temperature(self):
        assert "Temperature: -0.50℃" in format_tooltip(_cell(temp=-0.5))


class TestTooltipController:
    def setup_method(self):
        self.tooltip = TooltipController()

    def test_starts_hidden(self):
        assert not self.tooltip.visible
        assert self.tooltip.state.text == ""

    def test_enter_shows_text_and_position(self):
        state = self.tooltip.pointer_enter(_cell(), 200.0, 300.0)
        assert state.visible
        assert "1900" in state.text
        assert "July" in state.text
        assert "9.23" in state.text
        assert state.left == pytest.approx(210.0)
        assert state.top == pytest.approx(272.0)
        assert state.year == 1900

    def test_move_updates_position_only(self):
        self.tooltip.pointer_enter(_cell(), 200.0, 300.0)
        text = self.tooltip.state.text
        state = self.tooltip.pointer_move(250.0, 320.0)
        assert state.visible
        assert state.text == text
        assert state.left == pytest.approx(260.0)
        assert state.top == pytest.approx(292.0)

    def test_leave_hides_but_keeps_text(self):
        self.tooltip.pointer_enter(_cell(), 200.0, 300.0)
        state = self.tooltip.pointer_leave()
        assert not state.visible
        assert "1900" in state.text

    def test_move_while_hidden_is_ignored(self):
        state = self.tooltip.pointer_move(50.0, 50.0)
        assert not state.visible
        assert state.left == 0.0

    def test_reenter_another_cell_replaces_text(self):
        self.tooltip.pointer_enter(_cell(), 0.0, 0.0)
        self.tooltip.pointer_leave()
        state = self.tooltip.pointer_enter(_cell(year=2015, month=11, temp=9.9), 5.0, 5.0)
        assert state.visible
        assert "2015" in state.text
        assert "December" in state.text
        assert "1900" not in state.text

    def test_reset(self):
        self.tooltip.pointer_enter(_cell(), 0.0, 0.0)
        self.tooltip.reset()
        assert not self.tooltip.visible
        assert self.tooltip.state.text == ""
