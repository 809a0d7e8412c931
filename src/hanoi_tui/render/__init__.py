"""Layout and drawing of the board."""

from hanoi_tui.render.layout import (
    ColorClass,
    Placement,
    RenderPlan,
    plan_render,
    required_size,
)
from hanoi_tui.render.screen import Screen
from hanoi_tui.render.terminal import TerminalRenderer

__all__ = [
    "ColorClass",
    "Placement",
    "RenderPlan",
    "plan_render",
    "required_size",
    "Screen",
    "TerminalRenderer",
]
