"""Render a painted Screen to terminal-compatible escape sequences."""

from hanoi_tui.render.layout import ColorClass
from hanoi_tui.render.screen import Screen

# SGR foreground per colour class: white, red, blue
SGR_COLORS: dict[ColorClass, int] = {
    ColorClass.NEUTRAL: 37,
    ColorClass.EVEN: 31,
    ColorClass.ODD: 34,
}


class TerminalRenderer:
    """
    Render a Screen to ANSI text for a raw-mode terminal.

    Optimizes output by only emitting SGR codes when the colour changes.
    Rows are joined with CR LF and end with erase-to-end-of-line so a
    redraw from the home position leaves no stale characters behind.
    """

    def __init__(self, use_color: bool = True, reset_at_end: bool = True):
        self.use_color = use_color
        self.reset_at_end = reset_at_end

    def render(self, screen: Screen) -> str:
        """Render screen to ANSI string."""
        lines: list[str] = []
        last_color = None

        for row in screen.rows():
            # Find last non-blank cell to avoid trailing spaces
            last_col = -1
            for x, cell in enumerate(row):
                if not cell.is_blank():
                    last_col = x

            line_parts: list[str] = []
            for cell in row[:last_col + 1]:
                if self.use_color and not cell.is_blank() and cell.color != last_color:
                    line_parts.append(f"\x1b[{SGR_COLORS[cell.color]}m")
                    last_color = cell.color
                line_parts.append(cell.char)

            line_parts.append('\x1b[K')
            lines.append(''.join(line_parts))

        result = '\r\n'.join(lines)

        if self.use_color and self.reset_at_end:
            result += '\x1b[0m'

        return result
