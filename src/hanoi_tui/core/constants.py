"""Fixed design constants for the puzzle and its layout."""

# The solved check and the initial stack assume pole 0 is the source
# and the last pole is the goal, so the pole count is not configurable.
POLES = 3

DEFAULT_DISKS = 3

# Layout geometry
PADDING = 2       # Blank columns/rows around and between poles
DISK_M = 2        # Width added per unit of disk size

# Glyphs
POLE_CHAR = '|'
DISK_CHAR = 'X'
CURSOR_CHAR = '+'

# Disk glyphs used when colour output is disabled
EVEN_CHAR = 'E'
ODD_CHAR = 'O'

TOO_SMALL_MESSAGE = "window is too small to render"
