"""
game constants shared by the core and the front-ends
"""

# -----------------------------------------------------------------------------
# BOARD
# -----------------------------------------------------------------------------

BOARD_SIZE = 3          # fixed 3x3 grid
EMPTY = ''              # value of an unclaimed cell

# -----------------------------------------------------------------------------
# PLAYERS
# -----------------------------------------------------------------------------

# (name, mark) pairs, first entry moves first
DEFAULT_PLAYERS = (
    ("Player One", 'X'),
    ("Player Two", 'O'),
)

# -----------------------------------------------------------------------------
# DRAWING
# -----------------------------------------------------------------------------

BOARD_BACKGROUND = "#333"
GRID_LINE_COLOR = "#555"
WIN_LINE_COLOR = "lime"
# marks not listed fall back to the second player's colour
MARK_COLORS = {'X': "#8acaff", 'O': "#ff8a8a"}
FALLBACK_MARK_COLOR = "#ff8a8a"
