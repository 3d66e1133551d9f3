"""
exceptions raised by the game core
"""


class GridMatchError(Exception):
    """base class for game core errors"""


class InvalidCoordinateError(GridMatchError, ValueError):
    """
    column/row outside the grid
    """
    def __init__(self, column, row, columns, rows):
        self.column = column
        self.row = row
        super().__init__(
            f"cell ({column}, {row}) is off the board, "
            f"column must be 0-{columns - 1} and row 0-{rows - 1}"
        )
