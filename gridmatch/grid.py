from .config import BOARD_SIZE, EMPTY
from .errors import InvalidCoordinateError


class Grid:
    """
    fixed rows x columns board of write-once cells
    """
    def __init__(self, rows=BOARD_SIZE, columns=BOARD_SIZE):
        """
        build the board with every cell empty
        """
        if rows < 1 or columns < 1:
            raise ValueError(f"grid needs at least one row and column, got {rows}x{columns}")
        self._rows = rows; self._columns = columns
        # row 0 is the top row, column 0 the left-most column
        self._cells = [[EMPTY for _ in range(columns)] for _ in range(rows)]

    @property
    def rows(self):
        return self._rows

    @property
    def columns(self):
        return self._columns

    def contains(self, column, row):
        # true if coords are on the board
        return 0 <= column < self._columns and 0 <= row < self._rows

    def get(self, column, row):
        """
        value of one cell, EMPTY or a mark
        """
        self._check(column, row)
        return self._cells[row][column]

    def place(self, column, row, mark):
        """
        claim an empty cell for mark
        returns: True if the cell changed, False if it was already taken
        raises InvalidCoordinateError for coords off the board
        """
        self._check(column, row)
        if mark == EMPTY:
            raise ValueError("cannot place an empty mark")
        if self._cells[row][column] != EMPTY:
            return False
        self._cells[row][column] = mark
        return True

    def snapshot(self):
        """
        read-only copy of the board, rows of cell values
        """
        return tuple(tuple(row) for row in self._cells)

    def is_full(self):
        return all(cell != EMPTY for row in self._cells for cell in row)

    def empty_cells(self):
        """
        list of (column, row) still open, row-major
        """
        return [(c, r) for r in range(self._rows)
                for c in range(self._columns) if self._cells[r][c] == EMPTY]

    def lines(self):
        """
        every candidate winning line as a tuple of (column, row)
        order: rows, columns, main diagonal, anti-diagonal
        """
        result = [tuple((c, r) for c in range(self._columns)) for r in range(self._rows)]
        result += [tuple((c, r) for r in range(self._rows)) for c in range(self._columns)]
        # diagonals only run corner to corner on a square board
        if self._rows == self._columns:
            n = self._rows
            result.append(tuple((i, i) for i in range(n)))
            result.append(tuple((n - 1 - i, i) for i in range(n)))
        return result

    def _check(self, column, row):
        if not self.contains(column, row):
            raise InvalidCoordinateError(column, row, self._columns, self._rows)

    def __repr__(self):
        return f"Grid(rows={self._rows}, columns={self._columns})"
