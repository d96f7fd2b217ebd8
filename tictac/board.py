"""
Board and winning lines for TicTacToe.
Holds the grid, precomputes every row/column/diagonal once, and answers
the line queries used by the win checker and the CPU player.
"""

from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple, Union

from .config import GameConfig
from .move_validator import MoveValidator, ValidationResult


class Mark(Enum):
    """The two marks a player can place."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the other player's mark."""
        return Mark.O if self == Mark.X else Mark.X


Coord = Tuple[int, int]
Line = Tuple[Coord, ...]


def make_lines(size: int) -> Tuple[Line, ...]:
    """
    Calculate every line of coordinates that wins the game.

    Rows and columns come interleaved (row 0, column 0, row 1, ...),
    followed by the main diagonal and then the anti-diagonal.

    Args:
        size: Board size.

    Returns:
        Tuple of 2 * size + 2 lines, each with size coordinates.
    """
    lines: List[Line] = []

    for i in range(size):
        row_line = tuple((i, col) for col in range(size))
        col_line = tuple((row, i) for row in range(size))
        lines.extend([row_line, col_line])

    lines.append(tuple((i, i) for i in range(size)))
    lines.append(tuple((i, size - 1 - i) for i in range(size)))

    return tuple(lines)


class Board:
    """
    A square TicTacToe grid.

    Cells are None when empty, otherwise the Mark placed there.
    The winning lines are computed once when the board is created.
    """

    validator = MoveValidator()

    def __init__(self, size: int = GameConfig.BOARD_SIZE):
        """
        Create an empty board.

        Args:
            size: Number of rows (and columns). Must be at least 1.
        """
        if size < 1:
            raise ValueError(f"Board size must be at least 1, got {size}")

        self.size = size
        self.lines = make_lines(size)
        self.grid: List[List[Optional[Mark]]] = [
            [None for _ in range(size)] for _ in range(size)
        ]

        # Successful placements so far
        self.turns = 0

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Union[str, Mark, None]]]) -> "Board":
        """
        Build a board from nested rows such as [["X", "", ""], ...].

        Empty strings and None are empty cells. The turn counter is set to
        the number of occupied cells.
        """
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError("Board rows must form a square grid")

        board = cls(size)
        for row, cells in enumerate(rows):
            for col, cell in enumerate(cells):
                if cell is None or cell == "":
                    continue
                try:
                    mark = cell if isinstance(cell, Mark) else Mark(cell)
                except ValueError:
                    raise ValueError(f"Unknown mark {cell!r} at ({row}, {col})") from None
                board.grid[row][col] = mark
                board.turns += 1

        return board

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row: int, col: int) -> Optional[Mark]:
        return self.grid[row][col]

    def place(self, row: int, col: int, mark: Mark) -> ValidationResult:
        """
        Place a mark on the board.

        Args:
            row: Row index.
            col: Column index.
            mark: Mark to place.

        Returns:
            ValidationResult. The board is left untouched when it is not valid.
        """
        result = self.validator.validate_move(self, row, col)
        if not result.is_valid:
            return result

        self.grid[row][col] = mark
        self.turns += 1
        return result

    def is_line_complete(self, mark: Mark) -> bool:
        """Check if any line is filled entirely with mark."""
        return self.winning_line(mark) is not None

    def winning_line(self, mark: Mark) -> Optional[Line]:
        """
        Get the first line filled entirely with mark.

        Returns:
            The line as a tuple of (row, col), or None.
        """
        for line in self.lines:
            for row, col in line:
                if self.grid[row][col] != mark:
                    break  # this line can't be complete
            else:
                return line
        return None

    def counts_by_missing(self, mark: Mark) -> Dict[int, List[List[Coord]]]:
        """
        Group the lines mark can still complete by how many marks they lack.

        A line holding any opponent mark is skipped. Every other line adds
        its list of empty coordinates to the bucket keyed by the number of
        empty cells, so bucket 0 holds complete lines and bucket size holds
        untouched lines.

        Args:
            mark: Mark to evaluate lines for.

        Returns:
            Dict with keys 0..size, each a list of empty-coordinate lists.
        """
        counts: Dict[int, List[List[Coord]]] = {k: [] for k in range(self.size + 1)}

        for line in self.lines:
            empty: List[Coord] = []
            blocked = False
            for row, col in line:
                cell = self.grid[row][col]
                if cell is None:
                    empty.append((row, col))
                elif cell != mark:
                    blocked = True
                    break
            if not blocked:
                counts[len(empty)].append(empty)

        return counts

    def empty_cells(self) -> List[Coord]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples in row-major order.
        """
        empty = []
        for row in range(self.size):
            for col in range(self.size):
                if self.grid[row][col] is None:
                    empty.append((row, col))
        return empty

    def is_full(self) -> bool:
        return all(cell is not None for row in self.grid for cell in row)

    def corners(self) -> List[Coord]:
        """The four corners, clockwise from the top-left."""
        last = self.size - 1
        return [(0, 0), (0, last), (last, last), (last, 0)]

    def center(self) -> Optional[Coord]:
        """The center cell, or None when the size is even."""
        if self.size % 2 == 0:
            return None
        mid = self.size // 2
        return (mid, mid)

    def reset(self):
        """Clear every cell and the turn counter. Lines are kept."""
        self.grid = [[None for _ in range(self.size)] for _ in range(self.size)]
        self.turns = 0

    def copy(self) -> "Board":
        """Create a copy of the board sharing the immutable lines."""
        new_board = Board.__new__(Board)
        new_board.size = self.size
        new_board.lines = self.lines
        new_board.grid = [[cell for cell in row] for row in self.grid]
        new_board.turns = self.turns
        return new_board
