"""
AI player for TicTacToe.
Picks moves from a fixed priority list of tactics instead of searching
the game tree, so it can be beaten.
"""

from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence, TypeVar

import numpy as np

from .board import Board, Coord, Mark
from .config import GameConfig

T = TypeVar("T")


class Tactic(Enum):
    """The CPU's tactics, in priority order."""
    OPENING = "opening move"
    RESPONSE = "response to opening"
    WIN = "winning move"
    BLOCK = "blocker"
    BUILD = "build toward a line"
    LANE = "take an open lane"
    RANDOM = "random"


class AIPlayer:
    """
    An AI that plays TicTacToe with a prioritized rule list.

    The first tactic that applies wins:
    1. Opening: random corner or center on the very first move
    2. Response: a corner if all are free, else the center
    3. Complete one of our lines
    4. Block an opponent line that is one mark from complete
    5. Extend a line that needs two more of our marks
    6. Start on a line nobody has touched
    7. Any empty cell

    The AI never changes the board. It returns a coordinate and the caller
    places the mark.
    """

    def __init__(
        self,
        mark: Mark = Mark.O,
        rng: Optional[np.random.Generator] = None,
        verbose: bool = GameConfig.LOG_TACTICS,
        print_fn: Callable[..., None] = print
    ):
        """
        Initialize the AI player.

        Args:
            mark: Which mark the AI places (default: O)
            rng: Random source. Anything with an integers(high) method works,
                which lets tests pass a fixed sequence.
            verbose: Print the chosen tactic on every move.
            print_fn: Where tactic and warning lines are written.
        """
        self.mark = mark
        self.opponent = mark.opposite()
        self.rng = rng if rng is not None else np.random.default_rng(GameConfig.RANDOM_SEED)
        self.verbose = verbose
        self.print_fn = print_fn

        # Tactic behind the most recent move (for debugging and tests)
        self.last_tactic: Optional[Tactic] = None

    def select_move(self, board: Board) -> Optional[Coord]:
        """
        Choose the next move for the AI.

        Args:
            board: Current board. It is not modified.

        Returns:
            (row, col) of an empty cell, or None if the board is full.
        """
        self.last_tactic = None

        empty = board.empty_cells()
        if not empty:
            if self.verbose:
                self.print_fn("Warning: no empty cells left for the CPU!")
            return None

        move = self._opening_move(board)
        if move is not None:
            return self._chose(Tactic.OPENING, move)

        move = self._response_move(board)
        if move is not None:
            return self._chose(Tactic.RESPONSE, move)

        own = board.counts_by_missing(self.mark)

        # One away from a line: take it
        if own.get(1):
            return self._chose(Tactic.WIN, own[1][0][0])

        theirs = board.counts_by_missing(self.opponent)
        if theirs.get(1):
            return self._chose(Tactic.BLOCK, theirs[1][0][0])

        if own.get(2):
            line = self._choice(own[2])
            return self._chose(Tactic.BUILD, self._choice(line))

        move = self._lane_move(board, own)
        if move is not None:
            return self._chose(Tactic.LANE, move)

        if len(empty) == 1:
            return self._chose(Tactic.RANDOM, empty[0])
        return self._chose(Tactic.RANDOM, self._choice(empty))

    def _opening_move(self, board: Board) -> Optional[Coord]:
        """Random corner or center on an empty odd-sized board."""
        center = board.center()
        if board.turns != 0 or center is None:
            return None

        choices = [c for c in board.corners() + [center] if board.get(*c) is None]
        if not choices:
            return None
        return self._choice(choices)

    def _response_move(self, board: Board) -> Optional[Coord]:
        """
        Second move of the game (or the first on an even-sized board).

        With every corner free, take (0, 0) if the opponent sits on an edge
        next to it, otherwise the bottom-right corner. If a corner is taken,
        go for the center.
        """
        if board.turns > 1:
            return None

        last = board.size - 1
        corners = board.corners()
        if all(board.get(*c) is None for c in corners):
            if board.size > 1 and self.opponent in (board.get(0, 1), board.get(1, 0)):
                return (0, 0)
            return (last, last)

        center = board.center()
        if center is not None and board.get(*center) is None:
            return center
        return None

    def _lane_move(
        self,
        board: Board,
        counts: Dict[int, List[List[Coord]]]
    ) -> Optional[Coord]:
        """First cell of the first line that is still completely empty."""
        open_lines = counts.get(board.size)
        if not open_lines:
            return None
        return open_lines[0][0]

    def _choice(self, items: Sequence[T]) -> T:
        index = int(self.rng.integers(len(items)))
        return items[index]

    def _chose(self, tactic: Tactic, move: Coord) -> Coord:
        self.last_tactic = tactic
        if self.verbose:
            self.print_fn(f"CPU tactic: {tactic.value}")
        return move
