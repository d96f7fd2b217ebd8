"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from enum import Enum
from typing import Optional, TYPE_CHECKING
from dataclasses import dataclass

if TYPE_CHECKING:
    from .board import Board
    from .game_state import GameState


class MoveError(Enum):
    """Why a move was rejected."""
    OUT_OF_BOUNDS = "out_of_bounds"
    CELL_OCCUPIED = "cell_occupied"
    GAME_OVER = "game_over"


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[MoveError] = None
    error_message: Optional[str] = None

    def __bool__(self) -> bool:
        return self.is_valid


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Row and column must both be on the board
    2. Can only place on empty cells
    3. Game must not be over
    """

    def validate_move(self, board: "Board", row: int, col: int) -> ValidationResult:
        """
        Validate a placement on a board.

        Args:
            board: Board the mark would be placed on.
            row: Row to place the mark.
            col: Column to place the mark.

        Returns:
            ValidationResult with is_valid, error and error_message.
        """
        # Check if row/col are in valid range
        if not board.in_bounds(row, col):
            return ValidationResult(
                is_valid=False,
                error=MoveError.OUT_OF_BOUNDS,
                error_message=(
                    f"Invalid position ({row}, {col}). "
                    f"Must be 0-{board.size - 1}."
                )
            )

        # Check if cell is empty
        occupant = board.get(row, col)
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error=MoveError.CELL_OCCUPIED,
                error_message=f"Cell ({row}, {col}) is already occupied by {occupant.value}"
            )

        return ValidationResult(is_valid=True)

    def validate_game_move(
        self,
        game_state: "GameState",
        row: int,
        col: int
    ) -> ValidationResult:
        """
        Validate a move for the player whose turn it is.

        Args:
            game_state: Current game state.
            row: Row to place the mark.
            col: Column to place the mark.

        Returns:
            ValidationResult.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error=MoveError.GAME_OVER,
                error_message="Game is already over!"
            )

        return self.validate_move(game_state.board, row, col)
