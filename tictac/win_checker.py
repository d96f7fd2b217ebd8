"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional

from .board import Board, Line, Mark
from .game_state import GameState


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: every cell of a row, column or diagonal holds the same
    mark. The lines themselves come precomputed with the board.
    """

    def check_winner(self, board: Board) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            board: The board to check.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        for mark in Mark:
            if board.is_line_complete(mark):
                return mark
        return None

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw: the board is full and nobody won.
        """
        if self.check_winner(board) is not None:
            return False
        return board.is_full()

    def get_winning_line(self, board: Board) -> Optional[Line]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as a tuple of (row, col), or None.
        """
        for mark in Mark:
            line = board.winning_line(mark)
            if line is not None:
                return line
        return None

    def update_game_state(self, game_state: GameState) -> GameState:
        """
        Update the game state with winner/draw information.

        Args:
            game_state: The game state to update.

        Returns:
            Updated game state.
        """
        winner = self.check_winner(game_state.board)

        if winner is not None:
            game_state.winner = game_state.player_for(winner)
            game_state.is_game_over = True
        elif self.check_draw(game_state.board):
            game_state.is_draw = True
            game_state.is_game_over = True

        return game_state
