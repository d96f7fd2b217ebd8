"""
TicTacToe
=========
Two players take turns placing X and O on a square board until one of
them fills a row, column or diagonal. One side can be played by a CPU
that follows a fixed list of tactics.
"""

from .board import Board, Mark, make_lines
from .move_validator import MoveError, MoveValidator, ValidationResult
from .game_state import GameState, Player, Scoreboard
from .win_checker import WinChecker
from .ai_player import AIPlayer, Tactic

__version__ = "1.0.0"
