"""
Game state management for TicTacToe.
Tracks the board, the two players, move history and the running score.
"""

from typing import Dict, List, Optional, Sequence
from dataclasses import InitVar, dataclass, field

from .board import Board, Mark
from .config import GameConfig
from .move_validator import MoveValidator, ValidationResult


@dataclass
class Player:
    """
    One of the two players. The mark is fixed for the whole session.
    """
    id: str
    mark: Mark
    cpu: bool = False

    def name(self) -> str:
        """Display name, e.g. "Player 2 (cpu)"."""
        name = f"Player {self.id}"
        if self.cpu:
            name += " (cpu)"
        return name


def default_players(cpu_player: Optional[int] = None) -> List[Player]:
    """
    Create the two players from the config.

    Args:
        cpu_player: Index (0 or 1) of the player driven by the CPU, or None
            for a human vs human game.
    """
    return [
        Player(id=player_id, mark=Mark(mark), cpu=(index == cpu_player))
        for index, (player_id, mark) in enumerate(
            zip(GameConfig.PLAYER_IDS, GameConfig.PLAYER_MARKS)
        )
    ]


@dataclass
class Move:
    """
    A move in the game.
    """
    player_id: str      # Who made the move
    mark: Mark          # Mark that was placed
    row: int
    col: int
    turn: int           # Turn counter before the move


@dataclass
class GameState:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - The board (which marks are where)
    - The two players (player 1 moves on even turns)
    - Move history
    - Game status (ongoing, won, draw)
    """

    board: Board = field(default_factory=Board)
    players: Optional[List[Player]] = None

    # Move history
    moves: List[Move] = field(default_factory=list)

    # Game result
    winner: Optional[Player] = None
    is_draw: bool = False
    is_game_over: bool = False

    # Build a fresh board of this size instead of the default one
    size: InitVar[Optional[int]] = None

    validator = MoveValidator()

    def __post_init__(self, size: Optional[int]):
        if self.players is None:
            self.players = default_players()
        if size is not None and size != self.board.size:
            self.board = Board(size)

    @property
    def current_player(self) -> Player:
        """Player whose turn it is, from the turn counter's parity."""
        return self.players[self.board.turns % 2]

    def player_for(self, mark: Mark) -> Optional[Player]:
        for player in self.players:
            if player.mark == mark:
                return player
        return None

    def make_move(self, row: int, col: int) -> ValidationResult:
        """
        Place the current player's mark.

        Winner and draw are not checked here; run WinChecker.update_game_state
        after every successful move.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            ValidationResult describing why the move was rejected, if it was.
        """
        result = self.validator.validate_game_move(self, row, col)
        if not result.is_valid:
            return result

        player = self.current_player
        turn = self.board.turns
        result = self.board.place(row, col, player.mark)
        if result.is_valid:
            self.moves.append(Move(
                player_id=player.id,
                mark=player.mark,
                row=row,
                col=col,
                turn=turn
            ))

        return result

    def reset(self):
        """Start a new game with the same players."""
        self.board.reset()
        self.moves = []
        self.winner = None
        self.is_draw = False
        self.is_game_over = False


@dataclass
class Scoreboard:
    """Win/draw tally across the games of one session."""

    games_played: int = 0
    wins: Dict[str, int] = field(default_factory=dict)
    draws: int = 0

    def record(self, game_state: GameState):
        """
        Count a finished game. Unfinished games are ignored.
        """
        if not game_state.is_game_over:
            return

        self.games_played += 1
        if game_state.winner is not None:
            player_id = game_state.winner.id
            self.wins[player_id] = self.wins.get(player_id, 0) + 1
        else:
            self.draws += 1

    def summary(self, players: Sequence[Player]) -> str:
        parts = [f"{p.name()}: {self.wins.get(p.id, 0)}" for p in players]
        parts.append(f"Draws: {self.draws}")
        return f"Games: {self.games_played} | " + " | ".join(parts)
