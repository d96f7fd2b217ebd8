"""
Console front end for TicTacToe.

Reads "row col" moves from the terminal, prints the board after every
move, lets the CPU play one side, and keeps score across games.
"""

import re
from typing import Callable, Optional

import numpy as np

from .ai_player import AIPlayer
from .board import Board, Coord
from .config import GameConfig
from .game_state import GameState, Scoreboard, default_players
from .win_checker import WinChecker

MOVE_PATTERN = re.compile(r"^\s*(\d+)\s*[ ,]\s*(\d+)\s*$")


class QuitGame(Exception):
    """Raised when the player types a quit word."""


class BadInput(ValueError):
    """Raised when a line can't be read as a move."""


def parse_move(text: str) -> Coord:
    """
    Parse "row col" (or "row,col") into a coordinate.

    Raises:
        QuitGame: the text is one of the quit words.
        BadInput: the text is not two integers.
    """
    text = text.strip().lower()
    if text in GameConfig.QUIT_WORDS:
        raise QuitGame(text)

    match = MOVE_PATTERN.match(text)
    if match is None:
        raise BadInput("bad input")
    return int(match.group(1)), int(match.group(2))


def render_board(board: Board) -> str:
    """Render the board one row per line, e.g. [X][_][O]."""
    rows = []
    for row in board.grid:
        cells = [GameConfig.EMPTY_SYMBOL if c is None else c.value for c in row]
        rows.append("[" + "][".join(cells) + "]")
    return "\n".join(rows)


class GameSession:
    """
    Runs games in the terminal until the players stop.

    Game flow:
    1. Print the empty board
    2. The current player picks a cell (typed, or chosen by the CPU)
    3. Print the board and check for a winner or a full board
    4. Repeat until the game ends, then update the score
    """

    def __init__(
        self,
        cpu_player: Optional[int] = 1,
        rng: Optional[np.random.Generator] = None,
        verbose: bool = GameConfig.LOG_TACTICS,
        input_fn: Callable[[str], str] = input,
        print_fn: Callable[..., None] = print
    ):
        """
        Initialize the session.

        Args:
            cpu_player: Index (0 or 1) of the CPU player, None for two humans.
            rng: Random source for the CPU.
            verbose: Print CPU tactics.
            input_fn: Reads a line after showing a prompt.
            print_fn: Writes output.
        """
        self.game_state = GameState(players=default_players(cpu_player))
        self.win_checker = WinChecker()
        self.scoreboard = Scoreboard()
        self.input_fn = input_fn
        self.print_fn = print_fn

        self.ai: Optional[AIPlayer] = None
        if cpu_player is not None:
            cpu_mark = self.game_state.players[cpu_player].mark
            self.ai = AIPlayer(
                cpu_mark, rng=rng, verbose=verbose, print_fn=print_fn
            )

        self.is_running = False

    def run(self) -> Scoreboard:
        """Play games until the user quits or declines a rematch."""
        self.is_running = True

        while self.is_running:
            self.play_game()
            if not self.is_running:
                break

            self.print_fn(self.scoreboard.summary(self.game_state.players))
            if not self._ask_play_again():
                self.is_running = False
            else:
                self.game_state.reset()

        return self.scoreboard

    def play_game(self):
        """Play one game to a win, a draw or a quit."""
        game = self.game_state
        self.print_fn(render_board(game.board))

        while not game.is_game_over:
            player = game.current_player

            if player.cpu:
                move = self.ai.select_move(game.board)
                self.print_fn(f"{player.name()} picked {move[0]} {move[1]}")
            else:
                try:
                    move = parse_move(self.input_fn(f"{player.name()}> "))
                except QuitGame:
                    self.print_fn(f"{player.name()} is a quitter, cya")
                    self.is_running = False
                    return
                except BadInput as e:
                    self.print_fn(str(e))
                    continue

            result = game.make_move(*move)
            if not result.is_valid:
                self.print_fn(result.error_message)
                continue

            self.print_fn(render_board(game.board))
            self.win_checker.update_game_state(game)

        self.scoreboard.record(game)
        self._show_game_result()

    def _show_game_result(self):
        game = self.game_state
        if game.winner is not None:
            self.print_fn(f"Result: {game.winner.name()} wins!")
        else:
            self.print_fn("Result: cat's game")

    def _ask_play_again(self) -> bool:
        try:
            answer = self.input_fn("Play again? [y/n] ")
        except EOFError:
            return False
        return answer.strip().lower() in GameConfig.YES_WORDS


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--mode",
        choices=["cpu", "human"],
        default="cpu",
        help="Play against the CPU or another human"
    )
    parser.add_argument(
        "--cpu-first",
        action="store_true",
        help="Let the CPU play first (as X)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=GameConfig.RANDOM_SEED,
        help="Seed for the CPU's random choices"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Don't print which tactic the CPU used"
    )

    args = parser.parse_args()

    if args.mode == "human":
        cpu_player = None
    elif args.cpu_first:
        cpu_player = 0
    else:
        cpu_player = 1

    session = GameSession(
        cpu_player=cpu_player,
        rng=np.random.default_rng(args.seed),
        verbose=GameConfig.LOG_TACTICS and not args.quiet
    )

    try:
        session.run()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
