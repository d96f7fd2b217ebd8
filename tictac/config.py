"""
Game configuration for TicTacToe.
All the settings for the board, players, console and CPU opponent.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tweak how the game looks and plays.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid (the Board class itself accepts any size)
    BOARD_SIZE = 3

    # ==================== PLAYER SETTINGS ====================
    # Player 1 always moves on even turns, player 2 on odd turns
    PLAYER_IDS = ("1", "2")
    PLAYER_MARKS = ("X", "O")

    # ==================== CONSOLE SETTINGS ====================
    # Symbol used when rendering an empty cell
    EMPTY_SYMBOL = "_"

    # Typing one of these at the prompt ends the session
    QUIT_WORDS = ("exit", "quit")

    # Answers accepted as "yes" when asked to play again
    YES_WORDS = ("y", "yes")

    # ==================== CPU SETTINGS ====================
    # Seed for the CPU's random source (None = fresh entropy every run)
    RANDOM_SEED = None

    # Print which tactic the CPU picked on every move
    LOG_TACTICS = True
