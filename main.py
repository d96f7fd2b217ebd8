"""
Main script for TicTacToe.

Run this script to play TicTacToe in the terminal:

    python main.py                 # you are X, the CPU is O
    python main.py --cpu-first     # the CPU opens as X
    python main.py --mode human    # two humans at one keyboard
"""

from tictac.console import main


if __name__ == "__main__":
    main()
