"""
TicTacToe
=========
Two-player TicTacToe on a 3x3 board, with an optional computer
opponent that plays perfectly using full-depth minimax.

Handles game rules, game sessions and the AI opponent.
"""

from .board import Mark, Board, new_board, format_board, get_empty_cells
from .win_checker import WinChecker, Outcome, GameStatus
from .move_validator import MoveValidator, MoveError, ValidationResult
from .ai_player import AIPlayer
from .game_session import GameSession, GameMode, SessionSnapshot
from .timers import ThreadingMoveTimer
from .config import GameConfig

__version__ = "1.0.0"
