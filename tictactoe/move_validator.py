"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .board import Board, get_empty_cells, is_valid_index
from .win_checker import Outcome


class MoveError(Enum):
    """Why a move was rejected."""
    INVALID_INDEX = "invalid_index"
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
    1. Game must not be over
    2. Index must be on the board (0-8)
    3. Can only place on empty cells

    A rejected move is not an error condition: it is reported
    through the result and the caller leaves its state alone.
    """

    def validate_move(
        self,
        board: Board,
        outcome: Outcome,
        index
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            outcome: Current outcome of the board.
            index: Cell to place a mark on (0-8).

        Returns:
            ValidationResult with is_valid, error and error_message.
        """
        # Check if game is over
        if outcome.is_game_over:
            return ValidationResult(
                is_valid=False,
                error=MoveError.GAME_OVER,
                error_message=f"Game is already over ({outcome})!"
            )

        # Check if index is in valid range
        if not is_valid_index(index):
            return ValidationResult(
                is_valid=False,
                error=MoveError.INVALID_INDEX,
                error_message=f"Invalid position {index!r}. Must be 0-8."
            )

        # Check if cell is empty
        if board[index] is not None:
            return ValidationResult(
                is_valid=False,
                error=MoveError.CELL_OCCUPIED,
                error_message=f"Cell {index} is already occupied by {board[index].value}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Board, outcome: Outcome) -> List[int]:
        """
        Get all valid moves for the side to move.

        Returns:
            List of valid indices, empty once the game is over.
        """
        if outcome.is_game_over:
            return []
        return get_empty_cells(board)
