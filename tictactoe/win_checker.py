"""
Win checker for TicTacToe.
Checks if a mark has won or if the game is a draw.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .board import Board, Mark, is_full


Line = Tuple[int, int, int]


class GameStatus(Enum):
    """Classification of a board."""
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    Outcome of a board.

    `winner` is set only when status is WIN.
    """
    status: GameStatus
    winner: Optional[Mark] = None

    @classmethod
    def in_progress(cls) -> "Outcome":
        return cls(GameStatus.IN_PROGRESS)

    @classmethod
    def win(cls, mark: Mark) -> "Outcome":
        return cls(GameStatus.WIN, mark)

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(GameStatus.DRAW)

    @property
    def is_game_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    def __str__(self) -> str:
        if self.status == GameStatus.WIN:
            return f"{self.winner.value} wins"
        if self.status == GameStatus.DRAW:
            return "draw"
        return "in progress"


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally).

    Every method is a pure function of the board it is given,
    so one checker can be shared freely.
    """

    # All possible winning lines, in the order they are scanned
    WINNING_LINES: Tuple[Line, ...] = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    def get_winning_line(self, board: Board) -> Optional[Line]:
        """
        Get the winning line if there is one.

        Args:
            board: The board.

        Returns:
            The first completed line in scan order, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(board, line) is not None:
                return line
        return None

    def check_winner(self, board: Board) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            board: The board.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        return board[line[0]]

    def _check_line(self, board: Board, line: Line) -> Optional[Mark]:
        """Return the mark filling all 3 cells of line, None otherwise."""
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return board[a]
        return None

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND there is no winner.
        """
        if self.check_winner(board) is not None:
            return False
        return is_full(board)

    def get_outcome(self, board: Board) -> Outcome:
        """Classify the board as a win, a draw or still in progress."""
        winner = self.check_winner(board)

        if winner is not None:
            return Outcome.win(winner)
        if is_full(board):
            return Outcome.draw()
        return Outcome.in_progress()

    def score(self, board: Board, perspective: Mark) -> int:
        """
        Score the board from one mark's point of view.

        Returns:
            +1 if perspective has a line, -1 if the opponent does,
            0 otherwise (in progress and draw alike).
        """
        winner = self.check_winner(board)

        if winner is None:
            return 0
        return 1 if winner == perspective else -1


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()
    X, O, _ = Mark.X, Mark.O, None

    # Test 1: Horizontal win
    board = [X, X, X,
             O, O, _,
             _, _, _]
    print(f"Test 1 (horizontal): {checker.get_outcome(board)}, line = {checker.get_winning_line(board)}")
    assert checker.get_winning_line(board) == (0, 1, 2)

    # Test 2: Diagonal win
    board = [O, X, X,
             _, O, X,
             _, _, O]
    print(f"Test 2 (diagonal): {checker.get_outcome(board)}")
    assert checker.check_winner(board) == Mark.O

    # Test 3: Draw (full board, no winner)
    board = [X, O, X,
             X, O, O,
             O, X, X]
    print(f"Test 3 (draw): {checker.get_outcome(board)}")
    assert checker.check_draw(board)

    print("\nWinChecker test done!")
