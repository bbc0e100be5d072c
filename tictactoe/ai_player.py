"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

from typing import List, Optional, Tuple

from .board import Board, Mark, get_empty_cells, index_to_cell, is_full
from .win_checker import WinChecker


WIN_SCORE = 10


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).

    The search is exhaustive (no pruning, no cache). Scores are
    adjusted by depth so a faster win beats a slower one and a
    slower loss beats a faster one.

    Candidate marks are placed on the board passed in and removed
    again before returning, so the caller's board is left exactly
    as it was. Do not share that board with a concurrent reader
    while a search is running.
    """

    def __init__(self, player: Mark = Mark.O, opponent: Optional[Mark] = None):
        """
        Initialize the AI player.

        Args:
            player: Which mark the AI plays (default: O)
            opponent: The other mark (default: player.opposite())
        """
        self.player = player
        self.opponent = opponent if opponent is not None else player.opposite()
        self.win_checker = WinChecker()

    def get_best_move(self, board: Board) -> Optional[int]:
        """
        Get the best move for the AI on this board.

        Ties go to the lowest index.

        Args:
            board: Current board. Left unchanged.

        Returns:
            Index of the best move, or None if no cell is empty.
        """
        best_score = None
        best_move = None

        for index, score in self.evaluate_moves(board):
            if best_score is None or score > best_score:
                best_score = score
                best_move = index

        return best_move

    def evaluate_moves(self, board: Board) -> List[Tuple[int, int]]:
        """
        Score every empty cell for the AI.

        Returns:
            (index, score) pairs in index order.
        """
        scores = []

        for index in get_empty_cells(board):
            board[index] = self.player
            try:
                # Next ply belongs to the opponent
                score = self.minimax(board, 0, False)
            finally:
                board[index] = None
            scores.append((index, score))

        return scores

    def minimax(self, board: Board, depth: int, is_maximizing: bool) -> int:
        """
        Minimax algorithm, full depth.

        Args:
            board: Board to evaluate. Restored before returning.
            depth: Plies played since the candidate move.
            is_maximizing: True if it's the AI's turn.

        Returns:
            The score of the position from the AI's point of view.
        """
        score = self.win_checker.score(board, self.player)

        if score == 1:
            return WIN_SCORE - depth
        if score == -1:
            return depth - WIN_SCORE
        if is_full(board):
            return 0

        mover = self.player if is_maximizing else self.opponent
        best = None

        for index in get_empty_cells(board):
            board[index] = mover
            try:
                value = self.minimax(board, depth + 1, not is_maximizing)
            finally:
                board[index] = None  # Undo the move

            if best is None:
                best = value
            elif is_maximizing:
                best = max(best, value)
            else:
                best = min(best, value)

        return best

    def get_move_suggestion(self, board: Board) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            board: Current board.

        Returns:
            A string describing the suggested move.
        """
        move = self.get_best_move(board)

        if move is None:
            return "No moves available!"

        row, col = index_to_cell(move)
        return f"Place {self.player.value} on cell {move + 1} (row {row + 1}, column {col + 1})"


# Quick test
if __name__ == "__main__":
    from .board import format_board

    print("Testing AIPlayer...")

    ai = AIPlayer(Mark.O)
    X, O, _ = Mark.X, Mark.O, None

    # Test 1: AI should block the diagonal
    board = [X, _, _,
             _, X, _,
             _, _, _]
    print(format_board(board))
    move = ai.get_best_move(board)
    print(f"AI's move: {move}")
    assert move == 8, f"Expected 8, got {move}"
    print("✓ AI correctly blocks the win!")

    # Test 2: AI should take a winning move
    board = [O, O, _,
             _, X, _,
             X, _, _]
    print(format_board(board))
    move = ai.get_best_move(board)
    print(f"AI's move: {move}")
    assert move == 2, f"Expected 2, got {move}"
    print("✓ AI correctly takes the win!")

    print("\nAIPlayer test done!")
