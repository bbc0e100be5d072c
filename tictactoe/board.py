"""
Board model for TicTacToe.
Marks, the 9-cell board and a few helpers to work with it.
"""

from enum import Enum
from typing import Optional, List, Tuple


class Mark(Enum):
    """The two marks in the game. X always moves first."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the opposite mark."""
        return Mark.O if self == Mark.X else Mark.X


BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# A cell is a Mark, or None when empty.
# The board is a flat list of 9 cells, index = row * 3 + col
Cell = Optional[Mark]
Board = List[Cell]


def new_board() -> Board:
    """Create an empty board."""
    return [None] * CELL_COUNT


def is_valid_index(index) -> bool:
    """Check that index is an int in 0..8 (bools are rejected)."""
    if isinstance(index, bool) or not isinstance(index, int):
        return False
    return 0 <= index < CELL_COUNT


def get_empty_cells(board: Board) -> List[int]:
    """
    Get all empty cells on the board.

    Args:
        board: The board.

    Returns:
        List of empty indices, in index order.
    """
    return [i for i, cell in enumerate(board) if cell is None]


def is_full(board: Board) -> bool:
    """True if no cell is empty."""
    return all(cell is not None for cell in board)


def index_to_cell(index: int) -> Tuple[int, int]:
    """Convert a flat index to (row, col)."""
    return divmod(index, BOARD_SIZE)


def cell_to_index(row: int, col: int) -> int:
    """Convert (row, col) to a flat index."""
    return row * BOARD_SIZE + col


def format_board(board: Board, highlight: Optional[Tuple[int, ...]] = None) -> str:
    """
    Render the board as text.

    Empty cells show their 1-based cell number so a console player
    knows what to type. Cells in `highlight` are wrapped in brackets.
    """
    highlight = highlight or ()
    lines = []

    for row in range(BOARD_SIZE):
        cells = []
        for col in range(BOARD_SIZE):
            index = cell_to_index(row, col)
            mark = board[index]
            text = mark.value if mark is not None else str(index + 1)
            if index in highlight:
                cells.append(f"[{text}]")
            else:
                cells.append(f" {text} ")
        lines.append("|".join(cells))

        if row < BOARD_SIZE - 1:
            lines.append("---+---+---")

    return "\n".join(lines)
