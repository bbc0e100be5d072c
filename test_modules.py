"""
Tests for the TicTacToe rules: board helpers, win checker and move validator.
"""

from tictactoe.board import (
    Mark, new_board, get_empty_cells, is_full, is_valid_index,
    index_to_cell, cell_to_index, format_board,
)
from tictactoe.win_checker import WinChecker, Outcome, GameStatus
from tictactoe.move_validator import MoveValidator, MoveError

X, O, _ = Mark.X, Mark.O, None


def all_reachable_boards():
    """Every board reachable by alternating play from the empty board."""
    checker = WinChecker()
    seen = set()
    stack = [(tuple(new_board()), Mark.X)]

    while stack:
        board, turn = stack.pop()
        if board in seen:
            continue
        seen.add(board)

        if checker.get_outcome(list(board)).is_game_over:
            continue

        for index in get_empty_cells(list(board)):
            child = list(board)
            child[index] = turn
            stack.append((tuple(child), turn.opposite()))

    return seen


# ==================== BOARD ====================

def test_new_board_is_empty():
    board = new_board()
    assert len(board) == 9
    assert get_empty_cells(board) == list(range(9))
    assert not is_full(board)


def test_mark_opposite():
    assert Mark.X.opposite() == Mark.O
    assert Mark.O.opposite() == Mark.X


def test_index_conversion():
    assert index_to_cell(0) == (0, 0)
    assert index_to_cell(5) == (1, 2)
    assert index_to_cell(8) == (2, 2)
    assert cell_to_index(2, 1) == 7
    for index in range(9):
        assert cell_to_index(*index_to_cell(index)) == index


def test_is_valid_index():
    assert is_valid_index(0)
    assert is_valid_index(8)
    assert not is_valid_index(-1)
    assert not is_valid_index(9)
    assert not is_valid_index("4")
    assert not is_valid_index(4.0)
    assert not is_valid_index(True)
    assert not is_valid_index(None)


def test_format_board():
    board = [X, O, _, _, X, _, _, _, X]
    text = format_board(board, highlight=(0, 4, 8))

    lines = text.splitlines()
    assert lines[0] == "[X]| O | 3 "
    assert lines[1] == "---+---+---"
    assert lines[2] == " 4 |[X]| 6 "
    assert lines[4] == " 7 | 8 |[X]"


# ==================== WIN CHECKER ====================

def test_horizontal_win():
    checker = WinChecker()
    board = [X, X, X,
             O, O, _,
             _, _, _]

    assert checker.check_winner(board) == Mark.X
    assert checker.get_winning_line(board) == (0, 1, 2)
    assert checker.get_outcome(board) == Outcome.win(Mark.X)


def test_vertical_win():
    checker = WinChecker()
    board = [X, O, X,
             _, O, _,
             X, O, _]

    assert checker.check_winner(board) == Mark.O
    assert checker.get_winning_line(board) == (1, 4, 7)


def test_diagonal_win():
    checker = WinChecker()
    board = [O, X, X,
             _, X, O,
             X, O, _]

    assert checker.get_winning_line(board) == (2, 4, 6)
    assert checker.get_outcome(board).winner == Mark.X


def test_first_line_in_scan_order_is_reported():
    checker = WinChecker()
    # X completes both the top row and the left column
    board = [X, X, X,
             X, O, O,
             X, O, O]

    assert checker.get_winning_line(board) == (0, 1, 2)


def test_no_winner():
    checker = WinChecker()
    board = [X, O, _,
             _, O, _,
             _, _, X]

    assert checker.check_winner(board) is None
    assert checker.get_winning_line(board) is None
    assert checker.get_outcome(board) == Outcome.in_progress()
    assert not checker.check_draw(board)


def test_full_board_without_line_is_draw():
    checker = WinChecker()
    board = [X, O, X,
             X, O, O,
             O, X, X]

    assert checker.check_draw(board)
    assert checker.get_outcome(board) == Outcome.draw()
    assert checker.get_outcome(board).status == GameStatus.DRAW
    assert checker.get_winning_line(board) is None


def test_full_board_with_line_is_win_not_draw():
    checker = WinChecker()
    board = [X, O, X,
             O, X, O,
             O, X, X]

    assert not checker.check_draw(board)
    assert checker.get_outcome(board) == Outcome.win(Mark.X)


def test_score():
    checker = WinChecker()
    x_wins = [X, X, X, O, O, _, _, _, _]
    drawn = [X, O, X, X, O, O, O, X, X]

    assert checker.score(x_wins, Mark.X) == 1
    assert checker.score(x_wins, Mark.O) == -1
    assert checker.score(drawn, Mark.X) == 0
    assert checker.score(new_board(), Mark.O) == 0


def test_checker_does_not_mutate_board():
    checker = WinChecker()
    board = [X, O, X, X, O, O, O, X, X]
    before = list(board)

    checker.get_outcome(board)
    checker.score(board, Mark.O)

    assert board == before


def test_outcome_is_unique_on_every_reachable_board():
    checker = WinChecker()
    boards = all_reachable_boards()

    # Well known count of positions reachable in real play
    assert len(boards) == 5478

    for board in boards:
        board = list(board)
        outcome = checker.get_outcome(board)
        winner = checker.check_winner(board)
        draw = checker.check_draw(board)

        assert not (winner is not None and draw)
        if winner is not None:
            assert outcome == Outcome.win(winner)
        elif draw:
            assert outcome == Outcome.draw()
        else:
            assert outcome == Outcome.in_progress()
            assert not is_full(board)


def test_outcome_str():
    assert str(Outcome.win(Mark.O)) == "O wins"
    assert str(Outcome.draw()) == "draw"
    assert str(Outcome.in_progress()) == "in progress"


# ==================== MOVE VALIDATOR ====================

def test_valid_move():
    validator = MoveValidator()
    result = validator.validate_move(new_board(), Outcome.in_progress(), 4)

    assert result.is_valid
    assert result.error is None
    assert result


def test_occupied_cell_rejected():
    validator = MoveValidator()
    board = new_board()
    board[4] = Mark.X

    result = validator.validate_move(board, Outcome.in_progress(), 4)

    assert not result.is_valid
    assert result.error == MoveError.CELL_OCCUPIED
    assert "occupied" in result.error_message


def test_out_of_range_rejected():
    validator = MoveValidator()

    for index in (-1, 9, 42, "1", None):
        result = validator.validate_move(new_board(), Outcome.in_progress(), index)
        assert result.error == MoveError.INVALID_INDEX


def test_game_over_rejected():
    validator = MoveValidator()
    board = [X, X, X, O, O, _, _, _, _]
    checker = WinChecker()

    result = validator.validate_move(board, checker.get_outcome(board), 5)

    assert result.error == MoveError.GAME_OVER
    assert validator.get_valid_moves(board, checker.get_outcome(board)) == []


def test_get_valid_moves():
    validator = MoveValidator()
    board = [X, _, O, _, X, _, _, _, O]

    assert validator.get_valid_moves(board, Outcome.in_progress()) == [1, 3, 5, 6, 7]
