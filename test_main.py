"""
Tests for the console front-end.
"""

from main import ConsoleGame, parse_move, describe_mode
from tictactoe.board import Mark
from tictactoe.game_session import GameMode, GameSession

from test_game_session import FakeTimer


def make_game(mode=GameMode.HUMAN_VS_HUMAN):
    timer = FakeTimer()
    session = GameSession(mode=mode, timer=timer)
    return ConsoleGame(session), timer


def test_parse_move():
    assert parse_move("1") == 0
    assert parse_move("9") == 8
    assert parse_move(" 5 ") == 4
    assert parse_move("2 3") == 5
    assert parse_move("3,1") == 6


def test_parse_move_rejects_garbage():
    for text in ("", "0", "10", "abc", "4 4", "1 2 3", "-1"):
        assert parse_move(text) is None


def test_move_command(capsys):
    game, _ = make_game()

    game.handle_command("5")

    assert game.session.board[4] == Mark.X
    assert "It's O's turn!" in capsys.readouterr().out


def test_rejected_move_is_reported(capsys):
    game, _ = make_game()
    game.handle_command("5")
    capsys.readouterr()

    game.handle_command("5")

    assert "already occupied" in capsys.readouterr().out
    assert game.session.current_player == Mark.O


def test_restart_and_quit():
    game, _ = make_game()
    game.handle_command("1")

    game.handle_command("r")
    assert game.session.board == [None] * 9

    game.is_running = True
    game.handle_command("q")
    assert not game.is_running


def test_switch_mode():
    game, _ = make_game(GameMode.HUMAN_VS_HUMAN)

    game.handle_command("m")
    assert game.session.mode == GameMode.HUMAN_VS_AI

    game.handle_command("m")
    assert game.session.mode == GameMode.HUMAN_VS_HUMAN


def test_wait_for_ai_with_unjoinable_timer():
    game, timer = make_game(GameMode.HUMAN_VS_AI)
    game.handle_command("1")

    # FakeTimer handles cannot be joined, so the AI plays directly
    game._wait_for_ai()

    assert game.session.board[4] == Mark.O
    assert timer.last.cancelled


def test_hint_command(capsys):
    game, _ = make_game()

    game.handle_command("h")

    assert "Place X on cell 1" in capsys.readouterr().out


def test_describe_mode():
    assert describe_mode(GameMode.HUMAN_VS_AI) == "Human vs. AI"
    assert describe_mode(GameMode.HUMAN_VS_HUMAN) == "Human vs. Human"
