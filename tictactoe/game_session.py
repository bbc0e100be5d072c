"""
Game session management for TicTacToe.
Tracks the board, whose turn it is and the game mode, and drives the
AI opponent in Human vs. AI games.
"""

import threading
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .ai_player import AIPlayer
from .board import Board, Cell, Mark, new_board
from .config import GameConfig
from .move_validator import MoveValidator, ValidationResult
from .timers import ThreadingMoveTimer
from .win_checker import Line, Outcome, WinChecker


class GameMode(Enum):
    """How the two marks are controlled."""
    NONE = "none"
    HUMAN_VS_HUMAN = "human"
    HUMAN_VS_AI = "ai"


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of a session for the presentation layer."""
    board: Tuple[Cell, ...]
    turn: Mark
    outcome: Outcome
    winning_line: Optional[Line]
    mode: GameMode


class GameSession:
    """
    The state of one TicTacToe match.

    Game flow:
    1. A mode is chosen (set_mode), which starts a fresh match
    2. Moves are applied with apply_move; X moves first
    3. In Human vs. AI mode, when it is the AI's turn a cancelable
       timer is started and the AI's move is applied when it fires
    4. Once someone wins or the board is full, further moves are rejected
       until reset() or set_mode()

    The outcome and winning line are always worked out from the board,
    never stored.
    """

    def __init__(
        self,
        mode: GameMode = GameMode.NONE,
        ai_player: Mark = GameConfig.AI_PLAYER,
        ai_delay: float = GameConfig.AI_DELAY_SECONDS,
        timer=None
    ):
        """
        Initialize the session.

        Args:
            mode: Starting game mode (default: none chosen yet).
            ai_player: Which mark the AI plays in Human vs. AI mode.
            ai_delay: Seconds to wait before the AI moves.
            timer: Object with schedule(delay, callback) -> handle with
                cancel(). Defaults to a threading.Timer based one.
        """
        self.ai_player = ai_player
        self.ai_delay = ai_delay
        self.timer = timer if timer is not None else ThreadingMoveTimer()

        self.ai = AIPlayer(ai_player)
        self.win_checker = WinChecker()
        self.validator = MoveValidator()

        self.mode = GameMode(mode)
        self.board: Board = new_board()
        self.current_player = Mark.X

        # The one outstanding AI timer, and a counter bumped whenever
        # the board or mode changes so a stale timer can tell
        self._pending = None
        self._generation = 0

        # The default timer fires on another thread; every change to the
        # board, turn, mode or pending timer happens under this lock
        self._lock = threading.RLock()

        self._schedule_ai_if_needed()

    @property
    def outcome(self) -> Outcome:
        return self.win_checker.get_outcome(self.board)

    @property
    def winning_line(self) -> Optional[Line]:
        return self.win_checker.get_winning_line(self.board)

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_game_over

    @property
    def is_ai_turn(self) -> bool:
        """True if the AI should move now."""
        return (
            self.mode == GameMode.HUMAN_VS_AI
            and self.current_player == self.ai_player
            and not self.is_game_over
        )

    @property
    def has_pending_move(self) -> bool:
        """True while an AI move is waiting on its timer."""
        return self._pending is not None

    @property
    def valid_moves(self) -> List[int]:
        """Cells the player to move may take, empty once the game is over."""
        return self.validator.get_valid_moves(self.board, self.outcome)

    def set_mode(self, mode: GameMode):
        """
        Choose a game mode and start a fresh match.

        Raises:
            ValueError: If mode is not a GameMode (or one of its values).
        """
        mode = GameMode(mode)
        with self._lock:
            self.mode = mode
            self.reset()

    def reset(self):
        """Start a fresh match, keeping the current mode."""
        with self._lock:
            self.cancel_pending()
            self.board = new_board()
            self.current_player = Mark.X
            self._schedule_ai_if_needed()

    def apply_move(self, index: int) -> ValidationResult:
        """
        Place the current player's mark at index.

        Args:
            index: Cell index (0-8).

        Returns:
            ValidationResult. On a rejected move nothing changes.
        """
        with self._lock:
            result = self.validator.validate_move(self.board, self.outcome, index)
            if not result.is_valid:
                return result

            self.cancel_pending()
            self.board[index] = self.current_player

            # No next player once the game has ended
            if not self.is_game_over:
                self.current_player = self.current_player.opposite()

            self._schedule_ai_if_needed()
            return result

    def play_automated_move(self, generation: Optional[int] = None) -> Optional[int]:
        """
        Compute and apply the AI's move right away.

        The search runs without holding the lock. If the board, mode or
        timer changed meanwhile, the move is dropped.

        Args:
            generation: Board generation the move is meant for
                (default: the current one).

        Returns:
            The index played, or None if it is not the AI's turn or the
            game moved on during the search.
        """
        with self._lock:
            if generation is None:
                generation = self._generation
            if generation != self._generation or not self.is_ai_turn:
                return None
            # Search on a copy, the live board may be read by the UI meanwhile
            board = list(self.board)

        move = self.ai.get_best_move(board)
        if move is None:
            return None

        with self._lock:
            if generation != self._generation:
                return None
            result = self.apply_move(move)
            return move if result.is_valid else None

    def get_hint(self) -> str:
        """Suggest the best move for the player to move."""
        with self._lock:
            if not self.valid_moves:
                return "Game is over!"
            board = list(self.board)
            player = self.current_player
        return AIPlayer(player).get_move_suggestion(board)

    def cancel_pending(self):
        """Cancel the outstanding AI timer, if any."""
        with self._lock:
            self._generation += 1
            pending, self._pending = self._pending, None
        if pending is not None:
            pending.cancel()

    def wait_for_automated_move(self, timeout: Optional[float] = None) -> bool:
        """
        Block until the outstanding AI timer has fired.

        Only timers whose handle supports join() (e.g. threading.Timer)
        can be waited on.

        Returns:
            True if there was a timer to wait for.
        """
        pending = self._pending
        if pending is None or not hasattr(pending, "join"):
            return False
        pending.join(timeout)
        return True

    def snapshot(self) -> SessionSnapshot:
        """Get a read-only copy of the session state."""
        with self._lock:
            return SessionSnapshot(
                board=tuple(self.board),
                turn=self.current_player,
                outcome=self.outcome,
                winning_line=self.winning_line,
                mode=self.mode
            )

    def status_message(self) -> str:
        """One line describing the state of the match."""
        if self.mode == GameMode.NONE:
            return "Choose a game mode to begin!"

        outcome = self.outcome
        if outcome.winner is not None:
            return f"Player {outcome.winner.value} has won!"
        if outcome.is_game_over:
            return "Game ended in a draw!"
        if self.is_ai_turn:
            return f"AI ({self.current_player.value}) is thinking..."
        return f"It's {self.current_player.value}'s turn!"

    def _schedule_ai_if_needed(self):
        """Start the AI timer if it is the AI's turn."""
        with self._lock:
            if not self.is_ai_turn:
                return

            self.cancel_pending()
            generation = self._generation
            # The callback needs the lock too, so it cannot run before
            # the handle is stored
            self._pending = self.timer.schedule(
                self.ai_delay,
                lambda: self._on_timer(generation)
            )

    def _on_timer(self, generation: int):
        """Timer callback: play the AI's move unless the game moved on."""
        with self._lock:
            if generation != self._generation:
                return
            self._pending = None
        self.play_automated_move(generation)
