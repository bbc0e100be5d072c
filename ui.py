"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- Mode selection (Human vs. Human, Human vs. AI)
- The 3x3 board, with the winning line highlighted
- Game status and whose turn it is
"""

import tkinter as tk
from typing import Callable, List

from tictactoe.board import Mark, CELL_COUNT, BOARD_SIZE, cell_to_index
from tictactoe.config import GameConfig
from tictactoe.game_session import GameMode, GameSession, SessionSnapshot


class TkMoveTimer:
    """
    Schedules the AI's move on the Tk event loop.

    Runs callbacks on the UI thread, so the session is never touched
    from two threads at once.
    """

    class Handle:
        """A pending `after` callback that can be cancelled."""

        def __init__(self, root: tk.Tk, after_id: str):
            self.root = root
            self.after_id = after_id

        def cancel(self):
            self.root.after_cancel(self.after_id)

    def __init__(self, root: tk.Tk):
        self.root = root

    def schedule(self, delay: float, callback: Callable[[], None]) -> "TkMoveTimer.Handle":
        after_id = self.root.after(int(delay * 1000), callback)
        return TkMoveTimer.Handle(self.root, after_id)


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    REFRESH_MS = 50

    def __init__(
        self,
        ai_player: Mark = GameConfig.AI_PLAYER,
        ai_delay: float = GameConfig.AI_DELAY_SECONDS
    ):
        """Initialize the UI."""
        self.is_running = False
        self.cells: List[tk.Button] = []

        self._create_ui()

        self.session = GameSession(
            ai_player=ai_player,
            ai_delay=ai_delay,
            timer=TkMoveTimer(self.root)
        )
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(GameConfig.WINDOW_TITLE)
        self.root.configure(bg=GameConfig.BACKGROUND)
        self.root.minsize(420, 560)

        # Main container
        main_frame = tk.Frame(self.root, bg=GameConfig.PANEL, padx=30, pady=20)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=20, pady=20)

        tk.Label(
            main_frame,
            text="Tic-Tac-Toe",
            font=GameConfig.TITLE_FONT,
            bg=GameConfig.PANEL,
            fg=GameConfig.TITLE_COLOR
        ).pack(pady=(0, 10))

        self.status_label = tk.Label(
            main_frame,
            text="",
            font=GameConfig.STATUS_FONT,
            bg=GameConfig.PANEL,
            fg=GameConfig.TEXT_COLOR
        )
        self.status_label.pack(pady=(0, 15))

        # Mode selection
        mode_frame = tk.Frame(main_frame, bg=GameConfig.PANEL)
        mode_frame.pack(pady=(0, 15))

        for text, mode in [
            ("Human vs. Human", GameMode.HUMAN_VS_HUMAN),
            ("Human vs. AI", GameMode.HUMAN_VS_AI),
        ]:
            tk.Button(
                mode_frame,
                text=text,
                font=GameConfig.BUTTON_FONT,
                bg=GameConfig.BUTTON_BG,
                fg='white',
                width=15,
                command=lambda m=mode: self._set_mode(m)
            ).pack(side=tk.LEFT, padx=5)

        # Board grid
        board_frame = tk.Frame(main_frame, bg=GameConfig.PANEL)
        board_frame.pack()

        for index in range(CELL_COUNT):
            row, col = divmod(index, BOARD_SIZE)
            cell = tk.Button(
                board_frame,
                text="",
                font=GameConfig.CELL_FONT,
                width=3,
                height=1,
                bg=GameConfig.CELL_BG,
                activebackground=GameConfig.CELL_HOVER,
                relief=tk.FLAT,
                command=lambda i=cell_to_index(row, col): self._on_cell_click(i)
            )
            cell.grid(row=row, column=col, padx=4, pady=4)
            self.cells.append(cell)

        # Control buttons
        tk.Button(
            main_frame,
            text="Restart Game",
            font=GameConfig.BUTTON_FONT,
            bg=GameConfig.BUTTON_BG,
            fg='white',
            width=15,
            command=self._reset_game
        ).pack(pady=(15, 5))

        tk.Button(
            main_frame,
            text="Quit",
            font=GameConfig.BUTTON_FONT,
            bg='#ef4444',
            fg='white',
            width=15,
            command=self._quit
        ).pack()

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _set_mode(self, mode: GameMode):
        """Choose a mode and start a new game."""
        self.session.set_mode(mode)
        print(f"Mode set to: {mode.value}")
        self._refresh()

    def _on_cell_click(self, index: int):
        """Apply a human move, unless the AI is the one to move."""
        if self.session.mode == GameMode.NONE or self.session.is_ai_turn:
            return

        result = self.session.apply_move(index)
        if not result.is_valid:
            print(result.error_message)
        self._refresh()

    def _update_loop(self):
        """Keep the board in sync with moves made by the AI timer."""
        if not self.is_running:
            return

        self._refresh()
        self.root.after(self.REFRESH_MS, self._update_loop)

    def _refresh(self):
        """Redraw the board and status from a session snapshot."""
        snapshot = self.session.snapshot()
        self.status_label.configure(text=self.session.status_message())
        self._update_board_display(snapshot)

    def _update_board_display(self, snapshot: SessionSnapshot):
        """Update the board grid display."""
        if snapshot.mode == GameMode.NONE or self.session.is_ai_turn:
            playable = []
        else:
            playable = self.session.valid_moves
        winning_line = snapshot.winning_line or ()

        for index, mark in enumerate(snapshot.board):
            cell = self.cells[index]

            bg = GameConfig.WIN_HIGHLIGHT if index in winning_line else GameConfig.CELL_BG
            fg = GameConfig.MARK_COLORS[mark] if mark is not None else GameConfig.TEXT_COLOR

            cell.configure(
                text=mark.value if mark is not None else "",
                bg=bg,
                fg=fg,
                disabledforeground=fg,
                state=tk.NORMAL if index in playable else tk.DISABLED
            )

    def _reset_game(self):
        """Reset the game."""
        print("Resetting game...")
        self.session.reset()
        self._refresh()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.is_running = False
        self.session.cancel_pending()

        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.is_running = True
        self._update_loop()
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe UI")
    parser.add_argument(
        "--ai-first",
        action="store_true",
        help="Let the AI play first (as X)"
    )

    args = parser.parse_args()

    ai_player = Mark.X if args.ai_first else GameConfig.AI_PLAYER

    print("\n" + "="*40)
    print("   TicTacToe UI")
    print(f"   AI plays: {ai_player.value}")
    print("="*40 + "\n")

    ui = TicTacToeUI(ai_player=ai_player)
    ui.run()


if __name__ == "__main__":
    main()
