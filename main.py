"""
Main entry point for TicTacToe.

By default this opens the Tkinter UI. With --no-ui the game is played
in the console instead:
- Type a cell number (1-9) or "row col" (1-3 each) to move
- h = hint, r = restart, m = switch mode, q = quit

Run this script to play TicTacToe against a friend or the computer!
"""

from typing import Optional

from tictactoe.board import Mark, cell_to_index, format_board
from tictactoe.config import GameConfig
from tictactoe.game_session import GameMode, GameSession


HELP_TEXT = "Enter 1-9 (or 'row col'), h=hint, r=restart, m=switch mode, q=quit"


def parse_move(text: str) -> Optional[int]:
    """
    Parse console input into a board index.

    Accepts a cell number "1".."9" or "row col" with both in 1..3.

    Returns:
        Index 0-8, or None if the text is not a move.
    """
    parts = text.replace(",", " ").split()

    try:
        numbers = [int(part) for part in parts]
    except ValueError:
        return None

    if len(numbers) == 1 and 1 <= numbers[0] <= 9:
        return numbers[0] - 1
    if len(numbers) == 2 and all(1 <= n <= 3 for n in numbers):
        return cell_to_index(numbers[0] - 1, numbers[1] - 1)
    return None


class ConsoleGame:
    """
    Console front-end for a GameSession.

    Game flow:
    1. Print the board and status
    2. If it's the AI's turn, wait for its timer to fire
    3. Otherwise read a command or move from the player
    4. Repeat until the player quits
    """

    def __init__(self, session: GameSession):
        self.session = session
        self.is_running = False

    def start(self):
        """Start the game loop."""
        print("\n" + "="*40)
        print("   TicTacToe")
        print("="*40)
        print(HELP_TEXT + "\n")

        self.is_running = True
        self._show()

        while self.is_running:
            if self.session.is_ai_turn:
                self._wait_for_ai()
                continue

            try:
                command = input("> ").strip().lower()
            except EOFError:
                break

            self.handle_command(command)

        self.session.cancel_pending()

    def handle_command(self, command: str):
        """Handle one line of player input."""
        if command == "q":
            print("\nGame quit by user.")
            self.is_running = False
        elif command == "r":
            print("\nRestarting game...")
            self.session.reset()
            self._show()
        elif command == "m":
            self._switch_mode()
        elif command == "h":
            print(self.session.get_hint())
        else:
            self._human_move(command)

    def _human_move(self, command: str):
        """Apply a move typed by the player."""
        index = parse_move(command)
        if index is None:
            print(HELP_TEXT)
            return

        result = self.session.apply_move(index)
        if not result.is_valid:
            print(result.error_message)
            return

        self._show()

    def _wait_for_ai(self):
        """Block until the AI has played, then show the board."""
        print(f"\n>>> AI ({self.session.ai_player.value}) is thinking...")

        if not self.session.wait_for_automated_move():
            # Timer cannot be joined, play directly
            self.session.play_automated_move()

        self._show()

    def _switch_mode(self):
        """Toggle between Human vs. Human and Human vs. AI."""
        if self.session.mode == GameMode.HUMAN_VS_AI:
            new_mode = GameMode.HUMAN_VS_HUMAN
        else:
            new_mode = GameMode.HUMAN_VS_AI

        print(f"\nSwitching to {describe_mode(new_mode)}...")
        self.session.set_mode(new_mode)
        self._show()

    def _show(self):
        """Print the board and the status line."""
        snapshot = self.session.snapshot()
        print()
        print(format_board(list(snapshot.board), snapshot.winning_line))
        print(f"\n{self.session.status_message()}")


def describe_mode(mode: GameMode) -> str:
    """Human-readable mode name."""
    if mode == GameMode.HUMAN_VS_HUMAN:
        return "Human vs. Human"
    if mode == GameMode.HUMAN_VS_AI:
        return "Human vs. AI"
    return "no mode"


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Play in the console instead of the window"
    )
    parser.add_argument(
        "--mode",
        choices=["human", "ai"],
        default="ai",
        help="Console game mode (default: ai)"
    )
    parser.add_argument(
        "--ai-first",
        action="store_true",
        help="Let the AI play first (as X)"
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=GameConfig.AI_DELAY_SECONDS,
        help="Seconds the AI waits before moving"
    )

    args = parser.parse_args()

    ai_player = Mark.X if args.ai_first else GameConfig.AI_PLAYER

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*40)
        print("   TicTacToe UI")
        print("="*40 + "\n")
        ui = TicTacToeUI(ai_player=ai_player, ai_delay=args.delay)
        ui.run()
        return

    # Console mode (--no-ui)
    session = GameSession(
        mode=GameMode(args.mode),
        ai_player=ai_player,
        ai_delay=args.delay
    )
    game = ConsoleGame(session)

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
        session.cancel_pending()
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
