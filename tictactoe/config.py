"""
Game configuration for TicTacToe.
Settings for the AI opponent and the UI.
"""

from .board import Mark


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to taste!
    """

    # ==================== AI SETTINGS ====================
    # Which mark the computer plays in Human vs. AI mode
    # X always moves first, so O means the human starts
    AI_PLAYER = Mark.O

    # Pause before the AI moves (seconds). Only for pacing,
    # the AI's choice does not depend on it
    AI_DELAY_SECONDS = 0.5

    # ==================== UI SETTINGS ====================
    WINDOW_TITLE = "Tic-Tac-Toe"
    BACKGROUND = '#0f172a'
    PANEL = '#1e293b'
    CELL_BG = '#0f172a'
    CELL_HOVER = '#334155'
    WIN_HIGHLIGHT = '#ef4444'
    BUTTON_BG = '#4f46e5'
    TITLE_COLOR = '#facc15'
    TEXT_COLOR = '#f1f5f9'

    # Mark colors
    MARK_COLORS = {
        Mark.X: '#facc15',
        Mark.O: '#38bdf8',
    }

    TITLE_FONT = ('Segoe UI', 28, 'bold')
    STATUS_FONT = ('Segoe UI', 14, 'bold')
    CELL_FONT = ('Segoe UI', 40, 'bold')
    BUTTON_FONT = ('Segoe UI', 11, 'bold')
