"""
Terminal configuration for the N-in-a-row game.
Default board, players, key bindings, and screen escapes.
"""


class TerminalConfig:
    """
    Configuration class for the terminal front end.
    Command line flags in main.py override the board and player defaults.
    """

    # ==================== BOARD SETTINGS ====================
    ROW_SIZE = 5       # Cells per row (X extent)
    COLUMN_SIZE = 5    # Cells per column (Y extent)
    WIN_COUNT = 5      # Run length needed to win

    # ==================== PLAYERS ====================
    # (sign, name) pairs in turn order, first one starts
    PLAYERS = [("X", "Red"), ("O", "Green")]

    # ==================== INPUT ====================
    # "cursor" reads single keys, "prompt" reads typed lines
    INPUT_MODE = "cursor"

    # Vim style movement for the considering cursor
    KEY_LEFT = "h"
    KEY_DOWN = "j"
    KEY_UP = "k"
    KEY_RIGHT = "l"
    KEY_MARK = " "
    KEY_QUIT = "q"

    PROMPT = "Enter your move (x y, or index; q to quit): "

    # ==================== SCREEN ====================
    CLEAR_SCREEN = "\x1b[2J\x1b[H"
    HIGHLIGHT_ON = "\x1b[7m"    # Reverse video
    HIGHLIGHT_OFF = "\x1b[0m"
