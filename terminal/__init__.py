"""
Terminal module for the N-in-a-row game.
Handles rendering, key bindings, and typed input.
"""

from .config import TerminalConfig
from .keys import Input, Command, RawTerminal, key_to_input, parse_command
from .ascii_ui import AsciiUI
