"""
Main entry point for the N-in-a-row terminal game.

This script ties together:
- The game engine (field, win checker, turn order)
- The terminal front end (rendering, key bindings, typed input)

Run this script to play N-in-a-row in your terminal!
"""

import argparse
import sys
from typing import Callable, List, Optional, Tuple

from inarow import Game, GameField, MoveError, InvalidInput, Outcome
from terminal import (
    AsciiUI, Input, RawTerminal, TerminalConfig, key_to_input, parse_command,
)
from terminal.keys import MOVEMENTS


class TerminalGame:
    """
    Runs a game in the terminal.

    Game flow:
    1. Draw the players and the field
    2. Read one move (a key press in cursor mode, a line in prompt mode)
    3. Mark it for the current player, or report why it was rejected
    4. Once the game is won or tied, show the result and quit
    """

    def __init__(self, game: Game, config: Optional[TerminalConfig] = None):
        """
        Initialize the terminal game.

        Args:
            game: The game to play.
            config: Terminal configuration. Uses defaults if not provided.
        """
        self.game = game
        self.config = config or TerminalConfig()
        self.ui = AsciiUI(self.config)
        self.message: Optional[str] = None

    def start(self, mode: str = "cursor") -> bool:
        """
        Play until someone quits or the game is decided.

        Args:
            mode: "cursor" for single key input, "prompt" for typed moves.

        Returns:
            False if the requested mode could not be started.
        """
        if mode == "cursor":
            return self._cursor_loop()

        self.ui.show_cursor = False
        self._prompt_loop()
        return True

    def _render(self):
        print(self.ui.draw(self.game))
        if self.message:
            print(self.message)
            self.message = None

    def _cursor_loop(self) -> bool:
        with RawTerminal() as terminal:
            if not terminal.is_open:
                print("ERROR: Cursor mode needs an interactive terminal. Try --mode prompt.")
                return False

            while not self.game.is_finished():
                self._render()
                entered = key_to_input(terminal.read_key(), self.config)

                if entered == Input.QUIT:
                    self.game.quit()
                elif entered in MOVEMENTS:
                    self.ui.move(self.game, entered)
                elif entered == Input.MARK:
                    self._play(lambda: self.game.mark_by_index(self.ui.considering))
        return True

    def _prompt_loop(self):
        while not self.game.is_finished():
            self._render()
            try:
                line = input(self.config.PROMPT)
            except EOFError:
                self.game.quit()
                break

            try:
                command = parse_command(line, self.config)
            except InvalidInput as e:
                self.message = f"Invalid input: {e}"
                continue

            if command.input == Input.QUIT:
                self.game.quit()
            elif command.coordinate is not None:
                self._play(lambda: self.game.mark(command.coordinate))
            else:
                self._play(lambda: self.game.mark_by_index(command.index))

    def _play(self, move: Callable[[], None]):
        """
        Apply a move and check the result.

        Args:
            move: Marks a cell for the current player.
        """
        try:
            move()
        except MoveError as e:
            self.message = f"Invalid input: {e}"
            return

        state = self.game.state()
        if not state.is_terminal:
            return

        self.ui.show_cursor = False
        print(self.ui.draw(self.game))
        if state.outcome is Outcome.WON:
            print(f"Game won by {state.winner.sign}!")
        else:
            print("Game is a tie")
        self.game.quit()


def parse_player(spec: str) -> Tuple[str, str]:
    """
    Parse a SIGN:NAME player argument.

    Returns:
        (sign, name) tuple.
    """
    sign, _, name = spec.partition(":")
    if len(sign) != 1:
        raise argparse.ArgumentTypeError(
            f"Player sign must be a single character, got {sign!r}"
        )
    return sign, name or sign


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    config = TerminalConfig()

    parser = argparse.ArgumentParser(description="N-in-a-row for the terminal")
    parser.add_argument(
        "--row-size",
        type=int,
        default=config.ROW_SIZE,
        help="Cells per row (default: %(default)s)"
    )
    parser.add_argument(
        "--column-size",
        type=int,
        default=config.COLUMN_SIZE,
        help="Cells per column (default: %(default)s)"
    )
    parser.add_argument(
        "--win",
        type=int,
        default=config.WIN_COUNT,
        help="Cells in a row needed to win (default: %(default)s)"
    )
    parser.add_argument(
        "--player",
        dest="players",
        action="append",
        type=parse_player,
        metavar="SIGN:NAME",
        help="Add a player, in turn order (default: X:Red O:Green)"
    )
    parser.add_argument(
        "--mode",
        choices=["cursor", "prompt"],
        default=config.INPUT_MODE,
        help="cursor: move with h/j/k/l, mark with space; prompt: type 'x y' or an index"
    )

    args = parser.parse_args(argv)

    try:
        field = GameField(args.row_size, args.column_size, args.win)
        game = Game(args.players or config.PLAYERS, field)
    except ValueError as e:
        parser.error(str(e))

    terminal_game = TerminalGame(game, config)

    try:
        started = terminal_game.start(args.mode)
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
        return 1
    finally:
        print("Goodbye!")

    return 0 if started else 1


if __name__ == "__main__":
    sys.exit(main())
