"""
Tests for the terminal front end: key bindings, typed input, rendering,
and the prompt and cursor game loops.
"""

import io

import pytest

from inarow import Coordinate, Game, GameField, InvalidInput
from terminal import (
    AsciiUI, Input, RawTerminal, TerminalConfig, key_to_input, parse_command,
)
import main


def _game(rows=3, columns=3, win=3):
    return Game([("X", "Red"), ("O", "Green")], GameField(rows, columns, win))


# ==================== KEYS ====================

@pytest.mark.parametrize("key,expected", [
    ("q", Input.QUIT),
    (" ", Input.MARK),
    ("h", Input.LEFT),
    ("j", Input.DOWN),
    ("k", Input.UP),
    ("l", Input.RIGHT),
    ("x", Input.NOOP),
    ("", Input.QUIT),
])
def test_key_to_input(key, expected):
    assert key_to_input(key) == expected


def test_custom_key_bindings():
    class ArrowsConfig(TerminalConfig):
        KEY_LEFT = "a"

    assert key_to_input("a", ArrowsConfig()) == Input.LEFT
    assert key_to_input("h", ArrowsConfig()) == Input.NOOP


def test_parse_coordinate_and_index():
    command = parse_command("2 1")
    assert command.input == Input.MARK
    assert command.coordinate == Coordinate(2, 1)

    command = parse_command(" 7 ")
    assert command.input == Input.MARK
    assert command.index == 7
    assert command.coordinate is None

    assert parse_command("1,0").coordinate == Coordinate(1, 0)
    assert parse_command("q").input == Input.QUIT


@pytest.mark.parametrize("line", ["", "abc", "1 two", "1 2 3"])
def test_parse_rejects_bad_input(line):
    with pytest.raises(InvalidInput):
        parse_command(line)


# ==================== ASCII UI ====================

def test_cursor_moves_and_stops_at_edges():
    game = _game(4, 3, 3)
    ui = AsciiUI()

    ui.move(game, Input.LEFT)
    ui.move(game, Input.UP)
    assert ui.considering == 0

    for _ in range(10):
        ui.move(game, Input.RIGHT)
    assert ui.considering == 3

    for _ in range(10):
        ui.move(game, Input.DOWN)
    assert ui.considering == Coordinate(3, 2).to_index(4)

    ui.move(game, Input.LEFT)
    ui.move(game, Input.UP)
    assert ui.considering == Coordinate(2, 1).to_index(4)


def test_draw_shows_players_and_turn():
    game = _game()
    screen = AsciiUI().draw(game)

    assert screen.startswith(TerminalConfig.CLEAR_SCREEN)
    assert "|   Red | X |" in screen
    assert "| Green | O |" in screen
    assert "-" * 13 in screen
    assert "Current player is: X" in screen


def test_draw_field_layout():
    game = _game(4, 2, 2)
    game.mark(Coordinate(1, 0))
    game.mark(Coordinate(3, 1))

    ui = AsciiUI()
    ui.show_cursor = False
    lines = ui.draw_field(game).split("\n")

    assert lines == [
        "┌───────┐",
        "│ │X│ │ │",
        "├───────┤",
        "│ │ │ │O│",
        "└───────┘",
    ]


def test_draw_highlights_cursor_and_winning_line():
    config = TerminalConfig()
    game = _game()
    for i in [0, 3, 1, 4, 2]:
        game.mark_by_index(i)

    ui = AsciiUI(config)
    ui.considering = 8
    field = ui.draw_field(game)

    highlighted_x = f"{config.HIGHLIGHT_ON}X{config.HIGHLIGHT_OFF}"
    highlighted_empty = f"{config.HIGHLIGHT_ON} {config.HIGHLIGHT_OFF}"
    assert field.count(highlighted_x) == 3
    assert field.count(highlighted_empty) == 1


# ==================== MAIN ====================

def _feed(monkeypatch, lines):
    answers = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


def test_prompt_game_is_won_and_quit(monkeypatch, capsys):
    _feed(monkeypatch, ["0 0", "1 1", "1 0", "2 1", "2 0"])
    game = _game()

    assert main.TerminalGame(game).start("prompt")

    assert game.is_finished()
    assert "Game won by X!" in capsys.readouterr().out


def test_prompt_game_reports_errors_without_passing_turn(monkeypatch, capsys):
    _feed(monkeypatch, ["0 0", "0 0", "nope", "9 0"])
    game = _game()

    main.TerminalGame(game).start("prompt")
    out = capsys.readouterr().out

    assert "Invalid input: This field is already taken" in out
    assert "Invalid input: Expected numbers" in out
    assert "Invalid input: The X coordinate 9 is out of bounds (max is 2)" in out
    assert game.current_player.sign == "O"
    assert game.is_finished()


def test_prompt_game_tie(monkeypatch, capsys):
    _feed(monkeypatch, ["0", "1", "2", "3", "5", "4", "6", "8", "7"])
    game = Game([("O", "P1"), ("X", "P2")])

    main.TerminalGame(game).start("prompt")

    assert "Game is a tie" in capsys.readouterr().out
    assert game.is_finished()


def test_parse_player():
    assert main.parse_player("Z:Blue") == ("Z", "Blue")
    assert main.parse_player("Z") == ("Z", "Z")


def test_main_rejects_bad_geometry(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main.main(["--row-size", "3", "--column-size", "3", "--win", "4", "--mode", "prompt"])
    assert excinfo.value.code == 2


def test_main_rejects_bad_player(capsys):
    with pytest.raises(SystemExit):
        main.main(["--player", "XX:Red", "--mode", "prompt"])


def test_main_quits_on_q(monkeypatch, capsys):
    _feed(monkeypatch, ["q"])
    assert main.main(["--row-size", "3", "--column-size", "3", "--win", "3", "--mode", "prompt"]) == 0
    assert "Goodbye!" in capsys.readouterr().out


def test_main_row_size_is_width_and_column_size_is_height(monkeypatch, capsys):
    _feed(monkeypatch, ["q"])
    main.main(["--row-size", "4", "--column-size", "2", "--win", "2", "--mode", "prompt"])
    out = capsys.readouterr().out

    assert "┌───────┐" in out
    assert out.count("│ │ │ │ │") == 2


# ==================== CURSOR MODE ====================

class ScriptedTerminal:
    """Stands in for RawTerminal, replaying a fixed string of key presses."""

    def __init__(self, keys="", is_open=True):
        self.keys = iter(keys)
        self.is_open = is_open
        self.closed = False

    def read_key(self):
        return next(self.keys, "")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.closed = True


def _script(monkeypatch, keys, is_open=True):
    terminal = ScriptedTerminal(keys, is_open)
    monkeypatch.setattr(main, "RawTerminal", lambda: terminal)
    return terminal


def test_cursor_game_marks_cursor_cells(monkeypatch, capsys):
    terminal = _script(monkeypatch, "  l jl ")
    game = _game()

    assert main.TerminalGame(game).start("cursor")
    out = capsys.readouterr().out

    assert game.field.get(Coordinate(0, 0)).player.sign == "X"
    assert game.field.get(Coordinate(1, 0)).player.sign == "O"
    assert game.field.get(Coordinate(2, 1)).player.sign == "X"
    assert sum(not cell.is_empty for cell in game.field.cells()) == 3
    assert "Invalid input: This field is already taken" in out
    assert game.current_player.sign == "O"
    assert not game.state().is_terminal
    # Running out of keys quits
    assert game.is_finished()
    assert terminal.closed


def test_cursor_game_ignores_unbound_keys_and_quits_on_q(monkeypatch):
    _script(monkeypatch, "xyz q ")
    game = _game()

    main.TerminalGame(game).start("cursor")

    assert game.field.get(Coordinate(0, 0)).player.sign == "X"
    assert game.field.get(Coordinate(1, 0)).is_empty
    assert game.is_finished()


def test_cursor_game_is_won_and_quit(monkeypatch, capsys):
    _script(monkeypatch, " j kl j kl ")
    game = _game()

    main.TerminalGame(game).start("cursor")

    assert "Game won by X!" in capsys.readouterr().out
    assert game.state().winner.sign == "X"
    assert game.is_finished()


def test_cursor_game_needs_a_terminal(monkeypatch, capsys):
    terminal = _script(monkeypatch, " ", is_open=False)
    game = _game()

    assert not main.TerminalGame(game).start("cursor")

    assert "Cursor mode needs an interactive terminal" in capsys.readouterr().out
    assert game.field.get(Coordinate(0, 0)).is_empty
    assert terminal.closed


def test_raw_terminal_stays_closed_without_a_tty():
    with RawTerminal(io.StringIO("ab")) as terminal:
        assert not terminal.is_open
        assert terminal.read_key() == "a"
    assert not terminal.is_open
