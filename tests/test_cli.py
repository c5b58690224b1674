import pytest

import run
from connectfour.interfaces.cli import TextClient


@pytest.fixture
def feed(monkeypatch):
    """Replace input() with a script; running out of lines acts like Ctrl-D."""
    def _feed(*lines):
        remaining = iter(lines)

        def fake_input(prompt=""):
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError
        monkeypatch.setattr("builtins.input", fake_input)
    return _feed


def test_full_game_announces_winner(feed, capsys) -> None:
    feed("Alice", "Bob", "1", "2", "1", "2", "1", "2", "1")

    status = TextClient().play()

    out = capsys.readouterr().out
    assert status == 0
    assert "Game started! Red will go first." in out
    assert "Alice's turn! Enter column (1-7) to drop your disk:" in out
    assert "Bob's turn!" in out
    assert out.rstrip().endswith("Congratulations, Alice! You win!")


def test_bad_input_reprompts(feed, capsys) -> None:
    feed("Alice", "Bob", "abc", "0", "8", "q")

    status = TextClient().play()

    out = capsys.readouterr().out
    assert status == 1
    assert "Invalid input. Please enter a valid column number (1-7)." in out
    assert out.count("Column must be between 1 and 7") == 2
    assert "Game abandoned." in out


def test_full_column_message(feed, capsys) -> None:
    feed("Alice", "Bob", *["3"] * 7)

    TextClient().play()

    assert "That column is full" in capsys.readouterr().out


def test_end_of_input_while_reading_names(feed) -> None:
    feed("Alice")

    assert TextClient().play() == 1


def test_blank_name_gets_default(feed) -> None:
    feed("", "Bob", "q")
    client = TextClient()

    client.play()

    assert client.game.get_player(client.game.get_current_slot()).name == "Player 1"


def test_client_needs_two_colors() -> None:
    with pytest.raises(ValueError):
        TextClient(colors=("Red",))


def test_run_play_command_with_custom_colors(feed, capsys) -> None:
    feed("Ann", "Ben", "4", "4", "5", "5", "6", "6", "7")

    status = run.main(["play", "--colors", "Blue", "Green", "--debug-level", "error"])

    out = capsys.readouterr().out
    assert status == 0
    assert "Game started! Blue will go first." in out
    assert " B  B  B  B " in out
    assert "Congratulations, Ann! You win!" in out


def test_run_without_command_prints_help(capsys) -> None:
    assert run.main([]) == 1
    assert "usage" in capsys.readouterr().out
