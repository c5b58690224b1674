import logging

import pytest

from connectfour.debug import DebugManager, DebugLevel, LOGGER_NAME, debug
from connectfour.game.board import Board


@pytest.fixture
def manager():
    return DebugManager(level=DebugLevel.DEBUG)


def test_messages_above_level_are_dropped(manager, caplog) -> None:
    manager.configure(level=DebugLevel.WARNING)

    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        manager.info("hidden", "game")
        manager.warning("shown", "game")

    assert "hidden" not in caplog.text
    assert "[game] shown" in caplog.text


def test_component_filter(manager, caplog) -> None:
    manager.configure(components=["board"])

    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        manager.debug("kept", "board")
        manager.debug("dropped", "game")

    assert "[board] kept" in caplog.text
    assert "dropped" not in caplog.text


def test_disabled_manager_logs_nothing(manager, caplog) -> None:
    manager.configure(enabled=False)

    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        manager.error("nope")

    assert caplog.text == ""


def test_set_from_string(manager) -> None:
    assert manager.set_from_string("trace")
    assert manager.level == DebugLevel.TRACE
    assert not manager.set_from_string("loud")
    assert manager.level == DebugLevel.TRACE


def test_timer(manager) -> None:
    manager.start_timer("work")

    assert manager.end_timer("work") >= 0
    assert manager.end_timer("work") is None


def test_log_file(manager, tmp_path) -> None:
    path = tmp_path / "game.log"
    manager.configure(log_file=str(path))

    manager.warning("written to file", "cli")
    manager.configure(log_file="")

    assert "[cli] written to file" in path.read_text()


def test_board_logs_rejections(caplog) -> None:
    debug.configure(level=DebugLevel.DEBUG)
    board = Board()

    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        board.drop_disk("Red", 9)

    assert "[board] Rejected drop: column 9 out of bounds" in caplog.text
