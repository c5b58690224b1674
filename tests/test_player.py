import dataclasses

import pytest

from connectfour.game.player import Player


def test_player_exposes_name_and_color() -> None:
    player = Player("Emma", "Red")

    assert player.name == "Emma"
    assert player.color == "Red"
    assert str(player) == "Emma (Red)"


def test_player_is_immutable() -> None:
    player = Player("Rob", "Yellow")

    with pytest.raises(dataclasses.FrozenInstanceError):
        player.color = "Red"


@pytest.mark.parametrize("name, color", [("Emma", ""), ("Emma", None), (None, "Red")])
def test_player_rejects_bad_values(name, color) -> None:
    with pytest.raises(ValueError):
        Player(name, color)
