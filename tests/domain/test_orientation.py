"""Tests for Orientation rotation and parsing."""

import pytest

from toyrobot.domain.orientation import Orientation


class TestRotation:
    def test_clockwise_order(self) -> None:
        assert Orientation.NORTH.right() is Orientation.EAST
        assert Orientation.EAST.right() is Orientation.SOUTH
        assert Orientation.SOUTH.right() is Orientation.WEST
        assert Orientation.WEST.right() is Orientation.NORTH

    def test_counter_clockwise_order(self) -> None:
        assert Orientation.NORTH.left() is Orientation.WEST
        assert Orientation.WEST.left() is Orientation.SOUTH
        assert Orientation.SOUTH.left() is Orientation.EAST
        assert Orientation.EAST.left() is Orientation.NORTH

    @pytest.mark.parametrize("facing", list(Orientation))
    def test_left_undoes_right(self, facing: Orientation) -> None:
        assert facing.right().left() is facing
        assert facing.left().right() is facing

    def test_steps(self) -> None:
        assert Orientation.NORTH.step == (0, 1)
        assert Orientation.SOUTH.step == (0, -1)
        assert Orientation.EAST.step == (1, 0)
        assert Orientation.WEST.step == (-1, 0)


class TestParse:
    @pytest.mark.parametrize("text", ["NORTH", "north", "North", " north "])
    def test_case_insensitive(self, text: str) -> None:
        assert Orientation.parse(text) is Orientation.NORTH

    @pytest.mark.parametrize("text", ["", "UP", "NORTHEAST", "0", "N"])
    def test_unknown_names(self, text: str) -> None:
        assert Orientation.parse(text) is None

    def test_renders_as_name(self) -> None:
        assert str(Orientation.WEST) == "WEST"
