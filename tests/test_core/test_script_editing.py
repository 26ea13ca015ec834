"""Tests for script editing operations."""

import pytest

from spritecast.core.models import ActionType, GoTo, Move, Repeat, Say, TurnClockwise
from spritecast.core.script_editing import (
    append_action,
    append_child,
    move_action,
    new_action,
    parse_number_input,
    remove_action,
    remove_child,
    update_action_field,
    update_child_field,
)


@pytest.fixture
def script():
    return [
        Move(steps=10),
        Repeat(times=3, children=[TurnClockwise(degrees=15)]),
        Say(message="Hello!", duration=2),
    ]


class TestNewAction:
    """Tests for palette defaults."""

    def test_by_enum_and_string(self):
        assert new_action(ActionType.MOVE) == Move(steps=10)
        assert new_action("goto") == GoTo(x=0, y=0)

    def test_repeat_starts_empty(self):
        repeat = new_action("repeat")
        assert repeat.times == 10
        assert repeat.children == []

    def test_unknown_type_rejected(self):
        with pytest.raises(ValueError):
            new_action("fly")


class TestParseNumberInput:
    """Tests for parse_number_input()."""

    def test_empty_box_is_kept(self):
        assert parse_number_input("") == ""

    def test_number(self):
        assert parse_number_input("42") == 42.0
        assert parse_number_input("-1.5") == -1.5

    def test_invalid_keystroke_ignored(self):
        assert parse_number_input("4x") is None
        assert parse_number_input("-") is None


class TestRootEdits:
    """Tests for edits on the root script."""

    def test_append_assigns_fresh_identity(self, script):
        template = Move(steps=5)
        result = append_action(script, template)
        assert len(result) == 4
        assert result[-1] == template
        assert result[-1].id != template.id
        assert len(script) == 3

    def test_move_action_reorders(self, script):
        result = move_action(script, 2, 0)
        assert [a.type for a in result] == ["say", "move", "repeat"]
        assert [a.type for a in script] == ["move", "repeat", "say"]

    def test_remove_action(self, script):
        result = remove_action(script, 1)
        assert [a.type for a in result] == ["move", "say"]

    def test_update_field_keeps_identity(self, script):
        result = update_action_field(script, 0, "steps", "")
        assert result[0].steps == ""
        assert result[0].id == script[0].id
        assert script[0].steps == 10

    def test_update_unknown_field_raises(self, script):
        with pytest.raises(TypeError):
            update_action_field(script, 0, "degrees", 5)

    def test_index_out_of_range(self, script):
        with pytest.raises(IndexError):
            remove_action(script, 5)
        with pytest.raises(IndexError):
            move_action(script, -1, 0)


class TestRepeatEdits:
    """Tests for edits inside a repeat block."""

    def test_append_child(self, script):
        result = append_child(script, 1, Move(steps=2))
        assert result[1].children == [TurnClockwise(degrees=15), Move(steps=2)]
        assert len(script[1].children) == 1

    def test_append_child_refuses_nesting(self, script):
        with pytest.raises(ValueError):
            append_child(script, 1, Repeat(times=2))

    def test_append_child_requires_repeat_target(self, script):
        with pytest.raises(ValueError):
            append_child(script, 0, Move(steps=2))

    def test_update_child_field(self, script):
        result = update_child_field(script, 1, 0, "degrees", 90)
        assert result[1].children[0].degrees == 90
        assert script[1].children[0].degrees == 15

    def test_remove_child(self, script):
        result = remove_child(script, 1, 0)
        assert result[1].children == []
        assert result[1].times == 3

    def test_child_index_out_of_range(self, script):
        with pytest.raises(IndexError):
            remove_child(script, 1, 3)
