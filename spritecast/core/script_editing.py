"""Editing operations on authored scripts.

These are the list manipulations the block editor performs when a user drops,
reorders, edits or deletes blocks. Every function returns a new list and
leaves its input untouched, so a store can swap the result in atomically.
"""

from dataclasses import replace
from typing import Any, Optional, Union

from spritecast.core.models.action import (
    ACTION_CLASSES,
    Action,
    ActionType,
    Repeat,
    new_action_id,
)


def new_action(action_type: Union[ActionType, str]) -> Action:
    """Create an action with the palette's default values.

    Raises:
        ValueError: If the type is not part of the action vocabulary
    """
    return ACTION_CLASSES[ActionType(action_type)]()


def parse_number_input(raw: str) -> Optional[Union[float, str]]:
    """Interpret the text of a numeric input box.

    Returns "" for an empty box (kept as a transient editing state), the
    number for valid text, and None when the keystroke should be ignored.
    """
    if raw == "":
        return ""
    try:
        return float(raw)
    except ValueError:
        return None


def append_action(actions: list[Action], action: Action) -> list[Action]:
    """Drop a block at the end of the root script with a fresh identity."""
    return [*actions, replace(action, id=new_action_id())]


def move_action(actions: list[Action], from_index: int, to_index: int) -> list[Action]:
    """Drag a root block from one position to another."""
    _check_index(actions, from_index)
    result = list(actions)
    moved = result.pop(from_index)
    result.insert(to_index, moved)
    return result


def remove_action(actions: list[Action], index: int) -> list[Action]:
    _check_index(actions, index)
    return [a for i, a in enumerate(actions) if i != index]


def update_action_field(
    actions: list[Action], index: int, field_name: str, value: Any
) -> list[Action]:
    """Set one field of a root block.

    Raises:
        IndexError: If index is out of range
        TypeError: If the action has no such field
    """
    _check_index(actions, index)
    result = list(actions)
    result[index] = replace(result[index], **{field_name: value})
    return result


def append_child(actions: list[Action], repeat_index: int, action: Action) -> list[Action]:
    """Drop a block into a repeat block's body.

    Raises:
        ValueError: If the target is not a repeat, or the block being dropped is one
    """
    repeat = _repeat_at(actions, repeat_index)
    if not action.is_primitive:
        raise ValueError("Repeat blocks cannot be nested")
    children = [*repeat.children, replace(action, id=new_action_id())]
    return _with_children(actions, repeat_index, children)


def update_child_field(
    actions: list[Action], repeat_index: int, child_index: int, field_name: str, value: Any
) -> list[Action]:
    repeat = _repeat_at(actions, repeat_index)
    _check_index(repeat.children, child_index)
    children = list(repeat.children)
    children[child_index] = replace(children[child_index], **{field_name: value})
    return _with_children(actions, repeat_index, children)


def remove_child(actions: list[Action], repeat_index: int, child_index: int) -> list[Action]:
    repeat = _repeat_at(actions, repeat_index)
    _check_index(repeat.children, child_index)
    children = [c for i, c in enumerate(repeat.children) if i != child_index]
    return _with_children(actions, repeat_index, children)


def _check_index(items: list, index: int) -> None:
    if not 0 <= index < len(items):
        raise IndexError(f"Block index {index} out of range (0-{len(items) - 1})")


def _repeat_at(actions: list[Action], index: int) -> Repeat:
    _check_index(actions, index)
    action = actions[index]
    if not isinstance(action, Repeat):
        raise ValueError(f"Block {index} is {action.type!r}, not a repeat block")
    return action


def _with_children(actions: list[Action], index: int, children: list[Action]) -> list[Action]:
    result = list(actions)
    result[index] = replace(result[index], children=children)
    return result
