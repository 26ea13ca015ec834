"""Action model: the fixed vocabulary of steps a sprite can perform.

Actions are plain value data. Numeric fields are stored exactly as the editor
hands them over, which includes transient states like ``""`` while a number is
being typed, and are coerced only at the point of use.
"""

from __future__ import annotations

import itertools
import math
import numbers
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, ClassVar, Optional, Union


class ActionType(str, Enum):
    """Wire tag for each action variant."""

    MOVE = "move"
    TURN_CLOCKWISE = "turn_clockwise"
    TURN_ANTICLOCKWISE = "turn_anticlockwise"
    GOTO = "goto"
    SAY = "say"
    THINK = "think"
    REPEAT = "repeat"


class MessageType(str, Enum):
    """Kind of speech bubble a sprite is showing."""

    NONE = ""
    SAY = "say"
    THINK = "think"


# Raw numeric input: a number once typed, "" or None while incomplete
NumberInput = Union[int, float, str, None]

_action_ids = itertools.count(1)


def new_action_id() -> int:
    """Next identity token for a freshly created action."""
    return next(_action_ids)


def coerce_number(value: Any) -> float:
    """Read a numeric field, treating anything unusable as 0.

    Accepts real numbers (including Decimal and Fraction) and numeric text.
    Missing, empty, non-numeric, non-finite and out-of-range values all come
    back as 0.0.
    """
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, str):
        value = value.strip()
    elif not isinstance(value, (numbers.Real, Decimal)):
        return 0.0
    try:
        number = float(value)
    except (ValueError, OverflowError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def coerce_count(value: Any) -> int:
    """Read a repetition count: truncated toward zero, never negative."""
    return max(0, int(coerce_number(value)))


@dataclass
class Action:
    """Base class for all actions.

    ``id`` is an opaque token used by the editor for reordering and removal;
    it never takes part in equality.
    """

    action_type: ClassVar[Optional[ActionType]] = None

    id: Any = field(default_factory=new_action_id, compare=False, kw_only=True)

    @property
    def type(self) -> str:
        return self.action_type.value

    @property
    def is_primitive(self) -> bool:
        """True for anything the scheduler can execute directly."""
        return True

    def fields(self) -> dict:
        """Variant payload without the tag or identity."""
        return {}

    def to_dict(self) -> dict:
        """Convert to the nested record used for storage."""
        return {"type": self.type, "id": self.id, **self.fields()}


@dataclass
class Move(Action):
    """Move ``steps`` units along the current rotation."""

    action_type: ClassVar[ActionType] = ActionType.MOVE

    steps: NumberInput = 10

    def fields(self) -> dict:
        return {"steps": self.steps}


@dataclass
class TurnClockwise(Action):
    action_type: ClassVar[ActionType] = ActionType.TURN_CLOCKWISE

    degrees: NumberInput = 15

    def fields(self) -> dict:
        return {"degrees": self.degrees}


@dataclass
class TurnAnticlockwise(Action):
    action_type: ClassVar[ActionType] = ActionType.TURN_ANTICLOCKWISE

    degrees: NumberInput = 15

    def fields(self) -> dict:
        return {"degrees": self.degrees}


@dataclass
class GoTo(Action):
    """Jump to an absolute stage position."""

    action_type: ClassVar[ActionType] = ActionType.GOTO

    x: NumberInput = 0
    y: NumberInput = 0

    def fields(self) -> dict:
        return {"x": self.x, "y": self.y}


@dataclass
class Say(Action):
    """Show a speech bubble for ``duration`` seconds."""

    action_type: ClassVar[ActionType] = ActionType.SAY
    message_type: ClassVar[MessageType] = MessageType.SAY

    message: str = "Hello!"
    duration: NumberInput = 2

    def fields(self) -> dict:
        return {"message": self.message, "duration": self.duration}


@dataclass
class Think(Action):
    """Show a thought bubble for ``duration`` seconds."""

    action_type: ClassVar[ActionType] = ActionType.THINK
    message_type: ClassVar[MessageType] = MessageType.THINK

    message: str = "Hmm..."
    duration: NumberInput = 2

    def fields(self) -> dict:
        return {"message": self.message, "duration": self.duration}


@dataclass
class Repeat(Action):
    """Run ``children`` in order, ``times`` times over.

    Children are primitive actions only; a nested Repeat is never executed.
    """

    action_type: ClassVar[ActionType] = ActionType.REPEAT

    times: NumberInput = 10
    children: list[Action] = field(default_factory=list)

    @property
    def is_primitive(self) -> bool:
        return False

    def fields(self) -> dict:
        return {
            "times": self.times,
            "children": [child.to_dict() for child in self.children],
        }


@dataclass
class UnknownAction(Action):
    """An action whose tag this version does not recognise.

    Kept so that loading and saving a script never loses data; executes as a
    no-op step.
    """

    raw_type: str = ""
    payload: dict = field(default_factory=dict)

    @property
    def type(self) -> str:
        return self.raw_type

    def fields(self) -> dict:
        return dict(self.payload)


ACTION_CLASSES: dict[ActionType, type[Action]] = {
    ActionType.MOVE: Move,
    ActionType.TURN_CLOCKWISE: TurnClockwise,
    ActionType.TURN_ANTICLOCKWISE: TurnAnticlockwise,
    ActionType.GOTO: GoTo,
    ActionType.SAY: Say,
    ActionType.THINK: Think,
    ActionType.REPEAT: Repeat,
}


def action_from_dict(data: dict) -> Action:
    """Create an action from its stored record.

    Missing fields take the palette defaults; unknown tags become
    UnknownAction rather than an error.
    """
    raw_type = data.get("type", "")
    kwargs: dict[str, Any] = {}
    if "id" in data:
        kwargs["id"] = data["id"]

    try:
        action_type = ActionType(raw_type)
    except ValueError:
        payload = {k: v for k, v in data.items() if k not in ("type", "id")}
        return UnknownAction(raw_type=str(raw_type), payload=payload, **kwargs)

    if action_type == ActionType.MOVE:
        return Move(steps=data.get("steps", 10), **kwargs)
    if action_type == ActionType.TURN_CLOCKWISE:
        return TurnClockwise(degrees=data.get("degrees", 15), **kwargs)
    if action_type == ActionType.TURN_ANTICLOCKWISE:
        return TurnAnticlockwise(degrees=data.get("degrees", 15), **kwargs)
    if action_type == ActionType.GOTO:
        return GoTo(x=data.get("x", 0), y=data.get("y", 0), **kwargs)
    if action_type == ActionType.SAY:
        return Say(
            message=data.get("message", "Hello!"),
            duration=data.get("duration", 2),
            **kwargs,
        )
    if action_type == ActionType.THINK:
        return Think(
            message=data.get("message", "Hmm..."),
            duration=data.get("duration", 2),
            **kwargs,
        )
    children = [action_from_dict(child) for child in data.get("children") or []]
    return Repeat(times=data.get("times", 10), children=children, **kwargs)


def actions_from_dicts(items: list[dict]) -> list[Action]:
    return [action_from_dict(item) for item in items]


def actions_to_dicts(actions: list[Action]) -> list[dict]:
    return [action.to_dict() for action in actions]
