"""Core data models."""

from spritecast.core.models.action import (
    ACTION_CLASSES,
    Action,
    ActionType,
    GoTo,
    MessageType,
    Move,
    Repeat,
    Say,
    Think,
    TurnAnticlockwise,
    TurnClockwise,
    UnknownAction,
    action_from_dict,
    actions_from_dicts,
    actions_to_dicts,
    coerce_count,
    coerce_number,
)
from spritecast.core.models.actor import Actor

__all__ = [
    "ACTION_CLASSES",
    "Action",
    "ActionType",
    "Actor",
    "GoTo",
    "MessageType",
    "Move",
    "Repeat",
    "Say",
    "Think",
    "TurnAnticlockwise",
    "TurnClockwise",
    "UnknownAction",
    "action_from_dict",
    "actions_from_dicts",
    "actions_to_dicts",
    "coerce_count",
    "coerce_number",
]
