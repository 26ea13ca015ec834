"""Pydantic schemas for the JSON project file.

The on-disk shape mirrors the in-memory action records: one object per
action tagged by ``type``, with repeat blocks keeping their ``children``
nested. Numeric fields accept numbers, text or null so that a script saved
mid-edit loads back exactly as it was.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from spritecast.playback.config import DEFAULT_COLLISION_THRESHOLD, DEFAULT_STEP_DELAY_MS

NumberField = Union[float, str, None]
ActionId = Union[int, str, None]


class ActionSchemaBase(BaseModel):
    """Fields shared by every action."""

    id: ActionId = None


class MoveSchema(ActionSchemaBase):
    type: Literal["move"] = "move"
    steps: NumberField = 10


class TurnClockwiseSchema(ActionSchemaBase):
    type: Literal["turn_clockwise"] = "turn_clockwise"
    degrees: NumberField = 15


class TurnAnticlockwiseSchema(ActionSchemaBase):
    type: Literal["turn_anticlockwise"] = "turn_anticlockwise"
    degrees: NumberField = 15


class GoToSchema(ActionSchemaBase):
    type: Literal["goto"] = "goto"
    x: NumberField = 0
    y: NumberField = 0


class SaySchema(ActionSchemaBase):
    type: Literal["say"] = "say"
    message: str = "Hello!"
    duration: NumberField = 2


class ThinkSchema(ActionSchemaBase):
    type: Literal["think"] = "think"
    message: str = "Hmm..."
    duration: NumberField = 2


PrimitiveActionSchema = Annotated[
    Union[
        MoveSchema,
        TurnClockwiseSchema,
        TurnAnticlockwiseSchema,
        GoToSchema,
        SaySchema,
        ThinkSchema,
    ],
    Field(discriminator="type"),
]


class RepeatSchema(ActionSchemaBase):
    """Repeat block; children may not contain another repeat."""

    type: Literal["repeat"] = "repeat"
    times: NumberField = 10
    children: list[PrimitiveActionSchema] = Field(default_factory=list)


ActionSchema = Annotated[
    Union[
        MoveSchema,
        TurnClockwiseSchema,
        TurnAnticlockwiseSchema,
        GoToSchema,
        SaySchema,
        ThinkSchema,
        RepeatSchema,
    ],
    Field(discriminator="type"),
]


class ActorSchema(BaseModel):
    """Schema for one sprite."""

    id: str
    name: str = "Sprite"
    x: float = 0.0
    y: float = 0.0
    rotation: float = 0.0
    message: str = ""
    message_type: Literal["", "say", "think"] = ""
    actions: list[ActionSchema] = Field(default_factory=list)


class SettingsSchema(BaseModel):
    """Playback settings stored with a project."""

    step_delay_ms: int = Field(default=DEFAULT_STEP_DELAY_MS, ge=0)
    collision_threshold: float = Field(default=DEFAULT_COLLISION_THRESHOLD, ge=0)
    swap_persisted_scripts: bool = True
    legacy_repeat_fallback: bool = False


class ProjectSchema(BaseModel):
    """Top-level project file."""

    version: int = 1
    settings: SettingsSchema = Field(default_factory=SettingsSchema)
    actors: list[ActorSchema] = Field(min_length=1)
