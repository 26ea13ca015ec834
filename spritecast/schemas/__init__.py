"""Project file schemas and codec."""

from spritecast.schemas.project import (
    ActionSchema,
    ActorSchema,
    PrimitiveActionSchema,
    ProjectSchema,
    RepeatSchema,
    SettingsSchema,
)
from spritecast.schemas.project_file import (
    ProjectFileError,
    load_project,
    parse_project,
    save_project,
    serialize_project,
)

__all__ = [
    "ActionSchema",
    "ActorSchema",
    "PrimitiveActionSchema",
    "ProjectFileError",
    "ProjectSchema",
    "RepeatSchema",
    "SettingsSchema",
    "load_project",
    "parse_project",
    "save_project",
    "serialize_project",
]
