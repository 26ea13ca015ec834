"""Reading and writing project files."""

import logging
from pathlib import Path
from typing import Any, Union

from pydantic import ValidationError

from spritecast.core.models import Actor
from spritecast.playback.config import PlaybackConfig
from spritecast.schemas.project import ProjectSchema

logger = logging.getLogger(__name__)


class ProjectFileError(ValueError):
    """Raised when a project file cannot be parsed or validated."""
    pass


def parse_project(text: str) -> tuple[list[Actor], PlaybackConfig]:
    """
    Parse project JSON into actors and playback settings.

    Raises:
        ProjectFileError: If the text is not valid JSON or fails validation
    """
    try:
        project = ProjectSchema.model_validate_json(text)
    except ValidationError as e:
        raise ProjectFileError(f"Invalid project file: {e}") from e

    ids = [actor.id for actor in project.actors]
    if len(set(ids)) != len(ids):
        raise ProjectFileError("Invalid project file: duplicate actor ids")

    actors = [Actor.from_dict(_without_null_ids(a.model_dump())) for a in project.actors]
    config = PlaybackConfig.from_dict(project.settings.model_dump())
    return actors, config


def serialize_project(actors: list[Actor], config: PlaybackConfig) -> str:
    """
    Encode actors and settings as project JSON.

    Raises:
        ProjectFileError: If a script holds actions the file format can't
            represent (unknown action types, nested repeat blocks)
    """
    data = {
        "version": 1,
        "settings": config.to_dict(),
        "actors": [actor.to_dict() for actor in actors],
    }
    try:
        project = ProjectSchema.model_validate(data)
    except ValidationError as e:
        raise ProjectFileError(f"Cannot save project: {e}") from e
    return project.model_dump_json(indent=2)


def load_project(path: Union[str, Path]) -> tuple[list[Actor], PlaybackConfig]:
    """Load a project file from disk."""
    path = Path(path)
    logger.debug("Loading project from %s", path)
    return parse_project(path.read_text(encoding="utf-8"))


def save_project(path: Union[str, Path], actors: list[Actor], config: PlaybackConfig) -> None:
    """Write a project file to disk, creating parent directories."""
    path = Path(path)
    text = serialize_project(actors, config)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    logger.debug("Saved %d actors to %s", len(actors), path)


def _without_null_ids(data: Any) -> Any:
    """Drop ``id: null`` so the model assigns fresh identities."""
    if isinstance(data, dict):
        return {
            key: _without_null_ids(value)
            for key, value in data.items()
            if not (key == "id" and value is None)
        }
    if isinstance(data, list):
        return [_without_null_ids(item) for item in data]
    return data
