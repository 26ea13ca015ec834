"""Actor (sprite) record as held by the store and shown by renderers."""

from dataclasses import dataclass, field

from spritecast.core.models.action import (
    Action,
    MessageType,
    actions_from_dicts,
    actions_to_dicts,
)


@dataclass
class Actor:
    """
    A sprite on the stage with its authored script.

    Rotation is in degrees and is never normalised; 370 stays 370.
    ``actions`` is the authored script, with repeat blocks still nested.
    """

    id: str
    name: str = "Sprite"
    x: float = 0.0
    y: float = 0.0
    rotation: float = 0.0
    message: str = ""
    message_type: MessageType = MessageType.NONE
    actions: list[Action] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "name": self.name,
            "x": self.x,
            "y": self.y,
            "rotation": self.rotation,
            "message": self.message,
            "message_type": self.message_type.value,
            "actions": actions_to_dicts(self.actions),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Actor":
        """Create from dictionary."""
        return cls(
            id=str(data["id"]),
            name=data.get("name", "Sprite"),
            x=float(data.get("x", 0.0)),
            y=float(data.get("y", 0.0)),
            rotation=float(data.get("rotation", 0.0)),
            message=data.get("message", ""),
            message_type=MessageType(data.get("message_type", "")),
            actions=actions_from_dicts(data.get("actions") or []),
        )
