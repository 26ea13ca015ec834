"""Playback tuning parameters."""

from dataclasses import asdict, dataclass

# Pause after every move/turn/goto step
DEFAULT_STEP_DELAY_MS = 100

# Centre-to-centre distance below which two sprites are touching
DEFAULT_COLLISION_THRESHOLD = 80.0


@dataclass
class PlaybackConfig:
    """
    Settings for one controller.

    Attributes:
        step_delay_ms: Suspension after each move/turn/goto action
        collision_threshold: Distance below which two running sprites collide
        swap_persisted_scripts: Also exchange the authored scripts in the store
            on a collision swap, not only the in-flight run sequences
        legacy_repeat_fallback: Treat an empty repeat block as "repeat the
            action right before it" instead of a no-op
    """

    step_delay_ms: int = DEFAULT_STEP_DELAY_MS
    collision_threshold: float = DEFAULT_COLLISION_THRESHOLD
    swap_persisted_scripts: bool = True
    legacy_repeat_fallback: bool = False

    def __post_init__(self) -> None:
        if self.step_delay_ms < 0:
            raise ValueError(f"step_delay_ms must be >= 0, got {self.step_delay_ms}")
        if self.collision_threshold < 0:
            raise ValueError(
                f"collision_threshold must be >= 0, got {self.collision_threshold}"
            )

    @property
    def step_delay_s(self) -> float:
        return self.step_delay_ms / 1000.0

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "PlaybackConfig":
        """Create from dictionary, ignoring keys this version doesn't know."""
        return cls(
            step_delay_ms=int(data.get("step_delay_ms", DEFAULT_STEP_DELAY_MS)),
            collision_threshold=float(
                data.get("collision_threshold", DEFAULT_COLLISION_THRESHOLD)
            ),
            swap_persisted_scripts=bool(data.get("swap_persisted_scripts", True)),
            legacy_repeat_fallback=bool(data.get("legacy_repeat_fallback", False)),
        )
