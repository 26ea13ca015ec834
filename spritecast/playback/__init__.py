"""Action execution engine: expansion, scheduling, collisions and playback control."""

from spritecast.playback.collisions import CollisionDetector
from spritecast.playback.config import (
    DEFAULT_COLLISION_THRESHOLD,
    DEFAULT_STEP_DELAY_MS,
    PlaybackConfig,
)
from spritecast.playback.controller import PlaybackController
from spritecast.playback.expander import expand_actions
from spritecast.playback.scheduler import ExecutionScheduler
from spritecast.playback.session import PlaybackSession, RuntimeState
from spritecast.playback.states import (
    InvalidPlaybackTransition,
    PlaybackState,
    PlaybackStateMachine,
)

__all__ = [
    "CollisionDetector",
    "DEFAULT_COLLISION_THRESHOLD",
    "DEFAULT_STEP_DELAY_MS",
    "ExecutionScheduler",
    "InvalidPlaybackTransition",
    "PlaybackConfig",
    "PlaybackController",
    "PlaybackSession",
    "PlaybackState",
    "PlaybackStateMachine",
    "RuntimeState",
    "expand_actions",
]
