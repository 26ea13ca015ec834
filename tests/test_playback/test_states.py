"""Tests for the playback state machine and PlaybackConfig."""

import pytest

from spritecast.playback import (
    DEFAULT_COLLISION_THRESHOLD,
    DEFAULT_STEP_DELAY_MS,
    InvalidPlaybackTransition,
    PlaybackConfig,
    PlaybackState,
    PlaybackStateMachine,
)


class TestPlaybackStateMachine:
    """Tests for PlaybackStateMachine."""

    def test_starts_idle(self):
        fsm = PlaybackStateMachine()
        assert fsm.state == PlaybackState.IDLE
        assert not fsm.is_running

    def test_play_and_finish(self):
        fsm = PlaybackStateMachine()
        fsm.transition_to(PlaybackState.RUNNING, reason="play")
        assert fsm.is_running
        fsm.transition_to(PlaybackState.IDLE, reason="done")
        assert [t.reason for t in fsm.history] == ["play", "done"]

    def test_cannot_start_twice(self):
        fsm = PlaybackStateMachine()
        fsm.transition_to(PlaybackState.RUNNING)
        assert not fsm.can_transition_to(PlaybackState.RUNNING)
        with pytest.raises(InvalidPlaybackTransition):
            fsm.transition_to(PlaybackState.RUNNING)

    def test_force_idle_from_idle(self):
        fsm = PlaybackStateMachine()
        fsm.force_idle(reason="reset")
        assert fsm.state == PlaybackState.IDLE
        assert fsm.history[0].from_state == PlaybackState.IDLE

    def test_history_is_a_copy(self):
        fsm = PlaybackStateMachine()
        fsm.history.append("junk")
        assert fsm.history == []


class TestPlaybackConfig:
    """Tests for PlaybackConfig."""

    def test_defaults(self):
        config = PlaybackConfig()
        assert config.step_delay_ms == DEFAULT_STEP_DELAY_MS == 100
        assert config.collision_threshold == DEFAULT_COLLISION_THRESHOLD == 80.0
        assert config.swap_persisted_scripts is True
        assert config.legacy_repeat_fallback is False
        assert config.step_delay_s == pytest.approx(0.1)

    def test_negative_values_rejected(self):
        with pytest.raises(ValueError):
            PlaybackConfig(step_delay_ms=-1)
        with pytest.raises(ValueError):
            PlaybackConfig(collision_threshold=-5)

    def test_from_dict_ignores_unknown_keys(self):
        config = PlaybackConfig.from_dict({"step_delay_ms": 20, "theme": "dark"})
        assert config.step_delay_ms == 20
        assert config.collision_threshold == 80.0

    def test_dict_round_trip(self):
        config = PlaybackConfig(step_delay_ms=5, legacy_repeat_fallback=True)
        assert PlaybackConfig.from_dict(config.to_dict()) == config
