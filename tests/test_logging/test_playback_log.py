"""Tests for the playback log and the markdown summary."""

import pytest

from spritecast.core.models import Actor, GoTo, Move, TurnClockwise
from spritecast.events import (
    ActorRunFailedEvent,
    EventBus,
    PlaybackFinishedEvent,
    PlaybackResetEvent,
)
from spritecast.logging import MarkdownPlaybackWriter, PlaybackLog


@pytest.fixture
def playback_log(event_bus):
    log = PlaybackLog()
    log.connect_to_event_bus(event_bus)
    return log


class TestPlaybackLog:
    """Tests for PlaybackLog event handling."""

    @pytest.mark.asyncio
    async def test_records_a_session(self, make_controller, playback_log):
        controller = make_controller(
            Actor(id="a", actions=[Move(steps=1), TurnClockwise(degrees=5)]),
        )

        await controller.play()

        assert playback_log.sessions_started == 1
        assert [e.event_type for e in playback_log.entries] == ["START", "STEP", "STEP", "FINISH"]
        stats = playback_log.actor_stats["a"]
        assert stats.steps == 2
        assert stats.action_counts == {"move": 1, "turn_clockwise": 1}

    @pytest.mark.asyncio
    async def test_records_swaps(self, make_controller, playback_log):
        controller = make_controller(
            Actor(id="a", actions=[TurnClockwise(degrees=1)] * 2),
            Actor(id="b", x=500, actions=[GoTo(x=10, y=0)]),
        )

        await controller.play()

        assert len(playback_log.swaps) == 1
        assert playback_log.swaps[0].distance == pytest.approx(10.0)
        assert playback_log.actor_stats["a"].swaps == 1
        assert playback_log.actor_stats["b"].swaps == 1
        assert len(playback_log.entries_of_type("SWAP")) == 1

    def test_stop_reset_and_failure_entries(self, event_bus, playback_log):
        event_bus.emit(ActorRunFailedEvent(actor_id="a", error="boom"))
        event_bus.emit(PlaybackFinishedEvent(stopped=True))
        event_bus.emit(PlaybackResetEvent())

        assert [e.event_type for e in playback_log.entries] == ["FAILURE", "STOP", "RESET"]
        assert playback_log.sessions_stopped == 1
        assert playback_log.actor_stats["a"].failures == 1
        assert "boom" in playback_log.entries[0].description

    @pytest.mark.asyncio
    async def test_steps_can_be_left_out(self, make_controller, event_bus):
        log = PlaybackLog(record_steps=False)
        log.connect_to_event_bus(event_bus)
        controller = make_controller(Actor(id="a", actions=[Move(steps=1)]))

        await controller.play()

        assert log.entries_of_type("STEP") == []
        assert log.actor_stats["a"].steps == 1

    def test_clear(self, playback_log):
        playback_log.add_entry("START", "manual")
        playback_log.sessions_started = 3
        playback_log.clear()
        assert playback_log.entries == []
        assert playback_log.sessions_started == 0

    def test_disconnect_stops_recording(self, event_bus, playback_log):
        playback_log.disconnect_from_event_bus(event_bus)
        event_bus.emit(PlaybackResetEvent())
        event_bus.emit(ActorRunFailedEvent(actor_id="a", error="boom"))
        assert playback_log.entries == []
        assert playback_log.actor_stats == {}

    def test_unconnected_log_records_nothing(self):
        log = PlaybackLog()
        EventBus().emit(PlaybackResetEvent())
        assert log.entries == []


class TestMarkdownPlaybackWriter:
    """Tests for MarkdownPlaybackWriter."""

    @pytest.mark.asyncio
    async def test_summary_sections(self, make_controller, playback_log):
        controller = make_controller(
            Actor(id="a", name="Cat", actions=[TurnClockwise(degrees=1)] * 2),
            Actor(id="b", name="Dog", x=500, actions=[GoTo(x=10, y=0)]),
        )
        await controller.play()

        text = MarkdownPlaybackWriter().generate_summary_string(
            controller.store.actors, playback_log
        )

        assert text.startswith("# Playback Summary")
        assert "**Sessions:** 1 started, 0 stopped" in text
        assert "| Cat |" in text and "| Dog |" in text
        assert "a <-> b" in text or "b <-> a" in text
        assert "## Timeline" in text
        assert "step 0" not in text

    def test_no_collisions(self, playback_log):
        text = MarkdownPlaybackWriter().generate_summary_string([Actor(id="a")], playback_log)
        assert "*No collisions*" in text
        assert "| Sprite | 0.0 | 0.0 | 0 | 0 | 0 | 0 blocks |" in text

    def test_write_summary(self, tmp_path, playback_log):
        path = tmp_path / "summary.md"
        MarkdownPlaybackWriter().write_summary([Actor(id="a")], playback_log, path)
        assert path.read_text(encoding="utf-8").startswith("# Playback Summary")
