"""Tests for the command-line entry point."""

import argparse
import json

import pytest

from spritecast.__main__ import build_config, demo_actors, main
from spritecast.playback import PlaybackConfig
from spritecast.schemas import load_project


@pytest.fixture
def project_path(tmp_path):
    path = tmp_path / "project.json"
    path.write_text(
        json.dumps(
            {
                "settings": {"step_delay_ms": 0},
                "actors": [
                    {
                        "id": "a",
                        "name": "Cat",
                        "actions": [{"type": "turn_clockwise", "degrees": 1}] * 2,
                    },
                    {
                        "id": "b",
                        "name": "Dog",
                        "x": 500,
                        "actions": [{"type": "goto", "x": 10, "y": 0}],
                    },
                ],
            }
        ),
        encoding="utf-8",
    )
    return path


def _args(**overrides):
    values = dict(step_delay_ms=None, threshold=None, legacy_repeat=False, no_swap_scripts=False)
    values.update(overrides)
    return argparse.Namespace(**values)


class TestBuildConfig:
    """Tests for command-line overrides."""

    def test_no_overrides(self):
        base = PlaybackConfig(step_delay_ms=7)
        assert build_config(_args(), base) == base

    def test_overrides(self):
        config = build_config(
            _args(step_delay_ms=0, threshold=30.0, legacy_repeat=True, no_swap_scripts=True),
            PlaybackConfig(),
        )
        assert config == PlaybackConfig(
            step_delay_ms=0,
            collision_threshold=30.0,
            swap_persisted_scripts=False,
            legacy_repeat_fallback=True,
        )


class TestMain:
    """Tests for main()."""

    def test_plays_project(self, project_path, capsys):
        assert main([str(project_path)]) == 0

        out = capsys.readouterr().out
        assert "Cat" in out and "Dog" in out
        assert "1 collision swap(s)" in out

    def test_writes_markdown_and_saves(self, project_path, tmp_path):
        summary = tmp_path / "summary.md"
        saved = tmp_path / "out" / "after.json"

        assert main([str(project_path), "--markdown", str(summary), "--save", str(saved)]) == 0

        assert summary.read_text(encoding="utf-8").startswith("# Playback Summary")
        actors, _ = load_project(saved)
        by_id = {actor.id: actor for actor in actors}
        assert [a.type for a in by_id["a"].actions] == ["goto"]
        assert [a.type for a in by_id["b"].actions] == ["turn_clockwise"] * 2

    def test_missing_project(self, tmp_path):
        assert main([str(tmp_path / "absent.json")]) == 1

    def test_invalid_project(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text('{"actors": []}', encoding="utf-8")
        assert main([str(path)]) == 1

    def test_invalid_override(self, project_path):
        assert main([str(project_path), "--threshold", "-1"]) == 2

    def test_demo_actors(self):
        actors = demo_actors()
        assert len(actors) == 2
        assert all(actor.actions for actor in actors)
