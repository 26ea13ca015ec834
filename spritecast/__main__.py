"""Entry point for spritecast package."""

import argparse
import asyncio
import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.table import Table

from spritecast.core.models import Actor, Move, Repeat, Say, Think, TurnClockwise
from spritecast.logging import MarkdownPlaybackWriter, PlaybackLog
from spritecast.playback import PlaybackConfig, PlaybackController
from spritecast.schemas import ProjectFileError, load_project, save_project
from spritecast.store import ActorStore


def demo_actors() -> list[Actor]:
    """Two sprites walking toward each other; they swap scripts mid-stage."""
    return [
        Actor(
            id="sprite-1",
            name="Sprite 1",
            x=-200.0,
            actions=[
                Say(message="Here I go!", duration=0.5),
                Repeat(times=15, children=[Move(steps=20)]),
            ],
        ),
        Actor(
            id="sprite-2",
            name="Sprite 2",
            x=200.0,
            rotation=180.0,
            actions=[
                Repeat(times=4, children=[Move(steps=25), TurnClockwise(degrees=10)]),
                Think(message="Hmm...", duration=0.5),
            ],
        ),
    ]


def build_config(args: argparse.Namespace, base: PlaybackConfig) -> PlaybackConfig:
    """Apply command-line overrides on top of the project's settings."""
    data = base.to_dict()
    if args.step_delay_ms is not None:
        data["step_delay_ms"] = args.step_delay_ms
    if args.threshold is not None:
        data["collision_threshold"] = args.threshold
    if args.legacy_repeat:
        data["legacy_repeat_fallback"] = True
    if args.no_swap_scripts:
        data["swap_persisted_scripts"] = False
    return PlaybackConfig.from_dict(data)


def render_actors(console: Console, actors: list[Actor]) -> None:
    table = Table(title="Final stage")
    table.add_column("Sprite")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    table.add_column("Rotation", justify="right")
    table.add_column("Script")
    for actor in actors:
        script = ", ".join(action.type for action in actor.actions) or "-"
        table.add_row(
            actor.name,
            f"{actor.x:.1f}",
            f"{actor.y:.1f}",
            f"{actor.rotation:.0f}",
            script,
        )
    console.print(table)


async def run_playback(store: ActorStore, config: PlaybackConfig, playback_log: PlaybackLog) -> None:
    playback_log.connect_to_event_bus(store.event_bus)
    try:
        await PlaybackController(store, config).play()
    finally:
        playback_log.disconnect_from_event_bus(store.event_bus)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the spritecast CLI."""
    parser = argparse.ArgumentParser(
        description="spritecast - play back sprite scripts with collision swaps",
        prog="spritecast",
    )
    parser.add_argument(
        "project",
        nargs="?",
        type=Path,
        help="Project JSON file to play (default: built-in demo)",
    )
    parser.add_argument("--step-delay-ms", type=int, help="Delay after each motion step")
    parser.add_argument("--threshold", type=float, help="Collision distance threshold")
    parser.add_argument(
        "--legacy-repeat",
        action="store_true",
        help="Empty repeat blocks repeat the block before them",
    )
    parser.add_argument(
        "--no-swap-scripts",
        action="store_true",
        help="Swap only the running sequences on collision, not the saved scripts",
    )
    parser.add_argument("--markdown", type=Path, help="Write a markdown summary here")
    parser.add_argument("--save", type=Path, help="Save the resulting project here")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    console = Console()

    if args.project is not None:
        try:
            actors, base_config = load_project(args.project)
        except (OSError, ProjectFileError) as e:
            console.print(f"[red]Could not load {args.project}: {e}[/red]")
            return 1
    else:
        actors, base_config = demo_actors(), PlaybackConfig()

    try:
        config = build_config(args, base_config)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        return 2

    store = ActorStore(actors)
    playback_log = PlaybackLog(record_steps=args.verbose)
    asyncio.run(run_playback(store, config, playback_log))

    render_actors(console, store.actors)
    console.print(f"{len(playback_log.swaps)} collision swap(s)")

    if args.markdown:
        MarkdownPlaybackWriter().write_summary(store.actors, playback_log, args.markdown)
        console.print(f"Summary written to {args.markdown}")
    if args.save:
        try:
            save_project(args.save, store.actors, config)
        except (OSError, ProjectFileError) as e:
            console.print(f"[red]Could not save {args.save}: {e}[/red]")
            return 1
        console.print(f"Project saved to {args.save}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
