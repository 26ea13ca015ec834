"""Markdown playback summary writer."""

from datetime import datetime
from pathlib import Path

from spritecast.core.models import Actor
from spritecast.logging.playback_log import PlaybackLog


class MarkdownPlaybackWriter:
    """Generates markdown summaries of a playback log."""

    def write_summary(self, actors: list[Actor], playback_log: PlaybackLog, output_path: Path) -> None:
        """
        Write a playback summary to a markdown file.

        Args:
            actors: Actors as they stand after playback
            playback_log: Log of the session(s)
            output_path: Path to write markdown file
        """
        Path(output_path).write_text(
            self.generate_summary_string(actors, playback_log), encoding="utf-8"
        )

    def generate_summary_string(self, actors: list[Actor], playback_log: PlaybackLog) -> str:
        """Generate markdown summary as a string."""
        lines = ["# Playback Summary", ""]
        lines.append(
            f"**Sessions:** {playback_log.sessions_started} started, "
            f"{playback_log.sessions_stopped} stopped"
        )
        lines.append("")

        lines.extend(self._final_positions(actors, playback_log))
        lines.extend(self._swaps(playback_log))
        lines.extend(self._timeline(playback_log))

        lines.append("---")
        lines.append(f"*Generated by spritecast - {datetime.now().strftime('%Y-%m-%d %H:%M')}*")
        return "\n".join(lines)

    def _final_positions(self, actors: list[Actor], playback_log: PlaybackLog) -> list[str]:
        lines = ["## Sprites", ""]
        lines.append("| Sprite | x | y | Rotation | Steps | Swaps | Script |")
        lines.append("|--------|--:|--:|---------:|------:|------:|-------:|")
        for actor in actors:
            stats = playback_log.actor_stats.get(actor.id)
            steps = stats.steps if stats else 0
            swaps = stats.swaps if stats else 0
            lines.append(
                f"| {actor.name} | {actor.x:.1f} | {actor.y:.1f} | {actor.rotation:.0f} | "
                f"{steps} | {swaps} | {len(actor.actions)} blocks |"
            )
        lines.append("")
        return lines

    def _swaps(self, playback_log: PlaybackLog) -> list[str]:
        lines = ["## Collisions", ""]
        if not playback_log.swaps:
            lines.append("*No collisions*")
        for swap in playback_log.swaps:
            lines.append(
                f"- **{swap.timestamp.strftime('%H:%M:%S')}** - {swap.first_actor_id} <-> "
                f"{swap.second_actor_id} ({swap.distance:.1f})"
            )
        lines.append("")
        return lines

    def _timeline(self, playback_log: PlaybackLog) -> list[str]:
        # Steps are too noisy for a summary
        lines = ["## Timeline", ""]
        for entry in playback_log.entries:
            if entry.event_type == "STEP":
                continue
            prefix = f"**{entry.event_type}** " if entry.event_type in ("SWAP", "FAILURE") else ""
            lines.append(f"- {prefix}{entry.description}")
        lines.append("")
        return lines
