"""Playback logging and output."""

from spritecast.logging.markdown_writer import MarkdownPlaybackWriter
from spritecast.logging.playback_log import PlaybackLog

__all__ = ["MarkdownPlaybackWriter", "PlaybackLog"]
