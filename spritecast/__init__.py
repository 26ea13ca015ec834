"""spritecast - concurrent sprite script playback with collision swaps."""

__version__ = "0.1.0"
