"""Model of the page's single audio element."""

import logging

from core.exceptions import AudioUnavailableError

logger = logging.getLogger(__name__)


class AudioHandle:
    """A playable media element with one source slot.

    Mirrors the parts of an HTML ``<audio>`` element the lookup flow touches:
    the bound ``src``, the playback position and the paused flag.
    """

    def __init__(self):
        self.src: str | None = None
        self.current_time: float = 0.0
        self.paused: bool = True
        self.load_count: int = 0

    @property
    def playing(self) -> bool:
        return not self.paused

    def play(self) -> None:
        """Start playback of the bound source. Only ever called by the user."""
        if self.src is None:
            raise AudioUnavailableError("No audio source bound")
        self.paused = False

    def pause(self) -> None:
        self.paused = True

    def load(self) -> None:
        """Reload the current source; playback is reset and left paused."""
        self.paused = True
        self.current_time = 0.0
        self.load_count += 1

    def __repr__(self) -> str:
        return (
            f"AudioHandle(src={self.src!r}, current_time={self.current_time}, "
            f"paused={self.paused})"
        )
