"""Owner of the session's audio handle."""

import logging

from audio.handle import AudioHandle
from core.sentry import add_lookup_breadcrumb

logger = logging.getLogger(__name__)


class AudioController:
    """Rebinds the single audio handle between lookups.

    The handle is created once and lives as long as the controller; it is
    never replaced, only pointed at a new source.
    """

    def __init__(self, handle: AudioHandle | None = None):
        self._handle = handle if handle is not None else AudioHandle()

    @property
    def handle(self) -> AudioHandle:
        return self._handle

    @property
    def source(self) -> str | None:
        return self._handle.src

    def rebind(self, source_url: str | None) -> None:
        """Stop current playback and bind ``source_url`` (or nothing).

        Playback is always stopped and rewound before the source changes,
        and it is never restarted here: no autoplay.
        """
        handle = self._handle
        if handle.playing:
            logger.debug(f"Stopping playback of {handle.src}")
        handle.pause()
        handle.current_time = 0.0

        handle.src = source_url
        handle.load()

        add_lookup_breadcrumb("audio_rebind", {"src": source_url})
        logger.debug(f"Audio handle bound to {source_url}")
