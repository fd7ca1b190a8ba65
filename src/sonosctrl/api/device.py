"""Command interface of a single speaker.

Snapshot capture and restore only talk to a speaker through this interface.
Every call is a blocking request/response round trip; implementations raise
DeviceCommunicationError for network, protocol, or device-reported faults.
"""

from typing import Protocol, runtime_checkable

from sonosctrl.models.playback import PlayMode, PlayState
from sonosctrl.models.track import TrackInfo


class DeviceCommunicationError(Exception):
    """A command sent to a speaker failed."""

    def __init__(self, operation: str, message: str) -> None:
        self.operation = operation
        self.message = message
        super().__init__(f"{operation} failed: {message}")


@runtime_checkable
class SonosDevice(Protocol):
    """Synchronous operations on one speaker."""

    def is_coordinator(self) -> bool:
        """Return True if the speaker coordinates playback for its group."""
        ...

    def get_current_track_info(self) -> TrackInfo:
        """Return URI, queue index, position, and metadata of the current track."""
        ...

    def get_volume(self) -> int: ...

    def set_volume(self, volume: int) -> None: ...

    def is_muted(self) -> bool: ...

    def set_mute(self, mute: bool) -> None: ...

    def get_bass(self) -> int: ...

    def set_bass(self, bass: int) -> None: ...

    def get_treble(self) -> int: ...

    def set_treble(self, treble: int) -> None: ...

    def is_loudness_activated(self) -> bool: ...

    def set_loudness(self, loudness: bool) -> None: ...

    def get_play_mode(self) -> PlayMode: ...

    def set_play_mode(self, play_mode: PlayMode) -> None: ...

    def get_play_state(self) -> PlayState: ...

    def play(self) -> None: ...

    def pause(self) -> None: ...

    def stop(self) -> None: ...

    def play_from_queue(self, index: int) -> None:
        """Select a queue entry by 0-based index."""
        ...

    def seek(self, position: str) -> None:
        """Seek to an ``H:MM:SS`` offset in the selected track."""
        ...

    def set_uri(self, uri: str, metadata: str) -> None:
        """Load a URI with its DIDL-Lite metadata."""
        ...
