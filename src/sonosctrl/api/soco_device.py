"""SonosDevice implementation backed by the SoCo library.

SoCo performs the UPnP/SOAP requests; this module only maps its API onto
the command interface and turns its failures into DeviceCommunicationError.

Example:
    device = SoCoDevice.from_host("192.168.1.68")
    snapshot = capture(device)
"""

import logging
from collections.abc import Callable
from typing import Self, TypeVar

import soco
from requests.exceptions import RequestException
from soco.exceptions import SoCoException

from sonosctrl.api.device import DeviceCommunicationError
from sonosctrl.models.playback import PlayMode, PlayState
from sonosctrl.models.track import TrackInfo

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Failures that mean "the speaker did not do what we asked"
_TRANSPORT_ERRORS = (SoCoException, RequestException, OSError)


def _parse_queue_index(value: str) -> int:
    """Parse SoCo's ``playlist_position`` (a string, sometimes empty)."""
    value = value.strip()
    if not value:
        return 0
    return int(value)


class SoCoDevice:
    """A speaker reached through a ``soco.SoCo`` instance.

    Attributes:
        speaker: The wrapped SoCo object.
    """

    def __init__(self, speaker: soco.SoCo) -> None:
        """Wrap an existing SoCo object.

        Args:
            speaker: SoCo instance for the speaker.
        """
        self.speaker = speaker

    @classmethod
    def from_host(cls, host: str) -> Self:
        """Create a device for a speaker address.

        Args:
            host: IP address of the speaker.

        Returns:
            New SoCoDevice.
        """
        return cls(soco.SoCo(host))

    @property
    def host(self) -> str:
        """Return the speaker's IP address."""
        return str(self.speaker.ip_address)

    def __repr__(self) -> str:
        return f"SoCoDevice({self.host!r})"

    def _call(self, operation: str, func: Callable[[], T]) -> T:
        """Run a SoCo call, translating its errors."""
        try:
            return func()
        except _TRANSPORT_ERRORS as e:
            logger.debug("%s on %s failed: %s", operation, self.host, e)
            raise DeviceCommunicationError(operation, str(e)) from e

    def _set(self, operation: str, attribute: str, value: object) -> None:
        self._call(operation, lambda: setattr(self.speaker, attribute, value))

    # -- Queries ---------------------------------------------------------------

    def is_coordinator(self) -> bool:
        """Return True if the speaker coordinates its group."""
        return bool(self._call("is_coordinator", lambda: self.speaker.is_coordinator))

    def get_current_track_info(self) -> TrackInfo:
        """Return position info for the current track."""
        info = self._call("get_current_track_info", self.speaker.get_current_track_info)
        try:
            queue_index = _parse_queue_index(str(info.get("playlist_position", "")))
        except ValueError as e:
            raise DeviceCommunicationError("get_current_track_info", f"bad queue index: {e}") from e
        return TrackInfo(
            uri=info.get("uri") or "",
            queue_index=queue_index,
            position=info.get("position") or "",
            metadata=info.get("metadata") or "",
        )

    def get_volume(self) -> int:
        return int(self._call("get_volume", lambda: self.speaker.volume))

    def is_muted(self) -> bool:
        return bool(self._call("is_muted", lambda: self.speaker.mute))

    def get_bass(self) -> int:
        return int(self._call("get_bass", lambda: self.speaker.bass))

    def get_treble(self) -> int:
        return int(self._call("get_treble", lambda: self.speaker.treble))

    def is_loudness_activated(self) -> bool:
        return bool(self._call("is_loudness_activated", lambda: self.speaker.loudness))

    def get_play_mode(self) -> PlayMode:
        value = self._call("get_play_mode", lambda: self.speaker.play_mode)
        try:
            return PlayMode(str(value).upper())
        except ValueError as e:
            raise DeviceCommunicationError("get_play_mode", f"unknown play mode {value!r}") from e

    def get_play_state(self) -> PlayState:
        info = self._call("get_play_state", self.speaker.get_current_transport_info)
        value = info.get("current_transport_state", "")
        try:
            return PlayState.from_transport_state(value)
        except ValueError as e:
            raise DeviceCommunicationError("get_play_state", f"unknown transport state {value!r}") from e

    # -- Commands --------------------------------------------------------------

    def set_volume(self, volume: int) -> None:
        self._set("set_volume", "volume", volume)

    def set_mute(self, mute: bool) -> None:
        self._set("set_mute", "mute", mute)

    def set_bass(self, bass: int) -> None:
        self._set("set_bass", "bass", bass)

    def set_treble(self, treble: int) -> None:
        self._set("set_treble", "treble", treble)

    def set_loudness(self, loudness: bool) -> None:
        self._set("set_loudness", "loudness", loudness)

    def set_play_mode(self, play_mode: PlayMode) -> None:
        self._set("set_play_mode", "play_mode", str(play_mode))

    def play(self) -> None:
        self._call("play", self.speaker.play)

    def pause(self) -> None:
        self._call("pause", self.speaker.pause)

    def stop(self) -> None:
        self._call("stop", self.speaker.stop)

    def play_from_queue(self, index: int) -> None:
        """Select a queue entry without starting playback."""
        self._call("play_from_queue", lambda: self.speaker.play_from_queue(index, start=False))

    def seek(self, position: str) -> None:
        self._call("seek", lambda: self.speaker.seek(position))

    def set_uri(self, uri: str, metadata: str) -> None:
        """Load a URI and its metadata without starting playback."""
        self._call("set_uri", lambda: self.speaker.play_uri(uri=uri, meta=metadata, start=False))
