"""Playback state and play mode types for a Sonos speaker."""

from enum import StrEnum
from typing import Self


class PlayState(StrEnum):
    """Transport state of a speaker."""

    PLAYING = "PLAYING"
    PAUSED = "PAUSED"
    STOPPED = "STOPPED"
    TRANSITIONING = "TRANSITIONING"

    @classmethod
    def from_transport_state(cls, value: str) -> Self:
        """Parse a UPnP ``CurrentTransportState`` value.

        Sonos reports a paused speaker as ``PAUSED_PLAYBACK``.

        Args:
            value: Transport state as returned by the device.

        Returns:
            Matching PlayState.

        Raises:
            ValueError: If the value is not a known transport state.
        """
        normalized = value.strip().upper()
        if normalized == "PAUSED_PLAYBACK":
            return cls.PAUSED
        return cls(normalized)


class PlayMode(StrEnum):
    """Queue play mode (shuffle/repeat combination)."""

    NORMAL = "NORMAL"
    REPEAT_ALL = "REPEAT_ALL"
    SHUFFLE = "SHUFFLE"
    SHUFFLE_NOREPEAT = "SHUFFLE_NOREPEAT"
    REPEAT_ONE = "REPEAT_ONE"
    SHUFFLE_REPEAT_ONE = "SHUFFLE_REPEAT_ONE"

    @property
    def shuffle(self) -> bool:
        """Return True if tracks are played in random order."""
        return self.name.startswith("SHUFFLE")

    @property
    def repeat(self) -> bool | str:
        """Return the repeat option: False, True, or "ONE"."""
        if self in (PlayMode.REPEAT_ONE, PlayMode.SHUFFLE_REPEAT_ONE):
            return "ONE"
        return self in (PlayMode.REPEAT_ALL, PlayMode.SHUFFLE)
