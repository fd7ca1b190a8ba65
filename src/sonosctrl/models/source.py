"""Playback source variants and media URI classification.

Sonos encodes what a speaker is playing in the scheme of its track URI::

    x-rincon-queue:RINCON_000E5859E49601400#0   local queue (always #0)
    x-rincon-queue:RINCON_000E5859E49601400#6   cloud queue (#n changes per queue)
    x-rincon:RINCON_000E5859E49601400           group member following its coordinator
    x-rincon-mp3radio://example.com/stream      radio stream, file, ...
"""

from dataclasses import dataclass, field
from enum import StrEnum

from sonosctrl.models.metadata import TrackMetadata
from sonosctrl.models.playback import PlayMode

QUEUE_SCHEME = "x-rincon-queue"
LOCAL_QUEUE_SUFFIX = "0"


class MalformedStateError(Exception):
    """The media URI reported by a speaker could not be classified."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Malformed media URI {url!r}: {reason}")


class SourceKind(StrEnum):
    """Kind of playback source a media URI points at."""

    LOCAL_QUEUE = "local_queue"
    CLOUD_QUEUE = "cloud_queue"
    DIRECT_STREAM = "direct_stream"


def classify_media_url(url: str) -> SourceKind:
    """Classify a media URI by its scheme and queue suffix.

    Args:
        url: Track URI as reported by the speaker (empty if nothing loaded).

    Returns:
        The SourceKind for the URI.

    Raises:
        MalformedStateError: If a queue URI has no ``#<suffix>`` part.
    """
    scheme, sep, remainder = url.partition(":")
    if not sep or scheme != QUEUE_SCHEME:
        return SourceKind.DIRECT_STREAM

    if "#" not in remainder:
        raise MalformedStateError(url, "queue URI has no '#' suffix")
    # Only the segment after the first '#' counts, later '#' parts are ignored
    suffix = remainder.split("#")[1]
    if not suffix:
        raise MalformedStateError(url, "queue URI has an empty suffix")

    if suffix == LOCAL_QUEUE_SUFFIX:
        return SourceKind.LOCAL_QUEUE
    return SourceKind.CLOUD_QUEUE


@dataclass(frozen=True, slots=True)
class LocalQueue:
    """Playing from the speaker's own queue.

    Attributes:
        play_mode: Shuffle/repeat mode of the queue.
        playlist_position: 1-based queue position reported by the device.
        track_position: Offset in the current track (``H:MM:SS``), may be empty.
    """

    play_mode: PlayMode = PlayMode.NORMAL
    playlist_position: int = 0
    track_position: str = ""

    kind = SourceKind.LOCAL_QUEUE

    @property
    def queue_index(self) -> int:
        """Return the 0-based index expected by play-from-queue."""
        return self.playlist_position - 1


@dataclass(frozen=True, slots=True)
class CloudQueue:
    """Playing a queue owned by a cloud integration (e.g. a voice assistant).

    There is no device command to resume such a queue.
    """

    kind = SourceKind.CLOUD_QUEUE


@dataclass(frozen=True, slots=True)
class DirectStream:
    """Playing a URI directly: radio, a file, or nothing at all.

    Attributes:
        metadata: Metadata to send back with the URI.
    """

    metadata: TrackMetadata = field(default_factory=TrackMetadata)

    kind = SourceKind.DIRECT_STREAM


PlaybackSource = LocalQueue | CloudQueue | DirectStream
