"""Current track information as reported by a speaker."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TrackInfo:
    """Position info for the track a speaker has selected.

    Attributes:
        uri: Source URI of the current track (empty if nothing is loaded).
        queue_index: 1-based position in the queue, 0 when unknown.
        position: Elapsed time in the track as ``H:MM:SS`` (may be empty).
        metadata: Raw DIDL-Lite metadata fragment (may be empty).
    """

    uri: str = ""
    queue_index: int = 0
    position: str = ""
    metadata: str = ""
