"""Snapshot model: a point-in-time copy of a speaker's state."""

from dataclasses import dataclass
from typing import Any, Self

from sonosctrl.models.metadata import TrackMetadata
from sonosctrl.models.playback import PlayMode, PlayState
from sonosctrl.models.source import (
    CloudQueue,
    DirectStream,
    LocalQueue,
    PlaybackSource,
    SourceKind,
)


@dataclass(frozen=True, slots=True)
class Snapshot:
    """State of one speaker at capture time.

    Attributes:
        media_url: Raw source URI (empty string if nothing was loaded).
        is_coordinator: Whether the speaker was a group coordinator.
        source: What was playing, with the fields needed to reinstate it.
        volume: Volume 0-100.
        mute: Mute state.
        bass: Bass level -10..10.
        treble: Treble level -10..10.
        loudness: Loudness compensation state.
        transport_state: Play state, only recorded for coordinators.
    """

    media_url: str
    is_coordinator: bool
    source: PlaybackSource
    volume: int = 0
    mute: bool = False
    bass: int = 0
    treble: int = 0
    loudness: bool = False
    transport_state: PlayState | None = None

    def __post_init__(self) -> None:
        """Check that transport_state is recorded exactly for coordinators."""
        if self.is_coordinator and self.transport_state is None:
            raise ValueError("coordinator snapshot requires a transport_state")
        if not self.is_coordinator and self.transport_state is not None:
            raise ValueError("transport_state is only recorded for coordinators")

    @property
    def kind(self) -> SourceKind:
        """Return the kind of playback source."""
        return self.source.kind

    @property
    def is_playing_queue(self) -> bool:
        """Return True if the speaker was playing its local queue."""
        return isinstance(self.source, LocalQueue)

    @property
    def is_playing_cloud_queue(self) -> bool:
        """Return True if the speaker was playing a cloud queue."""
        return isinstance(self.source, CloudQueue)

    @property
    def play_mode(self) -> PlayMode | None:
        """Return the queue play mode, or None if not playing the local queue."""
        if isinstance(self.source, LocalQueue):
            return self.source.play_mode
        return None

    @property
    def playlist_position(self) -> int:
        """Return the 1-based queue position, 0 if not playing the local queue."""
        if isinstance(self.source, LocalQueue):
            return self.source.playlist_position
        return 0

    @property
    def track_position(self) -> str:
        """Return the offset in the current queue track, empty if unknown."""
        if isinstance(self.source, LocalQueue):
            return self.source.track_position
        return ""

    @property
    def media_metadata(self) -> TrackMetadata | None:
        """Return the stream metadata, or None for queue sources."""
        if isinstance(self.source, DirectStream):
            return self.source.metadata
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict."""
        source: dict[str, Any] = {"kind": str(self.source.kind)}
        match self.source:
            case LocalQueue(play_mode=mode, playlist_position=position, track_position=offset):
                source.update(play_mode=str(mode), playlist_position=position, track_position=offset)
            case DirectStream(metadata=metadata):
                source["metadata"] = metadata.to_dict()
            case CloudQueue():
                pass
        return {
            "media_url": self.media_url,
            "is_coordinator": self.is_coordinator,
            "source": source,
            "volume": self.volume,
            "mute": self.mute,
            "bass": self.bass,
            "treble": self.treble,
            "loudness": self.loudness,
            "transport_state": str(self.transport_state) if self.transport_state else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create a snapshot from a dict produced by to_dict.

        Raises:
            KeyError: If a required key is missing.
            ValueError: If a value does not fit its type.
        """
        source_data: dict[str, Any] = data["source"]
        kind = SourceKind(source_data["kind"])
        source: PlaybackSource
        if kind is SourceKind.LOCAL_QUEUE:
            source = LocalQueue(
                play_mode=PlayMode(source_data.get("play_mode", PlayMode.NORMAL)),
                playlist_position=int(source_data.get("playlist_position", 0)),
                track_position=str(source_data.get("track_position", "")),
            )
        elif kind is SourceKind.CLOUD_QUEUE:
            source = CloudQueue()
        else:
            source = DirectStream(TrackMetadata.from_dict(source_data.get("metadata", {})))

        transport = data.get("transport_state")
        return cls(
            media_url=str(data["media_url"]),
            is_coordinator=bool(data["is_coordinator"]),
            source=source,
            volume=int(data.get("volume", 0)),
            mute=bool(data.get("mute", False)),
            bass=int(data.get("bass", 0)),
            treble=int(data.get("treble", 0)),
            loudness=bool(data.get("loudness", False)),
            transport_state=PlayState(transport) if transport else None,
        )
