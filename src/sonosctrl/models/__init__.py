"""Data models for speaker state, snapshots, and saved speakers."""

from sonosctrl.models.metadata import TrackMetadata
from sonosctrl.models.playback import PlayMode, PlayState
from sonosctrl.models.profile import SpeakerProfile, create_profile
from sonosctrl.models.snapshot import Snapshot
from sonosctrl.models.source import (
    CloudQueue,
    DirectStream,
    LocalQueue,
    MalformedStateError,
    PlaybackSource,
    SourceKind,
    classify_media_url,
)
from sonosctrl.models.track import TrackInfo

__all__ = [
    "CloudQueue",
    "DirectStream",
    "LocalQueue",
    "MalformedStateError",
    "PlayMode",
    "PlayState",
    "PlaybackSource",
    "Snapshot",
    "SourceKind",
    "SpeakerProfile",
    "TrackInfo",
    "TrackMetadata",
    "classify_media_url",
    "create_profile",
]
