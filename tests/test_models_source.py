"""Tests for media URI classification and playback source variants."""

import pytest

from sonosctrl.models.metadata import TrackMetadata
from sonosctrl.models.playback import PlayMode, PlayState
from sonosctrl.models.source import (
    CloudQueue,
    DirectStream,
    LocalQueue,
    MalformedStateError,
    SourceKind,
    classify_media_url,
)


class TestClassifyMediaUrl:
    """Tests for classify_media_url."""

    @pytest.mark.parametrize(
        "url",
        [
            "x-rincon-queue:RINCON_000E5859E49601400#0",
            "x-rincon-queue:RINCON_B8E9378F2B3201400#0",
            "x-rincon-queue:RINCON_000E5859E49601400#0#1",
        ],
    )
    def test_local_queue(self, url: str) -> None:
        """Test that queue URIs whose first suffix is 0 are the local queue."""
        assert classify_media_url(url) is SourceKind.LOCAL_QUEUE

    @pytest.mark.parametrize(
        "url",
        [
            "x-rincon-queue:RINCON_000E5859E49601400#6",
            "x-rincon-queue:RINCON_000E5859E49601400#12",
            "x-rincon-queue:RINCON_000E5859E49601400#abc",
        ],
    )
    def test_cloud_queue(self, url: str) -> None:
        """Test that queue URIs with any other suffix are a cloud queue."""
        assert classify_media_url(url) is SourceKind.CLOUD_QUEUE

    @pytest.mark.parametrize(
        "url",
        [
            "x-rincon:RINCON_000E5859E49601400",
            "x-rincon-mp3radio://streams.example.com/jazz.mp3",
            "x-sonosapi-stream:s17077?sid=254&flags=8224&sn=0",
            "http://example.com/track.mp3#0",
            "x-file-cifs://nas/music/track.flac",
            "",
            "no-colon-at-all",
        ],
    )
    def test_direct_stream(self, url: str) -> None:
        """Test that every other URI is a direct stream."""
        assert classify_media_url(url) is SourceKind.DIRECT_STREAM

    def test_queue_without_suffix(self) -> None:
        """Test that a queue URI without '#' is rejected."""
        with pytest.raises(MalformedStateError) as excinfo:
            classify_media_url("x-rincon-queue:RINCON_000E5859E49601400")
        assert excinfo.value.url == "x-rincon-queue:RINCON_000E5859E49601400"
        assert "'#'" in excinfo.value.reason

    def test_queue_with_empty_suffix(self) -> None:
        """Test that a queue URI with an empty suffix is rejected."""
        with pytest.raises(MalformedStateError, match="empty suffix"):
            classify_media_url("x-rincon-queue:RINCON_000E5859E49601400#")


class TestSourceVariants:
    """Tests for LocalQueue, CloudQueue, and DirectStream."""

    def test_local_queue_index(self) -> None:
        """Test that the queue index is one less than the reported position."""
        queue = LocalQueue(play_mode=PlayMode.NORMAL, playlist_position=5)
        assert queue.queue_index == 4

    def test_kinds(self) -> None:
        """Test that each variant reports its kind."""
        assert LocalQueue().kind is SourceKind.LOCAL_QUEUE
        assert CloudQueue().kind is SourceKind.CLOUD_QUEUE
        assert DirectStream().kind is SourceKind.DIRECT_STREAM

    def test_direct_stream_default_metadata(self) -> None:
        """Test that a direct stream defaults to empty metadata."""
        assert DirectStream().metadata == TrackMetadata()


class TestPlayState:
    """Tests for PlayState parsing."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("PLAYING", PlayState.PLAYING),
            ("PAUSED_PLAYBACK", PlayState.PAUSED),
            ("STOPPED", PlayState.STOPPED),
            ("TRANSITIONING", PlayState.TRANSITIONING),
            ("playing", PlayState.PLAYING),
        ],
    )
    def test_from_transport_state(self, value: str, expected: PlayState) -> None:
        """Test parsing UPnP transport states."""
        assert PlayState.from_transport_state(value) is expected

    def test_unknown_transport_state(self) -> None:
        """Test that unknown states raise ValueError."""
        with pytest.raises(ValueError):
            PlayState.from_transport_state("NO_MEDIA_PRESENT")


class TestPlayMode:
    """Tests for PlayMode shuffle/repeat flags."""

    @pytest.mark.parametrize(
        ("mode", "shuffle", "repeat"),
        [
            (PlayMode.NORMAL, False, False),
            (PlayMode.REPEAT_ALL, False, True),
            (PlayMode.SHUFFLE, True, True),
            (PlayMode.SHUFFLE_NOREPEAT, True, False),
            (PlayMode.REPEAT_ONE, False, "ONE"),
            (PlayMode.SHUFFLE_REPEAT_ONE, True, "ONE"),
        ],
    )
    def test_flags(self, mode: PlayMode, shuffle: bool, repeat: bool | str) -> None:
        """Test the meaning of each play mode."""
        assert mode.shuffle is shuffle
        assert mode.repeat == repeat
