"""Test fixtures for sonosctrl tests."""

from collections.abc import Callable
from unittest.mock import MagicMock

import pytest

from sonosctrl.api.device import SonosDevice
from sonosctrl.models.playback import PlayMode, PlayState
from sonosctrl.models.track import TrackInfo

LOCAL_QUEUE_URI = "x-rincon-queue:RINCON_000E5859E49601400#0"

RADIO_METADATA = (
    '<DIDL-Lite xmlns:dc="http://purl.org/dc/elements/1.1/" '
    'xmlns:upnp="urn:schemas-upnp-org:metadata-1-0/upnp/" '
    'xmlns:r="urn:schemas-rinconnetworks-com:metadata-1-0/" '
    'xmlns="urn:schemas-upnp-org:metadata-1-0/DIDL-Lite/">'
    '<item id="-1" parentID="-1" restricted="true">'
    '<res protocolInfo="x-rincon-mp3radio:*:*:*">x-rincon-mp3radio://streams.example.com/jazz.mp3</res>'
    "<r:streamContent>Miles Davis - So What</r:streamContent>"
    "<dc:title>Jazz &amp; Blues FM</dc:title>"
    "<upnp:class>object.item</upnp:class>"
    "</item></DIDL-Lite>"
)


@pytest.fixture
def make_device() -> Callable[..., MagicMock]:
    """Return a factory for mock speakers answering the given state."""

    def factory(
        uri: str = LOCAL_QUEUE_URI,
        *,
        queue_index: int = 3,
        position: str = "0:01:23",
        metadata: str = "",
        coordinator: bool = True,
        play_state: PlayState = PlayState.PLAYING,
        play_mode: PlayMode = PlayMode.SHUFFLE,
        volume: int = 30,
        mute: bool = False,
        bass: int = 2,
        treble: int = -1,
        loudness: bool = True,
    ) -> MagicMock:
        device = MagicMock(spec=SonosDevice)
        device.is_coordinator.return_value = coordinator
        device.get_current_track_info.return_value = TrackInfo(
            uri=uri, queue_index=queue_index, position=position, metadata=metadata
        )
        device.get_volume.return_value = volume
        device.is_muted.return_value = mute
        device.get_bass.return_value = bass
        device.get_treble.return_value = treble
        device.is_loudness_activated.return_value = loudness
        device.get_play_mode.return_value = play_mode
        device.get_play_state.return_value = play_state
        return device

    return factory


@pytest.fixture
def device(make_device: Callable[..., MagicMock]) -> MagicMock:
    """A coordinator playing track 3 of its local queue."""
    return make_device()


@pytest.fixture
def radio_metadata() -> str:
    """DIDL-Lite metadata as reported for a radio stream."""
    return RADIO_METADATA
