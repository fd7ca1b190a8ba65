"""Restore plan: the ordered device commands that reinstate a snapshot.

The order of the steps matters:

1. Pause a playing speaker so nothing audible happens while it changes.
2. Reinstate the source. The queue entry has to be selected before seeking
   or setting the play mode, both apply to whatever is selected.
3. Mute, bass, treble, loudness.
4. Volume.
5. Resume the recorded transport state (coordinators only).
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from sonosctrl.api.device import DeviceCommunicationError, SonosDevice
from sonosctrl.models.playback import PlayMode, PlayState
from sonosctrl.models.snapshot import Snapshot
from sonosctrl.models.source import CloudQueue, DirectStream, LocalQueue

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Pause:
    """Pause playback."""

    def apply(self, device: SonosDevice) -> None:
        device.pause()


@dataclass(frozen=True, slots=True)
class PlayFromQueue:
    """Select a queue entry by 0-based index."""

    index: int

    def apply(self, device: SonosDevice) -> None:
        device.play_from_queue(self.index)


@dataclass(frozen=True, slots=True)
class Seek:
    """Seek to an offset in the selected track."""

    position: str

    def apply(self, device: SonosDevice) -> None:
        device.seek(self.position)


@dataclass(frozen=True, slots=True)
class SetPlayMode:
    play_mode: PlayMode

    def apply(self, device: SonosDevice) -> None:
        device.set_play_mode(self.play_mode)


@dataclass(frozen=True, slots=True)
class SetUri:
    """Load a URI together with its DIDL-Lite metadata."""

    uri: str
    metadata: str

    def apply(self, device: SonosDevice) -> None:
        device.set_uri(self.uri, self.metadata)


@dataclass(frozen=True, slots=True)
class SetMute:
    mute: bool

    def apply(self, device: SonosDevice) -> None:
        device.set_mute(self.mute)


@dataclass(frozen=True, slots=True)
class SetBass:
    bass: int

    def apply(self, device: SonosDevice) -> None:
        device.set_bass(self.bass)


@dataclass(frozen=True, slots=True)
class SetTreble:
    treble: int

    def apply(self, device: SonosDevice) -> None:
        device.set_treble(self.treble)


@dataclass(frozen=True, slots=True)
class SetLoudness:
    loudness: bool

    def apply(self, device: SonosDevice) -> None:
        device.set_loudness(self.loudness)


@dataclass(frozen=True, slots=True)
class SetVolume:
    volume: int

    def apply(self, device: SonosDevice) -> None:
        device.set_volume(self.volume)


@dataclass(frozen=True, slots=True)
class Play:
    def apply(self, device: SonosDevice) -> None:
        device.play()


@dataclass(frozen=True, slots=True)
class Stop:
    def apply(self, device: SonosDevice) -> None:
        device.stop()


RestoreAction = (
    Pause
    | PlayFromQueue
    | Seek
    | SetPlayMode
    | SetUri
    | SetMute
    | SetBass
    | SetTreble
    | SetLoudness
    | SetVolume
    | Play
    | Stop
)


@dataclass(frozen=True, slots=True)
class RestorePlan:
    """Ordered, immutable sequence of restore actions.

    Attributes:
        actions: Actions in the order they must be applied.
    """

    actions: tuple[RestoreAction, ...] = ()

    def __iter__(self) -> Iterator[RestoreAction]:
        return iter(self.actions)

    def __len__(self) -> int:
        return len(self.actions)

    def apply(self, device: SonosDevice) -> None:
        """Apply every action in order.

        Stops at the first failure; actions applied before it stay applied.

        Raises:
            DeviceCommunicationError: If a device command fails.
        """
        for step, action in enumerate(self.actions):
            logger.debug("Restore step %d/%d: %s", step + 1, len(self.actions), action)
            try:
                action.apply(device)
            except DeviceCommunicationError:
                logger.error(
                    "Restore failed at step %d/%d (%s); %d step(s) already applied",
                    step + 1,
                    len(self.actions),
                    action,
                    step,
                )
                raise


def _source_actions(snapshot: Snapshot, escape: bool) -> list[RestoreAction]:
    """Return the actions that reinstate what was playing."""
    match snapshot.source:
        case LocalQueue() as queue:
            actions: list[RestoreAction] = []
            if queue.playlist_position > 0:
                actions.append(PlayFromQueue(queue.queue_index))
                if queue.track_position:
                    actions.append(Seek(queue.track_position))
            actions.append(SetPlayMode(queue.play_mode))
            return actions
        case CloudQueue():
            # No command exists to resume a cloud queue
            logger.info("Cloud queue playback cannot be restored, skipping source")
            return []
        case DirectStream(metadata=metadata):
            if not snapshot.media_url:
                return []
            return [SetUri(snapshot.media_url, metadata.to_didl(escape=escape))]


def build_restore_plan(
    snapshot: Snapshot,
    current_state: PlayState,
    *,
    escape: bool = True,
) -> RestorePlan:
    """Build the restore plan for a snapshot.

    Args:
        snapshot: Snapshot to reinstate.
        current_state: Play state of the speaker right now.
        escape: XML-escape stream metadata (False for the legacy wire format).

    Returns:
        RestorePlan with the actions in application order.
    """
    actions: list[RestoreAction] = []

    if current_state is PlayState.PLAYING:
        actions.append(Pause())

    actions.extend(_source_actions(snapshot, escape))

    actions.extend(
        [
            SetMute(snapshot.mute),
            SetBass(snapshot.bass),
            SetTreble(snapshot.treble),
            SetLoudness(snapshot.loudness),
        ]
    )

    # TODO: skip SetVolume for speakers with fixed volume enabled (they answer with a UPnP error)
    actions.append(SetVolume(snapshot.volume))

    if snapshot.is_coordinator:
        if snapshot.transport_state is PlayState.PLAYING:
            actions.append(Play())
        elif snapshot.transport_state is PlayState.STOPPED:
            actions.append(Stop())

    return RestorePlan(tuple(actions))
