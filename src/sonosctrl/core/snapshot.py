"""Capture a speaker's state and restore it later.

Typical use is playing an announcement and going back to whatever was
playing before::

    snapshot = capture(device)
    device.set_uri(alert_uri, "")
    device.play()
    ...
    restore(snapshot, device)

A snapshot is not tied to the device it was taken from, but restoring it
elsewhere is only meaningful for a speaker with the same queue.
"""

from __future__ import annotations

import logging

from sonosctrl.api.device import SonosDevice
from sonosctrl.core.restore import RestorePlan, build_restore_plan
from sonosctrl.models.metadata import TrackMetadata
from sonosctrl.models.snapshot import Snapshot
from sonosctrl.models.source import (
    CloudQueue,
    DirectStream,
    LocalQueue,
    PlaybackSource,
    SourceKind,
    classify_media_url,
)

logger = logging.getLogger(__name__)


def capture(device: SonosDevice) -> Snapshot:
    """Record the current state of a speaker.

    Only queries the device; nothing is changed.

    Args:
        device: Speaker to capture.

    Returns:
        Snapshot of the speaker.

    Raises:
        DeviceCommunicationError: If a query fails.
        MalformedStateError: If the media URI cannot be classified.
    """
    is_coordinator = device.is_coordinator()

    track_info = device.get_current_track_info()
    media_url = track_info.uri
    kind = classify_media_url(media_url)

    # Sound settings do not depend on the source
    volume = device.get_volume()
    mute = device.is_muted()
    bass = device.get_bass()
    treble = device.get_treble()
    loudness = device.is_loudness_activated()

    source: PlaybackSource
    if kind is SourceKind.LOCAL_QUEUE:
        source = LocalQueue(
            play_mode=device.get_play_mode(),
            playlist_position=track_info.queue_index,
            track_position=track_info.position,
        )
    elif kind is SourceKind.CLOUD_QUEUE:
        source = CloudQueue()
    else:
        source = DirectStream(TrackMetadata.parse(track_info.metadata))

    transport_state = device.get_play_state() if is_coordinator else None

    snapshot = Snapshot(
        media_url=media_url,
        is_coordinator=is_coordinator,
        source=source,
        volume=volume,
        mute=mute,
        bass=bass,
        treble=treble,
        loudness=loudness,
        transport_state=transport_state,
    )
    logger.info(
        "Captured %s snapshot of %r (coordinator=%s, state=%s)",
        kind,
        device,
        is_coordinator,
        transport_state,
    )
    return snapshot


def plan_restore(snapshot: Snapshot, device: SonosDevice, *, escape: bool = True) -> RestorePlan:
    """Query the speaker's play state and build the plan that restores a snapshot.

    Args:
        snapshot: Snapshot to reinstate.
        device: Speaker to restore.
        escape: XML-escape stream metadata.

    Returns:
        RestorePlan ready to be applied to the device.

    Raises:
        DeviceCommunicationError: If the play state query fails.
    """
    return build_restore_plan(snapshot, device.get_play_state(), escape=escape)


def restore(snapshot: Snapshot, device: SonosDevice, *, escape: bool = True) -> None:
    """Reinstate a snapshot on a speaker.

    There is no rollback: if a command fails the speaker keeps whatever was
    applied up to that point. A cloud queue source is skipped silently, and
    volume is always set, even on speakers configured for fixed volume.

    Args:
        snapshot: Snapshot to reinstate.
        device: Speaker to restore.
        escape: XML-escape stream metadata (False for the legacy wire format).

    Raises:
        DeviceCommunicationError: If a device command fails.
    """
    plan = plan_restore(snapshot, device, escape=escape)
    logger.info("Restoring %s snapshot on %r (%d steps)", snapshot.kind, device, len(plan))
    plan.apply(device)
