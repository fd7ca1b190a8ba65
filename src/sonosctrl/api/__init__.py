"""Speaker command interface and its SoCo-backed implementation."""

from sonosctrl.api.device import DeviceCommunicationError, SonosDevice
from sonosctrl.api.soco_device import SoCoDevice

__all__ = [
    "DeviceCommunicationError",
    "SoCoDevice",
    "SonosDevice",
]
