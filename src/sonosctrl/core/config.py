"""Configuration manager using QSettings for persistent storage."""

import logging
from typing import cast

from PySide6.QtCore import QSettings

from sonosctrl.models.profile import SpeakerProfile, create_profile

logger = logging.getLogger(__name__)

# Settings keys
_KEY_SPEAKERS = "speakers"

# DIDL
_KEY_DIDL_ESCAPE = "didl/escape"

# Network
_KEY_REQUEST_TIMEOUT = "network/request_timeout"

# Alert
_KEY_ALERT_VOLUME = "alert/volume"
_KEY_ALERT_DURATION = "alert/duration"

DEFAULT_REQUEST_TIMEOUT = 20.0
DEFAULT_ALERT_VOLUME = 20
DEFAULT_ALERT_DURATION = 5


class ConfigManager:
    """Wrapper around QSettings for type-safe config access.

    QSettings stores config in platform-specific locations:
    - Windows: HKEY_CURRENT_USER\\Software\\SonosCTRL\\SonosCTRL
    - macOS: ~/Library/Preferences/com.SonosCTRL.SonosCTRL.plist
    - Linux: ~/.config/SonosCTRL/SonosCTRL.conf

    Example:
        config = ConfigManager()
        profile = config.get_profile_by_name("Kitchen")
    """

    def __init__(self, organization: str = "SonosCTRL", application: str = "SonosCTRL") -> None:
        """Initialize the config manager.

        Args:
            organization: Organization name for QSettings.
            application: Application name for QSettings.
        """
        self._settings = QSettings(organization, application)

    @property
    def settings(self) -> QSettings:
        """Return the underlying QSettings instance."""
        return self._settings

    # -- Speaker profiles ------------------------------------------------------

    def get_speaker_profiles(self) -> list[SpeakerProfile]:
        """Load saved speaker profiles.

        Returns:
            List of SpeakerProfile objects, or empty list if none saved.
        """
        raw_data = self._settings.value(_KEY_SPEAKERS, [], list)
        profiles: list[SpeakerProfile] = []

        if not isinstance(raw_data, list):
            return profiles

        data = cast(list[object], raw_data)
        for raw_item in data:
            if not isinstance(raw_item, dict):
                continue
            item = cast(dict[str, object], raw_item)
            id_val = item.get("id", "")
            name_val = item.get("name", "")
            host_val = item.get("host", "")
            if not name_val or not host_val:
                logger.warning("Skipping invalid speaker profile entry: %r", item)
                continue
            profiles.append(
                SpeakerProfile(
                    id=str(id_val) if id_val else "",
                    name=str(name_val),
                    host=str(host_val),
                )
            )

        return profiles

    def save_speaker_profiles(self, profiles: list[SpeakerProfile]) -> None:
        """Persist speaker profiles.

        Args:
            profiles: List of SpeakerProfile objects to save.
        """
        data = [{"id": p.id, "name": p.name, "host": p.host} for p in profiles]
        self._settings.setValue(_KEY_SPEAKERS, data)

    def add_speaker_profile(self, name: str, host: str) -> SpeakerProfile:
        """Save a speaker under a name, updating the host if the name exists.

        Args:
            name: Human-readable name.
            host: Speaker hostname or IP.

        Returns:
            The stored profile.
        """
        profiles = self.get_speaker_profiles()
        for index, existing in enumerate(profiles):
            if existing.name == name:
                profiles[index] = existing.with_host(host)
                self.save_speaker_profiles(profiles)
                return profiles[index]

        profile = create_profile(name, host)
        profiles.append(profile)
        self.save_speaker_profiles(profiles)
        return profile

    def remove_speaker_profile(self, name: str) -> bool:
        """Remove a speaker profile by name.

        Args:
            name: Name of the profile to remove.

        Returns:
            True if profile was removed, False if not found.
        """
        profiles = self.get_speaker_profiles()
        original_count = len(profiles)
        profiles = [p for p in profiles if p.name != name]

        if len(profiles) < original_count:
            self.save_speaker_profiles(profiles)
            return True
        return False

    def get_profile_by_name(self, name: str) -> SpeakerProfile | None:
        """Get a speaker profile by name.

        Args:
            name: Name of the profile to find.

        Returns:
            SpeakerProfile if found, else None.
        """
        for profile in self.get_speaker_profiles():
            if profile.name == name:
                return profile
        return None

    # -- Restore settings ------------------------------------------------------

    def get_didl_escape(self) -> bool:
        """Return whether stream metadata is XML-escaped on restore.

        Returns:
            True (default) to escape, False for the legacy verbatim format.
        """
        return bool(self._settings.value(_KEY_DIDL_ESCAPE, True, bool))

    def set_didl_escape(self, enabled: bool) -> None:
        """Enable or disable metadata escaping.

        Args:
            enabled: Whether to escape metadata values.
        """
        self._settings.setValue(_KEY_DIDL_ESCAPE, enabled)

    # -- Network settings ------------------------------------------------------

    def get_request_timeout(self) -> float:
        """Return the UPnP request timeout in seconds.

        Returns:
            Timeout in seconds (default 20).
        """
        value = self._settings.value(_KEY_REQUEST_TIMEOUT, DEFAULT_REQUEST_TIMEOUT, float)
        return max(1.0, min(120.0, float(value)))  # type: ignore[arg-type]

    def set_request_timeout(self, seconds: float) -> None:
        """Set the UPnP request timeout.

        Args:
            seconds: Timeout in seconds (1-120).
        """
        self._settings.setValue(_KEY_REQUEST_TIMEOUT, max(1.0, min(120.0, seconds)))

    # -- Alert settings --------------------------------------------------------

    def get_alert_volume(self) -> int:
        """Return the volume used to play alerts.

        Returns:
            Volume 0-100 (default 20).
        """
        value = self._settings.value(_KEY_ALERT_VOLUME, DEFAULT_ALERT_VOLUME, int)
        return max(0, min(100, int(value)))  # type: ignore[arg-type]

    def set_alert_volume(self, volume: int) -> None:
        """Set the alert volume.

        Args:
            volume: Volume 0-100.
        """
        self._settings.setValue(_KEY_ALERT_VOLUME, max(0, min(100, volume)))

    def get_alert_duration(self) -> int:
        """Return how long an alert plays before restoring.

        Returns:
            Duration in seconds (default 5).
        """
        value = self._settings.value(_KEY_ALERT_DURATION, DEFAULT_ALERT_DURATION, int)
        return max(0, min(600, int(value)))  # type: ignore[arg-type]

    def set_alert_duration(self, seconds: int) -> None:
        """Set the alert duration.

        Args:
            seconds: Duration in seconds (0-600).
        """
        self._settings.setValue(_KEY_ALERT_DURATION, max(0, min(600, seconds)))

    # -- General settings ------------------------------------------------------

    def clear(self) -> None:
        """Clear all settings (useful for testing or reset)."""
        self._settings.clear()

    def sync(self) -> None:
        """Force settings to be written to disk."""
        self._settings.sync()
