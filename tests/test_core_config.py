"""Tests for ConfigManager using QSettings."""

import pytest

from sonosctrl.core.config import ConfigManager
from sonosctrl.models.profile import SpeakerProfile, create_profile


@pytest.fixture
def config() -> ConfigManager:
    """Return a fresh ConfigManager for each test."""
    # Use unique organization/app to avoid test interference
    config = ConfigManager("SonosCTRLTest", "TestConfig")
    config.clear()
    return config


class TestSpeakerProfiles:
    """Test speaker profile storage."""

    def test_initially_empty(self, config: ConfigManager) -> None:
        """Test that config starts empty."""
        assert config.get_speaker_profiles() == []

    def test_save_and_load_profiles(self, config: ConfigManager) -> None:
        """Test saving and loading speaker profiles."""
        profiles = [
            SpeakerProfile(id="p1", name="Kitchen", host="192.168.1.68"),
            SpeakerProfile(id="p2", name="Office", host="192.168.1.69"),
        ]
        config.save_speaker_profiles(profiles)

        assert config.get_speaker_profiles() == profiles

    def test_add_profile(self, config: ConfigManager) -> None:
        """Test adding a profile generates an ID."""
        profile = config.add_speaker_profile("Kitchen", "192.168.1.68")

        assert profile == create_profile("Kitchen", "192.168.1.68")
        assert config.get_speaker_profiles() == [profile]

    def test_add_existing_name_updates_host(self, config: ConfigManager) -> None:
        """Test that adding a known name moves it to the new host."""
        first = config.add_speaker_profile("Kitchen", "192.168.1.68")
        second = config.add_speaker_profile("Kitchen", "192.168.1.99")

        loaded = config.get_speaker_profiles()
        assert len(loaded) == 1
        assert loaded[0].host == "192.168.1.99"
        assert second.id == first.id

    def test_remove_profile(self, config: ConfigManager) -> None:
        """Test removing a profile by name."""
        config.add_speaker_profile("Kitchen", "a")
        config.add_speaker_profile("Office", "b")

        assert config.remove_speaker_profile("Kitchen") is True
        assert config.remove_speaker_profile("Garage") is False
        assert [p.name for p in config.get_speaker_profiles()] == ["Office"]

    def test_get_profile_by_name(self, config: ConfigManager) -> None:
        """Test looking up a profile by name."""
        config.add_speaker_profile("Kitchen", "192.168.1.68")

        found = config.get_profile_by_name("Kitchen")
        assert found is not None
        assert found.host == "192.168.1.68"
        assert config.get_profile_by_name("Garage") is None

    def test_invalid_entries_skipped(self, config: ConfigManager) -> None:
        """Test that malformed stored entries are ignored."""
        config.settings.setValue(
            "speakers",
            [{"id": "x", "name": "", "host": "a"}, "junk", {"id": "y", "name": "Ok", "host": "b"}],
        )
        assert [p.name for p in config.get_speaker_profiles()] == ["Ok"]


class TestRestoreSettings:
    """Test DIDL escaping and network settings."""

    def test_didl_escape_default(self, config: ConfigManager) -> None:
        """Test that escaping is on by default."""
        assert config.get_didl_escape() is True

    def test_set_didl_escape(self, config: ConfigManager) -> None:
        """Test turning escaping off."""
        config.set_didl_escape(False)
        assert config.get_didl_escape() is False

    def test_request_timeout_default(self, config: ConfigManager) -> None:
        """Test the default request timeout."""
        assert config.get_request_timeout() == 20.0

    def test_request_timeout_clamped(self, config: ConfigManager) -> None:
        """Test that the request timeout is clamped to 1-120."""
        config.set_request_timeout(0.1)
        assert config.get_request_timeout() == 1.0
        config.set_request_timeout(500)
        assert config.get_request_timeout() == 120.0


class TestAlertSettings:
    """Test alert defaults."""

    def test_defaults(self, config: ConfigManager) -> None:
        """Test default alert volume and duration."""
        assert config.get_alert_volume() == 20
        assert config.get_alert_duration() == 5

    def test_alert_volume_clamped(self, config: ConfigManager) -> None:
        """Test that alert volume is clamped to 0-100."""
        config.set_alert_volume(150)
        assert config.get_alert_volume() == 100
        config.set_alert_volume(-5)
        assert config.get_alert_volume() == 0

    def test_alert_duration(self, config: ConfigManager) -> None:
        """Test setting the alert duration."""
        config.set_alert_duration(12)
        assert config.get_alert_duration() == 12
