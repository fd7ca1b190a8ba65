"""Tests for SpeakerProfile model."""

from dataclasses import FrozenInstanceError

import pytest

from sonosctrl.models.profile import SpeakerProfile, create_profile


class TestSpeakerProfile:
    """Test SpeakerProfile dataclass."""

    def test_with_host(self) -> None:
        """Test creating a copy with a different host."""
        profile = SpeakerProfile(id="k1", name="Kitchen", host="192.168.1.68")
        updated = profile.with_host("192.168.1.90")

        assert updated.id == profile.id
        assert updated.name == profile.name
        assert updated.host == "192.168.1.90"
        # Original unchanged (frozen)
        assert profile.host == "192.168.1.68"

    def test_is_immutable(self) -> None:
        """Test that SpeakerProfile is frozen."""
        profile = SpeakerProfile(id="k1", name="Kitchen", host="192.168.1.68")
        with pytest.raises(FrozenInstanceError):
            profile.name = "Office"  # type: ignore[misc]


class TestCreateProfile:
    """Test create_profile helper."""

    def test_id_derived_from_host(self) -> None:
        """Test that the same host always gets the same ID."""
        a = create_profile("Kitchen", "192.168.1.68")
        b = create_profile("Other Name", "192.168.1.68")
        assert a.id == b.id
        assert len(a.id) == 8

    def test_different_hosts_differ(self) -> None:
        """Test that different hosts get different IDs."""
        assert create_profile("A", "192.168.1.68").id != create_profile("A", "192.168.1.69").id
