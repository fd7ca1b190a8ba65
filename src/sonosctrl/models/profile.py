"""Speaker profile data model for saved speakers."""

import hashlib
from dataclasses import dataclass, replace
from typing import Self


@dataclass(frozen=True)
class SpeakerProfile:
    """A saved speaker address.

    Attributes:
        id: Unique identifier for the profile.
        name: Human-readable name (e.g., "Kitchen", "Living Room").
        host: Speaker hostname or IP address.
    """

    id: str
    name: str
    host: str

    def with_host(self, host: str) -> Self:
        """Return a copy pointing at another address.

        Args:
            host: New hostname or IP.

        Returns:
            New SpeakerProfile with updated host.
        """
        return replace(self, host=host)


def create_profile(name: str, host: str) -> SpeakerProfile:
    """Create a new SpeakerProfile with a generated ID.

    Args:
        name: Human-readable name.
        host: Speaker hostname or IP.

    Returns:
        New SpeakerProfile with an ID derived from the host.
    """
    profile_id = hashlib.md5(host.encode()).hexdigest()[:8]
    return SpeakerProfile(id=profile_id, name=name, host=host)
