"""Track metadata value object and its DIDL-Lite representation.

Sonos devices describe non-queue media (radio streams, single files) with a
DIDL-Lite XML fragment. The same fragment has to be handed back to
``SetAVTransportURI`` when the URI is restored, otherwise the controller
apps show an empty "now playing" screen.

Fields are pulled out with independent patterns, so a fragment with only a
title still yields a usable TrackMetadata.
"""

import re
from dataclasses import dataclass, field, fields
from typing import Self
from xml.sax.saxutils import escape as xml_escape
from xml.sax.saxutils import unescape as xml_unescape

DIDL_HEADER = (
    '<DIDL-Lite xmlns:dc="http://purl.org/dc/elements/1.1/" '
    'xmlns:upnp="urn:schemas-upnp-org:metadata-1-0/upnp/" '
    'xmlns:r="urn:schemas-rinconnetworks-com:metadata-1-0/" '
    'xmlns="urn:schemas-upnp-org:metadata-1-0/DIDL-Lite/">'
)
DIDL_FOOTER = "</DIDL-Lite>"
ITEM_OPEN = '<item id="-1" parentID="-1" restricted="true">'
ITEM_CLOSE = "</item>"

_ATTR_ENTITIES = {'"': "&quot;"}
_UNESCAPE_ENTITIES = {"&quot;": '"', "&apos;": "'"}

# Field name -> element tag, in document order
_ELEMENTS: dict[str, str] = {
    "stream_content": "r:streamContent",
    "title": "dc:title",
    "creator": "dc:creator",
    "album_artist": "r:albumArtist",
    "album": "upnp:album",
    "album_art_uri": "upnp:albumArtURI",
}

_PROTOCOL_INFO_PATTERN = re.compile(r'<res\b[^>]*?\bprotocolInfo="(.*?)"', re.DOTALL)
_RES_PATTERN = re.compile(r"<res\b[^>]*>(.*?)</res>", re.DOTALL)
_ELEMENT_PATTERNS: dict[str, re.Pattern[str]] = {
    name: re.compile(rf"<{re.escape(tag)}(?:\s[^>]*)?>(.*?)</{re.escape(tag)}>", re.DOTALL)
    for name, tag in _ELEMENTS.items()
}


def _find_raw(pattern: re.Pattern[str], text: str) -> str | None:
    """Return the first group of the first match as written, or None."""
    match = pattern.search(text)
    if match is None:
        return None
    return match.group(1)


def _unescape(raw: str) -> str:
    return xml_unescape(raw, _UNESCAPE_ENTITIES)


@dataclass(frozen=True, slots=True)
class TrackMetadata:
    """Description of a media item that is not played from the queue.

    Attributes:
        title: Track or station title.
        creator: Artist.
        album_artist: Album artist.
        album: Album name.
        album_art_uri: URI of the cover art (often relative to the speaker).
        protocol_info: ``protocolInfo`` attribute of the resource.
        res: Resource URI.
        stream_content: Radio "now playing" text.
        raw: Parsed fields exactly as they appeared in the fragment, entity
            references included. Not part of equality.
    """

    title: str | None = None
    creator: str | None = None
    album_artist: str | None = None
    album: str | None = None
    album_art_uri: str | None = None
    protocol_info: str | None = None
    res: str | None = None
    stream_content: str | None = None
    raw: dict[str, str] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def parse(cls, fragment: str) -> Self:
        """Extract metadata from a DIDL-Lite fragment.

        Never fails: anything not found is left as None.

        Args:
            fragment: Raw metadata as returned by the speaker.

        Returns:
            TrackMetadata instance.
        """
        if not fragment:
            return cls()
        patterns = {
            "protocol_info": _PROTOCOL_INFO_PATTERN,
            "res": _RES_PATTERN,
            **_ELEMENT_PATTERNS,
        }
        raw = {
            name: value
            for name, pattern in patterns.items()
            if (value := _find_raw(pattern, fragment)) is not None
        }
        return cls(**{name: _unescape(value) for name, value in raw.items()}, raw=raw)

    @property
    def is_empty(self) -> bool:
        """Return True if no field is set."""
        return all(getattr(self, name) is None for name in _FIELD_NAMES)

    def to_didl(self, escape: bool = True) -> str:
        """Serialize to a DIDL-Lite fragment accepted by ``SetAVTransportURI``.

        Absent fields are left out of the document.

        Args:
            escape: XML-escape values. Pass False for the legacy wire format
                which writes parsed fields back as they were received and
                other values verbatim; markup characters in a title set by
                the caller then produce an invalid document.

        Returns:
            DIDL-Lite XML string.
        """

        def text(name: str, entities: dict[str, str] | None = None) -> str:
            value = getattr(self, name) or ""
            if escape:
                return xml_escape(value, entities or {})
            raw = self.raw.get(name)
            # Only reuse the received text while it still matches the value
            if raw is not None and _unescape(raw) == value:
                return raw
            return value

        parts = [DIDL_HEADER, ITEM_OPEN]
        if self.protocol_info is not None or self.res is not None:
            protocol_info = text("protocol_info", _ATTR_ENTITIES)
            parts.append(f'<res protocolInfo="{protocol_info}">{text("res")}</res>')
        for name, tag in _ELEMENTS.items():
            if getattr(self, name) is not None:
                parts.append(f"<{tag}>{text(name)}</{tag}>")
        parts.append(ITEM_CLOSE)
        parts.append(DIDL_FOOTER)
        return "".join(parts)

    def to_dict(self) -> dict[str, str]:
        """Return the set fields as a plain dict."""
        return {name: value for name in _FIELD_NAMES if (value := getattr(self, name)) is not None}

    @classmethod
    def from_dict(cls, data: dict[str, str]) -> Self:
        """Create metadata from a dict produced by to_dict (unknown keys are ignored)."""
        return cls(**{key: value for key, value in data.items() if key in _FIELD_NAMES})


_FIELD_NAMES = tuple(f.name for f in fields(TrackMetadata) if f.name != "raw")
