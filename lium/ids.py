"""Generation and validation of UUIDs and human-readable identifiers."""

from __future__ import annotations

import re
import uuid as _uuid

ADJECTIVES = (
    "brave", "calm", "clever", "cool", "eager", "fast", "gentle", "happy", "keen", "lively",
    "nice", "proud", "quick", "quiet", "smart", "swift", "warm", "wise", "young", "bold",
    "bright", "clean", "fresh", "grand", "great", "kind", "light", "lucky", "merry", "mild",
    "neat", "plain", "rich", "sharp", "shiny", "silly", "small", "super", "sweet", "thick",
)

NOUNS = (
    "ant", "bat", "bee", "cat", "cow", "dog", "elk", "fox", "gnu", "hen", "jay", "owl", "pig",
    "rat", "ram", "yak", "ape", "bug", "cub", "doe", "eel", "fly", "hog", "kid", "lab", "mom",
    "pup", "sun", "web", "zoo", "ace", "ash", "bay", "box", "day", "eye", "gem", "ink", "key",
    "oak",
)

_HEX = "[0-9a-fA-F]"
_HYPHENATED = rf"{_HEX}{{8}}-{_HEX}{{4}}-{_HEX}{{4}}-{_HEX}{{4}}-{_HEX}{{12}}"
_UUID_FORMS = re.compile(
    rf"{_HEX}{{32}}|{_HYPHENATED}|\{{{_HYPHENATED}\}}|urn:uuid:{_HYPHENATED}"
)
_U32 = 2**32


def generate_uuid() -> str:
    """Return a new random (version 4) UUID in hyphenated form."""
    return str(_uuid.uuid4())


def generate_human_id(uuid: str) -> str:
    """Derive a stable 'adjective-noun-suffix' identifier from a UUID."""
    digest = sum(ord(char) * position for position, char in enumerate(uuid, start=1)) % _U32
    adjective = ADJECTIVES[digest % len(ADJECTIVES)]
    noun = NOUNS[(digest // len(ADJECTIVES)) % len(NOUNS)]
    return f"{adjective}-{noun}-{uuid[-4:]}"


def is_valid_uuid(text: str) -> bool:
    """True if the text is a UUID in simple, hyphenated, braced or URN form."""
    return _UUID_FORMS.fullmatch(text) is not None