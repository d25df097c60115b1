"""URL-safe slug generation and legacy id detection for public URLs."""

import re

# Storage ids are opaque alphanumeric tokens; generated slugs never end in one
LEGACY_ID_MIN_LENGTH = 15

_DISALLOWED = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")
_LEGACY_ID = re.compile(r"[A-Za-z0-9]+")


def slugify(text: str) -> str:
    """Generate URL-safe slug from a display name.

    "University of Malaya" -> "university-of-malaya". Non-ASCII letters are
    dropped, not transliterated. May return an empty string.
    """
    s = _DISALLOWED.sub("", text.lower())
    s = _WHITESPACE.sub("-", s)
    s = _HYPHENS.sub("-", s)
    return s.strip("-")


def parse_legacy_id(segment: str) -> str | None:
    """Return the storage id embedded in an old-style URL segment, if any.

    Old links were either ``/universities/<id>`` or ``/universities/<name>-<id>``.
    The trailing hyphen-separated part is treated as an id when it is
    alphanumeric and at least LEGACY_ID_MIN_LENGTH characters long.
    """
    last_part = segment.split("-")[-1]
    if len(last_part) >= LEGACY_ID_MIN_LENGTH and _LEGACY_ID.fullmatch(last_part):
        return last_part
    return None
