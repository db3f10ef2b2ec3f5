from __future__ import annotations

import re


_NON_ALNUM_RUN = re.compile(r"[^a-z0-9]+")
_COUNTRY_SUFFIX = re.compile(r",?\s*\b(UK|USA|US)$", re.IGNORECASE)


def create_slug(name: str) -> str:
    """Lowercase `name` and collapse every non-alphanumeric run into one hyphen.

    >>> create_slug("Acme Corp!")
    'acme-corp'
    """
    return _NON_ALNUM_RUN.sub("-", name.lower()).strip("-")


def normalize_location(location: str) -> str:
    """Strip a trailing UK/USA/US country suffix: 'London, UK' -> 'London'."""
    return _COUNTRY_SUFFIX.sub("", location).strip()
