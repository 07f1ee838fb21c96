"""
Recordbook — Slug Generator
============================

What:  Derives the storage key of a record from its title.
How:   Lowercase, spaces become hyphens, a fixed set of punctuation is dropped.

Examples:
    "Hello World!"    → "hello-world"
    "Q&A: (draft)"    → "qa-draft"
    "A B" and "a-b"   → both "a-b" (the later save wins)

The result is not guaranteed to be unique, bounded, or non-empty.
"""

import re

# Characters removed outright (no hyphen is left in their place)
_STRIPPED_CHARS = re.compile(r"[?&:!@#$%^*()]")


def slugify(title: str) -> str:
    """Return the slug for `title`."""
    slug = title.lower().replace(" ", "-")
    return _STRIPPED_CHARS.sub("", slug)
