"""
URL slug helpers.
"""

import re
import unicodedata
from typing import Awaitable, Callable


def slugify(value: str) -> str:
    """Fold accents, lowercase and collapse runs of non-alphanumerics into '-'."""
    value = unicodedata.normalize("NFKD", value or "").encode("ascii", "ignore").decode("ascii")
    value = value.strip().lower()
    value = re.sub(r"[^a-z0-9]+", "-", value)
    return value.strip("-")


async def unique_slug(base: str, is_taken: Callable[[str], Awaitable[bool]], fallback: str = "item") -> str:
    """
    Return ``base`` or the first ``base-N`` (N >= 2) that is not taken.

    Args:
        base: Preferred slug, already slugified
        is_taken: Coroutine reporting whether a slug is already in use
        fallback: Slug used when ``base`` is empty
    """
    base = base or fallback
    candidate = base
    n = 2
    while await is_taken(candidate):
        candidate = f"{base}-{n}"
        n += 1
    return candidate
