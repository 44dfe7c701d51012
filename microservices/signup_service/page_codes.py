"""
Page code normalization

Codes are the URL slugs identifying a page within a campaign. Pages are
stored under their normalized code, so every lookup normalizes first.
"""

import re

_SEPARATORS = re.compile(r"[^a-z0-9]+")


def normalize_page_code(code) -> str:
    """
    Canonicalize a page code.

    Lowercases, turns every run of characters outside ``[a-z0-9]`` into a
    single hyphen and trims hyphens from both ends. Applying it twice gives
    the same result as applying it once.
    """
    if not isinstance(code, str):
        return ""
    return _SEPARATORS.sub("-", code.strip().lower()).strip("-")
