"""
Locale-aware link construction
"""

SPANISH_PREFIX = "/es"


def make_locale_link(path: str, current_path: str) -> str:
    """Prefix ``path`` with the Spanish marker when the current page is already under it"""
    is_spanish = current_path == SPANISH_PREFIX or current_path.startswith(f"{SPANISH_PREFIX}/")

    return f"{SPANISH_PREFIX}{path}" if is_spanish else path
