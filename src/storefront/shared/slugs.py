"""URL slug validation shared by catalogue aggregates."""

import re

_SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def is_valid_slug(slug: str) -> bool:
    """Lowercase alphanumerics separated by single hyphens, e.g. ``macbook-pro-14``."""
    return bool(_SLUG_PATTERN.match(slug))
