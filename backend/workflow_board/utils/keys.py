"""Canonical keys for matching columns against workflow statuses."""

import re

_SEPARATOR_RUN = re.compile(r"[\s_-]+")


def normalize_status_key(name: str) -> str:
    """Derive a status key from a display name.

    "In Review", "in-review" and "in__review" all map to "IN_REVIEW".
    Applying it to an already normalized key returns the key unchanged.
    """
    return _SEPARATOR_RUN.sub("_", name.lower()).upper()
