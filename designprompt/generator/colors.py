"""Hex colour validation for manually typed primary colours."""

from __future__ import annotations

import re

_HEX_COLOR_RE = re.compile(r"^#([0-9A-Fa-f]{6}|[0-9A-Fa-f]{3})$")


def is_valid_hex(value: str) -> bool:
    """Return ``True`` if *value* is a ``#RGB`` or ``#RRGGBB`` hex colour.

    Examples::

        is_valid_hex("#3B82F6") -> True
        is_valid_hex("#fff")    -> True
        is_valid_hex("3B82F6")  -> False
    """
    if not isinstance(value, str):
        return False
    return _HEX_COLOR_RE.fullmatch(value) is not None
