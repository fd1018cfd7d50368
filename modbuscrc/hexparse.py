"""Parsing of frame bytes typed as hexadecimal text."""

from __future__ import annotations

import re

_HEX_FIELD = re.compile(r"\s*(?:0[xX])?([0-9A-Fa-f]+)\s*")
_UINT_MAX = 0xFFFFFFFF


def _parse_byte(field: str) -> int | None:
    match = _HEX_FIELD.fullmatch(field)
    if match is None:
        return None
    value = int(match.group(1), 16)
    if value > _UINT_MAX:
        return None
    return value & 0xFF


def _fields(text: str) -> list[str]:
    if " " in text:
        return [part for part in text.split(" ") if part]
    return [text[i:i + 2] for i in range(0, len(text), 2)]


def parse_hex_string(text: str) -> list[int]:
    """Turn hexadecimal text into a list of byte values.

    Text containing spaces is split on them; otherwise it is read in pairs
    of characters, a trailing single character forming its own byte.
    Fields that are not valid hexadecimal are skipped, and values wider
    than a byte keep only their low eight bits.
    """
    return [
        value
        for value in map(_parse_byte, _fields(text))
        if value is not None
    ]