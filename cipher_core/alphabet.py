from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Any, Optional


logger = logging.getLogger(__name__)

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LETTER_COUNT = len(ALPHABET)
DEGREES_PER_LETTER = 360 / LETTER_COUNT

_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")


class Mode(str, Enum):
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


class Ring(str, Enum):
    OUTER = "outer"
    INNER = "inner"


def _parse_int_prefix(value: str) -> Optional[int]:
    """Read a leading integer the way a form field would ("7.9" -> 7, "12px" -> 12)."""
    match = _INT_PREFIX.match(value)
    if not match:
        return None
    return int(match.group(1))


def normalize_shift(value: Any) -> int:
    """Coerce any shift input into [0, 25]; unparseable input becomes 0."""
    try:
        shift = int(value)
    except Exception:
        shift = _parse_int_prefix(value) if isinstance(value, str) else None
        if shift is None:
            logger.debug("Unparseable shift %r, using 0", value)
            shift = 0
    return shift % LETTER_COUNT


def normalize_index(value: Any) -> int:
    """Letter index in [0, 25]; read like a shift, so unparseable input is index 0."""
    return normalize_shift(value)


def normalize_mode(value: Any) -> Mode:
    if isinstance(value, Mode):
        return value
    try:
        return Mode(str(value).strip().lower())
    except ValueError:
        logger.warning("Unknown mode %r, falling back to %s", value, Mode.ENCRYPT.value)
        return Mode.ENCRYPT


def normalize_ring(value: Any) -> Ring:
    if isinstance(value, Ring):
        return value
    try:
        return Ring(str(value).strip().lower())
    except ValueError:
        logger.warning("Unknown ring %r, falling back to %s", value, Ring.OUTER.value)
        return Ring.OUTER


def shift_index(index: int, shift: Any, mode: Any) -> int:
    """Index of the counterpart letter; the result always lies in [0, 25]."""
    shift = normalize_shift(shift)
    if normalize_mode(mode) is Mode.DECRYPT:
        return (index - shift + LETTER_COUNT) % LETTER_COUNT
    return (index + shift) % LETTER_COUNT
