from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, List, Tuple

from cipher_core.alphabet import (
    ALPHABET,
    DEGREES_PER_LETTER,
    LETTER_COUNT,
    Mode,
    Ring,
    normalize_index,
    normalize_mode,
    normalize_ring,
    normalize_shift,
    shift_index,
)
from cipher_core.settings import DEFAULT_DIMENSIONS, WheelDimensions


@dataclass(frozen=True)
class LetterPosition:
    index: int
    ring: Ring
    letter: str
    x: float
    y: float


@dataclass(frozen=True)
class Pairing:
    outer_index: int
    inner_index: int


@dataclass(frozen=True)
class Connector:
    outer_index: int
    inner_index: int
    x1: float
    y1: float
    x2: float
    y2: float

    @property
    def start(self) -> Tuple[float, float]:
        return (self.x1, self.y1)

    @property
    def end(self) -> Tuple[float, float]:
        return (self.x2, self.y2)


def ring_radius(ring: Any, dimensions: WheelDimensions = DEFAULT_DIMENSIONS) -> float:
    if normalize_ring(ring) is Ring.INNER:
        return dimensions.inner_radius
    return dimensions.outer_radius


def compute_position(
    index: int, ring: Any = Ring.OUTER, dimensions: WheelDimensions = DEFAULT_DIMENSIONS
) -> Tuple[float, float]:
    """Screen coordinates of a letter: index 0 at 12 o'clock, increasing clockwise.

    y grows downwards, so the top of the wheel is ``center_y - radius``.
    """
    angle = math.radians(normalize_index(index) * DEGREES_PER_LETTER)
    radius = ring_radius(ring, dimensions)
    x = dimensions.center_x + radius * math.sin(angle)
    y = dimensions.center_y - radius * math.cos(angle)
    return x, y


def letter_position(
    index: int, ring: Any = Ring.OUTER, dimensions: WheelDimensions = DEFAULT_DIMENSIONS
) -> LetterPosition:
    index = normalize_index(index)
    x, y = compute_position(index, ring, dimensions)
    return LetterPosition(index=index, ring=normalize_ring(ring), letter=ALPHABET[index], x=x, y=y)


def ring_positions(ring: Any = Ring.OUTER, dimensions: WheelDimensions = DEFAULT_DIMENSIONS) -> List[LetterPosition]:
    return [letter_position(i, ring, dimensions) for i in range(LETTER_COUNT)]


def compute_mapping(shift: Any, mode: Any = Mode.ENCRYPT) -> List[Pairing]:
    shift = normalize_shift(shift)
    mode = normalize_mode(mode)
    return [Pairing(outer_index=i, inner_index=shift_index(i, shift, mode)) for i in range(LETTER_COUNT)]


def produce_connectors(
    shift: Any, mode: Any = Mode.ENCRYPT, dimensions: WheelDimensions = DEFAULT_DIMENSIONS
) -> List[Connector]:
    """One segment per pairing, outer letter to its counterpart on the inner ring.

    The mapping is a permutation, so there are always 26 segments, also at shift 0
    where every segment points straight at the center.
    """
    connectors: List[Connector] = []
    for pairing in compute_mapping(shift, mode):
        x1, y1 = compute_position(pairing.outer_index, Ring.OUTER, dimensions)
        x2, y2 = compute_position(pairing.inner_index, Ring.INNER, dimensions)
        connectors.append(
            Connector(outer_index=pairing.outer_index, inner_index=pairing.inner_index, x1=x1, y1=y1, x2=x2, y2=y2)
        )
    return connectors
