from __future__ import annotations

import math
from typing import Any, Dict, List

import pandas as pd

from cipher_core.alphabet import ALPHABET, LETTER_COUNT, Mode, Ring
from cipher_core.geometry import compute_mapping, produce_connectors, ring_positions
from cipher_core.settings import DEFAULT_DIMENSIONS, WheelDimensions


LETTER_COLUMNS = ["ring", "index", "letter", "x", "y"]
CONNECTOR_COLUMNS = ["outer_index", "inner_index", "outer_letter", "inner_letter", "x", "y", "x2", "y2"]


def alphabet_table(shift: Any, mode: Any = Mode.ENCRYPT) -> pd.DataFrame:
    """Original letter next to the letter it maps to, one row per outer index."""
    rows = [
        {"index": p.outer_index, "original": ALPHABET[p.outer_index], "shifted": ALPHABET[p.inner_index]}
        for p in compute_mapping(shift, mode)
    ]
    return pd.DataFrame(rows, columns=["index", "original", "shifted"])


def describe_mapping(shift: Any, mode: Any = Mode.ENCRYPT) -> str:
    pairs = [f"{ALPHABET[p.outer_index]} → {ALPHABET[p.inner_index]}" for p in compute_mapping(shift, mode)]
    return ", ".join(pairs[:3] + ["...", pairs[-1]])


def letters_frame(dimensions: WheelDimensions = DEFAULT_DIMENSIONS) -> pd.DataFrame:
    rows: List[Dict[str, Any]] = []
    for ring in (Ring.OUTER, Ring.INNER):
        for pos in ring_positions(ring, dimensions):
            rows.append({"ring": ring.value, "index": pos.index, "letter": pos.letter, "x": pos.x, "y": pos.y})
    return pd.DataFrame(rows, columns=LETTER_COLUMNS)


def connectors_frame(
    shift: Any, mode: Any = Mode.ENCRYPT, dimensions: WheelDimensions = DEFAULT_DIMENSIONS
) -> pd.DataFrame:
    rows = [
        {
            "outer_index": c.outer_index,
            "inner_index": c.inner_index,
            "outer_letter": ALPHABET[c.outer_index],
            "inner_letter": ALPHABET[c.inner_index],
            "x": c.x1,
            "y": c.y1,
            "x2": c.x2,
            "y2": c.y2,
        }
        for c in produce_connectors(shift, mode, dimensions)
    ]
    return pd.DataFrame(rows, columns=CONNECTOR_COLUMNS)


def ring_outline_frame(dimensions: WheelDimensions = DEFAULT_DIMENSIONS, steps: int = 4 * LETTER_COUNT) -> pd.DataFrame:
    """Closed polylines for the decorative circles; the last point repeats the first."""
    steps = max(3, int(steps))
    radii = {
        "outer_band": dimensions.outer_band_radius,
        "outer": dimensions.outer_radius,
        "inner_band": dimensions.inner_band_radius,
        "inner": dimensions.inner_radius,
        "hub": dimensions.hub_radius,
    }
    rows: List[Dict[str, Any]] = []
    for name, radius in radii.items():
        for step in range(steps + 1):
            angle = 2 * math.pi * step / steps
            rows.append(
                {
                    "circle": name,
                    "step": step,
                    "x": dimensions.center_x + radius * math.sin(angle),
                    "y": dimensions.center_y - radius * math.cos(angle),
                }
            )
    return pd.DataFrame(rows, columns=["circle", "step", "x", "y"])
