from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass, field
from typing import Any

from cipher_core.alphabet import Mode, normalize_mode, normalize_shift


logger = logging.getLogger(__name__)

DEFAULT_TEXT = "HELLO WORLD"
DEFAULT_SHIFT = 3


@dataclass(frozen=True)
class WheelDimensions:
    view_size: float = 500.0
    center_x: float = 250.0
    center_y: float = 250.0
    outer_radius: float = 180.0
    inner_radius: float = 120.0
    outer_band_radius: float = 200.0
    inner_band_radius: float = 140.0
    hub_radius: float = 50.0


DEFAULT_DIMENSIONS = WheelDimensions()


@dataclass(frozen=True)
class WheelState:
    text: str = DEFAULT_TEXT
    shift: int = DEFAULT_SHIFT
    mode: Mode = Mode.ENCRYPT
    dimensions: WheelDimensions = field(default_factory=WheelDimensions)


def _as_float(value: object, default: float) -> float:
    try:
        out = float(value)  # type: ignore[arg-type]
    except Exception:
        return default
    if math.isnan(out) or math.isinf(out):
        return default
    return out


def normalize_dimensions(raw: Any) -> WheelDimensions:
    if isinstance(raw, WheelDimensions):
        raw = asdict(raw)
    if not raw or not isinstance(raw, dict):
        return DEFAULT_DIMENSIONS
    d = DEFAULT_DIMENSIONS
    dims = WheelDimensions(
        view_size=_as_float(raw.get("view_size", d.view_size), d.view_size),
        center_x=_as_float(raw.get("center_x", d.center_x), d.center_x),
        center_y=_as_float(raw.get("center_y", d.center_y), d.center_y),
        outer_radius=_as_float(raw.get("outer_radius", d.outer_radius), d.outer_radius),
        inner_radius=_as_float(raw.get("inner_radius", d.inner_radius), d.inner_radius),
        outer_band_radius=_as_float(raw.get("outer_band_radius", d.outer_band_radius), d.outer_band_radius),
        inner_band_radius=_as_float(raw.get("inner_band_radius", d.inner_band_radius), d.inner_band_radius),
        hub_radius=_as_float(raw.get("hub_radius", d.hub_radius), d.hub_radius),
    )
    # Outer letters must sit strictly farther from the center than inner ones.
    if not (dims.outer_radius > dims.inner_radius > 0) or dims.view_size <= 0:
        logger.warning("Invalid wheel dimensions %r, using defaults", raw)
        return DEFAULT_DIMENSIONS
    return dims


def normalize_state(raw: dict) -> WheelState:
    text = raw.get("text")
    text = DEFAULT_TEXT if text is None else str(text)
    shift = normalize_shift(raw.get("shift", DEFAULT_SHIFT))
    mode = normalize_mode(raw.get("mode", Mode.ENCRYPT))
    dimensions = normalize_dimensions(raw.get("dimensions"))
    return WheelState(text=text, shift=shift, mode=mode, dimensions=dimensions)
