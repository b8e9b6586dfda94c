from __future__ import annotations

import math
from typing import Any, Dict, Tuple

import altair as alt
import pandas as pd

from cipher_core.alphabet import Mode, Ring, normalize_shift
from cipher_core.settings import DEFAULT_DIMENSIONS, WheelDimensions
from cipher_core.tables import connectors_frame, letters_frame, ring_outline_frame

alt.data_transformers.disable_max_rows()

STROKE = "#2563eb"
CONNECTOR = "#3b82f6"
OUTER_FILL = "#bfdbfe"
INNER_FILL = "#93c5fd"
OUTER_TEXT = "#1e40af"
INNER_TEXT = "#1e3a8a"
# Mark radii as fractions of the wheel radius they belong to.
OUTER_DISC_RATIO = 16 / 180
INNER_DISC_RATIO = 14 / 120
HUB_FILL_RATIO = 0.7
POINTER_TIP_RATIO = 8 / 180


def to_vega_spec(chart: alt.TopLevelMixin) -> Dict[str, Any]:
    """Convert an Altair chart into a Vega-Lite spec dict (JSON-serializable)."""
    return chart.to_dict()


def _disc_size(radius: float) -> float:
    """Circle mark size is an area in square pixels; one data unit is one pixel."""
    return math.pi * radius ** 2


def _position_channels(dimensions: WheelDimensions) -> Tuple[alt.X, alt.Y]:
    # Screen coordinates: y grows downwards, so the y scale is reversed.
    domain = [0, dimensions.view_size]
    x = alt.X("x:Q", scale=alt.Scale(domain=domain, nice=False, zero=False), axis=None)
    y = alt.Y("y:Q", scale=alt.Scale(domain=domain, nice=False, zero=False, reverse=True), axis=None)
    return x, y


def wheel_chart(shift: Any, mode: Any = Mode.ENCRYPT, dimensions: WheelDimensions = DEFAULT_DIMENSIONS) -> alt.LayerChart:
    shift = normalize_shift(shift)
    x, y = _position_channels(dimensions)

    letters = letters_frame(dimensions)
    outer = letters[letters["ring"] == Ring.OUTER.value]
    inner = letters[letters["ring"] == Ring.INNER.value]

    outlines = (
        alt.Chart(ring_outline_frame(dimensions))
        .mark_line(color=STROKE, strokeWidth=1)
        .encode(x=x, y=y, detail="circle:N", order=alt.Order("step:Q"))
    )
    connectors = (
        alt.Chart(connectors_frame(shift, mode, dimensions))
        .mark_rule(color=CONNECTOR, strokeWidth=1, strokeDash=[3, 3], opacity=0.4)
        .encode(
            x=x,
            y=y,
            x2=alt.X2("x2"),
            y2=alt.Y2("y2"),
            tooltip=[alt.Tooltip("outer_letter:N", title="From"), alt.Tooltip("inner_letter:N", title="To")],
        )
    )
    outer_discs = (
        alt.Chart(outer)
        .mark_circle(size=_disc_size(OUTER_DISC_RATIO * dimensions.outer_radius), color=OUTER_FILL, stroke=STROKE, strokeWidth=1.5, opacity=1)
        .encode(x=x, y=y)
    )
    inner_discs = (
        alt.Chart(inner)
        .mark_circle(size=_disc_size(INNER_DISC_RATIO * dimensions.inner_radius), color=INNER_FILL, stroke=STROKE, strokeWidth=1.5, opacity=1)
        .encode(x=x, y=y)
    )
    outer_labels = (
        alt.Chart(outer)
        .mark_text(fontSize=14, fontWeight="bold", color=OUTER_TEXT, align="center", baseline="middle")
        .encode(x=x, y=y, text="letter:N")
    )
    inner_labels = (
        alt.Chart(inner)
        .mark_text(fontSize=12, fontWeight="bold", color=INNER_TEXT, align="center", baseline="middle")
        .encode(x=x, y=y, text="letter:N")
    )

    center = pd.DataFrame(
        [{"x": dimensions.center_x, "y": dimensions.center_y, "label": str(shift)}]
    )
    pointer = pd.DataFrame(
        [{
            "x": dimensions.center_x,
            "y": dimensions.center_y,
            "x2": dimensions.center_x,
            "y2": dimensions.center_y - dimensions.outer_radius,
        }]
    )
    pointer_rule = (
        alt.Chart(pointer)
        .mark_rule(color=STROKE, strokeWidth=3, strokeCap="round")
        .encode(x=x, y=y, x2=alt.X2("x2"), y2=alt.Y2("y2"))
    )
    hub = (
        alt.Chart(center)
        .mark_circle(size=_disc_size(HUB_FILL_RATIO * dimensions.hub_radius), color=STROKE, opacity=1)
        .encode(x=x, y=y)
    )
    hub_label = (
        alt.Chart(center)
        .mark_text(fontSize=18, fontWeight="bold", color="white", align="center", baseline="middle")
        .encode(x=x, y=y, text="label:N")
    )
    tip = pd.DataFrame([{"x": dimensions.center_x, "y": dimensions.center_y - dimensions.outer_radius}])
    pointer_tip = (
        alt.Chart(tip)
        .mark_circle(size=_disc_size(POINTER_TIP_RATIO * dimensions.outer_radius), color=STROKE, opacity=1)
        .encode(x=x, y=y)
    )

    return (
        alt.layer(
            outlines,
            connectors,
            pointer_rule,
            outer_discs,
            inner_discs,
            outer_labels,
            inner_labels,
            hub,
            hub_label,
            pointer_tip,
        )
        .properties(width=dimensions.view_size, height=dimensions.view_size)
        .configure_view(strokeWidth=0)
    )
