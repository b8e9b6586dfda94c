from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict

from cipher_core.charts import to_vega_spec, wheel_chart
from cipher_core.geometry import compute_mapping, produce_connectors
from cipher_core.settings import WheelState
from cipher_core.tables import alphabet_table, describe_mapping
from cipher_core.transform import transform


def compute_wheel(state: WheelState) -> Dict[str, Any]:
    shift, mode, dims = state.shift, state.mode, state.dimensions
    return {
        "state": asdict(state),
        "output_text": transform(state.text, shift, mode),
        "mapping": [asdict(p) for p in compute_mapping(shift, mode)],
        "connectors": [asdict(c) for c in produce_connectors(shift, mode, dims)],
        "alphabet_table": alphabet_table(shift, mode).to_dict(orient="records"),
        "description": describe_mapping(shift, mode),
        "charts": {"wheel": to_vega_spec(wheel_chart(shift, mode, dims))},
    }
