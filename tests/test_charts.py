"""Tests for the Altair wheel chart."""
import json
import math

import altair as alt
import pytest

from cipher_core.alphabet import LETTER_COUNT, Mode
from cipher_core.charts import to_vega_spec, wheel_chart


def _layer_data(spec, index):
    """Rows of the dataset backing one layer of a top-level layered spec."""
    layer = spec["layer"][index]
    name = layer["data"]["name"]
    return spec["datasets"][name]


class TestWheelChart:
    def test_is_layer_chart(self):
        assert isinstance(wheel_chart(3, Mode.ENCRYPT), alt.LayerChart)

    def test_spec_is_json_serializable(self):
        spec = to_vega_spec(wheel_chart(3, Mode.ENCRYPT))
        assert json.loads(json.dumps(spec))["layer"]

    def test_layers(self):
        spec = to_vega_spec(wheel_chart(3, Mode.ENCRYPT))
        marks = [layer["mark"]["type"] for layer in spec["layer"]]
        assert marks == ["line", "rule", "rule", "circle", "circle", "text", "text", "circle", "text", "circle"]

    def test_connector_layer_has_26_rows(self, every_mode):
        spec = to_vega_spec(wheel_chart(0, every_mode))
        assert len(_layer_data(spec, 1)) == LETTER_COUNT

    def test_hub_label_shows_normalized_shift(self):
        spec = to_vega_spec(wheel_chart(29, Mode.ENCRYPT))
        assert _layer_data(spec, 8) == [{"x": 250.0, "y": 250.0, "label": "3"}]

    def test_y_scale_is_reversed(self):
        """Screen coordinates put index 0 at the top of the chart."""
        spec = to_vega_spec(wheel_chart(0, Mode.ENCRYPT))
        y = spec["layer"][1]["encoding"]["y"]
        assert y["scale"]["reverse"] is True
        assert y["scale"]["domain"] == [0, 500.0]

    def test_pointer_tip_at_top_of_outer_ring(self, dims):
        """The rotation indicator ends in a filled tip over letter index 0."""
        spec = to_vega_spec(wheel_chart(3, Mode.ENCRYPT, dims))
        tip = spec["layer"][9]
        assert tip["mark"]["type"] == "circle"
        assert _layer_data(spec, 9) == [{"x": dims.center_x, "y": dims.center_y - dims.outer_radius}]
        assert tip["mark"]["size"] == pytest.approx(math.pi * 8 ** 2)


class TestMarkSizes:
    def test_default_sizes_match_pixel_radii(self):
        """Default wheel: outer discs r=16, inner discs r=14, filled hub r=35."""
        spec = to_vega_spec(wheel_chart(0, Mode.ENCRYPT))
        sizes = [spec["layer"][i]["mark"]["size"] for i in (3, 4, 7)]
        assert sizes == pytest.approx([math.pi * 16 ** 2, math.pi * 14 ** 2, math.pi * 35 ** 2])

    def test_sizes_follow_dimensions(self, dims, small_dims):
        """A smaller wheel gets smaller discs and a hub scaled to hub_radius."""
        default = to_vega_spec(wheel_chart(0, Mode.ENCRYPT, dims))
        small = to_vega_spec(wheel_chart(0, Mode.ENCRYPT, small_dims))
        for i in (3, 4, 9):
            assert small["layer"][i]["mark"]["size"] < default["layer"][i]["mark"]["size"]
        assert small["layer"][7]["mark"]["size"] == pytest.approx(math.pi * (0.7 * small_dims.hub_radius) ** 2)
