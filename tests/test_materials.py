"""Tests for material variants and the parameter packer."""

import dataclasses
from pathlib import Path

import numpy as np
import pytest

from rayscene import ErrorKind, SceneError, pack_material
from rayscene.materials import (
    MATERIALS,
    MaterialBrushedMetal,
    MaterialDielectric,
    MaterialMatte,
    MaterialMatteTextured,
    MaterialPlastic,
    WireKind,
    wire_kind_of,
)


class TestRegistry:
    @pytest.fixture(params=sorted(MATERIALS))
    def code(self, request):
        return request.param

    def test_code_is_class_name_without_prefix(self, code):
        assert MATERIALS[code].__name__ == f"Material{code}"

    def test_default_packs_every_field(self, code):
        material = MATERIALS[code]()
        packed = pack_material(material)
        assert packed["code"] == code
        assert len(packed["parameters"]) == len(dataclasses.fields(material))

    def test_ten_variants(self):
        assert len(MATERIALS) == 10


class TestWireKind:
    @pytest.mark.parametrize(
        "value, kind",
        [
            (0.5, WireKind.FLOAT),
            (3, WireKind.FLOAT),
            ((1, 2), WireKind.FLOAT2),
            ([1, 2, 3], WireKind.FLOAT3),
            (np.ones(4), WireKind.FLOAT4),
            ("tex.png", WireKind.TEXTURE),
            (["tex.png"], WireKind.TEXTURE),
            (True, None),
            ((1, 2, 3, 4, 5), None),
            ([1.0], None),
            (None, None),
        ],
    )
    def test_shapes(self, value, kind):
        assert wire_kind_of(value) == kind


class TestPackMaterial:
    def test_float3_parameter_named_after_field(self):
        packed = pack_material(MaterialMatte(reflectance=(0.2, 0.4, 0.6)))
        assert packed == {
            "code": "Matte",
            "parameters": [
                {"float3": {"name": "reflectance", "value": (0.2, 0.4, 0.6)}},
            ],
        }

    def test_field_order_and_wire_names(self):
        packed = pack_material(MaterialPlastic(pigment_color=(0, 0, 1)))
        assert packed["code"] == "Plastic"
        assert packed["parameters"] == [
            {"float3": {"name": "pigmentColor", "value": (0, 0, 1)}},
            {"float": {"name": "eta", "value": 1.4}},
            {"float": {"name": "roughness", "value": 0.01}},
        ]

    def test_float4(self):
        packed = pack_material(MaterialDielectric())
        kinds = [next(iter(p)) for p in packed["parameters"]]
        assert kinds == ["float", "float", "float4", "float4"]

    def test_texture(self):
        packed = pack_material(MaterialMatteTextured(texture="wood.jpg"))
        assert packed["parameters"] == [
            {"float2": {"name": "s0", "value": (0.0, 0.0)}},
            {"float2": {"name": "ds", "value": (1.0, 1.0)}},
            {"texture": {"name": "Kd", "value": "wood.jpg"}},
        ]

    def test_default_texture_is_shipped(self):
        texture = Path(MaterialMatteTextured().texture)
        assert texture.is_file(), f"missing bundled texture {texture}"
        assert texture.read_bytes().startswith(b"P3")

    def test_single_element_texture_list_unwrapped(self):
        packed = pack_material(MaterialMatteTextured(texture=["wood.jpg"]))
        assert packed["parameters"][-1] == {"texture": {"name": "Kd", "value": "wood.jpg"}}

    def test_mis_shaped_field_is_omitted(self):
        packed = pack_material(MaterialBrushedMetal(eta=(1.0, 2.0, 3.0, 4.0, 5.0)))
        names = [next(iter(p.values()))["name"] for p in packed["parameters"]]
        assert "eta" not in names
        assert names == ["reflectance", "k", "roughnessX", "roughnessY"]

    def test_bool_is_not_a_float(self):
        packed = pack_material(MaterialPlastic(eta=True))
        names = [next(iter(p.values()))["name"] for p in packed["parameters"]]
        assert names == ["pigmentColor", "roughness"]

    def test_subclass_packs_as_its_variant(self):
        @dataclasses.dataclass
        class Chalk(MaterialMatte):
            pass

        assert pack_material(Chalk())["code"] == "Matte"

    def test_unknown_material_raises(self):
        class Gold:
            pass

        with pytest.raises(SceneError) as exc:
            pack_material(Gold())
        assert exc.value.kind == ErrorKind.MATERIAL_INVALID
        assert "Gold" in str(exc.value)
