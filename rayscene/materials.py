"""Surface materials and the material parameter packer.

Each material variant is a dataclass. Its parameters are declared once, with
their wire kind and wire name, in the dataclass field metadata:

    @dataclass
    class MaterialMirror(Material):
        reflectance: tuple[float, float, float] = param(WireKind.FLOAT3, (1.0, 1.0, 1.0))

pack_material() reads that declaration to produce the generic
{code, parameters} record the markup serializer writes out. The material
code is the class name without its "Material" prefix (MaterialMirror -> Mirror).

Wire names follow the renderer's camelCase parameter names, so Python fields
that differ (pigment_color -> pigmentColor) pass the wire name explicitly.
"""

from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass, field, fields
from enum import Enum
from pathlib import Path

from rayscene.errors import SceneError

log = logging.getLogger(__name__)

ASSETS_DIR = Path(__file__).resolve().parent / "assets"
DEFAULT_TEXTURE = str(ASSETS_DIR / "uvgrid.ppm")


class WireKind(Enum):
    """Typed parameter category used when packing a material field."""

    FLOAT = "float"
    FLOAT2 = "float2"
    FLOAT3 = "float3"
    FLOAT4 = "float4"
    TEXTURE = "texture"


_VECTOR_KINDS = {
    2: WireKind.FLOAT2,
    3: WireKind.FLOAT3,
    4: WireKind.FLOAT4,
}


def param(kind: WireKind, default, name: str | None = None):
    """Declare a material parameter field with its wire kind and wire name."""
    return field(default=default, metadata={"wire": kind, "name": name})


def wire_kind_of(value) -> WireKind | None:
    """Infer the wire kind a runtime value is shaped like, or None."""
    if isinstance(value, str):
        return WireKind.TEXTURE
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Real):
        return WireKind.FLOAT
    try:
        n = len(value)
    except TypeError:
        return None
    if n == 1 and isinstance(value[0], str):
        return WireKind.TEXTURE
    return _VECTOR_KINDS.get(n)


# ---------------------------------------------------------------------------
# Material variants
# ---------------------------------------------------------------------------


@dataclass
class Material:
    """Base class for all material variants."""


@dataclass
class MaterialMatte(Material):
    """Diffuse material. Reflectance ranges from 0 (black) to 1 (white)."""

    reflectance: tuple[float, float, float] = param(WireKind.FLOAT3, (1.0, 1.0, 1.0))


@dataclass
class MaterialPlastic(Material):
    """Dielectric layer over a diffuse surface.

    Attributes:
        pigment_color: Color of the diffuse layer
        eta: Refraction index of the dielectric layer
        roughness: 0 (specular) to 1 (diffuse)
    """

    pigment_color: tuple[float, float, float] = param(
        WireKind.FLOAT3, (1.0, 1.0, 1.0), "pigmentColor"
    )
    eta: float = param(WireKind.FLOAT, 1.4)
    roughness: float = param(WireKind.FLOAT, 0.01)


@dataclass
class MaterialDielectric(Material):
    """Dielectric such as glass.

    Attributes:
        eta_outside: Refraction index on the outside of the surface
        eta_inside: Refraction index on the inside of the surface
        transmission_outside: Transmission for the inside-to-outside transition
        transmission: Transmission for the outside-to-inside transition
    """

    eta_outside: float = param(WireKind.FLOAT, 1.0, "etaOutside")
    eta_inside: float = param(WireKind.FLOAT, 1.4, "etaInside")
    transmission_outside: tuple[float, float, float, float] = param(
        WireKind.FLOAT4, (1.0, 1.0, 1.0, 1.0), "transmissionOutside"
    )
    transmission: tuple[float, float, float, float] = param(
        WireKind.FLOAT4, (1.0, 1.0, 1.0, 1.0)
    )


@dataclass
class MaterialThinDielectric(Material):
    """Thin dielectric sheet: dielectric reflection plus thin-layer transmission."""

    transmission: tuple[float, float, float] = param(WireKind.FLOAT3, (1.0, 1.0, 1.0))
    eta: float = param(WireKind.FLOAT, 1.4)
    thickness: float = param(WireKind.FLOAT, 0.1)


@dataclass
class MaterialMirror(Material):
    """Perfect mirror; reflected light is modulated by reflectance."""

    reflectance: tuple[float, float, float] = param(WireKind.FLOAT3, (1.0, 1.0, 1.0))


@dataclass
class MaterialMetal(Material):
    """Rough metal: microfacet BRDF with a conductor fresnel term.

    Attributes:
        shade_color: Reflectivity of the metal
        eta: Real part of the refraction index
        k: Imaginary part of the refraction index
        roughness: 0 (specular) to 1 (diffuse)
    """

    shade_color: tuple[float, float, float] = param(
        WireKind.FLOAT3, (1.0, 1.0, 1.0), "shadeColor"
    )
    eta: tuple[float, float, float] = param(WireKind.FLOAT3, (1.4, 1.4, 1.4))
    k: tuple[float, float, float] = param(WireKind.FLOAT3, (0.0, 0.0, 0.0))
    roughness: float = param(WireKind.FLOAT, 0.01)


@dataclass
class MaterialBrushedMetal(Material):
    """Anisotropic metal with separate roughness along X and Y."""

    reflectance: tuple[float, float, float] = param(WireKind.FLOAT3, (1.0, 1.0, 1.0))
    eta: tuple[float, float, float] = param(WireKind.FLOAT3, (1.4, 1.4, 1.4))
    k: tuple[float, float, float] = param(WireKind.FLOAT3, (0.0, 0.0, 0.0))
    roughness_x: float = param(WireKind.FLOAT, 0.01, "roughnessX")
    roughness_y: float = param(WireKind.FLOAT, 0.01, "roughnessY")


@dataclass
class MaterialMetallicPaint(Material):
    """Car paint: dielectric coat over a diffuse base with metallic glitter."""

    shade_color: tuple[float, float, float] = param(
        WireKind.FLOAT3, (1.0, 1.0, 1.0), "shadeColor"
    )
    glitter_color: tuple[float, float, float] = param(
        WireKind.FLOAT3, (0.0, 0.0, 0.0), "glitterColor"
    )
    glitter_spread: float = param(WireKind.FLOAT, 1.0, "glitterSpread")
    eta: float = param(WireKind.FLOAT, 1.4)


@dataclass
class MaterialMatteTextured(Material):
    """Diffuse material with a texture map.

    Attributes:
        offset: Texture coordinate offset
        scale: Texture coordinate scale
        texture: Path of the image mapped onto the surface
    """

    offset: tuple[float, float] = param(WireKind.FLOAT2, (0.0, 0.0), "s0")
    scale: tuple[float, float] = param(WireKind.FLOAT2, (1.0, 1.0), "ds")
    texture: str = param(WireKind.TEXTURE, DEFAULT_TEXTURE, "Kd")


@dataclass
class MaterialVelvet(Material):
    """Velvet with back and horizon scattering."""

    reflectance: tuple[float, float, float] = param(WireKind.FLOAT3, (1.0, 1.0, 1.0))
    back_scattering: float = param(WireKind.FLOAT, 0.0, "backScattering")
    horizon_scattering_color: tuple[float, float, float] = param(
        WireKind.FLOAT3, (1.0, 1.0, 1.0), "horizonScatteringColor"
    )
    horizon_scattering_fall_off: float = param(
        WireKind.FLOAT, 0.0, "horizonScatteringFallOff"
    )


MATERIALS: dict[str, type[Material]] = {
    cls.__name__.removeprefix("Material"): cls
    for cls in (
        MaterialMatte,
        MaterialPlastic,
        MaterialDielectric,
        MaterialThinDielectric,
        MaterialMirror,
        MaterialMetal,
        MaterialBrushedMetal,
        MaterialMetallicPaint,
        MaterialMatteTextured,
        MaterialVelvet,
    )
}

_CODES = {cls: code for code, cls in MATERIALS.items()}


# ---------------------------------------------------------------------------
# Packer
# ---------------------------------------------------------------------------


def pack_material(material: Material) -> dict:
    """Pack a material into a {code, parameters} record for markup emission.

    Each parameter is a one-entry dict {wire_kind: {"name": ..., "value": ...}}.
    Fields whose runtime value does not have the shape of their declared
    wire kind are left out.
    """
    code = next((_CODES[c] for c in type(material).__mro__ if c in _CODES), None)
    if code is None:
        raise SceneError.material_invalid(type(material).__name__)

    params = []
    for f in fields(material):
        kind = f.metadata.get("wire")
        if kind is None:
            continue
        name = f.metadata.get("name") or f.name
        value = getattr(material, f.name)
        if wire_kind_of(value) != kind:
            log.debug("Skipping %s.%s: %r is not a %s", code, name, value, kind.value)
            continue
        if kind == WireKind.TEXTURE and not isinstance(value, str):
            value = value[0]
        params.append({kind.value: {"name": name, "value": value}})

    return {"code": code, "parameters": params}
