"""Light sources.

Each light is written to the directive script as a single line:

    -<class name lowercased> <field values in declaration order>

so the field order of every dataclass below is also its wire order, e.g.
PointLight(position=(0, 100, 0), intensity=(1, 1, 1)) becomes
"-pointlight 0 100 0 1 1 1".
"""

from __future__ import annotations

from dataclasses import dataclass, fields

import numpy as np


@dataclass
class Light:
    """Base class for all light variants."""


@dataclass
class AmbientLight(Light):
    intensity: tuple[float, float, float] = (1.0, 1.0, 1.0)


@dataclass
class PointLight(Light):
    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    intensity: tuple[float, float, float] = (1.0, 1.0, 1.0)


@dataclass
class DistantLight(Light):
    """Light from a distant cone of directions (sun-like).

    Attributes:
        direction: Direction the light travels
        intensity: Radiance
        half_angle: Half of the cone's opening angle, in degrees
    """

    direction: tuple[float, float, float] = (0.0, -1.0, 0.0)
    intensity: tuple[float, float, float] = (1.0, 1.0, 1.0)
    half_angle: float = 0.0


@dataclass
class TriangleLight(Light):
    """Triangular area light with a vertex at position spanned by two edges."""

    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    edge1: tuple[float, float, float] = (1.0, 0.0, 0.0)
    edge2: tuple[float, float, float] = (0.0, 0.0, 1.0)
    intensity: tuple[float, float, float] = (1.0, 1.0, 1.0)


@dataclass
class QuadLight(Light):
    """Parallelogram area light with a corner at position spanned by two edges."""

    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    edge1: tuple[float, float, float] = (1.0, 0.0, 0.0)
    edge2: tuple[float, float, float] = (0.0, 0.0, 1.0)
    intensity: tuple[float, float, float] = (1.0, 1.0, 1.0)


@dataclass
class HDRILight(Light):
    """Environment light from a high dynamic range image."""

    intensity: tuple[float, float, float] = (1.0, 1.0, 1.0)
    image: str = ""


# Written after every other light line, regardless of declaration order.
DEFERRED_LIGHTS = (AmbientLight, PointLight)


def light_flag(light: Light) -> str:
    """Directive flag for a light, e.g. '-quadlight'."""
    return "-" + type(light).__name__.lower()


def light_values(light: Light) -> list:
    """Field values in declaration order, vectors flattened.

    Empty strings (an unset image path) are left out.
    """
    values = []
    for f in fields(light):
        value = getattr(light, f.name)
        if isinstance(value, str):
            if value:
                values.append(value)
        elif np.ndim(value) == 0:
            values.append(value.item() if isinstance(value, np.generic) else value)
        else:
            values.extend(np.ravel(value).tolist())
    return values
