"""Camera models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CameraPinhole:
    """Pinhole camera.

    Attributes:
        position: Eye position
        target: Point the camera looks at
        up: Up vector
        fov: Field of view in degrees
    """

    position: tuple[float, float, float] = (300.0, 300.0, 300.0)
    target: tuple[float, float, float] = (0.0, 0.0, 0.0)
    up: tuple[float, float, float] = (0.0, 1.0, 0.0)
    fov: float = 64.0


@dataclass
class CameraDOF(CameraPinhole):
    """Thin-lens camera with depth of field.

    Attributes:
        radius: Lens radius, 0 = pinhole behavior
        focal_distance: Distance of the focal plane
    """

    radius: float = 0.0
    focal_distance: float = 100.0
