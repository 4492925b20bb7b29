"""Shape entities placed in a scene.

Disk, Sphere and TriangleMesh are geometric primitives, each owning exactly
one material (a fresh MaterialBrushedMetal unless given). TransformBegin and
TransformEnd are structural markers: a matched pair wraps the shapes between
them in a nested coordinate transform. Markers never carry a material.

Shapes compare by identity (eq=False). A scene holds shape references, and
two distinct spheres with equal fields are still two objects.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from rayscene.materials import Material, MaterialBrushedMetal


@dataclass(eq=False)
class Shape:
    """Base class for everything that can sit in Scene.objects."""


@dataclass(eq=False)
class Disk(Shape):
    """Triangulated disk.

    Attributes:
        position: Center of the disk
        height: Height of the cone (0 = flat disk)
        radius: Radius of the disk, must be > 0
        num_triangles: Triangulation amount, must be > 0
        material: Surface material
    """

    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    height: float = 0.0
    radius: float = 50.0
    num_triangles: int = 50
    material: Material = field(default_factory=MaterialBrushedMetal)


@dataclass(eq=False)
class Sphere(Shape):
    """Triangulated sphere with optional linear motion (for motion blur).

    Attributes:
        position: Center of the sphere
        motion: Displacement over the shutter interval, (0, 0, 0) = static
        radius: Radius; a sphere with radius <= 0 is not rendered
        num_theta: Triangulation amount from north to south pole
        num_phi: Triangulation amount around the sphere
        material: Surface material
    """

    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    motion: tuple[float, float, float] = (0.0, 0.0, 0.0)
    radius: float = 100.0
    num_theta: int = 50
    num_phi: int = 50
    material: Material = field(default_factory=MaterialBrushedMetal)


@dataclass(eq=False)
class TriangleMesh(Shape):
    """Indexed triangle mesh with optional per-vertex data.

    motions, normals and texcoords may be None (absent). When present they
    must have as many entries as positions.
    """

    positions: np.ndarray | None = None
    motions: np.ndarray | None = None
    normals: np.ndarray | None = None
    texcoords: np.ndarray | None = None
    indices: np.ndarray | None = None
    material: Material = field(default_factory=MaterialBrushedMetal)

    def __post_init__(self):
        for name in ("positions", "motions", "normals", "texcoords"):
            value = getattr(self, name)
            if value is not None:
                setattr(self, name, np.asarray(value, dtype=np.float64))
        if self.indices is not None:
            self.indices = np.asarray(self.indices, dtype=np.int64)


@dataclass(eq=False)
class TransformBegin(Shape):
    """Opens a transform scope. Unset (None) fields are not written.

    Attributes:
        translate: (x, y, z) offset
        scale: (x, y, z) scale factors
        rotate: (x, y, z) rotation angles
        rotate_axis: (angle, (x, y, z)) rotation about an arbitrary axis
    """

    translate: tuple[float, float, float] | None = None
    scale: tuple[float, float, float] | None = None
    rotate: tuple[float, float, float] | None = None
    rotate_axis: tuple[float, tuple[float, float, float]] | None = None


@dataclass(eq=False)
class TransformEnd(Shape):
    """Closes the innermost open transform scope."""
