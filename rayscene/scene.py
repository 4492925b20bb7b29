"""Scene container and transform stack.

Scene.objects is the scene graph: an ordered list of shapes in which
TransformBegin/TransformEnd markers delimit nested transform scopes. The
transform stack records the list index of every open TransformBegin, so
translate/scale/rotate always edit the innermost open scope.

Usage:
    scene = Scene()
    scene.push()
    scene.translate(1, 2, 3)
    scene.add_object(Sphere(radius=10))
    scene.pop()
    # scene.objects == [TransformBegin(translate=(1, 2, 3)), sphere, TransformEnd()]

Objects are tracked by identity: adding the same instance twice is a no-op,
and remove_object() removes that exact instance.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from rayscene.camera import CameraDOF, CameraPinhole
from rayscene.lights import Light
from rayscene.shapes import Shape, TransformBegin, TransformEnd

log = logging.getLogger(__name__)


def _index_of(items: list, obj) -> int:
    """Index of the first element that *is* obj, or -1."""
    for i, item in enumerate(items):
        if item is obj:
            return i
    return -1


@dataclass
class Scene:
    """The scene to be rendered.

    Attributes:
        camera: Pinhole or depth-of-field camera
        objects: Shapes and transform markers, in render order
        lights: Light sources, in declaration order
        backplate_image: Optional background image path ("" = none)
    """

    camera: CameraPinhole | CameraDOF = field(default_factory=CameraPinhole)
    objects: list[Shape] = field(default_factory=list)
    lights: list[Light] = field(default_factory=list)
    backplate_image: str = ""
    _stack: list[int] = field(default_factory=list, init=False, repr=False)

    @property
    def transform_stack(self) -> tuple[int, ...]:
        """Indices into objects of the open TransformBegin markers, innermost last."""
        return tuple(self._stack)

    # -----------------------------------------------------------------------
    # Objects
    # -----------------------------------------------------------------------

    def add_object(self, obj: Shape) -> None:
        """Append obj unless this exact instance is already in the scene."""
        if _index_of(self.objects, obj) >= 0:
            return
        self.objects.append(obj)

    def remove_object(self, obj: Shape) -> None:
        """Remove obj and shift open-scope indices that pointed past it.

        Removing an open TransformBegin discards its scope from the stack.
        """
        index = _index_of(self.objects, obj)
        if index < 0:
            log.debug("remove_object: %s not in scene", type(obj).__name__)
            return
        del self.objects[index]
        self._stack = [i - 1 if i > index else i for i in self._stack if i != index]

    def add_light(self, light: Light) -> None:
        """Append a light unless this exact instance is already present."""
        if _index_of(self.lights, light) >= 0:
            return
        self.lights.append(light)

    # -----------------------------------------------------------------------
    # Transform stack
    # -----------------------------------------------------------------------

    def push(self) -> None:
        """Open a new transform scope."""
        self._stack.append(len(self.objects))
        self.objects.append(TransformBegin())

    def pop(self) -> None:
        """Close the innermost transform scope. No-op if none is open."""
        if not self._stack:
            return
        self._stack.pop()
        self.objects.append(TransformEnd())

    def _current(self) -> TransformBegin | None:
        if not self._stack:
            return None
        index = self._stack[-1]
        # objects is a public list and may have been edited directly
        if index >= len(self.objects):
            return None
        marker = self.objects[index]
        if not isinstance(marker, TransformBegin):
            return None
        return marker

    def translate(self, x: float, y: float, z: float) -> None:
        marker = self._current()
        if marker is not None:
            marker.translate = (x, y, z)

    def scale(self, x: float, y: float, z: float) -> None:
        marker = self._current()
        if marker is not None:
            marker.scale = (x, y, z)

    def rotate(self, x: float, y: float, z: float) -> None:
        marker = self._current()
        if marker is not None:
            marker.rotate = (x, y, z)

    def rotate_axis(self, angle: float, axis: tuple[float, float, float]) -> None:
        """Rotate the current scope by angle about an arbitrary axis."""
        marker = self._current()
        if marker is not None:
            marker.rotate_axis = (angle, tuple(axis))
