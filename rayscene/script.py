"""Directive script emitter: camera and lights as renderer command lines.

One directive per line, "-flag value value ...". Camera directives come
first, then lights in declaration order, except that ambient and point
lights always trail every other light line:

    -vp 300 300 300
    -vi 0 0 0
    -vu 0 1 0
    -angle 64
    -quadlight 213 548.77 227 130 0 0 0 0 105 50 50 50
    -ambientlight 0.5 0.5 0.5
"""

from __future__ import annotations

import numpy as np

from rayscene.lights import DEFERRED_LIGHTS, light_flag, light_values


def _format_arg(value) -> str:
    if isinstance(value, np.ndarray):
        value = value.ravel().tolist()
    if isinstance(value, (list, tuple)):
        return " ".join(_format_arg(v) for v in value)
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, str):
        # Paths with whitespace would split into several arguments
        return f'"{value}"' if any(c.isspace() for c in value) else value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def add_arg(flag: str, *values) -> str:
    """Format one directive line.

    A single boolean value emits the bare flag when true and nothing when
    false. With no values at all nothing is emitted.
    """
    if not values:
        return ""
    if len(values) == 1 and isinstance(values[0], bool):
        return f"{flag}\n" if values[0] else ""
    return " ".join([flag, *(_format_arg(v) for v in values)]) + "\n"


def write_camera(camera) -> str:
    lines = (
        add_arg("-vp", camera.position)
        + add_arg("-vi", camera.target)
        + add_arg("-vu", camera.up)
        + add_arg("-angle", camera.fov)
    )
    radius = getattr(camera, "radius", 0)
    if radius:
        lines += add_arg("-radius", radius)
    return lines


def write_lights(lights) -> str:
    leading, trailing = [], []
    for light in lights:
        line = add_arg(light_flag(light), light_values(light))
        if isinstance(light, DEFERRED_LIGHTS):
            trailing.append(line)
        else:
            leading.append(line)
    return "".join(leading + trailing)


def write_script(scene) -> str:
    """Camera, backplate and light directives for a scene."""
    script = write_camera(scene.camera)
    if scene.backplate_image:
        script += add_arg("-backplate", scene.backplate_image)
    return script + write_lights(scene.lights)
