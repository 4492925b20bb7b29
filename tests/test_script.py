"""Tests for the directive script emitter and the process entry point."""

import numpy as np
import pytest

from rayscene import (
    AmbientLight,
    CameraDOF,
    DistantLight,
    ErrorKind,
    HDRILight,
    PointLight,
    QuadLight,
    Scene,
    SceneError,
    Sphere,
    TriangleLight,
    process,
)
from rayscene.lights import light_flag, light_values
from rayscene.script import add_arg, write_script


def _scene_with_lights(*lights) -> Scene:
    scene = Scene()
    scene.add_object(Sphere())
    for light in lights:
        scene.add_light(light)
    return scene


def _script_lines(scene):
    return write_script(scene).splitlines()


# ---------------------------------------------------------------------------
# add_arg
# ---------------------------------------------------------------------------


class TestAddArg:
    def test_scalar(self):
        assert add_arg("-angle", 64.0) == "-angle 64\n"

    def test_vector(self):
        assert add_arg("-vp", (1, 2.5, 3)) == "-vp 1 2.5 3\n"

    def test_multiple_values(self):
        assert add_arg("-size", 800, 600) == "-size 800 600\n"

    def test_bool_true_is_bare_flag(self):
        assert add_arg("-fullscreen", True) == "-fullscreen\n"

    def test_bool_false_is_omitted(self):
        assert add_arg("-fullscreen", False) == ""

    def test_no_values(self):
        assert add_arg("-vp") == ""

    def test_large_integral_float_has_no_exponent(self):
        assert add_arg("-seed", 1e20) == "-seed 100000000000000000000\n"

    def test_path_with_spaces_is_quoted(self):
        assert add_arg("-backplate", "my images/sky.png") == '-backplate "my images/sky.png"\n'


# ---------------------------------------------------------------------------
# Camera
# ---------------------------------------------------------------------------


class TestCamera:
    def test_default_pinhole(self):
        script = write_script(Scene())
        assert script == "-vp 300 300 300\n-vi 0 0 0\n-vu 0 1 0\n-angle 64\n"

    def test_dof_radius(self):
        scene = Scene(camera=CameraDOF(radius=10))
        assert _script_lines(scene)[4] == "-radius 10"

    def test_dof_zero_radius_omitted(self):
        scene = Scene(camera=CameraDOF())
        assert not any(line.startswith("-radius") for line in _script_lines(scene))

    def test_backplate(self):
        scene = Scene(backplate_image="sky.png")
        scene.add_light(AmbientLight())
        lines = _script_lines(scene)
        assert lines[4] == "-backplate sky.png"
        assert lines[5] == "-ambientlight 1 1 1"


# ---------------------------------------------------------------------------
# Lights
# ---------------------------------------------------------------------------


class TestLights:
    def test_flags(self):
        assert light_flag(AmbientLight()) == "-ambientlight"
        assert light_flag(HDRILight()) == "-hdrilight"
        assert light_flag(TriangleLight()) == "-trianglelight"

    def test_values_in_declaration_order(self):
        light = DistantLight(direction=(0, -1, 0), intensity=(1, 1, 1), half_angle=2.5)
        assert light_values(light) == [0, -1, 0, 1, 1, 1, 2.5]

    def test_quad_line(self):
        light = QuadLight(
            position=(213, 548.77, 227),
            edge1=(130, 0, 0),
            edge2=(0, 0, 105),
            intensity=(50, 50, 50),
        )
        lines = _script_lines(_scene_with_lights(light))
        assert lines[-1] == "-quadlight 213 548.77 227 130 0 0 0 0 105 50 50 50"

    def test_hdri_line(self):
        lines = _script_lines(_scene_with_lights(HDRILight(intensity=(2, 2, 2), image="env.hdr")))
        assert lines[-1] == "-hdrilight 2 2 2 env.hdr"

    def test_hdri_without_image_has_no_trailing_space(self):
        script = write_script(_scene_with_lights(HDRILight()))
        assert script.endswith("-hdrilight 1 1 1\n")

    def test_numpy_scalar_fields(self):
        light = DistantLight(direction=np.array([0, -1, 0]), half_angle=np.float32(2.5))
        assert light_values(light) == [0, -1, 0, 1, 1, 1, 2.5]
        lines = _script_lines(_scene_with_lights(light))
        assert lines[-1] == "-distantlight 0 -1 0 1 1 1 2.5"

    def test_numpy_integer_intensity(self):
        light = AmbientLight(intensity=(np.int64(2), np.int64(2), np.int64(2)))
        assert _script_lines(_scene_with_lights(light))[-1] == "-ambientlight 2 2 2"

    def test_ambient_and_point_trail_other_lights(self):
        scene = _scene_with_lights(
            AmbientLight((0.5, 0.5, 0.5)),
            QuadLight(),
            PointLight(position=(0, 10, 0)),
            DistantLight(),
        )
        flags = [line.split()[0] for line in _script_lines(scene)[4:]]
        assert flags == ["-quadlight", "-distantlight", "-ambientlight", "-pointlight"]

    def test_lights_follow_camera(self):
        lines = _script_lines(_scene_with_lights(AmbientLight()))
        assert [line.split()[0] for line in lines] == [
            "-vp",
            "-vi",
            "-vu",
            "-angle",
            "-ambientlight",
        ]


# ---------------------------------------------------------------------------
# process
# ---------------------------------------------------------------------------


class TestProcess:
    def test_empty_scene(self):
        with pytest.raises(SceneError) as exc:
            process(Scene())
        assert exc.value.kind == ErrorKind.SCENE_EMPTY

    def test_deterministic(self):
        scene = _scene_with_lights(AmbientLight(), QuadLight())
        scene.push()
        scene.translate(1, 2, 3)
        scene.add_object(Sphere(motion=(0, 1, 0)))
        scene.pop()
        assert process(scene) == process(scene)

    def test_does_not_mutate_scene(self):
        sphere = Sphere(position=(1, 2, 3))
        scene = _scene_with_lights(PointLight())
        scene.add_object(sphere)
        process(scene)
        assert sphere.position == (1, 2, 3)
        assert len(scene.objects) == 2

    def test_invalid_shape_aborts(self):
        scene = _scene_with_lights(AmbientLight())
        scene.add_object(Sphere(num_theta=0))
        with pytest.raises(SceneError):
            process(scene)
