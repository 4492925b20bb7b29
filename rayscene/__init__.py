"""Scene description for an external raytracing renderer.

Build a scene graph of shapes, materials, lights and a camera, then encode it
into the renderer's two inputs: an XML markup of geometry and materials, and
a directive script of camera, light and renderer settings.

Usage:
    from rayscene import AmbientLight, MaterialMatte, Scene, Sphere, process, write_scene_files

    scene = Scene()
    scene.push()
    scene.translate(0, 100, 0)
    scene.add_object(Sphere(radius=100, material=MaterialMatte((1, 0, 0))))
    scene.pop()
    scene.add_light(AmbientLight((1, 1, 1)))

    out = process(scene)     # out.markup, out.script
    write_scene_files(scene, "build/scene")   # scene.xml + scene.ecs
"""

from rayscene.camera import CameraDOF, CameraPinhole
from rayscene.config import RENDERER_DEBUG, RENDERER_PATHTRACER, RenderOptions
from rayscene.errors import ErrorKind, SceneError
from rayscene.lights import (
    AmbientLight,
    DistantLight,
    HDRILight,
    PointLight,
    QuadLight,
    TriangleLight,
)
from rayscene.materials import (
    MaterialBrushedMetal,
    MaterialDielectric,
    MaterialMatte,
    MaterialMatteTextured,
    MaterialMetal,
    MaterialMetallicPaint,
    MaterialMirror,
    MaterialPlastic,
    MaterialThinDielectric,
    MaterialVelvet,
    pack_material,
)
from rayscene.process import ProcessedScene, process
from rayscene.render_files import compose_script, write_scene_files
from rayscene.scene import Scene
from rayscene.shapes import Disk, Sphere, TransformBegin, TransformEnd, TriangleMesh

__all__ = [
    "Scene",
    "process",
    "ProcessedScene",
    "write_scene_files",
    "compose_script",
    "RenderOptions",
    "RENDERER_DEBUG",
    "RENDERER_PATHTRACER",
    "SceneError",
    "ErrorKind",
    "CameraPinhole",
    "CameraDOF",
    "Disk",
    "Sphere",
    "TriangleMesh",
    "TransformBegin",
    "TransformEnd",
    "AmbientLight",
    "PointLight",
    "DistantLight",
    "TriangleLight",
    "QuadLight",
    "HDRILight",
    "MaterialMatte",
    "MaterialPlastic",
    "MaterialDielectric",
    "MaterialThinDielectric",
    "MaterialMirror",
    "MaterialMetal",
    "MaterialBrushedMetal",
    "MaterialMetallicPaint",
    "MaterialMatteTextured",
    "MaterialVelvet",
    "pack_material",
]
