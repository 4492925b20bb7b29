"""Write renderer input files for a demo scene: a field of moving spheres.

Usage:
    python -m rayscene.demo --out build/demo                # 30x30 spheres
    python -m rayscene.demo --out build/demo --seed 7       # different layout
    python -m rayscene.demo --out build/demo --nx 4 --ny 4  # small grid
    python -m rayscene.demo --out build/demo --preview      # low-res debug renderer
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys

import numpy as np

from rayscene.camera import CameraDOF
from rayscene.config import RenderOptions
from rayscene.lights import AmbientLight, QuadLight
from rayscene.materials import (
    Material,
    MaterialBrushedMetal,
    MaterialDielectric,
    MaterialPlastic,
)
from rayscene.render_files import write_scene_files
from rayscene.scene import Scene
from rayscene.shapes import Sphere

log = logging.getLogger(__name__)

# Materials are cycled across the grid
PALETTE: tuple[Material, ...] = (
    MaterialDielectric(),
    MaterialBrushedMetal(),
    MaterialPlastic(pigment_color=(0.0, 0.0, 1.0)),
    MaterialPlastic(pigment_color=(1.0, 0.0, 1.0)),
)


def sphere_grid(
    nx: int = 30,
    ny: int = 30,
    size: float = 3000.0,
    seed: int | None = None,
) -> Scene:
    """A size x size grid of spheres at random heights with vertical motion.

    Args:
        nx, ny: Grid resolution (both >= 2)
        size: Edge length of the grid in scene units
        seed: RNG seed, None for a random layout

    Returns:
        Scene with a DOF camera, a quad area light and an ambient light
    """
    if nx < 2 or ny < 2:
        raise ValueError(f"Grid needs at least 2x2 spheres, got {nx}x{ny}")

    rng = np.random.default_rng(seed)
    scene = Scene(camera=CameraDOF(position=(400.0, 400.0, 400.0), radius=10.0))

    for i in range(ny):
        for j in range(nx):
            sphere = Sphere(
                position=(
                    float((-0.5 + i / (nx - 1)) * size),
                    float((-1 + rng.random() * 2) * size),
                    float((-0.5 + j / (ny - 1)) * size),
                ),
                motion=(0.0, float(rng.random() * 10), 0.0),
                radius=float(100 + rng.random() * 40),
                material=dataclasses.replace(PALETTE[(i + j * ny) % len(PALETTE)]),
            )
            scene.add_object(sphere)

    scene.add_light(
        QuadLight(
            position=(213.0, 548.77, 227.0),
            edge1=(130.0, 0.0, 0.0),
            edge2=(0.0, 0.0, 105.0),
            intensity=(50.0, 50.0, 50.0),
        )
    )
    scene.add_light(AmbientLight(intensity=(0.5, 0.5, 0.5)))
    return scene


def _setup_logging(verbose: bool) -> None:
    """Configure the root logger for command-line use."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m rayscene.demo",
        description="Write scene.xml and scene.ecs for the sphere grid demo",
    )
    parser.add_argument("--out", required=True, help="Output directory")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed")
    parser.add_argument("--nx", type=int, default=30, help="Spheres along X")
    parser.add_argument("--ny", type=int, default=30, help="Spheres along Z")
    parser.add_argument("--size", type=float, default=3000.0, help="Grid edge length")
    parser.add_argument("--image", default=None, help="Render to this image path")
    parser.add_argument(
        "--preview", action="store_true", help="Low resolution, debug renderer"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    _setup_logging(args.verbose)

    options = RenderOptions.for_preview() if args.preview else RenderOptions()
    options.output_path = args.image

    scene = sphere_grid(nx=args.nx, ny=args.ny, size=args.size, seed=args.seed)
    log.info("Built demo scene with %d spheres", len(scene.objects))
    write_scene_files(scene, args.out, options)
    return 0


if __name__ == "__main__":
    sys.exit(main())
