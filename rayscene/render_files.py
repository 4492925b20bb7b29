"""Write the renderer's input files for a scene.

The renderer is started elsewhere as `renderer -c <dir>/scene.ecs`. The
script it reads names the markup file via -i and ends with the invocation
options from RenderOptions. Files are written and left in place; removing
them is up to the caller.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rayscene.config import RenderOptions
from rayscene.process import process
from rayscene.scene import Scene
from rayscene.script import add_arg

log = logging.getLogger(__name__)

MARKUP_FILENAME = "scene.xml"
SCRIPT_FILENAME = "scene.ecs"


def compose_script(script: str, options: RenderOptions, markup_path: str | Path) -> str:
    """Wrap a scene script with the markup input and renderer options."""
    return (
        add_arg("-i", str(markup_path))
        + script
        + add_arg("-size", options.width, options.height)
        + add_arg("-renderer", options.renderer)
        + add_arg("-fullscreen", options.fullscreen)
        + add_arg("-accel", options.spatial_index_structure)
        + add_arg("-gamma", options.gamma)
        + add_arg("-depth", options.depth)
        + add_arg("-spp", options.spp)
        + add_arg("--no-logging", not options.logging)
        + (add_arg("-o", str(options.output_path)) if options.output_path else "")
    )


def write_scene_files(
    scene: Scene,
    directory: str | Path,
    options: RenderOptions | None = None,
) -> tuple[Path, Path]:
    """Process a scene and write scene.xml + scene.ecs into directory.

    The scene is fully processed before anything touches the disk, so an
    invalid scene leaves no files behind.

    Returns:
        (markup_path, script_path)
    """
    options = options or RenderOptions()
    processed = process(scene)

    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    markup_path = directory / MARKUP_FILENAME
    script_path = directory / SCRIPT_FILENAME

    markup_path.write_text(processed.markup, encoding="utf-8")
    script_path.write_text(
        compose_script(processed.script, options, markup_path), encoding="utf-8"
    )
    log.info("Wrote %s and %s", markup_path, script_path)
    return markup_path, script_path
