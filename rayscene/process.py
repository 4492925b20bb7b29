"""Encode a whole scene into its markup and script artifacts."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from rayscene.errors import SceneError
from rayscene.markup import write_markup
from rayscene.scene import Scene
from rayscene.script import write_script

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessedScene:
    """The two renderer inputs produced from one scene."""

    markup: str
    script: str


def process(scene: Scene) -> ProcessedScene:
    """Walk the scene once and produce its markup and script.

    The scene is only read, so processing an unchanged scene again yields
    identical output. Raises SceneError on the first invalid object; nothing
    is returned in that case.
    """
    if not scene.objects:
        raise SceneError.scene_empty()

    markup = write_markup(scene.objects)
    script = write_script(scene)
    log.debug(
        "Processed scene: %d objects, %d lights", len(scene.objects), len(scene.lights)
    )
    return ProcessedScene(markup=markup, script=script)
