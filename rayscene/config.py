"""
Renderer invocation settings.

Everything appended to the directive script after the scene itself:
canvas size, renderer selection and sampling parameters.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

RENDERER_DEBUG = "debug"
RENDERER_PATHTRACER = "pathtracer"


@dataclass
class RenderOptions:
    """Renderer configuration."""

    width: int = 800
    height: int = 600
    fullscreen: bool = False
    renderer: str = RENDERER_PATHTRACER  # RENDERER_DEBUG or RENDERER_PATHTRACER

    # Acceleration structure used by the renderer
    spatial_index_structure: str = "triangle4"

    gamma: float = 1.0
    depth: int = 16  # Max path depth
    spp: int = 1  # Samples per pixel

    logging: bool = False  # False adds --no-logging
    output_path: str | None = None  # Write the image here (None = display only)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def for_preview(cls) -> RenderOptions:
        """Fast, low-resolution settings for checking a scene layout."""
        return cls(
            width=320,
            height=240,
            renderer=RENDERER_DEBUG,
            depth=4,
            spp=1,
        )
