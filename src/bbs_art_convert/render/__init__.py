"""Renderer registry and the result contract renderers return."""

from bbs_art_convert.render.registry import (
    ENTRY_POINT_GROUP,
    Renderer,
    RendererRegistry,
    RenderResult,
)

__all__ = ["ENTRY_POINT_GROUP", "Renderer", "RendererRegistry", "RenderResult"]
