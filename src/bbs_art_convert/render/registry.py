"""
Renderer lookup.

Pixel rendering lives outside this package. A renderer is any callable
taking the content buffer and resolved options, writing the image(s) named
by ``options.outputs`` and returning a RenderResult. Renderers are either
registered explicitly or discovered from installed plugins that advertise
them under the ``bbs_art_convert.renderers`` entry point group, one entry
point per format value (``ansi``, ``binary``, ...).
"""

import logging
from dataclasses import dataclass
from importlib.metadata import entry_points
from typing import Callable, Iterable, Mapping

from bbs_art_convert.core.content import ContentBuffer
from bbs_art_convert.core.formats import FormatIdentity
from bbs_art_convert.core.options import ConversionOptions
from bbs_art_convert.errors import RendererUnavailableError

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "bbs_art_convert.renderers"


@dataclass(frozen=True)
class RenderResult:
    """What a renderer reports back."""
    ok: bool = True
    message: str = ""

    @classmethod
    def failed(cls, message: str) -> "RenderResult":
        return cls(ok=False, message=message)


Renderer = Callable[[ContentBuffer, ConversionOptions], RenderResult]


class RendererRegistry:
    """Maps each FormatIdentity to the renderer that handles it."""

    def __init__(self, renderers: Mapping[FormatIdentity, Renderer] | None = None):
        self._renderers: dict[FormatIdentity, Renderer] = dict(renderers or {})

    @classmethod
    def from_entry_points(cls, group: str = ENTRY_POINT_GROUP) -> "RendererRegistry":
        """Load every installed renderer plugin for known formats."""
        registry = cls()
        for ep in entry_points(group=group):
            try:
                fmt = FormatIdentity(ep.name.lower())
            except ValueError:
                logger.warning("Ignoring renderer %r: not a known format", ep.name)
                continue
            try:
                renderer = ep.load()
            except Exception as e:
                logger.warning("Skipping %s renderer %s: %s", fmt.value, ep.value, e)
                continue
            registry.register(fmt, renderer)
            logger.debug("Loaded %s renderer from %s", fmt.value, ep.value)
        return registry

    def register(self, fmt: FormatIdentity, renderer: Renderer) -> None:
        self._renderers[fmt] = renderer

    def get(self, fmt: FormatIdentity) -> Renderer:
        try:
            return self._renderers[fmt]
        except KeyError:
            raise RendererUnavailableError(fmt.name) from None

    def __contains__(self, fmt: object) -> bool:
        return fmt in self._renderers

    @property
    def formats(self) -> Iterable[FormatIdentity]:
        return tuple(f for f in FormatIdentity if f in self._renderers)
