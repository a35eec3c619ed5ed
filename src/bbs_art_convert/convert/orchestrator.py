"""One file conversion, from input path to rendered image(s)."""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from bbs_art_convert.core.content import map_input, resolve_content_length
from bbs_art_convert.core.formats import FormatIdentity
from bbs_art_convert.core.options import ConversionOptions, RawOptions, build_options
from bbs_art_convert.errors import ConvertError, MalformedRecordError, RenderError, RenderFailedError
from bbs_art_convert.render.registry import RendererRegistry, RenderResult
from bbs_art_convert.sauce.reader import ProbeStatus, SauceProbe, probe_sauce
from bbs_art_convert.sauce.record import SauceRecord

logger = logging.getLogger(__name__)


class ConversionState(Enum):
    START = "start"
    RECORD_PROBED = "record_probed"
    DISPLAY_ONLY = "display_only"
    RENDER_PREPARED = "render_prepared"
    DISPATCHED = "dispatched"
    REPORTED = "reported"
    DONE = "done"
    ERROR = "error"


@dataclass(frozen=True)
class ConversionSummary:
    """What happened to one input file."""
    input_path: str
    options: ConversionOptions
    probe: SauceProbe
    display_only: bool = False
    content_length: int | None = None
    render_message: str = ""

    @property
    def format(self) -> FormatIdentity:
        return self.options.format

    @property
    def record(self) -> SauceRecord | None:
        return self.probe.record

    @property
    def rendered(self) -> bool:
        return self.content_length is not None

    def to_dict(self) -> dict:
        data: dict = {"input": self.input_path, "sauce_status": self.probe.status.value}
        if self.rendered:
            opts = self.options
            data.update({
                "format": opts.format.value,
                "output": opts.output,
                "retina_output": opts.retina_output,
                "file_size": self.probe.file_size,
                "content_length": self.content_length,
            })
            if opts.format.reports_font:
                data["font"] = opts.font
                data["bits"] = opts.bits
            if opts.format.supports_icecolors:
                data["icecolors"] = opts.icecolors
            if opts.format.uses_columns:
                data["columns"] = opts.columns
        data["sauce"] = self.record.to_dict() if self.record else None
        return data


Reporter = Callable[[ConversionSummary], None]


class Conversion:
    """
    Drives a single conversion through its states:

        START -> RECORD_PROBED -> DISPLAY_ONLY -> DONE
        START -> RECORD_PROBED -> RENDER_PREPARED -> DISPATCHED -> REPORTED -> DONE

    Any ConvertError moves the conversion to ERROR and is re-raised.
    """

    def __init__(
        self,
        input_path: str,
        raw: RawOptions | None = None,
        registry: RendererRegistry | None = None,
        reporter: Reporter | None = None,
    ):
        self.input_path = str(input_path)
        self.raw = raw or RawOptions()
        self.registry = registry if registry is not None else RendererRegistry()
        self.reporter = reporter
        self.state = ConversionState.START
        self.history: list[ConversionState] = [self.state]

    def _enter(self, state: ConversionState) -> None:
        logger.debug("%s: %s -> %s", self.input_path, self.state.value, state.value)
        self.state = state
        self.history.append(state)

    def run(self) -> ConversionSummary:
        try:
            summary = self._run()
        except ConvertError:
            self._enter(ConversionState.ERROR)
            raise
        self._enter(ConversionState.DONE)
        return summary

    def _run(self) -> ConversionSummary:
        # Options are validated before the file is touched.
        options = build_options(self.input_path, self.raw)

        probe = probe_sauce(self.input_path)
        if probe.status is ProbeStatus.MALFORMED:
            logger.warning("%s: ignoring malformed SAUCE record: %s", self.input_path, probe.reason)
        self._enter(ConversionState.RECORD_PROBED)

        if self.raw.display_only:
            self._enter(ConversionState.DISPLAY_ONLY)
            summary = ConversionSummary(self.input_path, options, probe, display_only=True)
            self._report(summary)
            return summary

        self._enter(ConversionState.RENDER_PREPARED)
        renderer = self.registry.get(options.format)

        with map_input(self.input_path) as mapped:
            try:
                length = resolve_content_length(mapped.file_size, probe.record)
            except MalformedRecordError as e:
                logger.warning("%s: ignoring malformed SAUCE record: %s", self.input_path, e)
                probe = probe.malformed(str(e))
                length = mapped.file_size
            content = mapped.content(length)

            self._enter(ConversionState.DISPATCHED)
            logger.debug("Rendering %s as %s (%d bytes)", self.input_path, options.format.value, length)
            result = self._render(renderer, content, options)

        summary = ConversionSummary(
            self.input_path,
            options,
            probe,
            content_length=length,
            render_message=result.message,
        )
        self._enter(ConversionState.REPORTED)
        self._report(summary)
        return summary

    def _render(self, renderer, content, options: ConversionOptions) -> RenderResult:
        name = options.format.name
        try:
            result = renderer(content, options)
        except RenderError as e:
            raise RenderFailedError(f"{name} renderer failed: {e}") from e
        except Exception as e:
            raise RenderFailedError(f"{name} renderer failed: {type(e).__name__}: {e}") from e

        if not isinstance(result, RenderResult):
            raise RenderFailedError(f"{name} renderer returned no result")
        if not result.ok:
            raise RenderFailedError(f"{name} renderer failed: {result.message or 'unknown error'}")

        missing = [path for path in options.outputs if not os.path.exists(path)]
        if missing:
            raise RenderFailedError(f"{name} renderer did not write {', '.join(missing)}")
        return result

    def _report(self, summary: ConversionSummary) -> None:
        if self.reporter is not None:
            self.reporter(summary)


def convert(
    input_path: str,
    raw: RawOptions | None = None,
    registry: RendererRegistry | None = None,
    reporter: Reporter | None = None,
) -> ConversionSummary:
    """Convert one file. Renderers default to the installed plugins."""
    if registry is None:
        registry = RendererRegistry.from_entry_points()
    return Conversion(input_path, raw, registry, reporter).run()


def probe(input_path: str) -> SauceProbe:
    """Inspect a file's SAUCE record without rendering it."""
    return probe_sauce(input_path)
