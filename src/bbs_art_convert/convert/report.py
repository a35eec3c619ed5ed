"""Human-readable conversion reports."""

import json

from rich.console import Console
from rich.markup import escape

from bbs_art_convert.convert.orchestrator import ConversionSummary
from bbs_art_convert.sauce.reader import ProbeStatus


def conversion_lines(summary: ConversionSummary) -> list[str]:
    """Input/output paths and the settings that applied to the render."""
    opts = summary.options
    lines = [
        f"Input File: {summary.input_path}",
        f"Output File: {opts.output}",
    ]
    if opts.retina_output:
        lines.append(f"Retina Output File: {opts.retina_output}")
    if opts.format.reports_font:
        lines.append(f"Font: {opts.font}")
        lines.append(f"Bits: {opts.bits}")
    if opts.icecolors and opts.format.supports_icecolors:
        lines.append("iCE Colors: enabled")
    if opts.format.uses_columns:
        lines.append(f"Columns: {opts.columns}")
    return lines


def record_lines(summary: ConversionSummary) -> list[str]:
    """SAUCE fields, or a notice that there is no usable record."""
    probe = summary.probe
    if probe.status is ProbeStatus.PRESENT and probe.record is not None:
        return probe.record.describe()
    if probe.status is ProbeStatus.MALFORMED:
        return [f"File {summary.input_path} does not have a usable SAUCE record."]
    return [f"File {summary.input_path} does not have a SAUCE record."]


class ConsoleReporter:
    """Prints summaries the way the command line tool always has: on stderr."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(stderr=True, highlight=False, soft_wrap=True)

    def _block(self, lines: list[str], style: str = "") -> None:
        self.console.print()
        for line in lines:
            self.console.print(escape(line), style=style or None)

    def __call__(self, summary: ConversionSummary) -> None:
        if summary.rendered:
            self._block(conversion_lines(summary))
        if summary.probe.has_record:
            self._block(record_lines(summary))
        else:
            self._block(record_lines(summary), style="yellow")


class JsonReporter:
    """Writes each summary as a JSON document on stdout."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(highlight=False, soft_wrap=True)

    def __call__(self, summary: ConversionSummary) -> None:
        self.console.print_json(json.dumps(summary.to_dict()))
