"""Conversion orchestration and reporting."""

from bbs_art_convert.convert.orchestrator import (
    Conversion,
    ConversionState,
    ConversionSummary,
    convert,
    probe,
)
from bbs_art_convert.convert.report import ConsoleReporter, JsonReporter

__all__ = [
    "Conversion",
    "ConversionState",
    "ConversionSummary",
    "convert",
    "probe",
    "ConsoleReporter",
    "JsonReporter",
]
