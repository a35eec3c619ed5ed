"""SAUCE metadata handling."""

from bbs_art_convert.sauce.record import DataType, FileType, SauceRecord
from bbs_art_convert.sauce.reader import (
    ProbeStatus,
    SauceProbe,
    parse_sauce,
    parse_sauce_bytes,
    probe_sauce,
)
from bbs_art_convert.sauce.writer import sauce_to_bytes, write_sauce

__all__ = [
    "DataType",
    "FileType",
    "SauceRecord",
    "ProbeStatus",
    "SauceProbe",
    "parse_sauce",
    "parse_sauce_bytes",
    "probe_sauce",
    "sauce_to_bytes",
    "write_sauce",
]
