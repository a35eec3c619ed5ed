"""Core conversion pieces: formats, options, output paths and content."""

from bbs_art_convert.core.content import (
    ContentBuffer,
    MappedInput,
    map_input,
    resolve_content_length,
)
from bbs_art_convert.core.formats import Dispatch, FormatIdentity, dispatch, file_extension
from bbs_art_convert.core.options import ConversionOptions, RawOptions, build_options
from bbs_art_convert.core.paths import OutputPaths, build_output_paths

__all__ = [
    "ContentBuffer",
    "MappedInput",
    "map_input",
    "resolve_content_length",
    "Dispatch",
    "FormatIdentity",
    "dispatch",
    "file_extension",
    "ConversionOptions",
    "RawOptions",
    "build_options",
    "OutputPaths",
    "build_output_paths",
]
