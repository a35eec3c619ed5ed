"""Conversion options: raw caller input and the validated record."""

import re
from dataclasses import dataclass

from bbs_art_convert.core.formats import FormatIdentity, dispatch
from bbs_art_convert.core.paths import build_output_paths
from bbs_art_convert.errors import InvalidOptionError

DEFAULT_BITS = 8
DEFAULT_COLUMNS = 160
DEFAULT_FONT = "80x25"
DEFAULT_MODE = ""
DEFAULT_RETINA_SCALE = 2

BITS_RANGE = (8, 9)
COLUMNS_RANGE = (1, 8192)
RETINA_RANGE = (2, 8)

# Render modes the ANSI renderer knows about. The mode is passed
# through untouched, so other values are allowed.
KNOWN_MODES = ("ced", "transparent", "workbench")

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class RawOptions:
    """Options exactly as supplied on the command line, not yet validated."""
    bits: str | int | None = None
    columns: str | int | None = None
    font: str | None = None
    mode: str | None = None
    icecolors: bool = False
    output: str | None = None
    retina: bool = False
    retina_scale: str | int | None = None
    display_only: bool = False


@dataclass(frozen=True)
class ConversionOptions:
    """
    Everything a renderer needs for one file.

    Built once by ``build_options`` and never modified afterwards.
    """
    input_path: str
    format: FormatIdentity
    output: str
    bits: int = DEFAULT_BITS
    columns: int = DEFAULT_COLUMNS
    font: str = DEFAULT_FONT
    mode: str = DEFAULT_MODE
    icecolors: bool = False
    retina_output: str | None = None
    retina_scale: int = 0
    diz: bool = False

    @property
    def outputs(self) -> tuple[str, ...]:
        if self.retina_output:
            return (self.output, self.retina_output)
        return (self.output,)


def parse_bounded(value: str | int, low: int, high: int, option: str, message: str) -> int:
    """
    Convert ``value`` to an int within [low, high].

    Accepts an int or a base-10 integer string; leading whitespace is
    ignored. Raises InvalidOptionError with ``message`` otherwise.
    """
    if isinstance(value, bool):
        raise InvalidOptionError(option, message)
    if isinstance(value, int):
        number = value
    else:
        text = str(value).lstrip()
        if not _INTEGER.fullmatch(text):
            raise InvalidOptionError(option, message)
        number = int(text)
    if not low <= number <= high:
        raise InvalidOptionError(option, message)
    return number


def validate_bits(value: str | int) -> int:
    return parse_bounded(value, *BITS_RANGE, "bits", "Invalid value for bits (must be 8 or 9).")


def validate_columns(value: str | int) -> int:
    return parse_bounded(
        value, *COLUMNS_RANGE, "columns",
        "Invalid value for columns (must range from 1 to 8192).",
    )


def validate_retina_scale(value: str | int) -> int:
    return parse_bounded(
        value, *RETINA_RANGE, "retina",
        "Invalid value for retina scale factor (must range from 2 to 8).",
    )


def resolve_retina_scale(raw: RawOptions) -> int:
    """Scale factor requested by ``-R`` or ``-r``; 0 when none was asked for."""
    if raw.retina_scale is not None:
        return validate_retina_scale(raw.retina_scale)
    if raw.retina:
        return DEFAULT_RETINA_SCALE
    return 0


def build_options(input_path: str, raw: RawOptions | None = None) -> ConversionOptions:
    """Validate ``raw``, apply defaults and resolve output paths and format."""
    raw = raw or RawOptions()

    bits = validate_bits(raw.bits) if raw.bits is not None else DEFAULT_BITS
    columns = validate_columns(raw.columns) if raw.columns is not None else DEFAULT_COLUMNS
    scale = resolve_retina_scale(raw)

    paths = build_output_paths(input_path, raw.output, scale)
    selected = dispatch(input_path)

    return ConversionOptions(
        input_path=input_path,
        format=selected.format,
        output=paths.primary,
        bits=bits,
        columns=columns,
        font=raw.font if raw.font is not None else DEFAULT_FONT,
        mode=raw.mode if raw.mode is not None else DEFAULT_MODE,
        icecolors=raw.icecolors,
        retina_output=paths.retina,
        retina_scale=paths.retina_scale,
        diz=selected.is_diz,
    )
