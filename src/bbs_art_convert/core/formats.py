"""Renderer selection by file extension."""

from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath


class FormatIdentity(str, Enum):
    """The renderer a file is handed to."""
    ANSI = "ansi"
    PCBOARD = "pcboard"
    BINARY = "binary"
    ARTWORX = "artworx"
    ICEDRAW = "icedraw"
    TUNDRA = "tundra"
    XBIN = "xbin"

    @property
    def reports_font(self) -> bool:
        """Whether font and bits apply (the other formats embed their own font)."""
        return self in _FONT_FORMATS

    @property
    def supports_icecolors(self) -> bool:
        return self in (FormatIdentity.ANSI, FormatIdentity.BINARY)

    @property
    def uses_columns(self) -> bool:
        return self is FormatIdentity.BINARY


_FONT_FORMATS = frozenset({
    FormatIdentity.ANSI,
    FormatIdentity.BINARY,
    FormatIdentity.PCBOARD,
    FormatIdentity.TUNDRA,
})

# Lowercased extension -> format. Anything else renders as ANSI.
EXTENSION_FORMATS: dict[str, FormatIdentity] = {
    ".pcb": FormatIdentity.PCBOARD,
    ".bin": FormatIdentity.BINARY,
    ".adf": FormatIdentity.ARTWORX,
    ".idf": FormatIdentity.ICEDRAW,
    ".tnd": FormatIdentity.TUNDRA,
    ".xb": FormatIdentity.XBIN,
}

DEFAULT_FORMAT = FormatIdentity.ANSI
DIZ_EXTENSION = ".diz"


@dataclass(frozen=True)
class Dispatch:
    """Format chosen for an input, plus whether it is a FILE_ID.DIZ."""
    format: FormatIdentity
    extension: str
    is_diz: bool = False


def file_extension(path: str | PurePath) -> str:
    """
    Text from the last '.' of the path, lowercased, or "" if there is none.

    Only the final path component is considered, so "dir.v2/readme" has no
    extension.
    """
    name = PurePath(path).name
    dot = name.rfind(".")
    return name[dot:].lower() if dot != -1 else ""


def dispatch(path: str | PurePath) -> Dispatch:
    """Pick the renderer for ``path``. Never fails; unknown types are ANSI."""
    extension = file_extension(path)
    return Dispatch(
        format=EXTENSION_FORMATS.get(extension, DEFAULT_FORMAT),
        extension=extension,
        is_diz=extension == DIZ_EXTENSION,
    )
