"""SAUCE record data structure and on-disk layout."""

import struct
from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum


SAUCE_ID = b"SAUCE"
SAUCE_VERSION = b"00"
COMNT_ID = b"COMNT"
EOF_MARKER = 0x1A

SAUCE_RECORD_SIZE = 128
COMMENT_ID_SIZE = 5
COMMENT_LINE_SIZE = 64
MAX_COMMENTS = 255

# Record size plus the EOF marker that precedes the record (or its comments).
RECORD_AND_EOF_SIZE = SAUCE_RECORD_SIZE + 1

# (field name, offset, struct code). Offsets are from the start of the
# 128-byte record; all integers are little-endian.
FIELD_LAYOUT: tuple[tuple[str, int, str], ...] = (
    ("sauce_id", 0, "5s"),
    ("version", 5, "2s"),
    ("title", 7, "35s"),
    ("author", 42, "20s"),
    ("group", 62, "20s"),
    ("date", 82, "8s"),
    ("file_size", 90, "I"),
    ("data_type", 94, "B"),
    ("file_type", 95, "B"),
    ("tinfo1", 96, "H"),
    ("tinfo2", 98, "H"),
    ("tinfo3", 100, "H"),
    ("tinfo4", 102, "H"),
    ("comment_count", 104, "B"),
    ("tflags", 105, "B"),
    ("tinfos", 106, "22s"),
)

RECORD_STRUCT = struct.Struct("<" + "".join(code for _, _, code in FIELD_LAYOUT))


def comment_block_size(comment_count: int) -> int:
    """Bytes taken by the COMNT block for ``comment_count`` lines (0 if none)."""
    if comment_count <= 0:
        return 0
    return COMMENT_ID_SIZE + COMMENT_LINE_SIZE * comment_count


def metadata_size(comment_count: int) -> int:
    """Total trailing bytes (EOF marker, comments, record) to strip from content."""
    return RECORD_AND_EOF_SIZE + comment_block_size(comment_count)


class DataType(IntEnum):
    """SAUCE data types."""
    NONE = 0
    CHARACTER = 1
    BITMAP = 2
    VECTOR = 3
    AUDIO = 4
    BINARYTEXT = 5
    XBIN = 6
    ARCHIVE = 7
    EXECUTABLE = 8


class FileType(IntEnum):
    """SAUCE file types for CHARACTER data type."""
    ASCII = 0
    ANSI = 1
    ANSIMATION = 2
    RIP = 3
    PCBOARD = 4
    AVATAR = 5
    HTML = 6
    SOURCE = 7
    TUNDRA = 8


@dataclass(frozen=True)
class SauceRecord:
    """
    SAUCE (Standard Architecture for Universal Comment Extensions) record.

    SAUCE is a metadata format used by the BBS/ANSI art scene to embed
    information about artwork in files. See: https://www.acid.org/info/sauce/sauce.htm

    Text fields hold the decoded value with trailing padding removed.
    ``file_size`` is whatever the record declares; it is never trusted
    for length arithmetic.
    """
    sauce_id: str = "SAUCE"
    version: str = "00"
    title: str = ""
    author: str = ""
    group: str = ""
    date: str = ""
    file_size: int = 0
    data_type: int = DataType.CHARACTER
    file_type: int = FileType.ANSI
    tinfo1: int = 0  # Width for character data
    tinfo2: int = 0  # Height for character data
    tinfo3: int = 0
    tinfo4: int = 0
    tflags: int = 0
    tinfos: str = ""
    comments: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_bytes(cls, data: bytes) -> "SauceRecord | None":
        """Parse a SAUCE record from the tail of an in-memory file."""
        from bbs_art_convert.sauce.reader import parse_sauce_bytes
        return parse_sauce_bytes(data)

    def to_bytes(self) -> bytes:
        """Serialize the 128-byte record (without comments or EOF marker)."""
        from bbs_art_convert.sauce.writer import sauce_to_bytes
        return sauce_to_bytes(self)

    @property
    def comment_count(self) -> int:
        return len(self.comments)

    @property
    def metadata_size(self) -> int:
        """Trailing bytes this record occupies at the end of its file."""
        return metadata_size(self.comment_count)

    @property
    def parsed_date(self) -> datetime | None:
        """The CCYYMMDD date field as a datetime, or None if unparseable."""
        if len(self.date) == 8 and self.date.isdigit():
            try:
                return datetime.strptime(self.date, "%Y%m%d")
            except ValueError:
                return None
        return None

    @property
    def data_type_name(self) -> str:
        try:
            return DataType(self.data_type).name
        except ValueError:
            return "UNKNOWN"

    @property
    def width(self) -> int:
        """Get width (alias for tinfo1)."""
        return self.tinfo1

    @property
    def height(self) -> int:
        """Get height (alias for tinfo2)."""
        return self.tinfo2

    def describe(self) -> list[str]:
        """Report lines in the order the command line tool prints them."""
        lines = [
            f"Id: {self.sauce_id} v{self.version}",
            f"Title: {self.title}",
            f"Author: {self.author}",
            f"Group: {self.group}",
            f"Date: {self.date}",
            f"Datatype: {int(self.data_type)}",
            f"Filetype: {int(self.file_type)}",
        ]
        if self.tflags != 0:
            lines.append(f"Flags: {self.tflags}")
        for index, value in enumerate((self.tinfo1, self.tinfo2, self.tinfo3, self.tinfo4), 1):
            if value != 0:
                lines.append(f"Tinfo{index}: {value}")
        if self.comments:
            lines.append("Comments: " + self.comments[0])
            lines.extend(self.comments[1:])
        return lines

    def to_dict(self) -> dict:
        return {
            "id": self.sauce_id,
            "version": self.version,
            "title": self.title,
            "author": self.author,
            "group": self.group,
            "date": self.date,
            "file_size": self.file_size,
            "data_type": int(self.data_type),
            "file_type": int(self.file_type),
            "tinfo": [self.tinfo1, self.tinfo2, self.tinfo3, self.tinfo4],
            "flags": self.tflags,
            "tinfos": self.tinfos,
            "comments": list(self.comments),
        }

    def __str__(self) -> str:
        return "\n".join(self.describe())
