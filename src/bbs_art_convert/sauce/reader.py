"""SAUCE record parsing."""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Callable

from bbs_art_convert.errors import InputNotFoundError, InputUnreadableError
from bbs_art_convert.sauce.record import (
    COMMENT_ID_SIZE,
    COMMENT_LINE_SIZE,
    COMNT_ID,
    RECORD_STRUCT,
    SAUCE_ID,
    SAUCE_RECORD_SIZE,
    SauceRecord,
    comment_block_size,
)

logger = logging.getLogger(__name__)


class ProbeStatus(Enum):
    """Outcome of looking for a SAUCE record at the end of a file."""
    PRESENT = "present"
    ABSENT = "absent"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class SauceProbe:
    """Result of probing a file for a SAUCE record."""
    status: ProbeStatus
    file_size: int
    record: SauceRecord | None = None
    reason: str = ""

    @property
    def has_record(self) -> bool:
        return self.status is ProbeStatus.PRESENT

    def malformed(self, reason: str) -> "SauceProbe":
        """Downgrade this probe to an unusable record."""
        return SauceProbe(ProbeStatus.MALFORMED, self.file_size, None, reason)


def _text(raw: bytes) -> str:
    return raw.rstrip(b"\x00 ").decode("cp437", errors="replace")


def decode_record(data: bytes) -> tuple[SauceRecord, int]:
    """
    Decode a 128-byte record without its comments.

    Returns the record and the comment count it declares; comment lines
    live outside the record and are attached by the caller.
    """
    (
        sauce_id, version, title, author, group, date, file_size,
        data_type, file_type, tinfo1, tinfo2, tinfo3, tinfo4,
        comment_count, tflags, tinfos,
    ) = RECORD_STRUCT.unpack(data)

    record = SauceRecord(
        sauce_id=sauce_id.decode("ascii"),
        version=version.decode("cp437", errors="replace"),
        title=_text(title),
        author=_text(author),
        group=_text(group),
        date=_text(date),
        file_size=file_size,
        data_type=data_type,
        file_type=file_type,
        tinfo1=tinfo1,
        tinfo2=tinfo2,
        tinfo3=tinfo3,
        tinfo4=tinfo4,
        tflags=tflags,
        tinfos=tinfos.rstrip(b"\x00").decode("cp437", errors="replace"),
    )
    return record, comment_count


def decode_comments(block: bytes, count: int) -> tuple[str, ...] | None:
    """Decode a COMNT block; None if the block signature is missing."""
    if block[:COMMENT_ID_SIZE] != COMNT_ID:
        return None
    lines = []
    for index in range(count):
        start = COMMENT_ID_SIZE + index * COMMENT_LINE_SIZE
        lines.append(_text(block[start:start + COMMENT_LINE_SIZE]))
    return tuple(lines)


def _probe(read_at: Callable[[int, int], bytes], file_size: int) -> SauceProbe:
    if file_size < SAUCE_RECORD_SIZE:
        return SauceProbe(ProbeStatus.ABSENT, file_size)

    tail = read_at(file_size - SAUCE_RECORD_SIZE, SAUCE_RECORD_SIZE)
    if tail[:len(SAUCE_ID)] != SAUCE_ID:
        return SauceProbe(ProbeStatus.ABSENT, file_size)

    record, comment_count = decode_record(tail)
    if comment_count == 0:
        return SauceProbe(ProbeStatus.PRESENT, file_size, record)

    block_size = comment_block_size(comment_count)
    block_start = file_size - SAUCE_RECORD_SIZE - block_size
    if block_start < 0:
        return SauceProbe(
            ProbeStatus.MALFORMED,
            file_size,
            reason=(
                f"record declares {comment_count} comment lines "
                f"({block_size} bytes) but only {file_size - SAUCE_RECORD_SIZE} "
                f"bytes precede it"
            ),
        )

    comments = decode_comments(read_at(block_start, block_size), comment_count)
    if comments is None:
        return SauceProbe(
            ProbeStatus.MALFORMED,
            file_size,
            reason=f"record declares {comment_count} comment lines but no COMNT block precedes it",
        )

    return SauceProbe(
        ProbeStatus.PRESENT,
        file_size,
        replace(record, comments=comments),
    )


def probe_sauce(path: str | Path) -> SauceProbe:
    """
    Look for a SAUCE record at the end of a file.

    A missing record is a normal outcome (``ProbeStatus.ABSENT``). A record
    whose comment block cannot be located is ``ProbeStatus.MALFORMED``.

    Raises:
        InputNotFoundError: the path does not exist.
        InputUnreadableError: the path exists but cannot be read.
    """
    try:
        with open(path, "rb") as f:
            f.seek(0, 2)  # End of file
            file_size = f.tell()

            def read_at(offset: int, size: int) -> bytes:
                f.seek(offset)
                return f.read(size)

            result = _probe(read_at, file_size)
    except FileNotFoundError:
        raise InputNotFoundError(str(path)) from None
    except OSError as e:
        raise InputUnreadableError(str(path), e.strerror or str(e)) from e

    logger.debug("SAUCE probe of %s: %s (%d bytes)", path, result.status.value, file_size)
    return result


def parse_sauce(path: str | Path) -> SauceRecord | None:
    """Parse SAUCE record from a file, or None if it has no usable record."""
    return probe_sauce(path).record


def parse_sauce_bytes(data: bytes) -> SauceRecord | None:
    """Parse SAUCE record from the complete contents of a file."""
    view = memoryview(data)
    return _probe(lambda offset, size: bytes(view[offset:offset + size]), len(data)).record
