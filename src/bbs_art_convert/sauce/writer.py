"""SAUCE record writing."""

from datetime import datetime

from bbs_art_convert.sauce.record import (
    COMMENT_LINE_SIZE,
    COMNT_ID,
    EOF_MARKER,
    MAX_COMMENTS,
    RECORD_STRUCT,
    SAUCE_ID,
    SAUCE_VERSION,
    SauceRecord,
)


def _pad(text: str, size: int, fill: bytes = b" ") -> bytes:
    return text.encode("cp437", errors="replace")[:size].ljust(size, fill)


def sauce_to_bytes(record: SauceRecord) -> bytes:
    """Serialize a SAUCE record to its 128-byte on-disk form."""
    date = record.date or datetime.now().strftime("%Y%m%d")
    return RECORD_STRUCT.pack(
        SAUCE_ID,
        _pad(record.version, 2, b"0") if record.version else SAUCE_VERSION,
        _pad(record.title, 35),
        _pad(record.author, 20),
        _pad(record.group, 20),
        _pad(date, 8),
        record.file_size,
        record.data_type,
        record.file_type,
        record.tinfo1,
        record.tinfo2,
        record.tinfo3,
        record.tinfo4,
        min(record.comment_count, MAX_COMMENTS),
        record.tflags,
        _pad(record.tinfos, 22, b"\x00"),
    )


def write_sauce(record: SauceRecord, data: bytes) -> bytes:
    """Append EOF marker, comments if present, and the SAUCE record to data."""
    result = bytearray(data)
    result.append(EOF_MARKER)

    if record.comments:
        result.extend(COMNT_ID)
        for comment in record.comments[:MAX_COMMENTS]:
            result.extend(_pad(comment, COMMENT_LINE_SIZE))

    result.extend(sauce_to_bytes(record))
    return bytes(result)
