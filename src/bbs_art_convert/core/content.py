"""Input buffer acquisition and renderable length."""

import logging
import mmap
import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass
from typing import Iterator

from bbs_art_convert.errors import (
    InputNotFoundError,
    InputUnreadableError,
    MalformedRecordError,
    MappingError,
)
from bbs_art_convert.sauce.record import SauceRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContentBuffer:
    """
    Read-only view of an input file.

    ``data`` is exactly ``length`` bytes long: the renderable part of the
    file, without any trailing SAUCE metadata. ``file_size`` is the
    physical size. The view is only valid inside ``map_input``.
    """
    data: memoryview
    length: int
    file_size: int


def resolve_content_length(file_size: int, record: SauceRecord | None) -> int:
    """
    Number of leading bytes that are art rather than metadata.

    With a record this is file_size - 129, less 5 + 64 per comment line when
    the record has comments.

    Raises:
        MalformedRecordError: the record claims more metadata than the
            file contains.
    """
    if record is None:
        return file_size

    trailing = record.metadata_size
    length = file_size - trailing
    if length < 0:
        raise MalformedRecordError(
            f"SAUCE metadata ({trailing} bytes) is larger than the file ({file_size} bytes)",
            file_size=file_size,
            metadata_size=trailing,
        )
    return length


@dataclass
class MappedInput:
    """An input file mapped into memory for the duration of ``map_input``."""
    path: str
    view: memoryview
    file_size: int
    _stack: ExitStack

    def content(self, length: int) -> ContentBuffer:
        """The first ``length`` bytes as a ContentBuffer."""
        if not 0 <= length <= self.file_size:
            raise ValueError(f"length {length} outside file of {self.file_size} bytes")
        data = self.view[:length]
        self._stack.callback(data.release)
        logger.debug("%s: %d of %d bytes renderable", self.path, length, self.file_size)
        return ContentBuffer(data=data, length=length, file_size=self.file_size)


def _close_mapping(mapped: mmap.mmap, path: str) -> None:
    try:
        mapped.close()
    except BufferError:
        # A renderer kept a slice of the buffer; the mapping goes when it does.
        logger.warning("%s: buffer still referenced after rendering, mapping left open", path)


@contextmanager
def map_input(path: str) -> Iterator[MappedInput]:
    """
    Memory-map ``path`` read-only.

    The mapping, the file descriptor and every view handed out by
    ``MappedInput.content`` are released on every exit path.

    Raises:
        InputNotFoundError: the file vanished.
        InputUnreadableError: open or stat failed.
        MappingError: the file could not be mapped.
    """
    with ExitStack() as stack:
        try:
            f = stack.enter_context(open(path, "rb"))
            file_size = os.fstat(f.fileno()).st_size
        except FileNotFoundError:
            raise InputNotFoundError(path) from None
        except OSError as e:
            raise InputUnreadableError(path, e.strerror or str(e)) from e

        if file_size == 0:
            # Empty files cannot be mapped.
            view = memoryview(b"")
        else:
            try:
                mapped = mmap.mmap(f.fileno(), 0, access=mmap.ACCESS_READ)
            except (OSError, ValueError) as e:
                raise MappingError(path, str(e)) from e
            stack.callback(_close_mapping, mapped, path)
            view = memoryview(mapped)
        stack.callback(view.release)

        yield MappedInput(path=path, view=view, file_size=file_size, _stack=stack)
