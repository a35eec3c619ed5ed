"""Tests for content length resolution and input mapping."""

import mmap
from pathlib import Path

import pytest

from bbs_art_convert.core.content import map_input, resolve_content_length
from bbs_art_convert.errors import (
    ExitCode,
    InputNotFoundError,
    MalformedRecordError,
    MappingError,
)
from bbs_art_convert.sauce import SauceRecord, probe_sauce, sauce_to_bytes


class TestResolveContentLength:
    """Tests for the renderable length formula."""

    def test_no_record_keeps_file_size(self) -> None:
        assert resolve_content_length(4000, None) == 4000

    def test_record_without_comments(self) -> None:
        assert resolve_content_length(4000, SauceRecord()) == 4000 - 129

    @pytest.mark.parametrize("count", [1, 2, 255])
    def test_record_with_comments(self, count: int) -> None:
        record = SauceRecord(comments=tuple("c" for _ in range(count)))
        assert resolve_content_length(20000, record) == 20000 - 129 - (5 + 64 * count)

    def test_exactly_metadata_sized_file(self) -> None:
        assert resolve_content_length(129, SauceRecord()) == 0

    def test_negative_length_is_rejected(self) -> None:
        with pytest.raises(MalformedRecordError) as exc_info:
            resolve_content_length(128, SauceRecord())
        assert exc_info.value.file_size == 128
        assert exc_info.value.metadata_size == 129

    def test_length_from_tagged_file(self, make_art, art: bytes) -> None:
        record = SauceRecord(title="Tagged", comments=("one", "two"))
        path = make_art(record=record)
        probe = probe_sauce(path)
        assert resolve_content_length(probe.file_size, probe.record) == len(art)


class TestMapInput:
    """Tests for mapping files into memory."""

    def test_content_is_prefix(self, make_art, art: bytes) -> None:
        path = make_art(record=SauceRecord(title="x"))
        with map_input(str(path)) as mapped:
            assert mapped.file_size == path.stat().st_size
            content = mapped.content(len(art))
            assert content.length == len(art)
            assert content.data.tobytes() == art
            assert content.file_size == mapped.file_size

    def test_views_released_on_exit(self, make_art) -> None:
        path = make_art()
        with map_input(str(path)) as mapped:
            content = mapped.content(4)
        with pytest.raises(ValueError):
            content.data.tobytes()

    def test_views_released_on_error(self, make_art) -> None:
        path = make_art()
        with pytest.raises(RuntimeError):
            with map_input(str(path)) as mapped:
                content = mapped.content(4)
                raise RuntimeError("boom")
        with pytest.raises(ValueError):
            content.data.tobytes()

    def test_empty_file(self, make_art) -> None:
        path = make_art(content=b"")
        with map_input(str(path)) as mapped:
            assert mapped.file_size == 0
            assert mapped.content(0).data.tobytes() == b""

    def test_length_beyond_file(self, make_art) -> None:
        path = make_art(content=b"abc")
        with map_input(str(path)) as mapped:
            with pytest.raises(ValueError):
                mapped.content(4)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(InputNotFoundError):
            with map_input(str(tmp_path / "gone.bin")):
                pass

    def test_record_only_file(self, make_art) -> None:
        path = make_art(content=sauce_to_bytes(SauceRecord()))
        with map_input(str(path)) as mapped:
            assert mapped.file_size == 128

    def test_mapping_failure(self, make_art, monkeypatch) -> None:
        def refuse(*args, **kwargs):
            raise OSError(12, "Cannot allocate memory")

        monkeypatch.setattr(mmap, "mmap", refuse)
        with pytest.raises(MappingError) as exc_info:
            with map_input(str(make_art())):
                pass
        assert exc_info.value.exit_code == ExitCode.MAPPING_FAILED
        assert str(exc_info.value).startswith("Memory error")

    def test_kept_slice_does_not_break_release(self, make_art, caplog) -> None:
        path = make_art()
        with map_input(str(path)) as mapped:
            kept = mapped.content(8).data[0:4]
        assert kept.tobytes() == path.read_bytes()[:4]
        assert "still referenced" in caplog.text


class TestErrorCodes:
    """Recoverable errors do not masquerade as option errors."""

    def test_malformed_record_exit_code(self) -> None:
        assert MalformedRecordError("x").exit_code != ExitCode.INVALID_OPTION
