"""Pytest configuration and shared fixtures."""

import os
from pathlib import Path
from typing import Callable, Optional

import pytest

from bbs_art_convert.core.content import ContentBuffer
from bbs_art_convert.core.formats import FormatIdentity
from bbs_art_convert.core.options import ConversionOptions
from bbs_art_convert.render.registry import RendererRegistry, RenderResult
from bbs_art_convert.sauce.record import SauceRecord
from bbs_art_convert.sauce.writer import write_sauce

ART = b"\x1b[0;1;36mHello\x1b[0m\r\n\xdb\xdb\xb2\xb1\xb0\r\n"


def get_test_art_dir() -> Optional[Path]:
    """
    Get external art directory from the environment.

    Set BBS_ART_CONVERT_TEST_DIR to a directory of text-art files.
    """
    if env_path := os.environ.get("BBS_ART_CONVERT_TEST_DIR"):
        path = Path(env_path).expanduser()
        if path.exists():
            return path
    return None


@pytest.fixture(scope="session")
def test_art_dir() -> Path:
    """Fixture providing external art directory, skips if unavailable."""
    art_dir = get_test_art_dir()
    if art_dir is None:
        pytest.skip("External art directory not found. Set BBS_ART_CONVERT_TEST_DIR")
    return art_dir


def pytest_generate_tests(metafunc: pytest.Metafunc) -> None:
    """Parametrize ``art_file`` over the external directory, if any."""
    if "art_file" in metafunc.fixturenames:
        art_dir = get_test_art_dir()
        files = sorted(p for p in art_dir.iterdir() if p.is_file())[:50] if art_dir else []
        metafunc.parametrize("art_file", files, ids=lambda p: p.name)


@pytest.fixture
def make_art(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing an art file, optionally tagged with a SAUCE record."""

    def _make(
        name: str = "art.ans",
        content: bytes = ART,
        record: SauceRecord | None = None,
    ) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        data = write_sauce(record, content) if record is not None else content
        path.write_bytes(data)
        return path

    return _make


class RecordingRenderer:
    """Renderer double: writes placeholder images and remembers its calls."""

    def __init__(self, result: RenderResult | None = None, write: bool = True):
        self.result = result if result is not None else RenderResult()
        self.write = write
        self.calls: list[tuple[bytes, int, ConversionOptions]] = []

    def __call__(self, content: ContentBuffer, options: ConversionOptions) -> RenderResult:
        self.calls.append((content.data.tobytes(), content.length, options))
        if self.write:
            for output in options.outputs:
                Path(output).write_bytes(b"\x89PNG\r\n\x1a\n")
        return self.result


@pytest.fixture
def renderers() -> dict[FormatIdentity, RecordingRenderer]:
    return {fmt: RecordingRenderer() for fmt in FormatIdentity}


@pytest.fixture
def registry(renderers: dict[FormatIdentity, RecordingRenderer]) -> RendererRegistry:
    return RendererRegistry(renderers)


@pytest.fixture
def art() -> bytes:
    """The untagged art content ``make_art`` writes by default."""
    return ART


@pytest.fixture
def recording_renderer() -> type[RecordingRenderer]:
    """The RecordingRenderer class, for tests that build their own registry."""
    return RecordingRenderer
