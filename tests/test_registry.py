"""Tests for renderer lookup."""

import logging

import pytest

from bbs_art_convert.core.formats import FormatIdentity
from bbs_art_convert.errors import ExitCode, RendererUnavailableError
from bbs_art_convert.render import registry as registry_module
from bbs_art_convert.render import RendererRegistry, RenderResult


def render_stub(content, options):
    return RenderResult()


class FakeEntryPoint:
    def __init__(self, name: str, target=render_stub):
        self.name = name
        self.value = f"plugin:{name}"
        self._target = target

    def load(self):
        return self._target


class TestRendererRegistry:
    """Tests for RendererRegistry."""

    def test_lookup(self) -> None:
        registry = RendererRegistry({FormatIdentity.BINARY: render_stub})
        assert registry.get(FormatIdentity.BINARY) is render_stub
        assert FormatIdentity.BINARY in registry
        assert FormatIdentity.ANSI not in registry

    def test_missing_format(self) -> None:
        with pytest.raises(RendererUnavailableError) as exc_info:
            RendererRegistry().get(FormatIdentity.ICEDRAW)
        assert exc_info.value.exit_code == ExitCode.RENDERER_UNAVAILABLE
        assert "ICEDRAW" in str(exc_info.value)

    def test_register(self) -> None:
        registry = RendererRegistry()
        registry.register(FormatIdentity.TUNDRA, render_stub)
        assert tuple(registry.formats) == (FormatIdentity.TUNDRA,)

    def test_formats_in_declaration_order(self) -> None:
        registry = RendererRegistry({
            FormatIdentity.XBIN: render_stub,
            FormatIdentity.ANSI: render_stub,
        })
        assert tuple(registry.formats) == (FormatIdentity.ANSI, FormatIdentity.XBIN)

    def test_failed_result(self) -> None:
        result = RenderResult.failed("no font")
        assert result.ok is False
        assert result.message == "no font"


class TestEntryPoints:
    """Tests for plugin discovery."""

    def test_loads_known_formats(self, monkeypatch) -> None:
        seen_groups = []

        def fake_entry_points(group):
            seen_groups.append(group)
            return [FakeEntryPoint("ansi"), FakeEntryPoint("XBin")]

        monkeypatch.setattr(registry_module, "entry_points", fake_entry_points)
        registry = RendererRegistry.from_entry_points()

        assert seen_groups == ["bbs_art_convert.renderers"]
        assert tuple(registry.formats) == (FormatIdentity.ANSI, FormatIdentity.XBIN)

    def test_ignores_unknown_names(self, monkeypatch, caplog) -> None:
        monkeypatch.setattr(
            registry_module, "entry_points", lambda group: [FakeEntryPoint("rip")],
        )
        with caplog.at_level(logging.WARNING):
            registry = RendererRegistry.from_entry_points()

        assert tuple(registry.formats) == ()
        assert "rip" in caplog.text

    def test_skips_plugins_that_fail_to_load(self, monkeypatch, caplog) -> None:
        def broken_load():
            raise ImportError("No module named 'ansilove_plugin'")

        broken = FakeEntryPoint("binary")
        broken.load = broken_load
        monkeypatch.setattr(
            registry_module, "entry_points", lambda group: [broken, FakeEntryPoint("ansi")],
        )
        with caplog.at_level(logging.WARNING):
            registry = RendererRegistry.from_entry_points()

        assert tuple(registry.formats) == (FormatIdentity.ANSI,)
        assert "ansilove_plugin" in caplog.text
