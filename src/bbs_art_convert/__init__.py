"""
bbs-art-convert: convert BBS-era text art to PNG

Reads ANSI, PCBoard, Binary, Artworx, iCEDraw, Tundra and XBin files,
strips their SAUCE metadata and hands the art to a renderer plugin.

Quick Start:
    >>> import bbs_art_convert as bac
    >>> probe = bac.probe("artwork.ans")
    >>> print(probe.record)
    >>> summary = bac.convert("artwork.ans", bac.RawOptions(retina=True))
    >>> summary.options.retina_output
    'artwork.ans.png@2x.png'

Features:
    - SAUCE record and comment block parsing, with malformed-record detection
    - Renderable length computed without the trailing metadata
    - Extension-based renderer dispatch with ANSI fallback
    - Output path derivation including Retina (@Nx) variants
    - Renderer plugins discovered through entry points
"""

__version__ = "0.1.0"

# Options and formats
from bbs_art_convert.core.formats import FormatIdentity
from bbs_art_convert.core.options import ConversionOptions, RawOptions

# SAUCE metadata
from bbs_art_convert.sauce.record import SauceRecord
from bbs_art_convert.sauce.reader import ProbeStatus, SauceProbe

# Rendering
from bbs_art_convert.render.registry import RendererRegistry, RenderResult

# Conversion
from bbs_art_convert.convert.orchestrator import ConversionSummary, convert, probe

from bbs_art_convert.errors import ConvertError, ExitCode

__all__ = [
    # Version
    "__version__",
    # Options and formats
    "FormatIdentity",
    "ConversionOptions",
    "RawOptions",
    # SAUCE
    "SauceRecord",
    "ProbeStatus",
    "SauceProbe",
    # Rendering
    "RendererRegistry",
    "RenderResult",
    # Conversion
    "ConversionSummary",
    "convert",
    "probe",
    # Errors
    "ConvertError",
    "ExitCode",
]
