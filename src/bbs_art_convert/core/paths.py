"""Output path derivation."""

from dataclasses import dataclass

PNG_SUFFIX = ".png"


@dataclass(frozen=True)
class OutputPaths:
    primary: str
    retina: str | None = None
    retina_scale: int = 0


def retina_path(primary: str, scale: int) -> str:
    """'art.png' at scale 3 -> 'art.png@3x.png'."""
    return f"{primary}@{scale}x{PNG_SUFFIX}"


def build_output_paths(
    input_path: str,
    output: str | None = None,
    retina_scale: int = 0,
) -> OutputPaths:
    """
    Resolve where the renderer writes its image(s).

    Without an explicit output, ".png" is appended to the input path
    ("file.ans" -> "file.ans.png"). An explicit output is used verbatim.
    A non-zero ``retina_scale`` adds a scaled variant named after the
    primary path. The scale is expected to be validated already.
    """
    primary = output if output is not None else f"{input_path}{PNG_SUFFIX}"
    if retina_scale:
        return OutputPaths(primary, retina_path(primary, retina_scale), retina_scale)
    return OutputPaths(primary)
