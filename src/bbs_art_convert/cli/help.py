"""Static help text for the command line tool."""

SUPPORTED_TYPES = ("ANS", "PCB", "BIN", "ADF", "IDF", "TND", "XB")

PC_FONTS = (
    "80x25", "80x50", "baltic", "cyrillic", "french-canadian", "greek",
    "greek-869", "hebrew", "icelandic", "latin1", "latin2", "nordic",
    "portuguese", "russian", "terminus", "turkish",
)

AMIGA_FONTS = (
    "amiga", "microknight", "microknight+", "mosoul", "pot-noodle",
    "topaz", "topaz+", "topaz500", "topaz500+",
)

EXAMPLES = (
    ("bbs-art-convert file.ans", "output path/name identical to input, no options"),
    ("bbs-art-convert -i file.ans", "enable iCE colors"),
    ("bbs-art-convert -r file.ans", "adds Retina @2x output file"),
    ("bbs-art-convert -R 3 file.ans", "adds Retina @3x output file"),
    ("bbs-art-convert -o dir/file.png file.ans", "custom path/name for output"),
    ("bbs-art-convert -s file.bin", "just display SAUCE record, don't generate output"),
    ("bbs-art-convert -m transparent file.ans", "render with transparent background"),
    ("bbs-art-convert -f amiga file.txt", "custom font"),
    ("bbs-art-convert -f 80x50 -b 9 -c 320 -i file.bin", "font, bits, columns, icecolors"),
)

SYNOPSIS = (
    "SYNOPSIS:\n"
    "  bbs-art-convert [options] file\n"
    "  bbs-art-convert -e | -h | -v"
)


def epilog() -> str:
    """Supported file types and fonts, appended to --help."""
    return (
        f"[bold]Supported file types:[/] {' '.join(SUPPORTED_TYPES)}. "
        "Files with custom suffix default to the ANSI renderer.\n\n"
        f"[bold]PC fonts:[/] {', '.join(PC_FONTS)}\n\n"
        f"[bold]Amiga fonts:[/] {', '.join(AMIGA_FONTS)}"
    )


def examples() -> list[str]:
    width = max(len(command) for command, _ in EXAMPLES)
    return ["EXAMPLES:"] + [
        f"  {command.ljust(width)}  ({note})" for command, note in EXAMPLES
    ]
