"""Command line interface."""

from bbs_art_convert.cli.app import create_app
from bbs_art_convert.cli.main import main

__all__ = ["create_app", "main"]
