# -*- coding: utf-8 -*-
"""
Release Notes - Reduce markdown release bodies to plain-text release notes.
"""
__version__ = "1.0.0"

from .pipeline import (  # noqa: E402
    FormatResult,
    ReleaseNotesPipeline,
    format_release,
    format_release_notes,
)

__all__ = [
    "FormatResult",
    "ReleaseNotesPipeline",
    "format_release",
    "format_release_notes",
    "__version__",
]
