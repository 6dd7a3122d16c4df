"""Graffiti: CSS-subset parsing, cascading styles and an observable document tree."""
from __future__ import annotations

__version__ = "0.1.0"

from graffiti.config import GraffitiConfig
from graffiti.css import StyleSheet, parse_stylesheet
from graffiti.dom import Document

__all__ = [
    "__version__",
    "Document",
    "GraffitiConfig",
    "StyleSheet",
    "parse_stylesheet",
]
