"""Headless game model and small 2D framework for a hexagonal match-three puzzle."""

__version__ = "0.1.0"

__all__ = [
    "animation",
    "board",
    "characters",
    "clock",
    "color",
    "input",
    "pages",
    "scene",
    "textfile",
    "transform",
]