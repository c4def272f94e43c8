"""Compile indented top-down outlines into numbered node lists."""

__version__ = "0.1.0"