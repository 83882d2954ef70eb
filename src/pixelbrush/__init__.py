"""Editable pixel-art image widget for PySide6 applications."""

__version__ = "0.1.0"
