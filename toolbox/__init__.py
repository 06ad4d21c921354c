"""Command-line helpers for Atuin history and tool indexes."""

__version__ = "0.1.0"
