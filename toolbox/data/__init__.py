"""Data layer: Atuin history store access and README tool discovery."""

from toolbox.data.history import copy_history, count_history, list_history, move_history, remap_cwd
from toolbox.data.models import CopyResult, HistoryEntry, Tool
from toolbox.data.tools import emit, generate_manifest, render, scan

__all__ = [
    "CopyResult",
    "HistoryEntry",
    "Tool",
    "copy_history",
    "count_history",
    "emit",
    "generate_manifest",
    "list_history",
    "move_history",
    "remap_cwd",
    "render",
    "scan",
]
