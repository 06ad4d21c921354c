"""Data models for Atuin history records and indexed tools."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass
class HistoryEntry:
    """One row of the Atuin ``history`` table."""

    id: str
    timestamp: int
    duration: int
    exit: int
    command: str
    cwd: str
    session: str
    hostname: str
    deleted_at: Optional[int] = None


@dataclass
class CopyResult:
    """Outcome of a copy batch: inserted count plus the rows that failed."""

    copied: int
    failures: List[Tuple[HistoryEntry, Exception]] = field(default_factory=list)


@dataclass
class Tool:
    """A tool discovered from README front matter."""

    name: str
    purpose: str
    link: str
    path: str
    lang: Optional[str] = None
