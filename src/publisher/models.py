"""Data models for the site builder."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class BuildResult:
    """Result of a full site build."""
    output_dir: str
    post_count: int = 0
    written: list[str] = field(default_factory=list)
    index_path: str = ""
