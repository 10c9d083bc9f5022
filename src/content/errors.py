"""Build-time content errors raised by the content store."""

from __future__ import annotations

from pathlib import Path


class ContentError(Exception):
    """Base class for failures while loading or querying content."""


class FrontMatterError(ContentError):
    """Front-matter block is not valid YAML or misses required fields."""

    def __init__(self, source: Path | str, reason: str):
        self.source = str(source)
        self.reason = reason
        super().__init__(f"{self.source}: {reason}")


class PostNotFoundError(ContentError, KeyError):
    """No post is registered under the requested id."""

    def __init__(self, post_id: str, kind: str = "id"):
        self.post_id = post_id
        self.kind = kind
        super().__init__(post_id)

    def __str__(self) -> str:
        return f"No post with {self.kind} {self.post_id!r}"


class DuplicateSlugError(ContentError):
    """Two content files resolve to the same slug."""

    def __init__(self, slug: str, first: str, second: str):
        self.slug = slug
        super().__init__(f"Slug {slug!r} used by both {first} and {second}")
