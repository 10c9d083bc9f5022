"""Data models for the content store.

A Post is built once per markdown file at load time and never mutated.
"""

from __future__ import annotations

import datetime as dt
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FrontMatter(BaseModel):
    """Metadata block at the top of a markdown file."""
    model_config = ConfigDict(extra="allow")

    title: str = Field(min_length=1)
    date: Optional[dt.date] = None
    description: str = ""
    slug: str = ""
    draft: bool = False

    @field_validator("title", mode="before")
    @classmethod
    def _scalar_title_to_str(cls, value: Any) -> Any:
        # "title: 1984" or "title: 2021-01-01" arrive as int / date
        if isinstance(value, (int, float, dt.date)):
            return str(value)
        return value

    @field_validator("description", "slug", mode="before")
    @classmethod
    def _empty_to_blank(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, (int, float)):
            return str(value)
        return value

    @field_validator("draft", mode="before")
    @classmethod
    def _empty_draft(cls, value: Any) -> Any:
        return False if value is None else value

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("title must not be blank")
        return value

    @field_validator("date", mode="before")
    @classmethod
    def _datetime_to_date(cls, value: Any) -> Any:
        # YAML turns "2024-01-05 10:00" into a datetime
        if isinstance(value, dt.datetime):
            return value.date()
        return value


class Post(BaseModel):
    """A rendered blog post addressed by a stable generated id."""
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    body_html: str
    slug: str
    source_path: str = ""
    date: Optional[dt.date] = None
    description: str = ""
    frontmatter: dict[str, Any] = Field(default_factory=dict)


class ContentRecord(BaseModel):
    """Result of a content query: front-matter plus pre-rendered HTML."""
    model_config = ConfigDict(frozen=True)

    frontmatter: FrontMatter
    html: str
    slug: str = ""  # resolved slug, not part of the query shape

    @classmethod
    def from_post(cls, post: Post) -> ContentRecord:
        return cls(
            frontmatter=FrontMatter.model_validate(post.frontmatter),
            html=post.body_html,
            slug=post.slug,
        )

    def to_dict(self) -> dict:
        return {
            "frontmatter": self.frontmatter.model_dump(mode="json"),
            "html": self.html,
        }
