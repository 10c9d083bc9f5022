"""Data models for the entry renderer."""

from __future__ import annotations

from dataclasses import dataclass, field

from src.common.config import SiteSettings


@dataclass
class SeoMeta:
    """Values for the page head metadata block."""
    title: str
    description: str = ""
    canonical_url: str = ""
    og_type: str = "article"


@dataclass
class EntryPage:
    """Everything the blog entry template needs for one post."""
    seo: SeoMeta
    body_html: str  # trusted, injected verbatim
    site: SiteSettings = field(default_factory=SiteSettings)
    blog_path: str = "blog"

    def to_template_context(self) -> dict:
        """Convert to Jinja2 template context dictionary."""
        return {
            "title": self.seo.title,
            "description": self.seo.description,
            "canonical_url": self.seo.canonical_url,
            "og_type": self.seo.og_type,
            "body_html": self.body_html,
            "site": self.site,
            "blog_path": self.blog_path,
        }


@dataclass
class IndexEntry:
    """One row of the blog listing page."""
    title: str
    url: str
    date: str = ""
    description: str = ""
