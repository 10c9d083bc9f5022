"""
Entry Renderer for blog posts.
Composes the shared layout, the SEO block and a post's HTML body.
"""

from pathlib import Path
from typing import Iterable, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from src.common.config import SiteSettings, settings
from src.content.models import ContentRecord, Post
from src.content.store import ContentStore

from .models import EntryPage, IndexEntry, SeoMeta


class EntryRenderer:
    """
    Renders blog posts to full HTML pages using Jinja2 templates.

    The post body is trusted markup and is never escaped or rewritten;
    the title and other metadata go through autoescaping.

    Usage:
        renderer = EntryRenderer()
        html = renderer.render(post)
    """

    ENTRY_TEMPLATE = "blog_entry.html.jinja2"
    INDEX_TEMPLATE = "blog_index.html.jinja2"

    def __init__(
        self,
        templates_dir: Optional[Path] = None,
        site: Optional[SiteSettings] = None,
        blog_path: Optional[str] = None,
    ):
        """
        Initialize the entry renderer.

        Args:
            templates_dir: Path to templates directory.
                          Defaults to ./templates relative to this file.
            site: Site metadata. Defaults to the loaded settings.
            blog_path: URL path segment posts live under.
        """
        if templates_dir is None:
            templates_dir = Path(__file__).parent / "templates"

        self.templates_dir = templates_dir
        self.site = site or settings.site
        self.blog_path = (blog_path or settings.build.blog_path).strip("/")
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html", "xml", "html.jinja2"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, post: Post) -> str:
        """
        Render the page for a single post.

        Args:
            post: Post from the content store

        Returns:
            Rendered HTML page
        """
        seo = SeoMeta(
            title=post.title,
            description=post.description or self.site.description,
            canonical_url=self._absolute_url(self.post_url(post)),
        )
        return self._render_entry(seo, post.body_html)

    def render_record(self, record: ContentRecord) -> str:
        """
        Render a page straight from a content query result.

        Args:
            record: {frontmatter, html} as returned by ContentStore.query

        Returns:
            Rendered HTML page. The canonical link is only emitted when the
            record carries a slug.
        """
        slug = record.slug or record.frontmatter.slug
        seo = SeoMeta(
            title=record.frontmatter.title,
            description=record.frontmatter.description or self.site.description,
            canonical_url=self._absolute_url(f"/{self.blog_path}/{slug}/") if slug else "",
        )
        return self._render_entry(seo, record.html)

    def render_by_id(self, store: ContentStore, post_id: str) -> str:
        """Query the store for an id and render the resulting post."""
        return self.render(store.get(post_id))

    def render_index(self, posts: Iterable[Post], title: str = "Blog") -> str:
        """
        Render the blog listing page.

        Args:
            posts: Posts in display order
            title: Page heading and SEO title

        Returns:
            Rendered HTML page
        """
        entries = [
            IndexEntry(
                title=p.title,
                url=self.post_url(p),
                date=p.date.isoformat() if p.date else "",
                description=p.description,
            )
            for p in posts
        ]
        template = self.env.get_template(self.INDEX_TEMPLATE)
        return template.render(
            title=title,
            description=self.site.description,
            canonical_url=self._absolute_url(f"/{self.blog_path}/"),
            og_type="website",
            posts=entries,
            site=self.site,
            blog_path=self.blog_path,
        )

    def post_url(self, post: Post) -> str:
        """Site-relative URL of a post page."""
        return f"/{self.blog_path}/{post.slug}/"

    def _render_entry(self, seo: SeoMeta, body_html: str) -> str:
        page = EntryPage(
            seo=seo,
            body_html=body_html,
            site=self.site,
            blog_path=self.blog_path,
        )
        template = self.env.get_template(self.ENTRY_TEMPLATE)
        return template.render(**page.to_template_context())

    def _absolute_url(self, path: str) -> str:
        if not self.site.site_url:
            return ""
        return self.site.site_url.rstrip("/") + path


def render_entry(post: Post) -> str:
    """
    Convenience function to render a post page.

    Args:
        post: Post from the content store

    Returns:
        Rendered HTML page
    """
    renderer = EntryRenderer()
    return renderer.render(post)
