"""Content store: markdown files resolved to Posts by generated id.

Usage:
    store = ContentStore(Path("content/blog")).load()
    record = store.query(post_id)
"""

from __future__ import annotations

import re
import uuid
from pathlib import Path
from typing import Iterator, Optional

import markdown as md
from pydantic import ValidationError

from src.common.config import settings
from src.common.logging import setup_logging

from .errors import DuplicateSlugError, FrontMatterError, PostNotFoundError
from .frontmatter import parse_front_matter
from .models import ContentRecord, FrontMatter, Post

logger = setup_logging(module_name="content.store")

# Ids are UUIDv5 names under this namespace, keyed by relative source path
ID_NAMESPACE = uuid.uuid5(uuid.NAMESPACE_URL, "markdown-content")


def make_post_id(relative_path: str) -> str:
    """Return the stable id for a content file path (POSIX, relative)."""
    return str(uuid.uuid5(ID_NAMESPACE, relative_path))


def slugify(text: str) -> str:
    text = text.strip().lower()
    text = re.sub(r"[^\w]+", "-", text, flags=re.UNICODE)
    text = text.strip("-_").replace("_", "-")
    return text or "post"


class ContentStore:
    """Loads markdown posts from a directory and answers id queries."""

    def __init__(
        self,
        content_dir: Optional[Path] = None,
        markdown_extensions: Optional[list[str]] = None,
        include_drafts: Optional[bool] = None,
    ):
        if content_dir is None:
            content_dir = Path(settings.content.content_dir)
        if markdown_extensions is None:
            markdown_extensions = list(settings.content.markdown_extensions)
        if include_drafts is None:
            include_drafts = settings.content.include_drafts

        self.content_dir = Path(content_dir)
        self.markdown_extensions = markdown_extensions
        self.include_drafts = include_drafts
        self._posts: dict[str, Post] = {}
        self._slugs: dict[str, str] = {}
        self._loaded = False

    def load(self) -> ContentStore:
        """Scan the content directory and build one Post per markdown file.

        Raises:
            FileNotFoundError: content directory does not exist
            FrontMatterError: a file has invalid or incomplete front-matter
            DuplicateSlugError: two files share a slug
        """
        if not self.content_dir.is_dir():
            raise FileNotFoundError(f"Content directory not found: {self.content_dir}")

        posts: dict[str, Post] = {}
        slugs: dict[str, str] = {}
        skipped = 0

        for path in sorted(self.content_dir.rglob("*.md")):
            post = self._load_file(path)
            if post is None:
                skipped += 1
                continue
            if post.slug in slugs:
                raise DuplicateSlugError(
                    post.slug, posts[slugs[post.slug]].source_path, post.source_path,
                )
            posts[post.id] = post
            slugs[post.slug] = post.id

        self._posts = posts
        self._slugs = slugs
        self._loaded = True
        logger.info(
            "Loaded %d posts from %s (%d drafts skipped)",
            len(posts), self.content_dir, skipped,
        )
        return self

    def query(self, post_id: str) -> ContentRecord:
        """Resolve an id to its front-matter and rendered HTML."""
        return ContentRecord.from_post(self.get(post_id))

    def get(self, post_id: str) -> Post:
        self._ensure_loaded()
        try:
            return self._posts[post_id]
        except KeyError:
            raise PostNotFoundError(post_id) from None

    def get_by_slug(self, slug: str) -> Post:
        self._ensure_loaded()
        post_id = self._slugs.get(slug)
        if post_id is None:
            raise PostNotFoundError(slug, kind="slug")
        return self._posts[post_id]

    def posts(self) -> list[Post]:
        """All posts, newest first; undated posts last, then by title."""
        self._ensure_loaded()
        dated = sorted(
            (p for p in self._posts.values() if p.date is not None),
            key=lambda p: (-p.date.toordinal(), p.title),
        )
        undated = sorted(
            (p for p in self._posts.values() if p.date is None),
            key=lambda p: p.title,
        )
        return dated + undated

    def __iter__(self) -> Iterator[Post]:
        return iter(self.posts())

    def __len__(self) -> int:
        self._ensure_loaded()
        return len(self._posts)

    def __contains__(self, post_id: object) -> bool:
        self._ensure_loaded()
        return post_id in self._posts

    # --- Internal ---

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            self.load()

    def _load_file(self, path: Path) -> Optional[Post]:
        relative = path.relative_to(self.content_dir).as_posix()
        text = path.read_text(encoding="utf-8")
        meta, body = parse_front_matter(text, source=relative)

        try:
            front = FrontMatter.model_validate(meta)
        except ValidationError as e:
            fields = ", ".join(
                ".".join(str(part) for part in err["loc"]) or "front-matter"
                for err in e.errors()
            )
            raise FrontMatterError(relative, f"invalid front-matter field(s): {fields}") from e

        if front.draft and not self.include_drafts:
            logger.debug("Skipping draft %s", relative)
            return None

        html = md.markdown(body, extensions=self.markdown_extensions)

        return Post(
            id=make_post_id(relative),
            title=front.title,
            body_html=html,
            slug=slugify(front.slug or path.stem),
            source_path=relative,
            date=front.date,
            description=front.description,
            frontmatter=front.model_dump(),
        )
