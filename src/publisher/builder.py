"""Static site builder — content store to HTML files on disk.

Usage:
    builder = SiteBuilder()
    result = builder.build()
"""

from __future__ import annotations

import shutil
from pathlib import Path

from src.common.config import settings
from src.common.logging import setup_logging
from src.content.store import ContentStore
from src.renderer import EntryRenderer

from .models import BuildResult

logger = setup_logging(module_name="publisher.builder")


class SiteBuilder:
    """Writes one page per post plus the blog index.

    Layout:
        <output>/<blog_path>/<slug>/index.html
        <output>/<blog_path>/index.html
    """

    def __init__(
        self,
        store: ContentStore | None = None,
        renderer: EntryRenderer | None = None,
        output_dir: Path | None = None,
    ):
        self.store = store or ContentStore()
        self.renderer = renderer or EntryRenderer()
        self.output_dir = Path(output_dir or settings.build.output_dir)

    @property
    def blog_dir(self) -> Path:
        return self.output_dir / self.renderer.blog_path

    def build(self, clean: bool | None = None) -> BuildResult:
        """Render every post and the index page to the output directory.

        Args:
            clean: Remove the blog output directory first. Defaults to
                the build settings.

        Returns:
            BuildResult listing the written files
        """
        if clean is None:
            clean = settings.build.clean

        posts = self.store.posts()

        if clean and self.blog_dir.exists():
            logger.info("Removing stale output %s", self.blog_dir)
            shutil.rmtree(self.blog_dir)

        result = BuildResult(output_dir=str(self.output_dir))

        for post in posts:
            path = self.blog_dir / post.slug / "index.html"
            self._write(path, self.renderer.render(post))
            result.written.append(str(path))
            logger.debug("Wrote %s (%s)", path, post.id)

        index_path = self.blog_dir / "index.html"
        self._write(index_path, self.renderer.render_index(posts))
        result.written.append(str(index_path))
        result.index_path = str(index_path)
        result.post_count = len(posts)

        logger.info("Build complete: %d posts written to %s", len(posts), self.blog_dir)
        return result

    def _write(self, path: Path, content: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
