"""CLI entry point for building the blog.

Usage:
    python -m src.publisher.main build --output public
    python -m src.publisher.main list
    python -m src.publisher.main render --id <post-id>
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from src.common.config import settings
from src.common.logging import setup_logging
from src.content import ContentError, ContentStore
from src.renderer import EntryRenderer

from .builder import SiteBuilder

logger = setup_logging(module_name="publisher.main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render markdown blog posts to HTML")
    parser.add_argument(
        "--content-dir",
        type=Path,
        default=Path(settings.content.content_dir),
        help="Directory holding markdown posts",
    )
    parser.add_argument(
        "--drafts",
        action="store_true",
        help="Include posts marked draft: true",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    build = sub.add_parser("build", help="Write every post and the index page")
    build.add_argument(
        "--output",
        type=Path,
        default=Path(settings.build.output_dir),
        help="Output directory for the generated site",
    )
    build.add_argument(
        "--clean",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Remove previously generated blog pages first (default: build.clean setting)",
    )

    render = sub.add_parser("render", help="Render one post page by id")
    render.add_argument("--id", required=True, dest="post_id", help="Post id")
    render.add_argument("--output", type=Path, help="Write to file instead of stdout")

    sub.add_parser("list", help="List post ids, slugs and titles")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    store = ContentStore(
        content_dir=args.content_dir,
        include_drafts=args.drafts or None,
    )
    renderer = EntryRenderer()

    try:
        if args.command == "build":
            builder = SiteBuilder(store=store, renderer=renderer, output_dir=args.output)
            result = builder.build(clean=args.clean)
            print(f"\nBuilt {result.post_count} posts: {result.index_path}")

        elif args.command == "render":
            html = renderer.render_by_id(store, args.post_id)
            if args.output:
                args.output.parent.mkdir(parents=True, exist_ok=True)
                args.output.write_text(html, encoding="utf-8")
                logger.info("Post page written to: %s", args.output)
            else:
                sys.stdout.write(html)

        elif args.command == "list":
            for post in store.posts():
                date = post.date.isoformat() if post.date else "-"
                print(f"{post.id}  {date:10}  {post.slug}  {post.title}")

    except (ContentError, FileNotFoundError) as e:
        logger.error("%s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
