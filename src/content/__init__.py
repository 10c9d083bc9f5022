# Content Store
"""
Markdown posts with YAML front-matter, addressed by generated ids.
"""

from .errors import ContentError, DuplicateSlugError, FrontMatterError, PostNotFoundError
from .frontmatter import parse_front_matter
from .models import ContentRecord, FrontMatter, Post
from .store import ContentStore, make_post_id, slugify

__all__ = [
    "ContentError",
    "ContentRecord",
    "ContentStore",
    "DuplicateSlugError",
    "FrontMatter",
    "FrontMatterError",
    "Post",
    "PostNotFoundError",
    "make_post_id",
    "parse_front_matter",
    "slugify",
]
