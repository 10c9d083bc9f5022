# Entry Renderer
# Jinja2 page templates: shared layout, SEO block, post body

from .models import EntryPage, IndexEntry, SeoMeta
from .renderer import EntryRenderer, render_entry

__all__ = [
    "EntryPage",
    "EntryRenderer",
    "IndexEntry",
    "SeoMeta",
    "render_entry",
]
