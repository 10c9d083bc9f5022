# Publisher — static site build and CLI
"""
Publisher module: walks the content store and writes rendered pages
to an output directory.
"""

from .builder import SiteBuilder
from .models import BuildResult

__all__ = [
    "BuildResult",
    "SiteBuilder",
]
