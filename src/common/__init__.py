# Common utilities and shared modules
"""
Shared components used by the content store, renderer and publisher:
- Project configuration (YAML + .env)
- Logging configuration
"""

from .config import CONTENT_DIR, OUTPUT_DIR, PROJECT_ROOT, Settings, settings
from .logging import setup_logging

__all__ = [
    "settings",
    "Settings",
    "PROJECT_ROOT",
    "CONTENT_DIR",
    "OUTPUT_DIR",
    "setup_logging",
]
