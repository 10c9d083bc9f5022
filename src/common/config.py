"""Project configuration and paths.

Loads settings from config/settings.yaml and environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

# === Paths ===
PROJECT_ROOT = Path(__file__).parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"
CONTENT_DIR = PROJECT_ROOT / "content" / "blog"
OUTPUT_DIR = PROJECT_ROOT / "public"

# Load .env from project root
load_dotenv(PROJECT_ROOT / ".env")


class SiteSettings(BaseModel):
    """Site-wide metadata shared by the layout and SEO block."""
    title: str = "Notes"
    description: str = "Personal technical blog"
    author: str = ""
    site_url: str = ""
    lang: str = "en"


class ContentSettings(BaseModel):
    """Where markdown posts live and how they are converted."""
    content_dir: str = str(CONTENT_DIR)
    markdown_extensions: list[str] = Field(
        default_factory=lambda: ["fenced_code", "tables"]
    )
    include_drafts: bool = False


class BuildSettings(BaseModel):
    """Output settings for static site builds."""
    output_dir: str = str(OUTPUT_DIR)
    blog_path: str = "blog"
    clean: bool = False


class Settings(BaseModel):
    """Top-level application settings."""
    site: SiteSettings = Field(default_factory=SiteSettings)
    content: ContentSettings = Field(default_factory=ContentSettings)
    build: BuildSettings = Field(default_factory=BuildSettings)

    @classmethod
    def load(cls, settings_path: Path | None = None) -> Settings:
        """Load settings from config/settings.yaml, falling back to defaults.

        BLOG_CONTENT_DIR and BLOG_OUTPUT_DIR override the file values.
        """
        settings_path = settings_path or CONFIG_DIR / "settings.yaml"
        data: dict = {}
        if settings_path.exists():
            with open(settings_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}

        loaded = cls(**data)

        content_dir = os.getenv("BLOG_CONTENT_DIR", "")
        if content_dir:
            loaded.content.content_dir = content_dir
        output_dir = os.getenv("BLOG_OUTPUT_DIR", "")
        if output_dir:
            loaded.build.output_dir = output_dir
        return loaded


# Singleton settings instance
settings = Settings.load()
