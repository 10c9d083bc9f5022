"""Shared test fixtures for the blog renderer."""

import sys
from pathlib import Path

import pytest

# Ensure src is importable
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.common.config import SiteSettings
from src.content import ContentStore
from src.renderer import EntryRenderer


MOCKING_POST = """---
title: Mocking open() in Python tests
date: 2021-03-14
description: Patch builtins.open with mock_open
---

Use `mock_open` to fake file reads.

```python
with patch("builtins.open", mock_open(read_data="data")):
    assert read_config() == "data"
```
"""

FIXTURES_POST = """---
title: Pytest fixtures at a glance
date: 2022-07-01
slug: pytest-fixtures
---

Fixtures are *functions* that pytest injects.
"""

UNDATED_POST = """---
title: About this blog
---

Notes on testing and tooling.
"""

DRAFT_POST = """---
title: Work in progress
draft: true
---

Not ready.
"""


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def content_dir(tmp_path) -> Path:
    """Provide a content directory with a few sample posts."""
    root = tmp_path / "content"
    (root / "2021").mkdir(parents=True)
    (root / "2021" / "mocking-open.md").write_text(MOCKING_POST, encoding="utf-8")
    (root / "fixtures.md").write_text(FIXTURES_POST, encoding="utf-8")
    (root / "about.md").write_text(UNDATED_POST, encoding="utf-8")
    (root / "wip.md").write_text(DRAFT_POST, encoding="utf-8")
    return root


@pytest.fixture
def store(content_dir) -> ContentStore:
    """Provide a loaded ContentStore over the sample content."""
    return ContentStore(
        content_dir=content_dir,
        markdown_extensions=["fenced_code", "tables"],
        include_drafts=False,
    ).load()


@pytest.fixture
def site() -> SiteSettings:
    return SiteSettings(
        title="Test Site",
        description="A site used in tests",
        author="Test Author",
        site_url="https://example.com",
    )


@pytest.fixture
def renderer(site) -> EntryRenderer:
    return EntryRenderer(site=site, blog_path="blog")
