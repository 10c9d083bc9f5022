"""YAML front-matter splitting for markdown sources."""

from __future__ import annotations

from pathlib import Path

import yaml

from .errors import FrontMatterError

DELIMITER = "---"


def parse_front_matter(text: str, source: Path | str = "<string>") -> tuple[dict, str]:
    """Split a leading ``---`` YAML block from the markdown body.

    Args:
        text: Raw file contents
        source: Path used in error messages

    Returns:
        (metadata dict, body). Text without an opening and closing
        delimiter yields an empty dict and the text unchanged.

    Raises:
        FrontMatterError: YAML is invalid or is not a mapping
    """
    clean = text.lstrip("\ufeff")
    lines = clean.splitlines(keepends=True)
    if not lines or lines[0].strip() != DELIMITER:
        return {}, clean

    end = None
    for i in range(1, len(lines)):
        if lines[i].strip() == DELIMITER:
            end = i
            break
    if end is None:
        return {}, clean

    block = "".join(lines[1:end])
    body = "".join(lines[end + 1:])

    try:
        meta = yaml.safe_load(block)
    except yaml.YAMLError as e:
        raise FrontMatterError(source, f"invalid YAML front-matter: {e}") from e

    if meta is None:
        return {}, body
    if not isinstance(meta, dict):
        raise FrontMatterError(source, "front-matter must be a mapping")
    return meta, body
