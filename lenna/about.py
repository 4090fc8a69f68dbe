"""Texts shown in the about view: bundled documents, version and online version."""

from __future__ import annotations

import urllib.error
import urllib.request
from pathlib import Path


def load_document(path: str | Path) -> str:
    """The document's lines, each ending in a newline; empty if it cannot be read."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError:
        return ""
    return "".join(f"{line}\n" for line in text.splitlines())


def version_label(version: str, revision: str) -> str:
    """Version and source revision as shown in the about view."""
    return f"{version} - {revision}"


def fetch_online_version(url: str, timeout: float = 10.0) -> str:
    """Body of the document at ``url``; empty if it cannot be fetched."""
    try:
        with urllib.request.urlopen(url, timeout=timeout) as response:
            body = response.read()
    except (urllib.error.URLError, OSError, ValueError):
        return ""
    return body.decode("utf-8", errors="replace")