"""
File Lister — Resolves a root directory to the list of files to scan.
"""

from __future__ import annotations

from pathlib import Path


def list_source_files(root: str, pattern: str = "*.php", recursive: bool = True) -> list[str]:
    """Files under ``root`` matching ``pattern``, sorted for stable output.

    Returns an empty list when ``root`` is not a directory.
    """
    base = Path(root)
    if not base.is_dir():
        return []

    matches = base.rglob(pattern) if recursive else base.glob(pattern)
    return sorted(str(path) for path in matches if path.is_file())
