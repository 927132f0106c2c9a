"""Collecting the demo files to process."""

from __future__ import annotations

import os
from pathlib import Path


def gather_dir(path: str | os.PathLike[str]) -> list[Path]:
    """List demo files.

    A file is read as a list of paths, one per line. A directory is searched
    recursively for files with the ``.dem`` extension.
    """
    root = Path(path)
    if root.is_file():
        lines = root.read_text(encoding="utf-8").split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        return [Path(line.removesuffix("\r")) for line in lines]

    files: list[Path] = []
    with os.scandir(root) as entries:
        for entry in sorted(entries, key=lambda item: item.name):
            if entry.is_dir(follow_symlinks=False):
                files.extend(gather_dir(entry.path))
            elif Path(entry.name).suffix == ".dem":
                files.append(Path(entry.path))
    return files