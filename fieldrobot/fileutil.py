"""Small file-system helpers."""

from __future__ import annotations

import os
from typing import Iterable

__all__ = ["search_file_with_extension", "remove_characters"]


def remove_characters(text: str, chars: Iterable[str]) -> str:
    """Return ``text`` with every occurrence of the given characters removed."""
    for c in chars:
        text = text.replace(c, "")
    return text


def search_file_with_extension(directory: str, ext: str) -> str:
    """Find a file with extension ``ext`` anywhere below ``directory``.

    Returns ``directory/<file name>`` for the first match, or ``""`` when none is found.
    """
    directory = str(directory)
    for root, dirs, files in os.walk(directory):
        dirs.sort()
        for name in sorted(files):
            if not os.path.isfile(os.path.join(root, name)):
                continue
            if os.path.splitext(name)[1] == ext:
                return f"{directory}/{remove_characters(name, '\"')}"
    return ""