"""File set resolution.

Turns command-line names and wildcard patterns into the ordered, duplicate
free list of paths the checker walks through.
"""

from __future__ import annotations

import glob
import os
from collections.abc import Iterable
from pathlib import Path

from sumcheck.constants import CURRENT_DIR_PREFIXES, GLOB_CHARACTERS
from sumcheck.core.models import FileTarget
from sumcheck.logger import get_logger

logger = get_logger(__name__)


def is_glob_pattern(name: str) -> bool:
    """Return True when a name contains a wildcard character."""
    return any(char in name for char in GLOB_CHARACTERS)


def _strip_current_dir(path: str) -> str:
    for prefix in CURRENT_DIR_PREFIXES:
        if path.startswith(prefix):
            return path[len(prefix) :]
    return path


def _expand_pattern(pattern: str, cwd: Path | None) -> list[str]:
    """Expand one wildcard pattern to regular files, sorted by name.

    Matching is a single directory level; ``**`` is not recursive.
    Dotfiles match like any other name.
    """
    root = cwd or Path.cwd()
    matches = [
        _strip_current_dir(match)
        for match in glob.glob(pattern, root_dir=root, include_hidden=True)
        if os.path.isfile(os.path.join(root, match))
    ]
    return sorted(matches)


def resolve_file_set(
    patterns: Iterable[str], cwd: Path | None = None
) -> list[FileTarget]:
    """Resolve names and wildcard patterns into file targets.

    Literal names pass through verbatim, even when they do not exist: the
    caller reports missing files. Patterns that match nothing contribute
    nothing. Duplicates keep the position of their first occurrence.

    Args:
        patterns: Names and patterns in command-line order
        cwd: Directory patterns are matched against (default: current)

    Returns:
        Ordered list of file targets

    """
    resolved: dict[str, FileTarget] = {}

    for pattern in patterns:
        if is_glob_pattern(pattern):
            names = _expand_pattern(pattern, cwd)
            if not names:
                logger.debug("Pattern %s matched no files", pattern)
        else:
            names = [pattern]

        for name in names:
            resolved.setdefault(name, FileTarget(name))

    return list(resolved.values())
