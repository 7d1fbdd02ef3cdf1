"""Filesystem helpers shared by the storage services."""

import os
from collections import deque
from pathlib import Path
from typing import Iterator


def iter_regular_files(root: Path) -> Iterator[os.DirEntry]:
    """Yield every regular file below ``root``.

    Walks with an explicit work-list of directories rather than recursion,
    so tree depth never touches the call stack. Entries are visited in
    name order; symlinks are not followed. A missing root yields nothing,
    while an unreadable directory raises ``OSError``.
    """
    if not root.is_dir():
        return

    pending = deque([root])
    while pending:
        directory = pending.popleft()
        with os.scandir(directory) as entries:
            children = sorted(entries, key=lambda entry: entry.name)

        for entry in children:
            if entry.is_dir(follow_symlinks=False):
                pending.append(Path(entry.path))
            elif entry.is_file(follow_symlinks=False):
                yield entry


def remove_file(path: Path) -> bool:
    """Delete a file if present. Returns whether something was removed."""
    try:
        path.unlink()
    except FileNotFoundError:
        return False
    return True
