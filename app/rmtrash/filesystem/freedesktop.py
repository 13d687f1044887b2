"""Freedesktop.org home trash for dangling symbolic links.

send2trash refuses a symbolic link whose target is missing, because its
existence check follows the link. Such links are moved into the home
trash here instead, using the same layout:

- $XDG_DATA_HOME/Trash/files/<name>: the trashed entry
- $XDG_DATA_HOME/Trash/info/<name>.trashinfo: original path and date

Only the home trash is used, so the link must live on the same
filesystem as the home trash.
"""

import logging
import os
import sys
from collections.abc import Iterator
from datetime import datetime
from itertools import count
from pathlib import Path
from urllib.parse import quote

logger = logging.getLogger(__name__)

INFO_SUFFIX = ".trashinfo"

# send2trash uses the freedesktop.org trash everywhere except these.
USES_FREEDESKTOP_TRASH = sys.platform not in ("darwin", "win32")


def get_home_trash_dir() -> Path:
    """Get the home trash directory.

    Returns:
        Path to ~/.local/share/Trash (or XDG_DATA_HOME/Trash).
    """
    base = os.environ.get("XDG_DATA_HOME")
    if base:
        return Path(base) / "Trash"
    return Path.home() / ".local" / "share" / "Trash"


def _trash_names(name: str) -> Iterator[str]:
    """Yield candidate names: the original name, then numbered variants."""
    yield name
    stem, ext = os.path.splitext(name)
    for n in count(2):
        yield f"{stem} {n}{ext}"


def move_to_home_trash(path: str) -> Path:
    """Move an entry into the home trash without following it.

    The info file is created exclusively before the entry is moved, so
    concurrent trash operations never pick the same name.

    Args:
        path: Absolute path of the entry, with no symlinks in its parent.

    Returns:
        Location of the entry inside the trash.

    Raises:
        OSError: If the trash cannot be created or the entry cannot be
            moved (for example across filesystems).
    """
    trash_dir = get_home_trash_dir()
    files_dir = trash_dir / "files"
    info_dir = trash_dir / "info"
    files_dir.mkdir(mode=0o700, parents=True, exist_ok=True)
    info_dir.mkdir(mode=0o700, parents=True, exist_ok=True)

    deletion_date = datetime.now().strftime("%Y-%m-%dT%H:%M:%S")
    info = f"[Trash Info]\nPath={quote(path, safe='/')}\nDeletionDate={deletion_date}\n"

    names = _trash_names(os.path.basename(path))
    while True:
        name = next(names)
        info_path = info_dir / f"{name}{INFO_SUFFIX}"
        try:
            fd = os.open(info_path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o600)
        except FileExistsError:
            continue
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(info)

        destination = files_dir / name
        if os.path.lexists(destination):
            info_path.unlink()
            continue

        try:
            os.rename(path, destination)
        except OSError:
            info_path.unlink()
            raise
        logger.debug("Moved %s to %s", path, destination)
        return destination
