"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules. Tests never
touch the user's real trash: the ``local_fs`` fixture moves trashed
entries into a per-test directory instead.
"""

import os
from collections.abc import Callable
from pathlib import Path

import pytest
from rmtrash.core.confirmation import Question, StaticAnswer
from rmtrash.core.trash import Trash
from rmtrash.filesystem.local import LocalFileSystem
from rmtrash.models.config import InteractiveMode, RemovalConfig

# Nested description of a directory tree: a dict is a directory, a str is
# file content.
Tree = dict[str, "Tree | str"]


class RenamingFileSystem(LocalFileSystem):
    """LocalFileSystem whose trash is a plain directory.

    Attributes:
        trash_dir: Directory receiving trashed entries.
        trashed: Absolute paths passed to trash_item, in order.
    """

    def __init__(self, trash_dir: Path) -> None:
        self.trash_dir = trash_dir
        self.trashed: list[str] = []

    def trash_item(self, path: str) -> None:
        self.trashed.append(path)
        destination = self.trash_dir / f"{len(self.trashed)}-{os.path.basename(path)}"
        os.rename(path, destination)


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """Empty working directory for removal tests."""
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture
def local_fs(tmp_path: Path) -> RenamingFileSystem:
    """Real filesystem provider with a throwaway trash directory."""
    trash_dir = tmp_path / "trash"
    trash_dir.mkdir()
    return RenamingFileSystem(trash_dir)


MakeTrash = Callable[..., Trash]


@pytest.fixture
def make_trash(local_fs: RenamingFileSystem, workdir: Path) -> MakeTrash:
    """Factory building a Trash bound to the working directory.

    Keyword arguments are RemovalConfig fields plus ``question``. Defaults
    follow the command line: force on, preserve_root on, never prompt.
    """

    def factory(
        *,
        question: Question | None = None,
        interactive_mode: InteractiveMode = InteractiveMode.NEVER,
        force: bool = True,
        recursive: bool = False,
        empty_dirs: bool = False,
        preserve_root: bool = True,
        one_file_system: bool = False,
        verbose: bool = False,
        echo: Callable[[str], None] | None = None,
    ) -> Trash:
        config = RemovalConfig(
            interactive_mode=interactive_mode,
            force=force,
            recursive=recursive,
            empty_dirs=empty_dirs,
            preserve_root=preserve_root,
            one_file_system=one_file_system,
            verbose=verbose,
        )
        return Trash(
            config,
            question or StaticAnswer(True),
            file_system=local_fs,
            working_dir=workdir,
            echo=echo,
        )

    return factory


def create_tree(root: Path, tree: Tree) -> None:
    """Create files and directories described by tree under root."""
    for name, node in tree.items():
        path = root / name
        if isinstance(node, dict):
            path.mkdir()
            create_tree(path, node)
        else:
            path.write_text(node)


def read_tree(root: Path) -> Tree:
    """Read the tree under root (symlinks are reported as their target)."""
    tree: Tree = {}
    for path in sorted(root.iterdir()):
        if path.is_symlink():
            tree[path.name] = f"-> {os.readlink(path)}"
        elif path.is_dir():
            tree[path.name] = read_tree(path)
        else:
            tree[path.name] = path.read_text()
    return tree
