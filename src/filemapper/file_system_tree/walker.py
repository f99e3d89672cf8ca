"""Depth-first directory walk applying the path predicates.

The walk produces the ordered list of accepted paths that every renderer consumes.
Directories that pass the hidden and exclude checks are always kept and always
descended, whatever the include patterns say; only files are subject to the
tracked-file, include and binary filters.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import AbstractSet, Iterator, List, Optional

from filemapper.config import MapperConfig
from filemapper.exclusion_rules.pattern_rules import NamePatternRules
from filemapper.file_system_tree.path_predicates import is_binary_file, is_hidden, matches_include, should_exclude
from filemapper.types import EntryKind, PathType

logger = logging.getLogger(__name__)


def join_root(root: PathType, relative_path: str) -> str:
    """Return the display path for an entry: ``relative_path`` joined onto ``root``, normalized.

    Example:
        >>> join_root(".", "src/main.py")
        'src/main.py'
        >>> join_root("/tmp/project/", "docs")
        '/tmp/project/docs'
    """
    return os.path.normpath(os.path.join(os.fspath(root), relative_path))


@dataclass(frozen=True)
class AcceptedPath:
    """A filesystem entry that survived every filter.

    Attributes:
        path: Root-joined display path.
        relative_path: Slash-separated path relative to the walk root.
        kind: Whether the entry is a file or a directory, captured when it was visited.
    """

    path: str
    relative_path: str
    kind: EntryKind

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def name(self) -> str:
        return self.relative_path.rsplit("/", 1)[-1]


class DirectoryWalker:
    """Pre-order walk of a root directory, in lexical order within each directory.

    The root itself is never emitted. Symbolic links are never descended into: a
    link is treated as a file and must still pass the file filters, which a link to
    a directory or a dangling link never does.

    Any error raised while listing a directory or inspecting an entry aborts the
    whole walk; there is no skip-and-continue.

    Attributes:
        config (MapperConfig): The run configuration.
        tracked_files (Optional[AbstractSet[str]]): Slash-separated root-relative paths
            files must belong to, or None to accept untracked files.

    Example:
        >>> walker = DirectoryWalker(MapperConfig(root_path="src"))  # doctest: +SKIP
        >>> [p.relative_path for p in walker.walk()]  # doctest: +SKIP
        ['filemapper', 'filemapper/__init__.py', 'filemapper/assembler.py']
    """

    def __init__(self, config: MapperConfig, tracked_files: Optional[AbstractSet[str]] = None) -> None:
        self.config = config
        self.tracked_files = tracked_files
        self.root = os.fspath(config.root_path)
        self._include_rules = NamePatternRules(config.include)
        self._exclude_rules = NamePatternRules(config.exclude)

    def walk(self) -> List[AcceptedPath]:
        """Walk the root and return the accepted paths in traversal order.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
            PermissionError: If a directory cannot be listed.
            OSError: For any other failure while traversing.
        """
        root_path = Path(self.root)
        if not root_path.exists():
            raise FileNotFoundError(f"Root path does not exist: {self.root}")
        if not root_path.is_dir():
            raise NotADirectoryError(f"Root path is not a directory: {self.root}")

        return list(self._walk_directory(self.root, ""))

    def _walk_directory(self, directory: str, relative_dir: str) -> Iterator[AcceptedPath]:
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except PermissionError as e:
            raise PermissionError(f"Access denied to {directory}: {e}") from e

        for entry in entries:
            relative_path = f"{relative_dir}/{entry.name}" if relative_dir else entry.name
            is_dir = entry.is_dir(follow_symlinks=False)

            if is_hidden(entry.path, self.root):
                logger.debug("Skipping hidden %s", relative_path)
                continue
            if should_exclude(entry.name, is_dir, self._exclude_rules):
                logger.debug("Skipping excluded %s", relative_path)
                continue

            if is_dir:
                yield AcceptedPath(join_root(self.root, relative_path), relative_path, EntryKind.DIRECTORY)
                yield from self._walk_directory(entry.path, relative_path)
            elif self._accept_file(entry, relative_path):
                yield AcceptedPath(join_root(self.root, relative_path), relative_path, EntryKind.FILE)

    def _accept_file(self, entry: os.DirEntry, relative_path: str) -> bool:
        if self.tracked_files is not None and relative_path not in self.tracked_files:
            logger.debug("Skipping untracked %s", relative_path)
            return False
        if not matches_include(entry.name, self._include_rules):
            return False
        # FIFOs, sockets and links to directories count as binary
        if not entry.is_file() or is_binary_file(entry.path):
            logger.debug("Skipping binary or unreadable %s", relative_path)
            return False
        return True


def walk(config: MapperConfig, tracked_files: Optional[AbstractSet[str]] = None) -> List[AcceptedPath]:
    """Walk ``config.root_path`` and return every accepted path in traversal order.

    Args:
        config: The run configuration.
        tracked_files: When given, files whose slash-separated root-relative path is
            not a member are skipped. Directories are unaffected.

    Returns:
        Accepted files and directories, pre-order, lexical within each directory.
    """
    return DirectoryWalker(config, tracked_files).walk()
