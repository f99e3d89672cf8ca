"""Lookup of the files git considers tracked below a directory."""

import logging
import os
import subprocess
from typing import FrozenSet

from filemapper.exceptions import TrackedFilesError
from filemapper.types import PathType

logger = logging.getLogger(__name__)


def get_tracked_files(root: PathType) -> FrozenSet[str]:
    """Return the paths ``git ls-files`` reports when run inside ``root``.

    Paths are relative to ``root`` and slash-separated, matching the relative paths
    produced by the walk. The NUL-separated listing is used so that names with
    spaces or non-ASCII characters come back unquoted.

    Args:
        root: Directory inside a git work tree.

    Returns:
        The set of tracked paths.

    Raises:
        TrackedFilesError: If git is missing, ``root`` is not in a work tree, or the
            command fails for any other reason.

    Example:
        >>> sorted(get_tracked_files("."))  # doctest: +SKIP
        ['README.md', 'src/filemapper/__init__.py']
    """
    root_str = os.fspath(root)
    try:
        result = subprocess.run(
            ["git", "ls-files", "-z"],
            cwd=root_str,
            capture_output=True,
            check=True,
        )
    except subprocess.CalledProcessError as e:
        stderr = e.stderr.decode("utf-8", errors="replace").strip() if e.stderr else ""
        raise TrackedFilesError(root_str, stderr or f"git exited with status {e.returncode}") from e
    except OSError as e:
        raise TrackedFilesError(root_str, f"could not run git: {e}") from e

    tracked = frozenset(p for p in result.stdout.decode("utf-8", errors="surrogateescape").split("\0") if p)
    logger.debug("git reports %d tracked files in %s", len(tracked), root_str)
    return tracked
