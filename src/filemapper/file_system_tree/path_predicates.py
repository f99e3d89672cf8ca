"""Predicates deciding whether a single path survives the walk.

All functions here are pure apart from is_binary_file(), which reads the first
bytes of the file. None of them raise for a path that merely fails to match.
"""

import os

from filemapper.exclusion_rules.base_rules import BaseExclusionRules
from filemapper.exclusion_rules.pattern_rules import NamePatternRules
from filemapper.file_system_tree.binary_detector import is_binary_file
from filemapper.types import PathType

__all__ = ["is_binary_file", "is_hidden", "matches_include", "should_exclude"]


def is_hidden(path: PathType, root: PathType) -> bool:
    """Return True if any segment of ``path`` relative to ``root`` starts with a dot.

    Only the part below ``root`` is examined, so a root such as ``./.config`` is
    never itself considered hidden.

    Example:
        >>> is_hidden("/fake/root/.secret", "/fake/root")
        True
        >>> is_hidden("/fake/root/folder/.git/config", "/fake/root")
        True
        >>> is_hidden("/fake/root/folder/main.go", "/fake/root")
        False
        >>> is_hidden("/fake/root", "/fake/root")
        False
    """
    try:
        relative = os.path.relpath(path, root)
    except ValueError:
        # Different drives on Windows
        return False
    if relative == os.curdir:
        return False
    return any(part.startswith(".") for part in relative.split(os.sep))


def should_exclude(name: str, is_dir: bool, exclude_rules: BaseExclusionRules) -> bool:
    """Return True if an entry's base name is matched by the exclude rules.

    Args:
        name: Base name of the entry.
        is_dir: Whether the entry is a directory.
        exclude_rules: Rules to consult.

    Example:
        >>> rules = NamePatternRules([".git", "node_modules", "*.env"])
        >>> should_exclude("main.env", False, rules)
        True
        >>> should_exclude("main.go", False, rules)
        False
    """
    return exclude_rules.exclude(name, is_dir)


def matches_include(name: str, include_rules: NamePatternRules) -> bool:
    """Return True if a file's base name passes the include patterns.

    An empty include list matches every name. A malformed pattern never matches.

    Example:
        >>> matches_include("main.go", NamePatternRules(["*.go", "*.md"]))
        True
        >>> matches_include("main.py", NamePatternRules(["*.go", "*.md"]))
        False
        >>> matches_include("anything", NamePatternRules())
        True
    """
    return not include_rules.has_rules() or include_rules.matches(name)
