"""Base-name glob rules backed by pathspec."""

import logging
from typing import Iterable, List, Optional

from pathspec import PathSpec

from .base_rules import BaseExclusionRules

logger = logging.getLogger(__name__)


def has_unbalanced_bracket(pattern: str) -> bool:
    """Return True if ``pattern`` opens a character class that is never closed or is empty.

    Backslash-escaped characters are skipped, so ``\\[`` is a literal bracket.

    Example:
        >>> has_unbalanced_bracket("[abc")
        True
        >>> has_unbalanced_bracket("[]")
        True
        >>> has_unbalanced_bracket("[!a-z]?.txt")
        False
        >>> has_unbalanced_bracket("\\\\[abc")
        False
    """
    i, n = 0, len(pattern)
    while i < n:
        c = pattern[i]
        if c == "\\":
            i += 2
            continue
        if c == "[":
            j = i + 1
            if j < n and pattern[j] in "!^":
                j += 1
            start = j
            while j < n and pattern[j] != "]":
                j += 2 if pattern[j] == "\\" else 1
            if j >= n or j == start:
                return True
            i = j + 1
            continue
        i += 1
    return False


def compile_pattern(pattern: str) -> Optional[PathSpec]:
    """Compile one glob pattern, or return None if it is malformed.

    The pattern is compiled on its own with pathspec's gitignore syntax. A leading
    ``!`` or ``#`` is escaped first, so it is matched literally instead of acting
    as a negation or a comment.

    Example:
        >>> compile_pattern("#*").match_file("#notes")
        True
        >>> compile_pattern("!main.env").match_file("!main.env")
        True
        >>> compile_pattern("[abc") is None
        True
        >>> compile_pattern("abc\\\\") is None
        True
    """
    if has_unbalanced_bracket(pattern):
        logger.debug("Ignoring malformed pattern %r: unbalanced '['", pattern)
        return None
    line = "\\" + pattern if pattern.startswith(("!", "#")) else pattern
    try:
        spec = PathSpec.from_lines("gitignore", [line])
    except ValueError as e:
        logger.debug("Ignoring malformed pattern %r: %s", pattern, e)
        return None
    return spec


class NamePatternRules(BaseExclusionRules):
    """Glob rules matched against the base name of a file or directory.

    Patterns use shell-style wildcards (``*``, ``?``, ``[abc]``, ``[0-9]``) and are
    matched case-sensitively against the entry's base name only, never against the
    full relative path. A name matches the rules if it matches any single
    pattern; patterns never cancel each other out. A pattern ending in ``/`` only
    matches directories.

    Each pattern is compiled separately. A malformed pattern (an unclosed ``[``
    or a trailing backslash) is kept in ``patterns`` but logged and never matches.

    The same class serves both include lists (through matches()) and exclude lists
    (through exclude(), which additionally treats a base name equal to a pattern
    verbatim as a match).

    Attributes:
        patterns (List[str]): The raw patterns, in the order added.
        specs (List[PathSpec]): One compiled matcher per valid pattern.

    Example:
        >>> rules = NamePatternRules([".git", "node_modules", "*.env"])
        >>> rules.exclude("main.env")
        True
        >>> rules.exclude("node_modules", is_dir=True)
        True
        >>> rules.exclude("main.go")
        False
        >>> NamePatternRules(["*.go", "*.md"]).matches("main.py")
        False
    """

    def __init__(self, patterns: Optional[Iterable[str]] = None) -> None:
        """Initialize NamePatternRules with an optional sequence of patterns.

        Args:
            patterns: Glob patterns to add, in order. Defaults to no patterns.
        """
        self.patterns: List[str] = []
        self.specs: List[PathSpec] = []

        if patterns is not None:
            for pattern in patterns:
                self.add_rule(pattern)

    def add_rule(self, rule: str) -> None:
        """Add a single glob pattern.

        Args:
            rule: A glob pattern such as ``"*.py"`` or ``"build/"``.

        Example:
            >>> rules = NamePatternRules()
            >>> rules.has_rules()
            False
            >>> rules.add_rule("*.log")
            >>> rules.matches("app.log")
            True
        """
        self.patterns.append(rule)
        spec = compile_pattern(rule)
        if spec is not None:
            self.specs.append(spec)

    def has_rules(self) -> bool:
        """Return True if at least one pattern was added, valid or not."""
        return bool(self.patterns)

    def matches(self, name: str, is_dir: bool = False) -> bool:
        """Check whether a base name glob-matches any of the patterns.

        Args:
            name: Base name of the entry.
            is_dir: Whether the entry is a directory, which lets ``name/`` patterns match.

        Returns:
            True if the name is matched.

        Example:
            >>> rules = NamePatternRules(["build/", "[ab]?.txt"])
            >>> rules.matches("build")
            False
            >>> rules.matches("build", is_dir=True)
            True
            >>> rules.matches("a1.txt")
            True
            >>> rules.matches("c1.txt")
            False
        """
        return any(spec.match_file(name) or (is_dir and spec.match_file(name + "/")) for spec in self.specs)

    def exclude(self, name: str, is_dir: bool = False) -> bool:
        """Check whether an entry is excluded by glob match or by verbatim equality.

        Args:
            name: Base name of the entry.
            is_dir: Whether the entry is a directory.

        Returns:
            True if the name matches a pattern or equals one exactly.
        """
        return name in self.patterns or self.matches(name, is_dir)
