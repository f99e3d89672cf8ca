"""Run configuration for filemapper.

The configuration is an immutable record produced by the command-line front end
(or built directly by library callers) and consumed, unchanged, by the walk and
the renderers.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from filemapper.types import PathType


def split_patterns(patterns: Optional[str]) -> Tuple[str, ...]:
    """Split a comma-separated pattern list into individual glob patterns.

    Each element is trimmed of surrounding whitespace. Empty elements are dropped, so
    an empty or missing string yields an empty tuple, which means "no patterns".

    Args:
        patterns: Comma-separated patterns such as ``"*.py, *.md"``, or None.

    Returns:
        The patterns in the order given.

    Example:
        >>> split_patterns("*.go, *.md")
        ('*.go', '*.md')
        >>> split_patterns("")
        ()
        >>> split_patterns(".git,,node_modules ")
        ('.git', 'node_modules')
    """
    if not patterns:
        return ()
    return tuple(part.strip() for part in patterns.split(",") if part.strip())


@dataclass(frozen=True)
class MapperConfig:
    """All options controlling a single filemapper run.

    Attributes:
        root_path: Directory to walk. Displayed paths are joined onto it.
        include: Glob patterns a file's base name must match (empty tuple matches all).
        exclude: Glob patterns that prune a file or a whole directory by base name.
        git_tracked_only: Restrict files to those reported by ``git ls-files``.
        show_tree: Render an indented tree (True) or a flat path list (False).
        show_content: Include the content of each text file.
        separate_content: Put all content after the listing instead of inline.
        output: Optional output file path; None means standard output.
        show_line_numbers: Prefix each content line with a 4-wide line number.
        show_header_footers: Wrap each content block in start/end markers.
        encoding: Encoding used to decode file content.
        errors: Decode error handler (``strict``, ``ignore`` or ``replace``).

    Example:
        >>> cfg = MapperConfig.from_pattern_strings(".", include="*.py", exclude="build, dist")
        >>> cfg.include
        ('*.py',)
        >>> cfg.exclude
        ('build', 'dist')
        >>> cfg.show_tree
        True
    """

    root_path: PathType = "."
    include: Tuple[str, ...] = ()
    exclude: Tuple[str, ...] = ()
    git_tracked_only: bool = False
    show_tree: bool = True
    show_content: bool = False
    separate_content: bool = False
    output: Optional[PathType] = None
    show_line_numbers: bool = False
    show_header_footers: bool = False
    encoding: str = "utf-8"
    errors: str = "replace"

    def __post_init__(self) -> None:
        if self.errors not in ("strict", "ignore", "replace"):
            raise ValueError(f"Invalid error handler '{self.errors}'. Must be one of: strict, ignore, replace")
        # Accept lists from library callers while keeping the record hashable
        object.__setattr__(self, "include", tuple(self.include))
        object.__setattr__(self, "exclude", tuple(self.exclude))

    @property
    def inline_content(self) -> bool:
        """True when content is rendered directly beneath each listed file."""
        return self.show_content and not self.separate_content

    @property
    def trailing_content(self) -> bool:
        """True when content is rendered in a section after the listing."""
        return self.show_content and self.separate_content

    @classmethod
    def from_pattern_strings(
        cls,
        root_path: PathType = ".",
        include: Optional[str] = None,
        exclude: Optional[str] = None,
        **kwargs: object,
    ) -> "MapperConfig":
        """Build a configuration from comma-separated include/exclude strings.

        Args:
            root_path: Directory to walk.
            include: Comma-separated include patterns, or None.
            exclude: Comma-separated exclude patterns, or None.
            **kwargs: Any other MapperConfig field.

        Returns:
            A new MapperConfig.
        """
        return cls(
            root_path=root_path,
            include=split_patterns(include),
            exclude=split_patterns(exclude),
            **kwargs,  # type: ignore[arg-type]
        )
