"""File content rendering with optional line numbers and delimiter markers.

Content appears in three places: inline beneath a tree line (indented to the
tree level), inline beneath a flat list entry, and in a separate section after
the listing. Files that cannot be read at this point produce no content at all;
the error is logged and swallowed.
"""

import logging
from typing import Iterable, List, Optional

from filemapper.config import MapperConfig
from filemapper.types import PathType

logger = logging.getLogger(__name__)

TREE_INDENT = "│   "
CONTENT_START = "----- CONTENT START -----"
CONTENT_END = "----- CONTENT END -----"


def count_lines(text: str) -> int:
    """Count the ``\\n``-delimited segments of ``text``.

    A trailing newline yields a final empty segment, which is counted.

    Example:
        >>> count_lines("line1\\nline2")
        2
        >>> count_lines("hello\\n")
        2
        >>> count_lines("")
        1
    """
    return text.count("\n") + 1


def format_line_number(number: int, line: str) -> str:
    """Format one numbered content line.

    Example:
        >>> format_line_number(1, "line1")
        '   1: line1'
        >>> format_line_number(12345, "x")
        '12345: x'
    """
    return f"{number:4d}: {line}"


class ContentRenderer:
    """Renders the content of single files according to a MapperConfig.

    Files are read whole, decoded with the configured encoding and error handler,
    and never newline-translated, so ``\\r\\n`` endings survive untouched.

    Attributes:
        config (MapperConfig): Supplies encoding, line numbering and marker options.

    Example:
        >>> renderer = ContentRenderer(MapperConfig(show_header_footers=True))
        >>> print(renderer.render_block("hello.txt"), end="")  # doctest: +SKIP
        ----- CONTENT START -----
        hello world
        ----- CONTENT END -----
    """

    def __init__(self, config: MapperConfig) -> None:
        self.config = config

    def read_text(self, path: PathType) -> Optional[str]:
        """Return the decoded content of ``path``, or None if it cannot be read."""
        try:
            with open(path, "r", encoding=self.config.encoding, errors=self.config.errors, newline="") as f:
                return f.read()
        except (OSError, UnicodeError) as e:
            logger.debug("Skipping content of %s: %s", path, e)
            return None

    def render_indented(self, path: PathType, indent_level: int) -> str:
        """Render content beneath a tree line, every line indented to ``indent_level``.

        The content is split on ``\\n`` and every segment is written, including the
        empty segment that follows a trailing newline.
        """
        text = self.read_text(path)
        if text is None:
            return ""

        indent = TREE_INDENT * indent_level
        lines = text.split("\n")
        if self.config.show_line_numbers:
            lines = [format_line_number(i, line) for i, line in enumerate(lines, start=1)]

        out: List[str] = []
        if self.config.show_header_footers:
            out.append(indent + CONTENT_START)
        out.extend(indent + line for line in lines)
        if self.config.show_header_footers:
            out.append(indent + CONTENT_END)
        return "".join(line + "\n" for line in out)

    def render_block(self, path: PathType, text: Optional[str] = None) -> str:
        """Render content without indentation, for flat listings and separate sections.

        With line numbers every ``\\n``-delimited segment is numbered. Without them
        the content is written verbatim, followed by a newline unless it already
        ends with one.

        Args:
            path: File to render.
            text: Already-read content of ``path``, to avoid reading it twice.
        """
        if text is None:
            text = self.read_text(path)
            if text is None:
                return ""

        out: List[str] = []
        if self.config.show_header_footers:
            out.append(CONTENT_START + "\n")
        if self.config.show_line_numbers:
            lines = text.split("\n")
            out.extend(format_line_number(i, line) + "\n" for i, line in enumerate(lines, start=1))
        else:
            out.append(text if text.endswith("\n") else text + "\n")
        if self.config.show_header_footers:
            out.append(CONTENT_END + "\n")
        return "".join(out)

    def render_section(self, paths: Iterable[str]) -> str:
        """Render the separate content section for ``paths``, in order.

        Each file gets a ``"<path> (<N> lines):"`` header, its content block and a
        blank line. Unreadable files are left out entirely.
        """
        out: List[str] = []
        for path in paths:
            text = self.read_text(path)
            if text is None:
                continue
            out.append(f"{path} ({count_lines(text)} lines):\n")
            out.append(self.render_block(path, text))
            out.append("\n")
        return "".join(out)


def render_content(path: PathType, config: MapperConfig, indent_level: int = 0) -> str:
    """Render a file's content indented for placement inside a tree."""
    return ContentRenderer(config).render_indented(path, indent_level)


def render_block(path: PathType, config: MapperConfig) -> str:
    """Render a file's content without indentation."""
    return ContentRenderer(config).render_block(path)


def render_separate_section(paths: Iterable[str], config: MapperConfig) -> str:
    """Render the separate content section for ``paths``."""
    return ContentRenderer(config).render_section(paths)
