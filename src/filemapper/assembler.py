"""Assembly of the complete filemapper output.

This module ties the pieces together: optional tracked-file lookup, the walk,
then either the tree or the flat renderer, with content placed inline, in a
separate section after the listing, or not at all. The whole output is built in
memory; nothing reaches a sink until assembly has succeeded.
"""

import logging
from typing import AbstractSet, Callable, List, Optional

from filemapper.config import MapperConfig
from filemapper.content_renderer import ContentRenderer
from filemapper.file_system_tree.tree_builder import TreeBuilder
from filemapper.file_system_tree.walker import AcceptedPath, walk
from filemapper.git_tracked import get_tracked_files
from filemapper.types import PathType

logger = logging.getLogger(__name__)

TrackedFilesLookup = Callable[[PathType], AbstractSet[str]]


def build_flat_list(accepted_paths: List[AcceptedPath]) -> str:
    """Return one line per accepted path, directories included.

    Example:
        >>> from filemapper.types import EntryKind
        >>> print(build_flat_list([
        ...     AcceptedPath("dir", "dir", EntryKind.DIRECTORY),
        ...     AcceptedPath("dir/file.txt", "dir/file.txt", EntryKind.FILE),
        ... ]), end="")
        dir
        dir/file.txt
    """
    return "".join(entry.path + "\n" for entry in accepted_paths)


class FileMapper:
    """Produces the complete output for one MapperConfig.

    Attributes:
        config (MapperConfig): The run configuration.
        tracked_files_lookup (TrackedFilesLookup): Called once with the root when
            git_tracked_only is set; any exception it raises aborts the run.

    Example:
        >>> mapper = FileMapper(MapperConfig(root_path="src", show_content=True))  # doctest: +SKIP
        >>> print(mapper.assemble())  # doctest: +SKIP
        └── filemapper
        │   ├── __init__.py
        ...
    """

    def __init__(self, config: MapperConfig, tracked_files_lookup: TrackedFilesLookup = get_tracked_files) -> None:
        self.config = config
        self.tracked_files_lookup = tracked_files_lookup
        self._renderer = ContentRenderer(config)

    def collect(self) -> List[AcceptedPath]:
        """Run the tracked-file lookup (if requested) and the walk.

        Raises:
            TrackedFilesError: If the tracked-file lookup fails.
            OSError: If the walk fails.
        """
        tracked_files: Optional[AbstractSet[str]] = None
        if self.config.git_tracked_only:
            tracked_files = self.tracked_files_lookup(self.config.root_path)
        accepted_paths = walk(self.config, tracked_files)
        logger.debug("Accepted %d paths under %s", len(accepted_paths), self.config.root_path)
        return accepted_paths

    def assemble(self) -> str:
        """Build and return the complete output text."""
        accepted_paths = self.collect()
        if self.config.show_tree:
            return self._assemble_tree(accepted_paths)
        return self._assemble_flat(accepted_paths)

    def _assemble_tree(self, accepted_paths: List[AcceptedPath]) -> str:
        tree_output = TreeBuilder(self.config).build(accepted_paths)
        output = tree_output.tree_string
        if self.config.trailing_content and tree_output.file_order:
            output += "\n" + self._renderer.render_section(tree_output.file_order)
        return output

    def _assemble_flat(self, accepted_paths: List[AcceptedPath]) -> str:
        if self.config.inline_content:
            parts: List[str] = []
            for entry in accepted_paths:
                parts.append(entry.path + "\n")
                if not entry.is_dir:
                    parts.append(self._renderer.render_block(entry.path))
            return "".join(parts)

        output = build_flat_list(accepted_paths)
        file_paths = [entry.path for entry in accepted_paths if not entry.is_dir]
        if self.config.trailing_content and file_paths:
            output += "\n" + self._renderer.render_section(file_paths)
        return output


def assemble(config: MapperConfig, tracked_files_lookup: TrackedFilesLookup = get_tracked_files) -> str:
    """Build the complete output for ``config``.

    Args:
        config: The run configuration.
        tracked_files_lookup: Source of the tracked-file set, used only when
            ``config.git_tracked_only`` is set.

    Returns:
        The tree or flat listing, with any requested content.

    Raises:
        TrackedFilesError: If the tracked-file lookup fails.
        FileNotFoundError: If the root path doesn't exist.
        NotADirectoryError: If the root path isn't a directory.
        OSError: If the walk fails for any other reason.
    """
    return FileMapper(config, tracked_files_lookup).assemble()


run = assemble
