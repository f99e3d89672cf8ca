"""Indented tree rendering of accepted paths.

The accepted paths are assembled into a FileSystemNode tree, siblings sorted by
relative path, and rendered one line per entry::

    ├── docs
    │   └── readme.md
    ├── main.py
    └── utils

Every nesting level adds one ``"│   "`` to the indent. Directories carry their
kind from the walk, so an empty directory is rendered as a plain line and is never
mistaken for a file.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional

from filemapper.config import MapperConfig
from filemapper.content_renderer import TREE_INDENT, render_content
from filemapper.file_system_tree.file_system_node import FileSystemNode
from filemapper.file_system_tree.walker import AcceptedPath, join_root
from filemapper.types import PathType

logger = logging.getLogger(__name__)

BRANCH = "├──"
LAST_BRANCH = "└──"


@dataclass
class TreeOutput:
    """Rendered tree plus the files it listed.

    Attributes:
        tree_string: The tree text, one entry per line, with any inline content.
        file_order: Display paths of the rendered files, in the order they appear.
    """

    tree_string: str
    file_order: List[str] = field(default_factory=list)


def build_node_tree(root: PathType, accepted_paths: Iterable[AcceptedPath]) -> FileSystemNode:
    """Group accepted paths under their parent directories.

    The input order does not matter. Children are sorted by relative path. A path
    whose parent directory is not itself among the accepted paths cannot be reached
    from the root and is left out.

    Args:
        root: The walk root, used for the root node's display path.
        accepted_paths: Paths produced by the walk.

    Returns:
        The root node, whose relative path is ``"."``.

    Example:
        >>> from filemapper.types import EntryKind
        >>> paths = [
        ...     AcceptedPath("b.txt", "b.txt", EntryKind.FILE),
        ...     AcceptedPath("a", "a", EntryKind.DIRECTORY),
        ...     AcceptedPath("a/c.txt", "a/c.txt", EntryKind.FILE),
        ... ]
        >>> root = build_node_tree(".", paths)
        >>> [child.name for child in root.children]
        ['a', 'b.txt']
        >>> [child.name for child in root.children[0].children]
        ['c.txt']
    """
    root_node = FileSystemNode(".", ".", join_root(root, "."), is_dir=True)
    nodes: Dict[str, FileSystemNode] = {".": root_node}
    accepted = list(accepted_paths)

    for entry in accepted:
        nodes[entry.relative_path] = FileSystemNode(entry.name, entry.relative_path, entry.path, is_dir=entry.is_dir)

    for entry in accepted:
        parent_key = entry.relative_path.rsplit("/", 1)[0] if "/" in entry.relative_path else "."
        parent = nodes.get(parent_key)
        if parent is None or not parent.is_dir:
            logger.debug("Dropping %s: parent %s was not accepted", entry.relative_path, parent_key)
            continue
        nodes[entry.relative_path].parent = parent

    for node in nodes.values():
        if node.children:
            node.children = sorted(node.children, key=lambda child: child.relative_path)

    return root_node


class TreeBuilder:
    """Renders accepted paths as an indented connector tree.

    When content is requested inline (show_content without separate_content), each
    file's content is rendered directly beneath its line, one level deeper.

    Example:
        >>> builder = TreeBuilder(MapperConfig(root_path="src"))  # doctest: +SKIP
        >>> print(builder.build(paths).tree_string)  # doctest: +SKIP
        └── filemapper
        │   ├── __init__.py
        │   └── assembler.py
    """

    def __init__(self, config: MapperConfig, root: Optional[PathType] = None) -> None:
        self.config = config
        self.root = config.root_path if root is None else root

    def build(self, accepted_paths: Iterable[AcceptedPath]) -> TreeOutput:
        """Render ``accepted_paths`` and collect the file order."""
        file_order: List[str] = []
        root_node = build_node_tree(self.root, accepted_paths)
        tree_string = "".join(self._render_children(root_node, 0, file_order))
        return TreeOutput(tree_string=tree_string, file_order=file_order)

    def _render_children(self, node: FileSystemNode, level: int, file_order: List[str]) -> Iterator[str]:
        last_index = len(node.children) - 1
        for i, child in enumerate(node.children):
            connector = LAST_BRANCH if i == last_index else BRANCH
            yield f"{TREE_INDENT * level}{connector} {child.name}\n"

            if child.is_dir:
                yield from self._render_children(child, level + 1, file_order)
                continue

            file_order.append(child.display_path)
            if self.config.inline_content:
                yield render_content(child.display_path, self.config, level + 1)


def build_tree(
    config: MapperConfig, accepted_paths: Iterable[AcceptedPath], root: Optional[PathType] = None
) -> TreeOutput:
    """Render ``accepted_paths`` as a tree; ``root`` defaults to ``config.root_path``."""
    return TreeBuilder(config, root).build(accepted_paths)
