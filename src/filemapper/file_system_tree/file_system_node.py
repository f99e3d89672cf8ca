"""Node representation for file system elements in the tree."""

from typing import Any, Optional

from anytree import Node


class FileSystemNode(Node):  # type: ignore
    """Node class representing a file or directory in the rendered tree.

    Extends anytree.Node with the entry's walk-root-relative path, its display
    path and whether it is a directory. Parent links, children, depth and leaf
    tests come from anytree. The display path is stored as ``display_path``
    because anytree already uses ``path`` for the chain of nodes from the root.

    Attributes:
        name (str): The name of the file or directory (just the basename).
        relative_path (str): Slash-separated path relative to the walk root; "." for the root.
        display_path (str): The root-joined path shown for files in content sections.
        is_dir (bool): True if this node represents a directory, False for files.
        parent (Optional[FileSystemNode]): The parent node in the tree.
        children (tuple[FileSystemNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> root = FileSystemNode(".", ".", ".", is_dir=True)
        >>> child = FileSystemNode("file.txt", "file.txt", "file.txt", parent=root)
        >>> child.parent is root
        True
        >>> child.is_leaf
        True
        >>> child.depth
        1
    """

    def __init__(
        self,
        name: str,
        relative_path: str,
        display_path: str,
        parent: Optional["FileSystemNode"] = None,
        is_dir: bool = False,
        **kwargs: Any,
    ) -> None:
        """Initialize a FileSystemNode.

        Args:
            name: The base name of the file or directory.
            relative_path: Slash-separated path relative to the walk root.
            display_path: Root-joined path used when listing the entry.
            parent: The parent node. Defaults to None.
            is_dir: Whether this node represents a directory. Defaults to False.
            **kwargs: Additional arguments passed to anytree.Node.
        """
        super().__init__(name, parent, **kwargs)
        self.relative_path = relative_path
        self.display_path = display_path
        self.is_dir = is_dir
