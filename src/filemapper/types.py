from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class EntryKind(Enum):
    """Enumeration of entry kinds recorded for every path accepted by the walk.

    The kind is captured at walk time so that rendering never has to guess whether
    a childless entry is a file or an empty directory.

    Attributes:
        FILE: Regular file (or a symlink, which is never descended into)
        DIRECTORY: Directory
    """

    FILE = "file"
    DIRECTORY = "directory"
