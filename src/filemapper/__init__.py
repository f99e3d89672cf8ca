"""Project tree and file content mapping utilities.

This package walks a directory, filters its entries by hidden status, glob
patterns, binary content and (optionally) git tracking, and renders what is
left as an indented tree or a flat list, with file contents inline or in a
separate section.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("filemapper")
except PackageNotFoundError:
    __version__ = "unknown"
