"""Binary file detection utilities."""

import logging

from filemapper.types import PathType

logger = logging.getLogger(__name__)

# Number of leading bytes inspected for a NUL byte
BINARY_SNIFF_SIZE = 8000


def is_binary_data(chunk: bytes) -> bool:
    """Return True if a chunk of file content contains a NUL byte.

    Example:
        >>> is_binary_data(b"Hello world")
        False
        >>> is_binary_data(bytes([0x00, 0x01, 0x02]))
        True
    """
    return b"\0" in chunk


def is_binary_file(file_path: PathType, chunk_size: int = BINARY_SNIFF_SIZE) -> bool:
    """Detect if a file is binary by looking for a NUL byte near its start.

    This is a heuristic rather than a definitive classification: only the first
    ``chunk_size`` bytes are read, and a file is called binary when they contain a
    NUL byte. Text in encodings such as UTF-16 is therefore reported as binary.

    A file that cannot be opened or read is also reported as binary, so that it is
    kept out of every content-bearing output instead of aborting the run.

    Args:
        file_path: Path to the file to analyze. Can be any path-like object.
        chunk_size: Number of bytes to inspect. Defaults to 8000.

    Returns:
        True if the file appears to be binary or is unreadable, False otherwise.

    Example:
        >>> is_binary_file("README.txt")  # doctest: +SKIP
        False
        >>> is_binary_file("/path/that/does/not/exist")
        True
    """
    try:
        with open(file_path, "rb") as file:
            chunk = file.read(chunk_size)
    except OSError as e:
        logger.debug("Treating unreadable file %s as binary: %s", file_path, e)
        return True

    return is_binary_data(chunk)
