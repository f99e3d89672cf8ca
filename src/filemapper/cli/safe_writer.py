"""Output sink for the filemapper CLI.

The assembled output goes either to a named file, created or truncated, or to an
already-open file descriptor such as standard output. Writes go straight to the
descriptor with os.write(), so a reader closing the pipe surfaces as a
BrokenPipeError from write() rather than from interpreter shutdown.
"""

import errno
import os
import types
from typing import Optional, Type, Union

from filemapper.types import PathType


class SafeWriter:
    """Writes encoded text to a path or a file descriptor.

    A descriptor passed in is borrowed and left open on close(); a path is opened
    here and closed again by close().

    Attributes:
        target: The path or descriptor given to the constructor.
        fd: Descriptor the text is written to.
        encoding: Encoding applied to the text before writing.

    Example:
        >>> with SafeWriter("out.txt") as writer:  # doctest: +SKIP
        ...     writer.write("└── main.py\\n")
    """

    def __init__(self, target: Union[int, PathType], encoding: str = "utf-8") -> None:
        """Open the sink.

        Args:
            target: File descriptor, or path of a file to create or truncate.
            encoding: Encoding for written text. Defaults to UTF-8.

        Raises:
            TypeError: If ``target`` is neither an int nor path-like.
            OSError: If the output file cannot be opened.
        """
        self.target = target
        self.encoding = encoding
        self._closed = False

        if isinstance(target, int):
            self.fd = target
            self._owns_fd = False
        elif isinstance(target, (str, os.PathLike)):
            self.fd = os.open(os.fspath(target), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o666)
            self._owns_fd = True
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(target).__name__}")

    def write(self, text: str) -> None:
        """Encode and write all of ``text``, retrying after short writes.

        Raises:
            BrokenPipeError: If the reading end of a pipe was closed.
            OSError: For any other write failure.
            ValueError: If the writer is already closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        remaining = memoryview(text.encode(self.encoding))
        while remaining:
            try:
                written = os.write(self.fd, remaining)
            except OSError as e:
                if e.errno == errno.EPIPE:
                    raise BrokenPipeError(errno.EPIPE, os.strerror(errno.EPIPE)) from e
                raise
            remaining = remaining[written:]

    def close(self) -> None:
        """Close the descriptor if this writer opened it. Calling close() twice is harmless."""
        if self._closed:
            return
        self._closed = True
        if self._owns_fd:
            os.close(self.fd)

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        try:
            self.close()
        except OSError:
            # An error from the with block wins over one from closing
            if exc_type is None:
                raise
