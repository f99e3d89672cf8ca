"""Unit tests for the SafeWriter output sink."""

import errno
import os
from unittest.mock import patch

import pytest

from filemapper.cli.safe_writer import SafeWriter


def test_write_to_path(tmp_path):
    out = tmp_path / "out.txt"
    with SafeWriter(out) as writer:
        writer.write("héllo\n")
    assert out.read_text(encoding="utf-8") == "héllo\n"


def test_path_is_truncated(tmp_path):
    out = tmp_path / "out.txt"
    out.write_text("old content that is longer")
    with SafeWriter(str(out)) as writer:
        writer.write("new")
    assert out.read_text() == "new"


def test_write_to_file_descriptor(tmp_path):
    read_fd, write_fd = os.pipe()
    try:
        writer = SafeWriter(write_fd)
        writer.write("through a pipe")
        writer.close()
        assert os.read(read_fd, 100) == b"through a pipe"
    finally:
        os.close(read_fd)
        os.close(write_fd)


def test_partial_writes_are_completed(tmp_path):
    out = tmp_path / "out.txt"
    real_write = os.write

    def one_byte_write(fd, data):
        return real_write(fd, bytes(data[:1]))

    with SafeWriter(out) as writer:
        with patch("filemapper.cli.safe_writer.os.write", side_effect=one_byte_write):
            writer.write("abc")
    assert out.read_text() == "abc"


def test_epipe_becomes_broken_pipe():
    writer = SafeWriter(99)
    with patch("filemapper.cli.safe_writer.os.write", side_effect=OSError(errno.EPIPE, "Broken pipe")):
        with pytest.raises(BrokenPipeError):
            writer.write("data")


def test_other_os_errors_propagate():
    writer = SafeWriter(99)
    with patch("filemapper.cli.safe_writer.os.write", side_effect=OSError(errno.ENOSPC, "No space left")):
        with pytest.raises(OSError) as exc_info:
            writer.write("data")
    assert exc_info.value.errno == errno.ENOSPC


def test_write_after_close(tmp_path):
    writer = SafeWriter(tmp_path / "out.txt")
    writer.close()
    writer.close()
    with pytest.raises(ValueError, match="closed"):
        writer.write("data")


def test_invalid_target_type():
    with pytest.raises(TypeError, match="Expected int, str, or PathLike"):
        SafeWriter(1.5)


def test_unwritable_path(tmp_path):
    with pytest.raises(OSError):
        SafeWriter(tmp_path / "missing" / "out.txt")
