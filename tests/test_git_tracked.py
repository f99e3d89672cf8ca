"""Unit tests for the git tracked-file lookup."""

import shutil
import subprocess
from unittest.mock import patch

import pytest

from filemapper.exceptions import TrackedFilesError
from filemapper.git_tracked import get_tracked_files


def completed(stdout: bytes) -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=["git", "ls-files", "-z"], returncode=0, stdout=stdout, stderr=b"")


def test_parses_nul_separated_output(tmp_path):
    with patch("filemapper.git_tracked.subprocess.run", return_value=completed(b"a.txt\0dir/b c.txt\0")) as run:
        tracked = get_tracked_files(tmp_path)

    assert tracked == frozenset({"a.txt", "dir/b c.txt"})
    run.assert_called_once_with(["git", "ls-files", "-z"], cwd=str(tmp_path), capture_output=True, check=True)


def test_empty_listing(tmp_path):
    with patch("filemapper.git_tracked.subprocess.run", return_value=completed(b"")):
        assert get_tracked_files(tmp_path) == frozenset()


def test_git_failure_reports_stderr(tmp_path):
    error = subprocess.CalledProcessError(128, ["git"], stderr=b"fatal: not a git repository\n")
    with patch("filemapper.git_tracked.subprocess.run", side_effect=error):
        with pytest.raises(TrackedFilesError) as exc_info:
            get_tracked_files(tmp_path)

    assert exc_info.value.root == str(tmp_path)
    assert exc_info.value.reason == "fatal: not a git repository"
    assert isinstance(exc_info.value.__cause__, subprocess.CalledProcessError)


def test_git_failure_without_stderr(tmp_path):
    with patch("filemapper.git_tracked.subprocess.run", side_effect=subprocess.CalledProcessError(1, ["git"])):
        with pytest.raises(TrackedFilesError, match="git exited with status 1"):
            get_tracked_files(tmp_path)


def test_git_not_runnable(tmp_path):
    with patch("filemapper.git_tracked.subprocess.run", side_effect=FileNotFoundError("git")):
        with pytest.raises(TrackedFilesError, match="could not run git"):
            get_tracked_files(tmp_path)


@pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")
def test_real_repository(tmp_path):
    def git(*args):
        subprocess.run(["git", *args], cwd=tmp_path, check=True, capture_output=True)

    git("init", "-q")
    (tmp_path / "tracked.txt").write_text("tracked\n")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "nested.txt").write_text("nested\n")
    (tmp_path / "untracked.txt").write_text("untracked\n")
    git("add", "tracked.txt", "sub/nested.txt")

    assert get_tracked_files(tmp_path) == frozenset({"tracked.txt", "sub/nested.txt"})


@pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")
def test_outside_repository(tmp_path):
    with patch.dict("os.environ", {"GIT_CEILING_DIRECTORIES": str(tmp_path.parent)}):
        with pytest.raises(TrackedFilesError):
            get_tracked_files(tmp_path)
