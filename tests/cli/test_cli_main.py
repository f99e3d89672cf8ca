"""Unit tests for the CLI entry point."""

import logging
import os
from unittest.mock import patch

import pytest

from filemapper.cli.main import main
from filemapper.exceptions import TrackedFilesError


@pytest.fixture
def project(tmp_path):
    (tmp_path / "hello.txt").write_text("hello world")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "main.env").write_text("SECRET=1\n")
    return tmp_path


def run_main(argv):
    with patch("sys.argv", ["filemapper", *argv]):
        main()


def test_writes_tree_to_stdout(project, capfd):
    run_main(["-p", str(project)])
    out, err = capfd.readouterr()
    assert out == "├── hello.txt\n└── sub\n│   └── main.env\n"
    assert err == ""


def test_writes_to_output_file(project, tmp_path_factory, caplog):
    out_file = tmp_path_factory.mktemp("out") / "map.txt"
    with caplog.at_level(logging.INFO, logger="filemapper"):
        run_main(["-p", str(project), "-c", "-e", "*.env", "-o", str(out_file)])

    assert out_file.read_text(encoding="utf-8") == (
        "├── hello.txt\n"
        "│   ----- CONTENT START -----\n"
        "│   hello world\n"
        "│   ----- CONTENT END -----\n"
        "└── sub\n"
    )
    assert f"Output written to {out_file}" in caplog.text


def test_no_header_footer(project, tmp_path_factory):
    out_file = tmp_path_factory.mktemp("out") / "map.txt"
    run_main(["-p", str(project), "-c", "--no-header-footer", "--flat", "-i", "*.txt", "-o", str(out_file)])

    hello = project / "hello.txt"
    sub = project / "sub"
    assert out_file.read_text(encoding="utf-8") == f"{hello}\nhello world\n{sub}\n"


def test_separate_content_without_content_is_ignored(project, capfd, caplog):
    with caplog.at_level(logging.WARNING, logger="filemapper"):
        run_main(["-p", str(project), "--separate-content"])
    out, _ = capfd.readouterr()
    assert out == "├── hello.txt\n└── sub\n│   └── main.env\n"
    assert "--separate-content has no effect" in caplog.text


def test_missing_root(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        run_main(["-p", str(tmp_path / "missing")])
    assert exc_info.value.code == 1
    assert capsys.readouterr().err.startswith("Error: ")


def test_failed_run_leaves_no_output_file(tmp_path, tmp_path_factory):
    out_file = tmp_path_factory.mktemp("out") / "map.txt"
    with pytest.raises(SystemExit):
        run_main(["-p", str(tmp_path / "missing"), "-o", str(out_file)])
    assert not out_file.exists()


def test_tracked_files_error(project, capsys):
    error = TrackedFilesError(str(project), "not a git repository")
    with patch("filemapper.cli.main.assemble", side_effect=error):
        with pytest.raises(SystemExit) as exc_info:
            run_main(["-p", str(project), "-g"])
    assert exc_info.value.code == 1
    assert "Error: Failed to get git-tracked files in" in capsys.readouterr().err


def test_permission_error(project, capsys):
    with patch("filemapper.cli.main.assemble", side_effect=PermissionError("Access denied to sub")):
        with pytest.raises(SystemExit) as exc_info:
            run_main(["-p", str(project)])
    assert exc_info.value.code == 126
    assert "Error: Access denied to sub" in capsys.readouterr().err


def test_keyboard_interrupt(project):
    with patch("filemapper.cli.main.assemble", side_effect=KeyboardInterrupt):
        with pytest.raises(SystemExit) as exc_info:
            run_main(["-p", str(project)])
    assert exc_info.value.code == 130


def test_broken_pipe(project):
    with patch("filemapper.cli.main.SafeWriter") as writer_cls:
        writer_cls.return_value.__enter__.return_value.write.side_effect = BrokenPipeError
        with pytest.raises(SystemExit) as exc_info:
            run_main(["-p", str(project)])
    assert exc_info.value.code == 141


def test_bad_option_exits_with_usage_error(capsys):
    with pytest.raises(SystemExit) as exc_info:
        run_main(["--no-such-option"])
    assert exc_info.value.code == 2


def test_walk_failure_writes_no_output(project, capfd):
    real_scandir = os.scandir

    def scandir(path):
        if str(path).endswith("sub"):
            raise FileNotFoundError("sub vanished")
        return real_scandir(path)

    with patch("filemapper.file_system_tree.walker.os.scandir", side_effect=scandir):
        with pytest.raises(SystemExit) as exc_info:
            run_main(["-p", str(project)])
    out, err = capfd.readouterr()
    assert exc_info.value.code == 1
    assert out == ""
    assert "Error: sub vanished" in err
