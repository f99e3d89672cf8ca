"""Test configuration and fixtures for filemapper."""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def sample_project(tmp_path):
    """Create a small project with text, binary, hidden and excluded entries."""
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "utils").mkdir()
    (tmp_path / "docs").mkdir()
    (tmp_path / "empty").mkdir()
    (tmp_path / ".git").mkdir()
    (tmp_path / "node_modules").mkdir()

    (tmp_path / "src" / "main.py").write_text("def main():\n    print('Hello')\n")
    (tmp_path / "src" / "utils" / "helpers.py").write_text("def helper():\n    pass")
    (tmp_path / "docs" / "README.md").write_text("# Test Project")
    (tmp_path / "main.env").write_text("SECRET=1\n")
    (tmp_path / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\x00")
    (tmp_path / ".gitignore").write_text("*.pyc\n")
    (tmp_path / ".git" / "config").write_text("[core]\n")
    (tmp_path / "node_modules" / "module.js").write_text("export default {}\n")
    return tmp_path
