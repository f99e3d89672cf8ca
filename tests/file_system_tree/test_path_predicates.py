"""Unit tests for the single-path predicates."""

import os

import pytest

from filemapper.exclusion_rules.pattern_rules import NamePatternRules
from filemapper.file_system_tree.path_predicates import is_hidden, matches_include, should_exclude

ROOT = os.path.join(os.sep, "fake", "root")


@pytest.mark.parametrize(
    "relative,expected",
    [
        (".secret", True),
        (os.path.join("folder", ".git", "config"), True),
        (os.path.join(".hidden_dir", "file.txt"), True),
        (os.path.join("folder", "main.go"), False),
        ("file.with.dots", False),
    ],
)
def test_is_hidden(relative, expected):
    assert is_hidden(os.path.join(ROOT, relative), ROOT) is expected


def test_root_is_never_hidden():
    hidden_root = os.path.join(ROOT, ".config")
    assert not is_hidden(hidden_root, hidden_root)
    assert not is_hidden(os.path.join(hidden_root, "settings.ini"), hidden_root)


def test_should_exclude():
    rules = NamePatternRules([".git", "node_modules", "*.env"])
    assert should_exclude("main.env", False, rules)
    assert should_exclude("node_modules", True, rules)
    assert should_exclude(".git", True, rules)
    assert not should_exclude("main.go", False, rules)


def test_should_exclude_is_case_sensitive():
    rules = NamePatternRules(["*.env"])
    assert not should_exclude("MAIN.ENV", False, rules)


def test_should_exclude_without_rules():
    assert not should_exclude("anything", False, NamePatternRules())


def test_matches_include():
    patterns = NamePatternRules(["*.go", "*.md"])
    assert matches_include("main.go", patterns)
    assert matches_include("README.md", patterns)
    assert not matches_include("main.py", patterns)


def test_matches_include_empty_matches_all():
    assert matches_include("main.py", NamePatternRules())


def test_matches_include_uses_base_name_only():
    patterns = NamePatternRules(["src/*.py"])
    assert not matches_include("main.py", patterns)


def test_matches_include_malformed_pattern_never_matches():
    # A trailing escape character is rejected by pathspec
    patterns = NamePatternRules(["abc\\"])
    assert not matches_include("main.py", patterns)
    assert not matches_include("abc\\", patterns)
    assert not matches_include("abc", patterns)
