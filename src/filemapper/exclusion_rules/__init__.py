"""Glob rules for including and excluding files and directories by name."""

from .base_rules import BaseExclusionRules
from .pattern_rules import NamePatternRules

__all__ = [
    "BaseExclusionRules",
    "NamePatternRules",
]
