from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for file/directory exclusion rules.

    Rules are consulted by the walk once per directory entry, with the entry's base
    name and whether it is a directory. All implementations must decide whether the
    entry is excluded; individual rule addition is an optional capability that
    depends on the rule type.

    Example:
        >>> from filemapper.exclusion_rules.pattern_rules import NamePatternRules
        >>> rules = NamePatternRules(["*.pyc"])
        >>> rules.add_rule("node_modules")
        >>> rules.exclude("test.pyc")
        True
        >>> rules.exclude("node_modules", is_dir=True)
        True
        >>> rules.exclude("test.py")
        False
    """

    @abstractmethod
    def exclude(self, name: str, is_dir: bool = False) -> bool:
        """
        Determine if an entry should be excluded based on the loaded rules.

        Args:
            name (str): The base name of the file or directory (no separators).
            is_dir (bool): Whether the entry is a directory. Defaults to False.

        Returns:
            bool: True if the entry should be excluded, False if it should be kept.

        Example:
            >>> class TmpExclusionRules(BaseExclusionRules):
            ...     def exclude(self, name: str, is_dir: bool = False) -> bool:
            ...         return not is_dir and name.endswith('.tmp')
            >>> rules = TmpExclusionRules()
            >>> rules.exclude("temp.tmp")
            True
            >>> rules.exclude("temp.tmp", is_dir=True)
            False
        """
        pass

    def has_rules(self) -> bool:
        """
        Report whether any rule is configured.

        Returns:
            bool: True unless the implementation knows it holds no rules.
        """
        return True

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        This method may be overridden by subclasses that support programmatic rule addition.
        Rule types that don't support it use the default implementation which raises
        NotImplementedError.

        Args:
            rule (str): The rule to add. The format depends on the specific implementation.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
