class TrackedFilesError(Exception):
    """
    Exception raised when the set of git-tracked files cannot be determined.

    This exception is raised when tracked-only output is requested but `git ls-files`
    cannot be run in the root directory: git is not installed, the directory is not
    inside a work tree, or the command exits with a non-zero status. It is fatal to
    the whole run.

    Attributes:
        root (str): The directory in which the lookup was attempted.
        reason (str): Description of the underlying failure.

    Example:
        >>> error = TrackedFilesError("/repo", "not a git repository")
        >>> str(error)
        'Failed to get git-tracked files in /repo: not a git repository'
        >>> error.root
        '/repo'
    """

    def __init__(self, root: str, reason: str) -> None:
        """
        Initialize the exception with the lookup root and the failure reason.

        Args:
            root (str): The directory in which `git ls-files` was run.
            reason (str): Description of the underlying failure.
        """
        self.root = root
        self.reason = reason
        super().__init__(f"Failed to get git-tracked files in {root}: {reason}")
