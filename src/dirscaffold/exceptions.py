class DirectoryListingError(Exception):
    """
    Exception raised by a filesystem implementation when a directory cannot be listed.

    Filesystem implementations raise this for every listing failure (permission denied,
    missing path, not a directory, broken filesystem) so that callers only have to
    handle a single exception type. The walker catches it for every directory except
    the root and records the description inline in the tree.

    Attributes:
        path (str): Path of the directory that could not be listed.
        description (str): Human-readable description of the failure.

    Example:
        >>> error = DirectoryListingError("/srv/secret", "Permission denied")
        >>> error.description
        'Permission denied'
        >>> str(error)
        '/srv/secret: Permission denied'
    """

    def __init__(self, path: str, description: str) -> None:
        """
        Initialize the exception with the failing path and a description.

        Args:
            path (str): Path of the directory that could not be listed.
            description (str): Human-readable description of the failure.
        """
        self.path = path
        self.description = description
        super().__init__(f"{path}: {description}")


class RootPathError(Exception):
    """
    Exception raised when the root of a traversal cannot be resolved.

    This is the only failure surfaced by the walker; failures below the root are
    embedded in the tree instead. No output is produced when it is raised.

    Attributes:
        path (str): The root path as given by the caller.
        cause (str): Description of the underlying failure.

    Example:
        >>> error = RootPathError("missing", "No such file or directory")
        >>> str(error)
        'missing: No such file or directory'
    """

    def __init__(self, path: str, cause: str) -> None:
        """
        Initialize the exception with the root path and the underlying cause.

        Args:
            path (str): The root path as given by the caller.
            cause (str): Description of the underlying failure.
        """
        self.path = path
        self.cause = cause
        super().__init__(f"{path}: {cause}")


class InvalidPatternError(ValueError):
    """
    Exception raised when an exclusion pattern cannot be compiled.

    Pattern errors are configuration errors: they are reported before traversal
    begins, since a malformed filter could otherwise silently hide the whole tree.

    Attributes:
        pattern (str): The offending pattern.

    Example:
        >>> error = InvalidPatternError("a/b", "contains a separator")
        >>> str(error)
        "Invalid exclusion pattern 'a/b': contains a separator"
    """

    def __init__(self, pattern: str, reason: str) -> None:
        """
        Initialize the exception with the offending pattern.

        Args:
            pattern (str): The pattern that failed to compile.
            reason (str): Why compilation failed.
        """
        self.pattern = pattern
        super().__init__(f"Invalid exclusion pattern {pattern!r}: {reason}")
