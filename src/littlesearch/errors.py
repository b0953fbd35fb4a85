"""Errors raised while building or querying an index."""


class SourceNotFoundError(FileNotFoundError):
    """A document, document list or noise-word file could not be opened.

    Covers missing paths as well as directories and unreadable files.
    """

    def __init__(self, path: str) -> None:
        super().__init__(f"Source not found: {path}")
        self.path = path


class UsageError(ValueError):
    """A query was given something other than exactly two keywords."""
