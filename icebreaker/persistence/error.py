"""Persistence layer errors."""


class PersistenceError(Exception):
    """Base persistence error."""

    pass


class StorageAccessError(PersistenceError):
    """Raised when the storage medium cannot be read or written.

    Corrupted file contents are not an access error; those are recovered
    by treating the collection as empty.
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot access storage file {path}: {reason}")
