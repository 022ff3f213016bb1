"""Storage errors."""


class StorageError(Exception):
    """
    Raised when the underlying store cannot be read.

    Covers I/O failures and stored payloads that no longer decode.
    An absent record is not an error: getters return None for that.
    """
