from __future__ import annotations

from typing import Optional, Protocol


class BlobStore(Protocol):
    """Synchronous key-value medium holding whole text documents.

    Note (DIP): DocumentStore depends on this interface, not on a concrete medium.
    Implementations raise StorageError when a read or write cannot complete.
    """

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError
