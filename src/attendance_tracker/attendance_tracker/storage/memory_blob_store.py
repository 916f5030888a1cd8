from __future__ import annotations

from typing import Dict, Optional

from .blob_store import BlobStore


class MemoryBlobStore(BlobStore):
    """Process-local medium, used by the testing settings."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._blobs: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._blobs.get(key)

    def set(self, key: str, value: str) -> None:
        self._blobs[key] = value
