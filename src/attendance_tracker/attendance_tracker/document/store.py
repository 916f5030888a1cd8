from __future__ import annotations

import json
import logging
from typing import Optional

from ..core.constants import STORAGE_KEY
from ..core.exceptions import StorageError
from ..storage.blob_store import BlobStore
from .migrations import default_document, document_shape_error, migrate_document

logger = logging.getLogger(__name__)


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


class DocumentStore:
    """Owner of the single JSON document.

    Exactly one in-memory copy exists per instance. Services mutate it in
    place through ``document`` and call ``save()`` before returning, so every
    successful operation is durable. There is no partial persistence: each
    ``save()`` writes the whole document under one key.
    """

    def __init__(self, blob_store: BlobStore, *, key: str = STORAGE_KEY):
        self._blob_store = blob_store
        self._key = key
        self._document: Optional[dict] = None

    @property
    def key(self) -> str:
        return self._key

    @property
    def document(self) -> dict:
        if self._document is None:
            self._document = self.load()
        return self._document

    def load(self) -> dict:
        raw = self._blob_store.get(self._key)
        if raw is None:
            logger.info("No document under %r, starting from defaults", self._key)
            return default_document()

        try:
            doc = json.loads(raw)
        except ValueError as e:
            logger.error("Stored document %r is not valid JSON", self._key)
            raise StorageError(f"Stored document {self._key!r} is not valid JSON") from e
        if not isinstance(doc, dict):
            raise StorageError(f"Stored document {self._key!r} is not a JSON object")
        problem = document_shape_error(doc)
        if problem:
            logger.error("Stored document %r is malformed: %s", self._key, problem)
            raise StorageError(f"Stored document {self._key!r} is malformed: {problem}")

        migrate_document(doc)
        return doc

    def reload(self) -> None:
        self._document = None

    def save(self) -> None:
        """Write the whole document.

        On failure the in-memory copy is dropped, so the next access reloads
        what the medium actually holds.
        """
        try:
            self._blob_store.set(self._key, json.dumps(self.document, ensure_ascii=False, allow_nan=False))
        except StorageError:
            logger.error("Saving %r failed, discarding unsaved changes", self._key)
            self._document = None
            raise

    def ensure_section(self, name: str) -> list:
        """Return a list section, creating it when an older document lacks it."""
        section = self.document.get(name)
        if not isinstance(section, list):
            section = []
            self.document[name] = section
        return section

    def export_data(self) -> str:
        return json.dumps(self.document, ensure_ascii=False, indent=2)

    def import_data(self, text: str) -> bool:
        """Replace the whole document with ``text``; all or nothing.

        Returns False when ``text`` is not a JSON object shaped like a
        document, leaving the live document untouched.
        """
        try:
            doc = json.loads(text, parse_constant=_reject_constant)
        except (TypeError, ValueError):
            logger.warning("Restore rejected: input is not valid JSON")
            return False
        if not isinstance(doc, dict):
            logger.warning("Restore rejected: top level is %s, not an object", type(doc).__name__)
            return False
        problem = document_shape_error(doc)
        if problem:
            logger.warning("Restore rejected: %s", problem)
            return False

        migrate_document(doc)

        previous = self._document
        self._document = doc
        try:
            self.save()
        except StorageError:
            self._document = previous
            raise

        logger.info(
            "Document restored (%d employees, %d status types)",
            len(doc["employees"]),
            len(doc["statusTypes"]),
        )
        return True
