# core/persistence.py

"""
Key-value persistence gateways for the `RecordStore`.

The store keeps its entire collection under one constant key (`STORAGE_KEY`) as JSON text. A
gateway only has to read that text back (`load()`) and overwrite it in full (`save()`). There
are no partial updates and no schema versioning.

Two gateways are provided:
    - `JsonFileGateway`: writes each key to `<dir_path>/<key>.json`.
    - `InMemoryGateway`: keeps the serialized text in a dictionary, for tests and throwaway sessions.

Both raise `PersistenceError` for any failure so callers only need to handle one exception type.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any

from core.logging_config import get_logger, log_with_context

logger = get_logger("persistence")

STORAGE_KEY = "students"


class PersistenceError(Exception):
    """Raised when a gateway cannot read or write the stored collection."""


class PersistenceGateway:
    """
    Base class for storage collaborators injected into the `RecordStore`.

    Subclasses implement `read_text()` and `write_text()`; JSON encoding and decoding are shared.
    """

    def __init__(self, key: str = STORAGE_KEY):
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> list[dict[str, Any]] | None:
        """
        Reads and decodes the stored collection.

        Returns:
            The list of serialized records, or None if nothing has been stored under the key yet.

        Raises:
            PersistenceError: If the stored text cannot be read, is not valid JSON, or is not a list.
        """
        text = self.read_text()

        if text is None:
            log_with_context(
                logger, logging.DEBUG, "Nothing stored under key.", {"key": self._key}
            )
            return None

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise PersistenceError(f"Stored data under '{self._key}' is not valid JSON: {e}")

        if not isinstance(data, list):
            raise PersistenceError(f"Expected '{self._key}' to contain a list.")

        return data

    def save(self, collection: list[dict[str, Any]]) -> None:
        """
        Encodes and stores the full collection, replacing whatever was stored before.

        Raises:
            PersistenceError: If the collection cannot be encoded or written.
        """
        try:
            text = json.dumps(collection, indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise PersistenceError(f"Collection is not JSON serializable: {e}")

        self.write_text(text)

        log_with_context(
            logger,
            logging.DEBUG,
            "Collection written.",
            {"key": self._key, "count": len(collection)},
        )

    def read_text(self) -> str | None:
        raise NotImplementedError

    def write_text(self, text: str) -> None:
        raise NotImplementedError


class JsonFileGateway(PersistenceGateway):

    def __init__(self, dir_path: str, key: str = STORAGE_KEY):
        super().__init__(key)
        self._dir_path = dir_path

    @property
    def dir_path(self) -> str:
        return self._dir_path

    @property
    def file_path(self) -> str:
        return os.path.join(self._dir_path, f"{self.key}.json")

    def read_text(self) -> str | None:
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                return f.read()

        except FileNotFoundError:
            return None

        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceError(f"Failed to read {self.file_path}: {e}")

    def write_text(self, text: str) -> None:
        # write to a sibling file first so a failed write never truncates the existing data
        tmp_path = f"{self.file_path}.tmp"

        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp_path, self.file_path)

        except OSError as e:
            raise PersistenceError(f"Failed to write {self.file_path}: {e}")


class InMemoryGateway(PersistenceGateway):

    def __init__(self, initial: dict[str, str] | None = None, key: str = STORAGE_KEY):
        super().__init__(key)
        self._entries: dict[str, str] = dict(initial or {})

    @property
    def entries(self) -> dict[str, str]:
        return self._entries.copy()

    def read_text(self) -> str | None:
        return self._entries.get(self.key)

    def write_text(self, text: str) -> None:
        self._entries[self.key] = text
