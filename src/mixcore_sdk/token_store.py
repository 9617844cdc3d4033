"""Persistence for the access and refresh tokens.

``FileTokenStore`` never raises on I/O problems: an unreadable or
unwritable file degrades to "no token stored" and is logged as a
warning, so a broken cache never blocks an API call.
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path

logger = logging.getLogger(__name__)


class InMemoryTokenStore:
    """Process-local token store.  Suitable for tests and short-lived scripts."""

    def __init__(self) -> None:
        self._values: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)


class FileTokenStore:
    """
    Token store backed by a JSON object on disk.

    Args:
        path: File holding a ``{key: token}`` object.  Created on first write.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    def get(self, key: str) -> str | None:
        value = self._read().get(key)
        return value if isinstance(value, str) and value else None

    def set(self, key: str, value: str) -> None:
        with self._lock:
            data = self._read()
            data[key] = value
            self._write(data)

    def remove(self, key: str) -> None:
        with self._lock:
            data = self._read()
            if data.pop(key, None) is not None:
                self._write(data)

    def _read(self) -> dict[str, object]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Token store %s is not readable: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Token store %s does not hold a JSON object", self.path)
            return {}
        return data

    def _write(self, data: dict[str, object]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, sort_keys=True), encoding="utf-8")
        except OSError as e:
            logger.warning("Token store %s is not writable: %s", self.path, e)


__all__: list[str] = ["InMemoryTokenStore", "FileTokenStore"]
