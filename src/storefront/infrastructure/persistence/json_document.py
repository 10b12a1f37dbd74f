"""A JSON file holding the whole store, shared by repositories and the
unit of work.

Layout::

    {"products": [...], "orders": [...], "order_lines": [...]}

Writes go to a temporary file that replaces the original in one
``os.replace`` call, so readers only ever see a complete document.
Every writer holds the per-path lock for its whole read-modify-write.
"""

from __future__ import annotations

import json
import os
import tempfile
import threading
from pathlib import Path

_EMPTY = {"products": [], "orders": [], "order_lines": []}

_locks: dict[Path, threading.RLock] = {}
_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    with _locks_guard:
        return _locks.setdefault(path, threading.RLock())


class JsonDocument:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path.resolve()
        self.lock = _lock_for(self._file_path)
        self._ensure_file()

    @property
    def path(self) -> Path:
        return self._file_path

    def load(self) -> dict:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        for table, empty in _EMPTY.items():
            raw.setdefault(table, list(empty))
        return raw

    def persist(self, data: dict) -> None:
        fd, tmp_name = tempfile.mkstemp(
            dir=self._file_path.parent, prefix=".store-", suffix=".json"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(json.dumps(data, indent=2) + "\n")
            os.replace(tmp_name, self._file_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _ensure_file(self) -> None:
        with self.lock:
            if not self._file_path.exists():
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
                self.persist({table: [] for table in _EMPTY})
