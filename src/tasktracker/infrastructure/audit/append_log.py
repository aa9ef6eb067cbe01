from __future__ import annotations

import asyncio
import threading
from datetime import datetime
from pathlib import Path

_registry_lock = threading.Lock()
_file_locks: dict[Path, threading.Lock] = {}


def _lock_for(path: Path) -> threading.Lock:
    with _registry_lock:
        return _file_locks.setdefault(path, threading.Lock())


def format_timestamp(moment: datetime) -> str:
    return f"{moment:%Y-%m-%d %H:%M:%S}.{moment.microsecond // 1000:03d} UTC"


class AppendOnlyLog:
    """Plain-text log file that only ever grows.

    Writes happen in a worker thread and are serialized per file, so entries
    from concurrent requests never interleave.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path).resolve()
        self._lock = _lock_for(self._path)

    @property
    def path(self) -> Path:
        return self._path

    async def append(self, text: str) -> None:
        await asyncio.to_thread(self._append_sync, text)

    def _append_sync(self, text: str) -> None:
        with self._lock:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("a", encoding="utf-8") as handle:
                handle.write(text)
                handle.flush()
