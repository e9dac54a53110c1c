"""A JSON array of records on disk, replaced atomically on every write."""

from __future__ import annotations

import contextlib
import json
import os
import tempfile
from collections.abc import Callable, Iterator
from decimal import DecimalException
from pathlib import Path
from typing import TypeVar

from filelock import FileLock, Timeout

from ecommerce.domain.exceptions import DomainException, StorageError

T = TypeVar("T")

LOCK_TIMEOUT_SECONDS = 10.0


class JsonFile:
    """Writers must hold ``locked()`` across their load-modify-persist cycle.

    The lock is an OS-level file lock next to the data file, so it holds
    across threads and processes alike.
    """

    def __init__(self, file_path: Path, lock_timeout: float = LOCK_TIMEOUT_SECONDS) -> None:
        self._file_path = file_path
        self._lock = FileLock(f"{file_path}.lock", timeout=lock_timeout)
        self._ensure_file()

    @property
    def path(self) -> Path:
        return self._file_path

    @contextlib.contextmanager
    def locked(self) -> Iterator[None]:
        try:
            self._lock.acquire()
        except Timeout as exc:
            raise StorageError(f"Timed out waiting for the lock on {self._file_path}") from exc
        try:
            yield
        finally:
            self._lock.release()

    def load(self) -> list[dict]:
        try:
            records = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise StorageError(f"Cannot read {self._file_path}: {exc}") from exc
        if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
            raise StorageError(f"{self._file_path} does not hold a list of records")
        return records

    def load_as(self, to_domain: Callable[[dict], T]) -> list[T]:
        """Load every record and convert it with *to_domain*.

        A record with missing keys or unusable values is a storage fault,
        not a caller error.
        """
        records = self.load()
        try:
            return [to_domain(raw) for raw in records]
        except (KeyError, TypeError, ValueError, DecimalException, DomainException) as exc:
            raise StorageError(f"Malformed record in {self._file_path}: {exc!r}") from exc

    def persist(self, records: list[dict]) -> None:
        """Write *records* to a private temp file, then swap it in.

        Readers see either the old file or the new one, never a partial
        write.
        """
        payload = json.dumps(records, indent=2) + "\n"
        tmp_name: str | None = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self._file_path.parent,
                prefix=f"{self._file_path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(payload)
            os.replace(tmp_name, self._file_path)
        except OSError as exc:
            if tmp_name is not None:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)
            raise StorageError(f"Cannot write {self._file_path}: {exc}") from exc

    def _ensure_file(self) -> None:
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(f"Cannot create {self._file_path.parent}: {exc}") from exc
        with self.locked():
            if not self._file_path.exists():
                self.persist([])
