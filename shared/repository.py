"""
Base repository class for JSON file persistence.

A repository owns exactly one JSON document on disk and always reads and
rewrites it whole. Subclasses map the raw document to pydantic models
and translate I/O failures into their module's storage exceptions.
"""

import asyncio
import json
import os
import tempfile
from pathlib import Path
from typing import Any, Generic, TypeVar


T = TypeVar("T")


class JsonFileRepository(Generic[T]):
    """
    Base class for file-backed repositories.

    Provides common functionality for whole-document storage:
    - ``self._path``: location of the JSON document
    - ``self._lock``: serializes read-modify-write cycles within the process
    - atomic writes (temp file in the same directory, then ``os.replace``)

    The helpers here are blocking; subclasses expose async methods and
    push the helpers to a worker thread.

    Example:
        class UserRepository(JsonFileRepository[User]):
            async def load(self) -> list[User]:
                document = await run_in_threadpool(self._read_document)
                return [User.model_validate(item) for item in document]
    """

    def __init__(self, path: Path) -> None:
        """
        Initialize the repository for a document path.

        Args:
            path: JSON file to read and write. Parent directories are
                created on demand by ``_create_if_missing``.
        """
        self._path = Path(path)
        self._lock = asyncio.Lock()

    @property
    def path(self) -> Path:
        """Location of the backing JSON document."""
        return self._path

    def _create_if_missing(self, empty_document: Any) -> bool:
        """
        Create the document with ``empty_document`` if it does not exist.

        Returns:
            True if the file was created, False if it already existed.
        """
        self._path.parent.mkdir(parents=True, exist_ok=True)
        if self._path.exists():
            return False
        self._write_document(empty_document)
        return True

    def _read_document(self) -> Any:
        """
        Read and parse the whole document.

        Raises:
            FileNotFoundError: If the document does not exist.
            json.JSONDecodeError: If the document is not valid JSON.
        """
        with open(self._path, "r", encoding="utf-8") as f:
            return json.load(f)

    def _write_document(self, document: Any) -> None:
        """Replace the document atomically, pretty-printed with 2-space indent."""
        with tempfile.NamedTemporaryFile(
            mode="w",
            dir=self._path.parent,
            prefix=f".{self._path.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        ) as tf:
            temp_path = Path(tf.name)
            try:
                json.dump(document, tf, indent=2, ensure_ascii=False)
                tf.flush()
                os.fsync(tf.fileno())
            except BaseException:
                tf.close()
                temp_path.unlink(missing_ok=True)
                raise

        try:
            os.replace(temp_path, self._path)
        except OSError:
            temp_path.unlink(missing_ok=True)
            raise
