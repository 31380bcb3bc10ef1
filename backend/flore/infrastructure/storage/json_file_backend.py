"""Local filesystem storage for the storefront document.

Storage layout:
    <data_file>              — the whole document, JSON, two-space indent
    <data_file>.<random>.tmp — transient, replaced atomically onto <data_file>
"""

import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from flore.application.interfaces import DocumentBackend
from flore.domain.exceptions import PersistenceFailure

logger = logging.getLogger(__name__)


class JsonFileBackend(DocumentBackend):
    """Infrastructure adapter persisting the document as a single JSON file."""

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    async def read(self) -> dict[str, Any] | None:
        return await asyncio.to_thread(self._read_sync)

    async def write(self, document: dict[str, Any]) -> None:
        await asyncio.to_thread(self._write_sync, document)

    # ── Blocking helpers (run in a worker thread) ───────────────────

    def _read_sync(self) -> dict[str, Any] | None:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("Data file %s does not exist yet", self._path)
            return None
        except OSError as exc:
            raise PersistenceFailure(f"Could not read {self._path}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise PersistenceFailure(f"{self._path} is not valid UTF-8: {exc}") from exc

        if not raw.strip():
            return None

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise PersistenceFailure(f"{self._path} is not valid JSON: {exc}") from exc

        if data is None:
            return None
        if not isinstance(data, dict):
            raise PersistenceFailure(f"{self._path} must hold a JSON object")
        return data

    def _write_sync(self, document: dict[str, Any]) -> None:
        try:
            payload = json.dumps(document, indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise PersistenceFailure(f"Document is not JSON serialisable: {exc}") from exc

        tmp_path: str | None = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                prefix=f"{self._path.name}.", suffix=".tmp", dir=self._path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_path, self._path)
            tmp_path = None
        except OSError as exc:
            raise PersistenceFailure(f"Could not write {self._path}: {exc}") from exc
        finally:
            if tmp_path is not None:
                Path(tmp_path).unlink(missing_ok=True)

        logger.debug("Wrote %s (%d bytes)", self._path, len(payload.encode("utf-8")))
