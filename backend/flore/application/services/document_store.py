"""Document store — owns the in-memory document and its durable copy.

Lifecycle:
    store = DocumentStore(backend, default_factory)
    await store.load()                 # bootstrap on empty storage, else load as-is
    value = store.read("settings")     # deep copy, no lock
    await store.mutate(lambda doc: ...)  # transform + full commit, serialised

All mutations go through ``mutate``. An ``asyncio.Lock`` is held across the
transform and the commit, so two concurrent mutations can never base their
change on the same snapshot and silently overwrite each other.
"""

import asyncio
import copy
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from flore.application.interfaces import DocumentBackend
from flore.domain.default_document import OBJECT_KEYS, TOP_LEVEL_KEYS
from flore.domain.exceptions import PersistenceFailure

logger = logging.getLogger(__name__)

T = TypeVar("T")

Document = dict[str, Any]


def _is_structurally_empty(data: Document | None) -> bool:
    """True when storage is absent or holds none of the top-level keys."""
    if not data:
        return True
    return not any(key in data for key in TOP_LEVEL_KEYS)


class DocumentStore:
    """Single writable instance of the storefront document."""

    def __init__(
        self,
        backend: DocumentBackend,
        default_factory: Callable[[], Awaitable[Document]],
    ) -> None:
        self._backend = backend
        self._default_factory = default_factory
        self._document: Document | None = None
        self._lock = asyncio.Lock()
        self._diverged = False

    # ── Lifecycle ───────────────────────────────────────────────────

    async def load(self) -> None:
        """Read durable storage, bootstrapping the default dataset if it is empty.

        An existing document is never merged with the defaults; only missing
        top-level keys are filled with empty containers.
        """
        data = await self._backend.read()

        if _is_structurally_empty(data):
            logger.info("No stored document found — bootstrapping default dataset")
            document = await self._default_factory()
            async with self._lock:
                self._document = document
                await self._write()
            logger.info("Document store initialised with default data")
            return

        missing = [key for key in TOP_LEVEL_KEYS if data.get(key) is None]
        for key in missing:
            data[key] = {} if key in OBJECT_KEYS else []
        for key in TOP_LEVEL_KEYS:
            expected = dict if key in OBJECT_KEYS else list
            if not isinstance(data[key], expected):
                raise PersistenceFailure(
                    f"Stored document key '{key}' must be a {expected.__name__}"
                )
        if missing:
            logger.warning(
                "Stored document is missing top-level keys %s — using empty values",
                ", ".join(missing),
            )

        self._document = data
        logger.info(
            "Document store loaded (%s)",
            ", ".join(
                f"{key}={len(data[key])}" for key in TOP_LEVEL_KEYS if key not in OBJECT_KEYS
            ),
        )

    async def commit(self) -> None:
        """Write the full in-memory document to durable storage."""
        async with self._lock:
            await self._write()

    async def mutate(self, fn: Callable[[Document], T]) -> T:
        """Apply ``fn`` to the live document, then commit. Returns ``fn``'s result.

        ``fn`` runs synchronously under the store lock and must not keep
        references to the document or its collections after it returns.
        If ``fn`` raises, nothing is written. If the commit fails, the
        in-memory change stays in place and PersistenceFailure propagates.
        """
        async with self._lock:
            result = fn(self._require_document())
            await self._write()
            return result

    # ── Reads ───────────────────────────────────────────────────────

    def read(self, key: str) -> Any:
        """Return a deep copy of one top-level value."""
        return copy.deepcopy(self._require_document()[key])

    def snapshot(self) -> Document:
        """Return a deep copy of the whole document."""
        return copy.deepcopy(self._require_document())

    @property
    def loaded(self) -> bool:
        return self._document is not None

    @property
    def diverged(self) -> bool:
        """True after a failed commit left memory ahead of durable storage."""
        return self._diverged

    # ── Internals ───────────────────────────────────────────────────

    def _require_document(self) -> Document:
        if self._document is None:
            raise RuntimeError("DocumentStore.load() must be awaited before use")
        return self._document

    async def _write(self) -> None:
        """Persist the current document. Caller must hold the lock."""
        try:
            await self._backend.write(self._require_document())
        except PersistenceFailure:
            self._diverged = True
            logger.error("Commit failed — in-memory document now differs from durable storage")
            raise
        self._diverged = False
