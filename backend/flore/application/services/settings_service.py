"""Application service for the storefront's site settings.

Settings are a schemaless bag of copy (site name, hero text, contact and
opening hours). Updates are a shallow merge: keys absent from the patch
keep their previous value and no key is ever deleted.
"""

import copy
import logging
from collections.abc import Mapping
from typing import Any

from flore.application.services.document_store import DocumentStore
from flore.domain.default_document import SETTINGS
from flore.domain.exceptions import DomainValidationError

logger = logging.getLogger(__name__)


class SettingsService:
    def __init__(self, store: DocumentStore):
        self._store = store

    def read_settings(self) -> dict[str, Any]:
        return self._store.read(SETTINGS)

    async def update_settings(self, patch: Mapping[str, Any]) -> dict[str, Any]:
        """Merge ``patch`` into the stored settings and return the full result."""
        if not isinstance(patch, Mapping):
            raise DomainValidationError("Settings patch must be an object")
        changes = copy.deepcopy(dict(patch))

        def _merge(doc: dict[str, Any]) -> dict[str, Any]:
            doc[SETTINGS].update(changes)
            return copy.deepcopy(doc[SETTINGS])

        merged = await self._store.mutate(_merge)
        logger.info("Settings updated: %s", ", ".join(sorted(changes)) or "no changes")
        return merged
