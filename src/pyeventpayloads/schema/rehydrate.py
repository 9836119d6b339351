"""Rehydration of deduplicated webhook payloads.

Only the top-level ``body_parameters`` list of a stored payload uses
integer references. Objects table entries are stored fully materialized,
so expansion is a single pass over that list.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from pyeventpayloads.models.params import Param, WebhookPayload
from pyeventpayloads.schema.store import SchemaStore

_logger = logging.getLogger(__name__)


class RehydrationCache:
    """``event -> action -> WebhookPayload`` cache of expanded payloads.

    Entries are created at most once per key and never replaced, so the
    same object is returned for every lookup of a pair.
    """

    def __init__(self) -> None:
        self._payloads: dict[str, dict[str, WebhookPayload]] = {}
        self._lock = threading.Lock()

    def get(self, event: str, action: str) -> WebhookPayload | None:
        return self._payloads.get(event, {}).get(action)

    def get_or_create(
        self,
        event: str,
        action: str,
        factory: Callable[[], WebhookPayload | None],
    ) -> WebhookPayload | None:
        """Return the cached payload, building it with *factory* if absent.

        The check and insert happen under one lock. A ``None`` result from
        *factory* is not cached.
        """
        existing = self.get(event, action)
        if existing is not None:
            return existing

        with self._lock:
            existing = self.get(event, action)
            if existing is not None:
                return existing
            payload = factory()
            if payload is None:
                return None
            self._payloads.setdefault(event, {})[action] = payload
            return payload

    def clear(self) -> None:
        with self._lock:
            self._payloads.clear()

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        event, action = key
        return action in self._payloads.get(event, {})

    def __len__(self) -> int:
        return sum(len(actions) for actions in self._payloads.values())


class Rehydrator:
    """Resolve ``(event, action)`` to a fully expanded webhook payload."""

    def __init__(self, store: SchemaStore, cache: RehydrationCache | None = None) -> None:
        self._store = store
        self._cache = cache if cache is not None else RehydrationCache()

    @property
    def cache(self) -> RehydrationCache:
        return self._cache

    def get_webhook_payload(self, event: str, action: str) -> WebhookPayload | None:
        """Return the expanded payload, or ``None`` for an unknown pair.

        Raises
        ------
        InvalidReferenceError
            If the stored payload references a missing objects table entry.
        """
        return self._cache.get_or_create(event, action, lambda: self._expand(event, action))

    def full_param(self, entry: Param | int) -> Param:
        if isinstance(entry, int):
            return self._store.object_at(entry)
        return entry

    def _expand(self, event: str, action: str) -> WebhookPayload | None:
        deduplicated = self._store.deduplicated_payload(event, action)
        if deduplicated is None:
            return None

        _logger.debug("Rehydrating %s/%s", event, action)
        params = [self.full_param(entry) for entry in deduplicated.body_parameters]
        return WebhookPayload(
            description_html=deduplicated.description_html,
            summary_html=deduplicated.summary_html,
            body_parameters=params,
        )
