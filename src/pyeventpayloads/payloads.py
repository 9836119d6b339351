"""Event payload queries.

:class:`EventPayloads` is what hover, completion and validation features
call to find out which fields exist on an event payload. Real webhooks
are answered from the rehydrated schema store. Events that are not
webhooks (``schedule``, ``workflow_call``) fall back to their custom
definitions, which have exactly one shape.
"""

from __future__ import annotations

import functools
import logging

from pyeventpayloads._constants import DEFAULT_ACTION
from pyeventpayloads.config import PayloadStoreConfig
from pyeventpayloads.models.description import DescriptionDictionary
from pyeventpayloads.models.params import WebhookPayload
from pyeventpayloads.schema.merge import merge_object, merge_params
from pyeventpayloads.schema.rehydrate import RehydrationCache, Rehydrator
from pyeventpayloads.schema.store import SchemaStore

_logger = logging.getLogger(__name__)


class EventPayloads:
    """Query API over a :class:`SchemaStore`.

    Parameters
    ----------
    store : SchemaStore or None
        Schema data. Loaded with *config* when omitted.
    cache : RehydrationCache or None
        Cache for expanded payloads. A private cache is created when
        omitted.
    config : PayloadStoreConfig or None
        Used only when *store* is omitted.
    """

    def __init__(
        self,
        store: SchemaStore | None = None,
        *,
        cache: RehydrationCache | None = None,
        config: PayloadStoreConfig | None = None,
    ) -> None:
        self._store = store if store is not None else SchemaStore.load(config)
        self._rehydrator = Rehydrator(self._store, cache)

        # Normalized payloads are expanded up front so every caller sees
        # the same cached object.
        for rule in self._store.normalizations:
            self._rehydrator.get_webhook_payload(rule.event, rule.action)

    @property
    def store(self) -> SchemaStore:
        return self._store

    @property
    def cache(self) -> RehydrationCache:
        return self._rehydrator.cache

    def get_supported_event_types(self, event: str) -> list[str]:
        """Action names known for *event*.

        Custom events report the single ``"default"`` action. Unknown
        events report none.
        """
        actions = self._store.actions(event)
        if actions is not None:
            return actions
        if self._store.has_custom_event(event):
            return [DEFAULT_ACTION]
        return []

    def get_webhook_payload(self, event: str, action: str) -> WebhookPayload | None:
        return self._rehydrator.get_webhook_payload(event, action)

    def get_event_payload(self, event: str, action: str) -> DescriptionDictionary | None:
        """Merged description dictionary for ``(event, action)``.

        Returns ``None`` when neither the webhook map nor the custom
        definitions know *event*. *action* is ignored for custom events.

        Raises
        ------
        InvalidReferenceError
            If the schema store is internally inconsistent.
        """
        payload = self._rehydrator.get_webhook_payload(event, action)
        if payload is not None:
            return merge_params(DescriptionDictionary(), payload.body_parameters)

        # Not all events are real webhooks
        if self._store.has_custom_event(event):
            _logger.debug("Using custom payload definition for %s", event)
            return merge_object(DescriptionDictionary(), self._store.custom_event(event))

        _logger.debug("No payload for %s/%s", event, action)
        return None


@functools.lru_cache(maxsize=1)
def default_event_payloads() -> EventPayloads:
    """Shared :class:`EventPayloads` over the bundled schema data."""
    return EventPayloads(config=PayloadStoreConfig.from_env())


def get_supported_event_types(event: str) -> list[str]:
    return default_event_payloads().get_supported_event_types(event)


def get_event_payload(event: str, action: str) -> DescriptionDictionary | None:
    return default_event_payloads().get_event_payload(event, action)
