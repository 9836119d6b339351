"""Read-only schema store.

Holds the three tables the rest of the library works from:

* the deduplicated webhook map (``event -> action -> payload``), whose
  top-level ``bodyParameters`` may be integer references,
* the shared objects table those references point into,
* custom event definitions: plain JSON values for events that are not
  real webhooks.

Post-load normalization rules run once in the constructor. Nothing
mutates the tables afterwards.
"""

from __future__ import annotations

import importlib.resources
import json
import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from pyeventpayloads._constants import DEFAULT_ACTION, MANUAL_TRIGGER_EVENT, MANUAL_TRIGGER_INPUTS_FIELD
from pyeventpayloads.config import PayloadStoreConfig
from pyeventpayloads.exceptions import InvalidReferenceError, SchemaLoadError
from pyeventpayloads.models.params import DeduplicatedWebhookPayload, Param

_logger = logging.getLogger(__name__)

_WEBHOOKS_ADAPTER: TypeAdapter[dict[str, dict[str, DeduplicatedWebhookPayload]]] = TypeAdapter(
    dict[str, dict[str, DeduplicatedWebhookPayload]]
)
_OBJECTS_ADAPTER: TypeAdapter[list[Param]] = TypeAdapter(list[Param])


@dataclass(frozen=True)
class StripChildParams:
    """Drop the nested fields of one top-level parameter of one payload."""

    event: str
    action: str
    field: str


MANUAL_TRIGGER_INPUTS = StripChildParams(MANUAL_TRIGGER_EVENT, DEFAULT_ACTION, MANUAL_TRIGGER_INPUTS_FIELD)


def _read_json(config: PayloadStoreConfig, name: str) -> Any:
    if config.data_dir is not None:
        path = config.data_dir / name
        _logger.debug("Loading schema data from %s", path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise SchemaLoadError(f"Schema file not readable: {path}", path=path) from exc
        source: Path | str = path
    else:
        _logger.debug("Loading schema data %s from package data", name)
        try:
            ref = importlib.resources.files("pyeventpayloads").joinpath(f"data/{name}")
            text = ref.read_text(encoding="utf-8")
        except (FileNotFoundError, OSError) as exc:
            raise SchemaLoadError(f"{name} not found in package data", path=name) from exc
        source = name

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaLoadError(f"Invalid JSON in {source}: {exc}", path=source) from exc


class SchemaStore:
    """Deduplicated webhook schemas plus custom event definitions.

    Parameters
    ----------
    webhooks : mapping
        ``event -> action -> payload``. Payloads may be raw dicts or
        :class:`DeduplicatedWebhookPayload` instances.
    objects : sequence
        The shared objects table, raw dicts or :class:`Param` instances.
    custom_events : mapping or None
        ``event -> plain JSON value`` for events that are not webhooks.
    normalizations : iterable of StripChildParams
        Rules applied once after the tables are built.

    Raises
    ------
    SchemaLoadError
        If a table does not match the expected record shapes.
    """

    def __init__(
        self,
        webhooks: Mapping[str, Mapping[str, Any]],
        objects: Sequence[Any],
        custom_events: Mapping[str, Any] | None = None,
        *,
        normalizations: Iterable[StripChildParams] = (),
    ) -> None:
        try:
            self._webhooks = _WEBHOOKS_ADAPTER.validate_python(webhooks)
        except ValidationError as exc:
            raise SchemaLoadError(f"Invalid webhook map: {exc}") from exc
        try:
            self._objects = _OBJECTS_ADAPTER.validate_python(objects)
        except ValidationError as exc:
            raise SchemaLoadError(f"Invalid objects table: {exc}") from exc
        self._custom_events: dict[str, Any] = dict(custom_events or {})
        self._normalizations = tuple(normalizations)

        for rule in self._normalizations:
            self._strip_child_params(rule)

    @classmethod
    def load(cls, config: PayloadStoreConfig | None = None) -> SchemaStore:
        """Load the store from JSON files.

        Reads from ``config.data_dir`` when set, otherwise from the data
        bundled with the package.
        """
        config = config or PayloadStoreConfig()
        webhooks = _read_json(config, config.webhooks_file)
        objects = _read_json(config, config.objects_file)
        custom_events = {name: _read_json(config, f"{name}.json") for name in config.custom_events}
        normalizations = (MANUAL_TRIGGER_INPUTS,) if config.strip_inputs else ()

        store = cls(webhooks, objects, custom_events, normalizations=normalizations)
        _logger.debug(
            "Schema store loaded: %d events, %d shared objects, %d custom events",
            len(store._webhooks),
            len(store._objects),
            len(store._custom_events),
        )
        return store

    def _strip_child_params(self, rule: StripChildParams) -> bool:
        """Remove ``child_params_groups`` from the field named by *rule*.

        Only the first top-level parameter with the field name is changed.
        A referenced parameter is copied out of the objects table, so other
        payloads sharing that object keep their children. Returns ``True``
        when a parameter was rewritten.
        """
        payload = self.deduplicated_payload(rule.event, rule.action)
        if payload is None:
            _logger.debug("No payload for %s/%s, skipping normalization", rule.event, rule.action)
            return False

        for position, entry in enumerate(payload.body_parameters):
            param = self.object_at(entry) if isinstance(entry, int) else entry
            if param.name != rule.field:
                continue
            params = list(payload.body_parameters)
            params[position] = param.model_copy(update={"child_params_groups": None})
            self._webhooks[rule.event][rule.action] = payload.model_copy(update={"body_parameters": params})
            _logger.debug("Stripped child params of %s in %s/%s", rule.field, rule.event, rule.action)
            return True

        _logger.debug("No %s parameter in %s/%s, skipping normalization", rule.field, rule.event, rule.action)
        return False

    @property
    def normalizations(self) -> tuple[StripChildParams, ...]:
        return self._normalizations

    @property
    def object_count(self) -> int:
        return len(self._objects)

    def events(self) -> list[str]:
        return list(self._webhooks)

    def actions(self, event: str) -> list[str] | None:
        """Action names stored for a webhook *event*, ``None`` if unknown."""
        actions = self._webhooks.get(event)
        if actions is None:
            return None
        return list(actions)

    def deduplicated_payload(self, event: str, action: str) -> DeduplicatedWebhookPayload | None:
        return self._webhooks.get(event, {}).get(action)

    def object_at(self, index: int) -> Param:
        """Return the objects table entry at *index*.

        Raises
        ------
        InvalidReferenceError
            If *index* is outside the table.
        """
        if index < 0 or index >= len(self._objects):
            raise InvalidReferenceError(index, table_size=len(self._objects))
        return self._objects[index]

    def custom_events(self) -> list[str]:
        return [event for event, definition in self._custom_events.items() if definition is not None]

    def has_custom_event(self, event: str) -> bool:
        """``True`` when *event* has a definition. A JSON ``null`` counts as none."""
        return self._custom_events.get(event) is not None

    def custom_event(self, event: str) -> Any:
        """Plain definition of a custom event, ``None`` if unknown."""
        return self._custom_events.get(event)
