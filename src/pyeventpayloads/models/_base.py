"""Base model for schema store records.

Every record model inherits from :class:`EventPayloadBaseModel` which
provides:

* ``alias_generator=to_camel`` so the camelCase keys of the JSON schema
  files map automatically to snake_case fields.
* Frozen instances. Rehydrated payloads are shared through the cache and
  must not change under a caller.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class EventPayloadBaseModel(BaseModel):
    """Base for schema store records."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )
