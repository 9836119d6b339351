"""Webhook parameter and payload models."""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated

from pydantic import Field

from pyeventpayloads.models._base import EventPayloadBaseModel


class ParamType(StrEnum):
    """Type shapes used by the upstream webhook schema.

    Informational only. Values are not checked against them.
    """

    ARRAY_OF_OBJECTS_OR_NULL = "array of objects or null"
    ARRAY_OF_OBJECTS = "array of objects"
    ARRAY_OF_STRINGS_OR_NULL = "array of strings or null"
    ARRAY_OF_STRINGS = "array of strings"
    ARRAY = "array"
    BOOLEAN_OR_NULL = "boolean or null"
    BOOLEAN_OR_STRING_OR_INTEGER_OR_OBJECT = "boolean or string or integer or object"
    BOOLEAN = "boolean"
    INTEGER_OR_NULL = "integer or null"
    INTEGER_OR_STRING_OR_NULL = "integer or string or null"
    INTEGER_OR_STRING = "integer or string"
    INTEGER = "integer"
    NULL = "null"
    NUMBER = "number"
    OBJECT_OR_NULL = "object or null"
    OBJECT_OR_OBJECT_OR_OBJECT_OR_OBJECT = "object or object or object or object"
    OBJECT_OR_OBJECT = "object or object"
    OBJECT_OR_STRING = "object or string"
    OBJECT = "object"
    STRING_OR_NULL = "string or null"
    STRING_OR_NUMBER = "string or number"
    STRING_OR_OBJECT_OR_INTEGER_OR_NULL = "string or object or integer or null"
    STRING_OR_OBJECT_OR_NULL = "string or object or null"
    STRING_OR_OBJECT = "string or object"
    STRING = "string"


class Param(EventPayloadBaseModel):
    """A single field of a webhook payload.

    Parameters
    ----------
    type : ParamType or str
        Declared type shape. Strings outside :class:`ParamType` are kept
        as-is rather than rejected.
    name : str
        Field name.
    in_ : str
        Location of the field, always ``"body"`` for webhooks.
    is_required : bool
        Whether the field is always present.
    description : str
        Human readable description (markdown).
    child_params_groups : list of Param or None
        Nested fields when the field is an object or array of objects.
    enum : list of str or None
        Allowed literal values.
    """

    type: Annotated[ParamType | str, Field(union_mode="left_to_right")] = ParamType.STRING
    name: str
    in_: str = Field(default="body", alias="in")
    is_required: bool = False
    description: str = ""
    child_params_groups: list[Param] | None = None
    enum: list[str] | None = None

    @property
    def is_composite(self) -> bool:
        """``True`` when the field carries nested fields."""
        return bool(self.child_params_groups)


class WebhookPayload(EventPayloadBaseModel):
    """A fully expanded webhook payload description."""

    description_html: str = ""
    summary_html: str = ""
    body_parameters: list[Param] = Field(default_factory=list)

    def find_param(self, name: str) -> Param | None:
        """Return the first top-level parameter called *name*."""
        return next((p for p in self.body_parameters if p.name == name), None)


class DeduplicatedWebhookPayload(EventPayloadBaseModel):
    """A webhook payload as stored on disk.

    Top-level ``body_parameters`` entries are either full records or an
    index into the shared objects table. Nested ``child_params_groups`` are
    always stored in full.
    """

    description_html: str = ""
    summary_html: str = ""
    body_parameters: list[Param | int] = Field(default_factory=list)
