"""Data models for webhook payload schemas."""

from pyeventpayloads.models._base import EventPayloadBaseModel
from pyeventpayloads.models.description import (
    NULL,
    DescriptionDictionary,
    DescriptionPair,
    DescriptionValue,
    NullValue,
)
from pyeventpayloads.models.params import (
    DeduplicatedWebhookPayload,
    Param,
    ParamType,
    WebhookPayload,
)

__all__ = [
    "DeduplicatedWebhookPayload",
    "DescriptionDictionary",
    "DescriptionPair",
    "DescriptionValue",
    "EventPayloadBaseModel",
    "NULL",
    "NullValue",
    "Param",
    "ParamType",
    "WebhookPayload",
]
