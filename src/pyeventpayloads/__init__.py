"""pyeventpayloads - Webhook event payload schemas for workflow authoring tools."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyeventpayloads")
except PackageNotFoundError:
    __version__ = "0+local"
from pyeventpayloads.config import PayloadStoreConfig
from pyeventpayloads.exceptions import (
    EventPayloadError,
    InvalidReferenceError,
    PayloadStoreConfigError,
    SchemaLoadError,
    SchemaStoreError,
)
from pyeventpayloads.models import (
    NULL,
    DescriptionDictionary,
    DescriptionPair,
    Param,
    ParamType,
    WebhookPayload,
)
from pyeventpayloads.payloads import (
    EventPayloads,
    default_event_payloads,
    get_event_payload,
    get_supported_event_types,
)
from pyeventpayloads.schema import RehydrationCache, Rehydrator, SchemaStore, StripChildParams

__all__ = [
    "__version__",
    "DescriptionDictionary",
    "DescriptionPair",
    "EventPayloadError",
    "EventPayloads",
    "InvalidReferenceError",
    "NULL",
    "Param",
    "ParamType",
    "PayloadStoreConfig",
    "PayloadStoreConfigError",
    "RehydrationCache",
    "Rehydrator",
    "SchemaLoadError",
    "SchemaStore",
    "SchemaStoreError",
    "StripChildParams",
    "WebhookPayload",
    "default_event_payloads",
    "get_event_payload",
    "get_supported_event_types",
]
