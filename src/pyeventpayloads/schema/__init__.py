"""Schema store, rehydration and merge engine."""

from pyeventpayloads.schema.merge import merge_object, merge_param, merge_params
from pyeventpayloads.schema.rehydrate import RehydrationCache, Rehydrator
from pyeventpayloads.schema.store import MANUAL_TRIGGER_INPUTS, SchemaStore, StripChildParams

__all__ = [
    "MANUAL_TRIGGER_INPUTS",
    "RehydrationCache",
    "Rehydrator",
    "SchemaStore",
    "StripChildParams",
    "merge_object",
    "merge_param",
    "merge_params",
]
