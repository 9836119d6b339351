"""Internal constants shared across the library."""

DEFAULT_ACTION = "default"

WEBHOOKS_FILE = "webhooks.json"
OBJECTS_FILE = "objects.json"
CUSTOM_EVENTS: tuple[str, ...] = ("schedule", "workflow_call")

# ------------------------------------------------------------------
# Manual work-arounds for upstream webhook data
# ------------------------------------------------------------------

# workflow_dispatch inputs are user defined; the upstream schema describes
# a fixed example shape that must not leak into completion.
MANUAL_TRIGGER_EVENT = "workflow_dispatch"
MANUAL_TRIGGER_INPUTS_FIELD = "inputs"
