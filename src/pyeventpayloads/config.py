"""Schema store configuration for pyeventpayloads."""

from __future__ import annotations

import dataclasses
import os
from pathlib import Path
from typing import Any

from pyeventpayloads._constants import CUSTOM_EVENTS, OBJECTS_FILE, WEBHOOKS_FILE
from pyeventpayloads.exceptions import PayloadStoreConfigError


def _env_bool(name: str, value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    raise PayloadStoreConfigError(f"{name} must be a boolean, got {value!r}")


@dataclasses.dataclass(frozen=True)
class PayloadStoreConfig:
    """Where and how the schema store is loaded.

    Parameters
    ----------
    data_dir : Path or None
        Directory holding the JSON schema files. ``None`` loads the
        files bundled with the package.
    webhooks_file : str
        File name of the deduplicated webhook map.
    objects_file : str
        File name of the shared objects table.
    custom_events : tuple of str
        Events without a real webhook. Each is read from ``<event>.json``.
    strip_inputs : bool
        Drop the nested children of the ``workflow_dispatch`` ``inputs``
        field after loading. Inputs are user defined, so the upstream
        example shape is not useful for completion.
    """

    data_dir: Path | None = None
    webhooks_file: str = WEBHOOKS_FILE
    objects_file: str = OBJECTS_FILE
    custom_events: tuple[str, ...] = CUSTOM_EVENTS
    strip_inputs: bool = True

    @classmethod
    def from_env(cls, **overrides: Any) -> PayloadStoreConfig:
        """Create configuration from environment variables.

        Reads ``EVENT_PAYLOADS_DATA_DIR`` and ``EVENT_PAYLOADS_STRIP_INPUTS``.
        Explicit keyword arguments override environment values.

        Raises
        ------
        PayloadStoreConfigError
            If an environment value cannot be parsed.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        data_dir = env.get("EVENT_PAYLOADS_DATA_DIR")
        if data_dir and "data_dir" not in overrides:
            config_kwargs["data_dir"] = Path(data_dir).expanduser()

        if "strip_inputs" not in overrides:
            config_kwargs["strip_inputs"] = _env_bool(
                "EVENT_PAYLOADS_STRIP_INPUTS",
                env.get("EVENT_PAYLOADS_STRIP_INPUTS"),
                True,
            )

        # Accept plain strings for data_dir
        data_dir_override = overrides.get("data_dir")
        if isinstance(data_dir_override, str):
            overrides["data_dir"] = Path(data_dir_override)

        config_kwargs.update(overrides)
        return cls(**config_kwargs)
