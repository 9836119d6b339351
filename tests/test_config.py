from __future__ import annotations

from pathlib import Path

import pytest

from pyeventpayloads.config import PayloadStoreConfig
from pyeventpayloads.exceptions import PayloadStoreConfigError


def test_defaults() -> None:
    config = PayloadStoreConfig()

    assert config.data_dir is None
    assert config.webhooks_file == "webhooks.json"
    assert config.objects_file == "objects.json"
    assert config.custom_events == ("schedule", "workflow_call")
    assert config.strip_inputs is True


def test_from_env_reads_variables(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("EVENT_PAYLOADS_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("EVENT_PAYLOADS_STRIP_INPUTS", "off")

    config = PayloadStoreConfig.from_env()

    assert config.data_dir == tmp_path
    assert config.strip_inputs is False


def test_from_env_overrides_win(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("EVENT_PAYLOADS_DATA_DIR", "/somewhere/else")
    monkeypatch.setenv("EVENT_PAYLOADS_STRIP_INPUTS", "0")

    config = PayloadStoreConfig.from_env(data_dir=str(tmp_path), strip_inputs=True)

    assert config.data_dir == tmp_path
    assert config.strip_inputs is True


def test_from_env_without_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("EVENT_PAYLOADS_DATA_DIR", raising=False)
    monkeypatch.delenv("EVENT_PAYLOADS_STRIP_INPUTS", raising=False)

    assert PayloadStoreConfig.from_env() == PayloadStoreConfig()


def test_from_env_rejects_bad_boolean(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EVENT_PAYLOADS_STRIP_INPUTS", "maybe")

    with pytest.raises(PayloadStoreConfigError, match="EVENT_PAYLOADS_STRIP_INPUTS"):
        PayloadStoreConfig.from_env()
