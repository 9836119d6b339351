from __future__ import annotations

import threading
import time
from typing import Any

import pytest

from pyeventpayloads.exceptions import InvalidReferenceError
from pyeventpayloads.models.params import Param
from pyeventpayloads.schema.rehydrate import RehydrationCache, Rehydrator
from pyeventpayloads.schema.store import SchemaStore


def _param(name: str, **kwargs: Any) -> dict[str, Any]:
    return {"type": "string", "name": name, "in": "body", "isRequired": True, "description": "", **kwargs}


def _objects() -> list[dict[str, Any]]:
    return [
        _param("sender", type="object", childParamsGroups=[_param("login")]),
        _param("repository", type="object", childParamsGroups=[_param("name")]),
    ]


def _store(body: list[Any]) -> SchemaStore:
    webhooks = {"push": {"default": {"descriptionHtml": "d", "summaryHtml": "s", "bodyParameters": body}}}
    return SchemaStore(webhooks, _objects())


def test_references_resolve_to_objects_table_entries() -> None:
    store = _store([_param("ref"), 1, 0])
    payload = Rehydrator(store).get_webhook_payload("push", "default")

    assert payload is not None
    assert [p.name for p in payload.body_parameters] == ["ref", "repository", "sender"]
    assert payload.body_parameters[1] is store.object_at(1)
    assert payload.body_parameters[2] is store.object_at(0)
    assert payload.description_html == "d"
    assert payload.summary_html == "s"


def test_rehydration_is_cached() -> None:
    rehydrator = Rehydrator(_store([0]))

    first = rehydrator.get_webhook_payload("push", "default")
    second = rehydrator.get_webhook_payload("push", "default")

    assert first is not None
    assert first is second
    assert ("push", "default") in rehydrator.cache
    assert len(rehydrator.cache) == 1


def test_unknown_pair_is_not_found() -> None:
    rehydrator = Rehydrator(_store([0]))

    assert rehydrator.get_webhook_payload("push", "opened") is None
    assert rehydrator.get_webhook_payload("nope", "default") is None
    assert len(rehydrator.cache) == 0


@pytest.mark.parametrize("index", [2, 100])
def test_out_of_range_reference_raises(index: int) -> None:
    rehydrator = Rehydrator(_store([0, index]))

    with pytest.raises(InvalidReferenceError) as excinfo:
        rehydrator.get_webhook_payload("push", "default")

    assert excinfo.value.index == index
    assert excinfo.value.table_size == 2
    assert str(index) in str(excinfo.value)
    assert ("push", "default") not in rehydrator.cache


def test_nested_children_are_not_rehydrated() -> None:
    store = _store([_param("outer", type="object", childParamsGroups=[_param("inner")])])
    payload = Rehydrator(store).get_webhook_payload("push", "default")

    assert payload is not None
    outer = payload.body_parameters[0]
    assert outer.child_params_groups is not None
    assert [p.name for p in outer.child_params_groups] == ["inner"]


def test_shared_cache_is_used_across_rehydrators() -> None:
    store = _store([0])
    cache = RehydrationCache()

    first = Rehydrator(store, cache).get_webhook_payload("push", "default")
    second = Rehydrator(store, cache).get_webhook_payload("push", "default")

    assert first is second


class TestRehydrationCache:
    def test_factory_called_once(self) -> None:
        cache = RehydrationCache()
        calls: list[int] = []
        store = _store([0])

        def factory() -> Any:
            calls.append(1)
            return Rehydrator(store, RehydrationCache()).get_webhook_payload("push", "default")

        first = cache.get_or_create("push", "default", factory)
        second = cache.get_or_create("push", "default", factory)

        assert first is second
        assert len(calls) == 1

    def test_none_is_not_cached(self) -> None:
        cache = RehydrationCache()

        assert cache.get_or_create("push", "default", lambda: None) is None
        assert ("push", "default") not in cache

    def test_clear(self) -> None:
        cache = RehydrationCache()
        store = _store([0])
        cache.get_or_create(
            "push", "default", lambda: Rehydrator(store, RehydrationCache()).get_webhook_payload("push", "default")
        )

        cache.clear()

        assert len(cache) == 0
        assert cache.get("push", "default") is None

    def test_contains_rejects_non_pairs(self) -> None:
        assert "push" not in RehydrationCache()

    def test_concurrent_callers_expand_once(self) -> None:
        cache = RehydrationCache()
        store = _store([0])
        calls: list[int] = []
        results: list[Any] = []
        start = threading.Barrier(8)

        def factory() -> Any:
            calls.append(1)
            time.sleep(0.05)
            return Rehydrator(store, RehydrationCache()).get_webhook_payload("push", "default")

        def worker() -> None:
            start.wait()
            results.append(cache.get_or_create("push", "default", factory))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=5)

        assert len(calls) == 1
        assert len(results) == 8
        assert results[0] is not None
        assert all(result is results[0] for result in results)


def test_full_param_passes_records_through() -> None:
    store = _store([])
    record = Param(name="x")

    assert Rehydrator(store).full_param(record) is record
    assert Rehydrator(store).full_param(1) is store.object_at(1)
