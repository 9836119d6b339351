"""Fold payload descriptions into description dictionaries.

Two input shapes end up in the same :class:`DescriptionDictionary`:

* :class:`Param` trees from real webhooks (:func:`merge_param`), which
  carry descriptions.
* Plain nested JSON values from custom events (:func:`merge_object`),
  which only carry structure.

In both cases the first entry added under a name wins.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pyeventpayloads.models.description import NULL, DescriptionDictionary
from pyeventpayloads.models.params import Param


def merge_param(target: DescriptionDictionary, param: Param) -> None:
    """Add *param* to *target*.

    Composite params become nested dictionaries built depth-first from
    their children. Everything else becomes a :data:`NULL` leaf: for
    completion and validation only existence and description matter.
    """
    if param.is_composite:
        nested = DescriptionDictionary()
        for child in param.child_params_groups or ():
            merge_param(nested, child)
        target.add(param.name, nested, param.description)
        return

    if param.name in target:
        return
    target.add(param.name, NULL, param.description)


def merge_params(target: DescriptionDictionary, params: Iterable[Param]) -> DescriptionDictionary:
    for param in params:
        merge_param(target, param)
    return target


def _entries(value: Any) -> Iterable[tuple[str, Any]]:
    match value:
        case Mapping():
            return ((str(key), item) for key, item in value.items())
        case list():
            return ((str(index), item) for index, item in enumerate(value))
        case _:
            return ()


def merge_object(target: DescriptionDictionary, value: Any) -> DescriptionDictionary:
    """Fold the structure of a plain nested value into *target*.

    List indices are used as string keys and a scalar *value* adds
    nothing. Nested scalars and empty mappings become
    :data:`NULL` leaves; non-empty mappings and all lists, empty ones
    included, become nested dictionaries.
    """
    for key, item in _entries(value):
        if key in target:
            continue
        match item:
            case Mapping() if not item:
                # An empty object may hold any value
                target.add(key, NULL)
            case Mapping() | list():
                target.add(key, merge_object(DescriptionDictionary(), item))
            case _:
                target.add(key, NULL)
    return target
