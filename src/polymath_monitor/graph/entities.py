"""
Entity adapters for graph query rows.

Rows come from a graph-database client. Entities may be plain mappings
(JSON-decoded results):

    {"identity": 12, "labels": ["Statement"], "properties": {...}}

or driver objects such as neo4j Node/Relationship, which expose
element_id (or id), labels and mapping-style properties.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

_IDENTITY_KEYS = ("identity", "element_id", "elementId", "id")


@dataclass(frozen=True)
class EntityRef:
    """Identity, labels and properties read from one entity"""

    identity: Any
    labels: tuple[str, ...] = ()
    properties: dict = field(default_factory=dict)


def normalize_integer(value: Any) -> Any:
    """Collapse a {"low": .., "high": ..} 64-bit integer into an int.

    Other values are returned unchanged.
    """
    if isinstance(value, Mapping) and set(value.keys()) == {"low", "high"}:
        try:
            # low is transmitted as a signed 32-bit word
            return (int(value["low"]) & 0xFFFFFFFF) + (int(value["high"]) << 32)
        except (TypeError, ValueError):
            return value
    return value


def _normalize_labels(labels: Any) -> tuple[str, ...]:
    if not labels:
        return ()
    if isinstance(labels, str):
        return (labels,)
    if isinstance(labels, (set, frozenset)):
        labels = sorted(labels, key=str)
    result: list[str] = []
    for label in labels:
        label = str(label)
        if label not in result:
            result.append(label)
    return tuple(result)


def _object_properties(entity: Any) -> dict:
    items = getattr(entity, "items", None)
    if callable(items):
        return dict(items())
    properties = getattr(entity, "properties", None)
    if isinstance(properties, Mapping):
        return dict(properties)
    return {}


def read_entity(entity: Any) -> Optional[EntityRef]:
    """Read an entity from a query row.

    Args:
        entity: Mapping or driver entity object, or None

    Returns:
        EntityRef, or None when the entity is absent or has no identity
    """
    if entity is None:
        return None

    if isinstance(entity, Mapping):
        identity = None
        for key in _IDENTITY_KEYS:
            if entity.get(key) is not None:
                identity = entity[key]
                break
        properties = entity.get("properties")
        labels = entity.get("labels")
        properties = dict(properties) if isinstance(properties, Mapping) else {}
    else:
        identity = getattr(entity, "element_id", None)
        if identity is None:
            identity = getattr(entity, "id", None)
        properties = _object_properties(entity)
        labels = getattr(entity, "labels", None)

    identity = normalize_integer(identity)
    if identity is None:
        return None
    try:
        hash(identity)
    except TypeError:
        return None

    properties = {k: normalize_integer(v) for k, v in properties.items()}
    return EntityRef(
        identity=identity,
        labels=_normalize_labels(labels),
        properties=properties,
    )


def row_field(row: Any, name: str) -> Any:
    """Get a named field from a row (mapping, neo4j Record, or object)."""
    if row is None:
        return None
    getter = getattr(row, "get", None)
    if callable(getter):
        try:
            return getter(name)
        except (KeyError, IndexError):
            return None
    return getattr(row, name, None)
