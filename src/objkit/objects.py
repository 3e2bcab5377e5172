"""
Object utilities: traversal, clone, diff, flattening to strings, reset.

All functions operate on plain mappings (normally dicts) and sequences
(lists, tuples) supplied by the caller. Which ones copy and which ones
mutate is part of each function's contract:

    object_clone, object_diff, object_to_*    -> return new values
    reset_object_value                        -> mutates and returns its input

Recursion rule:
    Only mappings are descended into by iter_leaves / object_each.
    Sequences are leaves there, even when they contain mappings.

Cycles:
    A container reached again while it is still being walked raises
    CyclicInputError. Shared (non-cyclic) references are fine.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, Mapping, Optional, Set, Tuple

from objkit.serialization import to_canonical_json
from objkit.values import (
    CyclicInputError,
    InvalidArgumentError,
    ValueKind,
    is_empty_mapping,
    is_falsy,
    is_mapping,
    is_sequence,
    kind_of,
)


DEFAULT_SEPARATOR = ";"


def _enter(container: Any, active: Set[int], where: str) -> int:
    marker = id(container)
    if marker in active:
        raise CyclicInputError(f"Circular reference detected in {where}")
    active.add(marker)
    return marker


def to_text(value: Any) -> str:
    """
    String form of a value inside a serialized entry.

    Whole floats drop their fraction (2.0 -> "2") and bytes are decoded
    as UTF-8. Nested containers are JSON, where floats keep json's form.
    """
    kind = kind_of(value)
    if kind is ValueKind.NULL:
        return "null"
    if kind is ValueKind.BOOL:
        return "true" if value else "false"
    if kind in (ValueKind.MAPPING, ValueKind.SEQUENCE):
        return to_canonical_json(value)
    if kind is ValueKind.NUMBER and isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------

def iter_leaves(obj: Mapping[str, Any]) -> Iterator[Tuple[str, Any]]:
    """
    Lazily yield (key, value) for every leaf reachable from `obj`.

    Keys are the immediate property names, not full paths. Traversal is
    depth-first in key order and descends only into mapping values.

    Example:
        {"a": 1, "b": {"c": 2}, "d": [{"e": 3}]}

    Yields:
        ("a", 1), ("c", 2), ("d", [{"e": 3}])

    Raises:
        InvalidArgumentError: If `obj` is not a mapping (raised at call
            time, before anything is yielded)
        CyclicInputError: If a mapping contains itself
    """
    if not is_mapping(obj):
        raise InvalidArgumentError(
            f"Parameter must be a mapping, got {type(obj).__name__}"
        )
    return _walk_leaves(obj, set())


def _walk_leaves(obj: Mapping[str, Any], active: Set[int]) -> Iterator[Tuple[str, Any]]:
    marker = _enter(obj, active, "iter_leaves input")
    for key, value in obj.items():
        if kind_of(value) is ValueKind.MAPPING:
            yield from _walk_leaves(value, active)
        else:
            yield key, value
    active.discard(marker)


def object_each(obj: Mapping[str, Any], fn: Callable[[str, Any], Any]) -> None:
    """Call fn(key, value) for every leaf yielded by iter_leaves(obj)."""
    for key, value in iter_leaves(obj):
        fn(key, value)


# ---------------------------------------------------------------------------
# Clone / diff
# ---------------------------------------------------------------------------

def object_clone(target: Any) -> Any:
    """
    Deep copy of mappings and sequences.

    Mappings are rebuilt as dicts, lists as lists, tuples as tuples.
    Scalars are returned as-is. The result shares no container with
    `target`, so mutating one never affects the other.

    Unlike copy.deepcopy, shared sub-containers are cloned separately
    and a cycle raises CyclicInputError instead of being reproduced.
    """
    return _clone(target, set())


def _clone(value: Any, active: Set[int]) -> Any:
    kind = kind_of(value)
    if kind not in (ValueKind.MAPPING, ValueKind.SEQUENCE):
        return value

    marker = _enter(value, active, "object_clone input")
    if kind is ValueKind.MAPPING:
        result = {key: _clone(item, active) for key, item in value.items()}
    else:
        items = [_clone(item, active) for item in value]
        result = tuple(items) if isinstance(value, tuple) else items
    active.discard(marker)
    return result


def object_diff(original: Mapping[str, Any], target: Mapping[str, Any]) -> Dict[str, Any]:
    """
    One-directional diff: what to apply to `original` to move toward `target`.

    For each key of `target`, in precedence order:
        1. original value missing or falsy  -> take target value verbatim
        2. target value is a mapping        -> recurse, keep if non-empty
        3. target value is a sequence       -> take verbatim (no element compare)
        4. scalar                           -> take if it differs strictly
                                               (True vs 1 counts as a change)

    Falsy original values (0, "", False, None) are treated as missing, so
    object_diff({"a": 0}, {"a": 5}) == {"a": 5} and
    object_diff({"a": 0}, {"a": 0}) == {"a": 0}.

    Keys present only in `original` never appear in the result.
    Neither input is mutated.
    """
    return _diff(original, target, set())


def _diff(original: Any, target: Mapping[str, Any], active: Set[int]) -> Dict[str, Any]:
    marker = _enter(target, active, "object_diff target")
    result: Dict[str, Any] = {}

    for key, value in target.items():
        previous = original.get(key) if is_mapping(original) else None

        # New (or falsy) property
        if is_falsy(previous):
            result[key] = value
            continue

        if is_mapping(value):
            nested = _diff(previous if is_mapping(previous) else {}, value, active)
            if not is_empty_mapping(nested):
                result[key] = nested
        elif is_sequence(value):
            result[key] = value
        elif value != previous or kind_of(value) is not kind_of(previous):
            # strict: True and 1 are different values
            result[key] = value

    active.discard(marker)
    return result


# ---------------------------------------------------------------------------
# String forms
# ---------------------------------------------------------------------------

def object_to_query_string(obj: Optional[Mapping[str, Any]]) -> str:
    """
    Flatten a mapping to `key1=val1&key2=val2`.

    Nested containers are embedded as compact JSON. Keys and values are
    not URL-encoded. Entries with falsy values are dropped entirely:

        object_to_query_string({"a": 1, "b": 0, "c": "x"}) == "a=1&c=x"
    """
    if is_falsy(obj):
        return ""
    return "&".join(
        f"{key}={to_text(value)}"
        for key, value in obj.items()
        if not is_falsy(value)
    )


def format_entries(obj: Mapping[str, Any], separator: str = DEFAULT_SEPARATOR) -> Iterator[str]:
    """Lazily yield `key:value<separator>` for each entry of `obj`."""
    for key, value in obj.items():
        yield f"{key}:{to_text(value)}{separator}"


def object_to_string(
    obj: Mapping[str, Any],
    separator: Optional[str] = None,
    callback: Optional[Callable[[str, Any], Any]] = None,
) -> str:
    """
    Flatten a mapping to `key:value;key:value;`.

    An empty or missing separator falls back to ";". The trailing
    separator is kept.

    If `callback` is given it is called as callback(key, value) for each
    entry INSTEAD of formatting, and the returned string is empty.
    """
    if callback is not None:
        for key, value in obj.items():
            callback(key, value)
        return ""
    return "".join(format_entries(obj, separator or DEFAULT_SEPARATOR))


# ---------------------------------------------------------------------------
# Reset
# ---------------------------------------------------------------------------

def reset_object_value(obj: Any) -> Any:
    """
    Set every key of `obj` to None, in place, and return `obj`.

    Nested mappings are reset recursively (mutating the nested container,
    which callers may still hold a reference to) and sequences are replaced
    with an empty list, but afterwards each key is overwritten with None
    anyway:

        reset_object_value({"a": 1, "b": {"c": 2}, "d": [1, 2]})
        -> {"a": None, "b": None, "d": None}

    NOTE: The final overwrite makes the nested handling invisible on
    `obj` itself. Every key ends up None, never an emptied container.

    Non-mapping input is returned unchanged.
    """
    if not is_mapping(obj):
        return obj
    return _reset(obj, set())


def _reset(obj: Any, active: Set[int]) -> Any:
    marker = _enter(obj, active, "reset_object_value input")
    for key in list(obj):
        current = obj[key]
        if is_mapping(current):
            obj[key] = _reset(current, active)
        if is_sequence(current):
            obj[key] = []
        obj[key] = None
    active.discard(marker)
    return obj
