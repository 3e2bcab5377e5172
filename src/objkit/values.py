"""
Value classification for objkit.

Every traversal in objkit decides what to do with a value by asking
which kind it is. The decision lives here, in one place, instead of
being scattered across ad-hoc isinstance checks.

Kinds:
    NULL      None
    BOOL      True / False
    NUMBER    int, float (bool excluded)
    STRING    str, bytes
    SEQUENCE  list, tuple
    MAPPING   any collections.abc.Mapping
    OTHER     everything else (treated as a leaf)

IMPORTANT:
    Sequences are NOT mappings. Traversals that descend into mappings
    stop at sequences and treat them as leaves.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from enum import Enum
from typing import Any


class InvalidArgumentError(TypeError):
    """Raised when a function receives an argument of the wrong kind."""
    pass


class CyclicInputError(ValueError):
    """Raised when a container is reached again while it is being traversed."""
    pass


class ValueKind(Enum):
    """Discriminator for the values objkit walks over."""
    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    OTHER = "other"


def kind_of(value: Any) -> ValueKind:
    """Classify a value. Order matters: bool is a subclass of int."""
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, (str, bytes)):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    return ValueKind.OTHER


def is_mapping(value: Any) -> bool:
    return kind_of(value) is ValueKind.MAPPING


def is_sequence(value: Any) -> bool:
    return kind_of(value) is ValueKind.SEQUENCE


def is_empty_mapping(value: Any) -> bool:
    return is_mapping(value) and len(value) == 0


def is_falsy(value: Any) -> bool:
    """
    Return True for values that count as "missing" in objkit.

    Falsy values are None, False, numeric zero, NaN and the empty string.
    Empty containers are NOT falsy: an empty dict or list is still
    a value that was provided.
    """
    kind = kind_of(value)
    if kind is ValueKind.NULL:
        return True
    if kind is ValueKind.BOOL:
        return value is False
    if kind is ValueKind.NUMBER:
        return value == 0 or (isinstance(value, float) and math.isnan(value))
    if kind is ValueKind.STRING:
        return len(value) == 0
    return False

