"""
objkit: small helpers for plain objects and random values.

Two independent groups of pure functions:

    objkit.objects      traversal, clone, diff, string forms, reset
    objkit.randomness   bounded integers, hex colors, alphanumeric words

Nothing here keeps state between calls. Functions that mutate their
input say so in their docstring.
"""

from .objects import (
    format_entries,
    iter_leaves,
    object_clone,
    object_diff,
    object_each,
    object_to_query_string,
    object_to_string,
    reset_object_value,
    to_text,
)
from .randomness import random_color, random_num, random_word
from .values import CyclicInputError, InvalidArgumentError, ValueKind, kind_of

__version__ = "0.1.0"

__all__ = [
    "CyclicInputError",
    "InvalidArgumentError",
    "ValueKind",
    "format_entries",
    "iter_leaves",
    "kind_of",
    "object_clone",
    "object_diff",
    "object_each",
    "object_to_query_string",
    "object_to_string",
    "random_color",
    "random_num",
    "random_word",
    "reset_object_value",
    "to_text",
]
