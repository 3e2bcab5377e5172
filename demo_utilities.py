#!/usr/bin/env python3
"""
Demo: Walk through the objkit helpers on a small settings object.

Shows traversal, diff, string forms and reset, then a few seeded
random values.
"""

import random

from objkit.objects import (
    iter_leaves,
    object_clone,
    object_diff,
    object_to_query_string,
    object_to_string,
    reset_object_value,
)
from objkit.randomness import random_color, random_num, random_word


def main():
    settings = {
        "name": "report",
        "page": 1,
        "filters": {"status": "open", "owner": "", "tags": ["urgent", "billing"]},
        "archived": False,
    }

    print("=" * 80)
    print("OBJKIT DEMO")
    print("=" * 80)

    print("\nLEAVES:")
    print("-" * 80)
    for key, value in iter_leaves(settings):
        print(f"  {key} = {value!r}")

    updated = object_clone(settings)
    updated["page"] = 2
    updated["filters"]["status"] = "closed"

    print("\nDIFF (settings -> updated):")
    print("-" * 80)
    print(f"  {object_diff(settings, updated)}")

    print("\nSTRING FORMS:")
    print("-" * 80)
    print(f"  query:  {object_to_query_string(updated)}")
    print(f"  string: {object_to_string(updated, ' | ')}")

    print("\nRESET (in place):")
    print("-" * 80)
    print(f"  {reset_object_value(updated)}")

    rng = random.Random(2024)
    print("\nRANDOM (seed 2024):")
    print("-" * 80)
    print(f"  random_num(1, 6):          {random_num(1, 6, rng=rng)}")
    print(f"  random_color():            {random_color(rng=rng)}")
    print(f"  random_word(False, 8):     {random_word(False, 8, rng=rng)}")
    print(f"  random_word(True, 4, 12):  {random_word(True, 4, 12, rng=rng)}")
    print("\n" + "=" * 80)


if __name__ == "__main__":
    main()
