"""Prefix matching of a fragment against the property catalog."""

from __future__ import annotations

from bisect import bisect_left

from gradlepropls.properties.catalog import PropertyCatalog


def matched_properties(fragment: str, catalog: PropertyCatalog) -> list[str]:
    """
    Return every catalog key that starts with ``fragment``.

    Matching is case-sensitive and an empty fragment matches every key.
    Results are in lexicographic order.
    """
    keys = catalog.all()
    if not fragment:
        return list(keys)

    # Keys sharing a prefix form one contiguous run in sorted order
    start = bisect_left(keys, fragment)
    matches = []
    for key in keys[start:]:
        if not key.startswith(fragment):
            break
        matches.append(key)

    return matches
