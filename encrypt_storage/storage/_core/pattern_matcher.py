"""
encrypt_storage.storage._core.pattern_matcher
=============================================
Key selection shared by the pattern operations.

  exact=True  → physical key == namespaced(pattern)
  exact=False → pattern is a substring of the physical key. With a prefix
                configured the key must also start with "{prefix}:", so
                one facade never matches another facade's records in a
                shared store (prefix "app" does not match "myapp:token").
"""

from __future__ import annotations

from typing import Iterable, List

from encrypt_storage.storage._core.namespacer import KeyNamespacer


def match_keys(
    physical_keys: Iterable[str],
    pattern: str,
    namespacer: KeyNamespacer,
    exact: bool = False,
) -> List[str]:
    """
    Return the matching physical keys, in the order they were given.

    Parameters
    ----------
    physical_keys : iterable of str
        Snapshot of the store's keys.
    pattern : str
        Logical key (exact) or substring to look for.
    namespacer : KeyNamespacer
        Supplies the prefix of the calling facade.
    exact : bool
        Equality instead of substring containment.
    """
    if exact:
        target = namespacer.to_physical_key(pattern)
        return [k for k in physical_keys if k == target]

    if namespacer.prefix:
        marker = namespacer.marker
        return [k for k in physical_keys if k.startswith(marker) and pattern in k]
    return [k for k in physical_keys if pattern in k]
