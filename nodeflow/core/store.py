"""Store: the mutable keyed context threaded through every construct."""

from __future__ import annotations

import copy
from typing import Any, MutableMapping

Store = MutableMapping[str, Any]


def copy_store(store: Store) -> Store:
    """Return a shallow copy of ``store`` that keeps its mapping type.

    Values are shared with the original; only the top-level key set is
    isolated, so rebinding a key in the copy never touches ``store``.
    """
    if type(store) is dict:
        return dict(store)
    return copy.copy(store)
