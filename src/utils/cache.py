from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Any, Callable, Dict, Hashable, Optional

from src.utils.logging import get_logger

logger = get_logger("cache")


class ProjectionCache:
    """
    Simple in-memory memo cache keyed by the projection inputs.
    - Thread-safe
    - Bounded: when full, the oldest 10% of entries are dropped
    - Stores arbitrary Python objects (immutable results are expected)
    """

    def __init__(self, max_items: int = 256) -> None:
        self.max_items = max(1, int(max_items))
        self._lock = threading.Lock()
        self._store: "OrderedDict[Hashable, Any]" = OrderedDict()
        self.hits = 0
        self.misses = 0

    def get(self, key: Hashable) -> Optional[Any]:
        with self._lock:
            if key not in self._store:
                self.misses += 1
                return None
            self.hits += 1
            return self._store[key]

    def set(self, key: Hashable, value: Any) -> None:
        with self._lock:
            if key not in self._store and len(self._store) >= self.max_items:
                n_drop = max(1, self.max_items // 10)
                for _ in range(n_drop):
                    self._store.popitem(last=False)
                logger.debug(f"cache_evicted n={n_drop} max_items={self.max_items}")
            self._store[key] = value

    def get_or_compute(self, key: Hashable, compute: Callable[[], Any]) -> Any:
        cached = self.get(key)
        if cached is not None:
            return cached
        value = compute()
        self.set(key, value)
        return value

    def delete(self, key: Hashable) -> None:
        with self._lock:
            self._store.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._store.clear()
            self.hits = 0
            self.misses = 0

    def stats(self) -> Dict[str, int]:
        with self._lock:
            return {"hits": self.hits, "misses": self.misses, "size": len(self._store)}

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)
