"""
Chained hash table with string keys.

Buckets are ChainList instances indexed by a polynomial rolling hash of the
key, reduced modulo the current capacity after every character. A side list
of keys in insertion order drives enumeration and rehashing, so neither has
to walk the bucket array. The table doubles its capacity whenever
size / capacity reaches the load factor after an insertion.
"""

from numbers import Real
from typing import Any, Iterator, List, Tuple

from chain_list import NOT_FOUND, ChainList

HASH_PRIME = 31


class InvalidKeyTypeError(TypeError):
    """Raised when a table operation receives a key that is not a str."""


def _code_units(key: str) -> Iterator[int]:
    # UTF-16 code units, so astral characters contribute a surrogate pair.
    for ch in key:
        code = ord(ch)
        if code > 0xFFFF:
            code -= 0x10000
            yield 0xD800 + (code >> 10)
            yield 0xDC00 + (code & 0x3FF)
        else:
            yield code


def polynomial_hash(key: str, capacity: int) -> int:
    h = 0
    for unit in _code_units(key):
        h = (h * HASH_PRIME + unit) % capacity
    return h


def _check_key(key: Any) -> None:
    if not isinstance(key, str):
        raise InvalidKeyTypeError(f"key must be a string, got {type(key).__name__}")


class HashTable:
    def __init__(self, capacity: int = 16, load_factor: float = 0.75) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ValueError("capacity must be a positive integer")
        if isinstance(load_factor, bool) or not isinstance(load_factor, Real):
            raise ValueError("load_factor must be a number in (0, 1]")
        if not 0 < load_factor <= 1:
            raise ValueError("load_factor must be a number in (0, 1]")
        self._initial_capacity = capacity
        self._capacity = capacity
        self._load_factor = load_factor
        self._buckets = self._make_buckets(capacity)
        self._size = 0
        self._keys: List[str] = []

    @staticmethod
    def _make_buckets(capacity: int) -> List[ChainList]:
        return [ChainList() for _ in range(capacity)]

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def load_factor(self) -> float:
        return self._load_factor

    def hash(self, key: str) -> int:
        return polynomial_hash(key, self._capacity)

    def _bucket(self, key: str) -> ChainList:
        return self._buckets[self.hash(key)]

    def _resize(self) -> None:
        new_capacity = self._capacity * 2
        new_buckets = self._make_buckets(new_capacity)
        for key in self._keys:
            value = self._bucket(key).get_value(key)
            new_buckets[polynomial_hash(key, new_capacity)].append(key, value)
        self._capacity = new_capacity
        self._buckets = new_buckets

    def set(self, key: str, value: Any) -> None:
        _check_key(key)
        if not self._bucket(key).append(key, value):
            self._size += 1
            self._keys.append(key)
        while self._size / self._capacity >= self._load_factor:
            self._resize()

    def get(self, key: str) -> Any:
        """Return the value stored under key, or NOT_FOUND."""
        _check_key(key)
        return self._bucket(key).get_value(key)

    def get_or(self, key: str, default: Any) -> Any:
        value = self.get(key)
        if value is NOT_FOUND:
            return default
        return value

    def has(self, key: str) -> bool:
        _check_key(key)
        return self._bucket(key).contains(key)

    def remove(self, key: str) -> bool:
        _check_key(key)
        if not self._bucket(key).remove(key):
            return False
        self._size -= 1
        # Linear scan of the side list; O(size) per removal.
        self._keys.remove(key)
        return True

    def length(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        """Drop every entry and shrink back to the construction-time capacity."""
        self._capacity = self._initial_capacity
        self._buckets = self._make_buckets(self._capacity)
        self._size = 0
        self._keys = []

    def keys(self) -> List[str]:
        return list(self._keys)

    def values(self) -> List[Any]:
        return [self.get(key) for key in self._keys]

    def entries(self) -> List[Tuple[str, Any]]:
        return [(key, self.get(key)) for key in self._keys]

    def load(self) -> float:
        return self._size / self._capacity

    def used_buckets(self) -> int:
        return sum(1 for bucket in self._buckets if not bucket.is_empty())

    def bucket_sizes(self) -> List[int]:
        return [bucket.size() for bucket in self._buckets]

    def copy(self) -> 'HashTable':
        """Create a copy of this HashTable.

        Note: values are shared, not copied. Key order and the capacity that
        clear() returns to are preserved.
        """
        clone = HashTable(self._capacity, self._load_factor)
        clone._initial_capacity = self._initial_capacity
        for key, value in self.entries():
            clone.set(key, value)
        return clone

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self.has(key)

    def __getitem__(self, key: str) -> Any:
        value = self.get(key)
        if value is NOT_FOUND:
            raise KeyError(key)
        return value

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def __delitem__(self, key: str) -> None:
        if not self.remove(key):
            raise KeyError(key)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._keys))

    def __repr__(self) -> str:
        items = ", ".join(f"{key!r}: {value!r}" for key, value in self.entries())
        return f"HashTable({{{items}}})"
