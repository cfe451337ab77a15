"""In-memory key-value storage with typed items and ordered maps."""

from __future__ import annotations

import copy
from collections.abc import MutableMapping
from dataclasses import dataclass
from enum import Enum

from . import errors


class Order(Enum):
    """Direction of a range iteration."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


class Storage(MutableMapping):
    """A contract's key-value store. Keys are tuples of strings, iterated in order.

    Values are copied on the way in and out, so callers never share state with it.
    """

    def __init__(self):
        self._data = {}

    def __getitem__(self, key):
        return copy.deepcopy(self._data[key])

    def __setitem__(self, key, value):
        self._data[key] = copy.deepcopy(value)

    def __delitem__(self, key):
        del self._data[key]

    def __iter__(self):
        return iter(sorted(self._data))

    def __len__(self):
        return len(self._data)


def _as_parts(key):
    parts = (key,) if isinstance(key, str) else tuple(key)
    if not parts or not all(isinstance(part, str) for part in parts):
        raise TypeError(f"storage keys are strings or tuples of strings, got {key!r}")
    return parts


def _unwrap(parts):
    return parts[0] if len(parts) == 1 else parts


@dataclass(frozen=True)
class Bound:
    """One end of a key range."""

    key: object
    is_inclusive: bool

    @classmethod
    def exclusive(cls, key):
        return cls(key, False)

    @classmethod
    def inclusive(cls, key):
        return cls(key, True)

    def _below(self, parts):
        edge = _as_parts(self.key)
        return parts < edge or (parts == edge and not self.is_inclusive)

    def _above(self, parts):
        edge = _as_parts(self.key)
        return parts > edge or (parts == edge and not self.is_inclusive)


class Item:
    """A single value stored under a namespace."""

    def __init__(self, namespace):
        self.namespace = namespace

    @property
    def _key(self):
        return (self.namespace,)

    def save(self, storage, value):
        storage[self._key] = value

    def load(self, storage):
        try:
            return storage[self._key]
        except KeyError:
            raise errors.NotFoundError(f"{self.namespace} not found") from None

    def may_load(self, storage):
        try:
            return storage[self._key]
        except KeyError:
            return None


class Prefix:
    """The entries of a map whose keys begin with fixed components."""

    def __init__(self, namespace, prefix=()):
        self.namespace = namespace
        self._head = (namespace, *prefix)

    def range(self, storage, start=None, end=None, order=Order.ASCENDING):
        """Yield ``(key, value)`` pairs within the bounds, in key order."""
        size = len(self._head)
        keys = [
            full for full in storage if len(full) > size and full[:size] == self._head
        ]
        if order is Order.DESCENDING:
            keys.reverse()
        for full in keys:
            rest = full[size:]
            if start is not None and start._below(rest):
                continue
            if end is not None and end._above(rest):
                continue
            yield _unwrap(rest), storage[full]

    def keys(self, storage, start=None, end=None, order=Order.ASCENDING):
        """Yield the keys within the bounds, in key order."""
        for key, _ in self.range(storage, start, end, order):
            yield key


class Map:
    """Values stored under a namespace, keyed by a string or a tuple of strings."""

    def __init__(self, namespace):
        self.namespace = namespace

    def _full_key(self, key):
        return (self.namespace, *_as_parts(key))

    def save(self, storage, key, value):
        storage[self._full_key(key)] = value

    def load(self, storage, key):
        try:
            return storage[self._full_key(key)]
        except KeyError:
            raise errors.NotFoundError(f"{self.namespace} not found") from None

    def may_load(self, storage, key):
        try:
            return storage[self._full_key(key)]
        except KeyError:
            return None

    def has(self, storage, key):
        return self._full_key(key) in storage

    def remove(self, storage, key):
        storage.pop(self._full_key(key), None)

    def update(self, storage, key, action):
        """Store ``action(current value or None)`` and return it.

        If ``action`` raises, nothing is written.
        """
        new_value = action(self.may_load(storage, key))
        self.save(storage, key, new_value)
        return new_value

    def range(self, storage, start=None, end=None, order=Order.ASCENDING):
        return Prefix(self.namespace).range(storage, start, end, order)

    def keys(self, storage, start=None, end=None, order=Order.ASCENDING):
        return Prefix(self.namespace).keys(storage, start, end, order)

    def prefix(self, prefix):
        return Prefix(self.namespace, _as_parts(prefix))