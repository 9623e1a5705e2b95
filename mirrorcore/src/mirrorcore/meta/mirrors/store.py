"""
MIT License

Copyright (c) 2025 Sébastien Gachoud

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.

-------------------------------------------------------------------------------

Author: Sébastien Gachoud
Created: 2026-10-18
Description: The declaration store: a process-wide association of (key, target) pairs to
            values. Mirrors are stashed on the classes they describe through it.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import logging
from collections.abc import Hashable
from enum import Enum
from functools import lru_cache
from types import NoneType
from typing import Any

log = logging.getLogger(__name__)

# keys of these types are compared by value, every other key by identity.
VALUE_KEY_TYPES = (str, bytes, int, float, complex, Enum)
# containers compared by value when hashable. Subclasses (named tuples) keep their identity.
VALUE_KEY_CONTAINERS = (tuple, frozenset)

type KeyToken = tuple[str, Hashable]


def key_token(key: Any) -> KeyToken:
    """Token under which a key is stored. Strings, numbers, enums and hashable tuples and
    frozensets compare by value, any other object by identity.
    """
    if isinstance(key, VALUE_KEY_TYPES):
        return ("value", key)
    if type(key) in VALUE_KEY_CONTAINERS:
        try:
            hash(key)
        except TypeError:
            return ("id", id(key))
        return ("value", key)
    return ("id", id(key))


class DeclarationStore:
    """
    Associates values to (key, target) pairs. Targets are compared by identity. Keys that are
    strings, numbers, enums or hashable plain tuples and frozensets are compared by value, any
    other object is compared by identity and can be used as a key even when unhashable (a dict
    metadata for example).

    The store keeps a reference to every key, target and value it holds, associations live as long
    as the store or until they are deleted.
    """

    class Entry:
        """An association of a key to a value. Keeps the key alive to keep its id stable."""

        def __init__(self, key: Any, value: Any) -> NoneType:
            self.key = key
            self.value = value

    __targets: dict[int, Any]
    __entries: dict[int, dict[KeyToken, Entry]]

    def __init__(self) -> NoneType:
        self.__targets = {}
        self.__entries = {}

    @staticmethod
    def _lookup_chain(target: Any) -> tuple[Any, ...]:
        """Targets visited by an inheritance aware lookup: the mro of a class, the target alone
        otherwise.
        """
        if isinstance(target, type):
            return target.__mro__
        return (target,)

    def _own_entry(self, key: Any, target: Any) -> Entry | None:
        entries = self.__entries.get(id(target))
        if entries is None:
            return None
        return entries.get(key_token(key))

    def define(self, key: Any, value: Any, target: Any) -> None:
        """Associate value to (key, target). Any previous association is overwritten.

        Args:
            key (Any): The key of the association.
            value (Any): The value to associate.
            target (Any): The declared entity owning the association.
        """
        self.__targets[id(target)] = target
        self.__entries.setdefault(id(target), {})[key_token(key)] = self.Entry(key, value)
        log.debug("Defined %r on %r.", key, target)

    def get_own(self, key: Any, target: Any) -> Any:
        """Get the value associated to (key, target), ancestors of target are ignored.

        Returns:
            Any: The associated value or None if there is none.
        """
        entry = self._own_entry(key, target)
        return None if entry is None else entry.value

    def get(self, key: Any, target: Any) -> Any:
        """Get the value associated to key on target or, when target is a class, on the first of
        its ancestors (mro order) holding one.

        Returns:
            Any: The associated value or None if there is none.
        """
        for owner in self._lookup_chain(target):
            entry = self._own_entry(key, owner)
            if entry is not None:
                return entry.value
        return None

    def has_own(self, key: Any, target: Any) -> bool:
        """Whether (key, target) holds an association, ancestors of target are ignored."""
        return self._own_entry(key, target) is not None

    def has(self, key: Any, target: Any) -> bool:
        """Whether key is associated on target or one of its ancestors."""
        return any(self._own_entry(key, owner) is not None for owner in self._lookup_chain(target))

    def delete(self, key: Any, target: Any) -> bool:
        """Delete the association of (key, target) if any.

        Returns:
            bool: Whether an association was deleted.
        """
        entries = self.__entries.get(id(target))
        token = key_token(key)
        if entries is None or token not in entries:
            return False
        del entries[token]
        if not entries:
            del self.__entries[id(target)]
            del self.__targets[id(target)]
        log.debug("Deleted %r from %r.", key, target)
        return True

    def keys(self, target: Any) -> list[Any]:
        """Keys associated on target itself, in definition order."""
        return [entry.key for entry in self.__entries.get(id(target), {}).values()]

    def clear(self) -> None:
        """Drop every association."""
        self.__targets.clear()
        self.__entries.clear()
        log.debug("Declaration store cleared.")


@lru_cache(1)
def declaration_store() -> DeclarationStore:
    """Default declaration store, shared by the whole process. Mirrors are persisted and resolved
    through it.

    Returns:
        DeclarationStore: the declaration store instance.
    """
    return DeclarationStore()


def reset_declaration_store() -> None:
    """This function is a shortcut to `declaration_store().clear()`."""
    declaration_store().clear()
