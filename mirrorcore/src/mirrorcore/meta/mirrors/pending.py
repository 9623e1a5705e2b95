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
Description: Deferred registration of the member decorators used in class bodies.
🦙
"""

from __future__ import annotations

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import logging
from collections.abc import Callable
from types import NoneType
from typing import Any
from weakref import WeakSet

log = logging.getLogger(__name__)

type Registration = Callable[[type, str], Any]

# placeholders not yet resolved through __set_name__, a wrapper may hide them from it.
_unsettled: WeakSet[PendingMember] = WeakSet()

_DESCRIPTOR_COPIES = ("setter", "getter", "deleter")


class PendingMember:
    """Placeholder left in a class body by member decorators.

    Functions do not know their class while the class body runs. The placeholder keeps the
    decorated object and the registrations to run, once the class exists (__set_name__) it puts
    the decorated object back and runs them in application order.

    The placeholder behaves like the decorated object: it can be called, its attributes are
    forwarded and `prop.setter` (getter, deleter) gives a placeholder carrying the same
    registrations. Wrapped by staticmethod, classmethod or property it is not notified by the
    class creation, settle_pending_members resolves it when the class is reflected.
    """

    def __init__(self, member: Any) -> NoneType:
        self.member = member
        self.registrations: list[Registration] = []
        _unsettled.add(self)

    @classmethod
    def wrap(cls, member: Any, registration: Registration) -> PendingMember:
        """Add a registration to member, wrapping it in a placeholder if it is not one already."""
        pending = member if isinstance(member, PendingMember) else cls(member)
        pending.registrations.append(registration)
        return pending

    def __set_name__(self, owner: type, name: str) -> None:
        setattr(owner, name, self.member)
        self.settle(owner, name)

    def settle(self, owner: type, name: str) -> None:
        """Run the registrations for the member `name` of owner. The member must already be back
        in place.
        """
        _unsettled.discard(self)
        # the class creation only notified the placeholder.
        set_name = getattr(type(self.member), "__set_name__", None)
        if set_name is not None:
            set_name(self.member, owner, name)
        for register in self.registrations:
            register(owner, name)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.member(*args, **kwargs)

    def __getattr__(self, name: str) -> Any:
        if name in ("member", "registrations"):
            raise AttributeError(name)
        attr = getattr(self.member, name)
        if name in _DESCRIPTOR_COPIES and callable(attr):
            return self._copying(attr)
        return attr

    def _copying(self, copy: Callable[[Any], Any]) -> Callable[[Any], PendingMember]:
        def decorator(function: Any) -> PendingMember:
            # the copy replaces this placeholder in the class body.
            _unsettled.discard(self)
            pending = PendingMember(copy(function))
            pending.registrations.extend(self.registrations)
            return pending

        return decorator

    def __repr__(self) -> str:
        return f"<PendingMember {self.member!r} ({len(self.registrations)} registrations)>"


def _unwrap(value: Any) -> tuple[Any, list[PendingMember]]:
    """Rebuild a staticmethod, classmethod or property around the objects hidden by
    placeholders. Returns the value unchanged and no placeholder otherwise.
    """
    if isinstance(value, (staticmethod, classmethod)):
        if isinstance(value.__func__, PendingMember):
            return type(value)(value.__func__.member), [value.__func__]
    elif isinstance(value, property):
        accessors = (value.fget, value.fset, value.fdel)
        pendings: list[PendingMember] = []
        for accessor in accessors:
            if isinstance(accessor, PendingMember) and accessor not in pendings:
                pendings.append(accessor)
        if pendings:
            # a placeholder getter gave its own docstring to the property.
            doc = None if isinstance(value.fget, PendingMember) else value.__doc__
            members = (a.member if isinstance(a, PendingMember) else a for a in accessors)
            return type(value)(*members, doc), pendings
    return value, []


def settle_pending_members(type_: type) -> None:
    """Resolve the placeholders hidden by a staticmethod, classmethod or property in type_ and
    its ancestors: put the decorated objects back and run their registrations.
    """
    if not _unsettled:
        return
    found: list[tuple[type, str, PendingMember]] = []
    for owner in type_.__mro__:
        for name, value in list(vars(owner).items()):
            unwrapped, pendings = _unwrap(value)
            if pendings:
                # everything is put back before registering, registrations reflect owner.
                setattr(owner, name, unwrapped)
                found.extend((owner, name, pending) for pending in pendings)
    for owner, name, pending in found:
        log.debug("Settling %r as %s.%s.", pending, owner.__qualname__, name)
        pending.settle(owner, name)
