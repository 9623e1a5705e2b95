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
Description: Mirrors of class members (methods and properties) and their decorators.
🦙
"""

from __future__ import annotations

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import logging
from collections.abc import Callable
from functools import partial
from types import NoneType
from typing import Any, Self

from .class_mirror import ClassMirror, MemberKey
from .declaration import DeclarationMirror, MirrorKind, ParameterHolder, bind_metadata
from .pending import PendingMember
from .store import declaration_store

log = logging.getLogger(__name__)


class MemberMirror(DeclarationMirror):
    """Base class of the mirrors of class members. The target of a member mirror is the class
    declaring the member.
    """

    name: MemberKey
    is_static: bool
    class_mirror: ClassMirror | None

    def __init__(
        self, name: MemberKey, is_static: bool = False, target: type | None = None
    ) -> NoneType:
        super().__init__(target)
        self.name = name
        self.is_static = is_static
        self.class_mirror = None

    @classmethod
    def reflect(cls, owner: type, key: MemberKey, is_static: bool | None = None) -> Self:
        """Get the mirror of a member declared by owner, creating and registering it on the
        class mirror of owner if there is none of this type.

        Args:
            owner (type): The class declaring the member.
            key (str): The member name.
            is_static (bool | None, optional): The namespace of the member, detected with
                ClassMirror.is_static_member when None.

        Raises:
            InvalidTargetError: Raised when owner is not a class.

        Returns:
            Self: the member mirror.
        """
        class_mirror = ClassMirror.attach(owner)
        if is_static is None:
            is_static = ClassMirror.is_static_member(owner, key)
        mirror = class_mirror.get_mirror(key, is_static)
        if not isinstance(mirror, cls):
            mirror = cls(key, is_static, owner)
            mirror.class_mirror = class_mirror
            class_mirror.set_mirror(key, mirror, is_static)
            log.debug(
                "Registered %s %s.%s.",
                "static" if is_static else "instance",
                owner.__qualname__,
                key,
            )
        return mirror

    @classmethod
    def decorate(
        cls, owner: type, key: MemberKey, metadata: Any, is_static: bool | None = None
    ) -> Self:
        """Attach a metadata object to a member of owner. The member mirror is persisted on owner
        under the metadata itself.

        Returns:
            Self: the member mirror.
        """
        mirror = cls.reflect(owner, key, is_static)
        bind_metadata(metadata, owner, mirror)
        mirror.add_metadata(metadata)
        declaration_store().define(metadata, mirror, owner)
        return mirror

    @classmethod
    def create_decorator(cls, metadata: Any) -> Callable[[Any], PendingMember]:
        """Create a decorator for members in a class body: functions, staticmethod, classmethod
        and property objects. It can be stacked in any order with staticmethod, classmethod,
        property and the property setter, getter and deleter.

        Args:
            metadata (Any): The metadata to attach.

        Returns:
            Callable[[Any], PendingMember]: the member decorator.
        """

        def decorator(member: Any) -> PendingMember:
            return PendingMember.wrap(member, partial(_decorate_member, cls, metadata))

        return decorator

    def __repr__(self) -> str:
        owner = getattr(self.target, "__qualname__", self.target)
        scope = "static " if self.is_static else ""
        return f"<{type(self).__name__} {scope}{owner}.{self.name} ({len(self.metadata)} metadata)>"


def _decorate_member(
    mirror_type: type[MemberMirror], metadata: Any, owner: type, name: MemberKey
) -> None:
    mirror_type.decorate(owner, name, metadata)


class MethodMirror(ParameterHolder, MemberMirror):
    """Mirror of a method. Holds the mirrors of its decorated parameters."""

    kind = MirrorKind.METHOD


class PropertyMirror(MemberMirror):
    """Mirror of a property or of an attribute."""

    kind = MirrorKind.PROPERTY
