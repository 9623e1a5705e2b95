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
Description: Mirrors of constructor and method parameters.
🦙
"""

from __future__ import annotations

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import logging
from collections.abc import Callable
from types import NoneType
from typing import Any

from ..errors import InvalidTargetError
from .class_mirror import ClassMirror, MemberKey
from .declaration import (
    DeclarationMirror,
    MirrorKind,
    ParameterHolder,
    bind_metadata,
    check_parameter_index,
)
from .members import MethodMirror
from .pending import PendingMember
from .store import declaration_store

log = logging.getLogger(__name__)


class ParameterMirror(DeclarationMirror):
    """Mirror of a parameter, identified by its position. The target of a parameter mirror is
    the class declaring the constructor or the method.

    Python has no parameter decorators, parameters are decorated through the callable owning
    them: the class for the constructor, the method otherwise.
    Examples:
        >>> @ParameterMirror.create_decorator(0, Inject("db"))
        ... class Service:
        ...     def __init__(self, db): ...

        >>> class Handler:
        ...     @ParameterMirror.create_decorator(1, Inject("cache"))
        ...     def handle(self, request, cache): ...
    """

    kind = MirrorKind.PARAMETER

    index: int
    method: MemberKey | None
    owner_mirror: ParameterHolder | None

    def __init__(
        self, index: int, method: MemberKey | None = None, target: type | None = None
    ) -> NoneType:
        super().__init__(target)
        self.index = check_parameter_index(index)
        self.method = method
        self.owner_mirror = None

    @classmethod
    def decorate(
        cls, owner: type, index: int, metadata: Any, method: MemberKey | None = None
    ) -> ParameterMirror:
        """Attach a metadata object to a parameter.

        Args:
            owner (type): The class declaring the constructor or the method.
            index (int): The parameter position, `self` excluded.
            metadata (Any): The metadata to attach.
            method (str | None, optional): The method name, None for the constructor.

        Raises:
            InvalidTargetError: Raised when owner is not a class.
            InvalidParameterIndexError: Raised when index is not a non-negative int.

        Returns:
            ParameterMirror: the parameter mirror.
        """
        index = check_parameter_index(index)
        holder: ParameterHolder
        if method is None:
            holder = ClassMirror.attach(owner)
        else:
            holder = MethodMirror.reflect(owner, method)

        mirror = holder.get_parameter(index)
        if mirror is None:
            mirror = cls(index, method, owner)
            mirror.owner_mirror = holder
            holder.set_parameter(index, mirror)
            log.debug(
                "Registered parameter %d of %s.%s.",
                index,
                owner.__qualname__,
                method or "__init__",
            )
        bind_metadata(metadata, owner, mirror)
        mirror.add_metadata(metadata)
        declaration_store().define(metadata, mirror, owner)
        return mirror

    @classmethod
    def create_decorator(cls, index: int, metadata: Any) -> Callable[[Any], Any]:
        """Create a decorator attaching metadata to a parameter. Applied to a class it targets
        the constructor, applied to a method in a class body it targets that method.

        Raises:
            InvalidParameterIndexError: Raised when index is not a non-negative int.
        """
        index = check_parameter_index(index)

        def decorator(target: Any) -> Any:
            if isinstance(target, type):
                cls.decorate(target, index, metadata)
                return target
            if isinstance(target, PendingMember) or callable(target) or isinstance(
                target, (staticmethod, classmethod)
            ):
                return PendingMember.wrap(
                    target,
                    lambda owner, name: cls.decorate(owner, index, metadata, method=name),
                )
            raise InvalidTargetError(
                f"Parameter decorators apply to classes and methods, got {target!r}."
            )

        return decorator

    def __repr__(self) -> str:
        owner = getattr(self.target, "__qualname__", self.target)
        return (
            f"<ParameterMirror {owner}.{self.method or '__init__'}[{self.index}]"
            f" ({len(self.metadata)} metadata)>"
        )
