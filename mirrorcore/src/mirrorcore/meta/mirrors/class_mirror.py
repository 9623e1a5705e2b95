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
Description: The class mirror: the metadata of a class, of its members and of its constructor
            parameters, with inheritance aware queries. The "own" queries only read what the
            class itself declares, the "all" queries merge in what its ancestors declare by
            walking the chain of parent mirrors. Static members are never inherited.
🦙
"""

from __future__ import annotations

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import inspect
import logging
from collections.abc import Callable, Iterable, Iterator
from types import NoneType
from typing import TYPE_CHECKING, Any

from ..errors import InvalidTargetError, MirrorCycleError
from ..typing.utilities import Annotation, constructor_param_types, is_class_var
from .config import MirrorConstants
from .declaration import (
    DeclarationMirror,
    MirrorKind,
    ParameterHolder,
    bind_metadata,
)
from .pending import settle_pending_members
from .store import declaration_store

if TYPE_CHECKING:
    from .members import MemberMirror, MethodMirror, PropertyMirror

log = logging.getLogger(__name__)

type MemberKey = str


def _select[M](
    members: Iterable[tuple[MemberKey, MemberMirror]],
    type_: type[M] | None,
    kind: MirrorKind,
) -> dict[MemberKey, M]:
    """Keep the members that are instances of type_ or, without type_, of the given kind."""
    if type_ is None:
        return {k: m for k, m in members if m.kind is kind}  # type: ignore
    return {k: m for k, m in members if isinstance(m, type_)}


class ClassMirror(ParameterHolder, DeclarationMirror):
    """Mirror of a class.

    Examples:
        >>> class Entity(ClassMetadata):
        ...     def __init__(self, role):
        ...         super().__init__()
        ...         self.role = role

        >>> @ClassMirror.create_decorator(Entity("user"))
        ... class User:
        ...     pass

        >>> ClassMirror.reflect(User).get_metadata()
        [Entity(role='user')]

    A class mirror never holds the data of an ancestor. It keeps a link to the mirror of the
    closest decorated ancestor (parent_class_mirror) and the "all" queries walk it.
    """

    kind = MirrorKind.CLASS

    parent_class_mirror: ClassMirror | None
    __static_members: dict[MemberKey, MemberMirror]
    __instance_members: dict[MemberKey, MemberMirror]

    def __init__(self, target: type | None = None) -> NoneType:
        super().__init__(target)
        self.parent_class_mirror = None
        self.__static_members = {}
        self.__instance_members = {}

    # -------------------------------------------------------------------------
    # Resolution and decoration
    # -------------------------------------------------------------------------

    @classmethod
    def reflect(cls, type_: type) -> ClassMirror:
        """Get the mirror of a class.

        - The class was decorated: its mirror, always the same instance.
        - The class was not decorated but an ancestor was: a new empty mirror linked to the
          mirror of that ancestor. It is not persisted, decorating the class persists it.
        - Otherwise: a new empty mirror, not persisted either.

        Member decorators of the class hierarchy hidden by a staticmethod, classmethod or property
        are registered first.

        Args:
            type_ (type): The class to reflect.

        Returns:
            ClassMirror: the mirror of the class.
        """
        if isinstance(type_, type):
            settle_pending_members(type_)
        found = declaration_store().get(ClassMirror, type_)
        if isinstance(found, ClassMirror):
            if found.target is type_:
                return found
            mirror = cls()
            mirror.parent_class_mirror = found
            return mirror
        return cls()

    @classmethod
    def attach(cls, type_: type) -> ClassMirror:
        """Get the mirror of a class and persist it on the class if it was not yet.
        Member and parameter decorations register through this.

        Raises:
            InvalidTargetError: Raised when type_ is not a class.
        """
        if not isinstance(type_, type):
            raise InvalidTargetError(f"Expected a class, got {type_!r}.")
        mirror = cls.reflect(type_)
        if mirror.target is not type_:
            mirror.target = type_
            declaration_store().define(ClassMirror, mirror, type_)
            log.debug(
                "Created mirror of %s (parent: %r).", type_.__qualname__, mirror.parent_class_mirror
            )
        return mirror

    @classmethod
    def decorate(cls, type_: type, metadata: Any) -> ClassMirror:
        """Attach a metadata object to a class.

        The mirror is persisted on the class under the registry key and under the metadata
        itself, so that the mirror owning a metadata object can be found back.

        Args:
            type_ (type): The decorated class.
            metadata (Any): The metadata. Any object is accepted, ClassMetadata instances get
                their target and mirror set.

        Raises:
            InvalidTargetError: Raised when type_ is not a class.

        Returns:
            ClassMirror: the mirror of the class.
        """
        mirror = cls.attach(type_)
        bind_metadata(metadata, type_, mirror)
        mirror.add_metadata(metadata)
        declaration_store().define(metadata, mirror, type_)
        log.debug("Decorated %s with %r.", type_.__qualname__, metadata)
        return mirror

    @classmethod
    def create_decorator[T: type](cls, metadata: Any) -> Callable[[T], T]:
        """Create a class decorator attaching metadata to the decorated class.

        Args:
            metadata (Any): The metadata to attach.

        Returns:
            Callable[[T], T]: the class decorator.
        """

        def decorator(type_: T) -> T:
            cls.decorate(type_, metadata)
            return type_

        return decorator

    @staticmethod
    def is_static_member(target: Any, key: MemberKey) -> bool:
        """Check if key names a static member of target: a staticmethod or a classmethod defined
        by the class or an attribute annotated with ClassVar by the class. Instances are checked
        against their class.

        Args:
            target (Any): A class or an instance.
            key (str): The member name.

        Returns:
            bool: Whether the member is static.
        """
        if not isinstance(target, type):
            return ClassMirror.is_static_member(type(target), key)
        if isinstance(vars(target).get(key), (staticmethod, classmethod)):
            return True
        return is_class_var(inspect.get_annotations(target).get(key))

    # -------------------------------------------------------------------------
    # Members
    # -------------------------------------------------------------------------

    def _members(self, is_static: bool) -> dict[MemberKey, MemberMirror]:
        return self.__static_members if is_static else self.__instance_members

    def set_mirror(self, key: MemberKey, mirror: MemberMirror, is_static: bool = False) -> None:
        """Set the mirror of a method or a property of this class, overwriting any previous
        mirror of the same namespace (static or instance).
        """
        self._members(is_static)[key] = mirror

    def get_mirror[M: MemberMirror](
        self, key: MemberKey, is_static: bool = False
    ) -> M | None:
        """Get the mirror of a member declared by this class or None."""
        return self._members(is_static).get(key)  # type: ignore

    def remove_mirror(self, key: MemberKey, is_static: bool = False) -> None:
        """Remove the mirror of a member declared by this class. Ancestors are left untouched.

        The store entries leading from the metadata of the member (and of its parameters) back to
        the removed mirrors are deleted too.
        """
        mirror = self._members(is_static).pop(key, None)
        if mirror is None:
            return
        removed: list[DeclarationMirror] = [mirror]
        if isinstance(mirror, ParameterHolder):
            removed.extend(mirror.get_parameters().values())
        store = declaration_store()
        for declaration in removed:
            for metadata in declaration.metadata:
                if store.get_own(metadata, self.target) is declaration:
                    store.delete(metadata, self.target)
        log.debug("Removed mirror %r from %r.", key, self.target)

    def get_mirrors[M: MemberMirror](
        self, type_: type[M] | None = None, is_static: bool = False
    ) -> list[M]:
        """Get the mirrors of the members declared by this class.

        Args:
            type_ (type[M] | None, optional): Only keep the instances of this type.
            is_static (bool, optional): Static members instead of instance members.

        Returns:
            list[M]: the mirrors in registration order.
        """
        mirrors = list(self._members(is_static).values())
        if type_ is None:
            return mirrors  # type: ignore
        return [m for m in mirrors if isinstance(m, type_)]

    def get_all_mirrors[M: MemberMirror](
        self, type_: type[M] | None = None, is_static: bool = False
    ) -> list[M]:
        """Same as get_mirrors but ancestors' instance members come first. Overridden members
        appear once per declaring class. Static members are never inherited.
        """
        if is_static:
            return self.get_mirrors(type_, True)
        return [m for mirror in reversed(self.lineage()) for m in mirror.get_mirrors(type_)]

    def get_instance_members(self) -> dict[MemberKey, MemberMirror]:
        """Get the instance members declared by this class."""
        return dict(self.__instance_members)

    def get_all_instance_members(self) -> dict[MemberKey, MemberMirror]:
        """Get the instance members of this class and of its ancestors. A member declared again by
        a class overrides the one of its ancestors.
        """
        members: dict[MemberKey, MemberMirror] = {}
        for mirror in reversed(self.lineage()):
            members.update(mirror.get_instance_members())
        return members

    def get_methods[M: MethodMirror](self, type_: type[M] | None = None) -> dict[MemberKey, M]:
        """Get the instance methods declared by this class."""
        return _select(self.__instance_members.items(), type_, MirrorKind.METHOD)

    def get_all_methods[M: MethodMirror](
        self, type_: type[M] | None = None
    ) -> dict[MemberKey, M]:
        """Get the instance methods of this class and of its ancestors."""
        return _select(self.get_all_instance_members().items(), type_, MirrorKind.METHOD)

    def get_properties[M: PropertyMirror](
        self, type_: type[M] | None = None
    ) -> dict[MemberKey, M]:
        """Get the instance properties declared by this class."""
        return _select(self.__instance_members.items(), type_, MirrorKind.PROPERTY)

    def get_all_properties[M: PropertyMirror](
        self, type_: type[M] | None = None
    ) -> dict[MemberKey, M]:
        """Get the instance properties of this class and of its ancestors."""
        return _select(self.get_all_instance_members().items(), type_, MirrorKind.PROPERTY)

    def get_static_methods[M: MethodMirror](
        self, type_: type[M] | None = None
    ) -> dict[MemberKey, M]:
        """Get the static methods declared by this class."""
        return _select(self.__static_members.items(), type_, MirrorKind.METHOD)

    def get_static_properties[M: PropertyMirror](
        self, type_: type[M] | None = None
    ) -> dict[MemberKey, M]:
        """Get the static properties declared by this class."""
        return _select(self.__static_members.items(), type_, MirrorKind.PROPERTY)

    # -------------------------------------------------------------------------
    # Class metadata and constructor
    # -------------------------------------------------------------------------

    def get_all_metadata[M](self, type_: type[M] | None = None) -> list[M]:
        """Get the metadata of this class followed by the metadata of its ancestors, closest
        first. Nothing is deduplicated.
        """
        return [m for mirror in self.lineage() for m in mirror.get_metadata(type_)]

    def get_design_param_types(self) -> list[Annotation] | None:
        """Get the declared types of the constructor parameters of the class.

        An explicit list stored on the class under MirrorConstants.DESIGN_PARAM_TYPES wins over
        the constructor signature. Decorated parameters and ancestors' mirrors play no part.

        Returns:
            list[Any] | None: the types in parameter order or None for a mirror without target.
        """
        if self.target is None:
            return None
        declared = declaration_store().get_own(MirrorConstants.DESIGN_PARAM_TYPES, self.target)
        if declared is not None:
            return list(declared)
        return constructor_param_types(self.target)

    # -------------------------------------------------------------------------
    # Inheritance
    # -------------------------------------------------------------------------

    def iter_lineage(self) -> Iterator[ClassMirror]:
        """Iterate over this mirror then the chain of parent mirrors, closest first.

        Raises:
            MirrorCycleError: Raised when the chain loops back on a visited mirror.
        """
        visited: set[int] = set()
        mirror: ClassMirror | None = self
        while mirror is not None:
            if id(mirror) in visited:
                log.error("Parent chain of %r loops back on %r.", self, mirror)
                raise MirrorCycleError(
                    f"The parent chain of {self!r} loops back on {mirror!r}."
                )
            visited.add(id(mirror))
            yield mirror
            mirror = mirror.parent_class_mirror

    def lineage(self) -> list[ClassMirror]:
        """This mirror then the chain of parent mirrors, closest first."""
        return list(self.iter_lineage())
