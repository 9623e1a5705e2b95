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
Description: Common envelope of all mirrors: a declaration and the metadata attached to it.
            This module also provides the base metadata payloads and the constructor/method
            parameter bookkeeping shared by class and method mirrors.
🦙
"""

from __future__ import annotations

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from enum import IntEnum
from types import NoneType
from typing import TYPE_CHECKING, Any, ClassVar

from ..errors import InvalidParameterIndexError

if TYPE_CHECKING:
    from .parameter import ParameterMirror


class MirrorKind(IntEnum):
    """Kind of declaration described by a mirror.

    CLASS: a class.
    METHOD: a method, static or not.
    PROPERTY: an attribute or a property, static or not.
    PARAMETER: a constructor or method parameter.
    """

    CLASS = 0
    METHOD = 1
    PROPERTY = 2
    PARAMETER = 3


class DeclarationMetadata:
    """Base class of metadata payloads.

    Any object can be attached to a declaration, subclasses of DeclarationMetadata additionally
    get back-references to the declared entity (target) and to the mirror holding them.
    """

    target: Any
    mirror: DeclarationMirror | None

    def __init__(self) -> NoneType:
        self.target = None
        self.mirror = None

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{k}={v!r}" for k, v in vars(self).items() if k not in ("target", "mirror")
        )
        return f"{type(self).__name__}({fields})"


class ClassMetadata(DeclarationMetadata):
    """Base class of metadata attached to classes."""


class MethodMetadata(DeclarationMetadata):
    """Base class of metadata attached to methods."""


class PropertyMetadata(DeclarationMetadata):
    """Base class of metadata attached to properties and attributes."""


class ParameterMetadata(DeclarationMetadata):
    """Base class of metadata attached to parameters."""


def bind_metadata(metadata: Any, target: Any, mirror: DeclarationMirror) -> None:
    """Set the back-references of a metadata payload. Opaque payloads are left untouched."""
    if isinstance(metadata, DeclarationMetadata):
        metadata.target = target
        metadata.mirror = mirror


class DeclarationMirror:
    """A declaration (target) and the ordered metadata attached to it.

    Metadata are kept in application order. The same object is only kept once, equal but distinct
    objects are all kept.
    """

    kind: ClassVar[MirrorKind]

    target: Any
    __metadata: dict[int, Any]

    def __init__(self, target: Any = None) -> NoneType:
        self.target = target
        self.__metadata = {}

    @property
    def metadata(self) -> tuple[Any, ...]:
        """The attached metadata in application order."""
        return tuple(self.__metadata.values())

    def add_metadata(self, metadata: Any) -> None:
        """Attach a metadata object. Attaching an already attached object does nothing."""
        self.__metadata.setdefault(id(metadata), metadata)

    def has_metadata(self, metadata: Any) -> bool:
        """Whether this exact metadata object is attached."""
        return id(metadata) in self.__metadata

    def remove_metadata(self, metadata: Any) -> None:
        """Detach a metadata object if attached."""
        self.__metadata.pop(id(metadata), None)

    def get_metadata[M](self, type_: type[M] | None = None) -> list[M]:
        """Get the attached metadata.

        Args:
            type_ (type[M] | None, optional): Only keep the instances of this type.

        Returns:
            list[M]: the metadata in application order.
        """
        if type_ is None:
            return list(self.__metadata.values())
        return [m for m in self.__metadata.values() if isinstance(m, type_)]

    def __repr__(self) -> str:
        return f"<{type(self).__name__} of {self.target!r} ({len(self.__metadata)} metadata)>"


def check_parameter_index(index: Any) -> int:
    """Validate a parameter position.

    Raises:
        InvalidParameterIndexError: Raised when index is not a non-negative int.
    """
    if isinstance(index, bool) or not isinstance(index, int) or index < 0:
        raise InvalidParameterIndexError(
            f"Parameter index must be a non-negative int, got {index!r}."
        )
    return index


class ParameterHolder:
    """Mixin for mirrors of callables (class constructors and methods) holding the mirrors of
    their decorated parameters.

    Only the decorated positions are present, this is not the arity of the callable.
    """

    _parameters: dict[int, ParameterMirror]

    def __init__(self, *args: Any, **kwargs: Any) -> NoneType:
        super().__init__(*args, **kwargs)
        self._parameters = {}

    def get_parameters(self) -> dict[int, ParameterMirror]:
        """Get the decorated parameters by position."""
        return dict(self._parameters)

    def get_parameter(self, index: int) -> ParameterMirror | None:
        """Get the mirror of the parameter at index or None if it is not decorated."""
        return self._parameters.get(index)

    def set_parameter(self, index: int, mirror: ParameterMirror) -> None:
        """Set the mirror of the parameter at index, overwriting any previous one.

        Raises:
            InvalidParameterIndexError: Raised when index is not a non-negative int.
        """
        self._parameters[check_parameter_index(index)] = mirror
