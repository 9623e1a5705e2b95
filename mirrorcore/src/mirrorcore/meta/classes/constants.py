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
Created: 2025-07-11
Updated: 2026-10-18
Description: Frozen namespaces (class) of typed constants. mirrorcore declares its own settings
            (logger name, reserved store keys) with them.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import inspect
from collections.abc import Iterator
from typing import Any, NoReturn, Callable, ClassVar, get_args, get_origin
from ..errors import TracedException
from ..typing.utilities import (
    Annotation,
    is_union,
    resolve_annotation_types,
    strip_qualifiers,
)


class ConstantsInstantiationError(TracedException):
    """Instantiation error of a Constants class."""


class ConstantsCompositionError(TracedException):
    """Composition error of a Constants class."""


class ConstantsModificationError(TracedException):
    """Modification error of a Constants class."""


def _verify_functions(name: str, namespace: dict[str, Any]) -> None:
    """Verify that no disalowed function is added.
    Disallowed functions are __new__ and __init__.

    Raises:
        ConstantsCompositionError: Raised when a disallowed function is added.
    """
    if "__init__" in namespace or "__new__" in namespace:
        raise ConstantsCompositionError(
            f"Constant class '{name}' is disallowed to have __new__ or __init__"
            " method since it shall never be instantiated."
        )


def _instantiation_error(name: str) -> Callable[[Any], NoReturn]:
    """Helper to format an error message when trying to instantiate a Constants class.

    Args:
        name (str): name of the class.

    Returns:
        Callable[[], NoReturn]: A callable that throws an instantiation error when called.
    """

    def f(_: Any) -> NoReturn:
        raise ConstantsInstantiationError(
            f"Cannot instantiate constant class '{name}'. Constant class cannot be instantiated."
        )

    return f


def _is_plain_type(annotation: Annotation) -> bool:
    """Whether isinstance accepts the annotation. Parametrized generics are excluded."""
    return isinstance(annotation, type) and get_origin(annotation) is None


def _checkable_types(annotation: Annotation) -> tuple[type, ...] | None:
    """Types usable with isinstance for an annotation or None when the annotation is too
    complex to be checked (generics, literals, forward references...).
    """
    annotation = strip_qualifiers(annotation)
    if _is_plain_type(annotation):
        return (annotation,)
    if is_union(annotation):
        members = tuple(strip_qualifiers(a) for a in get_args(annotation))
        if all(_is_plain_type(m) for m in members):
            return members
    return None


def _verify_annotations(cls: type, own: tuple[str, ...]) -> None:
    """Verify that no annotated member value is missing and that simple annotated types match.
    Only the constants declared by cls are verified, inherited ones were verified with their
    class.

    Args:
        cls (type): the freshly created constants class.
        own (tuple[str, ...]): names of the constants declared by cls.

    Raises:
        ConstantsCompositionError: Raised when an annotated member value is missing or does not
            match its annotation.
    """
    annotations = resolve_annotation_types(inspect.get_annotations(cls))
    namespace = vars(cls)
    for key in own:
        if key not in namespace:
            raise ConstantsCompositionError(
                f"Attribute '{key}' needs a value in constant class '{cls.__name__}'."
            )
        types = _checkable_types(annotations[key])
        if types is not None and not isinstance(namespace[key], types):
            raise ConstantsCompositionError(
                f"Value {namespace[key]!r} does not match type {annotations[key]} "
                f"for constant '{key}' in class '{cls.__name__}'."
            )


class ConstantsMetaclass(type):
    __constants__: tuple[str, ...]

    def __new__(
        mcs,
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        /,
        allow_private: bool = False,
        **kwargs: Any,
    ) -> Any:

        _verify_functions(name, namespace)

        namespace["__new__"] = _instantiation_error(name)

        cls = super().__new__(mcs, name, bases, namespace, **kwargs)

        # constant names, own annotated names after the inherited ones.
        own = tuple(
            k
            for k in inspect.get_annotations(cls)
            if allow_private or not k.startswith("_")
        )
        inherited: list[str] = []
        for base in bases:
            if isinstance(base, ConstantsMetaclass):
                inherited.extend(k for k in base.__constants__ if k not in inherited)
        type.__setattr__(
            cls,
            "__constants__",
            tuple(inherited) + tuple(k for k in own if k not in inherited),
        )

        _verify_annotations(cls, own)

        return cls

    def __setattr__(cls, name: str, value: Any) -> NoReturn:
        raise ConstantsModificationError(
            f"Attribute '{name}' of class '{cls.__name__}' cannot be modified. Reason: Constant"
            " class cannot be modified."
        )

    def __repr__(cls) -> str:
        constants = ", ".join(f"{k}={getattr(cls, k)!r}" for k in cls.__constants__)
        return f"<ConstantNamespace {cls.__name__}({constants})>"

    def __iter__(cls) -> Iterator[str]:
        return iter(cls.__constants__)

    def __contains__(cls, name: str) -> bool:
        return name in cls.__constants__

    def __len__(cls) -> int:
        return len(cls.__constants__)

    def items(cls) -> list[tuple[str, Any]]:
        """Return all constants as (name, value) pairs."""
        return [(k, getattr(cls, k)) for k in cls.__constants__]


class ConstantNamespace(metaclass=ConstantsMetaclass, allow_private=False):
    """Base class to create namespaces (class) of constants.
    Examples:
        >>> class Keys(ConstantNamespace):
        ...    A = 1 # this is not a constant. It needs annotation.
        ...    _B: str = "b" # this is not a constant unless allow_private=True.
        ...    LOGGER: str = "app" # this is a constant.
        ...    DEPTH: int = "3" # raises ConstantsCompositionError, not an int.

        >>> Keys.LOGGER
        'app'

        >>> Keys.LOGGER = "other" # raises ConstantsModificationError.
    """

    __constants__: ClassVar[tuple[str, ...]]
