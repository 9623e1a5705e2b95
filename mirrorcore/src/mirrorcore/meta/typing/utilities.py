"""Type annotation utility functions.

This module provides helper functions for working with Python type annotations,
including utilities for checking union and ClassVar annotations, resolving
forward references in annotations and reading constructor parameter types.
"""
import inspect
from typing import Any, ClassVar, Final, Union, get_origin, get_args, get_type_hints
from types import UnionType

type Annotation = Any

_QUALIFIERS = (ClassVar, Final)
_CLASS_VAR_NAMES = ("ClassVar", "typing.ClassVar")


def is_union(annotation: Annotation) -> bool:
    """Check if an annotation is a union. A union is a Union or UnionType type.

    Args:
        annotation (Any): The annotation to check.

    Returns:
        bool: Whether the annotation is a union.
    """
    o = get_origin(annotation) or annotation
    return o in (Union, UnionType)


def is_class_var(annotation: Annotation) -> bool:
    """Check if an annotation declares a class variable: ClassVar or ClassVar[...].
    String annotations (postponed evaluation) are recognized by their prefix.

    Args:
        annotation (Any): The annotation to check.

    Returns:
        bool: Whether the annotation is a ClassVar.
    """
    if isinstance(annotation, str):
        return annotation.split("[", 1)[0].strip() in _CLASS_VAR_NAMES
    return annotation is ClassVar or get_origin(annotation) is ClassVar


def strip_qualifiers(annotation: Annotation) -> Annotation:
    """Remove ClassVar and Final wrappers. Ex.: Final[int] -> int, ClassVar -> Any.

    Args:
        annotation (Any): The annotation to unwrap.

    Returns:
        Any: The wrapped annotation.
    """
    while annotation in _QUALIFIERS or get_origin(annotation) in _QUALIFIERS:
        args = get_args(annotation)
        annotation = args[0] if args else Any
    return annotation


def resolve_annotation_types(annotations: dict[str, Any]) -> dict[str, Annotation]:
    """
    Get type hints from a dictionary of annotations. See typing.get_type_hints.

    This function is useful when you want to get the type hints from a dictionary
    of annotations instead of a class or a function.

    Args:
        annotations (dict[str, Any]): A dictionary of annotations.

    Returns:
        dict[str, Any]: A dictionary of type hints.
    """
    X = type("X", (), {"__annotations__": annotations})
    return get_type_hints(X, include_extras=True)


def constructor_param_types(cls: type) -> list[Annotation]:
    """Get the declared types of the parameters of a class constructor, `self` excluded.

    Variadic parameters (*args, **kwargs) are not part of the result and unannotated parameters
    are reported as Any. Forward references that cannot be resolved are kept as written.

    Args:
        cls (type): The class to inspect.

    Returns:
        list[Any]: The parameter types in declaration order.
    """
    init = cls.__init__
    if init is object.__init__:
        return []
    try:
        signature = inspect.signature(init)
    except ValueError:
        # builtin constructors without signature metadata
        return []
    try:
        hints = get_type_hints(init)
    except NameError:
        hints = {}

    parameters = list(signature.parameters.values())[1:]
    return [
        hints.get(
            p.name, Any if p.annotation is inspect.Parameter.empty else p.annotation
        )
        for p in parameters
        if p.kind not in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
    ]
