"""
Re-export utilities module for cleaner imports.

This allows: from mirrorcore.typing_utilities import is_class_var
Instead of: from mirrorcore.meta.typing.utilities import is_class_var
"""

from .meta.typing.utilities import (
    is_union,
    is_class_var,
    strip_qualifiers,
    resolve_annotation_types,
    constructor_param_types,
)

__all__ = [
    "is_union",
    "is_class_var",
    "strip_qualifiers",
    "resolve_annotation_types",
    "constructor_param_types",
]
