"""
Re-export mirrors module for cleaner imports.

This allows: from mirrorcore.mirrors import ClassMirror
Instead of: from mirrorcore.meta.mirrors.class_mirror import ClassMirror
"""

from .meta.mirrors import (
    DeclarationStore,
    declaration_store,
    reset_declaration_store,
    MirrorConstants,
    MirrorKind,
    DeclarationMirror,
    ClassMirror,
    MemberMirror,
    MethodMirror,
    PropertyMirror,
    ParameterMirror,
    PendingMember,
    settle_pending_members,
    MemberKey,
    DeclarationMetadata,
    ClassMetadata,
    MethodMetadata,
    PropertyMetadata,
    ParameterMetadata,
)

__all__ = [
    # Store
    "DeclarationStore",
    "declaration_store",
    "reset_declaration_store",
    "MirrorConstants",
    # Mirrors
    "MirrorKind",
    "DeclarationMirror",
    "ClassMirror",
    "MemberMirror",
    "MethodMirror",
    "PropertyMirror",
    "ParameterMirror",
    "PendingMember",
    "settle_pending_members",
    "MemberKey",
    # Metadata
    "DeclarationMetadata",
    "ClassMetadata",
    "MethodMetadata",
    "PropertyMetadata",
    "ParameterMetadata",
]
