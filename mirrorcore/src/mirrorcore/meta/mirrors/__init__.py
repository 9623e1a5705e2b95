"""Mirrors of declarations and the store they are persisted in."""

from .store import DeclarationStore, declaration_store, reset_declaration_store
from .config import MirrorConstants
from .declaration import (
    MirrorKind,
    DeclarationMirror,
    DeclarationMetadata,
    ClassMetadata,
    MethodMetadata,
    PropertyMetadata,
    ParameterMetadata,
)
from .class_mirror import ClassMirror, MemberKey
from .members import MemberMirror, MethodMirror, PropertyMirror
from .pending import PendingMember, settle_pending_members
from .parameter import ParameterMirror

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
