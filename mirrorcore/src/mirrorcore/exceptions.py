"""
Re-export exceptions module for cleaner imports.

This allows: from mirrorcore.exceptions import MirrorError
Instead of: from mirrorcore.meta.errors import MirrorError
"""

from .meta.errors import (
    TracedException,
    format_exception,
    MirrorError,
    InvalidTargetError,
    InvalidParameterIndexError,
    MirrorCycleError,
)

__all__ = [
    "TracedException",
    "format_exception",
    "MirrorError",
    "InvalidTargetError",
    "InvalidParameterIndexError",
    "MirrorCycleError",
]
