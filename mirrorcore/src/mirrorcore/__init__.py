"""
mirrorcore: Declaration metadata registry for Python classes.

This library provides:
- ClassMirror, an inheritance aware registry of the metadata attached to a class, its members
  and its constructor parameters
- Method, property and parameter mirrors and the decorators populating them
- DeclarationStore, the process-wide store mirrors are persisted in
- ConstantNamespace for immutable class-level constants
- TracedException for enhanced exception formatting
"""

import logging

from .meta.mirrors.config import MirrorConstants

__version__ = "0.1.0"
__author__ = "Sébastien Gachoud"
__license__ = "MIT"

logging.getLogger(MirrorConstants.LOGGER_NAME).addHandler(logging.NullHandler())

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",
]
