"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    └── TreeContextError         (context.py)
        ├── ContextClosedError
        ├── InvalidTimeoutError
        └── ConfigError          (tree_context.config.validation)
"""

from tree_context.kernel.errors.base import BaseError
from tree_context.kernel.errors.context import (
    ContextClosedError,
    InvalidTimeoutError,
    TreeContextError,
)

__all__ = [
    "BaseError",
    "ContextClosedError",
    "InvalidTimeoutError",
    "TreeContextError",
]
