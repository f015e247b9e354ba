"""
tree_context – hierarchical cancellation for asyncio tasks.

Import path convention::

    from tree_context import Context, Deadline
    from tree_context.signal import create, SignalOutcome
    from tree_context.config import TreeContextSettings
    from tree_context.observability import configure_logging
"""

from tree_context.context import Context
from tree_context.kernel.errors import (
    BaseError,
    ContextClosedError,
    InvalidTimeoutError,
    TreeContextError,
)
from tree_context.timeouts import Deadline

__version__ = "0.1.0"
__all__ = [
    "BaseError",
    "Context",
    "ContextClosedError",
    "Deadline",
    "InvalidTimeoutError",
    "TreeContextError",
    "__version__",
]
