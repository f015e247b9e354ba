"""Timeouts – deadlines for spawned work."""
from tree_context.timeouts.deadline import Deadline, Timeout, resolve_timeout

__all__ = ["Deadline", "Timeout", "resolve_timeout"]
