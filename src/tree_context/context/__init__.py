"""Context – cancellation tree, relays and the spawn race."""
from tree_context.context.context import Context
from tree_context.context.propagator import spawn_propagator
from tree_context.context.race import race

__all__ = ["Context", "race", "spawn_propagator"]
