"""Signal – close-on-drop broadcast used to carry cancellation."""
from tree_context.signal.channel import SignalOutcome, SignalSender, Subscription, create

__all__ = ["SignalOutcome", "SignalSender", "Subscription", "create"]
