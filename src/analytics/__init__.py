"""Anonymous analytics for the ballot simulator."""

from .recorder import IntentionRecorder, VoteIntention, build_intentions
from .session import SessionContext

__all__ = ["IntentionRecorder", "SessionContext", "VoteIntention", "build_intentions"]
