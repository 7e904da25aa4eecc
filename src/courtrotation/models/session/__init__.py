from .state import SessionState, Snapshot

__all__ = ["SessionState", "Snapshot"]
