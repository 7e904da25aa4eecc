"""Court Rotation: fair 2 vs 2 round generation for recreational sessions."""

from courtrotation.exceptions import (
    CourtRotationException,
    InsufficientPlayersException,
    NoCandidateException,
)
from courtrotation.models import Participant, RoundRecord, TeamPair, WeightConfig
from courtrotation.models.session import SessionState, Snapshot
from courtrotation.models.session.session import Session
from courtrotation.storage import SessionStore

__version__ = "0.1.0"

__all__ = [
    "CourtRotationException",
    "InsufficientPlayersException",
    "NoCandidateException",
    "Participant",
    "RoundRecord",
    "Session",
    "SessionState",
    "SessionStore",
    "Snapshot",
    "TeamPair",
    "WeightConfig",
]
