"""Type hints used in Court Rotation."""

from typing import Dict, Literal, Tuple

# Participant identifiers are opaque, stable strings
ParticipantId = str
# Canonical unordered pair key, "min-max"
PairKey = str
# Mapping of pair key to number of occurrences
PairCounts = Dict[PairKey, int]

# A group of four participant ids considered together for one round
Quad = Tuple[ParticipantId, ParticipantId, ParticipantId, ParticipantId]
# Two sorted teams, sorted against each other
CanonicalGrouping = Tuple[
    Tuple[ParticipantId, ParticipantId], Tuple[ParticipantId, ParticipantId]
]

# Weight names accepted by the session setters
WeightName = Literal["w_partner", "w_opp", "w_prev"]
