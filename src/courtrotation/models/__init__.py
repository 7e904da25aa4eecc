from .participant import Participant
from .round_record import RoundRecord, TeamPair, pair_key
from .weights import WeightConfig

__all__ = ["Participant", "RoundRecord", "TeamPair", "WeightConfig", "pair_key"]
