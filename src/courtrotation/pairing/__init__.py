"""Round generation engine: history, candidates, constraints, scoring, selection."""

from courtrotation.pairing.candidates import (
    Candidate,
    eligible_pool,
    enumerate_quads,
    generate_candidates,
    order_pool,
    team_partitions,
)
from courtrotation.pairing.constraints import (
    canonical_grouping,
    filter_candidates,
    is_flip,
    same_grouping,
)
from courtrotation.pairing.history import HistoryStats, build_stats, pair_key
from courtrotation.pairing.scoring import (
    score_candidate,
    score_candidates,
    similarity,
)
from courtrotation.pairing.selection import (
    collect_ties,
    select_candidate,
    tie_break_rng,
    tie_break_seed,
)

__all__ = [
    "Candidate",
    "HistoryStats",
    "build_stats",
    "canonical_grouping",
    "collect_ties",
    "eligible_pool",
    "enumerate_quads",
    "filter_candidates",
    "generate_candidates",
    "is_flip",
    "order_pool",
    "pair_key",
    "same_grouping",
    "score_candidate",
    "score_candidates",
    "select_candidate",
    "similarity",
    "team_partitions",
    "tie_break_rng",
    "tie_break_seed",
]
