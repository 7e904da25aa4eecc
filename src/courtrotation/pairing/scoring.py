"""Fairness score of a candidate round. Lower is better.

score = w_partner * (partners(team1) + partners(team2))
      + w_opp     * sum of opponent counts over the 4 cross pairs
      + w_prev    * similarity to the previous round
      + REST_REPEAT_PENALTY * number of participants resting twice in a row
"""

# Court Rotation
# Copyright (C) 2025  Court Rotation developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from typing import List, Optional, Sequence, Tuple

from courtrotation.constants import REST_REPEAT_PENALTY
from courtrotation.models.round_record import RoundRecord
from courtrotation.models.weights import WeightConfig
from courtrotation.pairing.candidates import Candidate
from courtrotation.pairing.constraints import same_grouping
from courtrotation.pairing.history import HistoryStats

ScoredCandidate = Tuple[float, Candidate]


def similarity(candidate: Candidate, previous_round: Optional[RoundRecord]) -> int:
    """How much ``candidate`` resembles the previous round, 0 to 3.

    One point for each team that was also a team last round, and one more
    when the whole grouping is the same in either team order.
    """
    if previous_round is None:
        return 0
    previous_teams = (previous_round.team1, previous_round.team2)
    total = 0
    if candidate.team1 in previous_teams:
        total += 1
    if candidate.team2 in previous_teams:
        total += 1
    if same_grouping(candidate, previous_round):
        total += 1
    return total


def score_candidate(
    candidate: Candidate,
    stats: HistoryStats,
    previous_round: Optional[RoundRecord],
    weights: WeightConfig,
) -> float:
    """Weighted fairness score for one candidate."""
    partner_term = stats.partner_count.get(
        candidate.team1.key, 0
    ) + stats.partner_count.get(candidate.team2.key, 0)
    opponent_term = sum(
        stats.opponent_count.get(key, 0) for key in candidate.cross_pairs
    )

    score = weights.w_partner * partner_term + weights.w_opp * opponent_term

    if previous_round is not None:
        score += weights.w_prev * similarity(candidate, previous_round)
        score += REST_REPEAT_PENALTY * len(candidate.rest & previous_round.rest)

    return float(score)


def score_candidates(
    candidates: Sequence[Candidate],
    stats: HistoryStats,
    previous_round: Optional[RoundRecord],
    weights: WeightConfig,
) -> List[ScoredCandidate]:
    """Score every candidate, keeping enumeration order."""
    return [
        (score_candidate(c, stats, previous_round, weights), c) for c in candidates
    ]
