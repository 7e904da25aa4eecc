"""Candidate enumeration for the next round.

The eligible pool is put in a deterministic order, the first ``MAX_QUADS``
4-player groups are taken from it, and each group is split into its three
possible 2 vs 2 partitions.
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

from dataclasses import dataclass
from itertools import combinations, islice
from typing import FrozenSet, Iterable, List, Optional, Sequence, Tuple

from courtrotation.constants import MAX_QUADS, PLAYERS_PER_ROUND
from courtrotation.exceptions import InsufficientPlayersException
from courtrotation.models.participant import Participant
from courtrotation.models.round_record import RoundRecord, TeamPair, pair_key
from courtrotation.type_hints import PairKey, ParticipantId, Quad
from courtrotation.utils import setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class Candidate:
    """
    One possible round: a partition of a quad plus who would rest.

    Attributes
    ----------
    team1 : TeamPair
        First team (always holds the quad's first-ranked member).
    team2 : TeamPair
        Second team.
    rest : frozenset of str
        Eligible participants outside the quad.
    """

    team1: TeamPair
    team2: TeamPair
    rest: FrozenSet[ParticipantId]

    @property
    def players(self) -> FrozenSet[ParticipantId]:
        return frozenset((*self.team1, *self.team2))

    @property
    def cross_pairs(self) -> List[PairKey]:
        return [pair_key(x, y) for x in self.team1 for y in self.team2]


def eligible_pool(participants: Iterable[Participant]) -> List[Participant]:
    """Participants who are selected and not away."""
    return [p for p in participants if p.is_eligible]


def order_pool(
    pool: Sequence[Participant], previous_round: Optional[RoundRecord] = None
) -> List[Participant]:
    """Rank the pool for enumeration.

    Sorted by id, then just-returned participants are moved to the front and
    participants who rested in the previous round to the back. A participant
    who is both stays in front.
    """
    by_id = sorted(pool, key=lambda p: p.id)
    rested = previous_round.rest if previous_round is not None else frozenset()

    def rank(p: Participant) -> int:
        if p.just_returned:
            return 0
        if p.id in rested:
            return 2
        return 1

    # sorted() is stable, so id order is kept inside each group
    return sorted(by_id, key=rank)


def enumerate_quads(
    ordered_ids: Sequence[ParticipantId], cap: int = MAX_QUADS
) -> List[Quad]:
    """The first ``cap`` 4-player groups in lexicographic order of ``ordered_ids``."""
    return list(islice(combinations(ordered_ids, PLAYERS_PER_ROUND), cap))


def team_partitions(quad: Quad) -> List[Tuple[TeamPair, TeamPair]]:
    """The three ways to split four players into two teams of two."""
    a, b, c, d = quad
    return [
        (TeamPair(a, b), TeamPair(c, d)),
        (TeamPair(a, c), TeamPair(b, d)),
        (TeamPair(a, d), TeamPair(b, c)),
    ]


def generate_candidates(
    participants: Iterable[Participant],
    previous_round: Optional[RoundRecord] = None,
    cap: int = MAX_QUADS,
) -> List[Candidate]:
    """Enumerate every candidate round for the eligible pool.

    Args:
        participants: Full roster; ineligible participants are skipped
        previous_round: Most recent committed round, if any
        cap: Maximum number of 4-player groups to consider

    Returns:
        Candidates in enumeration order (quad by quad, 3 per quad)

    Raises:
        InsufficientPlayersException: If fewer than 4 participants are eligible
    """
    pool = eligible_pool(participants)
    if len(pool) < PLAYERS_PER_ROUND:
        raise InsufficientPlayersException(len(pool))

    ordered_ids = [p.id for p in order_pool(pool, previous_round)]
    pool_ids = frozenset(ordered_ids)
    quads = enumerate_quads(ordered_ids, cap)

    candidates: List[Candidate] = []
    for quad in quads:
        rest = pool_ids.difference(quad)
        for team1, team2 in team_partitions(quad):
            candidates.append(Candidate(team1, team2, rest))

    logger.debug(
        f"Enumerated {len(quads)} groups ({len(candidates)} candidates) "
        f"from a pool of {len(pool)}"
    )
    return candidates
