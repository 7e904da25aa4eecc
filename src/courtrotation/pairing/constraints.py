"""Hard rematch rule against the immediately preceding round."""

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

from typing import Iterable, List, Optional, Union

from courtrotation.models.round_record import RoundRecord, TeamPair
from courtrotation.pairing.candidates import Candidate
from courtrotation.type_hints import CanonicalGrouping

Matchup = Union[Candidate, RoundRecord]


def canonical_grouping(team1: TeamPair, team2: TeamPair) -> CanonicalGrouping:
    """Order-independent form of two teams: members sorted, then teams sorted."""
    first, second = sorted((team1.members, team2.members))
    return (first, second)


def same_grouping(left: Matchup, right: Matchup) -> bool:
    """True when both split the same four players into the same two teams,
    in either team order."""
    return canonical_grouping(left.team1, left.team2) == canonical_grouping(
        right.team1, right.team2
    )


def is_flip(candidate: Matchup, previous_round: Optional[RoundRecord]) -> bool:
    """True when ``candidate`` replays the previous round's teams.

    The comparison ignores team order, so the swapped rematch and the
    identical repeat are both caught. Only the single most recent round
    counts.
    """
    if previous_round is None:
        return False
    if candidate.players != previous_round.players:
        return False
    return same_grouping(candidate, previous_round)


def filter_candidates(
    candidates: Iterable[Candidate], previous_round: Optional[RoundRecord]
) -> List[Candidate]:
    """Drop every candidate that replays the previous round."""
    return [c for c in candidates if not is_flip(c, previous_round)]
