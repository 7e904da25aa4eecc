"""Partner and opponent counts aggregated from the day's rounds."""

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

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterable

from courtrotation.models.round_record import RoundRecord, pair_key
from courtrotation.type_hints import PairCounts, ParticipantId

__all__ = ["HistoryStats", "build_stats", "pair_key"]


@dataclass
class HistoryStats:
    """
    How often each pair of participants partnered or faced each other.

    Derived from the round list on every generation and never persisted.
    Pairs that never occurred are absent from the mappings.

    Attributes
    ----------
    partner_count : dict of str to int
        Times each pair played on the same team.
    opponent_count : dict of str to int
        Times each pair played on opposite teams.
    """

    partner_count: PairCounts = field(default_factory=dict)
    opponent_count: PairCounts = field(default_factory=dict)

    def partners(self, first: ParticipantId, second: ParticipantId) -> int:
        """Number of times two participants have been partners."""
        return self.partner_count.get(pair_key(first, second), 0)

    def opponents(self, first: ParticipantId, second: ParticipantId) -> int:
        """Number of times two participants have been opponents."""
        return self.opponent_count.get(pair_key(first, second), 0)


def build_stats(rounds: Iterable[RoundRecord]) -> HistoryStats:
    """Count partnerships and oppositions over ``rounds``."""
    partner_count = defaultdict(int)
    opponent_count = defaultdict(int)
    for record in rounds:
        partner_count[record.team1.key] += 1
        partner_count[record.team2.key] += 1
        for key in record.cross_pairs:
            opponent_count[key] += 1
    return HistoryStats(dict(partner_count), dict(opponent_count))
