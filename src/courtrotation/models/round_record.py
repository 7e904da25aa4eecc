"""Data models for a committed round: two teams and who rested."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterator, List, Tuple

from courtrotation.constants import MAX_TIMESTAMP_MS
from courtrotation.exceptions import InvalidRoundException
from courtrotation.type_hints import PairKey, ParticipantId
from courtrotation.utils.validation import require_list, require_mapping


def pair_key(first: ParticipantId, second: ParticipantId) -> PairKey:
    """Canonical key for an unordered pair of ids, ``"min-max"``."""
    low, high = sorted((str(first), str(second)))
    return f"{low}-{high}"


@dataclass(frozen=True)
class TeamPair:
    """
    An unordered pair of two distinct participants.

    Members are stored sorted so that ``TeamPair("B", "A") == TeamPair("A", "B")``.

    Attributes
    ----------
    a : str
        Lower participant id.
    b : str
        Higher participant id.
    """

    a: ParticipantId
    b: ParticipantId

    def __post_init__(self) -> None:
        if self.a == self.b:
            raise InvalidRoundException(f"A team needs two different players: {self.a}")
        if self.b < self.a:
            low, high = self.b, self.a
            object.__setattr__(self, "a", low)
            object.__setattr__(self, "b", high)

    @property
    def key(self) -> PairKey:
        return pair_key(self.a, self.b)

    @property
    def members(self) -> Tuple[ParticipantId, ParticipantId]:
        return (self.a, self.b)

    def __iter__(self) -> Iterator[ParticipantId]:
        return iter((self.a, self.b))

    def __contains__(self, participant_id: object) -> bool:
        return participant_id in (self.a, self.b)

    def to_list(self) -> List[ParticipantId]:
        return [self.a, self.b]

    @classmethod
    def from_list(cls, data: List[Any]) -> "TeamPair":
        if not isinstance(data, list) or len(data) != 2:
            raise InvalidRoundException(f"A team has exactly two players: {data!r}")
        return cls(str(data[0]), str(data[1]))


@dataclass(frozen=True)
class RoundRecord:
    """
    A committed round. Records are append-only and never edited.

    Attributes
    ----------
    id : str
        Unique round identifier.
    timestamp : int
        Commit time in epoch milliseconds.
    team1 : TeamPair
        First team.
    team2 : TeamPair
        Second team, disjoint from ``team1``.
    rest : frozenset of str
        Eligible participants who were not placed in this round.
    """

    id: str
    timestamp: int
    team1: TeamPair
    team2: TeamPair
    rest: FrozenSet[ParticipantId] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not 0 <= self.timestamp <= MAX_TIMESTAMP_MS:
            raise InvalidRoundException(
                f"Round timestamp out of range: {self.timestamp}"
            )
        if set(self.team1) & set(self.team2):
            raise InvalidRoundException(
                f"Teams overlap: {self.team1.to_list()} vs {self.team2.to_list()}"
            )
        if self.rest & self.players:
            raise InvalidRoundException("A resting participant cannot also play")

    @property
    def players(self) -> FrozenSet[ParticipantId]:
        """The four participants placed in this round."""
        return frozenset((*self.team1, *self.team2))

    @property
    def cross_pairs(self) -> List[PairKey]:
        """Keys of the four opponent pairs (each team1 member x each team2 member)."""
        return [pair_key(x, y) for x in self.team1 for y in self.team2]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round record to dictionary."""
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "team1": self.team1.to_list(),
            "team2": self.team2.to_list(),
            "rest": sorted(self.rest),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoundRecord":
        """Deserialize round record from dictionary."""
        data = require_mapping(data, "round")
        return cls(
            id=str(data["id"]),
            timestamp=int(data.get("timestamp", 0)),
            team1=TeamPair.from_list(data["team1"]),
            team2=TeamPair.from_list(data["team2"]),
            rest=frozenset(
                str(pid) for pid in require_list(data.get("rest", []), "round rest")
            ),
        )
