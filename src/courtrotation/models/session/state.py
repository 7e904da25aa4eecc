"""Immutable session state and the undo snapshot taken from it."""

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

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional, Tuple

from courtrotation.exceptions import DuplicateParticipantException
from courtrotation.models.participant import Participant
from courtrotation.models.round_record import RoundRecord
from courtrotation.models.weights import WeightConfig
from courtrotation.utils.validation import require_list, require_mapping


def _participants_from_list(data: Any) -> Tuple[Participant, ...]:
    """Load a roster, rejecting repeated ids.

    Raises:
        DuplicateParticipantException: If two entries share an id
    """
    participants = tuple(
        Participant.from_dict(p) for p in require_list(data, "participants")
    )
    seen = set()
    for participant in participants:
        if participant.id in seen:
            raise DuplicateParticipantException(
                f"Participant id appears twice: {participant.id}"
            )
        seen.add(participant.id)
    return participants


def _rounds_from_list(data: Any) -> Tuple[RoundRecord, ...]:
    return tuple(RoundRecord.from_dict(r) for r in require_list(data, "rounds"))


@dataclass(frozen=True)
class Snapshot:
    """
    Value copy of everything undo restores.

    Snapshots hold tuples of frozen records, so taking one never copies
    deeply and later edits cannot leak into it.

    Attributes
    ----------
    rounds : tuple of RoundRecord
        Round history at the time of the snapshot.
    participants : tuple of Participant
        Roster at the time of the snapshot.
    weights : WeightConfig
        Fairness weights at the time of the snapshot.
    """

    rounds: Tuple[RoundRecord, ...] = ()
    participants: Tuple[Participant, ...] = ()
    weights: WeightConfig = field(default_factory=WeightConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize snapshot to dictionary."""
        return {
            "rounds": [r.to_dict() for r in self.rounds],
            "participants": [p.to_dict() for p in self.participants],
            "weights": self.weights.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Snapshot":
        """Deserialize snapshot from dictionary."""
        data = require_mapping(data, "snapshot")
        return cls(
            rounds=_rounds_from_list(data.get("rounds", [])),
            participants=_participants_from_list(data.get("participants", [])),
            weights=WeightConfig.from_dict(data.get("weights", {})),
        )


@dataclass(frozen=True)
class SessionState:
    """
    Complete state of one session day.

    Attributes
    ----------
    session_date : str
        Session day, ``YYYY-MM-DD``. Also the persistence key.
    day_seed : str
        Seed text for tie-break draws; defaults to the session date.
    participants : tuple of Participant
        Current roster, in roster order.
    rounds : tuple of RoundRecord
        Committed rounds, oldest first.
    weights : WeightConfig
        Current fairness weights.
    """

    session_date: str
    day_seed: str
    participants: Tuple[Participant, ...] = ()
    rounds: Tuple[RoundRecord, ...] = ()
    weights: WeightConfig = field(default_factory=WeightConfig)

    @property
    def round_index(self) -> int:
        """Index of the next round to generate (0 for the first)."""
        return len(self.rounds)

    @property
    def previous_round(self) -> Optional[RoundRecord]:
        return self.rounds[-1] if self.rounds else None

    def snapshot(self) -> Snapshot:
        """Capture the parts of the state that undo restores."""
        return Snapshot(
            rounds=self.rounds,
            participants=self.participants,
            weights=self.weights,
        )

    def restore(self, snapshot: Snapshot) -> "SessionState":
        """Return this state with rounds, roster and weights replaced wholesale."""
        return replace(
            self,
            rounds=snapshot.rounds,
            participants=snapshot.participants,
            weights=snapshot.weights,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize session state to dictionary."""
        return {
            "session_date": self.session_date,
            "day_seed": self.day_seed,
            "participants": [p.to_dict() for p in self.participants],
            "rounds": [r.to_dict() for r in self.rounds],
            "weights": self.weights.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SessionState":
        """Deserialize session state from dictionary."""
        data = require_mapping(data, "session")
        session_date = str(data["session_date"])
        return cls(
            session_date=session_date,
            day_seed=str(data.get("day_seed") or session_date),
            participants=_participants_from_list(data["participants"]),
            rounds=_rounds_from_list(data.get("rounds", [])),
            weights=WeightConfig.from_dict(data.get("weights", {})),
        )
