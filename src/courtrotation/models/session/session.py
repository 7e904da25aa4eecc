"""Main Session class - the interface the UI and CLI talk to.

A Session holds the current immutable state of one session day and the undo
stack. Every mutating operation pushes a snapshot of the state it replaces,
and only when the operation succeeds.
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

from dataclasses import replace
from datetime import date
from typing import Any, Dict, Optional, Tuple, Union

from courtrotation.constants import DEFAULT_ROSTER_SIZE, W_OPP, W_PARTNER, W_PREV
from courtrotation.controllers import roster
from courtrotation.controllers.round_generator import Clock, generate_round
from courtrotation.controllers.undo_stack import UndoStack
from courtrotation.exceptions import InvalidConfigurationException
from courtrotation.models.participant import Participant
from courtrotation.models.round_record import RoundRecord
from courtrotation.models.weights import WeightConfig
from courtrotation.type_hints import ParticipantId, WeightName
from courtrotation.utils import setup_logger
from courtrotation.utils.validation import (
    require_list,
    validate_session_date_strict,
)

from .state import SessionState, Snapshot

logger = setup_logger(__name__)

Number = Union[int, float, str]


class Session:
    """One session day of 2 vs 2 rounds.

    The Session coordinates:
    - the round generator, which turns the current state into the next round
    - the roster operations (select, away/return, guests)
    - the undo stack of snapshots taken before each change

    Callers must serialize access; there is no internal locking.
    """

    def __init__(
        self,
        state: SessionState,
        undo_stack: Optional[UndoStack] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        """Initialize a session.

        Args
        ----
        state: Current session state
        undo_stack: Snapshots restored by undo, oldest first
        clock: Time source for round timestamps (epoch milliseconds)
        """
        self._state = state
        self.undo_stack = undo_stack if undo_stack is not None else UndoStack()
        self.clock = clock

    @classmethod
    def new(
        cls,
        session_date: Optional[str] = None,
        day_seed: Optional[str] = None,
        roster_size: int = DEFAULT_ROSTER_SIZE,
        clock: Optional[Clock] = None,
    ) -> "Session":
        """Create a session with the default roster and no rounds.

        Args:
            session_date: Session day; today when omitted
            day_seed: Tie-break seed text; the session date when omitted
            roster_size: Number of default participants
            clock: Time source for round timestamps
        """
        session_date = validate_session_date_strict(
            session_date or date.today().isoformat()
        )
        state = SessionState(
            session_date=session_date,
            day_seed=day_seed or session_date,
            participants=roster.default_roster(roster_size),
        )
        logger.info(f"Started new session for {session_date}")
        return cls(state, clock=clock)

    # ========== Properties ==========

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def session_date(self) -> str:
        return self._state.session_date

    @property
    def day_seed(self) -> str:
        return self._state.day_seed

    @property
    def participants(self) -> Tuple[Participant, ...]:
        return self._state.participants

    @property
    def rounds(self) -> Tuple[RoundRecord, ...]:
        return self._state.rounds

    @property
    def weights(self) -> WeightConfig:
        return self._state.weights

    @property
    def round_index(self) -> int:
        """Index of the next round (number of rounds committed so far)."""
        return self._state.round_index

    @property
    def previous_round(self) -> Optional[RoundRecord]:
        return self._state.previous_round

    @property
    def can_undo(self) -> bool:
        return bool(self.undo_stack)

    def participant(self, participant_id: ParticipantId) -> Participant:
        """Get a participant by id.

        Raises:
            ParticipantNotFoundException: If no participant has that id
        """
        return roster.find_participant(self._state.participants, participant_id)

    # ========== State Transitions ==========

    def _commit(self, new_state: SessionState) -> None:
        """Replace the state, pushing a snapshot of the old one first."""
        if new_state == self._state:
            return
        self.undo_stack.push(self._state.snapshot())
        self._state = new_state

    def _commit_roster(self, participants: Tuple[Participant, ...]) -> None:
        self._commit(replace(self._state, participants=participants))

    # ========== Round Management ==========

    def generate_round(self) -> RoundRecord:
        """Generate and commit the next round.

        Returns:
            The committed round

        Raises:
            InsufficientPlayersException: If fewer than 4 participants are eligible
            NoCandidateException: If every candidate repeats the previous round
        """
        new_state, record = generate_round(self._state, self.clock)
        self._commit(new_state)
        return record

    def undo(self) -> Optional[Snapshot]:
        """Restore the state captured before the last change.

        Returns:
            The restored snapshot, or None when there is nothing to undo
        """
        snapshot = self.undo_stack.pop()
        if snapshot is None:
            logger.warning("Cannot undo: no earlier state")
            return None
        self._state = self._state.restore(snapshot)
        logger.info(f"Undid last change; {len(self._state.rounds)} rounds remain")
        return snapshot

    # ========== Weights ==========

    def set_weight(self, name: WeightName, value: Number) -> int:
        """Set one fairness weight, clamped to an integer in 0..5.

        Returns:
            The stored value
        """
        weights = self._state.weights.with_weight(name, value)
        self._commit(replace(self._state, weights=weights))
        return getattr(weights, name)

    def set_w_partner(self, value: Number) -> int:
        return self.set_weight(W_PARTNER, value)

    def set_w_opp(self, value: Number) -> int:
        return self.set_weight(W_OPP, value)

    def set_w_prev(self, value: Number) -> int:
        return self.set_weight(W_PREV, value)

    def reset_weights(self) -> None:
        """Restore the default weights."""
        self._commit(replace(self._state, weights=WeightConfig()))

    # ========== Roster ==========

    def toggle_selected(self, participant_id: ParticipantId) -> Participant:
        self._commit_roster(roster.toggle_selected(self._state.participants, participant_id))
        return self.participant(participant_id)

    def set_away(self, participant_id: ParticipantId, away: bool) -> Participant:
        self._commit_roster(roster.set_away(self._state.participants, participant_id, away))
        return self.participant(participant_id)

    def add_guest(self, name: str, honorific: bool = False) -> Participant:
        """Add a guest for today and return it."""
        participants = roster.add_guest(self._state.participants, name, honorific)
        self._commit_roster(participants)
        return participants[-1]

    def remove_participant(self, participant_id: ParticipantId) -> None:
        self._commit_roster(
            roster.remove_participant(self._state.participants, participant_id)
        )

    def clear_today(self) -> None:
        """Remove all of today's guests."""
        self._commit_roster(roster.clear_today(self._state.participants))

    def reset(self, roster_size: int = DEFAULT_ROSTER_SIZE) -> None:
        """Start the day over: default roster, no rounds, default weights.

        The reset itself can be undone.
        """
        self._commit(
            replace(
                self._state,
                participants=roster.default_roster(roster_size),
                rounds=(),
                weights=WeightConfig(),
            )
        )
        logger.info(f"Reset session {self.session_date}")

    # ========== Settings ==========

    def set_day_seed(self, day_seed: str) -> None:
        """Change the tie-break seed for future rounds.

        The seed is not part of undo snapshots.
        """
        if not day_seed or not day_seed.strip():
            raise InvalidConfigurationException("Day seed cannot be empty")
        self._state = replace(self._state, day_seed=day_seed.strip())
        logger.info(f"Day seed set to {self._state.day_seed!r}")

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize session state and undo history to dictionary."""
        data = self._state.to_dict()
        data["undo_history"] = self.undo_stack.to_list()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any], clock: Optional[Clock] = None) -> "Session":
        """Deserialize session from dictionary.

        Raises:
            KeyError, ValueError, TypeError, OverflowError: If a value is missing
                or cannot be converted
            CourtRotationException: If a value has the wrong shape or a record
                violates a model invariant
        """
        state = SessionState.from_dict(data)
        validate_session_date_strict(state.session_date)
        undo_stack = UndoStack.from_list(
            require_list(data.get("undo_history", []), "undo history")
        )
        return cls(state, undo_stack, clock)
