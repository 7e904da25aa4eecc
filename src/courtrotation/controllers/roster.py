"""Roster operations.

Every function takes the current tuple of participants and returns a new
one; nothing is modified in place.
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
from typing import Callable, Iterable, Optional, Tuple

from courtrotation.constants import (
    DEFAULT_ID_PREFIX,
    DEFAULT_NAME_PREFIX,
    DEFAULT_ROSTER_SIZE,
    GUEST_ID_PREFIX,
)
from courtrotation.exceptions import (
    DuplicateParticipantException,
    InvalidParticipantStateException,
    ParticipantNotFoundException,
)
from courtrotation.models.participant import Participant
from courtrotation.type_hints import ParticipantId
from courtrotation.utils import generate_id, setup_logger
from courtrotation.utils.names import with_honorific
from courtrotation.utils.validation import validate_name_strict

logger = setup_logger(__name__)

Roster = Tuple[Participant, ...]


def default_roster(size: int = DEFAULT_ROSTER_SIZE) -> Roster:
    """Fixed roster for a new session day: P1..Pn, everyone selected."""
    return tuple(
        Participant(id=f"{DEFAULT_ID_PREFIX}{i}", name=f"{DEFAULT_NAME_PREFIX} {i}")
        for i in range(1, size + 1)
    )


def find_participant(roster: Roster, participant_id: ParticipantId) -> Participant:
    """Look up a participant by id.

    Raises:
        ParticipantNotFoundException: If no participant has that id
    """
    for participant in roster:
        if participant.id == participant_id:
            return participant
    raise ParticipantNotFoundException(participant_id)


def _update(
    roster: Roster,
    participant_id: ParticipantId,
    change: Callable[[Participant], Participant],
) -> Roster:
    find_participant(roster, participant_id)
    return tuple(change(p) if p.id == participant_id else p for p in roster)


def toggle_selected(roster: Roster, participant_id: ParticipantId) -> Roster:
    """Flip whether a participant is in today's pool.

    Deselecting clears the just-returned mark. Selecting someone who is away
    counts as their return.
    """
    participant = find_participant(roster, participant_id)
    if participant.away:
        return set_away(roster, participant_id, False)

    if participant.selected:
        updated = replace(participant, selected=False, just_returned=False)
    else:
        updated = replace(participant, selected=True)
    logger.info(f"Set {participant.name} selected: {updated.selected}")
    return _update(roster, participant_id, lambda _: updated)


def set_away(roster: Roster, participant_id: ParticipantId, away: bool) -> Roster:
    """Mark a participant as away or back.

    Going away is only allowed while selected and clears ``selected``.
    Coming back selects the participant and marks them just returned.

    Raises:
        InvalidParticipantStateException: If an unselected participant is sent away
    """
    participant = find_participant(roster, participant_id)
    if away == participant.away:
        return roster

    if away:
        if not participant.selected:
            raise InvalidParticipantStateException(
                f"{participant.name} must be selected before going away"
            )
        updated = replace(participant, away=True, selected=False, just_returned=False)
    else:
        updated = replace(participant, away=False, selected=True, just_returned=True)

    logger.info(f"Set {participant.name} away: {away}")
    return _update(roster, participant_id, lambda _: updated)


def add_participant(roster: Roster, participant: Participant) -> Roster:
    """Append a participant.

    Raises:
        DuplicateParticipantException: If the id is already on the roster
    """
    if any(p.id == participant.id for p in roster):
        raise DuplicateParticipantException(
            f"Participant id already exists: {participant.id}"
        )
    logger.info(f"Added participant: {participant.name} ({participant.id})")
    return roster + (participant,)


def add_guest(
    roster: Roster,
    name: str,
    honorific: bool = False,
    participant_id: Optional[ParticipantId] = None,
) -> Roster:
    """Add a guest for today only.

    Args:
        roster: Current roster
        name: Display name; whitespace is collapsed
        honorific: Append the default honorific unless one is present
        participant_id: Explicit id; generated when omitted

    Raises:
        InvalidParticipantDataException: If the name is invalid
    """
    display_name = validate_name_strict(name)
    if honorific:
        display_name = with_honorific(display_name)
    guest = Participant(
        id=participant_id or generate_id(GUEST_ID_PREFIX),
        name=display_name,
        temporary=True,
    )
    return add_participant(roster, guest)


def remove_participant(roster: Roster, participant_id: ParticipantId) -> Roster:
    """Remove a participant from the roster.

    Rounds that already include the participant are left as they are.
    """
    participant = find_participant(roster, participant_id)
    logger.info(f"Removed participant: {participant.name} ({participant_id})")
    return tuple(p for p in roster if p.id != participant_id)


def clear_today(roster: Roster) -> Roster:
    """Remove every guest added for the day."""
    kept = tuple(p for p in roster if not p.temporary)
    if len(kept) != len(roster):
        logger.info(f"Cleared {len(roster) - len(kept)} guests")
    return kept


def clear_just_returned(
    roster: Roster, participant_ids: Iterable[ParticipantId]
) -> Roster:
    """Clear the just-returned mark on the given participants."""
    ids = frozenset(participant_ids)
    return tuple(
        replace(p, just_returned=False) if p.id in ids and p.just_returned else p
        for p in roster
    )
