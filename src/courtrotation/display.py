"""Plain-text rendering of the roster and round history."""

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

from datetime import datetime
from typing import Dict, Iterable, List

from courtrotation.constants import WEIGHT_NAMES
from courtrotation.models.participant import Participant
from courtrotation.models.round_record import RoundRecord, TeamPair
from courtrotation.models.session.session import Session


def name_map(participants: Iterable[Participant]) -> Dict[str, str]:
    return {p.id: p.name for p in participants}


def _team(team: TeamPair, names: Dict[str, str]) -> str:
    # Removed participants are shown by id
    return " & ".join(names.get(pid, pid) for pid in team)


def format_round(record: RoundRecord, names: Dict[str, str], number: int) -> str:
    """One round as a short block of text."""
    when = datetime.fromtimestamp(record.timestamp / 1000).strftime("%H:%M")
    lines = [
        f"Round #{number} ({when})",
        f"  Team A: {_team(record.team1, names)}",
        f"  Team B: {_team(record.team2, names)}",
    ]
    if record.rest:
        resting = ", ".join(names.get(pid, pid) for pid in sorted(record.rest))
        lines.append(f"  Resting: {resting}")
    return "\n".join(lines)


def format_history(session: Session) -> str:
    if not session.rounds:
        return "No rounds yet. Run 'generate' to create the first one."
    names = name_map(session.participants)
    return "\n".join(
        format_round(r, names, i) for i, r in enumerate(session.rounds, start=1)
    )


def _status(p: Participant) -> str:
    flags: List[str] = []
    if p.selected:
        flags.append("selected")
    if p.away:
        flags.append("away")
    if p.just_returned:
        flags.append("returned")
    if p.temporary:
        flags.append("guest")
    return ", ".join(flags) or "-"


def format_roster(session: Session) -> str:
    lines = [f"Participants ({sum(p.is_eligible for p in session.participants)} in pool)"]
    width = max((len(p.id) for p in session.participants), default=0)
    for p in session.participants:
        lines.append(f"  {p.id:<{width}}  {p.name}  [{_status(p)}]")
    return "\n".join(lines)


def format_weights(session: Session) -> str:
    weights = session.weights.to_dict()
    return "Weights: " + ", ".join(
        f"{WEIGHT_NAMES[key]}={value}" for key, value in weights.items()
    )


def format_session(session: Session) -> str:
    """Header, roster, weights and round history."""
    header = f"Session {session.session_date} (seed {session.day_seed!r})"
    return "\n\n".join(
        [header, format_roster(session), format_weights(session), format_history(session)]
    )
