"""A participant on the session roster."""

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
from typing import Any, Dict

from courtrotation.utils.validation import require_mapping


@dataclass(frozen=True)
class Participant:
    """
    One person who may be placed into rounds.

    Participants are immutable values; roster operations return updated
    copies so that undo snapshots can share them safely.

    Attributes
    ----------
    id : str
        Unique, stable identifier.
    name : str
        Display name.
    selected : bool
        Whether the participant is in today's pool.
    away : bool
        Temporarily left the court. An away participant is never selected.
    just_returned : bool
        Came back from being away and has not been placed yet. Such
        participants are ranked first when candidates are enumerated.
    temporary : bool
        Guest added for the day only; removed by "clear today".
    """

    id: str
    name: str
    selected: bool = True
    away: bool = False
    just_returned: bool = False
    temporary: bool = False

    @property
    def is_eligible(self) -> bool:
        """Eligible for the next round: selected and not away."""
        return self.selected and not self.away

    def to_dict(self) -> Dict[str, Any]:
        """Serialize participant to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "selected": self.selected,
            "away": self.away,
            "just_returned": self.just_returned,
            "temporary": self.temporary,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Participant":
        """Deserialize participant from dictionary.

        Flags missing from older saves take their defaults; an away
        participant is always loaded as not selected.
        """
        data = require_mapping(data, "participant")
        away = bool(data.get("away", False))
        selected = bool(data.get("selected", True)) and not away
        return cls(
            id=str(data["id"]),
            name=str(data.get("name", data["id"])),
            selected=selected,
            away=away,
            just_returned=bool(data.get("just_returned", False)) and selected,
            temporary=bool(data.get("temporary", False)),
        )
