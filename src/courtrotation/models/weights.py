"""WeightConfig data class."""

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

from dataclasses import dataclass, replace
from typing import Any, Dict, Union

from courtrotation.constants import (
    DEFAULT_W_OPP,
    DEFAULT_W_PARTNER,
    DEFAULT_W_PREV,
    W_OPP,
    W_PARTNER,
    W_PREV,
)
from courtrotation.exceptions import InvalidConfigurationException
from courtrotation.type_hints import WeightName
from courtrotation.utils.validation import clamp_weight, require_mapping


@dataclass(frozen=True)
class WeightConfig:
    """Fairness weights used by the scorer.

    Attributes
    ----------
    w_partner : int
        Weight of repeated partnerships.
    w_opp : int
        Weight of repeated opponent pairs.
    w_prev : int
        Weight of resemblance to the previous round.
    """

    w_partner: int = DEFAULT_W_PARTNER
    w_opp: int = DEFAULT_W_OPP
    w_prev: int = DEFAULT_W_PREV

    def __post_init__(self) -> None:
        # Clamp on construction so every instance holds integers in range
        for name in (W_PARTNER, W_OPP, W_PREV):
            object.__setattr__(self, name, clamp_weight(getattr(self, name)))

    def with_weight(self, name: WeightName, value: Union[int, float, str]) -> "WeightConfig":
        """Return a copy with one weight replaced (and clamped)."""
        if name not in (W_PARTNER, W_OPP, W_PREV):
            raise InvalidConfigurationException(f"Unknown weight: {name}")
        return replace(self, **{name: clamp_weight(value)})

    def to_dict(self) -> Dict[str, Any]:
        """Serialize weights to dictionary."""
        return {
            W_PARTNER: self.w_partner,
            W_OPP: self.w_opp,
            W_PREV: self.w_prev,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WeightConfig":
        """Deserialize weights from dictionary."""
        data = require_mapping(data, "weights")
        return cls(
            w_partner=data.get(W_PARTNER, DEFAULT_W_PARTNER),
            w_opp=data.get(W_OPP, DEFAULT_W_OPP),
            w_prev=data.get(W_PREV, DEFAULT_W_PREV),
        )
