"""Round generation for a session.

This module ties the pairing engine together: aggregate history, enumerate
candidates, drop rematches, score, select, and commit the chosen round to a
new session state.
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

import time
from dataclasses import replace
from typing import Callable, Optional, Tuple

from courtrotation.controllers.roster import clear_just_returned
from courtrotation.models.round_record import RoundRecord
from courtrotation.models.session.state import SessionState
from courtrotation.pairing import (
    build_stats,
    filter_candidates,
    generate_candidates,
    score_candidates,
    select_candidate,
)
from courtrotation.utils import generate_id, setup_logger

logger = setup_logger(__name__)

Clock = Callable[[], int]


def _now_ms() -> int:
    return int(time.time() * 1000)


def generate_round(
    state: SessionState, clock: Optional[Clock] = None
) -> Tuple[SessionState, RoundRecord]:
    """Generate and commit the next round.

    The result depends only on the roster, round history, weights, day seed
    and round index; ``clock`` only stamps the record.

    Args:
        state: Current session state
        clock: Returns the commit time in epoch milliseconds

    Returns:
        Tuple of (new state, committed round)

    Raises:
        InsufficientPlayersException: If fewer than 4 participants are eligible
        NoCandidateException: If every candidate repeats the previous round
    """
    round_index = state.round_index
    previous_round = state.previous_round

    stats = build_stats(state.rounds)
    candidates = generate_candidates(state.participants, previous_round)
    survivors = filter_candidates(candidates, previous_round)
    scored = score_candidates(survivors, stats, previous_round, state.weights)
    chosen = select_candidate(scored, state.day_seed, round_index)

    record = RoundRecord(
        id=generate_id("round"),
        timestamp=(clock or _now_ms)(),
        team1=chosen.team1,
        team2=chosen.team2,
        rest=chosen.rest,
    )
    new_state = replace(
        state,
        rounds=state.rounds + (record,),
        participants=clear_just_returned(state.participants, record.players),
    )

    logger.info(
        f"Created round {round_index + 1}: {record.team1.to_list()} vs "
        f"{record.team2.to_list()}, resting {sorted(record.rest)}"
    )
    return new_state, record
