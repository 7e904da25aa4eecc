"""Pick the best-scoring candidate, breaking ties with a seeded draw.

The draw generator is rebuilt from ``(day_seed, round_index)`` on every
call. Regenerating a round after undo therefore repeats the same draw no
matter how many generations happened in between.
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

import math
import random
from typing import Iterable, List

from courtrotation.constants import SCORE_TOLERANCE
from courtrotation.exceptions import NoCandidateException
from courtrotation.pairing.candidates import Candidate
from courtrotation.pairing.scoring import ScoredCandidate
from courtrotation.utils import setup_logger

logger = setup_logger(__name__)


def tie_break_seed(day_seed: str, round_index: int) -> str:
    """Seed text for one round's draw, ``"<day_seed>:<round_index>"``."""
    return f"{day_seed}:{round_index}"


def tie_break_rng(day_seed: str, round_index: int) -> random.Random:
    """Fresh generator for the tie-break of round ``round_index`` on ``day_seed``."""
    return random.Random(tie_break_seed(day_seed, round_index))


def collect_ties(
    scored: Iterable[ScoredCandidate], tolerance: float = SCORE_TOLERANCE
) -> List[Candidate]:
    """All candidates whose score is within ``tolerance`` of the minimum.

    Candidates keep their enumeration order.
    """
    best = math.inf
    ties: List[Candidate] = []
    for score, candidate in scored:
        if score < best - tolerance:
            best = score
            ties = [candidate]
        elif abs(score - best) <= tolerance:
            ties.append(candidate)
    return ties


def select_candidate(
    scored: Iterable[ScoredCandidate], day_seed: str, round_index: int
) -> Candidate:
    """Choose one minimal-score candidate.

    Args:
        scored: (score, candidate) pairs that passed the constraint filter
        day_seed: Seed text for the session day
        round_index: Index of the round being generated

    Returns:
        The chosen candidate

    Raises:
        NoCandidateException: If ``scored`` is empty
    """
    ties = collect_ties(scored)
    if not ties:
        raise NoCandidateException(
            "Every grouping repeats the previous round; change the pool and try again"
        )

    index = tie_break_rng(day_seed, round_index).randrange(len(ties))
    logger.debug(
        f"Round {round_index + 1}: {len(ties)} tied candidates, drew #{index}"
    )
    return ties[index]
