import pytest

from courtrotation.models.participant import Participant
from courtrotation.models.round_record import RoundRecord, TeamPair
from courtrotation.pairing.candidates import Candidate, generate_candidates
from courtrotation.pairing.constraints import (
    canonical_grouping,
    filter_candidates,
    is_flip,
    same_grouping,
)


def _round(team1, team2, rest=()):
    return RoundRecord(
        id="prev",
        timestamp=0,
        team1=TeamPair(*team1),
        team2=TeamPair(*team2),
        rest=frozenset(rest),
    )


def _candidate(team1, team2, rest=()):
    return Candidate(TeamPair(*team1), TeamPair(*team2), frozenset(rest))


def test_canonical_grouping_sorts_members_and_teams():
    assert canonical_grouping(TeamPair("D", "C"), TeamPair("B", "A")) == (
        ("A", "B"),
        ("C", "D"),
    )


def test_swapped_rematch_is_rejected():
    previous = _round(("A", "B"), ("C", "D"))

    assert is_flip(_candidate(("C", "D"), ("A", "B")), previous)


def test_new_split_of_same_players_is_accepted():
    previous = _round(("A", "B"), ("C", "D"))

    assert not is_flip(_candidate(("A", "C"), ("B", "D")), previous)


def test_identical_repeat_is_rejected():
    previous = _round(("A", "B"), ("C", "D"))

    assert is_flip(_candidate(("B", "A"), ("D", "C")), previous)


def test_different_players_pass_even_with_shared_team():
    previous = _round(("A", "B"), ("C", "D"))

    assert not is_flip(_candidate(("C", "D"), ("A", "E")), previous)


def test_no_previous_round_accepts_everything():
    assert not is_flip(_candidate(("A", "B"), ("C", "D")), None)


def test_same_grouping_compares_candidate_with_round():
    previous = _round(("A", "B"), ("C", "D"))

    assert same_grouping(_candidate(("D", "C"), ("B", "A")), previous)
    assert not same_grouping(_candidate(("A", "D"), ("B", "C")), previous)


@pytest.mark.parametrize(
    "previous",
    [
        _round(("A", "B"), ("C", "D"), rest=("E", "F")),
        _round(("A", "E"), ("B", "F"), rest=("C", "D")),
        _round(("C", "F"), ("D", "E"), rest=("A", "B")),
    ],
)
def test_accepted_candidates_never_replay_previous_round(previous):
    roster = tuple(Participant(id=pid, name=pid) for pid in "ABCDEF")
    candidates = generate_candidates(roster, previous)

    survivors = filter_candidates(candidates, previous)

    assert len(survivors) == len(candidates) - 1
    for c in survivors:
        if c.players == previous.players:
            assert {c.team1, c.team2} != {previous.team1, previous.team2}
