from itertools import combinations

import pytest

from courtrotation.constants import MAX_QUADS
from courtrotation.exceptions import InsufficientPlayersException
from courtrotation.models.participant import Participant
from courtrotation.models.round_record import RoundRecord, TeamPair
from courtrotation.pairing.candidates import (
    eligible_pool,
    enumerate_quads,
    generate_candidates,
    order_pool,
    team_partitions,
)


def _players(*ids):
    return tuple(Participant(id=pid, name=f"Name {pid}") for pid in ids)


def _round(team1, team2, rest=()):
    return RoundRecord(
        id="prev",
        timestamp=0,
        team1=TeamPair(*team1),
        team2=TeamPair(*team2),
        rest=frozenset(rest),
    )


def test_eligible_pool_skips_unselected_and_away():
    roster = (
        Participant(id="A", name="A"),
        Participant(id="B", name="B", selected=False),
        Participant(id="C", name="C", selected=False, away=True),
        Participant(id="D", name="D"),
    )

    assert [p.id for p in eligible_pool(roster)] == ["A", "D"]


def test_order_pool_puts_returned_first_and_rested_last():
    roster = (
        Participant(id="P6", name="6"),
        Participant(id="P5", name="5", just_returned=True),
        Participant(id="P4", name="4"),
        Participant(id="P3", name="3", just_returned=True),
        Participant(id="P2", name="2"),
        Participant(id="P1", name="1"),
    )
    previous = _round(("P1", "P4"), ("P5", "P6"), rest=("P2", "P3"))

    ordered = order_pool(roster, previous)

    assert [p.id for p in ordered] == ["P3", "P5", "P1", "P4", "P6", "P2"]


def test_order_pool_without_previous_round_sorts_by_id():
    roster = _players("D", "B", "A", "C")

    assert [p.id for p in order_pool(roster)] == ["A", "B", "C", "D"]


def test_team_partitions_are_the_three_splits():
    assert team_partitions(("A", "B", "C", "D")) == [
        (TeamPair("A", "B"), TeamPair("C", "D")),
        (TeamPair("A", "C"), TeamPair("B", "D")),
        (TeamPair("A", "D"), TeamPair("B", "C")),
    ]


def test_four_players_give_three_candidates_with_nobody_resting():
    candidates = generate_candidates(_players("A", "B", "C", "D"))

    assert len(candidates) == 3
    assert all(c.rest == frozenset() for c in candidates)
    assert all(c.players == frozenset("ABCD") for c in candidates)
    assert len({(c.team1, c.team2) for c in candidates}) == 3


def test_five_players_enumerate_every_quad():
    candidates = generate_candidates(_players("A", "B", "C", "D", "E"))

    assert len(candidates) == 5 * 3
    for c in candidates:
        assert len(c.rest) == 1
        assert c.rest | c.players == frozenset("ABCDE")


def test_enumeration_is_capped():
    ids = [f"P{i:02d}" for i in range(12)]
    assert len(list(combinations(ids, 4))) > MAX_QUADS

    quads = enumerate_quads(ids)
    candidates = generate_candidates(_players(*ids))

    assert len(quads) == MAX_QUADS
    assert quads[0] == ("P00", "P01", "P02", "P03")
    assert len(candidates) == MAX_QUADS * 3


def test_fewer_than_four_eligible_raises():
    roster = _players("A", "B", "C") + (
        Participant(id="D", name="D", selected=False),
    )

    with pytest.raises(InsufficientPlayersException) as excinfo:
        generate_candidates(roster)

    assert excinfo.value.available == 3


def test_candidates_only_use_eligible_participants():
    roster = _players("A", "B", "C", "D") + (
        Participant(id="E", name="E", selected=False, away=True),
    )

    candidates = generate_candidates(roster)

    assert all("E" not in c.players and "E" not in c.rest for c in candidates)
