import pytest

from courtrotation.controllers.round_generator import generate_round
from courtrotation.exceptions import InsufficientPlayersException
from courtrotation.models.participant import Participant
from courtrotation.models.session.state import SessionState
from courtrotation.models.weights import WeightConfig
from courtrotation.pairing.constraints import same_grouping


def _state(*participants, weights=None, day_seed="2025-10-15"):
    return SessionState(
        session_date="2025-10-15",
        day_seed=day_seed,
        participants=tuple(participants),
        weights=weights or WeightConfig(),
    )


def _players(*ids, **flags):
    return [Participant(id=pid, name=f"Player {pid}", **flags) for pid in ids]


def _clock(value):
    return lambda: value


def test_generate_commits_one_round_without_touching_input():
    state = _state(*_players("A", "B", "C", "D"))

    new_state, record = generate_round(state, _clock(1000))

    assert state.rounds == ()
    assert new_state.rounds == (record,)
    assert record.timestamp == 1000
    assert record.players == frozenset("ABCD")
    assert record.rest == frozenset()


def test_rest_is_pool_minus_placed_players():
    participants = _players("A", "B", "C", "D", "E", "F") + [
        Participant(id="G", name="G", selected=False),
        Participant(id="H", name="H", selected=False, away=True),
    ]
    state = _state(*participants)

    _, record = generate_round(state)

    assert record.rest == frozenset("ABCDEF") - record.players
    assert len(record.rest) == 2


def test_same_inputs_give_same_round():
    state = _state(*_players("A", "B", "C", "D", "E", "F", "G"))

    _, first = generate_round(state, _clock(1))
    _, second = generate_round(state, _clock(2))

    assert (first.team1, first.team2, first.rest) == (
        second.team1,
        second.team2,
        second.rest,
    )


def test_just_returned_cleared_only_for_placed_players():
    state = _state(*_players("A", "B", "C", "D", "E", just_returned=True))

    new_state, record = generate_round(state)

    for participant in new_state.participants:
        if participant.id in record.players:
            assert not participant.just_returned
        else:
            assert participant.just_returned


def test_insufficient_players_raises():
    state = _state(*_players("A", "B", "C"), *_players("D", selected=False))

    with pytest.raises(InsufficientPlayersException):
        generate_round(state)


def test_second_round_of_four_never_replays_the_first():
    state = _state(*_players("A", "B", "C", "D"))

    state, first = generate_round(state)
    state, second = generate_round(state)

    assert not same_grouping(second, first)
    assert len(state.rounds) == 2


def test_player_who_rested_plays_next_round():
    state = _state(*_players("A", "B", "C", "D", "E"))

    state, first = generate_round(state)
    (rested,) = first.rest
    state, second = generate_round(state)

    assert rested in second.players


def test_repeated_partners_are_avoided():
    state = _state(
        *_players("A", "B", "C", "D", "E", "F", "G", "H"),
        weights=WeightConfig(w_partner=5, w_opp=0, w_prev=0),
    )

    for _ in range(4):
        state, _ = generate_round(state)

    partner_keys = [r.team1.key for r in state.rounds] + [
        r.team2.key for r in state.rounds
    ]
    assert len(partner_keys) == len(set(partner_keys))
