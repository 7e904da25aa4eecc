from courtrotation.models.round_record import RoundRecord, TeamPair
from courtrotation.pairing.history import HistoryStats, build_stats, pair_key


def _round(team1, team2, rest=(), rid="r1"):
    return RoundRecord(
        id=rid,
        timestamp=0,
        team1=TeamPair(*team1),
        team2=TeamPair(*team2),
        rest=frozenset(rest),
    )


def test_pair_key_is_order_independent():
    assert pair_key("B", "A") == "A-B"
    assert pair_key("A", "B") == "A-B"
    assert pair_key(3, 1) == "1-3"


def test_single_round_counts():
    stats = build_stats([_round(("1", "2"), ("3", "4"))])

    assert stats.opponent_count == {"1-3": 1, "1-4": 1, "2-3": 1, "2-4": 1}
    assert stats.partner_count == {"1-2": 1, "3-4": 1}


def test_empty_history_has_no_keys():
    stats = build_stats([])

    assert stats.partner_count == {}
    assert stats.opponent_count == {}
    assert stats.partners("A", "B") == 0


def test_counts_accumulate_over_rounds():
    rounds = [
        _round(("A", "B"), ("C", "D"), rid="r1"),
        _round(("B", "A"), ("E", "C"), rest=("D",), rid="r2"),
        _round(("A", "C"), ("B", "D"), rest=("E",), rid="r3"),
    ]

    stats = build_stats(rounds)

    assert stats.partners("A", "B") == 2
    assert stats.partners("B", "A") == 2
    assert stats.partners("C", "D") == 1
    assert stats.partners("C", "E") == 1
    assert stats.opponents("A", "C") == 2
    assert stats.opponents("B", "D") == 1
    # A-B faced each other in round 3 only
    assert stats.opponents("A", "B") == 1


def test_build_stats_is_pure():
    rounds = [_round(("A", "B"), ("C", "D"))]

    first = build_stats(rounds)
    second = build_stats(rounds)

    assert first == second
    assert isinstance(first, HistoryStats)
    assert len(rounds) == 1
