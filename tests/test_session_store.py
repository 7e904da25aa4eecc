import json
import logging

import pytest

from courtrotation.cli import main
from courtrotation.models.session.session import Session
from courtrotation.storage import SessionStore


def _session(session_date="2025-10-15"):
    return Session.new(session_date=session_date, clock=lambda: 1_760_000_000_000)


def _write(store, session_date, data):
    path = store.path_for(session_date)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(data if isinstance(data, str) else json.dumps(data), encoding="utf-8")
    return path


def test_save_and_load_round_trip(tmp_path):
    store = SessionStore(tmp_path)
    session = _session()
    session.add_guest("Tanaka", honorific=True)
    session.generate_round()
    session.set_w_opp(4)

    path = store.save(session)
    loaded = store.load("2025-10-15")

    assert path.name == "session-2025-10-15.json"
    assert loaded.state == session.state
    assert len(loaded.undo_stack) == len(session.undo_stack)
    assert "Tanakaさん" in path.read_text(encoding="utf-8")


def test_loaded_undo_history_still_works(tmp_path):
    store = SessionStore(tmp_path)
    session = _session()
    session.generate_round()
    store.save(session)

    loaded = store.load("2025-10-15")
    loaded.undo()

    assert loaded.rounds == ()


def test_missing_file_loads_as_none(tmp_path):
    assert SessionStore(tmp_path / "nowhere").load("2025-10-15") is None


def test_malformed_json_is_ignored(tmp_path, caplog):
    store = SessionStore(tmp_path)
    _write(store, "2025-10-15", "{not json")

    with caplog.at_level(logging.WARNING, logger="courtrotation"):
        assert store.load("2025-10-15") is None

    assert "unreadable" in caplog.text


def test_missing_fields_are_ignored(tmp_path, caplog):
    store = SessionStore(tmp_path)
    _write(store, "2025-10-15", {"session_date": "2025-10-15", "rounds": "oops"})

    with caplog.at_level(logging.WARNING, logger="courtrotation"):
        assert store.load("2025-10-15") is None

    assert "malformed" in caplog.text


def test_round_with_repeated_player_is_ignored(tmp_path):
    store = SessionStore(tmp_path)
    data = _session().to_dict()
    data["rounds"] = [
        {
            "id": "r1",
            "timestamp": 0,
            "team1": ["P1", "P1"],
            "team2": ["P3", "P4"],
            "rest": [],
        }
    ]
    _write(store, "2025-10-15", data)

    assert store.load("2025-10-15") is None


def test_load_or_create_falls_back_to_default_roster(tmp_path):
    store = SessionStore(tmp_path)
    _write(store, "2025-10-15", "[]")

    session = store.load_or_create("2025-10-15", day_seed="club")

    assert len(session.participants) == 8
    assert session.rounds == ()
    assert session.day_seed == "club"


def test_file_for_another_day_is_ignored(tmp_path):
    store = SessionStore(tmp_path)
    _write(store, "2025-10-15", _session("2025-10-14").to_dict())

    assert store.load("2025-10-15") is None


def test_path_for_normalizes_date(tmp_path):
    store = SessionStore(tmp_path)

    assert store.path_for("2025-10-15T07:00:00") == tmp_path / "session-2025-10-15.json"


def test_saved_dates_and_delete(tmp_path):
    store = SessionStore(tmp_path)
    store.save(_session("2025-10-16"))
    store.save(_session("2025-10-15"))

    assert store.saved_dates() == ["2025-10-15", "2025-10-16"]
    assert store.delete("2025-10-15")
    assert not store.delete("2025-10-15")
    assert store.saved_dates() == ["2025-10-16"]


def _valid_round(**changes):
    record = {
        "id": "r1",
        "timestamp": 0,
        "team1": ["P1", "P2"],
        "team2": ["P3", "P4"],
        "rest": [],
    }
    record.update(changes)
    return record


def _with(**changes):
    data = _session().to_dict()
    data.update(changes)
    return data


def _duplicate_roster():
    return [{"id": pid, "name": pid} for pid in ("P1", "P1", "P2", "P3", "P4")]


@pytest.mark.parametrize(
    "data",
    [
        _with(weights=[]),
        _with(participants=[1, 2]),
        _with(participants={"P1": "Player 1"}),
        _with(rounds=[1]),
        _with(rounds={"r1": _valid_round()}),
        _with(rounds=[_valid_round(team1="P1P2")]),
        _with(rounds=[_valid_round(rest="P5")]),
        _with(rounds=[_valid_round(timestamp=10**20)]),
        _with(rounds=[_valid_round(timestamp=-1)]),
        _with(undo_history=[1]),
        _with(undo_history={"rounds": []}),
        _with(undo_history=[{"weights": "heavy"}]),
        _with(participants=_duplicate_roster()),
        _with(undo_history=[{"participants": _duplicate_roster()}]),
    ],
    ids=[
        "weights-list",
        "participant-numbers",
        "participants-object",
        "round-number",
        "rounds-object",
        "team-string",
        "rest-string",
        "timestamp-too-large",
        "timestamp-negative",
        "snapshot-number",
        "undo-history-object",
        "snapshot-weights-string",
        "duplicate-participant-ids",
        "snapshot-duplicate-ids",
    ],
)
def test_wrongly_shaped_file_loads_as_nothing(tmp_path, caplog, data):
    store = SessionStore(tmp_path)
    _write(store, "2025-10-15", data)

    with caplog.at_level(logging.WARNING, logger="courtrotation"):
        assert store.load("2025-10-15") is None

    assert "malformed" in caplog.text
    assert len(store.load_or_create("2025-10-15").participants) == 8


def test_cli_recovers_from_wrongly_shaped_file(tmp_path, capsys):
    _write(SessionStore(tmp_path), "2025-10-15", _with(weights=[]))

    assert main(["--data-dir", str(tmp_path), "--date", "2025-10-15", "show"]) == 0
    assert "Player 8" in capsys.readouterr().out
