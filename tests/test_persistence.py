import json

import pytest

from game.persistence import (
    SAVE_FORMAT,
    SAVE_VERSION,
    SaveFormatError,
    Snapshot,
    load_game_state,
    save_game_state,
    snapshot_from_record,
    snapshot_to_record,
)
from game.state import GameState


def valid_record(**overrides):
    record = {
        "format": SAVE_FORMAT,
        "version": SAVE_VERSION,
        "character": [120, 40, 64, 64],
        "score": 2,
        "power_ups": [[10, 20], [30, 40]],
    }
    record.update(overrides)
    return record


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")


def test_round_trip_preserves_fields_and_order(tmp_path):
    path = str(tmp_path / "game.sav")
    state = GameState(position=(448, 0), score=7, power_ups=[(300, 5), (1, 2), (300, 5), (44, 400)])
    assert save_game_state(state, path)

    snapshot = load_game_state(path)
    assert snapshot == Snapshot((448, 0), 7, [(300, 5), (1, 2), (300, 5), (44, 400)])

    fresh = GameState(power_ups=[(9, 9)])
    snapshot.apply_to(fresh)
    assert fresh.position == state.position
    assert fresh.score == state.score
    assert fresh.power_ups == state.power_ups


def test_record_is_tagged_and_versioned(tmp_path):
    path = tmp_path / "game.sav"
    save_game_state(GameState(position=(12, 34), score=1, power_ups=[(5, 6)]), str(path))
    record = json.loads(path.read_text(encoding="utf-8"))
    assert record == {
        "format": SAVE_FORMAT,
        "version": SAVE_VERSION,
        "character": [12, 34, 64, 64],
        "score": 1,
        "power_ups": [[5, 6]],
    }


def test_missing_file_returns_none(tmp_path):
    assert load_game_state(str(tmp_path / "absent.sav")) is None


def test_corrupt_file_is_discarded(tmp_path, capsys):
    path = tmp_path / "game.sav"
    path.write_bytes(b"\xac\xed\x00\x05sr\x00\x12java.awt.Rectangle")
    assert load_game_state(str(path)) is None
    assert "[Persistence] Ignoring saved state" in capsys.readouterr().out


def test_truncated_json_is_discarded(tmp_path):
    path = tmp_path / "game.sav"
    path.write_text('{"format": "sprite-animation-game/save", "vers', encoding="utf-8")
    assert load_game_state(str(path)) is None


@pytest.mark.parametrize(
    "overrides",
    [
        {"format": "something-else"},
        {"version": 2},
        {"version": "1"},
        {"character": [1, 2, 64]},
        {"character": [1, 2, 32, 32]},
        {"character": [449, 0, 64, 64]},
        {"character": [-1, 0, 64, 64]},
        {"character": [1.5, 0, 64, 64]},
        {"score": -1},
        {"score": True},
        {"score": "3"},
        {"power_ups": {"x": 1}},
        {"power_ups": [[1, 2, 3]]},
        {"power_ups": [["a", 2]]},
        {"power_ups": [[-1, 2]]},
        {"power_ups": [[10, 449]]},
    ],
)
def test_invalid_records_are_rejected(overrides):
    with pytest.raises(SaveFormatError):
        snapshot_from_record(valid_record(**overrides))


def test_non_object_record_is_rejected():
    with pytest.raises(SaveFormatError):
        snapshot_from_record([1, 2, 3])


@pytest.mark.parametrize("field", ["character", "score", "power_ups"])
def test_missing_field_is_discarded_on_load(tmp_path, field):
    record = valid_record()
    del record[field]
    path = tmp_path / "game.sav"
    write_json(path, record)
    assert load_game_state(str(path)) is None


def test_valid_record_loads(tmp_path):
    path = tmp_path / "game.sav"
    write_json(path, valid_record())
    assert load_game_state(str(path)) == Snapshot((120, 40), 2, [(10, 20), (30, 40)])


def test_record_helpers_agree():
    snapshot = Snapshot((3, 4), 5, [(6, 7)])
    assert snapshot_from_record(snapshot_to_record(snapshot)) == snapshot


def test_save_failure_is_reported_not_raised(tmp_path, capsys):
    path = str(tmp_path / "missing-dir" / "game.sav")
    assert save_game_state(GameState(), path) is False
    assert "[Persistence] Failed to save" in capsys.readouterr().out


def test_deeply_nested_file_is_discarded(tmp_path):
    path = tmp_path / "game.sav"
    path.write_text("[" * 100000 + "]" * 100000, encoding="utf-8")
    assert load_game_state(str(path)) is None


def test_deeply_nested_field_is_discarded(tmp_path):
    path = tmp_path / "game.sav"
    nested = "[" * 50000 + "]" * 50000
    text = json.dumps(valid_record(power_ups=[])).replace('"power_ups": []', f'"power_ups": {nested}')
    path.write_text(text, encoding="utf-8")
    assert load_game_state(str(path)) is None


def test_failed_replace_leaves_no_temp_file(tmp_path):
    # The target is a directory, so the final rename fails after the temp write
    target = tmp_path / "game.sav"
    target.mkdir()
    assert save_game_state(GameState(), str(target)) is False
    assert not (tmp_path / "game.sav.tmp").exists()
