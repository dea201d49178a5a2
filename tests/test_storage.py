import json

from flappy_remix.game.settings import Settings, difficulty_profile
from flappy_remix.game.storage import JsonFileStorage, MemoryStorage, PersistentStats


def test_defaults(storage):
    assert storage.get_settings() == Settings()
    assert storage.get_stats() == PersistentStats()
    assert storage.get_daily() == {"date_key": "2024-03-01", "missions": None}


def test_settings_merge_and_sanitize(storage):
    storage.set_settings(difficulty="hard", input_mode="hold")
    storage.set_settings(sound=False, difficulty="nightmare", bogus=1)
    s = storage.get_settings()
    assert s.difficulty == "normal"
    assert s.input_mode == "hold"
    assert not s.sound
    assert s.hold_mode


def test_difficulty_fallback():
    assert difficulty_profile("unknown") == difficulty_profile("normal")
    assert difficulty_profile(None).gap_mul == 1.0
    assert difficulty_profile("soft").gap_mul == 1.08


def test_daily_rolls_over(storage, clock):
    storage.set_daily(missions=["score10", "perfect3"])
    assert storage.get_daily()["missions"] == ["score10", "perfect3"]
    clock.advance()
    assert storage.get_daily() == {"date_key": "2024-03-02", "missions": None}


def test_get_daily_returns_a_copy(storage):
    storage.set_daily(missions=["score10", "perfect3"])
    storage.get_daily()["missions"].append("x")
    assert storage.get_daily()["missions"] == ["score10", "perfect3"]


def test_reset_all(storage):
    storage.set_stats(PersistentStats(best=3, runs=1))
    storage.set_settings(sound=False)
    storage.reset_all()
    assert storage.get_stats() == PersistentStats()
    assert storage.get_settings() == Settings()


def test_json_roundtrip(tmp_path, clock):
    path = str(tmp_path / "save.json")
    st = JsonFileStorage(path, today=clock)
    st.set_stats(PersistentStats(best=7, runs=2, total_score=9, coins=11, best_streak=7))
    st.set_settings(difficulty="soft")

    again = JsonFileStorage(path, today=clock)
    assert again.get_stats().coins == 11
    assert again.get_settings().difficulty == "soft"


def test_corrupt_file_falls_back_to_defaults(tmp_path, clock, caplog):
    path = tmp_path / "save.json"
    path.write_text("{not json", encoding="utf-8")

    st = JsonFileStorage(str(path), today=clock)

    assert st.get_stats() == PersistentStats()
    assert "using defaults" in caplog.text
    # and the file was rewritten with valid content
    assert json.loads(path.read_text(encoding="utf-8"))["stats"]["runs"] == 0


def test_partially_corrupt_sections(tmp_path, clock):
    path = tmp_path / "save.json"
    path.write_text(json.dumps({"stats": {"best": "lots", "runs": 4}, "settings": []}), encoding="utf-8")
    st = JsonFileStorage(str(path), today=clock)
    assert st.get_stats() == PersistentStats(runs=4)
    assert st.get_settings() == Settings()


def test_unwritable_path_keeps_state_in_memory(tmp_path, clock):
    path = str(tmp_path / "missing_dir" / "save.json")
    st = JsonFileStorage(path, today=clock)
    st.set_stats(PersistentStats(best=5))
    assert st.get_stats().best == 5


def test_memory_storage_default_clock():
    assert len(MemoryStorage().get_daily()["date_key"]) == 10


def test_non_string_enum_values_fall_back():
    s = Settings.from_dict({"difficulty": ["hard"], "input_mode": {"hold": 1}})
    assert s.difficulty == "normal"
    assert s.input_mode == "tap"
    assert difficulty_profile(["hard"]) == difficulty_profile("normal")


def test_non_finite_stats_fall_back(tmp_path, clock):
    path = tmp_path / "save.json"
    # json.dumps writes Infinity/NaN literals, json.load reads them back
    path.write_text(json.dumps({"stats": {"best": float("inf"), "runs": float("nan"), "coins": 3}}),
                    encoding="utf-8")
    st = JsonFileStorage(str(path), today=clock)
    assert st.get_stats() == PersistentStats(coins=3)


def test_list_difficulty_in_save_file(tmp_path, clock):
    path = tmp_path / "save.json"
    path.write_text('{"settings": {"difficulty": ["hard"], "sound": false}}', encoding="utf-8")
    st = JsonFileStorage(str(path), today=clock)
    assert st.get_settings().difficulty == "normal"
    assert not st.get_settings().sound
