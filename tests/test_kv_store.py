import yaml

from engine.storage.kv_store import MemoryStore, YamlKeyValueStore
from games.spark.const import HIGH_SCORE_KEY
from games.spark.scores import load_high_score, record_high_score


def test_yaml_store_round_trip(tmp_path):
    path = tmp_path / "cache" / "scores.yaml"
    store = YamlKeyValueStore(path)
    assert store.get("best") is None
    assert store.set("best", 1200)
    assert store.set("other", 3)
    assert store.get("best") == 1200
    assert yaml.safe_load(path.read_text()) == {"best": 1200, "other": 3}


def test_yaml_store_tolerates_garbage(tmp_path):
    path = tmp_path / "scores.yaml"
    path.write_text("best: [unclosed\n")
    store = YamlKeyValueStore(path)
    assert store.get("best") is None
    # a write replaces the unreadable file
    assert store.set("best", 10)
    assert store.get("best") == 10


def test_yaml_store_rejects_non_integer_values(tmp_path):
    path = tmp_path / "scores.yaml"
    path.write_text("best: lots\nflag: true\nlist_file: 1\n")
    store = YamlKeyValueStore(path)
    assert store.get("best") is None
    assert store.get("flag") is None
    assert store.get("list_file") == 1


def test_yaml_store_write_failure_is_swallowed(tmp_path, caplog):
    blocker = tmp_path / "file"
    blocker.write_text("")
    store = YamlKeyValueStore(blocker / "scores.yaml")
    assert store.set("best", 5) is False
    assert "could not write" in caplog.text


def test_high_score_defaults_to_zero():
    assert load_high_score(MemoryStore()) == 0
    assert load_high_score(MemoryStore({HIGH_SCORE_KEY: -4})) == 0


def test_record_high_score_only_on_strict_improvement():
    store = MemoryStore({HIGH_SCORE_KEY: 700})
    assert record_high_score(store, 700) == 700
    assert record_high_score(store, 650) == 700
    assert store.get(HIGH_SCORE_KEY) == 700
    assert record_high_score(store, 701) == 701
    assert store.get(HIGH_SCORE_KEY) == 701


def test_yaml_store_tolerates_undecodable_file(tmp_path, caplog):
    path = tmp_path / "scores.yaml"
    path.write_bytes(b"\x80\x81\x82")
    store = YamlKeyValueStore(path)
    assert store.get(HIGH_SCORE_KEY) is None
    assert "could not read" in caplog.text
    assert load_high_score(store) == 0
    # a write replaces the undecodable file
    assert store.set(HIGH_SCORE_KEY, 40)
    assert store.get(HIGH_SCORE_KEY) == 40


def test_yaml_store_rejects_non_finite_values(tmp_path):
    path = tmp_path / "scores.yaml"
    path.write_text(f"{HIGH_SCORE_KEY}: .inf\nlow: -.inf\nmissing: .nan\n")
    store = YamlKeyValueStore(path)
    assert store.get(HIGH_SCORE_KEY) is None
    assert store.get("low") is None
    assert store.get("missing") is None
    assert record_high_score(store, 90) == 90
    assert store.get(HIGH_SCORE_KEY) == 90
