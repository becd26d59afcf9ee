"""
Tests for high score stores.
"""

import json

import pytest

from aps.highscore import (
    DEFAULT_STORAGE_KEY,
    JsonHighScoreStore,
    MemoryHighScoreStore,
    get_data_dir,
)


class TestMemoryStore:

    def test_defaults_to_zero(self):
        assert MemoryHighScoreStore().load() == 0

    def test_save_and_reset(self):
        store = MemoryHighScoreStore(initial=20)
        store.save(25)
        assert store.load() == 25
        assert store.writes == 1
        store.reset()
        assert store.load() == 0

    def test_default_key(self):
        assert MemoryHighScoreStore().key == "archerypop_highscore"
        assert DEFAULT_STORAGE_KEY == "archerypop_highscore"


class TestJsonStore:

    @pytest.fixture
    def path(self, tmp_path):
        return tmp_path / "scores" / "highscores.json"

    def test_missing_file_reads_zero(self, path):
        assert JsonHighScoreStore(path).load() == 0

    def test_save_creates_file(self, path):
        JsonHighScoreStore(path).save(25)
        assert json.loads(path.read_text()) == {"archerypop_highscore": 25}

    def test_persists_across_instances(self, path):
        JsonHighScoreStore(path).save(40)
        assert JsonHighScoreStore(path).load() == 40

    def test_keys_share_file(self, path):
        JsonHighScoreStore(path).save(40)
        other = JsonHighScoreStore(path, key="other")
        other.save(7)
        assert JsonHighScoreStore(path).load() == 40
        assert other.load() == 7

    def test_reset_removes_key(self, path):
        store = JsonHighScoreStore(path)
        store.save(40)
        store.reset()
        assert store.load() == 0
        assert "archerypop_highscore" not in json.loads(path.read_text())

    def test_corrupt_file_reads_zero(self, path):
        path.parent.mkdir(parents=True)
        path.write_text("{not json")
        store = JsonHighScoreStore(path)
        assert store.load() == 0
        store.save(5)
        assert store.load() == 5

    def test_non_object_file_reads_zero(self, path):
        path.parent.mkdir(parents=True)
        path.write_text("[1, 2, 3]")
        assert JsonHighScoreStore(path).load() == 0

    def test_non_numeric_value_reads_zero(self, path):
        path.parent.mkdir(parents=True)
        path.write_text(json.dumps({"archerypop_highscore": "lots"}))
        assert JsonHighScoreStore(path).load() == 0

    def test_default_path_uses_data_dir(self, tmp_path, monkeypatch):
        monkeypatch.setenv('APS_DATA_DIR', str(tmp_path))
        assert get_data_dir() == tmp_path
        assert JsonHighScoreStore().path == tmp_path / "highscores.json"
